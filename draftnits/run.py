# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import argparse
import logging
import sys

from importlib import metadata

import draftnits
import draftnits.checks
import draftnits.parser

from draftnits.utils import wrap

log = logging.getLogger('draftnits')

# ----------------------------------------------------------------------

def show_version(verbose=False):
    # Show version information, then exit
    print('%s %s' % (draftnits.NAME, draftnits.__version__))
    if verbose:
        try:
            requires = metadata.requires(draftnits.NAME) or []
        except metadata.PackageNotFoundError:
            requires = []
        for req in requires:
            name = req.split(';')[0].split('[')[0].strip(' <>=!~')
            try:
                print('  %s %s' % (name, metadata.version(name)))
            except metadata.PackageNotFoundError:
                print('  %s (not installed)' % name)

def die(*args):
    sys.stderr.write('Error: ' + ' '.join(args))
    sys.stderr.write('\n')
    sys.exit(1)

def setup_logging(debug=False):
    formatter = logging.Formatter('{levelname}: {name}:{lineno}: {message}', style='{')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    if not log.hasHandlers():
        log.addHandler(handler)
    log.setLevel(logging.DEBUG if debug else logging.WARNING)

def commalist(value):
    return [ s.strip() for s in value.split(',') ]

def report(filename, items, verbose=False, out=None):
    "Write the nits found for one document; returns the number of error items"
    out = out or sys.stdout
    severities = ['err', 'warn', 'comm']
    longform = dict(err='error', warn='warning', comm='comment')
    for s in severities:
        found = items[s]
        if found:
            count = len(found)
            out.write("\n%s%s:\n\n" % (longform[s].capitalize(), '' if count==1 else 's'))
            for nits, msg in found:
                assert msg.endswith('.') is False
                out.write(wrap("   %s" % (msg, )))
                if verbose:
                    out.write(':\n\n')
                    for item in nits:
                        if item.num:
                            out.write("%s(%s): %s\n" % (filename, item.num, item.msg))
                        else:
                            out.write("%s: %s\n" % (filename, item.msg))
                    out.write('\n')
                else:
                    out.write('.\n')
    summary = []
    for s in severities:
        count = len(items[s])
        summary.append("%s %s%s" % (count, longform[s], '' if count==1 else 's'))
    out.write("\nFound %s.\n\n"  % ', '.join(summary))
    return len(items['err'])

def check_file(filename, options):
    "Parse and check one document, and return the nits found, by severity"
    items = dict(err=[], warn=[], comm=[])
    try:
        doc = draftnits.parser.parse(filename, options)
    except draftnits.parser.ParseError as e:
        items['err'].append(([draftnits.checks.Nit(e.lineno, e.msg)],
            "Found a parse error while processing file.  No checks were run"))
        return items
    except LookupError as e:
        items['err'].append(([draftnits.checks.Nit(None, str(e))], "Could not read the file.  No checks were run"))
        return items
    checker = draftnits.checks.Checker(doc, options)
    result = checker.check()
    for s in items:
        items[s] += result[s]
    return items

def main():
    # Populate options
    argparser = argparse.ArgumentParser(description=draftnits.DESCRIPTION.split('\n')[0])
    argparser.add_argument('docs', metavar='DOC', nargs='*', help="document to check")

    argparser.add_argument('-d', '--debug', action='store_true', help="show debug information")
    argparser.add_argument('-m', '--mode', choices=['normal', 'lenient', 'submission',], default='normal',
        help="the mode to run in, default=%(default)s ")
    argparser.add_argument('--trace-all', action='store_true', help="trace all methods; needs --debug")
    argparser.add_argument('--trace-methods', type=commalist, metavar='METHODS', default=[],
        help="a comma-separated list of methods to trace; needs --debug")
    argparser.add_argument('-v', '--verbose', action='store_true', help="be more verbose")
    argparser.add_argument('-V', '--version', action='store_true', help="show version information, then exit")

    args = argparser.parse_args()
    for o in vars(args):
        assert hasattr(draftnits.default_options, o), "Internal error: Missing a default option value for '%s'"%o
    options = draftnits.Options(**dict(vars(draftnits.default_options), **vars(args)))

    setup_logging(options.debug)

    if options.version:
        show_version(verbose=options.verbose)
        sys.exit(0)

    if not options.docs:
        die("No documents given; see --help")

    errors = 0
    for filename in options.docs:
        sys.stdout.write("Inspecting file %s\n" % filename)
        items = check_file(filename, options)
        errors += report(filename, items, verbose=options.verbose)

    sys.exit(1 if errors else 0)

if __name__ == '__main__':
    main()
