# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import logging
import re
import shutil
import textwrap

from collections import namedtuple
from decorator import decorator


log = logging.getLogger(__name__)

Line = namedtuple('Line', ['num', 'txt'])

# Number of spaces to indent trace output; a list so that nested calls
# can adjust it by reference
_trace_indent = [4]

def normalize_space(text):
    "Collapse all whitespace runs, including newlines and form feeds, to single spaces"
    return re.sub(r'\s+', ' ', text).strip()

def plural(l):
    n = len(l)
    return n, ('' if n==1 else 's')

def wrap(s, w=120, i=None):
    termsize = shutil.get_terminal_size((80, 24))
    cols = min(w, max(termsize.columns, 60))

    lines = s.split('\n')
    wrapped = []
    # Preserve any indentation (after the general indentation)
    for line in lines:
        prev_indent = ' '*(i or 4)
        indent_match = re.search(r'^(\W+)', line)
        # Change the existing wrap indentation to the original one
        if (indent_match and not i):
            prev_indent = indent_match.group(0)
        wrapped.append(textwrap.fill(line, width=cols, subsequent_indent=prev_indent))
    return '\n'.join(wrapped)

def dtrace(fn):
    """
    Decorator to log information about a call for use while debugging.
    Logs the function name, arguments, and call number when the function
    is called, and again along with the return value when it returns.

    Tracing is only done if the first argument carries an ``options``
    attribute with ``debug`` set, and the function is either listed in
    ``options.trace_methods`` or ``options.trace_all`` is set.
    """
    def fix(s, n=64):
        s = re.sub(r'\\t', ' ', s)
        s = re.sub(r'\s+', ' ', s)
        if len(s) > n+3:
            s = s[:n]+"..."
        return s
    def wrap(fn, *params, **kwargs):
        call = wrap.callcount = wrap.callcount + 1
        options = getattr(params[0], 'options', None) if params else None
        if options and options.debug and (options.trace_all or fn.__name__ in options.trace_methods):
            indent = ' ' * _trace_indent[0]
            fc = "%s(%s)" % (fn.__name__, ', '.join(
                [fix(repr(a)) for a in params[1:]] +
                ["%s = %s" % (a, fix(repr(b))) for a,b in kwargs.items()]
            ))
            log.debug("%s* %s [#%s]", indent, fc, call)
            _trace_indent[0] += 2
            try:
                ret = fn(*params, **kwargs)
            finally:
                _trace_indent[0] -= 2
            log.debug("%s  %s [#%s] ==> %s", indent, fc, call, fix(repr(ret)))
        else:
            ret = fn(*params, **kwargs)
        return ret
    wrap.callcount = 0
    return decorator(wrap, fn)
