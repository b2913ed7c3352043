# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import logging
import os
import re

from collections import namedtuple

from draftnits import default_options
from draftnits.extract import (is_valid_ipv4, is_valid_ipv6, is_documentation_ipv4, is_documentation_ipv6,
    is_reserved_domain, is_numeric_domain)
from draftnits.header import extract_status_name
from draftnits.sections import SUBSECTION_RE, match_subsection
from draftnits.utils import normalize_space, plural


log = logging.getLogger(__name__)

Check = namedtuple('Check', [ 'fmt', 'type', 'norm', 'easy', 'subm', 'func', ])
Nit   = namedtuple('Nit',   [ 'num', 'msg', ])

MAX_LINE_LENGTH = 72
MAX_FILENAME_LENGTH = 50
MAX_DATE_OFFSET = 3             # days

# Domains which may appear in any document
ALLOWED_DOMAINS = [ 'ietf.org', 'rfc-editor.org', 'iana.org', ]

ABSTRACT_REFERENCE_PATTERNS = [
    (re.compile(r'\[RFC\d+\]', re.I),                                  "a citation of an RFC"),
    (re.compile(r'https?://[^\s]+|www\.[^\s]+', re.I),                 "a URL"),
    (re.compile(r'\bSection\s\d+(\.\d+)?\b|\bAppendix\s\w+\b', re.I),  "a reference to a section or appendix"),
    (re.compile(r'\[I-D\.[^\]]+\]', re.I),                             "a citation of an Internet-Draft"),
    (re.compile(r'\[[A-Za-z0-9-]+\]', re.I),                           "a citation"),
]

# Statements in running text; the colon of the header form is optional here
ABSTRACT_OBSOLETES_RE = re.compile(r'(?:obsoletes|replaces)\s*:?\s*((?:rfc\s*)?[0-9]+(?:,|\s|and)*\s*)+', re.I)
ABSTRACT_UPDATES_RE = re.compile(r'updates\s*:?\s*((?:rfc\s*)?[0-9]+(?:,|\s|and)*\s*)+', re.I)
RFC_NUMBER_RE = re.compile(r'\b(?:RFC\s*)?([0-9]+)\b', re.I)

ADDRESS_TITLE_RE = re.compile(
    r'^(?:[0-9.]+\s+)?(?P<who>Author|Editor)(?P<plural>s?)(?P<mark>[‘’‛\'`"]?)(?P<s>s?)\s+Address(?:es)?$', re.I)
FILENAME_BASE_RE = re.compile(r'^[a-z0-9-]+$')

# (misspellings, preferred spelling); a plural of the preferred spelling is fine
TERM_SPELLINGS = [
    (re.compile(r'\be-mail\b', re.I),                 'email'),
    (re.compile(r'\binternet[- ]drafts?\b', re.I),    'Internet-Draft'),
    (re.compile(r'\bipsec\b', re.I),                  'IPsec'),
    (re.compile(r'\bsub-domains?\b', re.I),           'subdomain'),
]


def nit(nits, num, s):
    nits.append(Nit(num, s))

def mentioned_rfcs(text, regex):
    numbers = []
    for match in regex.finditer(text):
        for num in RFC_NUMBER_RE.findall(match.group(0)):
            if not num in numbers:
                numbers.append(num)
    return numbers

def plain_rfc_number(text):
    return re.sub(r'(?i)^RFC\s*', '', text.strip())

class Checker(object):

    def __init__(self, doc, options=default_options):
        self.doc = doc
        self.data = doc.data
        self.options = options
        self.nits = dict(err=[], warn=[], comm=[])

    def get_checks(self):
        checks = self.checks
        fmt = self.doc.type if self.doc.type in ['txt', ] else None
        if fmt is None:
            self.nits['err'].append(([Nit(None,"Found input type %s" % self.doc.type)], "Input type text is required"))
            return []
        checks = [ c for c in checks if c.fmt in ['any', fmt] ]
        type = 'rfc' if self.doc.kind == 'rfc' or (self.doc.name or '').startswith('rfc') else 'ids'
        checks = [ c for c in checks if c.type in ['any', type] ]
        if   self.options.mode == 'normal':
            checks = [ c for c in checks if c.norm != 'none' ]
        elif self.options.mode == 'lenient':
            checks = [ c for c in checks if c.easy != 'none' ]
        elif self.options.mode == 'submission':
            checks = [ c for c in checks if c.subm != 'none' ]
        else:
            raise RuntimeError("Internal error: Unexpected mode: %s" % self.options.mode)
        return checks

    def check(self):
        mode = self.options.mode
        for check in self.get_checks():
            severity = check.norm if mode == 'normal' else check.easy if mode == 'lenient' else check.subm
            res = check.func(self)
            assert len(res) == 2
            nits, msg = res
            log.debug("%s: %s nit%s", check.func.__name__, *plural(nits))
            if nits:
                self.nits[severity].append((nits, msg))
        return self.nits

    # ------------------------------------------------------------------
    # Helpers

    def section_lines(self, tag):
        "The non-blank Lines of a section, title line included"
        marker = self.data.markers[tag]
        if not marker.found:
            return []
        end = marker.end if marker.end is not None else len(self.doc.lines)
        return [ l for l in self.doc.lines[marker.start-1:end] if l.txt.strip() ]

    def section_is_empty(self, tag):
        # The captured content starts with the title line
        content = self.data.sections[tag]
        return not content or len(content) < 2

    def find_line(self, text):
        "Line number of the first line containing text, or None"
        for l in self.doc.lines:
            if text in l.txt:
                return l.num
        return None

    def body_keywords(self):
        "Keyword uses, except the quoted ones of the boilerplate itself"
        lines = self.doc.lines
        found = []
        for kw in self.data.extracted.keywords_2119:
            txt = lines[kw.line-1].txt if 0 < kw.line <= len(lines) else ''
            if not re.search(r'"%s\b' % re.escape(kw.keyword.split()[0]), txt):
                found.append(kw)
        return found

    def has_boilerplate(self):
        bp = self.data.boilerplate
        return bp.rfc2119 or bp.rfc8174

    # ------------------------------------------------------------------
    # Sections

    def any_document_structure_bad(self):
        # Header or title can't be found, so the section checks have little to go on
        nits = []
        markers = self.data.markers
        if not markers['header'].found:
            nit(nits, None, "Expected a first-page header, but found none")
        elif not markers['title'].found:
            nit(nits, markers['header'].start, "Found no title after the first-page header")
        return nits, "The document is missing a valid header or title, making further validation impossible"

    def any_abstract_missing(self):
        # Missing Abstract section
        nits = []
        if not self.data.markers['abstract'].found:
            nit(nits, None, "Expected an Abstract section, but found none")
        elif self.section_is_empty('abstract'):
            nit(nits, self.data.markers['abstract'].start, "The Abstract section has no content")
        return nits, "Found no Abstract, or an empty one"

    def any_abstract_with_reference(self):
        # Abstract contains references
        nits = []
        for l in self.section_lines('abstract'):
            for regex, what in ABSTRACT_REFERENCE_PATTERNS:
                match = regex.search(l.txt)
                if match:
                    nit(nits, l.num, "Found %s in the Abstract: %s" % (what, match.group(0)))
                    break
        return nits, "Found %s reference%s or URLs in the Abstract" % plural(nits)

    def any_introduction_missing(self):
        # Missing Introduction section
        nits = []
        if not self.data.markers['introduction'].found:
            nit(nits, None, 'Expected a first section named "Introduction", "Overview", or "Background", but found none')
        elif self.section_is_empty('introduction'):
            nit(nits, self.data.markers['introduction'].start, "The Introduction section has no content")
        return nits, "Found no Introduction section, or an empty one"

    def any_security_considerations_missing(self):
        # Missing Security Considerations section
        nits = []
        if not self.data.markers['security_considerations'].found:
            nit(nits, None, "Expected a Security Considerations section, but found none")
        elif self.section_is_empty('security_considerations'):
            nit(nits, self.data.markers['security_considerations'].start, "The Security Considerations section has no content")
        return nits, "Found no Security Considerations section, or an empty one"

    def any_author_address_missing(self):
        # Missing Author Address section
        nits = []
        if not self.data.markers['author_address'].found:
            nit(nits, None, "Expected an Authors' Addresses section, but found none")
        return nits, "Found no Authors' Addresses section"

    def any_authors_address_grammar(self):
        # Author's address section title misuses possessive mark or uses a character other than
        # a single quote
        nits = []
        marker = self.data.markers['author_address']
        content = self.data.sections['author_address']
        if marker.found and content:
            title = content[0]
            match = ADDRESS_TITLE_RE.search(title)
            if match:
                mark, many, s = match.group('mark'), match.group('plural'), match.group('s')
                if not mark:
                    nit(nits, marker.start, "Section title '%s' lacks a possessive mark" % title)
                elif mark != "'":
                    nit(nits, marker.start, "Section title '%s' uses %r instead of a single quote" % (title, mark))
                elif (many and s) or not (many or s):
                    nit(nits, marker.start, "Section title '%s' misuses the possessive mark" % title)
        return nits, "Found a badly formed Authors' Addresses section title"

    def any_references_no_category(self):
        # References (if any present) are not categorized as Normative or Informative
        nits = []
        lines = self.section_lines('references')
        subsections = [ l for l in lines if SUBSECTION_RE.search(l.txt.strip()) ]
        if lines and not subsections:
            nit(nits, self.data.markers['references'].start, "The References section has no Normative or Informative subsections")
        for l in subsections:
            if not match_subsection(l.txt.strip()):
                nit(nits, l.num, "Reference subsection '%s' is not Normative or Informative" % l.txt.strip())
        return nits, "Found %s reference section%s not categorized as Normative or Informative" % plural(nits)

    def any_references_missing(self):
        nits = []
        if not self.data.markers['references'].found:
            nit(nits, None, "Expected a References section, but found none")
        elif self.section_is_empty('references'):
            nit(nits, self.data.markers['references'].start, "The References section has no content")
        return nits, "Found no References section, or an empty one"

    def any_section_iana_missing(self):
        # Missing IANA considerations section
        nits = []
        if not self.data.markers['iana_considerations'].found:
            nit(nits, None, "Expected an IANA Considerations section, but found none")
        return nits, "Found no IANA Considerations section"

    # ------------------------------------------------------------------
    # Terms

    def any_term_spelling(self):
        # Terms not spelled the way the RFC Editor style guide prefers
        nits = []
        for l in self.doc.lines:
            for regex, term in TERM_SPELLINGS:
                for match in regex.finditer(l.txt):
                    found = match.group(0)
                    if found.rstrip('s') != term:
                        nit(nits, l.num, "Found '%s', the preferred spelling is '%s'" % (found, term))
        return nits, "Found %s term%s not spelled in the preferred style" % plural(nits)

    # ------------------------------------------------------------------
    # Domains and addresses

    def any_fqdn_not_example(self):
        # FQDN appears (other than www.ietf.org) not meeting RFC2606/RFC6761 recommendations
        nits = []
        seen = set()
        for domain in self.data.extracted.fqdn_domains:
            key = domain.lower()
            if key in seen or is_reserved_domain(key) or is_numeric_domain(key):
                continue
            seen.add(key)
            if any( key == d or key.endswith('.'+d) for d in ALLOWED_DOMAINS ):
                continue
            nit(nits, self.find_line(domain), "Found domain name %s" % domain)
        return nits, "Found %s domain name%s not meeting RFC 2606 / RFC 6761 recommendations" % plural(nits)

    def any_ipv4_invalid(self):
        nits = []
        for addr in self.data.extracted.ipv4:
            if not is_valid_ipv4(addr):
                nit(nits, self.find_line(addr), "IPv4 address %s is invalid" % addr)
        return nits, "Found %s invalid IPv4 address%s" % (len(nits), '' if len(nits)==1 else 'es')

    def any_ipv4_not_example(self):
        # IPv4 address appears that doesn't meet RFC5737 recommendations
        nits = []
        for addr in self.data.extracted.ipv4:
            if is_valid_ipv4(addr) and not is_documentation_ipv4(addr):
                nit(nits, self.find_line(addr), "IPv4 address %s is not in a documentation range" % addr)
        return nits, "Found %s IPv4 address%s not meeting RFC 5737 recommendations" % (len(nits), '' if len(nits)==1 else 'es')

    def any_ipv6_invalid(self):
        nits = []
        for addr in self.data.extracted.ipv6:
            if not is_valid_ipv6(addr):
                nit(nits, self.find_line(addr), "IPv6 address %s is invalid" % addr)
        return nits, "Found %s invalid IPv6 address%s" % (len(nits), '' if len(nits)==1 else 'es')

    def any_ipv6_not_example(self):
        # IPv6 address appears that doesn't meet RFC3849/RFC4291 recommendations
        nits = []
        for addr in self.data.extracted.ipv6:
            if is_valid_ipv6(addr) and not is_documentation_ipv6(addr):
                nit(nits, self.find_line(addr), "IPv6 address %s is not in the documentation prefix" % addr)
        return nits, "Found %s IPv6 address%s not meeting RFC 3849 recommendations" % (len(nits), '' if len(nits)==1 else 'es')

    # ------------------------------------------------------------------
    # Code

    def any_text_code_comment(self):
        # A possible code comment is detected outside of a marked code block
        nits = []
        for item in self.data.possible_issues.inline_code:
            nit(nits, item.line, "Found something which looks like a code comment in column %d" % item.pos)
        return nits, "Found %s possible code comment%s outside of '<CODE BEGINS>' and '<CODE ENDS>' lines" % plural(nits)

    def any_sourcecode_no_license(self):
        # A code-block is detected, but the block does not contain a license declaration
        nits = []
        contains = self.data.contains
        if contains.code_blocks and not contains.revised_bsd_license:
            nit(nits, self.find_line('<CODE BEGINS>'), "Found a code block, but no Revised BSD License declaration")
        return nits, "Found a code block without a license declaration"

    # ------------------------------------------------------------------
    # RFC 2119 keywords

    def any_rfc2119_info_missing(self):
        # 2119 keywords occur, but neither the matching boilerplate nor a reference to 2119 is
        # present
        nits = []
        used = self.body_keywords()
        if used and not self.has_boilerplate() and not self.data.references.rfc2119:
            nit(nits, used[0].line, "Found %s keyword use%s, the first one is %s" % (plural(used) + (used[0].keyword,)))
        return nits, "Found RFC 2119 keywords, but neither the RFC 2119 boilerplate nor a reference to RFC 2119"

    def any_rfc2119_boilerplate_missing(self):
        # 2119 keywords occur, a reference to 2119 exists, but matching boilerplate is missing
        nits = []
        used = self.body_keywords()
        if used and self.data.references.rfc2119 and not self.has_boilerplate():
            nit(nits, used[0].line, "Found keyword %s, but no RFC 2119 boilerplate" % used[0].keyword)
        return nits, "Found RFC 2119 keywords and a reference to RFC 2119, but no RFC 2119 boilerplate"

    def any_rfc2119_reference_missing(self):
        nits = []
        if self.has_boilerplate() and not self.data.references.rfc2119:
            nit(nits, None, "Found the RFC 2119 boilerplate, but no [RFC2119] citation")
        return nits, "Found the RFC 2119 boilerplate, but no reference to RFC 2119"

    def any_rfc2119_boilerplate_extra(self):
        # 2119 boilerplate is present, but document doesn't use 2119 keywords
        nits = []
        if self.has_boilerplate() and not self.body_keywords():
            nit(nits, None, "Found the RFC 2119 boilerplate, but no keyword uses")
        return nits, "Found the RFC 2119 boilerplate, but the document doesn't use RFC 2119 keywords"

    def any_rfc2119_bad_keyword_combo(self):
        # badly formed combination of 2119 words occurs (MUST not, SHALL not, SHOULD not, not
        # RECOMMENDED, MAY NOT, NOT REQUIRED, NOT OPTIONAL)
        nits = []
        for item in self.data.possible_issues.misspelled_2119_keywords:
            nit(nits, item.line, "Found '%s' in column %d" % (item.invalid_keyword, item.pos))
        return nits, "Found %s badly formed combination%s of RFC 2119 keywords" % plural(nits)

    def any_rfc2119_boilerplate_lookalike(self):
        # text similar to 2119 boilerplate occurs, but doesn't reference 2119
        nits = []
        if self.data.boilerplate.similar_2119_boilerplate:
            nit(nits, self.find_line('The key words'), "Found text similar to, but not matching, the RFC 2119 boilerplate")
        return nits, "Found text similar to the RFC 2119 boilerplate, but not matching it"

    def any_rfc2119_keyword_lookalike(self):
        # NOT RECOMMENDED appears, but is not included in 2119-like boilerplate
        nits = []
        if self.has_boilerplate() and not 'NOT RECOMMENDED' in self.data.extracted.boilerplate_2119_keywords:
            for kw in self.body_keywords():
                if kw.keyword == 'NOT RECOMMENDED':
                    nit(nits, kw.line, "Found 'NOT RECOMMENDED'")
        return nits, "Found 'NOT RECOMMENDED', but it is not included in the RFC 2119 boilerplate"

    # ------------------------------------------------------------------
    # Header metadata

    def abstract_text(self):
        return normalize_space(' '.join(self.data.sections['abstract'] or []))

    def update_info(self):
        "Return ((declared obsoletes, updates), (obsoletes, updates) mentioned in the Abstract)"
        header = self.data.header
        declared = ([ plain_rfc_number(v) for v in header.obsoletes or [] ],
                    [ plain_rfc_number(v) for v in header.updates or [] ])
        text = self.abstract_text()
        mentioned = (mentioned_rfcs(text, ABSTRACT_OBSOLETES_RE), mentioned_rfcs(text, ABSTRACT_UPDATES_RE))
        return declared, mentioned

    def any_abstract_update_info_missing(self):
        # Abstract doesn't directly state it updates or obsoletes each document so affected
        nits = []
        (obsoletes, updates), (abs_obsoletes, abs_updates) = self.update_info()
        line = self.data.markers['abstract'].start
        for num in obsoletes:
            if not num in abs_obsoletes:
                nit(nits, line, "RFC %s is listed as obsoleted in the header, but the Abstract doesn't say so" % num)
        for num in updates:
            if not num in abs_updates:
                nit(nits, line, "RFC %s is listed as updated in the header, but the Abstract doesn't say so" % num)
        return nits, "Found %s obsoleted or updated RFC%s not mentioned in the Abstract" % plural(nits)

    def any_abstract_update_info_extra(self):
        # Abstract states it updates or obsoletes a document not declared in the relevant field
        # previously
        nits = []
        (obsoletes, updates), (abs_obsoletes, abs_updates) = self.update_info()
        line = self.data.markers['abstract'].start
        for num in abs_obsoletes:
            if not num in obsoletes:
                nit(nits, line, "The Abstract says RFC %s is obsoleted, but the header doesn't list it" % num)
        for num in abs_updates:
            if not num in updates:
                nit(nits, line, "The Abstract says RFC %s is updated, but the header doesn't list it" % num)
        return nits, "Found %s RFC%s obsoleted or updated in the Abstract but not in the header" % plural(nits)

    def any_obsoletes_updates_order(self):
        nits = []
        header = self.data.header
        for field, values in [ ('Obsoletes', header.obsoletes), ('Updates', header.updates), ]:
            numbers = [ plain_rfc_number(v) for v in values or [] ]
            if all( n.isdigit() for n in numbers ) and numbers != sorted(numbers, key=int):
                nit(nits, self.find_line(field+':'), "%s: %s is not in ascending order" % (field, ', '.join(values)))
        return nits, "Found the Obsoletes or Updates header field not in ascending order"

    def any_doc_status_info_bad(self):
        # Document's status or intended status is not found or not recognized
        nits = []
        header = self.data.header
        if self.doc.kind == 'rfc':
            field, value = 'Category', header.category
        else:
            field, value = 'Intended status', header.intended_status
        if not value:
            nit(nits, None, "Expected a '%s:' header field, but found none" % field)
        elif not extract_status_name(value):
            nit(nits, self.find_line(value), "%s '%s' is not recognized" % (field, value))
        return nits, "Found no recognized document status"

    def any_doc_date_bad(self):
        # Document's date can't be determined or is too far in the past or the future
        nits = []
        date = self.data.header.date
        today = self.options.today
        if date is None:
            nit(nits, None, "The document date could not be determined")
        else:
            try:
                day = date.as_date()
            except ValueError as e:
                nit(nits, self.data.markers['header'].start, "The document date is invalid: %s" % e)
            else:
                if date.day is None:
                    if (date.year, date.month) != (today.year, today.month):
                        nit(nits, None, "The document date, %s, is not the current month" % day.strftime('%B %Y'))
                else:
                    diff = (day - today).days
                    if diff < -MAX_DATE_OFFSET:
                        nit(nits, None, "The document date is %d days in the past" % -diff)
                    elif diff > MAX_DATE_OFFSET:
                        nit(nits, None, "The document date is %d days in the future" % diff)
        return nits, "Found a missing, invalid, or unexpected document date"

    # ------------------------------------------------------------------
    # Format

    def any_text_line_too_long(self):
        nits = []
        for l in self.doc.lines:
            if len(l.txt) > MAX_LINE_LENGTH:
                nit(nits, l.num, "Line is %d characters long" % len(l.txt))
        return nits, "Found %s line%s longer than %d characters" % (plural(nits) + (MAX_LINE_LENGTH,))

    def filename_parts(self):
        return os.path.splitext(os.path.basename(self.doc.name or ''))

    def any_filename_base_bad_characters(self):
        # filename's base name contains characters other than digits, lowercase alpha, and dash
        nits = []
        base, ext = self.filename_parts()
        if not FILENAME_BASE_RE.search(base):
            nit(nits, None, "Bad characters in file name '%s'" % base)
        return nits, "Found characters other than digits, lowercase letters, and dash in the file name"

    def any_filename_ext_mismatch(self):
        # filename's extension doesn't match format type (.txt, .xml)
        nits = []
        base, ext = self.filename_parts()
        if ext != '.'+self.doc.type:
            nit(nits, None, "Expected the extension '.%s', found '%s'" % (self.doc.type, ext))
        return nits, "Found a file name extension which doesn't match the file type"

    def any_filename_base_not_docname(self):
        # filename's base name doesn't match the name declared in the document
        nits = []
        base, ext = self.filename_parts()
        slug = self.data.slug
        if not slug:
            nit(nits, None, "Could not find the document name below the title")
        elif base != slug:
            nit(nits, self.data.markers['slug'].start, "The file name '%s' doesn't match the document name '%s'" % (base, slug))
        return nits, "Found a file name which doesn't match the document name"

    def any_filename_too_long(self):
        # filename (including extension) is more than 50 characters
        nits = []
        name = os.path.basename(self.doc.name or '')
        if len(name) > MAX_FILENAME_LENGTH:
            nit(nits, None, "File name is %d characters long" % len(name))
        return nits, "Found a file name longer than %d characters" % MAX_FILENAME_LENGTH

    checks = [

        # fmt    type   norm    easy    subm
        # txt    rfc
        #        ids
        Check('txt', 'any', 'err',  'err',  'err',  any_document_structure_bad),
        Check('txt', 'any', 'err',  'err',  'err',  any_abstract_missing),
        Check('txt', 'any', 'err',  'warn', 'none', any_abstract_with_reference),
        Check('txt', 'any', 'err',  'warn', 'none', any_introduction_missing),
        Check('txt', 'any', 'err',  'warn', 'none', any_security_considerations_missing),
        Check('txt', 'any', 'err',  'warn', 'none', any_author_address_missing),
        Check('txt', 'any', 'warn', 'warn', 'none', any_authors_address_grammar),
        Check('txt', 'any', 'err',  'warn', 'none', any_references_missing),
        Check('txt', 'any', 'err',  'warn', 'none', any_references_no_category),
        Check('txt', 'rfc', 'comm', 'comm', 'none', any_section_iana_missing),
        Check('txt', 'ids', 'err',  'warn', 'none', any_section_iana_missing),

        Check('txt', 'any', 'comm', 'comm', 'none', any_term_spelling),

        Check('txt', 'any', 'warn', 'warn', 'none', any_fqdn_not_example),
        Check('txt', 'any', 'warn', 'warn', 'none', any_ipv4_invalid),
        Check('txt', 'any', 'warn', 'warn', 'none', any_ipv4_not_example),
        Check('txt', 'any', 'warn', 'warn', 'none', any_ipv6_invalid),
        Check('txt', 'any', 'warn', 'warn', 'none', any_ipv6_not_example),

        Check('txt', 'any', 'warn', 'warn', 'warn', any_text_code_comment),
        Check('txt', 'any', 'warn', 'warn', 'none', any_sourcecode_no_license),

        Check('txt', 'any', 'err',  'warn', 'none', any_rfc2119_info_missing),
        Check('txt', 'any', 'warn', 'warn', 'none', any_rfc2119_boilerplate_missing),
        Check('txt', 'any', 'warn', 'warn', 'none', any_rfc2119_reference_missing),
        Check('txt', 'any', 'warn', 'warn', 'none', any_rfc2119_boilerplate_extra),
        Check('txt', 'any', 'comm', 'comm', 'none', any_rfc2119_bad_keyword_combo),
        Check('txt', 'any', 'err',  'err',  'none', any_rfc2119_boilerplate_lookalike),
        Check('txt', 'any', 'warn', 'warn', 'none', any_rfc2119_keyword_lookalike),

        Check('txt', 'any', 'comm', 'comm', 'none', any_abstract_update_info_missing),
        Check('txt', 'any', 'comm', 'comm', 'none', any_abstract_update_info_extra),
        Check('txt', 'any', 'warn', 'warn', 'none', any_obsoletes_updates_order),
        Check('txt', 'any', 'warn', 'warn', 'warn', any_doc_status_info_bad),
        Check('txt', 'any', 'warn', 'warn', 'warn', any_doc_date_bad),

        Check('txt', 'any', 'err',  'warn', 'warn', any_text_line_too_long),
        Check('txt', 'any', 'err',  'err',  'err',  any_filename_base_bad_characters),
        Check('txt', 'any', 'err',  'err',  'err',  any_filename_ext_mismatch),
        Check('txt', 'ids', 'err',  'err',  'err',  any_filename_base_not_docname),
        Check('txt', 'any', 'err',  'err',  'err',  any_filename_too_long),
    ]
