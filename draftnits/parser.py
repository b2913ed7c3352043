# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
Single-pass line scanner for text-format drafts and RFCs.

The scan is a reducer: a ScanState holds everything that changes while
the document is read, step() advances it by one physical line, and
finish() freezes it into an immutable ParsedDocument.  Text documents
have no closing delimiters for sections, so a section ends when the next
recognized section title (or the end of the file) is seen.

Line numbers are 1-based and count every physical line, including blank
lines and page breaks.
"""

import io
import logging
import os

from collections import namedtuple
from types import MappingProxyType

import magic

from draftnits import default_options
from draftnits.boilerplate import (match_boilerplate, boilerplate_keywords, extract_rfc_numbers,
    is_bsd_license, OBSOLETES_RE, UPDATES_RE)
from draftnits.extract import (find_domains, find_ipv4, find_ipv6, find_keywords, find_invalid_keywords,
    find_rfc_citations, find_other_citations, find_inline_code, CODE_BEGINS_RE, CODE_ENDS_RE,
    RFC2119_CITATION_RE, RFC8174_CITATION_RE)
from draftnits.header import HeaderState
from draftnits.sections import (SECTION_TAGS, is_section_candidate, is_subsection_candidate,
    match_section, match_subsection)
from draftnits.utils import Line, dtrace, normalize_space


log = logging.getLogger(__name__)

XML_MIME_TYPES = [ 'text/xml', 'application/xml', ]
EMPTY_MIME_TYPES = [ 'application/x-empty', 'inode/x-empty', ]

# ----------------------------------------------------------------------
# Result types

class Marker(namedtuple('Marker', ['start', 'end', 'closed'])):
    "Position of a section or header item.  A start of None means it was never seen."
    __slots__ = ()

    @property
    def found(self):
        return self.start is not None

NOT_FOUND = Marker(None, None, False)

Header = namedtuple('Header', ['source', 'authors', 'date', 'expires', 'intended_status', 'category',
                               'issn', 'obsoletes', 'updates', 'rfc_number'])
Keyword = namedtuple('Keyword', ['keyword', 'line'])
Reference = namedtuple('Reference', ['value', 'subsection'])
InlineCode = namedtuple('InlineCode', ['line', 'pos'])
MisspelledKeyword = namedtuple('MisspelledKeyword', ['invalid_keyword', 'line', 'pos'])
Extracted = namedtuple('Extracted', ['fqdn_domains', 'ipv4', 'ipv6', 'keywords_2119', 'boilerplate_2119_keywords',
                                     'obsoletes_rfc', 'updates_rfc',
                                     'non_reference_section_rfc', 'reference_section_rfc',
                                     'non_reference_section_draft_refs', 'reference_section_draft_refs'])
PossibleIssues = namedtuple('PossibleIssues', ['inline_code', 'misspelled_2119_keywords'])
References = namedtuple('References', ['rfc2119', 'rfc8174'])
Contains = namedtuple('Contains', ['code_blocks', 'revised_bsd_license'])

ParsedDocument = namedtuple('ParsedDocument', ['kind', 'page_count', 'header', 'title', 'slug', 'sections',
                                               'markers', 'extracted', 'possible_issues', 'boilerplate',
                                               'references', 'contains'])

class ParseError(Exception):
    def __init__(self, lineno, msg):
        super(ParseError, self).__init__("Error while parsing line %s: %s" % (lineno, msg))
        self.lineno = lineno
        self.msg = msg

class Doc(object):
    def __init__(self, name=None, raw=None, type='txt', kind=None, data=None, lines=None):
        self.name = name
        self.raw = raw
        self.type = type                # Input type; only 'txt' is parsed
        self.kind = kind                # 'draft', 'rfc' or 'unknown'
        self.data = data                # ParsedDocument
        self.lines = lines or []        # [ Line(num, txt), ... ]

# ----------------------------------------------------------------------
# Scanner

class ScanState(object):
    """
    Mutable state of one scan.  The whole-document passes over the
    normalized text are done up front, since they don't depend on line
    position.
    """

    def __init__(self, text='', options=default_options):
        self.options = options
        self.lineno = 0
        self.page_count = 1
        self.section = None
        self.subsection = None
        self.in_code = False
        self.header = HeaderState()
        self.title = None
        self.title_line = None
        self.slug = None
        self.slug_line = None
        # tag -> [start, end, closed]
        self.markers = dict( (tag, [None, None, False]) for tag in SECTION_TAGS )
        self.content = dict( (tag, None) for tag in SECTION_TAGS )

        self.fqdn_domains = []
        self.ipv4 = []
        self.ipv6 = []
        self.keywords_2119 = []
        self.non_reference_section_rfc = []
        self.reference_section_rfc = []
        self.non_reference_section_draft_refs = []
        self.reference_section_draft_refs = []
        self.inline_code = []
        self.misspelled_2119_keywords = []
        self.references_2119 = False
        self.references_8174 = False
        self.code_blocks = False
        self.revised_bsd_license = False

        normalized = normalize_space(text)
        self.boilerplate = match_boilerplate(normalized)
        self.boilerplate_2119_keywords = boilerplate_keywords(normalized)
        self.obsoletes_rfc = extract_rfc_numbers(normalized, OBSOLETES_RE)
        self.updates_rfc = extract_rfc_numbers(normalized, UPDATES_RE)

    def __repr__(self):
        return '<ScanState line %s, section %s>' % (self.lineno, self.section)

    def is_open(self, tag):
        start, end, closed = self.markers[tag]
        return start is not None and not closed

    def close_section(self, end):
        if self.section and self.is_open(self.section):
            marker = self.markers[self.section]
            marker[1] = end
            marker[2] = True

    def open_section(self, tag, start):
        self.section = tag
        self.markers[tag] = [start, None, False]
        self.content[tag] = []

def add_citation(state, value, outside, inside):
    if state.section == 'references':
        if not any( r.value == value for r in inside ):
            inside.append(Reference(value, state.subsection))
    elif not value in outside:
        outside.append(value)

@dtrace
def step(state, line):
    "Advance the scan by one physical line, and return the state"
    state.lineno += 1
    num = state.lineno
    trimmed = line.strip()

    if '\f' in line:
        state.page_count += 1
        return state
    if not trimmed:
        return state

    # Code fences
    if CODE_BEGINS_RE.search(trimmed):
        state.in_code = True
        state.code_blocks = True
    if CODE_ENDS_RE.search(trimmed):
        state.in_code = False
    if state.in_code:
        if is_bsd_license(line):
            state.revised_bsd_license = True
    else:
        pos = find_inline_code(line)
        if pos:
            state.inline_code.append(InlineCode(num, pos))

    # Lexical elements
    for number in find_rfc_citations(trimmed):
        add_citation(state, number, state.non_reference_section_rfc, state.reference_section_rfc)
    for name in find_other_citations(trimmed):
        add_citation(state, name, state.non_reference_section_draft_refs, state.reference_section_draft_refs)
    if RFC2119_CITATION_RE.search(trimmed):
        state.references_2119 = True
    if RFC8174_CITATION_RE.search(trimmed):
        state.references_8174 = True
    for keyword in find_keywords(trimmed):
        state.keywords_2119.append(Keyword(keyword, num))
    for keyword, pos in find_invalid_keywords(line):
        state.misspelled_2119_keywords.append(MisspelledKeyword(keyword, num, pos))
    state.fqdn_domains.extend(find_domains(trimmed))
    state.ipv4.extend(find_ipv4(trimmed))
    state.ipv6.extend(find_ipv6(trimmed))

    # Header, title and slug
    header = state.header
    if header.start is None:
        header.first_line(num, line)
        return state
    if not header.closed:
        if header.in_block(num):
            header.add_line(num, line)
            return state
        header.close()
        state.title = trimmed
        state.title_line = num
    elif state.title_line is not None and num == state.title_line + 1:
        state.slug = trimmed
        state.slug_line = num
        return state

    # Abstract
    if trimmed == 'Abstract':
        state.close_section(num - 1)
        state.open_section('abstract', num)
    elif state.is_open('abstract'):
        if trimmed.startswith('Status of') or not line.startswith('  '):
            state.markers['abstract'][1] = num - 1
            state.markers['abstract'][2] = True

    # Sections
    if is_section_candidate(trimmed):
        state.close_section(num - 1)
        tag = match_section(trimmed)
        if tag:
            state.open_section(tag, num)
        else:
            state.section = None
    if is_subsection_candidate(trimmed):
        state.subsection = match_subsection(trimmed)

    if state.section and state.is_open(state.section):
        state.content[state.section].append(trimmed)
    return state

def finish(state):
    "Close any section still open at the end of input, and freeze the result"
    state.close_section(state.lineno)
    header = state.header
    def frozen(l):
        return tuple(l) if l is not None else None
    def item_marker(num):
        return Marker(num, num, True) if num is not None else NOT_FOUND
    markers = dict( (tag, Marker(*m) if m[0] is not None else NOT_FOUND) for tag, m in state.markers.items() )
    markers['header'] = Marker(header.start, header.end, header.closed) if header.start is not None else NOT_FOUND
    markers['title'] = item_marker(state.title_line)
    markers['slug'] = item_marker(state.slug_line)
    return ParsedDocument(
        kind=header.kind,
        page_count=state.page_count,
        header=Header(
            source=header.source,
            authors=header.frozen_authors(),
            date=header.date,
            expires=header.expires,
            intended_status=header.intended_status,
            category=header.category,
            issn=header.issn,
            obsoletes=frozen(header.obsoletes),
            updates=frozen(header.updates),
            rfc_number=header.rfc_number,
        ),
        title=state.title,
        slug=state.slug,
        sections=MappingProxyType(dict( (tag, frozen(c)) for tag, c in state.content.items() )),
        markers=MappingProxyType(markers),
        extracted=Extracted(
            fqdn_domains=tuple(state.fqdn_domains),
            ipv4=tuple(state.ipv4),
            ipv6=tuple(state.ipv6),
            keywords_2119=tuple(state.keywords_2119),
            boilerplate_2119_keywords=tuple(state.boilerplate_2119_keywords),
            obsoletes_rfc=tuple(state.obsoletes_rfc),
            updates_rfc=tuple(state.updates_rfc),
            non_reference_section_rfc=tuple(state.non_reference_section_rfc),
            reference_section_rfc=tuple(state.reference_section_rfc),
            non_reference_section_draft_refs=tuple(state.non_reference_section_draft_refs),
            reference_section_draft_refs=tuple(state.reference_section_draft_refs),
        ),
        possible_issues=PossibleIssues(
            inline_code=tuple(state.inline_code),
            misspelled_2119_keywords=tuple(state.misspelled_2119_keywords),
        ),
        boilerplate=state.boilerplate,
        references=References(state.references_2119, state.references_8174),
        contains=Contains(state.code_blocks, state.revised_bsd_license),
    )

# ----------------------------------------------------------------------

def parse_text(text, filename=None, options=default_options):
    "Parse the text of a document.  Raises ParseError, naming the line, on failure."
    text = text.replace('\r\n', '\n')
    raw_lines = text.split('\n')
    state = None
    try:
        state = ScanState(text, options)
        for line in raw_lines:
            step(state, line)
        data = finish(state)
    except Exception as e:
        raise ParseError(state.lineno if state else 0, str(e)) from e
    log.debug("Parsed %s: kind %s, %s lines, %s pages, sections found: %s", filename, data.kind, len(raw_lines),
              data.page_count, ', '.join( t for t in SECTION_TAGS if data.markers[t].found ) or 'none')
    return Doc(name=filename, raw=text, type='txt', kind=data.kind, data=data,
               lines=[ Line(i+1, l) for i, l in enumerate(raw_lines) ])

def get_mime_type(raw):
    "The libmagic content type of raw, as 'mime/type; charset=name'"
    m = magic.Magic(mime=True, mime_encoding=True)
    return m.from_buffer(raw)

def split_mime_type(content_type):
    "Split a libmagic content type into (mime type, charset)"
    mime, _, params = content_type.partition(';')
    charset = None
    for param in params.split(';'):
        if '=' in param:
            key, value = [ s.strip() for s in param.split('=', 1) ]
            if key == 'charset':
                charset = value
    return mime.strip(), charset

def get_input_type(mime):
    "Tell text from other input by its mime type"
    if mime in XML_MIME_TYPES or mime.endswith('+xml'):
        return 'xml'
    if mime.startswith('text/') or mime in EMPTY_MIME_TYPES:
        return 'txt'
    return 'binary'

def decode(raw, charset, filename):
    if charset in [None, 'binary', 'unknown-8bit', ]:
        log.warning("Could not tell the encoding of %s, reading it as latin-1", filename)
        return raw.decode('latin-1')
    if charset == 'us-ascii':
        charset = 'utf-8'
    try:
        text = raw.decode(charset)
    except LookupError:
        log.warning("Unknown encoding %s for %s, reading it as latin-1", charset, filename)
        return raw.decode('latin-1')
    except UnicodeDecodeError as e:
        raise LookupError("Could not decode %s as %s: %s" % (filename, charset, e.reason))
    return text.lstrip('\ufeff')

def parse(filename, options=default_options):
    try:
        with io.open(filename, 'rb') as file:
            raw = file.read()
    except (IOError, OSError) as e:
        raise LookupError("Could not read %s: %s" % (filename, e.strerror or e))
    mime, charset = split_mime_type(get_mime_type(raw))
    log.debug("%s: mime type %s, charset %s", filename, mime, charset)
    type = get_input_type(mime)
    if type != 'txt':
        raise LookupError("Unsupported input type for %s: %s (%s)" % (filename, type, mime))
    text = decode(raw, charset, filename)
    return parse_text(text, os.path.basename(filename), options)
