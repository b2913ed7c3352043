# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
First-page header parsing.

The first page of a text draft or RFC starts with a two-column block:

    idr                                                            Z. Zhang
    Internet-Draft                                                  J. Haas
    Intended status: Standards Track                       Juniper Networks
    Expires: 8 September 2023                                      K. Patel
    Obsoletes: 5678, 1234                                            Arrcus
                                                            21 January 2025

The left column carries the stream or working group followed by
``Key: value`` fields, the right column carries the authors, each
followed by their organization, and finally the document date.  The
block ends at the first blank-line gap; the line after the gap is the
title.
"""

import datetime
import logging
import re

from collections import namedtuple


log = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Regexes

LINE_VALUES_RE = re.compile(r'^(?P<left>.*)\s{2,}(?P<right>.*)$')
AUTHOR_NAME_RE = re.compile(r"^(?:[a-z](?:-[a-z])?\. ?)+[a-z][-'a-z]+$", re.I)
EDITOR_SUFFIX_RE = re.compile(r'(?:, | )([Ee]d\.?|\([Ee]d\.?\)|[Ee]ditor)$')
DATE_RE = re.compile(r'^(?:(?P<day>[0-9]{1,2})\s)?(?P<month>[a-z]{3,})\s(?P<year>[0-9]{4})$', re.I)
IF_APPROVED_RE = re.compile(r'\s*\(if approved\)', re.I)

# Ordered; the first match wins, so the more specific names come first
STATUS_NAMES = [
    ('Internet Standard',     re.compile(r'internet standard', re.I)),
    ('Draft Standard',        re.compile(r'draft standard', re.I)),
    ('Proposed Standard',     re.compile(r'proposed standard', re.I)),
    ('Standards Track',       re.compile(r'standards track', re.I)),
    ('Best Current Practice', re.compile(r'best current practice|bcp', re.I)),
    ('Informational',         re.compile(r'informational', re.I)),
    ('Experimental',          re.compile(r'experimental', re.I)),
    ('Historic',              re.compile(r'historic', re.I)),
]

month_names = [ 'january', 'february', 'march', 'april', 'may', 'june', 'july', 'august', 'september', 'october', 'november', 'december' ]
month_names_abbrev3 = [ n[:3] for n in month_names ]
month_names_abbrev4 = [ n[:4] for n in month_names ]

# ----------------------------------------------------------------------

Author = namedtuple('Author', ['name', 'org', 'role'])

class DocDate(namedtuple('DocDate', ['day', 'month', 'year'])):
    "A header date.  The month is numeric; the day is None when the header only gives month and year."
    __slots__ = ()

    def as_date(self):
        return datetime.date(self.year, self.month, self.day or 1)

def extract_status_name(text):
    if not text:
        return None
    for name, regex in STATUS_NAMES:
        if regex.search(text):
            return name
    return None

def parse_date(text):
    "Parse 'DAY? MONTH YEAR'; returns a DocDate, or None if text isn't a date"
    if not text:
        return None
    match = DATE_RE.search(text.strip())
    if not match:
        return None
    md = match.groupdict()
    mon = md['month'].lower()
    if   mon in month_names:
        month = month_names.index( mon ) + 1
    elif mon in month_names_abbrev3:
        month = month_names_abbrev3.index( mon ) + 1
    elif mon in month_names_abbrev4:
        month = month_names_abbrev4.index( mon ) + 1
    else:
        log.warning("Could not resolve the month name in '%s'", text)
        return None
    day = int(md['day']) if md['day'] else None
    return DocDate(day, month, int(md['year']))

def split_author_name(text):
    "Return (name, role), with any editor suffix stripped off the name"
    match = EDITOR_SUFFIX_RE.search(text)
    if match:
        return text[:match.start()].strip(), 'editor'
    return text, None

def field_value(text):
    parts = text.split(':', 1)
    return parts[1].strip() if len(parts) > 1 else ''

def rfc_list(text):
    value = IF_APPROVED_RE.sub('', field_value(text))
    return [ v.strip() for v in value.split(',') if v.strip() ]


class HeaderState(object):
    """
    Accumulates the header fields while the scanner feeds it the lines of
    the first-page block.  Line numbers are 1-based; ``start`` is None
    until the first non-blank line has been seen.
    """

    def __init__(self):
        self.start = None
        self.end = None
        self.last_author = None
        self.closed = False
        self.kind = 'unknown'
        self.source = None
        self.date = None
        self.expires = None
        self.intended_status = None
        self.category = None
        self.issn = None
        self.obsoletes = None
        self.updates = None
        self.rfc_number = None
        # [name, org, role] lists, org None meaning 'not known yet'
        self.authors = []

    def in_block(self, num):
        "Whether line num still belongs to the header block, i.e., follows it without a gap"
        return self.start is not None and not self.closed and num <= self.end + 1

    def first_line(self, num, line):
        self.start = num
        self.end = num
        self.last_author = num
        trimmed = line.strip()
        match = LINE_VALUES_RE.search(trimmed)
        if match:
            self.source = match.group('left').strip()
            self.add_author(match.group('right').strip())
        else:
            self.source = trimmed

    def add_line(self, num, line):
        self.end = num
        match = LINE_VALUES_RE.search(line)
        if match:
            left, right = match.group('left').strip(), match.group('right').strip()
        else:
            left, right = line.strip(), None
        if left:
            self.parse_left(left)
        if right and self.date is None:
            self.parse_right(num, right)
            self.last_author = num

    def close(self):
        self.closed = True

    def add_author(self, text):
        name, role = split_author_name(text)
        self.authors.append([name, None, role])

    def parse_left(self, left):
        date = parse_date(left)
        if date:
            self.date = date
        if left == 'Internet-Draft':
            self.kind = 'draft'
        elif left.startswith('Request for Comments'):
            self.kind = 'rfc'
            self.rfc_number = field_value(left) or None
        if left.startswith('Intended'):
            raw = field_value(left)
            self.intended_status = extract_status_name(raw) or raw
        elif left.startswith('Obsoletes'):
            self.obsoletes = rfc_list(left)
        elif left.startswith('Updates'):
            self.updates = rfc_list(left)
        elif left.startswith('Category'):
            raw = field_value(left)
            self.category = extract_status_name(raw) or raw
        elif left.startswith('ISSN'):
            self.issn = field_value(left)
        elif left.startswith('Expires'):
            expires = parse_date(field_value(left))
            if expires:
                self.expires = expires._replace(day=expires.day or 1)

    def parse_right(self, num, right):
        date = parse_date(right)
        if date:
            self.date = date
            return
        name, role = split_author_name(right)
        if AUTHOR_NAME_RE.search(name):
            if num > self.last_author + 1:
                # A gap before a new name: the preceding authors have no organization
                for author in reversed(self.authors):
                    if author[1] is not None:
                        break
                    author[1] = ''
            self.authors.append([name, None, role])
        else:
            for author in reversed(self.authors):
                if author[1] is not None:
                    break
                author[1] = right

    def frozen_authors(self):
        return tuple( Author(*a) for a in self.authors )
