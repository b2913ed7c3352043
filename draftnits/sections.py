# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
Section title recognizers.  The matcher tables are ordered lists of
(tag, regex) tuples, tested top to bottom with the first match winning,
so that new title variants can be added without touching the scanner.
"""

import re


SECTION_RE = re.compile(r'^\d+\.\s+.+$')
SUBSECTION_RE = re.compile(r'^\d+\.\d+\.?\s+(.+)$')
# A dotted leader, or a lone dot and space, followed by a page number
TOC_RE = re.compile(r'(?:\.{2,}|\.\s)\s*\d+$')

AUTHOR_SECTION_RE = re.compile(
    r'(?:'
    r'^(?:Authors?|Editors?)[‘’‛\'`"] Addresses$'
    r'|^[0-9a-z.]*\s*author information$'
    r'|^[0-9a-z.]*\s*(?:author|editor)(?:[‘’‛\'`"]s?|s)?\s+contact information$'
    r'|^[0-9a-z.]*\s*contact information$'
    r'|^[0-9a-z.]*\s*(?:author|editor)s?:?$'
    r')', re.I)

SECTION_MATCHERS = [
    ('introduction',            re.compile(r'^\d+\.\s+(?:Introduction|Overview|Background)$', re.I)),
    ('security_considerations', re.compile(r'^\d+\.\s+Security Considerations$', re.I)),
    ('author_address',          AUTHOR_SECTION_RE),
    ('references',              re.compile(r'^\d+\.\s+References$', re.I)),
    ('iana_considerations',     re.compile(r'^\d+\.\s+IANA Considerations$', re.I)),
]

SUBSECTION_MATCHERS = [
    ('normative_references',    re.compile(r'^\d+\.\d+\.?\s+Normative\s+References$', re.I)),
    ('informative_references',  re.compile(r'^\d+\.\d+\.?\s+Informative\s+References$', re.I)),
]

SECTION_TAGS = ['abstract'] + [ tag for tag, regex in SECTION_MATCHERS ]


def is_toc_line(line):
    return TOC_RE.search(line) is not None

def is_section_candidate(line):
    "Whether a trimmed line looks like a section title; table of contents entries never do"
    if is_toc_line(line):
        return False
    return bool(SECTION_RE.search(line) or AUTHOR_SECTION_RE.search(line))

def is_subsection_candidate(line):
    if is_toc_line(line):
        return False
    return SUBSECTION_RE.search(line) is not None

def _first_match(matchers, title):
    for tag, regex in matchers:
        if regex.search(title):
            return tag
    return None

def match_section(title):
    return _first_match(SECTION_MATCHERS, title)

def match_subsection(title):
    return _first_match(SUBSECTION_MATCHERS, title)
