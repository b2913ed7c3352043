# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
Whole-document recognizers.  These run over the whitespace-normalized text
of the document, not line by line, since the patterns they look for are
paragraphs which the text formatter may have broken at arbitrary places.
"""

import re

from collections import namedtuple

from draftnits.extract import KEYWORDS_RE

Boilerplate = namedtuple('Boilerplate', ['rfc2119', 'rfc8174', 'similar_2119_boilerplate'])

_KEYWORD_LIST = r'The key words "MUST", "MUST NOT", "REQUIRED", "SHALL", "SHALL NOT", "SHOULD", "SHOULD NOT", "RECOMMENDED", '

# Exact forms; the order matters for the boilerplate keyword listing
BOILERPLATE_PATTERNS = [
    ('rfc2119', re.compile(_KEYWORD_LIST +
        r'?("NOT RECOMMENDED", )?"MAY", and "OPTIONAL" in this document are to be interpreted as described in'
        r'( BCP 14,)? RFC ?2119[.,;]', re.I)),
    ('rfc2119_alt', re.compile(_KEYWORD_LIST +
        r'?("NOT RECOMMENDED", )?"MAY", and "OPTIONAL" in this document are to be interpreted as described in'
        r' "Key words for use in RFCs to Indicate Requirement Levels" \[RFC2119\]', re.I)),
    ('rfc8174', re.compile(_KEYWORD_LIST +
        r'"NOT RECOMMENDED", "MAY", and "OPTIONAL" in this document are to be interpreted as described in'
        r' BCP 14 \[RFC2119\] \[RFC8174\]', re.I)),
]

_COMMON_PARTS = [
    re.compile(r'The key words '),
    re.compile(r'"MUST", "MUST NOT", "REQUIRED", "SHALL"'),
    re.compile(r'"SHALL NOT", "SHOULD", "SHOULD NOT", "RECOMMENDED"'),
    re.compile(r'"NOT RECOMMENDED", "MAY", and "OPTIONAL"'),
]

# Fragments of each exact form, in the order they appear in it.  Only the
# final citation fragment is case-insensitive.
BOILERPLATE_PARTS = [
    ('rfc2119', _COMMON_PARTS + [
        re.compile(r'in this document are to be interpreted as described in'),
        re.compile(r'RFC ?2119[.,;]?', re.I),
    ]),
    ('rfc2119_alt', _COMMON_PARTS + [
        re.compile(r'in this document are to be interpreted as described in'),
        re.compile(r'"Key words for use in RFCs to Indicate Requirement Levels" \[RFC2119\]', re.I),
    ]),
    ('rfc8174', _COMMON_PARTS + [
        re.compile(r'in this document are to be interpreted as described in BCP 14'),
        re.compile(r'\[RFC2119\] \[RFC8174\]', re.I),
    ]),
]

OBSOLETES_RE = re.compile(r'(?:obsoletes|replaces)\s*:\s*((?:rfc\s*)?[0-9]+(?:,|\s|and)*\s*)+', re.I)
UPDATES_RE = re.compile(r'updates\s*:\s*((?:rfc\s*)?[0-9]+(?:,|\s|and)*\s*)+', re.I)
RFC_NUMBER_RE = re.compile(r'\b(RFC\s*[0-9]+|[0-9]+)\b', re.I)

BSD_LICENSE_RE = re.compile(r'(Revised|Simplified) BSD License|Redistribution and use in source and binary forms')


def matching_prefix_length(text, parts):
    "Return how many of the leading fragments in parts are found in text"
    count = 0
    for part in parts:
        if not part.search(text):
            break
        count += 1
    return count

def match_boilerplate(text):
    """
    Classify the keyword boilerplate of the given normalized text.  The
    lookalike flag is only raised when some form has a matching leading
    fragment but no exact form is present.
    """
    found = dict( (name, regex.search(text) is not None) for name, regex in BOILERPLATE_PATTERNS )
    rfc2119 = found['rfc2119'] or found['rfc2119_alt']
    rfc8174 = found['rfc8174']
    attempted = any( matching_prefix_length(text, parts) > 0 for name, parts in BOILERPLATE_PARTS )
    return Boilerplate(rfc2119, rfc8174, attempted and not (rfc2119 or rfc8174))

def boilerplate_keywords(text):
    "Keywords asserted by the exact boilerplate forms present in text, first appearance first"
    keywords = []
    for name, regex in BOILERPLATE_PATTERNS:
        match = regex.search(text)
        if match:
            for kw in KEYWORDS_RE.findall(match.group(0)):
                if not kw in keywords:
                    keywords.append(kw)
    return keywords

def extract_rfc_numbers(text, regex):
    "Return the plain RFC numbers listed after each match of regex in text"
    numbers = []
    for match in regex.finditer(text):
        for num in RFC_NUMBER_RE.findall(match.group(0)):
            numbers.append(re.sub(r'(?i)^RFC\s*', '', num.strip()))
    return numbers

def is_bsd_license(line):
    return BSD_LICENSE_RE.search(line) is not None
