# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
Line-level recognizers for the lexical elements of a text document.

Every function here works on a single line, so that the caller can attach
a line number to whatever is found.  Nothing is rejected at this stage:
an address-shaped string such as 256.0.0.1 or 192.0.2.1/33 is returned
just like a valid one, and it is up to the checks to decide whether it's
acceptable.  The strict validators used by the checks live at the end of
this module.
"""

import ipaddress
import re

# ----------------------------------------------------------------------
# Regexes

FQDN_RE = re.compile(r'(?P<domain>(?:[a-z0-9-]+\.)+[a-z0-9]{2,})\.?(?![a-z0-9_-])', re.I)

IPV4_LOOSE_RE = re.compile(r'[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+(?:/[0-9]+)?')
IPV6_LOOSE_RE = re.compile(
    r'(?:(?P<full>[0-9a-f]+(?::[0-9a-f]*){7})'
    r'|(?P<compressed>(?:[0-9a-f]+:)+(?:(?::[0-9a-f]+)+|:))'
    r'|(?P<mixv4>[0-9a-f]+(?::[0-9a-f]*){5}:(?:[0-9]+\.){3}[0-9]+)'
    r'|(?P<compressedv4>::(?:[0-9a-f]+:)*(?:[0-9]+\.){3}[0-9]+)'
    r'|(?P<loopback>::[0-9]+))'
    r'(?P<cidr>/[0-9]+)?', re.I)

IPV4_RE = re.compile(r'^(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)(\.(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)){3}$')
IPV6_RE = re.compile(
    r'^(([0-9a-f]{1,4}:){7,7}[0-9a-f]{1,4}|([0-9a-f]{1,4}:){1,7}:|([0-9a-f]{1,4}:){1,6}:[0-9a-f]{1,4}'
    r'|([0-9a-f]{1,4}:){1,5}(:[0-9a-f]{1,4}){1,2}|([0-9a-f]{1,4}:){1,4}(:[0-9a-f]{1,4}){1,3}'
    r'|([0-9a-f]{1,4}:){1,3}(:[0-9a-f]{1,4}){1,4}|([0-9a-f]{1,4}:){1,2}(:[0-9a-f]{1,4}){1,5}'
    r'|[0-9a-f]{1,4}:((:[0-9a-f]{1,4}){1,6})|:((:[0-9a-f]{1,4}){1,7}|:)'
    r'|fe80:(:[0-9a-f]{0,4}){0,4}%[0-9a-zA-Z]{1,}'
    r'|::(ffff(:0{1,4}){0,1}:){0,1}((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])'
    r'|([0-9a-f]{1,4}:){1,4}:((25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9])\.){3,3}(25[0-5]|(2[0-4]|1{0,1}[0-9]){0,1}[0-9]))$', re.I)

DOCUMENTATION_IPV4_RANGES = [
    re.compile(r'^192\.0\.2\.[0-9]+$'),
    re.compile(r'^198\.51\.100\.[0-9]+$'),
    re.compile(r'^203\.0\.113\.[0-9]+$'),
    re.compile(r'^233\.252\.0\.[0-9]+$'),
    re.compile(r'^0\.0\.0\.0$'),
    re.compile(r'^255\.255\.255\.255$'),
]
DOCUMENTATION_IPV6_NETWORKS = [
    ipaddress.ip_network('2001:db8::/32'),
    ipaddress.ip_network('::1/128'),
    ipaddress.ip_network('::/128'),
]

RESERVED_DOMAINS = [
    '.test', '.example', '.invalid', '.localhost',
    'example.com', 'example.net', 'example.org',
]
NUMERIC_DOMAIN_RE = re.compile(r'^[0-9.]+$')

# The keywords, with an optional leading or trailing NOT
KEYWORDS_RE = re.compile(r'(?:(?:NOT)\s)?(?:MUST|REQUIRED|SHALL|SHOULD|RECOMMENDED|OPTIONAL|MAY)(?:\s(?:NOT))?')
# Case-sensitive on purpose: 'MUST not' is the problem, 'must not' is prose
INVALID_COMBINATIONS_RE = re.compile(r'MUST not|SHALL not|SHOULD not|not RECOMMENDED|MAY NOT|NOT REQUIRED|NOT OPTIONAL')

RFC_REFERENCE_RE = re.compile(r'\bRFC\s?(\d+)\b|\[RFC(\d+)\]', re.I)
NON_RFC_REFERENCE_RE = re.compile(r'\[(?!RFC\d+)[a-zA-Z0-9.-]+\]', re.I)
RFC2119_CITATION_RE = re.compile(r'\[RFC2119\]', re.I)
RFC8174_CITATION_RE = re.compile(r'\[RFC8174\]', re.I)

INLINE_CODE_RE = re.compile(r'/\*|\*/|^ *#')
CODE_BEGINS_RE = re.compile(r'<CODE BEGINS>', re.I)
CODE_ENDS_RE = re.compile(r'<CODE ENDS>', re.I)

# ----------------------------------------------------------------------
# Extractors

def find_domains(line):
    return [ m.group('domain') for m in FQDN_RE.finditer(line) ]

def find_ipv4(line):
    return [ m.group(0) for m in IPV4_LOOSE_RE.finditer(line) ]

def find_ipv6(line):
    return [ m.group(0) for m in IPV6_LOOSE_RE.finditer(line) ]

def find_keywords(line):
    return [ m.group(0) for m in KEYWORDS_RE.finditer(line) ]

def find_invalid_keywords(line):
    "Return (keyword, column) pairs; columns are 1-based"
    return [ (m.group(0), m.start()+1) for m in INVALID_COMBINATIONS_RE.finditer(line) ]

def find_rfc_citations(line):
    "Return the RFC numbers cited on the line, as strings, in order of appearance"
    return [ m.group(1) or m.group(2) for m in RFC_REFERENCE_RE.finditer(line) ]

def find_other_citations(line):
    "Return bracketed citation tokens which aren't RFC citations, brackets included"
    return [ m.group(0) for m in NON_RFC_REFERENCE_RE.finditer(line) ]

def find_inline_code(line):
    "Return the 1-based column of something looking like a code comment, or None"
    match = INLINE_CODE_RE.search(line)
    if match:
        return match.start()+1
    return None

# ----------------------------------------------------------------------
# Validators, for use by the checks

def split_prefix(addr):
    "Split 'addr/len' into (addr, len); len is None when there's no prefix length"
    if '/' in addr:
        addr, length = addr.split('/', 1)
        return addr, int(length)
    return addr, None

def is_valid_ipv4(addr):
    addr, length = split_prefix(addr)
    if length is not None and length > 32:
        return False
    return IPV4_RE.match(addr) is not None

def is_documentation_ipv4(addr):
    addr, length = split_prefix(addr)
    return any( r.match(addr) for r in DOCUMENTATION_IPV4_RANGES )

def is_valid_ipv6(addr):
    addr, length = split_prefix(addr)
    if length is not None and length > 128:
        return False
    return IPV6_RE.match(addr) is not None

def is_documentation_ipv6(addr):
    addr, length = split_prefix(addr)
    try:
        ip = ipaddress.IPv6Address(addr)
    except ValueError:
        return False
    return any( ip in net for net in DOCUMENTATION_IPV6_NETWORKS )

def is_reserved_domain(domain):
    domain = domain.lower()
    return any( domain.endswith(r) for r in RESERVED_DOMAINS )

def is_numeric_domain(domain):
    return NUMERIC_DOMAIN_RE.match(domain) is not None
