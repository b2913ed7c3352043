# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import datetime

# Static values
__version__  = '1.0.0'
NAME         = 'draftnits'
VERSION      = [ int(i) if i.isdigit() else i for i in __version__.split('.') ]

DESCRIPTION  = """Report issues with a plain-text Internet-Draft or RFC.

The draftnits program reads a text-format Internet-Draft, reconstructs
its structure (first-page header, title, sections, references) and
reports conditions that should be adjusted to bring the document into
line with policies from the IETF and the RFC Editor:

 * Required sections (Abstract, Introduction, Security Considerations,
   IANA Considerations, Authors' Addresses, References)
 * RFC 2119 / RFC 8174 keyword usage and boilerplate
 * IPv4/IPv6 addresses and domain names outside documentation ranges
 * Consistency between the header metadata and the Abstract

"""

class Options(object):
    def __init__(self, **kwargs):
        for k,v in kwargs.items():
            if not k.startswith('__'):
                setattr(self, k, v)
    pass

default_options = Options(
    debug=False,
    docs=[],
    mode='normal',
    today=datetime.date.today(),
    trace_all=False,
    trace_methods=[],
    verbose=False,
    version=False,
)
