# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-
"""
Text blocks for building test documents.  Each block ends with a newline;
join them with make_doc().
"""

META_BLOCK = """\
idr                                                            Z. Zhang
Internet-Draft                                                  J. Haas
Intended status: Standards Track                       Juniper Networks
Expires: 8 September 2023                                      K. Patel
Obsoletes: 5678, 1234, 2345, 3456                                Arrcus
                                                        21 January 2025
Updates: 6789, 7890, 8901, 9012 (if approved)


            Extended Communities Derived from Route Targets
                 draft-ietf-idr-rt-derived-community-05
"""

ABSTRACT_BLOCK = """\
Abstract

   This document specifies a way to derive an Extended Community from a
   Route Target and describes some example use cases.
"""

STATUS_BLOCK = """\
Status of This Memo

   This Internet-Draft is submitted in full conformance with the
   provisions of BCP 78 and BCP 79.
"""

TOC_BLOCK = """\
Table of Contents

   1.  Introduction  . . . . . . . . . . . . . . . . . . . . . . . .   3
   2.  Problem Statement . . . . . . . . . . . . . . . . . . . . . .   4
   3.  Security Considerations . . . . . . . . . . . . . . . . . . .   5
   4.  IANA Considerations . . . . . . . . . . . . . . . . . . . . .   6
   5.  References  . . . . . . . . . . . . . . . . . . . . . . . . .   7
   Authors' Addresses  . . . . . . . . . . . . . . . . . . . . . . .   8
"""

INTRODUCTION_BLOCK = """\
1.  Introduction

   The purpose of this document is to define the structure and standards
   for creating documents in accordance with current guidelines.
"""

PROBLEM_BLOCK = """\
2.  Problem Statement

   Current document standards are inconsistent, leading to confusion
   and miscommunication among stakeholders.
"""

SECURITY_BLOCK = """\
3.  Security Considerations

   Security implications must be considered when sharing documents, and
   sensitive information should be appropriately protected.
"""

IANA_BLOCK = """\
4.  IANA Considerations

   This document has no IANA actions.
"""

REFERENCES_BLOCK = """\
5.  References

5.1.  Normative References

   [RFC5678]  Doe, J., "An Example Protocol", RFC 5678, May 2009.

5.2.  Informative References

   [I-D.ietf-idr-example]
              Doe, J., "An Example Draft", Work in Progress.
"""

UNCATEGORIZED_REFERENCES_BLOCK = """\
5.  References

5.1.  Unknown references

   [RFC5678]  Doe, J., "An Example Protocol", RFC 5678, May 2009.
"""

AUTHORS_BLOCK = """\
Authors' Addresses

   Zhaohui Zhang
   Juniper Networks
   Email: zzhang@example.com
"""

RFC2119_BOILERPLATE = """\
   The key words "MUST", "MUST NOT", "REQUIRED", "SHALL", "SHALL NOT",
   "SHOULD", "SHOULD NOT", "RECOMMENDED", "MAY", and "OPTIONAL" in this
   document are to be interpreted as described in RFC 2119.
"""

RFC8174_BOILERPLATE = """\
   The key words "MUST", "MUST NOT", "REQUIRED", "SHALL", "SHALL NOT",
   "SHOULD", "SHOULD NOT", "RECOMMENDED", "NOT RECOMMENDED", "MAY", and
   "OPTIONAL" in this document are to be interpreted as described in
   BCP 14 [RFC2119] [RFC8174] when, and only when, they appear in all
   capitals, as shown here.
"""

SIMILAR_BOILERPLATE = """\
   The key words "MUST", "MUST NOT", "REQUIRED", "SHALL", "SHALL NOT",
   "SHOULD", "SHOULD NOT", "RECOMMENDED", "MAY", and "OPTIONAL" in this
   document are to be interpreted as described below.
"""

CODE_BLOCK = """\
   <CODE BEGINS>
   # not a comment
   int x = 1;
   <CODE ENDS>
"""

def make_doc(*blocks):
    "Join blocks into a document, with a blank line between blocks"
    return '\n'.join(blocks)

def line_of(text, fragment, start=1):
    "The 1-based number of the first line at or after start containing fragment"
    for num, line in enumerate(text.split('\n'), 1):
        if num >= start and fragment in line:
            return num
    raise ValueError("%r not found" % fragment)

FULL_DRAFT = make_doc(
    META_BLOCK,
    ABSTRACT_BLOCK,
    STATUS_BLOCK,
    TOC_BLOCK,
    INTRODUCTION_BLOCK,
    PROBLEM_BLOCK,
    SECURITY_BLOCK,
    IANA_BLOCK,
    REFERENCES_BLOCK,
    AUTHORS_BLOCK,
)
