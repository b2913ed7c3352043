# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

from unittest import TestCase

from draftnits.boilerplate import (match_boilerplate, boilerplate_keywords, extract_rfc_numbers, is_bsd_license,
    matching_prefix_length, Boilerplate, BOILERPLATE_PARTS, OBSOLETES_RE, UPDATES_RE)
from draftnits.extract import (find_domains, find_ipv4, find_ipv6, find_keywords, find_invalid_keywords,
    find_rfc_citations, find_other_citations, find_inline_code, split_prefix, is_valid_ipv4, is_documentation_ipv4,
    is_valid_ipv6, is_documentation_ipv6, is_reserved_domain, is_numeric_domain)
from draftnits.test_data import RFC2119_BOILERPLATE, RFC8174_BOILERPLATE, SIMILAR_BOILERPLATE
from draftnits.utils import normalize_space


class ExtractorTestCase(TestCase):

    def test_find_domains(self):
        self.assertEqual(find_domains('See www.example.com and mail.ietf.org.'), ['www.example.com', 'mail.ietf.org'])
        self.assertEqual(find_domains('No domains here, e-mail me.'), [])
        self.assertEqual(find_domains('The draft-ietf-idr-example-00 draft'), [])

    def test_find_ipv4(self):
        self.assertEqual(find_ipv4('Use 192.0.2.1 and 10.0.0.0/8'), ['192.0.2.1', '10.0.0.0/8'])
        # Out-of-range values are found, and left to the checks
        self.assertEqual(find_ipv4('bad 999.1.1.1'), ['999.1.1.1'])
        self.assertEqual(find_ipv4('version 1.2.3'), [])

    def test_find_ipv6(self):
        self.assertEqual(find_ipv6('the prefix 2001:db8::/32 is used'), ['2001:db8::/32'])
        self.assertEqual(find_ipv6('full 2001:db8:0:0:0:0:0:1 form'), ['2001:db8:0:0:0:0:0:1'])
        self.assertEqual(find_ipv6('loopback ::1'), ['::1'])
        self.assertEqual(find_ipv6('mapped ::ffff:192.0.2.1'), ['::ffff:192.0.2.1'])
        self.assertEqual(find_ipv6('a time of 10:30'), [])

    def test_find_keywords(self):
        self.assertEqual(find_keywords('It MUST NOT be used, and SHOULD be avoided.'), ['MUST NOT', 'SHOULD'])
        self.assertEqual(find_keywords('It is NOT RECOMMENDED.'), ['NOT RECOMMENDED'])
        self.assertEqual(find_keywords('It must be lowercase prose.'), [])

    def test_find_invalid_keywords(self):
        self.assertEqual(find_invalid_keywords('  It MUST not be used.'), [('MUST not', 6)])
        self.assertEqual(find_invalid_keywords('It MAY NOT be used.'), [('MAY NOT', 4)])
        self.assertEqual(find_invalid_keywords('It must not be used.'), [])

    def test_find_citations(self):
        self.assertEqual(find_rfc_citations('See RFC 1234, RFC5678 and [RFC9012].'), ['1234', '5678', '9012'])
        self.assertEqual(find_rfc_citations('No citations.'), [])
        self.assertEqual(find_other_citations('See [RFC1234], [I-D.ietf-foo-bar] and [BCP14].'),
            ['[I-D.ietf-foo-bar]', '[BCP14]'])

    def test_find_inline_code(self):
        self.assertEqual(find_inline_code('   # comment'), 1)
        self.assertEqual(find_inline_code('x = 1; /* comment */'), 8)
        self.assertEqual(find_inline_code('end of comment */'), 16)
        self.assertIsNone(find_inline_code('Issue #5 is fixed'))

class ValidatorTestCase(TestCase):

    def test_split_prefix(self):
        self.assertEqual(split_prefix('192.0.2.0/24'), ('192.0.2.0', 24))
        self.assertEqual(split_prefix('192.0.2.0'), ('192.0.2.0', None))

    def test_ipv4(self):
        self.assertTrue(is_valid_ipv4('192.0.2.1'))
        self.assertTrue(is_valid_ipv4('192.0.2.0/24'))
        self.assertFalse(is_valid_ipv4('256.0.0.1'))
        self.assertFalse(is_valid_ipv4('192.0.2.0/33'))
        self.assertTrue(is_documentation_ipv4('198.51.100.7'))
        self.assertTrue(is_documentation_ipv4('203.0.113.0/24'))
        self.assertTrue(is_documentation_ipv4('0.0.0.0'))
        self.assertFalse(is_documentation_ipv4('10.0.0.1'))

    def test_ipv6(self):
        self.assertTrue(is_valid_ipv6('2001:db8::1'))
        self.assertTrue(is_valid_ipv6('2001:db8::/32'))
        self.assertTrue(is_valid_ipv6('::ffff:192.0.2.1'))
        self.assertFalse(is_valid_ipv6('2001:db8::/129'))
        self.assertFalse(is_valid_ipv6('2001:db8:0:0:0:0:0:0:1'))
        self.assertTrue(is_documentation_ipv6('2001:db8:1::1'))
        self.assertTrue(is_documentation_ipv6('::1'))
        self.assertTrue(is_documentation_ipv6('::'))
        self.assertFalse(is_documentation_ipv6('2001:4860::8888'))
        self.assertFalse(is_documentation_ipv6('not:an:address'))

    def test_domains(self):
        self.assertTrue(is_reserved_domain('www.example.com'))
        self.assertTrue(is_reserved_domain('host.EXAMPLE'))
        self.assertTrue(is_reserved_domain('foo.test'))
        self.assertFalse(is_reserved_domain('www.google.com'))
        self.assertTrue(is_numeric_domain('1.2'))
        self.assertFalse(is_numeric_domain('www.example.com'))

class BoilerplateTestCase(TestCase):

    def test_rfc2119_boilerplate(self):
        self.assertEqual(match_boilerplate(normalize_space(RFC2119_BOILERPLATE)), Boilerplate(True, False, False))

    def test_rfc8174_boilerplate(self):
        self.assertEqual(match_boilerplate(normalize_space(RFC8174_BOILERPLATE)), Boilerplate(False, True, False))

    def test_similar_boilerplate(self):
        self.assertEqual(match_boilerplate(normalize_space(SIMILAR_BOILERPLATE)), Boilerplate(False, False, True))

    def test_no_boilerplate(self):
        self.assertEqual(match_boilerplate('This document has no keywords.'), Boilerplate(False, False, False))

    def test_boilerplate_across_page_break(self):
        text = RFC2119_BOILERPLATE.replace('"RECOMMENDED", ', '"RECOMMENDED",\n\f\n   ')
        self.assertTrue(match_boilerplate(normalize_space(text)).rfc2119)

    def test_matching_prefix_length(self):
        parts = dict(BOILERPLATE_PARTS)
        text = normalize_space(SIMILAR_BOILERPLATE)
        self.assertEqual(matching_prefix_length(text, parts['rfc2119']), 3)
        self.assertEqual(matching_prefix_length('Nothing', parts['rfc2119']), 0)

    def test_boilerplate_keywords(self):
        self.assertEqual(boilerplate_keywords(normalize_space(RFC8174_BOILERPLATE)), [
            'MUST', 'MUST NOT', 'REQUIRED', 'SHALL', 'SHALL NOT', 'SHOULD', 'SHOULD NOT', 'RECOMMENDED',
            'NOT RECOMMENDED', 'MAY', 'OPTIONAL',
        ])
        self.assertNotIn('NOT RECOMMENDED', boilerplate_keywords(normalize_space(RFC2119_BOILERPLATE)))
        self.assertEqual(boilerplate_keywords(normalize_space(SIMILAR_BOILERPLATE)), [])

    def test_extract_rfc_numbers(self):
        text = 'Obsoletes: RFC 1234, 5678 and 9012 Updates: 3456 (if approved)'
        self.assertEqual(extract_rfc_numbers(text, OBSOLETES_RE), ['1234', '5678', '9012'])
        self.assertEqual(extract_rfc_numbers(text, UPDATES_RE), ['3456'])
        self.assertEqual(extract_rfc_numbers('Replaces: 1111', OBSOLETES_RE), ['1111'])
        self.assertEqual(extract_rfc_numbers('Nothing here', UPDATES_RE), [])

    def test_bsd_license(self):
        self.assertTrue(is_bsd_license('   Revised BSD License set forth in Section 4.c of the'))
        self.assertTrue(is_bsd_license('Redistribution and use in source and binary forms, with or'))
        self.assertFalse(is_bsd_license('int x = 1;'))
