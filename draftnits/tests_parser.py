# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import os
import shutil
import tempfile

from unittest import TestCase

from mock import patch

from draftnits import Options, default_options
from draftnits.parser import (parse, parse_text, step, finish, get_input_type, split_mime_type, ScanState,
    ParseError, Marker, Reference, InlineCode, MisspelledKeyword, Keyword)
from draftnits.sections import is_toc_line, is_section_candidate, match_section, match_subsection
from draftnits.test_data import (META_BLOCK, ABSTRACT_BLOCK, TOC_BLOCK, INTRODUCTION_BLOCK,
    PROBLEM_BLOCK, SECURITY_BLOCK, REFERENCES_BLOCK, UNCATEGORIZED_REFERENCES_BLOCK,
    CODE_BLOCK, FULL_DRAFT, make_doc, line_of)


def scan(*lines):
    state = ScanState('\n'.join(lines))
    for line in lines:
        step(state, line)
    return state

class SectionScanTestCase(TestCase):

    def test_full_draft_sections(self):
        data = parse_text(FULL_DRAFT, 'draft-ietf-idr-rt-derived-community-05.txt').data
        for tag in ['abstract', 'introduction', 'security_considerations', 'iana_considerations',
                    'references', 'author_address']:
            self.assertTrue(data.markers[tag].found, tag)
            self.assertTrue(data.markers[tag].closed, tag)
            self.assertGreaterEqual(data.markers[tag].end, data.markers[tag].start, tag)
        self.assertEqual(data.markers['introduction'].start, line_of(FULL_DRAFT, '1.  Introduction', 30))
        self.assertEqual(data.markers['iana_considerations'].end, line_of(FULL_DRAFT, '5.  References', 30) - 1)
        self.assertEqual(data.sections['introduction'], (
            '1.  Introduction',
            'The purpose of this document is to define the structure and standards',
            'for creating documents in accordance with current guidelines.',
        ))

    def test_abstract_missing(self):
        # No "Abstract" line, no abstract
        text = make_doc(META_BLOCK, TOC_BLOCK, INTRODUCTION_BLOCK, SECURITY_BLOCK)
        data = parse_text(text).data
        self.assertFalse(data.markers['abstract'].found)
        self.assertIsNone(data.markers['abstract'].start)
        self.assertIsNone(data.sections['abstract'])

    def test_abstract_present(self):
        data = parse_text(FULL_DRAFT).data
        abstract = data.sections['abstract']
        self.assertEqual(abstract[0], 'Abstract')
        self.assertEqual(abstract[1:], (
            'This document specifies a way to derive an Extended Community from a',
            'Route Target and describes some example use cases.',
        ))
        # Closed by the "Status of This Memo" line
        self.assertEqual(data.markers['abstract'].end, line_of(FULL_DRAFT, 'Status of This Memo') - 1)

    def test_abstract_closed_by_unindented_line(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, "Copyright Notice\n", INTRODUCTION_BLOCK)
        data = parse_text(text).data
        self.assertEqual(data.markers['abstract'].end, line_of(text, 'Copyright Notice') - 1)
        self.assertNotIn('Copyright Notice', data.sections['abstract'])

    def test_abstract_closes_open_section(self):
        text = make_doc(META_BLOCK, INTRODUCTION_BLOCK, ABSTRACT_BLOCK)
        data = parse_text(text).data
        self.assertTrue(data.markers['introduction'].closed)
        self.assertEqual(data.markers['introduction'].end, line_of(text, 'Abstract') - 1)

    def test_toc_entries_never_open_sections(self):
        # The table of contents names Security Considerations, the body doesn't have it
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, TOC_BLOCK, INTRODUCTION_BLOCK, PROBLEM_BLOCK)
        data = parse_text(text).data
        self.assertFalse(data.markers['security_considerations'].found)
        self.assertFalse(data.markers['references'].found)
        self.assertFalse(data.markers['author_address'].found)
        self.assertEqual(data.markers['introduction'].start, line_of(text, '1.  Introduction', line_of(text, 'Problem Statement') + 1))

    def test_toc_entry_does_not_close_section(self):
        state = scan(
            'idr   Z. Zhang',
            '',
            'Title',
            'draft-foo-00',
            '',
            '1.  Introduction',
            '   Some text.',
            '   2.  Background ......... 4',
            '   More text.',
        )
        self.assertEqual(state.section, 'introduction')
        self.assertTrue(state.is_open('introduction'))
        self.assertIn('More text.', state.content['introduction'])

    def test_unrecognized_section_clears_current(self):
        data = parse_text(FULL_DRAFT).data
        # "2.  Problem Statement" closes the Introduction, and isn't recorded
        self.assertNotIn('Current document standards are inconsistent, leading to confusion', data.sections['introduction'])
        for content in data.sections.values():
            self.assertNotIn('2.  Problem Statement', content)

    def test_last_section_closed_at_end(self):
        data = parse_text(FULL_DRAFT).data
        self.assertEqual(data.markers['author_address'].end, len(FULL_DRAFT.split('\n')))

    def test_references_categorized(self):
        data = parse_text(FULL_DRAFT).data
        self.assertIn('5.1.  Normative References', data.sections['references'])
        self.assertIn('5.2.  Informative References', data.sections['references'])

    def test_references_not_categorized(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK, UNCATEGORIZED_REFERENCES_BLOCK)
        data = parse_text(text).data
        self.assertEqual(data.extracted.reference_section_rfc, (Reference('5678', None), ))

    def test_title_and_slug(self):
        data = parse_text(FULL_DRAFT).data
        self.assertEqual(data.title, 'Extended Communities Derived from Route Targets')
        self.assertEqual(data.slug, 'draft-ietf-idr-rt-derived-community-05')
        self.assertEqual(data.markers['title'], Marker(10, 10, True))
        self.assertEqual(data.markers['slug'], Marker(11, 11, True))
        self.assertEqual(data.markers['header'], Marker(1, 7, True))

    def test_page_count(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, '\f', INTRODUCTION_BLOCK, '\f', SECURITY_BLOCK)
        data = parse_text(text).data
        self.assertEqual(data.page_count, 3)

    def test_line_numbers_count_every_line(self):
        state = scan('', '', 'idr   Z. Zhang', '\f', '')
        self.assertEqual(state.lineno, 5)
        self.assertEqual(state.header.start, 3)

class ExtractionTestCase(TestCase):

    def test_citation_zones(self):
        text = make_doc(
            META_BLOCK,
            ABSTRACT_BLOCK,
            "1.  Introduction\n\n   This extends RFC 1234.\n",
            REFERENCES_BLOCK,
        )
        extracted = parse_text(text).data.extracted
        self.assertIn('1234', extracted.non_reference_section_rfc)
        self.assertNotIn('5678', extracted.non_reference_section_rfc)
        self.assertEqual(extracted.reference_section_rfc, (Reference('5678', 'normative_references'), ))
        self.assertEqual(extracted.reference_section_draft_refs,
            (Reference('[I-D.ietf-idr-example]', 'informative_references'), ))

    def test_citations_deduplicated(self):
        text = make_doc(
            META_BLOCK,
            "1.  Introduction\n\n   See RFC 1234, [RFC1234] and [FOO], then [FOO] again.\n",
            "5.  References\n\n   [FOO]  Foo.  RFC 5678.\n   [FOO]  Foo again.  RFC 5678.\n",
        )
        extracted = parse_text(text).data.extracted
        self.assertEqual(extracted.non_reference_section_rfc, ('1234', ))
        self.assertEqual(extracted.non_reference_section_draft_refs, ('[FOO]', ))
        self.assertEqual(extracted.reference_section_rfc, (Reference('5678', None), ))
        self.assertEqual(extracted.reference_section_draft_refs, (Reference('[FOO]', None), ))

    def test_inline_code_outside_code_block(self):
        text = make_doc(FULL_DRAFT.rstrip('\n'), CODE_BLOCK, "   # a real comment\n")
        data = parse_text(text).data
        self.assertEqual(data.possible_issues.inline_code, (InlineCode(line_of(text, '# a real comment'), 1), ))
        self.assertTrue(data.contains.code_blocks)
        self.assertFalse(data.contains.revised_bsd_license)

    def test_inline_code_positions(self):
        state = scan('idr   Z. Zhang', '', 'Title', 'draft-foo-00', '', '   x = 1; /* comment */', '# top')
        self.assertEqual(state.inline_code, [InlineCode(6, 11), InlineCode(7, 1)])

    def test_bsd_license_in_code_block(self):
        text = make_doc(META_BLOCK, "   <CODE BEGINS>\n   Redistribution and use in source and binary forms, with or\n   <CODE ENDS>\n")
        data = parse_text(text).data
        self.assertTrue(data.contains.code_blocks)
        self.assertTrue(data.contains.revised_bsd_license)

    def test_keywords(self):
        state = scan('idr   Z. Zhang', '', 'Title', 'draft-foo-00', '', '   You MUST NOT do this, and MAY do that.',
                     '   Implementations MUST not fail.')
        self.assertEqual(state.keywords_2119, [Keyword('MUST NOT', 6), Keyword('MAY', 6), Keyword('MUST', 7)])
        self.assertEqual(state.misspelled_2119_keywords, [MisspelledKeyword('MUST not', 7, 20)])

    def test_rfc2119_citation_flags(self):
        data = parse_text(FULL_DRAFT + '   [RFC2119] and [rfc8174]\n').data
        self.assertTrue(data.references.rfc2119)
        self.assertTrue(data.references.rfc8174)
        data = parse_text(FULL_DRAFT).data
        self.assertFalse(data.references.rfc2119)
        self.assertFalse(data.references.rfc8174)

    def test_addresses_and_domains(self):
        state = scan('idr   Z. Zhang', '', 'Title', 'draft-foo-00', '',
                     '   Send to 192.0.2.1 or 256.0.0.1/33 at www.example.com.', '   or to 2001:db8::1')
        self.assertEqual(state.ipv4, ['192.0.2.1', '256.0.0.1/33'])
        self.assertIn('www.example.com', state.fqdn_domains)
        self.assertEqual(state.ipv6, ['2001:db8::1'])

    def test_whole_document_passes(self):
        extracted = parse_text(FULL_DRAFT).data.extracted
        self.assertEqual(extracted.obsoletes_rfc, ('5678', '1234', '2345', '3456'))
        self.assertEqual(extracted.updates_rfc, ('6789', '7890', '8901', '9012'))

class ParseTestCase(TestCase):

    def test_idempotent(self):
        one = parse_text(FULL_DRAFT).data
        two = parse_text(FULL_DRAFT).data
        self.assertEqual(dict(one.markers), dict(two.markers))
        self.assertEqual(dict(one.sections), dict(two.sections))
        self.assertEqual(one.extracted, two.extracted)
        self.assertEqual(one.header, two.header)
        self.assertEqual(one.possible_issues, two.possible_issues)

    def test_result_is_read_only(self):
        data = parse_text(FULL_DRAFT).data
        with self.assertRaises(TypeError):
            data.sections['abstract'] = None
        with self.assertRaises(TypeError):
            data.markers['abstract'] = None
        with self.assertRaises(AttributeError):
            data.extracted.ipv4.append('192.0.2.1')

    def test_doc(self):
        doc = parse_text(FULL_DRAFT, 'draft-ietf-idr-rt-derived-community-05.txt')
        self.assertEqual(doc.type, 'txt')
        self.assertEqual(doc.kind, 'draft')
        self.assertEqual(doc.name, 'draft-ietf-idr-rt-derived-community-05.txt')
        self.assertEqual(doc.raw, FULL_DRAFT)
        self.assertEqual(doc.lines[0].num, 1)
        self.assertEqual(doc.lines[0].txt, META_BLOCK.split('\n')[0])

    def test_parse_error_names_line(self):
        with patch('draftnits.parser.find_domains', side_effect=ValueError('boom')):
            with self.assertRaises(ParseError) as cm:
                parse_text('\n\nidr   Z. Zhang\n')
        self.assertEqual(cm.exception.lineno, 3)
        self.assertEqual(cm.exception.msg, 'boom')
        self.assertIn('line 3', str(cm.exception))

    def test_step_trace(self):
        values = dict(vars(default_options))
        values.update(debug=True, trace_all=True)
        with self.assertLogs('draftnits.utils', level='DEBUG') as cm:
            parse_text('idr   Z. Zhang\n\nTitle\n', 'draft-foo-00.txt', Options(**values))
        self.assertEqual(len([ l for l in cm.output if '* step(' in l ]), 4)
        self.assertIn("==> <ScanState line 4, section None>", cm.output[-1])
        values.update(debug=False)
        with patch('draftnits.utils.log') as log:
            parse_text('idr   Z. Zhang\n\nTitle\n', 'draft-foo-00.txt', Options(**values))
        log.debug.assert_not_called()

    def test_finish_forces_close(self):
        state = scan('idr   Z. Zhang', '', 'Title', 'draft-foo-00', '', '1.  Introduction', '   Text.')
        self.assertTrue(state.is_open('introduction'))
        data = finish(state)
        self.assertEqual(data.markers['introduction'], Marker(6, 7, True))

class ParseFileTestCase(TestCase):

    def setUp(self):
        self.dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.dir)

    def write(self, name, content):
        path = os.path.join(self.dir, name)
        with open(path, 'wb') as f:
            f.write(content)
        return path

    def test_parse_file(self):
        path = self.write('draft-ietf-idr-rt-derived-community-05.txt', FULL_DRAFT.encode('utf-8'))
        doc = parse(path)
        self.assertEqual(doc.name, 'draft-ietf-idr-rt-derived-community-05.txt')
        self.assertEqual(doc.data.slug, 'draft-ietf-idr-rt-derived-community-05')

    def test_parse_latin1_file(self):
        path = self.write('draft-foo-00.txt', FULL_DRAFT.replace('Zhaohui', 'Zha\xefhui').encode('latin-1'))
        doc = parse(path)
        self.assertIn('Zha\xefhui', doc.raw)
        self.assertEqual(doc.data.slug, 'draft-ietf-idr-rt-derived-community-05')

    def test_parse_utf16_file(self):
        path = self.write('draft-foo-00.txt', FULL_DRAFT.encode('utf-16'))
        doc = parse(path)
        self.assertEqual(doc.data.slug, 'draft-ietf-idr-rt-derived-community-05')
        self.assertEqual(doc.lines[0].txt, FULL_DRAFT.split('\n')[0])

    def test_parse_unknown_charset(self):
        path = self.write('draft-foo-00.txt', FULL_DRAFT.encode('utf-8'))
        with patch('draftnits.parser.get_mime_type', return_value='text/plain; charset=unknown-8bit'):
            with self.assertLogs('draftnits.parser', level='WARNING'):
                doc = parse(path)
        self.assertEqual(doc.data.slug, 'draft-ietf-idr-rt-derived-community-05')

    def test_parse_xml_rejected(self):
        path = self.write('draft-foo-00.xml', b'<?xml version="1.0"?>\n<rfc/>\n')
        with self.assertRaises(LookupError):
            parse(path)

    def test_parse_xml_with_bom_rejected(self):
        content = b'\xef\xbb\xbf<?xml version="1.0" encoding="utf-8"?>\n<rfc version="3">\n</rfc>\n'
        path = self.write('draft-foo-00.txt', content)
        with self.assertRaises(LookupError) as cm:
            parse(path)
        self.assertIn('xml', str(cm.exception))

    def test_parse_binary_rejected(self):
        path = self.write('draft-foo-00.txt', b'PK\x03\x04\x14\x00\x00\x00\x08\x00' + bytes(range(256)))
        with self.assertRaises(LookupError):
            parse(path)

    def test_mime_types(self):
        self.assertEqual(split_mime_type('text/plain; charset=utf-16le'), ('text/plain', 'utf-16le'))
        self.assertEqual(split_mime_type('application/octet-stream'), ('application/octet-stream', None))
        self.assertEqual(get_input_type('text/plain'), 'txt')
        self.assertEqual(get_input_type('text/x-c'), 'txt')
        self.assertEqual(get_input_type('application/x-empty'), 'txt')
        self.assertEqual(get_input_type('text/xml'), 'xml')
        self.assertEqual(get_input_type('application/zip'), 'binary')

    def test_parse_missing_file(self):
        with self.assertRaises(LookupError):
            parse(os.path.join(self.dir, 'nonexistent.txt'))

class SectionTableTestCase(TestCase):

    def test_toc_lines(self):
        self.assertTrue(is_toc_line('1.  Introduction  . . . . . . . . .   3'))
        self.assertTrue(is_toc_line('1. Introduction ...................... 3'))
        self.assertFalse(is_toc_line('1.  Introduction'))
        self.assertFalse(is_toc_line('3.  Changes in Version 1.5'))

    def test_section_candidates(self):
        self.assertTrue(is_section_candidate('7.  Some Title'))
        self.assertTrue(is_section_candidate("Authors' Addresses"))
        self.assertTrue(is_section_candidate('Author Information'))
        self.assertFalse(is_section_candidate('7.1.  Sub Title'))
        self.assertFalse(is_section_candidate('7.  Security Considerations ....... 12'))

    def test_match_section(self):
        self.assertEqual(match_section('1.  Overview'), 'introduction')
        self.assertEqual(match_section('2. Background'), 'introduction')
        self.assertEqual(match_section('8.  Security Considerations'), 'security_considerations')
        self.assertEqual(match_section('9.  IANA Considerations'), 'iana_considerations')
        self.assertEqual(match_section('10.  References'), 'references')
        self.assertEqual(match_section('Authors’ Addresses'), 'author_address')
        self.assertEqual(match_section("Editor's Contact Information"), 'author_address')
        self.assertEqual(match_section('Contact Information'), 'author_address')
        self.assertEqual(match_section('Authors:'), 'author_address')
        self.assertIsNone(match_section('3.  Problem Statement'))

    def test_match_subsection(self):
        self.assertEqual(match_subsection('9.1.  Normative References'), 'normative_references')
        self.assertEqual(match_subsection('9.2 Informative References'), 'informative_references')
        self.assertIsNone(match_subsection('9.3.  Other References'))
