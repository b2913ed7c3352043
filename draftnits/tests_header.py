# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import datetime

from unittest import TestCase

from draftnits.header import (HeaderState, Author, DocDate, parse_date, split_author_name, extract_status_name,
    rfc_list)
from draftnits.parser import parse_text
from draftnits.test_data import META_BLOCK, FULL_DRAFT


def read_header(*lines):
    header = HeaderState()
    header.first_line(1, lines[0])
    for num, line in enumerate(lines[1:], 2):
        header.add_line(num, line)
    return header

class HeaderStateTestCase(TestCase):

    def test_source_author_obsoletes(self):
        header = read_header('idr  Z. Zhang', 'Obsoletes: 5678, 1234')
        self.assertEqual(header.source, 'idr')
        self.assertEqual(header.frozen_authors(), (Author('Z. Zhang', None, None), ))
        self.assertEqual(header.obsoletes, ['5678', '1234'])

    def test_first_line_without_columns(self):
        header = read_header('Network Working Group')
        self.assertEqual(header.source, 'Network Working Group')
        self.assertEqual(header.authors, [])
        self.assertEqual((header.start, header.end), (1, 1))

    def test_meta_block(self):
        header = read_header(*META_BLOCK.split('\n')[:7])
        self.assertEqual(header.kind, 'draft')
        self.assertEqual(header.frozen_authors(), (
            Author('Z. Zhang', 'Juniper Networks', None),
            Author('J. Haas', 'Juniper Networks', None),
            Author('K. Patel', 'Arrcus', None),
        ))
        self.assertEqual(header.date, DocDate(21, 1, 2025))
        self.assertEqual(header.expires, DocDate(8, 9, 2023))
        self.assertEqual(header.intended_status, 'Standards Track')
        self.assertEqual(header.obsoletes, ['5678', '1234', '2345', '3456'])
        self.assertEqual(header.updates, ['6789', '7890', '8901', '9012'])
        self.assertEqual(header.end, 7)

    def test_right_column_ignored_after_date(self):
        header = read_header(
            'idr                                Z. Zhang',
            'Internet-Draft                     Juniper',
            '                                   March 2024',
            'Expires: 2 September 2024          J. Late',
        )
        self.assertEqual(header.date, DocDate(None, 3, 2024))
        self.assertEqual([ a.name for a in header.frozen_authors() ], ['Z. Zhang'])
        self.assertEqual(header.expires, DocDate(2, 9, 2024))

    def test_author_without_organization(self):
        header = read_header(
            'idr                                A. One',
            'Internet-Draft',
            'Expires: May 2025                  B. Two',
            '                                   Example Corp',
        )
        self.assertEqual(header.frozen_authors(), (
            Author('A. One', '', None),
            Author('B. Two', 'Example Corp', None),
        ))
        # Expiry dates without a day get the first of the month
        self.assertEqual(header.expires, DocDate(1, 5, 2025))

    def test_editor(self):
        header = read_header(
            'idr                                J. Doe, Ed.',
            'Internet-Draft                     R. Roe (Ed.)',
            'Intended status: Informational     Example Corp',
        )
        self.assertEqual(header.frozen_authors(), (
            Author('J. Doe', 'Example Corp', 'editor'),
            Author('R. Roe', 'Example Corp', 'editor'),
        ))
        self.assertEqual(header.intended_status, 'Informational')

    def test_rfc_header(self):
        header = read_header(
            'Internet Engineering Task Force (IETF)                  J. Doe',
            'Request for Comments: 9999                         Example Corp',
            'Updates: 1234                                         May 2025',
            'Category: Standards Track',
            'ISSN: 2070-1721',
        )
        self.assertEqual(header.kind, 'rfc')
        self.assertEqual(header.rfc_number, '9999')
        self.assertEqual(header.category, 'Standards Track')
        self.assertEqual(header.issn, '2070-1721')
        self.assertEqual(header.updates, ['1234'])
        self.assertEqual(header.source, 'Internet Engineering Task Force (IETF)')
        self.assertEqual(header.date, DocDate(None, 5, 2025))

    def test_unknown_status_kept(self):
        header = read_header('idr  Z. Zhang', 'Intended status: Whatever')
        self.assertEqual(header.intended_status, 'Whatever')

    def test_in_block(self):
        header = read_header('idr  Z. Zhang', 'Internet-Draft')
        self.assertTrue(header.in_block(3))
        self.assertFalse(header.in_block(4))
        header.close()
        self.assertFalse(header.in_block(3))

    def test_parsed_header(self):
        header = parse_text(FULL_DRAFT).data.header
        self.assertEqual(header.source, 'idr')
        self.assertEqual(len(header.authors), 3)
        self.assertEqual(header.obsoletes, ('5678', '1234', '2345', '3456'))
        self.assertEqual(header.updates, ('6789', '7890', '8901', '9012'))
        self.assertIsNone(header.rfc_number)
        self.assertIsNone(header.category)

class HeaderValueTestCase(TestCase):

    def test_parse_date(self):
        self.assertEqual(parse_date('21 January 2025'), DocDate(21, 1, 2025))
        self.assertEqual(parse_date('March 2024'), DocDate(None, 3, 2024))
        self.assertEqual(parse_date('Sept 2024'), DocDate(None, 9, 2024))
        self.assertEqual(parse_date('3 Dec 2024'), DocDate(3, 12, 2024))
        self.assertIsNone(parse_date('Juniper Networks'))
        self.assertIsNone(parse_date(''))
        self.assertIsNone(parse_date(None))

    def test_parse_date_unknown_month(self):
        with self.assertLogs('draftnits.header', level='WARNING'):
            self.assertIsNone(parse_date('12 Brumaire 2024'))

    def test_as_date(self):
        self.assertEqual(DocDate(None, 3, 2024).as_date(), datetime.date(2024, 3, 1))
        self.assertEqual(DocDate(21, 1, 2025).as_date(), datetime.date(2025, 1, 21))

    def test_split_author_name(self):
        self.assertEqual(split_author_name('J. Doe, Ed.'), ('J. Doe', 'editor'))
        self.assertEqual(split_author_name('J. Doe (ed)'), ('J. Doe', 'editor'))
        self.assertEqual(split_author_name('J. Doe, Editor'), ('J. Doe', 'editor'))
        self.assertEqual(split_author_name('J. Doe'), ('J. Doe', None))

    def test_status_names(self):
        self.assertEqual(extract_status_name('Standards Track'), 'Standards Track')
        self.assertEqual(extract_status_name('standards track'), 'Standards Track')
        self.assertEqual(extract_status_name('BCP'), 'Best Current Practice')
        self.assertEqual(extract_status_name('Informational (if approved)'), 'Informational')
        self.assertIsNone(extract_status_name('Whatever'))
        self.assertIsNone(extract_status_name(None))

    def test_rfc_list(self):
        self.assertEqual(rfc_list('Updates: 6789, 7890 (if approved)'), ['6789', '7890'])
        self.assertEqual(rfc_list('Obsoletes:'), [])
