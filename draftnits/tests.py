# Copyright The IETF Trust 2025, All Rights Reserved
# -*- coding: utf-8 -*-

import datetime
import io
import os
import shutil
import tempfile

from unittest import TestCase

from mock import patch

from draftnits import Options, default_options
from draftnits.checks import Checker, Nit
from draftnits.parser import Doc, parse_text
from draftnits.run import main, report, check_file, commalist
from draftnits.test_data import (META_BLOCK, ABSTRACT_BLOCK, STATUS_BLOCK, INTRODUCTION_BLOCK,
    PROBLEM_BLOCK, SECURITY_BLOCK, REFERENCES_BLOCK, UNCATEGORIZED_REFERENCES_BLOCK, AUTHORS_BLOCK,
    RFC2119_BOILERPLATE, RFC8174_BOILERPLATE, SIMILAR_BOILERPLATE, CODE_BLOCK, FULL_DRAFT, make_doc, line_of)


TODAY = datetime.date(2025, 1, 21)
DRAFT_NAME = 'draft-ietf-idr-rt-derived-community-05.txt'

KEYWORD_BLOCK = """\
6.  Protocol

   Implementations MUST support this.
"""

UPDATES_ABSTRACT_BLOCK = """\
Abstract

   This document obsoletes RFC 5678, 1234, 2345 and 3456, and updates
   RFC 6789, 7890, 8901 and 9012.
"""

def make_options(**kwargs):
    values = dict(vars(default_options), today=TODAY)
    values.update(kwargs)
    return Options(**values)

def checker(text, name=DRAFT_NAME, **kwargs):
    options = make_options(**kwargs)
    return Checker(parse_text(text, name, options), options)

def draft_with(*blocks):
    "The full test draft, with blocks appended at the end"
    return make_doc(FULL_DRAFT.rstrip('\n'), *blocks)

def messages(nits):
    return [ n.msg for n in nits ]

def summaries(items):
    return [ msg for nits, msg in items ]


class SectionCheckTestCase(TestCase):

    def test_abstract_missing(self):
        # Missing Abstract section
        nits, msg = checker(make_doc(META_BLOCK, INTRODUCTION_BLOCK)).any_abstract_missing()
        self.assertEqual(nits, [Nit(None, "Expected an Abstract section, but found none")])
        self.assertFalse(msg.endswith('.'))
        nits, msg = checker(FULL_DRAFT).any_abstract_missing()
        self.assertEqual(nits, [])

    def test_abstract_empty(self):
        text = make_doc(META_BLOCK, "Abstract\n", STATUS_BLOCK, INTRODUCTION_BLOCK)
        nits, msg = checker(text).any_abstract_missing()
        self.assertEqual(nits, [Nit(line_of(text, 'Abstract'), "The Abstract section has no content")])

    def test_abstract_with_reference(self):
        # Abstract contains references
        abstract = "Abstract\n\n   This document extends [RFC1234].\n   See Section 3 for details.\n   No citations here.\n"
        text = make_doc(META_BLOCK, abstract, STATUS_BLOCK, INTRODUCTION_BLOCK)
        nits, msg = checker(text).any_abstract_with_reference()
        self.assertEqual(nits, [
            Nit(line_of(text, '[RFC1234]'), "Found a citation of an RFC in the Abstract: [RFC1234]"),
            Nit(line_of(text, 'See Section 3'), "Found a reference to a section or appendix in the Abstract: Section 3"),
        ])
        nits, msg = checker(FULL_DRAFT).any_abstract_with_reference()
        self.assertEqual(nits, [])

    def test_introduction_missing(self):
        # Missing Introduction section
        nits, msg = checker(make_doc(META_BLOCK, ABSTRACT_BLOCK, PROBLEM_BLOCK)).any_introduction_missing()
        self.assertEqual(len(nits), 1)
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK.replace('Introduction', 'Overview'))
        nits, msg = checker(text).any_introduction_missing()
        self.assertEqual(nits, [])

    def test_introduction_empty(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, "1.  Introduction\n", PROBLEM_BLOCK)
        nits, msg = checker(text).any_introduction_missing()
        self.assertEqual(messages(nits), ["The Introduction section has no content"])

    def test_security_considerations_missing(self):
        # Missing Security Considerations section
        nits, msg = checker(make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK)).any_security_considerations_missing()
        self.assertEqual(messages(nits), ["Expected a Security Considerations section, but found none"])
        nits, msg = checker(FULL_DRAFT).any_security_considerations_missing()
        self.assertEqual(nits, [])

    def test_author_address_missing(self):
        # Missing Author Address section
        nits, msg = checker(make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK)).any_author_address_missing()
        self.assertEqual(len(nits), 1)
        nits, msg = checker(FULL_DRAFT).any_author_address_missing()
        self.assertEqual(nits, [])

    def test_authors_address_grammar(self):
        # Author's address section title misuses possessive mark or uses a character other than
        # a single quote
        def grammar(title):
            text = make_doc(META_BLOCK, ABSTRACT_BLOCK, AUTHORS_BLOCK.replace("Authors' Addresses", title))
            return messages(checker(text).any_authors_address_grammar()[0])
        self.assertEqual(grammar("Authors' Addresses"), [])
        self.assertEqual(grammar("Author's Addresses"), [])
        self.assertEqual(grammar("Editors' Addresses"), [])
        self.assertEqual(grammar("Authors’ Addresses"),
            ["Section title 'Authors’ Addresses' uses '’' instead of a single quote"])
        self.assertEqual(grammar("Author' Addresses"),
            ["Section title 'Author' Addresses' misuses the possessive mark"])

    def test_references_no_category(self):
        # References (if any present) are not categorized as Normative or Informative
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, UNCATEGORIZED_REFERENCES_BLOCK, AUTHORS_BLOCK)
        nits, msg = checker(text).any_references_no_category()
        self.assertEqual(nits, [Nit(line_of(text, '5.1.'), "Reference subsection '5.1.  Unknown references' is not Normative or Informative")])
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, "5.  References\n\n   [RFC5678]  Doe, J., RFC 5678.\n")
        nits, msg = checker(text).any_references_no_category()
        self.assertEqual(messages(nits), ["The References section has no Normative or Informative subsections"])
        nits, msg = checker(FULL_DRAFT).any_references_no_category()
        self.assertEqual(nits, [])

    def test_document_structure_bad(self):
        nits, msg = checker('').any_document_structure_bad()
        self.assertEqual(nits, [Nit(None, "Expected a first-page header, but found none")])
        self.assertFalse(msg.endswith('.'))
        text = "idr                                   Z. Zhang\nInternet-Draft                        J. Haas\n"
        nits, msg = checker(text).any_document_structure_bad()
        self.assertEqual(nits, [Nit(1, "Found no title after the first-page header")])
        self.assertEqual(checker(FULL_DRAFT).any_document_structure_bad()[0], [])
        items = checker('', mode='submission').check()
        self.assertIn(msg, summaries(items['err']))

    def test_references_missing(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK, AUTHORS_BLOCK)
        nits, msg = checker(text).any_references_missing()
        self.assertEqual(nits, [Nit(None, "Expected a References section, but found none")])
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK, "5.  References\n", AUTHORS_BLOCK)
        nits, msg = checker(text).any_references_missing()
        self.assertEqual(nits, [Nit(line_of(text, '5.  References'), "The References section has no content")])
        self.assertEqual(checker(FULL_DRAFT).any_references_missing()[0], [])
        self.assertIn("Found no References section, or an empty one", summaries(checker(text, mode='lenient').check()['warn']))
        names = [ c.func.__name__ for c in checker(text, mode='submission').get_checks() ]
        self.assertNotIn('any_references_missing', names)

    def test_section_iana_missing(self):
        # Missing IANA considerations section; an error for drafts, a comment for RFCs
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, INTRODUCTION_BLOCK, SECURITY_BLOCK, REFERENCES_BLOCK, AUTHORS_BLOCK)
        items = checker(text).check()
        self.assertIn("Found no IANA Considerations section", summaries(items['err']))
        items = checker(text, name='rfc9999.txt').check()
        self.assertNotIn("Found no IANA Considerations section", summaries(items['err']))
        self.assertIn("Found no IANA Considerations section", summaries(items['comm']))

class TermCheckTestCase(TestCase):

    def test_term_spelling(self):
        text = draft_with("   Send e-mail to the Internet draft authors, see the Internet-Drafts\n   and IPSec.\n")
        nits, msg = checker(text).any_term_spelling()
        num = line_of(text, 'Send e-mail')
        self.assertEqual(nits, [
            Nit(num, "Found 'e-mail', the preferred spelling is 'email'"),
            Nit(num, "Found 'Internet draft', the preferred spelling is 'Internet-Draft'"),
            Nit(num+1, "Found 'IPSec', the preferred spelling is 'IPsec'"),
        ])
        self.assertEqual(msg, "Found 3 terms not spelled in the preferred style")
        self.assertEqual(checker(FULL_DRAFT).any_term_spelling()[0], [])

    def test_term_spelling_modes(self):
        text = draft_with("   Contact the internet-draft authors by E-Mail.\n")
        self.assertIn("Found 2 terms not spelled in the preferred style", summaries(checker(text).check()['comm']))
        self.assertIn("Found 2 terms not spelled in the preferred style", summaries(checker(text, mode='lenient').check()['comm']))
        submission = checker(text, mode='submission').check()
        self.assertEqual(summaries(submission['comm']), [])

class AddressCheckTestCase(TestCase):

    def test_fqdn_not_example(self):
        # FQDN appears (other than www.ietf.org) not meeting RFC2606/RFC6761 recommendations
        text = draft_with("   See www.google.com, www.ietf.org, www.example.com and WWW.GOOGLE.COM.\n")
        nits, msg = checker(text).any_fqdn_not_example()
        self.assertEqual(nits, [Nit(line_of(text, 'www.google.com'), "Found domain name www.google.com")])
        self.assertEqual(msg, "Found 1 domain name not meeting RFC 2606 / RFC 6761 recommendations")

    def test_ipv4(self):
        # IPv4 address appears that doesn't meet RFC5737 recommendations
        text = draft_with("   Use 192.0.2.1, 10.1.2.3 and 300.1.2.3 or 192.0.2.0/33.\n")
        c = checker(text)
        nits, msg = c.any_ipv4_invalid()
        self.assertEqual(messages(nits), ["IPv4 address 300.1.2.3 is invalid", "IPv4 address 192.0.2.0/33 is invalid"])
        self.assertEqual(msg, "Found 2 invalid IPv4 addresses")
        nits, msg = c.any_ipv4_not_example()
        self.assertEqual(messages(nits), ["IPv4 address 10.1.2.3 is not in a documentation range"])

    def test_ipv6(self):
        # IPv6 address appears that doesn't meet RFC3849/RFC4291 recommendations
        text = draft_with("   Use 2001:db8::1, 2001:4860::8888 or 2001:db8::/200.\n")
        c = checker(text)
        nits, msg = c.any_ipv6_invalid()
        self.assertEqual(messages(nits), ["IPv6 address 2001:db8::/200 is invalid"])
        nits, msg = c.any_ipv6_not_example()
        self.assertEqual(messages(nits), ["IPv6 address 2001:4860::8888 is not in the documentation prefix"])
        self.assertEqual(nits[0].num, line_of(text, '2001:4860::8888'))

class CodeCheckTestCase(TestCase):

    def test_text_code_comment(self):
        # A possible code comment is detected outside of a marked code block
        text = draft_with(CODE_BLOCK, "   x = 1; /* set x */\n")
        nits, msg = checker(text).any_text_code_comment()
        self.assertEqual(nits, [Nit(line_of(text, 'set x'), "Found something which looks like a code comment in column 11")])

    def test_sourcecode_no_license(self):
        # A code-block is detected, but the block does not contain a license declaration
        text = draft_with(CODE_BLOCK)
        nits, msg = checker(text).any_sourcecode_no_license()
        self.assertEqual(nits, [Nit(line_of(text, '<CODE BEGINS>'), "Found a code block, but no Revised BSD License declaration")])
        text = draft_with(CODE_BLOCK.replace('int x = 1;', 'Redistribution and use in source and binary forms'))
        nits, msg = checker(text).any_sourcecode_no_license()
        self.assertEqual(nits, [])
        nits, msg = checker(FULL_DRAFT).any_sourcecode_no_license()
        self.assertEqual(nits, [])

class KeywordCheckTestCase(TestCase):

    def test_rfc2119_info_missing(self):
        # 2119 keywords occur, but neither the matching boilerplate nor a reference to 2119 is
        # present
        text = draft_with(KEYWORD_BLOCK)
        nits, msg = checker(text).any_rfc2119_info_missing()
        self.assertEqual(nits, [Nit(line_of(text, 'MUST support'), "Found 1 keyword use, the first one is MUST")])
        nits, msg = checker(draft_with(KEYWORD_BLOCK, "   See [RFC2119].\n")).any_rfc2119_info_missing()
        self.assertEqual(nits, [])

    def test_rfc2119_boilerplate_missing(self):
        # 2119 keywords occur, a reference to 2119 exists, but matching boilerplate is missing
        text = draft_with(KEYWORD_BLOCK, "   See [RFC2119].\n")
        nits, msg = checker(text).any_rfc2119_boilerplate_missing()
        self.assertEqual(messages(nits), ["Found keyword MUST, but no RFC 2119 boilerplate"])
        nits, msg = checker(draft_with(RFC8174_BOILERPLATE, KEYWORD_BLOCK)).any_rfc2119_boilerplate_missing()
        self.assertEqual(nits, [])

    def test_rfc2119_reference_missing(self):
        # The boilerplate of RFC 2119 itself only names the RFC, without a citation
        nits, msg = checker(draft_with(RFC2119_BOILERPLATE, KEYWORD_BLOCK)).any_rfc2119_reference_missing()
        self.assertEqual(len(nits), 1)
        nits, msg = checker(draft_with(RFC8174_BOILERPLATE, KEYWORD_BLOCK)).any_rfc2119_reference_missing()
        self.assertEqual(nits, [])

    def test_rfc2119_boilerplate_extra(self):
        # 2119 boilerplate is present, but document doesn't use 2119 keywords
        nits, msg = checker(draft_with(RFC8174_BOILERPLATE)).any_rfc2119_boilerplate_extra()
        self.assertEqual(messages(nits), ["Found the RFC 2119 boilerplate, but no keyword uses"])
        nits, msg = checker(draft_with(RFC8174_BOILERPLATE, KEYWORD_BLOCK)).any_rfc2119_boilerplate_extra()
        self.assertEqual(nits, [])

    def test_rfc2119_bad_keyword_combo(self):
        # badly formed combination of 2119 words occurs (MUST not, SHALL not, SHOULD not, not
        # RECOMMENDED, MAY NOT, NOT REQUIRED, NOT OPTIONAL)
        text = draft_with("   It MUST not fail, and MAY NOT stop.\n")
        nits, msg = checker(text).any_rfc2119_bad_keyword_combo()
        num = line_of(text, 'MUST not')
        self.assertEqual(nits, [Nit(num, "Found 'MUST not' in column 7"), Nit(num, "Found 'MAY NOT' in column 26")])
        self.assertEqual(msg, "Found 2 badly formed combinations of RFC 2119 keywords")

    def test_rfc2119_boilerplate_lookalike(self):
        # text similar to 2119 boilerplate occurs, but doesn't reference 2119
        text = draft_with(SIMILAR_BOILERPLATE, KEYWORD_BLOCK)
        nits, msg = checker(text).any_rfc2119_boilerplate_lookalike()
        self.assertEqual(nits, [Nit(line_of(text, 'The key words'), "Found text similar to, but not matching, the RFC 2119 boilerplate")])
        nits, msg = checker(draft_with(RFC2119_BOILERPLATE, KEYWORD_BLOCK)).any_rfc2119_boilerplate_lookalike()
        self.assertEqual(nits, [])

    def test_rfc2119_keyword_lookalike(self):
        # NOT RECOMMENDED appears, but is not included in 2119-like boilerplate
        body = "   It is NOT RECOMMENDED to do this.\n"
        text = draft_with(RFC2119_BOILERPLATE, body)
        nits, msg = checker(text).any_rfc2119_keyword_lookalike()
        self.assertEqual(nits, [Nit(line_of(text, 'It is NOT RECOMMENDED'), "Found 'NOT RECOMMENDED'")])
        nits, msg = checker(draft_with(RFC8174_BOILERPLATE, body)).any_rfc2119_keyword_lookalike()
        self.assertEqual(nits, [])

class MetadataCheckTestCase(TestCase):

    def test_abstract_update_info_missing(self):
        # Abstract doesn't directly state it updates or obsoletes each document so affected
        nits, msg = checker(FULL_DRAFT).any_abstract_update_info_missing()
        self.assertEqual(len(nits), 8)
        self.assertEqual(nits[0], Nit(line_of(FULL_DRAFT, 'Abstract'),
            "RFC 5678 is listed as obsoleted in the header, but the Abstract doesn't say so"))
        text = make_doc(META_BLOCK, UPDATES_ABSTRACT_BLOCK, STATUS_BLOCK, INTRODUCTION_BLOCK)
        nits, msg = checker(text).any_abstract_update_info_missing()
        self.assertEqual(nits, [])

    def test_abstract_update_info_extra(self):
        # Abstract states it updates or obsoletes a document not declared in the relevant field
        # previously
        abstract = UPDATES_ABSTRACT_BLOCK.replace('8901 and 9012', '8901, 9012 and 4321')
        text = make_doc(META_BLOCK, abstract, STATUS_BLOCK, INTRODUCTION_BLOCK)
        nits, msg = checker(text).any_abstract_update_info_extra()
        self.assertEqual(messages(nits), ["The Abstract says RFC 4321 is updated, but the header doesn't list it"])
        nits, msg = checker(text).any_abstract_update_info_missing()
        self.assertEqual(nits, [])

    def test_abstract_update_info_with_date_column(self):
        # The date in the right column shares the line with the Obsoletes field
        meta = META_BLOCK.replace(
            'Obsoletes: 5678, 1234, 2345, 3456                                Arrcus\n'
            '                                                        21 January 2025\n',
            'Obsoletes: 5678' + ' '*42 + '21 January 2025\n')
        abstract = UPDATES_ABSTRACT_BLOCK.replace('RFC 5678, 1234, 2345 and 3456', 'RFC 5678')
        text = make_doc(meta, abstract, STATUS_BLOCK, INTRODUCTION_BLOCK)
        c = checker(text)
        self.assertEqual(c.data.header.obsoletes, ('5678', ))
        self.assertEqual(c.any_abstract_update_info_missing()[0], [])
        self.assertEqual(c.any_abstract_update_info_extra()[0], [])

    def test_obsoletes_updates_order(self):
        nits, msg = checker(FULL_DRAFT).any_obsoletes_updates_order()
        self.assertEqual(nits, [Nit(line_of(FULL_DRAFT, 'Obsoletes:'), "Obsoletes: 5678, 1234, 2345, 3456 is not in ascending order")])

    def test_doc_status_info_bad(self):
        # Document's status or intended status is not found or not recognized
        nits, msg = checker(FULL_DRAFT).any_doc_status_info_bad()
        self.assertEqual(nits, [])
        text = FULL_DRAFT.replace('Standards Track', 'Standards Trek')
        nits, msg = checker(text).any_doc_status_info_bad()
        self.assertEqual(nits, [Nit(3, "Intended status 'Standards Trek' is not recognized")])
        text = FULL_DRAFT.replace('Intended status: Standards Track', ' '*32)
        nits, msg = checker(text).any_doc_status_info_bad()
        self.assertEqual(messages(nits), ["Expected a 'Intended status:' header field, but found none"])

    def test_doc_date_bad(self):
        # Document's date can't be determined or is too far in the past or the future
        self.assertEqual(checker(FULL_DRAFT).any_doc_date_bad()[0], [])
        nits, msg = checker(FULL_DRAFT, today=datetime.date(2025, 3, 1)).any_doc_date_bad()
        self.assertEqual(messages(nits), ["The document date is 39 days in the past"])
        nits, msg = checker(FULL_DRAFT, today=datetime.date(2025, 1, 10)).any_doc_date_bad()
        self.assertEqual(messages(nits), ["The document date is 11 days in the future"])
        nits, msg = checker(FULL_DRAFT, today=datetime.date(2025, 1, 24)).any_doc_date_bad()
        self.assertEqual(nits, [])

    def test_doc_date_month_only(self):
        text = FULL_DRAFT.replace('21 January 2025', '   January 2025')
        self.assertEqual(checker(text).any_doc_date_bad()[0], [])
        nits, msg = checker(text, today=datetime.date(2025, 2, 1)).any_doc_date_bad()
        self.assertEqual(messages(nits), ["The document date, January 2025, is not the current month"])

    def test_doc_date_missing_or_invalid(self):
        text = FULL_DRAFT.replace('21 January 2025', 'Undated Draft!!')
        nits, msg = checker(text).any_doc_date_bad()
        self.assertEqual(messages(nits), ["The document date could not be determined"])
        text = FULL_DRAFT.replace(' 21 January 2025', '31 February 2025')
        nits, msg = checker(text).any_doc_date_bad()
        self.assertEqual(len(nits), 1)
        self.assertTrue(nits[0].msg.startswith("The document date is invalid"))

class FormatCheckTestCase(TestCase):

    def test_text_line_too_long(self):
        text = draft_with('   ' + 'x'*70 + '\n')
        nits, msg = checker(text).any_text_line_too_long()
        self.assertEqual(nits, [Nit(line_of(text, 'xxxx'), "Line is 73 characters long")])
        self.assertEqual(checker(FULL_DRAFT).any_text_line_too_long()[0], [])

    def test_filename_base_bad_characters(self):
        # filename's base name contains characters other than digits, lowercase alpha, and dash
        self.assertEqual(len(checker(FULL_DRAFT, name='Draft_Foo.txt').any_filename_base_bad_characters()[0]), 1)
        self.assertEqual(checker(FULL_DRAFT).any_filename_base_bad_characters()[0], [])

    def test_filename_ext_mismatch(self):
        # filename's extension doesn't match format type (.txt, .xml)
        nits, msg = checker(FULL_DRAFT, name='draft-ietf-idr-rt-derived-community-05.text').any_filename_ext_mismatch()
        self.assertEqual(messages(nits), ["Expected the extension '.txt', found '.text'"])
        self.assertEqual(checker(FULL_DRAFT).any_filename_ext_mismatch()[0], [])

    def test_filename_base_not_docname(self):
        # filename's base name doesn't match the name declared in the document
        nits, msg = checker(FULL_DRAFT, name='draft-foo-00.txt').any_filename_base_not_docname()
        self.assertEqual(nits, [Nit(11, "The file name 'draft-foo-00' doesn't match the document name 'draft-ietf-idr-rt-derived-community-05'")])
        self.assertEqual(checker(FULL_DRAFT).any_filename_base_not_docname()[0], [])

    def test_filename_too_long(self):
        # filename (including extension) is more than 50 characters
        nits, msg = checker(FULL_DRAFT, name='draft-%s.txt' % ('a'*50)).any_filename_too_long()
        self.assertEqual(messages(nits), ["File name is 60 characters long"])
        self.assertEqual(checker(FULL_DRAFT).any_filename_too_long()[0], [])

class CheckerTestCase(TestCase):

    def test_check_severities(self):
        items = checker(FULL_DRAFT).check()
        self.assertEqual(items['err'], [])
        self.assertEqual(summaries(items['warn']), ["Found the Obsoletes or Updates header field not in ascending order"])
        self.assertEqual(summaries(items['comm']), ["Found 8 obsoleted or updated RFCs not mentioned in the Abstract"])
        for s in items:
            for nits, msg in items[s]:
                self.assertFalse(msg.endswith('.'), msg)

    def test_modes(self):
        text = make_doc(META_BLOCK, ABSTRACT_BLOCK, PROBLEM_BLOCK, "   x = 1; /* set x */\n")
        normal = checker(text).check()
        self.assertIn("Found no Introduction section, or an empty one", summaries(normal['err']))
        lenient = checker(text, mode='lenient').check()
        self.assertIn("Found no Introduction section, or an empty one", summaries(lenient['warn']))
        submission = checker(text, mode='submission').check()
        self.assertNotIn("Found no Introduction section, or an empty one",
            summaries(submission['err'] + submission['warn'] + submission['comm']))
        self.assertIn("Found 1 possible code comment outside of '<CODE BEGINS>' and '<CODE ENDS>' lines",
            summaries(submission['warn']))

    def test_unknown_mode(self):
        with self.assertRaises(RuntimeError):
            checker(FULL_DRAFT, mode='paranoid').check()

    def test_rfc_checks(self):
        c = checker(FULL_DRAFT, name='rfc9999.txt')
        names = [ check.func.__name__ for check in c.get_checks() ]
        self.assertNotIn('any_filename_base_not_docname', names)
        self.assertEqual(names.count('any_section_iana_missing'), 1)

    def test_non_text_input(self):
        doc = Doc(name='draft-foo-00.xml', type='xml')
        items = Checker(doc, make_options()).check()
        self.assertEqual(summaries(items['err']), ["Input type text is required"])

class CommandLineTestCase(TestCase):

    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.path = os.path.join(self.dir, DRAFT_NAME)
        with io.open(self.path, 'w', encoding='utf-8') as f:
            f.write(FULL_DRAFT)

    def tearDown(self):
        shutil.rmtree(self.dir)

    def run_main(self, *args):
        out, err = io.StringIO(), io.StringIO()
        with patch('sys.argv', ['draftnits'] + list(args)), patch('sys.stdout', out), patch('sys.stderr', err):
            with self.assertRaises(SystemExit) as cm:
                main()
        return cm.exception.code, out.getvalue(), err.getvalue()

    def test_check_file(self):
        code, out, err = self.run_main(self.path)
        self.assertEqual(code, 0)
        self.assertIn("Inspecting file %s" % self.path, out)
        self.assertIn("Found 0 errors, ", out)

    def test_check_file_verbose(self):
        code, out, err = self.run_main('-v', '-m', 'normal', self.path)
        self.assertIn("%s(5): Obsoletes: 5678, 1234, 2345, 3456 is not in ascending order" % self.path, out)

    def test_missing_file(self):
        code, out, err = self.run_main(self.path, os.path.join(self.dir, 'draft-missing-00.txt'))
        self.assertEqual(code, 1)
        self.assertIn("Could not read the file.  No checks were run", out)
        self.assertEqual(out.count("Inspecting file"), 2)

    def test_no_documents(self):
        code, out, err = self.run_main()
        self.assertEqual(code, 1)
        self.assertIn("No documents given", err)

    def test_version(self):
        code, out, err = self.run_main('--version')
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith('draftnits '))

    def test_trace_methods(self):
        with self.assertLogs('draftnits.utils', level='DEBUG') as cm:
            code, out, err = self.run_main('-d', '--trace-methods', 'finish, step', self.path)
        self.assertEqual(code, 0)
        self.assertTrue(any( "* step('idr Z. Zhang') [#" in line for line in cm.output ), cm.output[:2])
        self.assertTrue(any( "==> <ScanState line 1, section None>" in line for line in cm.output ), cm.output[:2])

    def test_trace_needs_debug(self):
        with patch('draftnits.utils.log') as log:
            code, out, err = self.run_main('--trace-all', self.path)
        self.assertEqual(code, 0)
        log.debug.assert_not_called()

    def test_help_lists_options(self):
        code, out, err = self.run_main('--help')
        self.assertEqual(code, 0)
        for name in vars(default_options):
            if name not in ['docs', 'today']:
                self.assertIn('--' + name.replace('_', '-'), out)

    def test_commalist(self):
        self.assertEqual(commalist('step, finish ,parse'), ['step', 'finish', 'parse'])

    def test_parse_error(self):
        with patch('draftnits.parser.find_domains', side_effect=ValueError('boom')):
            items = check_file(self.path, make_options())
        self.assertEqual(items['err'], [([Nit(1, 'boom')], "Found a parse error while processing file.  No checks were run")])

    def test_report(self):
        out = io.StringIO()
        items = dict(err=[([Nit(3, "Bad thing")], "Found a bad thing")], warn=[], comm=[([Nit(None, "Note")], "Found a note")])
        errors = report('draft-foo-00.txt', items, verbose=True, out=out)
        self.assertEqual(errors, 1)
        output = out.getvalue()
        self.assertIn("Error:\n", output)
        self.assertIn("draft-foo-00.txt(3): Bad thing\n", output)
        self.assertIn("draft-foo-00.txt: Note\n", output)
        self.assertIn("Found 1 error, 0 warnings, 1 comment.", output)
