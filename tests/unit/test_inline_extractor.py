# Path: tests/unit/test_inline_extractor.py
"""
Unit Tests for Inline Fact Extraction

Tests:
- Well-formed XHTML pages
- Malformed HTML pages recovered by the lenient parser
- Flat instance members
- Member dispatch by extension
- Archive-wide extraction and its failure modes
"""

import io
import zipfile
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from lxml import etree

from readidx.xbrl_parser.foundation.xml_parser import ParseMode
from readidx.xbrl_parser.ixbrl.inline_extractor import (
    InlineFactExtractor,
    member_kind,
    get_attribute,
)
from readidx.xbrl_parser.ixbrl.archive_extractor import ArchiveFactExtractor
from readidx.xbrl_parser.models.error import (
    ArchiveError,
    ErrorCategory,
    NoFactsFoundError,
)
from readidx.xbrl_parser.models.fact import InlineFact

from fixtures.sample_data import (
    create_flat_instance,
    create_inline_archive,
    create_inline_html,
    create_inline_xhtml,
    create_zip,
    write_zip,
)


def _rows(facts):
    return [(f.line_item, f.value, f.unit) for f in facts]


class TestMemberDispatch:
    """Tests for member_kind() and get_attribute()."""

    @pytest.mark.parametrize('name,kind', [
        ('report.xhtml', 'inline'),
        ('dir/Report.HTML', 'inline'),
        ('instance.xbrl', 'instance'),
        ('INSTANCE.XML', 'instance'),
        ('Taxonomy.xsd', None),
        ('readme.txt', None),
        ('noextension', None),
    ])
    def test_member_kind(self, name, kind):
        assert member_kind(name) == kind

    def test_get_attribute_ignores_case(self):
        elem = etree.Element('fact', unitref='USD')
        assert get_attribute(elem, 'unitRef') == 'USD'

    def test_get_attribute_exact_match_first(self):
        elem = etree.Element('fact', unitRef='IDR')
        assert get_attribute(elem, 'unitRef') == 'IDR'

    def test_get_attribute_missing(self):
        assert get_attribute(etree.Element('fact'), 'decimals') is None


class TestInlineFactExtractor:
    """Tests for InlineFactExtractor."""

    def test_xhtml_page(self, mock_config):
        extractor = InlineFactExtractor(mock_config)

        facts = extractor.extract('page.xhtml', create_inline_xhtml())

        assert _rows(facts) == [
            ('idx-cor:Revenue', Decimal('1234567'), 'IDR'),
            ('idx-cor:NetIncome', Decimal('-45678.90'), 'IDR'),
        ]
        assert extractor.last_parse.mode == ParseMode.XML

    def test_html_fallback_folds_case(self, mock_config):
        extractor = InlineFactExtractor(mock_config)

        facts = extractor.extract('page.html', create_inline_html())

        assert extractor.last_parse.recovered
        assert _rows(facts) == [
            ('idx-cor:Assets', Decimal('1234.56'), 'USD'),
            ('idx-cor:Cash', Decimal('12345'), 'IDR'),
        ]

    def test_decimals_attribute_rounds(self, mock_config):
        content = create_inline_xhtml([
            {'name': 'idx-cor:Ratio', 'value': '12,345', 'unitRef': 'pure', 'decimals': '1'},
        ])

        facts = InlineFactExtractor(mock_config).extract('page.xhtml', content)

        assert facts == [InlineFact('idx-cor:Ratio', Decimal('12345'), 'pure')]

    def test_non_numeric_tag_with_number(self, mock_config):
        content = create_inline_xhtml([
            {'name': 'idx-cor:SharesOutstanding', 'value': '2.048.000', 'tag': 'nonNumeric'},
        ])

        facts = InlineFactExtractor(mock_config).extract('page.xhtml', content)

        assert _rows(facts) == [('idx-cor:SharesOutstanding', Decimal('2048000'), 'IDR')]

    def test_default_unit_from_config(self, mock_config):
        mock_config.get.side_effect = lambda key, default=None: (
            'USD' if key == 'default_unit' else default
        )
        content = create_inline_xhtml([{'name': 'idx-cor:Cash', 'value': '10'}])

        facts = InlineFactExtractor(mock_config).extract('page.xhtml', content)

        assert facts[0].unit == 'USD'

    def test_flat_instance(self, mock_config):
        facts = InlineFactExtractor(mock_config).extract('filing.xbrl', create_flat_instance())

        assert _rows(facts) == [
            ('Cash', Decimal('5000000'), 'IDR'),
            ('Equity', Decimal('750.5'), 'IDR'),
        ]

    def test_ignored_member(self, mock_config):
        extractor = InlineFactExtractor(mock_config)

        assert extractor.extract('readme.txt', b'1.000') == []
        assert extractor.last_parse is None

    def test_unreadable_instance_member(self, mock_config):
        extractor = InlineFactExtractor(mock_config)

        assert extractor.extract('broken.xml', b'<xbrl>') == []
        assert not extractor.last_parse.ok

    def test_to_dict_uses_canonical_value(self):
        fact = InlineFact('idx-cor:Cash', Decimal('1E+3'), 'IDR')
        assert fact.to_dict() == {'line_item': 'idx-cor:Cash', 'value': '1000', 'unit': 'IDR'}


class TestArchiveFactExtractor:
    """Tests for ArchiveFactExtractor."""

    def test_extracts_all_members_in_order(self, mock_config):
        result = ArchiveFactExtractor(mock_config).extract_archive(create_inline_archive())

        assert [f.line_item for f in result.facts] == [
            'idx-cor:Revenue', 'idx-cor:NetIncome', 'Cash', 'Equity',
        ]
        assert result.members_scanned == 2
        assert result.members_with_facts == 2
        assert result.errors == []

    def test_reads_archive_from_path(self, mock_config, temp_dir):
        path = write_zip(temp_dir / 'report.zip', {'page.xhtml': create_inline_xhtml()})

        result = ArchiveFactExtractor(mock_config).extract_archive(path)

        assert len(result.facts) == 2

    def test_unreadable_member_skipped(self, mock_config):
        archive = create_zip({
            'broken.xbrl': b'<xbrl',
            'page.xhtml': create_inline_xhtml(),
        })

        result = ArchiveFactExtractor(mock_config).extract_archive(archive)

        assert len(result.facts) == 2
        assert result.members_scanned == 2
        assert result.members_with_facts == 1
        assert result.errors[0].category == ErrorCategory.ARCHIVE_MEMBER_SKIPPED

    def test_member_failing_crc_skipped(self, mock_config):
        damaged = b'<html><body>laporan rusak</body></html>'
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_STORED) as archive:
            archive.writestr('broken.xhtml', damaged)
            archive.writestr('page.xhtml', create_inline_xhtml())
        content = buffer.getvalue()
        # Flip one stored payload byte so the CRC check fails on read
        at = content.index(damaged)
        content = content[:at] + b'=' + content[at + 1:]

        result = ArchiveFactExtractor(mock_config).extract_archive(content)

        assert len(result.facts) == 2
        assert result.members_scanned == 2
        assert result.members_with_facts == 1
        assert len(result.errors) == 1
        assert result.errors[0].category == ErrorCategory.ARCHIVE_MEMBER_SKIPPED
        assert 'broken.xhtml' in result.errors[0].message

    def test_single_parenthesized_fact(self, mock_config):
        archive = create_zip({
            'laporan.xhtml': create_inline_xhtml([
                {'name': 'Revenue', 'value': '(1,000)', 'unitRef': 'u1', 'decimals': '0'},
            ]),
        })

        result = ArchiveFactExtractor(mock_config).extract_archive(archive)

        assert result.facts == [InlineFact('Revenue', Decimal('-1000'), 'u1')]

    def test_no_facts_raises(self, mock_config):
        archive = create_zip({
            'readme.txt': b'teks',
            'page.xhtml': create_inline_xhtml([]),
        })

        with pytest.raises(NoFactsFoundError) as exc_info:
            ArchiveFactExtractor(mock_config).extract_archive(archive)

        assert str(exc_info.value) == 'Tidak ditemukan fakta keuangan pada arsip yang diunggah.'

    def test_not_a_zip_raises(self, mock_config):
        with pytest.raises(ArchiveError):
            ArchiveFactExtractor(mock_config).extract_archive(b'bukan zip')

    def test_member_extractor_override(self, mock_config):
        member_extractor = MagicMock()
        member_extractor.extract.return_value = [InlineFact('X', Decimal('1'), 'IDR')]
        member_extractor.last_parse = None
        archive = create_zip({'a.html': b'', 'b.txt': b'', 'c.xml': b''})

        result = ArchiveFactExtractor(mock_config, member_extractor).extract_archive(archive)

        assert len(result.facts) == 2
        called = [c.args[0] for c in member_extractor.extract.call_args_list]
        assert called == ['a.html', 'c.xml']
