# Path: tests/integration/test_xbrl_import_pipeline.py
"""
Integration Tests for the XBRL Archive Import

Runs XBRLImportService end to end: archive extraction, taxonomy
resolution over a circular import chain, instance parsing and
persistence into in-memory SQLite.
"""

import io
import shutil
import zipfile
from decimal import Decimal

import pytest
from sqlalchemy import inspect

from readidx.database import session_scope, get_engine
from readidx.database.models.xbrl import (
    XBRLDocument,
    TaxonomyConcept,
    TaxonomyLinkbase,
    TaxonomyRoleRef,
    XBRLContext,
    XBRLContextDimension,
    XBRLUnit,
    XBRLFact,
)
from readidx.services import XBRLImportService, bootstrap_schema
from readidx.xbrl_parser.models.error import ArchiveError

from fixtures.sample_data import IDX_EXT_NS, create_xbrl_archive, write_zip


@pytest.fixture
def archive_path(temp_dir):
    path = temp_dir / 'filing.zip'
    path.write_bytes(create_xbrl_archive())
    return path


@pytest.fixture
def import_service(mock_config, in_memory_db, fake_fetcher):
    return XBRLImportService(mock_config, fetcher=fake_fetcher)


class TestXBRLImportPipeline:
    """End-to-end import of instance + taxonomy archives."""

    def test_summary_counts(self, import_service, archive_path, temp_dir):
        summary = import_service.run(archive_path, cache_dir=temp_dir / 'cache')

        assert summary.document_name == 'filing.zip'
        assert summary.contexts == 3
        assert summary.units == 2
        assert summary.facts == 6
        assert summary.concepts == 6
        assert summary.linkbases == 1
        assert summary.role_refs == 1
        assert summary.schemas_visited == 3
        assert summary.warnings == []
        assert summary.temp_dir is None

    def test_rows_written(self, import_service, archive_path, temp_dir, fake_fetcher):
        import_service.run(archive_path, cache_dir=temp_dir / 'cache')

        with session_scope() as session:
            assert session.query(XBRLDocument).count() == 1
            assert session.query(TaxonomyConcept).count() == 6
            assert session.query(TaxonomyLinkbase).one().href == 'core-lab.xml'
            assert session.query(TaxonomyRoleRef).one().role_uri == 'http://www.idx.co.id/role/BalanceSheet'
            assert session.query(XBRLContext).count() == 3
            assert session.query(XBRLContextDimension).count() == 2
            assert session.query(XBRLUnit).count() == 2

            facts = session.query(XBRLFact).order_by(XBRLFact.id).all()
            assert facts[0].value_decimal == Decimal('1000000')
            assert facts[1].value_decimal == Decimal('2500000.50')
            assert facts[5].value_string == '1,000,000'
            assert facts[5].value_decimal is None
            assert all(f.concept_id is not None for f in facts)

        fake_fetcher.fetch.assert_not_called()

    def test_fact_only_concept_stored_as_stub(self, import_service, archive_path, temp_dir):
        import_service.run(archive_path, cache_dir=temp_dir / 'cache')

        with session_scope() as session:
            stub = session.query(TaxonomyConcept).filter_by(
                namespace=IDX_EXT_NS, local_name='CustomItem'
            ).one()
            assert stub.qname == 'idx-ext:CustomItem'
            assert stub.period_type is None
            assert stub.abstract_flag is False
            assert stub.nillable_flag is True

            revenue = session.query(TaxonomyConcept).filter_by(local_name='Revenue').one()
            assert revenue.documentation == 'Pendapatan usaha'
            assert revenue.balance == 'credit'

    def test_reimport_replaces_rows(self, import_service, archive_path, temp_dir):
        first = import_service.run(archive_path, cache_dir=temp_dir / 'cache')
        second = import_service.run(archive_path, cache_dir=temp_dir / 'cache')

        assert first.document_id == second.document_id
        with session_scope() as session:
            assert session.query(XBRLDocument).count() == 1
            assert session.query(XBRLFact).count() == 6
            assert session.query(XBRLContext).count() == 3
            assert session.query(XBRLContextDimension).count() == 2
            assert session.query(TaxonomyConcept).count() == 6
            assert session.query(TaxonomyRoleRef).count() == 1

    def test_keep_temp(self, import_service, archive_path, temp_dir):
        summary = import_service.run(archive_path, cache_dir=temp_dir / 'cache', keep_temp=True)

        try:
            assert (summary.temp_dir / 'filing' / 'Taxonomy.xsd').is_file()
        finally:
            shutil.rmtree(summary.temp_dir)

    def test_missing_taxonomy_member(self, import_service, temp_dir):
        path = temp_dir / 'filing.zip'
        path.write_bytes(create_xbrl_archive(include_taxonomy=False))

        with pytest.raises(ArchiveError, match='Taxonomy.xsd'):
            import_service.run(path, cache_dir=temp_dir / 'cache')

        with session_scope() as session:
            assert session.query(XBRLDocument).count() == 0

    def test_unreadable_archive(self, import_service, temp_dir):
        path = temp_dir / 'filing.zip'
        path.write_bytes(b'bukan zip')

        with pytest.raises(ArchiveError):
            import_service.run(path, cache_dir=temp_dir / 'cache')

    def test_missing_imported_schema_is_warning(self, import_service, temp_dir):
        members = {
            'filing/instance.xbrl': create_xbrl_archive_member('filing/INSTANCE.XBRL'),
            'filing/Taxonomy.xsd': create_xbrl_archive_member('filing/Taxonomy.xsd'),
        }
        path = write_zip(temp_dir / 'partial.zip', members)

        summary = import_service.run(path, cache_dir=temp_dir / 'cache')

        assert summary.facts == 6
        assert len(summary.warnings) == 1
        # Every fact concept is a stub without core.xsd
        assert summary.concepts == 4


def create_xbrl_archive_member(name):
    """Single member of the standard import archive."""
    with zipfile.ZipFile(io.BytesIO(create_xbrl_archive())) as archive:
        return archive.read(name)


class TestBootstrapSchema:
    """bootstrap_schema() with an SQL file."""

    def test_applies_statements(self, in_memory_db, temp_dir):
        schema = temp_dir / 'schema.sql'
        schema.write_text(
            'CREATE TABLE audit_log (id INTEGER PRIMARY KEY, note TEXT);\n'
            'CREATE INDEX ix_audit_note ON audit_log (note);\n',
            encoding='utf-8',
        )

        bootstrap_schema(schema)

        assert 'audit_log' in inspect(get_engine()).get_table_names()
