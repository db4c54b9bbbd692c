# Path: readidx/services/xbrl_import_service.py
"""
XBRL Import Service

Standalone importer for archives holding a classic instance document
(instance.xbrl) and its entry taxonomy schema (Taxonomy.xsd).

Workflow:
1. Extract the archive to a temporary directory
2. Resolve the taxonomy, following imports and fetching remote schemas
3. Parse the instance document
4. Merge taxonomy concepts with fact-derived stubs
5. Persist everything in one transaction
6. Remove the temporary directory (unless keep_temp)

Example:
    initialize_engine()
    bootstrap_schema()

    summary = XBRLImportService().run(Path("filing.zip"))
    print(summary.facts, summary.concepts)
"""

import hashlib
import shutil
import tempfile
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Union

from sqlalchemy import text

from ..config_loader import ConfigLoader
from ..constants import (
    INSTANCE_FILE_NAME,
    TAXONOMY_FILE_NAME,
    MSG_ARCHIVE_MISSING_MEMBERS,
)
from ..core.logger import get_input_logger, get_process_logger, get_output_logger
from ..database import session_scope, get_engine, create_all_tables, XBRLOperations
from ..xbrl_parser.concept_registry import ConceptRegistry
from ..xbrl_parser.foundation.archive_reader import ArchiveReader
from ..xbrl_parser.foundation.http_fetcher import HTTPFetcher
from ..xbrl_parser.instance import InstanceParser
from ..xbrl_parser.models.error import ArchiveError, ParsingError
from ..xbrl_parser.taxonomy import SchemaResolver


@dataclass
class ImportSummary:
    """Counts of what one import stored."""
    document_id: int
    document_name: str
    contexts: int = 0
    units: int = 0
    facts: int = 0
    concepts: int = 0
    linkbases: int = 0
    role_refs: int = 0
    schemas_visited: int = 0
    warnings: list[ParsingError] = field(default_factory=list)
    temp_dir: Optional[Path] = None


class XBRLImportService:
    """
    Imports instance + taxonomy archives into the XBRL tables.

    Example:
        service = XBRLImportService(config)
        summary = service.run(zip_path, cache_dir=Path("cache/taxonomy"), keep_temp=True)
        print(f"Extracted to {summary.temp_dir}")
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        fetcher: Optional[HTTPFetcher] = None
    ):
        """
        Initialize import service.

        Args:
            config: Configuration loader
            fetcher: Remote schema fetcher override
        """
        self.config = config or ConfigLoader()
        self.input_logger = get_input_logger('xbrl_archive')
        self.logger = get_process_logger('xbrl_import')
        self.output_logger = get_output_logger('xbrl_persistence')

        self.schema_resolver = SchemaResolver(self.config, fetcher=fetcher)
        self.instance_parser = InstanceParser(self.config)

    def run(
        self,
        zip_path: Union[Path, str],
        cache_dir: Optional[Path] = None,
        keep_temp: bool = False
    ) -> ImportSummary:
        """
        Import one archive.

        Args:
            zip_path: Archive holding instance.xbrl and Taxonomy.xsd
            cache_dir: Remote schema cache (defaults to taxonomy_cache_dir)
            keep_temp: Leave the extraction directory in place

        Returns:
            ImportSummary

        Raises:
            ArchiveError: Archive unreadable or members missing
            InstanceParseError: Instance document is not parseable
        """
        zip_path = Path(zip_path)
        cache_dir = Path(cache_dir or self.config.get('taxonomy_cache_dir') or 'cache/taxonomy')
        temp_dir = Path(tempfile.mkdtemp(prefix='readidx_xbrl_'))

        try:
            with ArchiveReader(zip_path) as archive:
                archive.extract_all(temp_dir)
            self.input_logger.info(f"Extracted {zip_path.name} to {temp_dir}")

            instance_path = self._find_file(temp_dir, INSTANCE_FILE_NAME)
            taxonomy_path = self._find_file(temp_dir, TAXONOMY_FILE_NAME)
            if instance_path is None or taxonomy_path is None:
                raise ArchiveError(MSG_ARCHIVE_MISSING_MEMBERS)

            taxonomy = self.schema_resolver.resolve(taxonomy_path, cache_dir)
            instance = self.instance_parser.parse(instance_path, known_concepts=taxonomy.concepts)

            registry = ConceptRegistry()
            registry.register_all(taxonomy.concepts.values())
            registry.register_all(instance.missing_concepts.values())

            document_hash = hashlib.sha256(instance_path.read_bytes()).hexdigest()

            with session_scope() as session:
                document = XBRLOperations.upsert_document(session, zip_path.name, document_hash)
                summary = ImportSummary(document_id=document.id, document_name=zip_path.name)

                summary.concepts = XBRLOperations.upsert_concepts(session, registry)
                summary.linkbases, summary.role_refs = XBRLOperations.replace_taxonomy_refs(
                    session, document.id, taxonomy.linkbase_refs, taxonomy.role_refs
                )
                summary.contexts = XBRLOperations.replace_contexts(
                    session, document.id, instance.contexts.values()
                )
                summary.units = XBRLOperations.replace_units(
                    session, document.id, instance.units.values()
                )
                summary.facts = XBRLOperations.replace_facts(
                    session, document.id, instance.facts, registry
                )

            summary.schemas_visited = len(taxonomy.visited)
            summary.warnings = taxonomy.errors + instance.errors
            if keep_temp:
                summary.temp_dir = temp_dir

            self.output_logger.info(
                f"Stored document {summary.document_id}: {summary.contexts} contexts, "
                f"{summary.units} units, {summary.facts} facts, {summary.concepts} concepts"
            )
            return summary

        finally:
            if not keep_temp:
                shutil.rmtree(temp_dir, ignore_errors=True)

    @staticmethod
    def _find_file(root: Path, file_name: str) -> Optional[Path]:
        """First file below root whose name matches, ignoring case."""
        target = file_name.lower()
        for path in sorted(root.rglob('*')):
            if path.is_file() and path.name.lower() == target:
                return path
        return None


def bootstrap_schema(schema_file: Optional[Path] = None) -> None:
    """
    Prepare the database tables.

    Args:
        schema_file: SQL file executed statement by statement (split on ';');
            when omitted the declarative tables are created
    """
    logger = get_output_logger('schema')

    if schema_file is None:
        create_all_tables()
        return

    statements = [
        statement.strip()
        for statement in Path(schema_file).read_text(encoding='utf-8').split(';')
        if statement.strip()
    ]
    with get_engine().begin() as connection:
        for statement in statements:
            connection.execute(text(statement))

    logger.info(f"Applied {len(statements)} statements from {schema_file}")


__all__ = ['XBRLImportService', 'ImportSummary', 'bootstrap_schema']
