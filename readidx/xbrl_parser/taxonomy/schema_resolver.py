# Path: readidx/xbrl_parser/taxonomy/schema_resolver.py
"""
Taxonomy Schema Resolver

Discovers every schema reachable from an entry schema and collects
their concepts, linkbase references and role references.

Traversal is a worklist owned by a single resolve() call:
- pop a location, skip it if its canonical path was already visited
- load it with SchemaLoader
- push every import / include / redefine target

Remote locations are fetched once into the taxonomy cache. A schema
that cannot be found, fetched or parsed is recorded as a warning and
skipped; the resolver returns whatever the other documents provided.

Example:
    resolver = SchemaResolver()
    taxonomy = resolver.resolve(Path("extracted/Taxonomy.xsd"), Path("cache/taxonomy"))
    print(len(taxonomy.concepts), len(taxonomy.visited))
"""

import logging
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, field

import requests

from ...config_loader import ConfigLoader
from ..foundation.uri_resolver import URIResolver
from ..foundation.http_fetcher import HTTPFetcher
from ..models.concept import Concept
from ..models.error import ParsingError, ErrorCategory, ErrorSeverity
from .schema_loader import SchemaLoader, LinkbaseRef, RoleRef


@dataclass
class TaxonomyResolution:
    """
    Everything gathered from a taxonomy.

    Attributes:
        concepts: (namespace, local name) -> Concept
        linkbase_refs: linkbaseRef entries in discovery order
        role_refs: roleRef entries in discovery order
        visited: Canonical paths of every schema attempted
        errors: Warnings for skipped schemas
    """
    concepts: dict[tuple[str, str], Concept] = field(default_factory=dict)
    linkbase_refs: list[LinkbaseRef] = field(default_factory=list)
    role_refs: list[RoleRef] = field(default_factory=list)
    visited: list[Path] = field(default_factory=list)
    errors: list[ParsingError] = field(default_factory=list)

    def add_concept(self, concept: Concept) -> None:
        """Register a concept, merging into an existing entry for the same key."""
        existing = self.concepts.get(concept.key)
        if existing is None:
            self.concepts[concept.key] = concept
        else:
            existing.merge(concept)


class SchemaResolver:
    """
    Recursive taxonomy resolution over a local worklist.

    Example:
        resolver = SchemaResolver(config, fetcher=fake_fetcher)
        taxonomy = resolver.resolve(entry_path, cache_dir)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        fetcher: Optional[HTTPFetcher] = None
    ):
        """
        Initialize schema resolver.

        Args:
            config: Configuration loader
            fetcher: Remote fetcher override (tests pass a fake)
        """
        self.config = config or ConfigLoader()
        self.logger = logging.getLogger(__name__)
        self.loader = SchemaLoader(self.config)
        self.fetcher = fetcher

    def resolve(self, root_schema: Path, cache_dir: Optional[Path] = None) -> TaxonomyResolution:
        """
        Resolve a taxonomy starting at root_schema.

        Args:
            root_schema: Entry schema path
            cache_dir: Directory for remotely fetched schemas

        Returns:
            TaxonomyResolution
        """
        uri_resolver = URIResolver(self.config, cache_dir=cache_dir, fetcher=self.fetcher)
        resolution = TaxonomyResolution()

        visited: set[Path] = set()
        worklist: list[Path] = [Path(root_schema)]

        while worklist:
            schema_path = self._canonical(worklist.pop())
            if schema_path in visited:
                continue
            visited.add(schema_path)
            resolution.visited.append(schema_path)

            result = self.loader.load_schema(schema_path)
            if not result.loaded:
                self._warn(resolution, ErrorCategory.TAXONOMY_LOAD_FAILED,
                           f"Skipping schema {schema_path}", result.errors, schema_path)
                continue

            for concept in result.concepts:
                resolution.add_concept(concept)
            resolution.linkbase_refs.extend(result.linkbase_refs)
            resolution.role_refs.extend(result.role_refs)

            for directive in result.imports:
                target = self._locate(uri_resolver, directive.schema_location,
                                      schema_path.parent, resolution)
                if target is not None and self._canonical(target) not in visited:
                    worklist.append(target)

        self.logger.info(
            f"Taxonomy resolved: {len(resolution.visited)} schemas, "
            f"{len(resolution.concepts)} concepts, "
            f"{len(resolution.errors)} skipped"
        )
        return resolution

    def _locate(
        self,
        uri_resolver: URIResolver,
        location: str,
        base_dir: Path,
        resolution: TaxonomyResolution
    ) -> Optional[Path]:
        """Resolve one directive target; failures become warnings."""
        try:
            return uri_resolver.resolve(location, base_dir)
        except FileNotFoundError as e:
            self._warn(resolution, ErrorCategory.SCHEMA_NOT_FOUND, str(e), [], base_dir)
        except requests.exceptions.RequestException as e:
            self._warn(resolution, ErrorCategory.DOWNLOAD_FAILED,
                       f"Failed to fetch {location}: {e}", [], base_dir)
        except OSError as e:
            self._warn(resolution, ErrorCategory.DOWNLOAD_FAILED,
                       f"Failed to cache {location}: {e}", [], base_dir)
        return None

    def _warn(
        self,
        resolution: TaxonomyResolution,
        category: ErrorCategory,
        message: str,
        causes: list[ParsingError],
        source: Path
    ) -> None:
        """Log a skipped schema and record it on the resolution."""
        details = '; '.join(e.message for e in causes) or None
        self.logger.warning(f"{message}{f' ({details})' if details else ''}")
        resolution.errors.append(ParsingError(
            severity=ErrorSeverity.WARNING,
            category=category,
            message=message,
            details=details,
            source_file=source
        ))

    @staticmethod
    def _canonical(path: Path) -> Path:
        """Absolute path with symlinks and '..' resolved."""
        return Path(path).resolve()


__all__ = ['SchemaResolver', 'TaxonomyResolution']
