# Path: readidx/xbrl_parser/concept_registry.py
"""
Concept Registry

Deduplicates concept definitions keyed by (namespace, local name).

Taxonomy declarations and fact-derived stubs are folded together with
Concept.merge(): a value already present is never overwritten, empty
metadata is backfilled. After persistence, each key is bound to the
database identity used to link facts to their concept.

Example:
    registry = ConceptRegistry()
    registry.register_all(taxonomy.concepts.values())
    registry.register_all(instance.missing_concepts.values())

    for concept in registry.concepts():
        concept_id = operations.upsert_concept(session, concept)
        registry.bind_identity(concept.key, concept_id)

    registry.identity_for(fact.concept.key)
"""

import logging
from typing import Iterable, Iterator, Optional

from .models.concept import Concept


class ConceptRegistry:
    """
    Merged concept set for one import.

    Example:
        registry = ConceptRegistry()
        registry.register(Concept.stub("http://example.com", "Revenue"))
        len(registry)  # 1
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._concepts: dict[tuple[str, str], Concept] = {}
        self._identities: dict[tuple[str, str], int] = {}

    def register(self, concept: Concept) -> Concept:
        """
        Add a concept or merge it into the entry with the same key.

        Args:
            concept: Taxonomy declaration or fact-derived stub

        Returns:
            The registered (possibly merged) Concept
        """
        existing = self._concepts.get(concept.key)
        if existing is None:
            self._concepts[concept.key] = concept
            return concept

        existing.merge(concept)
        return existing

    def register_all(self, concepts: Iterable[Concept]) -> None:
        for concept in concepts:
            self.register(concept)

    def get(self, key: tuple[str, str]) -> Optional[Concept]:
        return self._concepts.get(key)

    def concepts(self) -> list[Concept]:
        """Registered concepts in registration order."""
        return list(self._concepts.values())

    def stubs(self) -> list[Concept]:
        """Concepts known only from facts."""
        return [c for c in self._concepts.values() if c.is_stub]

    def bind_identity(self, key: tuple[str, str], identity: int) -> None:
        """
        Record the durable identity (database id) of a concept.

        Raises:
            KeyError: If the concept was never registered
        """
        if key not in self._concepts:
            raise KeyError(f"Concept not registered: {key}")
        self._identities[key] = identity

    def identity_for(self, key: tuple[str, str]) -> Optional[int]:
        """Durable identity bound to key, or None."""
        return self._identities.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._concepts

    def __len__(self) -> int:
        return len(self._concepts)

    def __iter__(self) -> Iterator[Concept]:
        return iter(self._concepts.values())


__all__ = ['ConceptRegistry']
