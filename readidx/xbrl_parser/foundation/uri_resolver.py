# Path: readidx/xbrl_parser/foundation/uri_resolver.py
"""
URI Resolution

Turns a schemaLocation into a local file that can be parsed.

Features:
- Remote http(s) locations fetched once into the taxonomy cache
- file:// locations
- Relative paths against the referencing schema, then the working directory
"""

from pathlib import Path
from typing import Optional
import logging

from ...config_loader import ConfigLoader
from .http_fetcher import HTTPFetcher
from .taxonomy_cache import TaxonomyCache
from ..constants import REMOTE_SCHEMES, FILE_SCHEME


class URIResolver:
    """
    Resolve schema locations to local paths.

    Example:
        resolver = URIResolver(config, cache_dir=Path("cache/taxonomy"))
        path = resolver.resolve("http://www.xbrl.org/2003/xbrl-instance-2003-12-31.xsd",
                                base_dir=Path("extracted"))
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        cache_dir: Optional[Path] = None,
        fetcher: Optional[HTTPFetcher] = None,
        cache: Optional[TaxonomyCache] = None
    ):
        """
        Initialize URI resolver.

        Args:
            config: Optional ConfigLoader instance
            cache_dir: Cache directory (defaults to taxonomy_cache_dir)
            fetcher: Remote fetcher (created lazily when first needed)
            cache: Cache store (built from cache_dir when omitted)
        """
        self.config = config if config else ConfigLoader()
        self.logger = logging.getLogger(__name__)

        if cache is None:
            cache_dir = cache_dir or self.config.get('taxonomy_cache_dir') or Path('cache/taxonomy')
            cache = TaxonomyCache(Path(cache_dir))
        self.cache = cache
        self._fetcher = fetcher

    @property
    def fetcher(self) -> HTTPFetcher:
        if self._fetcher is None:
            self._fetcher = HTTPFetcher(self.config)
        return self._fetcher

    @staticmethod
    def is_remote(location: str) -> bool:
        """Check for an http(s) URL."""
        return location.lower().startswith(REMOTE_SCHEMES)

    def resolve(self, location: str, base_dir: Path) -> Path:
        """
        Resolve a schema location.

        Args:
            location: schemaLocation attribute value
            base_dir: Directory of the referencing schema

        Returns:
            Local path of the schema document

        Raises:
            FileNotFoundError: Local location does not exist
            requests.RequestException: Remote fetch failed
        """
        location = location.strip()

        if self.is_remote(location):
            return self._resolve_remote(location)

        if location.lower().startswith(FILE_SCHEME):
            location = location[len(FILE_SCHEME):]
            # Absolute file URLs keep their leading slash and win the join
            return (Path(base_dir) / location).resolve()

        candidate = Path(base_dir) / location
        if candidate.exists():
            return candidate.resolve()

        fallback = Path.cwd() / location
        if fallback.exists():
            return fallback.resolve()

        raise FileNotFoundError(f"Schema not found: {location} (base {base_dir})")

    def _resolve_remote(self, url: str) -> Path:
        """Return the cached copy of url, fetching it on first use."""
        path = self.cache.path_for(url)
        if self.cache.exists(path):
            self.logger.debug(f"Cache hit for {url}")
            return path

        content, _ = self.fetcher.fetch(url)
        self.cache.write(path, content)
        return path


__all__ = ['URIResolver']
