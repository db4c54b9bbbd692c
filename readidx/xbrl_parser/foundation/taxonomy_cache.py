# Path: readidx/xbrl_parser/foundation/taxonomy_cache.py
"""
File-Based Taxonomy Cache

On-disk cache for remotely fetched schema documents.

Features:
- Filenames derived from the SHA-256 of the source URL
- Original file extension preserved (default .xsd)
- Atomic writes; concurrent writers may race and both download,
  the last rename wins
- Hit/miss statistics
"""

from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
import hashlib
import logging
import os
import tempfile

from ..constants import DEFAULT_SCHEMA_EXTENSION


class TaxonomyCache:
    """
    File-based taxonomy cache.

    Example:
        cache = TaxonomyCache(Path("cache/taxonomy"))

        path = cache.path_for(url)
        if not cache.exists(path):
            content, _ = fetcher.fetch(url)
            cache.write(path, content)
        content = cache.read(path)
    """

    def __init__(self, cache_dir: Path):
        """
        Initialize taxonomy cache.

        Args:
            cache_dir: Directory holding cached schema files
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger(__name__)

        # Statistics
        self.hits = 0
        self.misses = 0

    def path_for(self, url: str) -> Path:
        """
        Cache path for a URL.

        Args:
            url: Absolute http(s) URL

        Returns:
            cache_dir / <sha256(url)><extension>
        """
        digest = hashlib.sha256(url.encode('utf-8')).hexdigest()
        extension = Path(urlparse(url).path).suffix or DEFAULT_SCHEMA_EXTENSION
        return self.cache_dir / f"{digest}{extension}"

    def exists(self, path: Path) -> bool:
        """Check whether a cached file is present."""
        found = Path(path).is_file()
        if found:
            self.hits += 1
        else:
            self.misses += 1
        return found

    def read(self, path: Path) -> bytes:
        """Read a cached file."""
        return Path(path).read_bytes()

    def write(self, path: Path, content: bytes) -> None:
        """
        Store content at path.

        The content goes to a temporary file in the cache directory and is
        renamed into place, so readers never see a partial file.
        """
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix='.', suffix='.part')
        try:
            with os.fdopen(fd, 'wb') as handle:
                handle.write(content)
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        self.logger.debug(f"Cached {len(content)} bytes at {path.name}")

    def get(self, url: str) -> Optional[bytes]:
        """Content cached for a URL, or None."""
        path = self.path_for(url)
        if not self.exists(path):
            return None
        return self.read(path)

    def get_stats(self) -> dict:
        """Get cache statistics."""
        total = self.hits + self.misses
        return {
            'cache_dir': str(self.cache_dir),
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / total if total > 0 else 0
        }


__all__ = ['TaxonomyCache']
