# Path: readidx/xbrl_parser/foundation/archive_reader.py
"""
Archive Reader

Read-only access to uploaded ZIP archives.

Features:
- Member enumeration in archive order (directories skipped)
- Member reads as raw bytes
- Extraction to a directory with path traversal protection
- Case-insensitive member lookup by file name
"""

from pathlib import Path
from typing import Iterator, Optional, Union
import io
import logging
import zipfile

from ..models.error import ArchiveError


class ArchiveReader:
    """
    ZIP archive reader.

    Accepts a path or the raw archive bytes.

    Example:
        with ArchiveReader(Path("report.zip")) as archive:
            for name in archive.member_names():
                content = archive.read(name)
    """

    def __init__(self, source: Union[Path, str, bytes]):
        """
        Open the archive.

        Args:
            source: Path to a ZIP file or its bytes

        Raises:
            ArchiveError: If the archive cannot be opened
        """
        self.logger = logging.getLogger(__name__)
        self.source_name = '<bytes>' if isinstance(source, bytes) else str(source)

        try:
            handle = io.BytesIO(source) if isinstance(source, bytes) else str(source)
            self._zip = zipfile.ZipFile(handle)
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(f"Tidak dapat membuka arsip ZIP: {self.source_name}") from e

    def __enter__(self) -> 'ArchiveReader':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    def member_names(self) -> list[str]:
        """Names of file members in archive order."""
        return [info.filename for info in self._zip.infolist() if not info.is_dir()]

    def iter_members(self) -> Iterator[tuple[str, bytes]]:
        """Yield (name, content) for every file member."""
        for name in self.member_names():
            yield name, self.read(name)

    def read(self, name: str) -> bytes:
        """
        Read one member.

        Raises:
            ArchiveError: If the member cannot be read
        """
        try:
            return self._zip.read(name)
        except (KeyError, zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(f"Cannot read archive member {name}: {e}") from e

    def find_member(self, file_name: str) -> Optional[str]:
        """First member whose base name matches file_name, ignoring case."""
        target = file_name.lower()
        for name in self.member_names():
            if Path(name).name.lower() == target:
                return name
        return None

    def extract_all(self, target_dir: Path) -> Path:
        """
        Extract every member below target_dir.

        Raises:
            ArchiveError: If a member would land outside target_dir
        """
        target_dir = Path(target_dir).resolve()
        for info in self._zip.infolist():
            destination = (target_dir / info.filename).resolve()
            if destination != target_dir and target_dir not in destination.parents:
                raise ArchiveError(f"Archive member escapes extraction directory: {info.filename}")

        self._zip.extractall(target_dir)
        self.logger.debug(f"Extracted {self.source_name} to {target_dir}")
        return target_dir


__all__ = ['ArchiveReader']
