"""List the entries of a ZIP archive without reading member data."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import IO

from ArcTree.models import PathEntry

logger = logging.getLogger(__name__)


class ArchiveError(Exception):
    """Raised when an archive cannot be opened or listed."""


def read_zip_entries(source: str | Path | IO[bytes]) -> list[PathEntry]:
    """Return the central directory of a ZIP archive as path entries.

    Entries keep archive order; names decoded by :mod:`zipfile` (UTF-8 flag
    or CP437) are used as-is. Entries with an empty name are skipped since
    the empty path is reserved for the tree root.
    """
    try:
        with zipfile.ZipFile(source) as archive:
            infos = archive.infolist()
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as exc:
        raise ArchiveError(f"Not a readable ZIP archive: {exc}") from exc
    except OSError as exc:
        raise ArchiveError(f"Cannot open archive: {exc}") from exc

    entries: list[PathEntry] = []
    for info in infos:
        if not info.filename:
            logger.warning("Skipping ZIP entry with an empty name")
            continue
        entries.append(
            PathEntry(
                path=info.filename,
                is_directory=info.is_dir(),
                size=info.file_size,
            )
        )
    return entries
