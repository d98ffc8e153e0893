# SPDX-License-Identifier: Apache-2.0
"""Cache file layout and writing."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Permission mode of created cache directories
CACHE_DIR_MODE = 0o755

LANGUAGE_FILE_SUFFIX = ".php"
APPLET_CACHE_DIR = "flash"


class CacheLayout:
    """Paths of cache entries under a root directory.

    Every path is a pure function of the root and the target identifiers,
    so a rerun overwrites the same files.
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    @property
    def cache_dir(self) -> Path:
        """Directory holding all cache entries."""
        return self._root / "cache"

    def application_file(self, application: str, language: str) -> Path:
        """Path of an application language file."""
        return self.cache_dir / application / f"{language}{LANGUAGE_FILE_SUFFIX}"

    def applet_file(self, language: str) -> Path:
        """Path of an applet language XML.

        The applet is not part of the path: applets sharing a language
        overwrite each other's file.
        """
        return self.cache_dir / APPLET_CACHE_DIR / f"lang_{language}.xml"


def write_cache(root_dir: Path | str, sub_path: Path | str, payload: str | bytes) -> bool:
    """Write a payload into the cache.

    Args:
        root_dir: Cache root directory.
        sub_path: Destination relative to ``root_dir``.
        payload: Content to store (text is UTF-8 encoded).

    Returns:
        True if every byte of the payload was written.

    Raises:
        OSError: If the destination directory cannot be created.
    """
    destination = Path(root_dir) / sub_path
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    logger.debug("Writing %d bytes to %s", len(data), destination)

    if not destination.parent.is_dir():
        destination.parent.mkdir(mode=CACHE_DIR_MODE, parents=True, exist_ok=True)

    try:
        with open(destination, "wb") as f:
            written = f.write(data)
    except OSError as e:
        logger.warning("Failed to write %s: %s", destination, e)
        return False

    return written == len(data)
