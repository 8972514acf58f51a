"""Mini README: Directory-backed blob store.

Structure:
    * FileBlobStore - persists each key as ``<directory>/<key>.json``.

Writes land in a temporary sibling file first and are moved into place with
``os.replace`` so a crash never leaves a half-written ledger behind.
"""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path
from typing import Dict, Optional, Union

from ..logging_utils import get_logger
from .base import BlobStore

LOGGER = get_logger(__name__)

_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class FileBlobStore(BlobStore):
    """Store blobs as UTF-8 files inside a single directory."""

    store_name = "file"

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        LOGGER.debug("File blob store rooted at %s", self.directory)

    def path_for(self, key: str) -> Path:
        """Return the file backing ``key``, rejecting keys that could escape the directory."""

        if not _KEY_RE.fullmatch(key or "") or ".." in key:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, blob: str) -> bool:
        path = self.path_for(key)
        temp_path = path.with_name(f"{path.name}.tmp")
        try:
            temp_path.write_text(blob, encoding="utf-8")
            os.replace(temp_path, path)
        except OSError as error:
            LOGGER.error("Could not write %s: %s", path, error)
            temp_path.unlink(missing_ok=True)
            return False
        LOGGER.debug("Wrote %s bytes to %s", len(blob), path)
        return True

    def copy(self, source_key: str, target_key: str) -> bool:
        """Copy the raw file so undecodable content is preserved byte for byte."""

        source = self.path_for(source_key)
        target = self.path_for(target_key)
        if not source.exists():
            return True
        try:
            shutil.copy2(source, target)
        except OSError as error:
            LOGGER.error("Could not copy %s to %s: %s", source, target, error)
            return False
        return True

    def describe(self) -> Dict[str, str]:
        return {"store": self.store_name, "directory": str(self.directory)}
