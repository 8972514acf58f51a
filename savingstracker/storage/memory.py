"""Mini README: Dictionary-backed blob store.

Useful for tests and for embedding the ledger without touching disk. The
``fail_writes`` switch simulates a medium that rejects writes.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..logging_utils import get_logger
from .base import BlobStore

LOGGER = get_logger(__name__)


class MemoryBlobStore(BlobStore):
    """Keep blobs in a plain dictionary."""

    store_name = "memory"

    def __init__(self, initial: Optional[Dict[str, str]] = None, *, fail_writes: bool = False) -> None:
        self.blobs: Dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes
        self.write_count = 0

    def get(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def set(self, key: str, blob: str) -> bool:
        if self.fail_writes:
            LOGGER.warning("Rejecting write to '%s' (fail_writes enabled)", key)
            return False
        self.blobs[key] = blob
        self.write_count += 1
        return True

    def describe(self) -> Dict[str, str]:
        return {"store": self.store_name, "keys": str(len(self.blobs))}
