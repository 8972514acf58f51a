"""Mini README: Abstract interface describing the persistence medium.

Structure:
    * BlobStore - get/set contract for opaque text blobs addressed by key.

The ledger only ever reads one key at startup and rewrites that key after
each change, so implementations need nothing beyond these two calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional


class BlobStore(ABC):
    """Base interface for key-value blob persistence."""

    store_name: str = "generic"

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under ``key`` or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, blob: str) -> bool:
        """Store ``blob`` under ``key``, returning ``False`` when the write failed."""

    def copy(self, source_key: str, target_key: str) -> bool:
        """Duplicate the blob under ``source_key`` without interpreting it.

        An absent source counts as success since there is nothing to keep.
        """

        blob = self.get(source_key)
        if blob is None:
            return True
        return self.set(target_key, blob)

    def describe(self) -> Dict[str, str]:
        """Return diagnostic metadata for status output."""

        return {"store": self.store_name}
