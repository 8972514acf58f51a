"""Mini README: Key-value blob stores used to persist the ledger.

Exports the ``BlobStore`` interface together with an in-memory store for
tests and embedding, and a directory-backed store for the command line.
"""

from .base import BlobStore
from .file_store import FileBlobStore
from .memory import MemoryBlobStore

__all__ = ["BlobStore", "FileBlobStore", "MemoryBlobStore"]
