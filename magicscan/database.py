"""
Signature Database — the static table plus the loaded digest table.

The process-wide database is built exactly once by initialize(), before
any scan runs.  A load failure propagates to the caller; only the entry
point decides that it is fatal.  Scanning code never reaches for the
global itself unless no database is passed in explicitly.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .signatures import SignatureDef, FILE_MAGIC_BYTES
from .hashlist import load_hash_list, parse_hash_list

logger = logging.getLogger(__name__)

DEFAULT_HASH_LIST_PATH = "./wlhashes/ripemd160-sha256-hashes.txt"


class DatabaseNotInitializedError(RuntimeError):
    """A scan was requested before the signature database was loaded."""


@dataclass(frozen=True)
class SignatureDatabase:
    """Immutable pair of signature tables."""
    static: tuple[SignatureDef, ...] = FILE_MAGIC_BYTES
    digests: tuple[SignatureDef, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "static", tuple(self.static))
        object.__setattr__(self, "digests", tuple(self.digests))

    def __len__(self) -> int:
        return len(self.static) + len(self.digests)

    @classmethod
    def from_hash_list_text(cls, text: str, source: str = "<string>") -> "SignatureDatabase":
        return cls(digests=parse_hash_list(text, source=source))


def load_signature_database(hash_list_path: str = DEFAULT_HASH_LIST_PATH) -> SignatureDatabase:
    """Build a database from the compiled-in table and a hash list file."""
    return SignatureDatabase(digests=load_hash_list(hash_list_path))


# ── Process-wide instance ──
_database: Optional[SignatureDatabase] = None
_init_lock = threading.Lock()


def initialize(hash_list_path: str = DEFAULT_HASH_LIST_PATH) -> SignatureDatabase:
    """
    Load the process-wide signature database.

    Runs the loader at most once; later calls return the stored database.
    On failure nothing is stored and the HashListError propagates.
    """
    global _database
    with _init_lock:
        if _database is not None:
            logger.debug("Signature database already initialized (%d entries)", len(_database))
            return _database
        db = load_signature_database(hash_list_path)
        _database = db
        logger.info(
            "Signature database ready: %d static, %d digest signatures",
            len(db.static), len(db.digests),
        )
        return db


def get_database() -> SignatureDatabase:
    """Return the process-wide database, or raise if startup never completed."""
    db = _database
    if db is None:
        raise DatabaseNotInitializedError(
            "signature database not initialized; call initialize() first")
    return db


def is_initialized() -> bool:
    return _database is not None
