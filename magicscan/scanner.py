"""
Magic Byte Scanner — public entry points.

    initialize("./wlhashes/ripemd160-sha256-hashes.txt")
    for hit in search_data_for_magic_file_bytes(blob):
        print(describe(hit))

MagicScanner binds an explicit database and config, for callers that do
not want the process-wide instance.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .signatures import MatchResult
from .database import SignatureDatabase, get_database
from .parallel import ParallelScanConfig, build_partitions, search_partitions

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(data: BytesLike) -> Union[bytes, bytearray]:
    if isinstance(data, memoryview):
        return data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"expected bytes-like data, got {type(data).__name__}")
    return data


def search_data_for_magic_file_bytes(
    data: Optional[BytesLike],
    database: Optional[SignatureDatabase] = None,
    config: Optional[ParallelScanConfig] = None,
) -> list[MatchResult]:
    """
    Report which signatures occur in data, forward and byte-reversed.

    None yields [] without touching any table.  An empty but present blob
    is scanned normally (and matches nothing).  Results are ordered:
    static forward, static reversed, digest forward, digest reversed,
    each in table order.
    """
    if data is None:
        return []
    data = _as_bytes(data)

    if database is None:
        database = get_database()

    return search_partitions(data, build_partitions(database), config)


def describe(result: MatchResult) -> str:
    """'<filetype>' or '<filetype> (reversed)'."""
    return result.description


class MagicScanner:
    """Scanner bound to one signature database."""

    def __init__(
        self,
        database: Optional[SignatureDatabase] = None,
        config: Optional[ParallelScanConfig] = None,
    ):
        self.database = database if database is not None else get_database()
        self.config = config or ParallelScanConfig()
        self._partitions = build_partitions(self.database)

    def search(self, data: Optional[BytesLike]) -> list[MatchResult]:
        if data is None:
            return []
        return search_partitions(_as_bytes(data), self._partitions, self.config)

    def search_file(self, path: str) -> list[MatchResult]:
        """Read a whole file and scan it."""
        with open(path, "rb") as f:
            data = f.read()
        matches = self.search(data)
        logger.debug("%s: %d bytes, %d matches", path, len(data), len(matches))
        return matches
