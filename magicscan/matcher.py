"""
Match Engine — substring containment of signature patterns.

Each signature contributes at most one MatchResult per call, no matter
how many times its pattern occurs.  Output follows the order of the
signature table passed in.
"""

from typing import Iterable

from .signatures import SignatureDef, MatchResult


def reverse_bytes(pattern: bytes) -> bytes:
    """Return a new bytes object with the byte order fully reversed."""
    return bytes(pattern[::-1])


def scan_signatures(
    data: bytes,
    signatures: Iterable[SignatureDef],
    reversed: bool = False,
) -> list[MatchResult]:
    """
    Search data for every signature, in table order.

    With reversed=True each pattern is byte-reversed before the search and
    hits are flagged as reversed.
    """
    matches = []
    for sig in signatures:
        pattern = reverse_bytes(sig.pattern) if reversed else sig.pattern
        if pattern in data:
            matches.append(MatchResult(filetype=sig.label, reversed=reversed))
    return matches
