"""
Digest Hash List Loader — builds digest signatures from a text list.

Record format (one per line, surrounding whitespace ignored):

    <hex digest><two spaces><filename>

Each record becomes a SignatureDef whose pattern is the raw digest bytes
and whose label is "<filename> (ripemd160 + sha256 digest)".

Any malformed record is fatal: a partially loaded list would silently
under-report matches.  Blank lines at the end of the content (i.e. a
trailing newline) produce no record; a blank line between records is
treated as malformed.
"""

from __future__ import annotations

import binascii
import logging
from typing import Optional

from .signatures import SignatureDef

logger = logging.getLogger(__name__)

DIGEST_LABEL_SUFFIX = " (ripemd160 + sha256 digest)"
RECORD_SEPARATOR = "  "


class HashListError(ValueError):
    """The hash list could not be read or contains a malformed record."""

    def __init__(
        self,
        message: str,
        source: str = "<string>",
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        part_count: Optional[int] = None,
    ):
        if line_number is not None:
            message = f"{source}:{line_number}: {message}"
        else:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source
        self.line_number = line_number
        self.line = line
        self.part_count = part_count


def _decode_digest(digest_hex: str, source: str, line_number: int, line: str) -> bytes:
    """Strict hex decode (no whitespace, even length, hex digits only)."""
    if not digest_hex:
        raise HashListError("empty digest", source, line_number, line, 2)
    try:
        return binascii.unhexlify(digest_hex)
    except (binascii.Error, ValueError) as exc:
        raise HashListError(
            f"invalid hex digest {digest_hex!r}: {exc}",
            source, line_number, line, 2,
        ) from exc


def parse_hash_list(text: str, source: str = "<string>") -> tuple[SignatureDef, ...]:
    """
    Parse hash list content into digest signatures, in line order.

    Raises HashListError on the first malformed record.
    """
    lines = text.split("\n")

    # Trailing blank lines carry no record
    while lines and not lines[-1].strip():
        lines.pop()

    entries: list[SignatureDef] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        parts = line.split(RECORD_SEPARATOR)
        if len(parts) != 2:
            raise HashListError(
                f"len(parts) = {len(parts)}: {line!r}",
                source, line_number, line, len(parts),
            )

        digest_hex, filename = parts[0].strip(), parts[1].strip()
        digest = _decode_digest(digest_hex, source, line_number, line)
        if not filename:
            raise HashListError("empty filename", source, line_number, line, 2)

        entries.append(SignatureDef(filename + DIGEST_LABEL_SUFFIX, digest))

    return tuple(entries)


def load_hash_list(path: str) -> tuple[SignatureDef, ...]:
    """
    Read a UTF-8 hash list file and return its digest signatures.

    Unreadable or undecodable files raise HashListError chained to the
    underlying error.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
        text = raw.decode("utf-8")
    except OSError as exc:
        raise HashListError(f"cannot read hash list: {exc}", str(path)) from exc
    except UnicodeDecodeError as exc:
        raise HashListError(f"hash list is not valid UTF-8: {exc}", str(path)) from exc

    entries = parse_hash_list(text, source=str(path))
    logger.info("Loaded %d digest signatures from %s", len(entries), path)
    return entries
