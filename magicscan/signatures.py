"""
File Magic Signature Table — headers, footers and marker strings.

DESIGN RATIONALE
────────────────
The scanner does NOT classify files.  It only answers "does this blob
contain these bytes anywhere?", so each entry is a plain label + pattern:
  • Office OLE2 formats (DOC, XLS, PPT) — share one compound-document header
  • Archives            (ZIP, 7z, RAR, GZ, TAR, DMG) — headers and footers
  • Media               (JPG, PNG, GIF, OGG, WAV, AVI, MIDI)
  • Documents           (PDF, EPUB, torrent metainfo)
  • PGP armour prefixes ("mQ..." base64 of public key packets by key size)
  • Leak markers        (plain-text names seen in leaked archives)

Table order is part of the output contract: results are reported in
the order entries appear in FILE_MAGIC_BYTES, never sorted.

Exported:
  • SignatureDef      — one registered pattern
  • MatchResult       — one reported hit
  • FILE_MAGIC_BYTES  — the compiled-in table (tuple, immutable)
"""

from dataclasses import dataclass


REVERSED_SUFFIX = " (reversed)"


@dataclass(frozen=True)
class SignatureDef:
    """A named byte pattern to search for."""
    label: str
    pattern: bytes

    def __post_init__(self):
        if not self.label:
            raise ValueError("signature label must not be empty")
        if not self.pattern:
            raise ValueError(f"signature {self.label!r} has an empty pattern")
        if not isinstance(self.pattern, bytes):
            object.__setattr__(self, "pattern", bytes(self.pattern))

    @property
    def hex(self) -> str:
        return self.pattern.hex(" ")


@dataclass(frozen=True)
class MatchResult:
    """One hit reported by the scanner."""
    filetype: str
    reversed: bool = False

    @property
    def description(self) -> str:
        if self.reversed:
            return self.filetype + REVERSED_SUFFIX
        return self.filetype

    def to_dict(self) -> dict:
        return {"filetype": self.filetype, "reversed": self.reversed}


# OLE2 compound document header, shared by DOC / XLS / PPT
_OLE2_HEADER = b"\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1"


# ═════════════════════════════════════════════════════════════
#  FILE_MAGIC_BYTES — searched anywhere in the blob
# ═════════════════════════════════════════════════════════════

FILE_MAGIC_BYTES: tuple[SignatureDef, ...] = (
    # ── Office (OLE2) ──
    SignatureDef("DOC Header",             _OLE2_HEADER),
    SignatureDef("DOC Footer",             b"Word.Document."),
    SignatureDef("XLS Header",             _OLE2_HEADER),
    SignatureDef("XLS Footer",             b"\xFE\xFF\xFF\xFF\x00\x00\x00\x00\x00\x00\x00\x00"
                                           b"W\x00o\x00r\x00k\x00b\x00o\x00o\x00k\x00"),  # UTF-16LE "Workbook"
    SignatureDef("PPT Header",             _OLE2_HEADER),
    SignatureDef("PPT Footer",             b"\xA0\x46\x1D\xF0"),

    # ── ZIP family ──
    SignatureDef("ZIP Header",             b"PK\x03\x04\x14"),
    SignatureDef("ZIP Footer",             b"PK\x05\x06\x00"),
    SignatureDef("ZIPLock Footer",         b"PK\x03\x04\x14\x00\x01\x00\x63\x00\x00\x00\x00\x00"),

    # ── Images ──
    SignatureDef("JPG Header",             b"\xFF\xD8\xFF\xE0\x00\x10JFIF\x00\x01\x01"),
    SignatureDef("GIF Header",             b"GIF89a"),
    SignatureDef("GIF Footer",             b"\x21\x00\x00\x3B\x00"),

    # ── Documents ──
    SignatureDef("PDF Header",             b"%PDF"),
    SignatureDef("PDF Header (alternate)", b"&#205"),
    SignatureDef("PDF Footer",             b"%%EOF"),
    SignatureDef("Torrent Header",         b"announce"),

    # ── Compressed ──
    SignatureDef("GZ Header",              b"\x1F\x8B\x08\x08"),
    SignatureDef("TAR Header",             b"\x1F\x8B\x08\x00"),
    SignatureDef("TAR.GZ Header",          b"\x1F\x9D\x90\x70"),
    SignatureDef("EPUB Header",            b"PK\x03\x04\x0A\x00\x02\x00"),
    SignatureDef("PNG Header",             b"\x89PNG\r\n\x1A\n"),

    # ── PGP key packets (by key size) + RAR4 ──
    SignatureDef("8192 Header",            b"mQQNB"),
    SignatureDef("4096 Header",            b"mQINBFg/"),
    SignatureDef("2048 Header",            b"\x95\x2E\x3E\x2E\x58\x4B\x7A"),
    SignatureDef("Secret Header",          b"Rar!\x1A\x07\x00"),
    SignatureDef("RAR Header",             b"mQENBFg"),

    # ── Audio / video ──
    SignatureDef("OGG Header",             b"OggS"),
    SignatureDef("WAV Header",             b"BIFF"),
    SignatureDef("WAV Header (alternate)", b"WAVE"),
    SignatureDef("AVI Header",             b"BIFF"),
    SignatureDef("AVI Header (alternate)", b"AVI "),
    SignatureDef("MIDI Header",            b"MThd"),

    # ── Archives ──
    SignatureDef("7z Header",              b"7z\xBC\xAF\x27\x1C"),
    SignatureDef("7z Footer",              b"\x00\x00\x00\x17\x06"),
    SignatureDef("DMG Header",             b"\x78\x01\x73\x0D\x62\x62\x60"),

    # ── Leak markers ──
    SignatureDef("Wikileaks",              b"Wikileaks"),
    SignatureDef("Julian Assange",         b"Julian Assange"),
    SignatureDef("Mendax",                 b"Menda\x07"),
)


def get_static_labels() -> list[str]:
    """Labels of the compiled-in table, in table order (duplicates kept)."""
    return [s.label for s in FILE_MAGIC_BYTES]
