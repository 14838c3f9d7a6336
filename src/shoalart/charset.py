import logging
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import numpy as np

from shoalart.builtin import BUILTIN_GLYPHS
from shoalart.container import CHARSET_HEADER, open_reader, open_writer
from shoalart.errors import InputError
from shoalart.features import SIGNATURE_LENGTH
from shoalart.matching import CandidateSet

log = logging.getLogger(__name__)

# codepoint, width flag, signature
RECORD = struct.Struct(f">IB{SIGNATURE_LENGTH}f")

BLANK = " "
BLANK_SIGNATURE = (-32.0,) + (0.0,) * (SIGNATURE_LENGTH - 1)


def valid_codepoint(codepoint: int) -> bool:
    return codepoint <= 0x10FFFF and not 0xD800 <= codepoint <= 0xDFFF


@dataclass
class Charset:
    glyphs: dict[str, tuple[bool, tuple[float, ...]]] = field(default_factory=dict)

    def __post_init__(self):
        glyphs = self.glyphs
        self.glyphs = {}
        for char, (full_width, signature) in glyphs.items():
            self.add(char, full_width, signature)

    def __len__(self) -> int:
        return len(self.glyphs)

    def __contains__(self, char: str) -> bool:
        return char in self.glyphs

    def add(self, char: str, full_width: bool, signature: Iterable[float]) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        # stored as float32 values so a save/load round trip is exact
        signature = tuple(float(v) for v in np.asarray(list(signature), dtype=np.float32))
        if len(signature) != SIGNATURE_LENGTH:
            raise ValueError(f"Signature of {char!r} has {len(signature)} components, expected {SIGNATURE_LENGTH}")
        self.glyphs[char] = (bool(full_width), signature)

    def split(self) -> tuple[CandidateSet, CandidateSet]:
        """Partition into (half-width, full-width) candidate sets."""
        half = [(c, sig) for c, (full, sig) in self.glyphs.items() if not full]
        full = [(c, sig) for c, (full, sig) in self.glyphs.items() if full]
        return CandidateSet(half, full_width=False), CandidateSet(full, full_width=True)

    def save(self, path: str | Path) -> None:
        with open_writer(path, CHARSET_HEADER) as body:
            for char, (full_width, signature) in self.glyphs.items():
                body.write(RECORD.pack(ord(char), int(full_width), *signature))

    @classmethod
    def load(cls, path: str | Path) -> "Charset":
        """Read a charset file.

        Records are packed back to back; reading ends at the end of the stream
        or at a short trailing record. Records with an invalid codepoint are
        dropped.
        """
        glyphs: dict[str, tuple[bool, tuple[float, ...]]] = {}
        with open_reader(path, CHARSET_HEADER) as body:
            while True:
                data = body.read(RECORD.size)
                if len(data) != RECORD.size:
                    if data:
                        log.debug("Ignoring %d trailing bytes in %s", len(data), path)
                    break
                codepoint, width, *signature = RECORD.unpack(data)
                if not valid_codepoint(codepoint):
                    log.debug("Skipping record with invalid codepoint %#x in %s", codepoint, path)
                    continue
                glyphs[chr(codepoint)] = (width != 0, tuple(signature))
        return cls(glyphs)

    @classmethod
    def merge(cls, charsets: Iterable["Charset"]) -> "Charset":
        """Union of charsets keyed by character; later charsets win on collision."""
        merged = cls()
        for charset in charsets:
            merged.glyphs.update(charset.glyphs)
        if not merged.glyphs:
            raise InputError("No inputs")
        return merged

    def sorted_entries(self) -> list[tuple[str, bool, tuple[float, ...]]]:
        return sorted(((c, full, sig) for c, (full, sig) in self.glyphs.items()), key=lambda e: ord(e[0]))


def default_charset() -> Charset:
    """Charset used when none is given: printable ASCII, rendered ahead of time."""
    return Charset({char: (False, signature) for char, signature in BUILTIN_GLYPHS})
