import struct
from pathlib import Path
from typing import NamedTuple

import numpy as np
from PIL import Image

from shoalart.charset import Charset, valid_codepoint
from shoalart.container import ART_HEADER, open_reader, open_writer
from shoalart.errors import FormatError
from shoalart.features import BLOCK_SIZE, HALF_WIDTH, block_from_pixels
from shoalart.matching import CandidateSet, best_match

COUNT = struct.Struct(">H")
CELL = struct.Struct(">3sI")


class Cell(NamedTuple):
    color: tuple[int, int, int]
    char: str


Art = list[list[Cell]]


def _sample_colour(color: Image.Image, x: int, y: int, width: int) -> tuple[int, int, int]:
    region = color.crop((x, y, x + width, y + BLOCK_SIZE))
    return region.resize((1, 1), Image.BILINEAR).getpixel((0, 0))


def encode_band(
    draft: np.ndarray, color: Image.Image, y: int, half: CandidateSet, full: CandidateSet, scratch: np.ndarray
) -> list[Cell]:
    """Match glyphs left to right over the 8-row band starting at ``y``.

    Columns left over at the right edge that cannot fill a half cell are dropped.
    """
    width = draft.shape[1]
    line = []
    x = 0
    while x < width - HALF_WIDTH:
        wider = x < width - BLOCK_SIZE
        span = BLOCK_SIZE if wider else HALF_WIDTH
        scratch.fill(-1.0)
        scratch[:, :span] = block_from_pixels(draft[y : y + BLOCK_SIZE, x : x + span])
        match = best_match(scratch, half, full, wider)
        line.append(Cell(_sample_colour(color, x, y, span), match.char))
        x += BLOCK_SIZE if match.full_width else HALF_WIDTH
    return line


def encode_art(draft: Image.Image, color: Image.Image, charset: Charset) -> Art:
    """Convert a grayscale draft and its colour image into lines of cells.

    The colour image is resized to the draft's size if they differ. Only
    complete 8-row bands are encoded.
    """
    draft = draft.convert("L")
    color = color.convert("RGB")
    if color.size != draft.size:
        color = color.resize(draft.size, Image.LANCZOS)
    half, full = charset.split()
    pixels = np.asarray(draft)
    scratch = np.full((BLOCK_SIZE, BLOCK_SIZE), -1.0)
    bands = draft.height // BLOCK_SIZE
    return [encode_band(pixels, color, band * BLOCK_SIZE, half, full, scratch) for band in range(bands)]


def save_art(path: str | Path, art: Art) -> None:
    if len(art) > 0xFFFF:
        raise ValueError(f"Too many lines: {len(art)}")
    with open_writer(path, ART_HEADER) as body:
        body.write(COUNT.pack(len(art)))
        for line in art:
            if len(line) > 0xFFFF:
                raise ValueError(f"Too many cells in a line: {len(line)}")
            body.write(COUNT.pack(len(line)))
            for color, char in line:
                body.write(CELL.pack(bytes(color), ord(char)))


def load_art(path: str | Path) -> Art:
    with open_reader(path, ART_HEADER) as body:
        (line_count,) = COUNT.unpack(body.read_exact(COUNT.size))
        art: Art = []
        for _ in range(line_count):
            (cell_count,) = COUNT.unpack(body.read_exact(COUNT.size))
            data = body.read_exact(cell_count * CELL.size)
            line = []
            for raw, codepoint in CELL.iter_unpack(data):
                if not valid_codepoint(codepoint):
                    raise FormatError(f"Invalid codepoint {codepoint:#x}")
                line.append(Cell(tuple(raw), chr(codepoint)))
            art.append(line)
    return art


def make_art(draft: Image.Image, color: Image.Image, charset: Charset, path: str | Path) -> Art:
    """Encode ``draft`` with ``charset`` and write the result to ``path``."""
    art = encode_art(draft, color, charset)
    save_art(path, art)
    return art
