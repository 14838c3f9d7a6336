"""Build a charset by rasterizing glyphs from a font."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from wcwidth import wcwidth

from shoalart.charset import BLANK, BLANK_SIGNATURE, Charset
from shoalart.errors import SkippedItem
from shoalart.features import BLOCK_SIZE, block_from_pixels, dct_4x8_signature, dct_8x8_signature

log = logging.getLogger(__name__)

CANVAS_SIZE = 96
FONT_SIZE = 64
GLYPH_OFFSET = 16


@dataclass(frozen=True)
class Adaptive:
    """Fit each glyph's bounding box into the cell."""


@dataclass(frozen=True)
class Compatibility:
    """Cut every glyph at the same fixed rectangle (relative to the glyph origin)."""

    width: int = 64
    height: int = 64
    left: int = 0
    top: int = 0


def display_width(char: str) -> int | None:
    """Terminal columns taken by ``char``: 1 or 2, or None if it has no usable width."""
    width = wcwidth(char)
    return width if width in (1, 2) else None


def _adaptive_cell(canvas: Image.Image, full_width: bool) -> Image.Image:
    sx, sy, ex, ey = canvas.getbbox()
    glyph = canvas.crop((sx, sy, ex, ey))
    lx, ly = ex - sx, ey - sy
    # pad the short side to a square, keeping the glyph centred
    if lx > ly:
        side, left, top = lx, 0, (lx - ly) // 2
    else:
        side, left, top = ly, (ly - lx) // 2, 0
    if not full_width:
        # a half-width glyph fills the left half of a double-sized square
        side *= 2
        top = (side - ly) // 2
    square = Image.new("L", (side, side), 0)
    square.paste(glyph, (left, top))
    return square.resize((BLOCK_SIZE, BLOCK_SIZE), Image.BILINEAR)


def _compat_cell(font: ImageFont.FreeTypeFont, char: str, area: Compatibility) -> tuple[Image.Image, Image.Image]:
    canvas = Image.new("L", (CANVAS_SIZE, CANVAS_SIZE), 0)
    ImageDraw.Draw(canvas).text((GLYPH_OFFSET + area.left, GLYPH_OFFSET + area.top), char, fill=255, font=font)
    box = (GLYPH_OFFSET, GLYPH_OFFSET, GLYPH_OFFSET + area.width, GLYPH_OFFSET + area.height)
    return canvas, canvas.crop(box).resize((BLOCK_SIZE, BLOCK_SIZE), Image.BILINEAR)


class CharsetBuilder:
    """Rasterize characters from a font and compute their signatures.

    Characters without a terminal width of 1 or 2 columns, or without a
    visible outline in the font, are skipped and listed in ``skipped``.
    """

    def __init__(
        self,
        font_path: str | Path,
        mode: Adaptive | Compatibility | None = None,
        dump_dir: Path | None = None,
    ):
        self.font = ImageFont.truetype(str(font_path), FONT_SIZE)
        self.mode = mode if mode is not None else Adaptive()
        self.dump_dir = Path(dump_dir) if dump_dir is not None else None
        self.skipped: list[str] = []

    def render(self, char: str) -> tuple[bool, Image.Image]:
        """Return (full_width, 8x8 grayscale cell) for ``char``, or raise SkippedItem."""
        width = display_width(char)
        if width is None:
            raise SkippedItem(char, "no display width")
        full_width = width == 2

        canvas = Image.new("L", (CANVAS_SIZE, CANVAS_SIZE), 0)
        ImageDraw.Draw(canvas).text((GLYPH_OFFSET, GLYPH_OFFSET), char, fill=255, font=self.font)
        if canvas.getbbox() is None:
            raise SkippedItem(char, "no visible outline")

        if isinstance(self.mode, Compatibility):
            canvas, cell = _compat_cell(self.font, char, self.mode)
        else:
            cell = _adaptive_cell(canvas, full_width)

        if self.dump_dir is not None:
            self._dump(char, canvas, cell, full_width)
        return full_width, cell

    def _dump(self, char: str, canvas: Image.Image, cell: Image.Image, full_width: bool) -> None:
        name = f"U{ord(char):04X}.png"
        canvas.save(self.dump_dir / f"_{name}")
        if full_width:
            preview = cell.resize((48, 48), Image.NEAREST)
        else:
            preview = cell.crop((0, 0, 4, 8)).resize((24, 48), Image.NEAREST)
        preview.save(self.dump_dir / name)

    def signature(self, char: str) -> tuple[bool, tuple[float, ...]]:
        full_width, cell = self.render(char)
        block = block_from_pixels(np.asarray(cell))
        if full_width:
            return True, dct_8x8_signature(block)
        return False, dct_4x8_signature(block)

    def build(self, characters: str, progress: Callable[[str], None] | None = None) -> Charset:
        """Build a charset holding the blank glyph plus every renderable character."""
        if self.dump_dir is not None:
            self.dump_dir.mkdir(parents=True, exist_ok=True)
        charset = Charset()
        charset.add(BLANK, False, BLANK_SIGNATURE)
        for char in dict.fromkeys(characters):
            try:
                full_width, signature = self.signature(char)
            except SkippedItem as e:
                log.info("Skipped %s", e)
                self.skipped.append(char)
                if progress is not None:
                    progress("K")
                continue
            charset.add(char, full_width, signature)
            if progress is not None:
                progress(".")
        return charset


def build_charset(
    font_path: str | Path,
    characters: str,
    mode: Adaptive | Compatibility | None = None,
    dump_dir: Path | None = None,
) -> Charset:
    return CharsetBuilder(font_path, mode=mode, dump_dir=dump_dir).build(characters)
