import re
from pathlib import Path
from typing import NamedTuple

from PIL import Image, ImageOps

from shoalart.errors import InputError

_CROP = re.compile(r"^(-?\d+)x(-?\d+)\+(-?\d+)\+(-?\d+)$")
_SIZE = re.compile(r"^(\d+)x(\d+)$")


class CropArea(NamedTuple):
    width: int
    height: int
    left: int
    top: int

    @classmethod
    def parse(cls, text: str) -> "CropArea":
        """Parse ``{width}x{height}+{left}+{top}``."""
        match = _CROP.match(text.strip())
        if not match:
            raise InputError(f"Invalid syntax: {text!r} (expected WxH+L+T)")
        return cls(*(int(v) for v in match.groups()))

    @property
    def box(self) -> tuple[int, int, int, int]:
        return (self.left, self.top, self.left + self.width, self.top + self.height)


def parse_crop(text: str) -> CropArea:
    """Parse a crop box; offsets may be negative, the size may not."""
    area = CropArea.parse(text)
    if area.width <= 0 or area.height <= 0:
        raise InputError(f"Invalid crop {text!r}: width and height must be positive")
    return area


def parse_size(text: str) -> tuple[int, int]:
    """Parse ``{width}x{height}``."""
    match = _SIZE.match(text.strip())
    if not match:
        raise InputError(f"Invalid syntax: {text!r} (expected WxH)")
    width, height = int(match.group(1)), int(match.group(2))
    if width == 0 or height == 0:
        raise InputError(f"Invalid size {text!r}: width and height must be positive")
    return width, height


def prepare_image(
    image: Image.Image,
    crop: CropArea | None = None,
    resize: tuple[int, int] | None = None,
    zoom: float | None = None,
) -> Image.Image:
    """Crop, then resize to a fixed size or by a zoom factor."""
    if crop is not None:
        image = image.crop(crop.box)
    if resize is not None:
        image = image.resize(resize, Image.LANCZOS)
    elif zoom is not None:
        image = image.resize((int(image.width * zoom), int(image.height * zoom)), Image.LANCZOS)
    return image


def make_draft(image: Image.Image, negate: bool = False) -> Image.Image:
    draft = image.convert("L")
    return ImageOps.invert(draft) if negate else draft


def open_image(path: str | Path) -> Image.Image:
    with Image.open(path) as image:
        image.load()
        return image.convert("RGB")
