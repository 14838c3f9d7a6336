import os
import shutil
import subprocess

import pytest
from PIL import Image

from shoalart.art import Cell, save_art

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    result = shutil.which("fc-match")
    if result:
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip():
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


@pytest.fixture
def sample_art():
    return [
        [Cell((255, 0, 0), "A"), Cell((255, 0, 0), "B"), Cell((0, 0, 255), "中")],
        [],
        [Cell((0, 0, 0), " ")],
    ]


@pytest.fixture
def art_dir(tmp_path, sample_art):
    """A directory with three valid frames."""
    directory = tmp_path / "frames"
    directory.mkdir()
    for n in range(1, 4):
        save_art(directory / f"{n:06d}.shoal", sample_art)
    return directory


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "images"
    directory.mkdir()
    Image.new("RGB", (32, 16), (255, 255, 255)).save(directory / "a.png")
    Image.new("RGB", (32, 16), (0, 0, 0)).save(directory / "b.png")
    return directory
