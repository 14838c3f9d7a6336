"""Screen capture boundary used by the player to record frames."""

import logging
import time
from pathlib import Path
from typing import Callable, Protocol

import numpy as np
from PIL import Image, ImageGrab

log = logging.getLogger(__name__)

ATTEMPTS = 10
RETRY_DELAY = 0.003


class FrameNotReady(Exception):
    """The capturer has no new frame yet; try again shortly."""


class Capturer(Protocol):
    width: int
    height: int

    def frame(self) -> bytes:
        """Return ``width * height`` pixels as packed BGRA bytes or raise FrameNotReady."""
        ...


class ImageGrabCapturer:
    """Grab the primary screen through Pillow's ImageGrab."""

    def __init__(self):
        probe = ImageGrab.grab()
        self.width, self.height = probe.size

    def frame(self) -> bytes:
        image = ImageGrab.grab().convert("RGBA")
        return np.asarray(image)[:, :, [2, 1, 0, 3]].tobytes()


def bgra_to_rgb(raw: bytes, width: int, height: int) -> Image.Image:
    pixels = np.frombuffer(raw, dtype=np.uint8).reshape(height, width, 4)
    return Image.fromarray(np.ascontiguousarray(pixels[:, :, 2::-1]))


def capture_to(
    capturer: Capturer,
    path: Path,
    attempts: int = ATTEMPTS,
    delay: float = RETRY_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Save one captured frame to ``path``; False if no frame became ready in time."""
    for _ in range(attempts):
        try:
            raw = capturer.frame()
        except FrameNotReady:
            sleep(delay)
            continue
        bgra_to_rgb(raw, capturer.width, capturer.height).save(path)
        return True
    log.debug("No frame ready after %d attempts, %s not written", attempts, path)
    return False
