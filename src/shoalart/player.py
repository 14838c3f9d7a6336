"""Replay art files on a terminal."""

import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, TextIO

from shoalart.art import Art, load_art
from shoalart.capture import Capturer, capture_to
from shoalart.errors import FormatError
from shoalart.sources import Item, ItemError, SingleItem, Source
from shoalart.terminal import (
    ENTER_ALTERNATE_SCREEN,
    HIDE_CURSOR,
    LEAVE_ALTERNATE_SCREEN,
    NEXT_LINE,
    RESET,
    SHOW_CURSOR,
    KeyPoller,
    foreground,
    move_to,
    raw_mode,
)

log = logging.getLogger(__name__)

DEFAULT_FPS = 5.0
POLL_TIMEOUT = 0.001


class State(Enum):
    IDLE = "idle"
    STREAMING = "streaming"
    SINGLE_FRAME = "single frame"
    CANCELLED = "cancelled"
    EXHAUSTED = "exhausted"


@dataclass
class PlaybackResult:
    frames: int = 0
    invalid: int = 0
    cancelled: bool = False


def render_art(art: Art, origin: tuple[int, int] = (0, 0), monochrome: bool = False) -> str:
    """Escape sequences drawing ``art`` with its top-left corner at ``origin``.

    A colour is only emitted when it differs from the previous cell's.
    """
    x, y = origin
    parts = []
    current = None
    for row, line in enumerate(art):
        parts.append(move_to(x, y + row))
        for color, char in line:
            if not monochrome and color != current:
                current = color
                parts.append(foreground(*color))
            parts.append(char)
    return "".join(parts)


def render_invalid(reason: str, origin: tuple[int, int] = (0, 0)) -> str:
    return f"{move_to(*origin)}{RESET}Invalid frame: {reason}"


class Player:
    """Plays a single art file, or a directory of them as an animation.

    With ``fps > 0`` each frame is held until ``1 / fps`` seconds have passed
    since the previous one; late frames are shown as soon as they are ready.
    Ctrl-C or Escape stops a running animation. When a capturer is given,
    every frame of an animation is also saved as a numbered PNG in
    ``capture_dir``.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        origin: tuple[int, int] = (0, 0),
        fps: float = DEFAULT_FPS,
        monochrome: bool = False,
        keyboard: TextIO | None = None,
        poller: KeyPoller | None = None,
        capturer: Capturer | None = None,
        capture_dir: Path | None = None,
        counter: int = 1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.out = out if out is not None else sys.stdout
        self.origin = origin
        self.fps = fps
        self.monochrome = monochrome
        self.keyboard = keyboard if keyboard is not None else sys.stdin
        self.poller = poller if poller is not None else KeyPoller(self.keyboard)
        self.capturer = capturer
        self.capture_dir = Path(capture_dir) if capture_dir is not None else None
        self.counter = counter
        self.clock = clock
        self.sleep = sleep
        self.state = State.IDLE

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    @contextmanager
    def _screen(self, single: bool) -> Iterator[None]:
        if single:
            try:
                yield
            finally:
                self._write(NEXT_LINE + SHOW_CURSOR + RESET)
            return
        with raw_mode(self.keyboard):
            self._write(ENTER_ALTERNATE_SCREEN + HIDE_CURSOR)
            try:
                yield
            finally:
                self._write(LEAVE_ALTERNATE_SCREEN + SHOW_CURSOR + RESET)

    def show(self, item: Item) -> bool:
        """Draw one frame; a frame that cannot be read is replaced by a diagnostic line."""
        try:
            if isinstance(item, ItemError):
                raise FormatError(item.message)
            art = load_art(item)
        except (OSError, FormatError) as e:
            log.warning("Invalid frame %s: %s", item, e)
            self._write(render_invalid(str(e), self.origin))
            return False
        self._write(render_art(art, self.origin, self.monochrome))
        return True

    def _pace(self, started: float) -> float:
        budget = 1.0 / self.fps - (self.clock() - started)
        if budget > 0:
            self.sleep(budget)
        return self.clock()

    def _capture(self) -> None:
        path = self.capture_dir / f"{self.counter:06d}.png"
        try:
            saved = capture_to(self.capturer, path)
        except OSError as e:
            log.warning("Capture of %s failed, frame dropped: %s", path, e)
            return
        # numbers only advance when a frame was actually saved
        if saved:
            self.counter += 1

    def play(self, source: Source) -> PlaybackResult:
        single = isinstance(source, SingleItem)
        capturing = not single and self.capturer is not None and self.capture_dir is not None
        result = PlaybackResult()
        self.state = State.SINGLE_FRAME if single else State.STREAMING
        with self._screen(single):
            started = self.clock()
            try:
                for item in source:
                    if self.show(item):
                        result.frames += 1
                    else:
                        result.invalid += 1
                    if self.poller.cancelled(POLL_TIMEOUT):
                        result.cancelled = True
                        break
                    if self.fps > 0:
                        started = self._pace(started)
                    if capturing:
                        self._capture()
            except KeyboardInterrupt:
                result.cancelled = True
        self.state = State.CANCELLED if result.cancelled else State.EXHAUSTED
        return result
