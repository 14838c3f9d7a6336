import os
import select
import sys
from contextlib import contextmanager
from typing import Iterator

RESET = "\033[0m"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
ENTER_ALTERNATE_SCREEN = "\033[?1049h"
LEAVE_ALTERNATE_SCREEN = "\033[?1049l"
NEXT_LINE = "\033[1E"

CTRL_C = b"\x03"
ESCAPE = b"\x1b"


def move_to(x: int, y: int) -> str:
    """Cursor to column ``x``, row ``y`` (both 0-based)."""
    return f"\033[{y + 1};{x + 1}H"


def foreground(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


@contextmanager
def raw_mode(stream=None) -> Iterator[None]:
    """Put a tty into raw mode for the duration of the block; a no-op elsewhere."""
    stream = stream if stream is not None else sys.stdin
    try:
        import termios
        import tty
    except ImportError:
        yield
        return
    if not stream.isatty():
        yield
        return
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class KeyPoller:
    """Check stdin for Ctrl-C or a lone Escape without blocking for long."""

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin

    def cancelled(self, timeout: float = 0.001) -> bool:
        if not self.stream.isatty():
            return False
        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return False
        data = os.read(fd, 64)
        return CTRL_C in data or data == ESCAPE
