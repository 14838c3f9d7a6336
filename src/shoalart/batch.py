"""Turn one image, or a directory of images, into art files."""

import itertools
import logging
import sys
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

from PIL import Image

from shoalart.art import make_art
from shoalart.charset import Charset
from shoalart.errors import InputError
from shoalart.imaging import CropArea, make_draft, open_image, prepare_image
from shoalart.sources import (
    Item,
    ItemError,
    SingleItem,
    ensure_output_dir,
    ensure_output_file,
    numbered_paths,
    open_source,
)

log = logging.getLogger(__name__)


class Outcome(Enum):
    OK = "."
    NO_INPUT = "E"
    OPEN_FAILED = "F"
    SAVE_FAILED = "S"


class ProgressReporter:
    """Per-item progress: a line per item when verbose, otherwise a single mark."""

    def __init__(self, verbose: bool = False, out: TextIO | None = None, every: int = 100):
        self.verbose = verbose
        self.out = out if out is not None else sys.stdout
        self.every = every

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def start(self, index: int, name: str | None) -> None:
        if self.verbose:
            self._write(f"[{index:06d}] " + (f'"{name}" ' if name else ""))

    def note(self, text: str) -> None:
        if self.verbose:
            self._write(text)

    def finish(self, index: int, outcome: Outcome, detail: str = "") -> None:
        if self.verbose:
            if outcome is Outcome.OK:
                self._write(" - Ok\n")
            elif outcome is Outcome.SAVE_FAILED:
                self._write(f" - Failed to save: {detail}\n")
            else:
                self._write(f"{detail}\n")
        elif outcome is Outcome.OK and index % self.every == 0:
            self._write(f"[{index}]")
        else:
            self._write(outcome.value)


@dataclass
class BatchResult:
    counts: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def ok(self) -> int:
        return self.counts[Outcome.OK]


@dataclass
class ArtJob:
    """Settings for one ``art make`` run.

    ``skip`` and ``step`` select which colour images pair with the sources;
    ``counter`` numbers the output files when the source is a directory.
    """

    source: Path
    output: Path
    charset: Charset
    color: Path | None = None
    crop: CropArea | None = None
    resize: tuple[int, int] | None = None
    zoom: float | None = None
    negate: bool = False
    skip: int = 0
    step: int = 1
    counter: int = 1

    def __post_init__(self):
        if self.step < 1:
            raise InputError(f"Invalid step {self.step}: must be at least 1")
        if self.skip < 0:
            raise InputError(f"Invalid skip {self.skip}: must not be negative")
        if self.zoom is not None and self.zoom <= 0:
            raise InputError(f"Invalid zoom {self.zoom}: must be positive")
        # the rightmost slice of most images is only half a cell wide
        if not any(not full_width for full_width, _ in self.charset.glyphs.values()):
            raise InputError("Charset has no half-width characters")

    def plan(self) -> Iterator[tuple[Item, Path, Item | None]]:
        """Pair every source item with its destination and colour item (or None).

        Output paths are validated, and an output directory created, up front.
        """
        source = open_source(self.source)
        has_color = self.color is not None and Path(self.color).exists()
        if isinstance(source, SingleItem):
            destinations = iter([ensure_output_file(self.output)])
            colors = iter([Path(self.color) if has_color else None])
        else:
            directory = ensure_output_dir(self.output)
            destinations = numbered_paths(directory, self.counter)
            if has_color:
                stream = itertools.chain(open_source(self.color), itertools.repeat(None))
                colors = itertools.islice(stream, self.skip, None, self.step)
            else:
                colors = itertools.repeat(None)
        return zip(source, destinations, colors)

    def _color_for(self, item: Item | None, image: Image.Image, size: tuple[int, int], reporter: ProgressReporter):
        if item is None:
            reporter.note("(No color provided)")
            return image
        if isinstance(item, ItemError):
            reporter.note(f"(Color inaccessible: {item.message})")
            return image
        try:
            color = open_image(item)
        except OSError as e:
            reporter.note(f"(Color unopenable: {e})")
            return image
        reporter.note(f'x "{item.name}"')
        return prepare_image(color, crop=self.crop, resize=size)

    def process(
        self, index: int, item: Item, destination: Path, color: Item | None, reporter: ProgressReporter
    ) -> Outcome:
        if isinstance(item, ItemError):
            reporter.start(index, None)
            reporter.finish(index, Outcome.NO_INPUT, item.message)
            return Outcome.NO_INPUT
        reporter.start(index, item.name)
        try:
            image = open_image(item)
        except OSError as e:
            log.debug("Failed to open %s: %s", item, e)
            reporter.finish(index, Outcome.OPEN_FAILED, f"Failed to open: {e}")
            return Outcome.OPEN_FAILED
        try:
            image = prepare_image(image, crop=self.crop, resize=self.resize, zoom=self.zoom)
        except ValueError as e:
            # e.g. a zoom that leaves no pixels
            log.debug("Failed to prepare %s: %s", item, e)
            reporter.finish(index, Outcome.OPEN_FAILED, f"Failed to prepare: {e}")
            return Outcome.OPEN_FAILED
        draft = make_draft(image, negate=self.negate)
        colored = self._color_for(color, image, draft.size, reporter)
        try:
            make_art(draft, colored, self.charset, destination)
        except (OSError, ValueError) as e:
            log.debug("Failed to save %s: %s", destination, e)
            reporter.finish(index, Outcome.SAVE_FAILED, str(e))
            return Outcome.SAVE_FAILED
        reporter.finish(index, Outcome.OK)
        return Outcome.OK

    def run(self, reporter: ProgressReporter | None = None) -> BatchResult:
        reporter = reporter if reporter is not None else ProgressReporter()
        result = BatchResult()
        for index, (item, destination, color) in enumerate(self.plan()):
            result.counts[self.process(index, item, destination, color, reporter)] += 1
        return result
