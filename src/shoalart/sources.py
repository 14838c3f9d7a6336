"""Uniform access to a single input file or a directory of inputs."""

import itertools
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from shoalart.errors import InputError


@dataclass(frozen=True)
class ItemError:
    """An entry of a source that could not be accessed."""

    message: str


Item = Path | ItemError


@dataclass(frozen=True)
class SingleItem:
    path: Path

    def __iter__(self) -> Iterator[Item]:
        yield self.path


@dataclass(frozen=True)
class DirectoryStream:
    """Entries of a directory in ascending name order."""

    path: Path

    def __iter__(self) -> Iterator[Item]:
        try:
            entries = sorted(self.path.iterdir())
        except OSError as e:
            raise InputError(f"Failed to access {self.path}: {e}") from e
        for entry in entries:
            if entry.is_file():
                yield entry
            else:
                yield ItemError(f"Not a file: {entry.name}")


Source = SingleItem | DirectoryStream


def open_source(path: str | Path) -> Source:
    path = Path(path)
    if path.is_file():
        return SingleItem(path)
    if path.is_dir():
        return DirectoryStream(path)
    raise InputError(f'Invalid path "{path}"')


def ensure_output_file(path: str | Path) -> Path:
    path = Path(path)
    if path.exists() and not path.is_file():
        raise InputError(f'"{path}" already exists but is not suitable as an output file')
    return path


def ensure_output_dir(path: str | Path) -> Path:
    path = Path(path)
    if path.exists() and not path.is_dir():
        raise InputError(f'"{path}" already exists but is not a directory')
    path.mkdir(parents=True, exist_ok=True)
    return path


def numbered_paths(directory: Path, start: int = 1, suffix: str = ".shoal") -> Iterator[Path]:
    """``000001.shoal``, ``000002.shoal``, ... inside ``directory``."""
    for n in itertools.count(start):
        yield directory / f"{n:06d}{suffix}"
