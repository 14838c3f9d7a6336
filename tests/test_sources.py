import itertools
from pathlib import Path

import pytest

from shoalart.errors import InputError
from shoalart.sources import (
    DirectoryStream,
    ItemError,
    SingleItem,
    ensure_output_dir,
    ensure_output_file,
    numbered_paths,
    open_source,
)


def test_file_is_single_item(tmp_path):
    path = tmp_path / "a.png"
    path.write_bytes(b"x")
    source = open_source(path)
    assert source == SingleItem(path)
    assert list(source) == [path]


def test_directory_stream_sorted(tmp_path):
    for name in ("b", "c", "a"):
        (tmp_path / name).write_bytes(b"x")
    source = open_source(tmp_path)
    assert isinstance(source, DirectoryStream)
    assert [p.name for p in source] == ["a", "b", "c"]


def test_directory_entry_that_is_not_a_file(tmp_path):
    (tmp_path / "a").write_bytes(b"x")
    (tmp_path / "sub").mkdir()
    items = list(open_source(tmp_path))
    assert items[0] == tmp_path / "a"
    assert isinstance(items[1], ItemError)


def test_invalid_path(tmp_path):
    with pytest.raises(InputError, match="Invalid path"):
        open_source(tmp_path / "missing")


def test_output_file_conflicts_with_directory(tmp_path):
    with pytest.raises(InputError):
        ensure_output_file(tmp_path)
    assert ensure_output_file(tmp_path / "new.bin") == tmp_path / "new.bin"


def test_output_dir_created_or_rejected(tmp_path):
    created = ensure_output_dir(tmp_path / "out" / "nested")
    assert created.is_dir()
    existing = tmp_path / "file"
    existing.write_bytes(b"x")
    with pytest.raises(InputError):
        ensure_output_dir(existing)


def test_numbered_paths():
    names = [p.name for p in itertools.islice(numbered_paths(Path("out"), 9), 3)]
    assert names == ["000009.shoal", "000010.shoal", "000011.shoal"]
