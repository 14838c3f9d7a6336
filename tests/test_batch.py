import io

import pytest
from PIL import Image

from shoalart.art import load_art
from shoalart.batch import ArtJob, Outcome, ProgressReporter
from shoalart.charset import Charset, default_charset
from shoalart.errors import InputError


def test_directory_batch_writes_numbered_files(tmp_path, image_dir):
    (image_dir / "c.txt").write_text("not an image")
    out = io.StringIO()
    job = ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset(), counter=5)
    result = job.run(ProgressReporter(out=out))
    assert result.ok == 2
    assert result.counts[Outcome.OPEN_FAILED] == 1
    assert out.getvalue() == "[0].F"
    assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["000005.shoal", "000006.shoal"]
    white, black = load_art(tmp_path / "out" / "000005.shoal"), load_art(tmp_path / "out" / "000006.shoal")
    assert len(white) == len(black) == 2
    assert all(cell.char == " " for line in black for cell in line)
    assert all(cell.color == (255, 255, 255) for line in white for cell in line)


def test_single_file(tmp_path, image_dir):
    out = io.StringIO()
    job = ArtJob(source=image_dir / "a.png", output=tmp_path / "a.shoal", charset=default_charset())
    result = job.run(ProgressReporter(verbose=True, out=out))
    assert result.ok == 1
    assert (tmp_path / "a.shoal").is_file()
    assert '"a.png"' in out.getvalue()
    assert "(No color provided)" in out.getvalue()
    assert out.getvalue().endswith(" - Ok\n")


def test_single_file_into_directory_rejected(tmp_path, image_dir):
    job = ArtJob(source=image_dir / "a.png", output=tmp_path, charset=default_charset())
    with pytest.raises(InputError):
        job.run(ProgressReporter(out=io.StringIO()))


def test_colour_directory_with_skip(tmp_path, image_dir):
    colors = tmp_path / "colors"
    colors.mkdir()
    for name, rgb in (("1.png", (255, 0, 0)), ("2.png", (0, 255, 0)), ("3.png", (0, 0, 255))):
        Image.new("RGB", (8, 8), rgb).save(colors / name)
    job = ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset(), color=colors, skip=1)
    result = job.run(ProgressReporter(out=io.StringIO()))
    assert result.ok == 2
    first = load_art(tmp_path / "out" / "000001.shoal")
    second = load_art(tmp_path / "out" / "000002.shoal")
    assert first[0][0].color == (0, 255, 0)
    assert second[0][0].color == (0, 0, 255)


def test_colour_stream_runs_out(tmp_path, image_dir):
    colors = tmp_path / "colors"
    colors.mkdir()
    Image.new("RGB", (8, 8), (255, 0, 0)).save(colors / "1.png")
    out = io.StringIO()
    job = ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset(), color=colors)
    job.run(ProgressReporter(verbose=True, out=out))
    second = load_art(tmp_path / "out" / "000002.shoal")
    assert second[0][0].color == (0, 0, 0)
    assert "(No color provided)" in out.getvalue()


def test_save_failure_does_not_stop_batch(tmp_path, image_dir, monkeypatch):
    calls = []

    def failing_make_art(draft, color, charset, path):
        calls.append(path)
        raise PermissionError("read-only")

    monkeypatch.setattr("shoalart.batch.make_art", failing_make_art)
    out = io.StringIO()
    job = ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset())
    result = job.run(ProgressReporter(out=out))
    assert result.counts[Outcome.SAVE_FAILED] == 2
    assert len(calls) == 2
    assert out.getvalue() == "SS"


def test_negate(tmp_path, image_dir):
    job = ArtJob(source=image_dir / "b.png", output=tmp_path / "b.shoal", charset=default_charset(), negate=True)
    job.run(ProgressReporter(out=io.StringIO()))
    assert all(cell.char != " " for line in load_art(tmp_path / "b.shoal") for cell in line)


def test_zoom_to_nothing_fails_per_item(tmp_path, image_dir):
    out = io.StringIO()
    job = ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset(), zoom=0.01)
    result = job.run(ProgressReporter(out=out))
    assert result.counts[Outcome.OPEN_FAILED] == 2
    assert result.ok == 0
    assert out.getvalue() == "FF"
    assert list((tmp_path / "out").iterdir()) == []


def test_zoom_failure_detail_in_verbose_mode(tmp_path, image_dir):
    out = io.StringIO()
    job = ArtJob(source=image_dir / "a.png", output=tmp_path / "a.shoal", charset=default_charset(), zoom=0.01)
    assert job.run(ProgressReporter(verbose=True, out=out)).counts[Outcome.OPEN_FAILED] == 1
    assert "Failed to prepare" in out.getvalue()


@pytest.mark.parametrize("settings", [{"step": 0}, {"step": -2}, {"skip": -1}, {"zoom": 0.0}])
def test_invalid_settings_rejected(tmp_path, image_dir, settings):
    with pytest.raises(InputError):
        ArtJob(source=image_dir, output=tmp_path / "out", charset=default_charset(), **settings)


def test_charset_without_half_width_rejected(tmp_path, image_dir):
    charset = Charset({"中": (True, (1.0,) + (0.0,) * 9)})
    with pytest.raises(InputError, match="half-width"):
        ArtJob(source=image_dir, output=tmp_path / "out", charset=charset)
