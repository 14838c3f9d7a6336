import pytest

from shoalart.art import load_art
from shoalart.charset import Charset
from shoalart.cli import main, retry


def _sig(value):
    return (value,) + (0.0,) * 9


def test_merge_and_read(tmp_path, capsys):
    Charset({"a": (False, _sig(1.0)), "b": (False, _sig(2.0))}).save(tmp_path / "1.bin")
    Charset({"b": (True, _sig(5.0))}).save(tmp_path / "2.bin")
    (tmp_path / "bad.bin").write_bytes(b"nope")
    inputs = [str(tmp_path / name) for name in ("1.bin", "bad.bin", "2.bin")]
    code = main(["charset", "merge", str(tmp_path / "out.bin"), *inputs])
    assert code == 0
    merged = Charset.load(tmp_path / "out.bin")
    assert merged.glyphs["b"] == (True, _sig(5.0))
    output = capsys.readouterr().out
    assert "Invalid header" in output
    assert "Totally 2 chars." in output

    assert main(["charset", "read", str(tmp_path / "out.bin")]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("0 / ('a', [")
    assert lines[1].startswith("1 / ('b', [")
    assert lines[-1] == "Totally 2 chars."


def test_merge_without_valid_inputs_fails(tmp_path, capsys):
    (tmp_path / "bad.bin").write_bytes(b"nope")
    assert main(["charset", "merge", str(tmp_path / "out.bin"), str(tmp_path / "bad.bin")]) == 1
    assert "No inputs" in capsys.readouterr().err
    assert not (tmp_path / "out.bin").exists()


def test_art_make_with_builtin_charset(tmp_path, image_dir, capsys):
    assert main(["art", "make", str(image_dir), str(tmp_path / "out"), "--resize", "16x8"]) == 0
    assert "Use built-in charset." in capsys.readouterr().out
    art = load_art(tmp_path / "out" / "000001.shoal")
    assert len(art) == 1
    assert len(art[0]) == 3


def test_art_make_invalid_source(tmp_path, capsys):
    assert main(["art", "make", str(tmp_path / "missing"), str(tmp_path / "out")]) == 1
    assert "Invalid path" in capsys.readouterr().err


def test_art_make_bad_crop(tmp_path, image_dir, capsys):
    assert main(["art", "make", str(image_dir), str(tmp_path / "out"), "--crop", "10x10"]) == 1
    assert "Invalid syntax" in capsys.readouterr().err


def test_art_make_rejects_negative_crop_size(tmp_path, image_dir, capsys):
    assert main(["art", "make", str(image_dir), str(tmp_path / "out"), "--crop=10x-5+0+0"]) == 1
    assert "Invalid crop" in capsys.readouterr().err


def test_art_make_rejects_zero_step(tmp_path, image_dir, capsys):
    args = ["art", "make", str(image_dir), str(tmp_path / "out"), "--color", str(image_dir), "--step", "0"]
    assert main(args) == 1
    assert "Invalid step" in capsys.readouterr().err


def test_retry_until_success(capsys):
    attempts = []
    prompts = []

    def flaky():
        attempts.append(1)
        if len(attempts) < 3:
            raise PermissionError("locked")
        return "done"

    assert retry(flaky, "Failed to write", prompt=prompts.append) == "done"
    assert len(prompts) == 2
    assert "Failed to write: locked" in capsys.readouterr().out


def test_retry_gives_up_without_operator():
    def prompt(text):
        raise EOFError

    def failing():
        raise PermissionError("locked")

    with pytest.raises(PermissionError):
        retry(failing, "Failed to write", prompt=prompt)
