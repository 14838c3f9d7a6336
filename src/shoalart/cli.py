import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, TypeVar

from shoalart.batch import ArtJob, ProgressReporter
from shoalart.capture import ImageGrabCapturer
from shoalart.charset import Charset, default_charset
from shoalart.errors import InputError, ShoalartError
from shoalart.glyphs import Adaptive, CharsetBuilder, Compatibility
from shoalart.imaging import CropArea, parse_crop, parse_size
from shoalart.player import DEFAULT_FPS, Player
from shoalart.sources import SingleItem, ensure_output_dir, ensure_output_file, open_source

T = TypeVar("T")

DUMP_DIR = Path("ShoalartDump-Charset")


def retry(operation: Callable[[], T], message: str, prompt: Callable[[str], str] = input) -> T:
    """Run ``operation`` until it stops raising OSError, asking the operator before each retry."""
    while True:
        try:
            return operation()
        except OSError as e:
            print(f"{message}: {e}")
            try:
                prompt("(press ENTER to try again or press CTRL-C to terminate)")
            except EOFError:
                raise e from None


def _progress(mark: str) -> None:
    sys.stdout.write(mark)
    sys.stdout.flush()


def cmd_charset_gen(args) -> int:
    output = ensure_output_file(args.output)
    if args.compat:
        area = CropArea.parse(args.area)
        mode = Compatibility(area.width, area.height, area.left, area.top)
    else:
        mode = Adaptive()
    try:
        builder = CharsetBuilder(args.font, mode=mode, dump_dir=DUMP_DIR if args.dump else None)
    except OSError as e:
        raise InputError(f'Failed to open font "{args.font}": {e}') from e
    charset = builder.build(args.chars, progress=_progress)
    print(f"\nTotally {len(charset)} chars.")
    if builder.skipped:
        print(f"Skipped {len(builder.skipped)} chars.")
    retry(lambda: charset.save(output), f'Failed to write charset "{output}"')
    return 0


def cmd_charset_merge(args) -> int:
    output = ensure_output_file(args.output)
    loaded = []
    for path in args.charsets:
        print(f'File "{path}": ', end="")
        try:
            loaded.append(Charset.load(path))
        except (OSError, ShoalartError) as e:
            print(e)
            continue
        print("Ok")
    charset = Charset.merge(loaded)
    print(f"Totally {len(charset)} chars.")
    retry(lambda: charset.save(output), f'Failed to write charset "{output}"')
    return 0


def cmd_charset_read(args) -> int:
    charset = Charset.load(args.charset)
    for char, full_width, signature in charset.sorted_entries():
        values = ",".join(f"{v:>10.6f}" for v in signature)
        print(f"{int(full_width)} / ({char!r}, [{values}]),")
    print(f"Totally {len(charset)} chars.")
    return 0


def cmd_art_make(args) -> int:
    if args.charset is not None:
        print(f'Use outer charset "{args.charset}".')
        charset = Charset.load(args.charset)
    else:
        print("Use built-in charset.")
        charset = default_charset()
    job = ArtJob(
        source=Path(args.source),
        output=Path(args.output),
        charset=charset,
        color=Path(args.color) if args.color else None,
        crop=parse_crop(args.crop) if args.crop else None,
        resize=parse_size(args.resize) if args.resize else None,
        zoom=args.zoom,
        negate=args.negate,
        skip=args.skip,
        step=args.step,
        counter=args.ctr,
    )
    result = job.run(ProgressReporter(verbose=args.verbose > 0))
    print(f"\n{result.ok}/{result.total} done.")
    return 0


def cmd_art_play(args) -> int:
    source = open_source(args.source)
    capturer = None
    capture_dir = None
    if args.capture is not None and not isinstance(source, SingleItem):
        capture_dir = ensure_output_dir(args.capture)
        capturer = ImageGrabCapturer()
    player = Player(
        origin=(args.x, args.y),
        fps=args.fps,
        monochrome=args.monoch,
        capturer=capturer,
        capture_dir=capture_dir,
        counter=args.ctr,
    )
    player.play(source)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shoalart", description="Colorized character art from images")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics (default: WARNING)")
    commands = parser.add_subparsers(dest="command", required=True)

    charset = commands.add_parser("charset", help="Routines about charsets")
    charset = charset.add_subparsers(dest="action", required=True)

    gen = charset.add_parser("gen", help="Build a charset from a font")
    gen.add_argument("chars", help="Characters to include")
    gen.add_argument("font", help="Path to a TrueType/OpenType font")
    gen.add_argument("output", nargs="?", default="Shoalart-Charset.bin", help="Output charset file")
    gen.add_argument("-C", "--compat", action="store_true", help="Cut glyphs at a fixed area instead of fitting them")
    gen.add_argument(
        "-A", "--off", dest="area", default="64x64+0+0", help="Area for --compat: {width}x{height}+{left}+{top}"
    )
    gen.add_argument("--dump", action="store_true", help=f"Write glyph images into {DUMP_DIR}")
    gen.set_defaults(func=cmd_charset_gen)

    merge = charset.add_parser("merge", help="Merge charsets, later files win")
    merge.add_argument("output", help="Output charset file")
    merge.add_argument("charsets", nargs="+", help="Charset files to merge")
    merge.set_defaults(func=cmd_charset_merge)

    read = charset.add_parser("read", help="Print the entries of a charset")
    read.add_argument("charset", help="Charset file")
    read.set_defaults(func=cmd_charset_read)

    art = commands.add_parser("art", help="Routines about character art")
    art = art.add_subparsers(dest="action", required=True)

    make = art.add_parser("make", help="Create art files from images")
    make.add_argument("source", help="Image file or directory of images")
    make.add_argument("output", help="Output file, or directory for numbered .shoal files")
    make.add_argument("--color", default="", help="Colour image file or directory (default: the source)")
    make.add_argument("-c", "--charset", default=None, help="Charset file (default: built-in ASCII)")
    make.add_argument("--crop", default=None, help="Crop before resizing: {width}x{height}+{left}+{top}")
    make.add_argument("--resize", default=None, help="Resize to {width}x{height}")
    make.add_argument("-z", "--zoom", type=float, default=None, help="Scale factor, ignored with --resize")
    make.add_argument("-n", "--negate", action="store_true", help="Invert dark and light")
    make.add_argument("--skip", type=int, default=0, help="Skip the first N colour files")
    make.add_argument("--step", type=int, default=1, help="Use every Nth colour file")
    make.add_argument("--ctr", type=int, default=1, help="First output file number")
    make.add_argument("-v", "--verbose", action="count", default=0, help="One line per image")
    make.set_defaults(func=cmd_art_make)

    play = art.add_parser("play", help="Play art files on the terminal")
    play.add_argument("source", help="Art file or directory of art files")
    play.add_argument("-x", type=int, default=0, help="Left margin")
    play.add_argument("-y", type=int, default=0, help="Top margin")
    play.add_argument("-f", "--fps", type=float, default=DEFAULT_FPS, help="Maximum frame rate, 0 for unlimited")
    play.add_argument("-c", "--capture", default=None, help="Save a screenshot of every frame into this directory")
    play.add_argument("-m", "--monoch", action="store_true", help="No colours")
    play.add_argument("--ctr", type=int, default=1, help="First screenshot number")
    play.set_defaults(func=cmd_art_play)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (ShoalartError, OSError) as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("*** TERMINATED ***", file=sys.stderr)
        return 130
