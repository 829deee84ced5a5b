#!/usr/bin/env python3
"""Command-line entry point: list platform sizes or generate an icon set."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from iconforge import __version__
from iconforge.errors import IconForgeError, InvalidArguments, UnknownPlatform
from iconforge.imaging import load_reference, write_icons
from iconforge.platforms import Platform, format_sizes

LIST_ALL = object()
CUSTOM_DIR = "custom"
MAX_CUSTOM_SIZE = 4096

EPILOG = """\
examples:
  iconforge icon.png -d phone
  iconforge icon.png -d desktop
  iconforge icon.png -s 300
  iconforge -d
  iconforge -d phone

The reference icon must be at least 1024x1024 pixels and square.
Icons are written to ./<platform>/Icon-<platform>-<size>x<size>.png.
"""


class IconForgeArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise InvalidArguments(message)


class StoreOnce(argparse.Action):
    """Store an option value, rejecting the option when it is repeated."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest) is not None:
            parser.error(f"{option_string} may only be given once")
        setattr(namespace, self.dest, values)


@dataclass(frozen=True)
class Invocation:
    mode: str
    platform: Platform | None = None
    reference: Path | None = None
    size: int | None = None
    out_dir: Path | None = None


def build_parser() -> argparse.ArgumentParser:
    parser = IconForgeArgumentParser(
        prog="iconforge",
        description="Generate app icons for phone, tablet, desktop, watch, tv and automotive platforms.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("reference", nargs="?", type=Path, help="Square reference PNG, at least 1024x1024")
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "-d",
        dest="platform",
        action=StoreOnce,
        nargs="?",
        const=LIST_ALL,
        metavar="PLATFORM",
        help=f"Target platform ({', '.join(Platform.identifiers())}). "
        "Alone, lists every platform and its sizes; without a reference, lists one platform's sizes.",
    )
    target.add_argument("-s", "--size", action=StoreOnce, type=int, help="Generate a single custom size instead of a platform set")
    parser.add_argument("-o", "--out-dir", action=StoreOnce, type=Path, help="Directory to create platform folders in (default: current directory)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message (must be used alone)")
    parser.add_argument("--version", action="store_true", help="Show the version and exit (must be used alone)")
    return parser


def resolve(argv: list[str], parser: argparse.ArgumentParser | None = None) -> Invocation:
    """Classify ``argv`` into one invocation mode.

    Raises InvalidArguments for anything that is not a recognised pattern and
    UnknownPlatform when a platform name does not match any profile.
    """
    parser = parser or build_parser()
    if argv in (["-h"], ["--help"]):
        return Invocation("help")
    if argv == ["--version"]:
        return Invocation("version")

    args = parser.parse_args(argv)
    if args.help or args.version:
        raise InvalidArguments("-h and --version must be used alone")

    if args.reference is None:
        if args.size is not None:
            raise InvalidArguments("-s requires a reference icon")
        if args.platform is None:
            raise InvalidArguments("Invalid arguments.")
        if args.out_dir is not None:
            raise InvalidArguments("-o only applies when generating icons")
        if args.platform is LIST_ALL:
            return Invocation("list-all")
        return Invocation("list-one", platform=Platform.lookup(args.platform))

    if Path(argv[0]) != args.reference:
        raise InvalidArguments("The reference icon must come first: <reference> -d <platform>")

    out_dir = args.out_dir if args.out_dir is not None else Path.cwd()
    if args.size is not None:
        if not 1 <= args.size <= MAX_CUSTOM_SIZE:
            raise InvalidArguments(f"Custom size must be between 1 and {MAX_CUSTOM_SIZE}, got {args.size}")
        return Invocation("custom", reference=args.reference, size=args.size, out_dir=out_dir)
    if args.platform is None or args.platform is LIST_ALL:
        raise InvalidArguments("A platform is required: <reference> -d <platform>")
    return Invocation(
        "generate",
        platform=Platform.lookup(args.platform),
        reference=args.reference,
        out_dir=out_dir,
    )


def list_all_platforms() -> None:
    print("Supported platforms and their icon resolutions:")
    for platform in Platform:
        print(f"\n{platform.identifier} ({platform.label}):")
        print("\n".join(format_sizes(platform.sizes)))


def list_platform(platform: Platform) -> None:
    print(f"{platform.identifier} ({platform.label}) supports the following icon resolutions:")
    print("\n".join(format_sizes(platform.sizes)))


def generate(reference: Path, name: str, sizes: tuple[int, ...], out_dir: Path) -> None:
    image = load_reference(reference)
    written = total = 0
    for result in write_icons(image, name, sizes, out_dir):
        total += 1
        if result.ok:
            written += 1
            print(f"Generated {result.path}", flush=True)
        else:
            print(f"Error: {result.error}", file=sys.stderr, flush=True)

    print(f"{written} of {total} icons written to {out_dir / name}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    try:
        invocation = resolve(argv, parser)
    except (InvalidArguments, UnknownPlatform) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    if invocation.mode == "help":
        parser.print_help()
        return 0
    if invocation.mode == "version":
        print(f"iconforge {__version__}")
        return 0
    if invocation.mode == "list-all":
        list_all_platforms()
        return 0
    if invocation.mode == "list-one":
        list_platform(invocation.platform)
        return 0

    if invocation.mode == "custom":
        name, sizes = CUSTOM_DIR, (invocation.size,)
    else:
        name, sizes = invocation.platform.identifier, invocation.platform.sizes

    try:
        generate(invocation.reference, name, sizes, invocation.out_dir)
    except IconForgeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
