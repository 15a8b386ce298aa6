"""Command-line interface for md2wiki.

Usage::

    md2wiki input.md                     # writes input.wiki
    md2wiki input.md -o output.wiki      # explicit output path
    md2wiki input.md -o -                # print to stdout
    md2wiki input.md --theme tieto --css # branded colours plus CSS block
    md2wiki --list-themes                # list available themes
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2wiki import __version__
from md2wiki.converter import ConversionConfig, Converter
from md2wiki.theme_manager import DEFAULT_THEME, THEME_NAMES, list_themes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2wiki",
        description="Convert Markdown files to MediaWiki markup.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path, or '-' for stdout. Defaults to <input>.wiki.",
    )
    parser.add_argument(
        "-t", "--theme",
        default=DEFAULT_THEME,
        choices=THEME_NAMES,
        help="Colour theme (default: %(default)s).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--css",
        action="store_true",
        help="Prepend a hidden CSS block generated from the theme.",
    )
    parser.add_argument(
        "--no-reverse-changelog",
        dest="reverse_changelog",
        action="store_false",
        help="Keep changelog versions in their original order.",
    )
    parser.add_argument(
        "--no-prettify-checks",
        dest="prettify_checks",
        action="store_false",
        help="Do not replace check marks with the emoji.",
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List available themes and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress and debug information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    app_logger = logging.getLogger("md2wiki")
    app_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in list(app_logger.handlers):
        app_logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    app_logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.list_themes:
        print("Available themes:")
        for info in list_themes():
            print(f"  - {info.name}: {info.description}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    to_stdout = args.output == "-"
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_suffix(".wiki")

    # Progress goes to stderr when the result itself is printed.
    progress = sys.stderr if to_stdout else sys.stdout
    if args.verbose:
        print(f"Input:  {input_path}", file=progress)
        print(f"Output: {'<stdout>' if to_stdout else output_path}", file=progress)
        print(f"Theme:  {args.theme}", file=progress)

    config = ConversionConfig(
        theme=args.theme,
        add_css=args.css,
        reverse_changelog=args.reverse_changelog,
        prettify_checks=args.prettify_checks,
    )
    converter = Converter(config)

    try:
        if to_stdout:
            md_text = input_path.read_text(encoding=args.encoding)
            sys.stdout.write(converter.convert_text(md_text))
            sys.stdout.write("\n")
        else:
            converter.convert_file(input_path, output_path, encoding=args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if to_stdout:
        return 0
    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
