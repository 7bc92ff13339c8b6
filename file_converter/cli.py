"""Command-line interface for the file converter.

WHY: Users need a simple way to convert a data file from the terminal. The
CLI wires file reading, the core convert() call and file saving behind two
subcommands.

HOW: Uses argparse with subcommands:
  convert — read the input file, convert it, write ``{stem}.{format}`` into
            the output directory (created if missing)
  list    — print the supported formats and their content types
Status messages go to stderr; ``list`` output goes to stdout.

RULES:
- convert: -i/--input and -f/--format are required
- -o/--output defaults to DEFAULT_OUTPUT_DIR from config
- --input-format skips detection and forces the source format
- Output naming: {stem}.{ext}, numeric suffix on conflict (data-2.csv)
- Errors print "Error: ..." to stderr and exit with status 1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from file_converter.config import DEFAULT_OUTPUT_DIR
from file_converter.core.converter import convert, get_format, supported_formats
from file_converter.core.errors import ConversionError


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so ``list`` can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    """Print an error message and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(stem: str, extension: str, output_dir: Path) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    WHY: Converting the same file twice should not silently overwrite the
    first result.

    RULES:
    - First attempt: {stem}.{extension}
    - Conflict: {stem}-2.{extension}, {stem}-3.{extension}, ...

    Args:
        stem: Input filename without its extension.
        extension: Target format extension, without the dot.
        output_dir: Directory to save the output file.

    Returns:
        A Path that does not yet exist.
    """
    base_path = output_dir / "{}.{}".format(stem, extension)
    if not base_path.exists():
        return base_path

    counter = 2
    while True:
        candidate = output_dir / "{}-{}.{}".format(stem, counter, extension)
        if not candidate.exists():
            return candidate
        counter += 1


def _run_convert(args: argparse.Namespace) -> None:
    """Execute the convert subcommand."""
    input_path = Path(args.input).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    try:
        target = get_format(args.format)
    except ConversionError as exc:
        available = ", ".join(f.extension for f in supported_formats())
        _fail("{}. Available formats: {}".format(exc, available))

    output_dir = Path(args.output).resolve()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        _fail("Cannot create output directory {}: {}".format(output_dir, exc))

    _status("Converting {} to {}...".format(input_path.name, target.name))
    try:
        data = input_path.read_bytes()
    except OSError as exc:
        _fail("Cannot read {}: {}".format(input_path, exc))

    try:
        result = convert(data, target.extension, input_format=args.input_format)
    except ConversionError as exc:
        _fail(str(exc))

    output_path = _resolve_output_path(input_path.stem, target.extension, output_dir)
    try:
        output_path.write_bytes(result)
    except OSError as exc:
        _fail("Cannot write {}: {}".format(output_path, exc))
    _status("Saved: {}".format(output_path))


def _run_list(args: argparse.Namespace) -> None:
    """Execute the list subcommand."""
    print("Supported formats:")
    for fmt in supported_formats():
        print("  {:<5} {:<6} {}".format(fmt.extension, fmt.name, fmt.content_type))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separated from main() so tests can inspect the parser without running
    a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="file-converter",
        description="Convert structured data files between JSON, CSV, XML and plain text.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a file to another format.",
        description="Convert an input file to the given format. "
                    "Example: file-converter convert -i input.json -f csv -o result",
    )
    convert_parser.add_argument(
        "-i", "--input",
        required=True,
        help="Path to the file to convert.",
    )
    convert_parser.add_argument(
        "-f", "--format",
        required=True,
        help="Output format: {}.".format(", ".join(f.extension for f in supported_formats())),
    )
    convert_parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory (default: %(default)s).",
    )
    convert_parser.add_argument(
        "--input-format",
        default=None,
        help="Source format, skipping auto-detection.",
    )
    convert_parser.set_defaults(handler=_run_convert)

    list_parser = subparsers.add_parser("list", help="List supported formats.")
    list_parser.set_defaults(handler=_run_list)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    args.handler(args)


if __name__ == "__main__":
    main()
