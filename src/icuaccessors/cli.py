"""Command-line entry point: res/ directory in, accessor module out.

Usage:
    icu-accessors path/to/res -o strings_accessors.py
    icu-accessors path/to/res -o strings_accessors.py --strict --jobs 4
    python -m icuaccessors path/to/res -o out.py --format json

Exit codes:
    0: Module written, no merge errors
    1: Merge errors (strict mode writes nothing; otherwise the failing
       resources are left out of the written module)
    2: Input error (missing directory, unparseable XML, unwritable output)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from icuaccessors.codegen import write_accessors
from icuaccessors.config import MergeConfig
from icuaccessors.diagnostics import (
    AccessorError,
    Diagnostic,
    DiagnosticFormatter,
    MergeFailedError,
    OutputFormat,
    PublicSurfaceError,
    ResourceLoadError,
)
from icuaccessors.merge import merge_all
from icuaccessors.resources import load_resource_directory

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MERGE_ERRORS = 1
EXIT_INPUT_ERROR = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid integer: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number <= 0:
        msg = f"must be positive: {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="icu-accessors",
        description="Generate typed Python accessors for ICU message string resources.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate accessors from an Android-style res/ directory:
  icu-accessors app/src/main/res -o app/strings.py

  # Fail without writing anything if any resource is inconsistent:
  icu-accessors app/src/main/res -o app/strings.py --strict

  # Machine-readable diagnostics:
  icu-accessors app/src/main/res -o app/strings.py --format json
""",
    )
    parser.add_argument(
        "res_dir",
        type=Path,
        help="Resource directory containing values/ and values-<qualifier>/ folders",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Path of the Python module to write",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Write nothing if any resource fails to merge",
    )
    parser.add_argument(
        "--fill-numbered-gaps",
        action="store_true",
        help="Insert None-typed parameters for missing numbered arguments",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=_positive_int,
        default=1,
        help="Number of threads merging resources (default: 1)",
    )
    parser.add_argument(
        "--module-doc",
        default=None,
        help="Docstring for the generated module",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--format",
        default=OutputFormat.RUST.value,
        choices=[fmt.value for fmt in OutputFormat],
        help="Diagnostic output format (default: rust)",
    )
    return parser


def _report(
    formatter: DiagnosticFormatter,
    diagnostics: Iterable[Diagnostic],
    errors: Iterable[AccessorError] = (),
) -> None:
    """Print diagnostics (and errors without one) to stderr."""
    lines: list[str] = []
    rendered = formatter.format_all(diagnostics)
    if rendered:
        lines.append(rendered)
    for error in errors:
        if error.diagnostic is not None:
            lines.append(formatter.format(error.diagnostic))
        else:
            lines.append(str(error))
    if lines:
        separator = "\n" if formatter.output_format is OutputFormat.JSON else "\n\n"
        print(separator.join(lines), file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code (see module docstring)
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))

    try:
        loaded = load_resource_directory(args.res_dir)
    except (ResourceLoadError, PublicSurfaceError) as e:
        logger.error("Cannot read resources from %s: %s", args.res_dir, e)
        _report(formatter, (), [e])
        return EXIT_INPUT_ERROR
    _report(formatter, loaded.warnings)

    config = MergeConfig(
        strict=args.strict,
        fill_numbered_gaps=args.fill_numbered_gaps,
        max_workers=args.jobs,
    )
    try:
        report = merge_all(loaded.tokenize(), loaded.public_resources, config=config)
    except MergeFailedError as e:
        _report(formatter, (), [*e.errors, e])
        return EXIT_MERGE_ERRORS
    _report(formatter, report.warnings, report.errors)

    source = write_accessors(report.resources, module_doc=args.module_doc)
    output: Path = args.output
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(source, encoding="utf-8")
    except OSError as e:
        logger.error("Cannot write %s: %s", output, e)
        return EXIT_INPUT_ERROR

    print(f"[OK] Wrote {len(report.resources)} accessor(s) to {output}")
    return EXIT_OK if report.ok else EXIT_MERGE_ERRORS


if __name__ == "__main__":
    sys.exit(main())
