#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/cli.py
"""Command-line interface for mdlatex.

Converts a Markdown file, or standard input, into a LaTeX fragment.

Examples
--------
Convert a file and print the fragment::

    $ mdlatex chapter.md

Write to a file with heading labels for the first two levels::

    $ mdlatex chapter.md -o chapter.tex --heading-anchors --nesting-level 2

Read from standard input::

    $ cat notes.md | mdlatex --hard-wrap

"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, Field, fields
from pathlib import Path
from typing import Any

from mdlatex import __version__
from mdlatex.api import to_latex
from mdlatex.exceptions import MdlatexError
from mdlatex.logging_utils import configure_logging
from mdlatex.options.latex import LatexRendererOptions
from mdlatex.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2


def _argument_kwargs(field: Field) -> dict[str, Any]:
    """Build argparse kwargs for an options dataclass field.

    Boolean fields become switches: a ``no-`` prefixed ``cli_name`` turns a
    default-on option off, any other name turns a default-off option on.

    """
    metadata = dict(field.metadata)
    kwargs: dict[str, Any] = {"dest": field.name, "help": metadata.get("help", f"Configure {field.name}")}

    if field.default is not MISSING and isinstance(field.default, bool):
        kwargs["action"] = "store_false" if field.default else "store_true"
    else:
        kwargs["type"] = metadata.get("type", str)
        kwargs["metavar"] = field.name.upper()
        if field.default is not MISSING:
            kwargs["default"] = field.default

    return kwargs


def _add_options_arguments(parser: argparse.ArgumentParser, options_class: type, title: str) -> None:
    """Add one argument group holding the CLI-visible fields of an options class."""
    group = parser.add_argument_group(title)
    for field in fields(options_class):
        if field.metadata.get("exclude_from_cli", False):
            continue
        cli_name = "--" + field.metadata.get("cli_name", field.name.replace("_", "-"))
        group.add_argument(cli_name, **_argument_kwargs(field))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdlatex command."""
    parser = argparse.ArgumentParser(
        prog="mdlatex",
        description="Convert Markdown into a LaTeX fragment for inclusion in a larger document.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert (default: '-' for stdin)")
    parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")

    _add_options_arguments(parser, LatexRendererOptions, "LaTeX rendering options")
    _add_options_arguments(parser, MarkdownParserOptions, "Markdown parsing options")

    logging_group = parser.add_argument_group("Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    logging_group.add_argument("--log-file", metavar="PATH", help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace", action="store_true", help="Enable trace logging with timestamps and logger names"
    )

    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace overrides --log-level inside configure_logging
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _collect_options(
    parsed_args: argparse.Namespace,
) -> tuple[MarkdownParserOptions, LatexRendererOptions]:
    """Build parser and renderer options from parsed arguments.

    Raises
    ------
    ValueError
        If an option value fails validation

    """
    values = vars(parsed_args)
    parser_kwargs = {f.name: values[f.name] for f in fields(MarkdownParserOptions) if f.name in values}
    renderer_kwargs = {f.name: values[f.name] for f in fields(LatexRendererOptions) if f.name in values}
    # Failed writes from the command line are always reported
    renderer_kwargs["fail_on_resource_errors"] = True
    return MarkdownParserOptions(**parser_kwargs), LatexRendererOptions(**renderer_kwargs)


def main(args: list[str] | None = None) -> int:
    """Execute the mdlatex command.

    Parameters
    ----------
    args : list of str or None, default None
        Command-line arguments. If None, ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        parser_options, renderer_options = _collect_options(parsed_args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    if parsed_args.input == "-":
        source: Any = sys.stdin
    else:
        source = Path(parsed_args.input)
        logger.info(f"Converting {source}")

    try:
        latex = to_latex(
            source,
            parsed_args.out,
            parser_options=parser_options,
            renderer_options=renderer_options,
        )
    except MdlatexError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if latex is not None:
        sys.stdout.write(latex)

    return EXIT_SUCCESS
