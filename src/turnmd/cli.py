#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/turnmd/cli.py
"""Command line interface for turnmd.

Reads HTML from standard input and writes Markdown to standard output.

Examples
--------
Basic conversion:
    $ echo '<h1>Title</h1><p>Some <em>text</em></p>' | turnmd

ATX headings and fenced code blocks:
    $ turnmd --heading-style atx --code-block-style fenced < page.html

Render the result in the terminal:
    $ turnmd --rich < page.html

Use environment variables for defaults:
    $ export TURNMD_HEADING_STYLE=atx
    $ export TURNMD_BULLET_LIST_MARKER=-

Exit codes: 0 on success, 1 when conversion fails, 2 for invalid
arguments or option values.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from turnmd.api import convert
from turnmd.cli_builder import DynamicCLIBuilder
from turnmd.constants import ENV_VAR_PREFIX
from turnmd.exceptions import DependencyError, TurnmdError, ValidationError
from turnmd.logging_utils import configure_logging
from turnmd.options import ConversionOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_CONVERSION_ERROR = 1
EXIT_USAGE_ERROR = 2


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with TURNMD_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'rich', 'heading_style')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    Command line arguments still take precedence over environment
    variables. Invalid choices are reported and ignored.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in ("true", "1", "yes", "on")
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    "Invalid choice for %s%s: %s. Choices: %s",
                    ENV_VAR_PREFIX,
                    action.dest.upper(),
                    env_value,
                    list(action.choices),
                )
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of turnmd package."""
    from turnmd import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser, with environment variable defaults applied."""
    parser = argparse.ArgumentParser(
        prog="turnmd",
        description="Convert HTML read from standard input to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  echo '<p>Hello <strong>world</strong></p>' | turnmd
  turnmd --heading-style atx --link-style referenced < page.html
  curl -s https://example.com | turnmd --rich

Every option may also be set with an environment variable named
{ENV_VAR_PREFIX}<OPTION>, e.g. {ENV_VAR_PREFIX}HEADING_STYLE=atx.
        """,
    )

    parser.add_argument("--rich", action="store_true", help="Render the Markdown in the terminal using rich")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with debug logging, timestamps and logger names",
    )
    parser.add_argument("--version", "-v", action="version", version=f"turnmd {_get_version()}")

    DynamicCLIBuilder().add_options_arguments(parser, group_name="Conversion options")

    apply_env_vars_to_parser(parser)
    return parser


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, trace_mode=parsed_args.trace)


def _print_rich(markdown_content: str) -> None:
    from rich.console import Console
    from rich.markdown import Markdown

    Console().print(Markdown(markdown_content))


def main(args: Optional[list[str]] = None) -> int:
    """Run the command line interface.

    Parameters
    ----------
    args : list[str], optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging(parsed_args)

    try:
        options = ConversionOptions(**DynamicCLIBuilder().map_args_to_options(parsed_args))
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    logger.debug("Effective options: %s", options.to_dict())

    if parsed_args.rich:
        try:
            import rich  # noqa: F401
        except ImportError:
            print("Error: Rich library not installed. Install with: pip install turnmd[rich]", file=sys.stderr)
            return EXIT_CONVERSION_ERROR

    html = sys.stdin.read()
    logger.debug("Read %d characters from stdin", len(html))

    try:
        markdown_content = convert(html, options)
    except DependencyError as e:
        print(f"Missing dependency: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR
    except TurnmdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    if parsed_args.rich:
        _print_rich(markdown_content)
    else:
        print(markdown_content)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
