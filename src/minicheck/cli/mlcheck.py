"""
mlcheck - Mini Language Checker Command-Line Interface
======================================================

This module implements the command-line interface for the checker.
It reads one source file, checks it, prints every diagnostic as
"<line>: <message>" and exits with a status that tells whether the
program was accepted.

Usage Examples
--------------
Check a program:
    $ mlcheck prog.mini

Show the token stream:
    $ mlcheck --tokens prog.mini

List declared variables of an accepted program:
    $ mlcheck --symbols prog.mini

Exit Codes
----------
0 - Program accepted
1 - Program rejected
2 - Invalid arguments or unreadable file
3 - Internal error
"""

import logging
import sys
from pathlib import Path

import click

from minicheck import __version__
from minicheck.checker import Checker, CheckerOptions
from minicheck.cli.errors import ExitCode, handle_cli_exception
from minicheck.lexer import Lexer

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Send debug logging to stderr when running verbosely."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(message)s",
        )


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit (for debugging)",
)
@click.option(
    "--symbols",
    is_flag=True,
    help="List declared variables after a successful check",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Print diagnostics only, no summary",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging on stderr)",
)
@click.version_option(version=__version__, prog_name="mlcheck")
def main(
    input_file: Path,
    tokens: bool,
    symbols: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """
    Check a mini language program for syntax and declaration errors.

    INPUT_FILE is the program source to check.

    \b
    Examples:
        mlcheck prog.mini             # Check and summarize
        mlcheck --tokens prog.mini    # Dump tokens
        mlcheck --symbols prog.mini   # Also list declarations
    """
    setup_logging(verbose)

    try:
        source = input_file.read_text(encoding="utf-8")

        if tokens:
            for token in Lexer(source, str(input_file)).tokenize():
                click.echo(repr(token))
            return

        checker = Checker(CheckerOptions(echo_diagnostics=True))
        result = checker.check_source(source, str(input_file))
        logger.debug(f"read {result.token_count} tokens from {input_file}")

    except Exception as e:
        handle_cli_exception(e, verbose)

    if result.accepted:
        if not quiet:
            click.echo("\nSuccessful Parsing")
        if symbols:
            for symbol in result.symbols:
                click.echo(f"{symbol.name}: {symbol.kind.name} (line {symbol.line})")
        return

    if not quiet:
        click.echo("\nUnsuccessful Parsing")
        click.echo(f"Number of Syntax Errors: {result.error_count}")
    sys.exit(ExitCode.CHECK_FAILED)


if __name__ == "__main__":
    main()
