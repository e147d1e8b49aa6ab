"""
Checker Main Module
===================

This module provides the main interface for checking mini language
programs. It wires the pieces together for one run:

    Source → Lexer → TokenSource → Parser (+ SymbolTable, Diagnostics)

Usage
-----
Command line:
    $ mlcheck prog.mini

Programmatic:
    >>> from minicheck import check_source
    >>> result = check_source("PROGRAM p WRITE 1 + 2; END PROGRAM", echo=False)
    >>> result.accepted
    True

Every call gets its own symbol table, diagnostics and token source, so
checks are independent of each other.

Error Handling
--------------
Parse and declaration errors never raise: they become diagnostics and
the result is rejected. A LexicalError from the lexer is converted into
a diagnostic in the same "<line>: <message>" form. InternalParserError
(a bug in the parser) is not caught here and propagates to the caller.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from minicheck.diagnostics import Diagnostics
from minicheck.errors import LexicalError
from minicheck.lexer import Lexer
from minicheck.parser import ParseContext, Parser
from minicheck.symbols import SymbolTable
from minicheck.token_source import TokenSource

logger = logging.getLogger(__name__)


@dataclass
class CheckerOptions:
    """
    Checker configuration options.

    Attributes:
        echo_diagnostics: Print each diagnostic as soon as it is reported
        stream: Where echoed diagnostics go; None means sys.stdout
    """
    echo_diagnostics: bool = True
    stream: Optional[TextIO] = None


@dataclass
class CheckResult:
    """
    Result of checking one program.

    Attributes:
        filename: Source filename
        accepted: True if the program parsed and no errors were reported
        program_name: Name given after PROGRAM, if it was reached
        diagnostics: Error records in report order
        symbols: Variables declared before parsing stopped
        token_count: Number of tokens read from the lexer
    """
    filename: str = ""
    accepted: bool = False
    program_name: Optional[str] = None
    diagnostics: list = None
    symbols: list = None
    token_count: int = 0

    def __post_init__(self):
        if self.diagnostics is None:
            self.diagnostics = []
        if self.symbols is None:
            self.symbols = []

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]


class Checker:
    """
    Syntax and declaration checker for the mini language.

    Example:
        checker = Checker()
        result = checker.check_file("prog.mini")
        if not result.accepted:
            print(f"{result.error_count} errors")

    Attributes:
        options: Checker configuration options
    """

    def __init__(self, options: Optional[CheckerOptions] = None):
        self.options = options or CheckerOptions()

    def check_source(self, source: str, filename: str = "<input>") -> CheckResult:
        """
        Check mini language source text.

        Args:
            source: Program source
            filename: Source filename for error messages

        Returns:
            CheckResult describing acceptance and all diagnostics
        """
        logger.debug(f"checking {filename} ({len(source)} characters)")

        context = ParseContext(
            symbols=SymbolTable(filename),
            diagnostics=Diagnostics(
                echo=self.options.echo_diagnostics,
                stream=self.options.stream,
            ),
        )
        lexer = Lexer(source, filename)
        tokens = TokenSource(lexer)
        parser = Parser(tokens, context)

        try:
            parsed = parser.parse_program()
        except LexicalError as e:
            logger.debug(str(e))
            context.diagnostics.report(e.line or lexer.line, e.message)
            parsed = False

        accepted = parsed and not context.diagnostics.has_errors()
        result = CheckResult(
            filename=filename,
            accepted=accepted,
            program_name=parser.program_name,
            diagnostics=list(context.diagnostics.records),
            symbols=context.symbols.symbols(),
            token_count=tokens.tokens_read,
        )

        logger.info(
            f"{filename}: {'accepted' if accepted else 'rejected'} "
            f"with {result.error_count} error(s)"
        )
        return result

    def check_file(self, filepath: str | Path) -> CheckResult:
        """
        Check a mini language source file.

        Raises:
            FileNotFoundError: If the source file does not exist
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.check_source(source, str(path))


# =============================================================================
# Convenience Functions
# =============================================================================

def check_source(
    source: str,
    filename: str = "<input>",
    echo: bool = True,
) -> CheckResult:
    """Check source text with default options."""
    return Checker(CheckerOptions(echo_diagnostics=echo)).check_source(source, filename)


def check_file(filepath: str | Path, echo: bool = True) -> CheckResult:
    """Check a source file with default options."""
    return Checker(CheckerOptions(echo_diagnostics=echo)).check_file(filepath)
