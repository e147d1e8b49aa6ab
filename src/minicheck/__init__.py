"""
minicheck - Syntax and Declaration Checker for a Mini Language
==============================================================

This package checks programs written in a small imperative language.
It answers one question about a source file: is it a syntactically
valid program in which every variable is declared exactly once before
use? The answer is accept/reject plus a list of "<line>: <message>"
diagnostics. Nothing is evaluated and no code is generated.

Language Overview
-----------------
    PROGRAM circle
        FLOAT r, area;
        r = 2.5;
        area = 3.14 * r * r;
        IF (area > 10) WRITE "big", area;
    END PROGRAM

- Declarations: INT and FLOAT, one or more names per statement
- Statements: assignment, WRITE with a list of expressions, and IF with
  a single controlled statement
- Every statement, including the last, ends with a semicolon

Main Components
---------------
- **lexer**: turns source text into tokens
- **token_source**: token stream with one-token pushback
- **symbols**: declaration table
- **diagnostics**: error counter and report sink
- **parser**: one recursive descent method per grammar rule
- **checker**: runs the pieces together, one fresh state per check

Quick Start
-----------
    >>> from minicheck import check_source
    >>> result = check_source("PROGRAM p INT a; b = 5; END PROGRAM")
    1: Undeclared Variable
    >>> result.accepted
    False

Or use the command-line tool:
    $ mlcheck prog.mini
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minicheck.checker import (
    Checker,
    CheckerOptions,
    CheckResult,
    check_file,
    check_source,
)
from minicheck.diagnostics import Diagnostic, Diagnostics
from minicheck.errors import (
    MiniCheckError,
    SourceLocation,
    LexicalError,
    UnterminatedStringError,
    InvalidCharacterError,
    SemanticError,
    DuplicateDeclarationError,
    InternalParserError,
    PushbackOverflowError,
)
from minicheck.lexer import Lexer, Token, TokenType
from minicheck.parser import ParseContext, Parser
from minicheck.symbols import Symbol, SymbolTable
from minicheck.token_source import TokenSource

__all__ = [
    # Version info
    "__version__",
    # Checker
    "Checker",
    "CheckerOptions",
    "CheckResult",
    "check_file",
    "check_source",
    # Parsing engine
    "Parser",
    "ParseContext",
    "TokenSource",
    "SymbolTable",
    "Symbol",
    "Diagnostics",
    "Diagnostic",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    # Exception hierarchy
    "MiniCheckError",
    "SourceLocation",
    "LexicalError",
    "UnterminatedStringError",
    "InvalidCharacterError",
    "SemanticError",
    "DuplicateDeclarationError",
    "InternalParserError",
    "PushbackOverflowError",
]
