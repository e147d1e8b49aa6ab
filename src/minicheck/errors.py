"""
minicheck Error Hierarchy
=========================

This module defines the exception hierarchy for the checker.
Recoverable errors inherit from MiniCheckError, allowing callers to
catch everything caused by bad input with a single except clause.

Exception Hierarchy
-------------------
MiniCheckError (base for errors caused by the checked source)
├── LexicalError - the source cannot be tokenized
│   ├── UnterminatedStringError - missing closing quote
│   └── InvalidCharacterError - unexpected character
└── SemanticError - declaration errors
    └── DuplicateDeclarationError - variable declared twice

InternalParserError (parser bugs, NOT a MiniCheckError)
└── PushbackOverflowError - two tokens pushed back at once

Parse errors are not exceptions: grammar rules report them through
Diagnostics and return False. InternalParserError is kept outside the
MiniCheckError tree so that code handling bad input never swallows a
fault in the parser itself.

Error Message Format
--------------------
    filename:line: error: description
    hint: suggestion for fixing
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniCheckError(Exception):
    """
    Base exception for errors caused by the source being checked.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        """Line of the error, or 0 when no location is known."""
        return self.location.line if self.location else 0

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            prog.mini:3: error: unterminated string literal
            hint: add closing '"' to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A line in a source file.

    Only lines are tracked: diagnostics carry no column numbers.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(MiniCheckError):
    """
    The source text cannot be split into tokens.

    Examples:
        - Invalid character in source
        - Unterminated string literal
        - Real constant with no digits after the point
    """
    pass


class UnterminatedStringError(LexicalError):
    """
    Unterminated string literal.

    Raised when a string literal is not closed before the end of the
    line or file.
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
        )


class InvalidCharacterError(LexicalError):
    """Raised when the lexer meets a character outside the language."""

    def __init__(self, char: str, location: Optional[SourceLocation] = None):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (0x{ord(char):02X})",
            location=location,
        )


# =============================================================================
# Semantic Errors
# =============================================================================

class SemanticError(MiniCheckError):
    """
    Declaration error in otherwise well-formed source.

    Raised by the symbol table; the parser turns it into a diagnostic.
    """
    pass


class DuplicateDeclarationError(SemanticError):
    """
    Variable declared more than once.

    The language has a single flat namespace, so any second declaration
    of a name is an error regardless of its type.
    """

    def __init__(
        self,
        identifier: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
    ):
        self.identifier = identifier
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{identifier}' was first declared at {original_location}"

        super().__init__(
            f"redeclaration of '{identifier}'",
            location=location,
            hint=hint,
        )


# =============================================================================
# Internal Faults
# =============================================================================

class InternalParserError(RuntimeError):
    """
    A bug in the parser itself.

    Malformed input can never cause this error, so it must not be
    caught and treated as a rejected program.
    """
    pass


class PushbackOverflowError(InternalParserError):
    """A token was pushed back while another was still pending."""

    def __init__(self, pending: object, pushed: object):
        self.pending = pending
        self.pushed = pushed
        super().__init__(
            f"cannot push back {pushed!r}: {pending!r} is already pending"
        )
