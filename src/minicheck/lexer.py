"""
Mini Language Lexer (Tokenizer)
===============================

This module implements the lexer for the mini language checked by
minicheck. It converts source text into a stream of tokens for the
parser, one token per `next_token()` call.

Token Categories
----------------
- Keywords: PROGRAM, END, INT, FLOAT, IF, WRITE (case-insensitive)
- Identifiers: variable and program names (case-sensitive)
- Integer constants: 42
- Real constants: 3.14 (digits are required on both sides of the point)
- String constants: "double quoted", single line
- Operators: = == > + - * / %
- Delimiters: ( ) ; ,

Comments
--------
- Single-line: // comment

Example Usage
-------------
>>> from minicheck.lexer import Lexer
>>> lexer = Lexer("PROGRAM p\\nINT a;", "test.mini")
>>> for token in lexer.tokenize():
...     print(token)
Token(PROGRAM, 1)
Token(IDENT, 'p', 1)
Token(INT, 2)
Token(IDENT, 'a', 2)
Token(SEMICOLON, 2)
Token(DONE, 2)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import string

from minicheck.errors import (
    SourceLocation,
    LexicalError,
    UnterminatedStringError,
    InvalidCharacterError,
)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token kinds of the mini language.

    The set is closed: the parser dispatches on these values only.
    """

    # === Keywords ===
    PROGRAM = auto()
    END = auto()
    INT = auto()
    FLOAT = auto()
    IF = auto()
    WRITE = auto()

    # === Punctuation ===
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,
    LPAREN = auto()         # (
    RPAREN = auto()         # )

    # === Operators ===
    ASSIGN = auto()         # =
    PLUS = auto()           # +
    MINUS = auto()          # -
    MULT = auto()           # *
    DIV = auto()            # /
    MOD = auto()            # %
    EQUAL = auto()          # ==
    GREATER = auto()        # >

    # === Identifiers and Literals ===
    IDENT = auto()
    ICONST = auto()
    RCONST = auto()
    SCONST = auto()

    # === End of input ===
    DONE = auto()


# Keyword spellings, matched after upper-casing the scanned word
KEYWORDS: dict[str, TokenType] = {
    "PROGRAM": TokenType.PROGRAM,
    "END": TokenType.END,
    "INT": TokenType.INT,
    "FLOAT": TokenType.FLOAT,
    "IF": TokenType.IF,
    "WRITE": TokenType.WRITE,
}

# Declaration type keywords
TYPE_KEYWORDS = (TokenType.INT, TokenType.FLOAT)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of mini language source.

    Attributes:
        type: The TokenType classification
        line: Line number in source (1-indexed)
        lexeme: Source text for identifiers and literals, None otherwise
    """
    type: TokenType
    line: int
    lexeme: Optional[str] = None

    def __repr__(self) -> str:
        if self.lexeme is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.line})"
        return f"Token({self.type.name}, {self.line})"

    def is_type_keyword(self) -> bool:
        """Return True if this token starts a declaration."""
        return self.type in TYPE_KEYWORDS


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes mini language source code.

    Tokens are produced on demand by `next_token()`; once the input is
    exhausted every further call returns a DONE token. The `line`
    attribute is advanced in place as newlines are consumed, which is
    the line the parser reports diagnostics against.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
        line: Current line number
    """

    IDENT_START = string.ascii_letters + "_"

    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    SINGLE_TOKENS = {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.MULT,
        "/": TokenType.DIV,
        "%": TokenType.MOD,
        ">": TokenType.GREATER,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
    }

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        line_number: int = 1,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The source code to tokenize
            filename: Name of the source file (for error messages)
            line_number: Starting line number
        """
        self.source = source
        self.filename = filename
        self.line = line_number

        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate all tokens up to and including the DONE token.

        Raises:
            LexicalError: If invalid input is encountered
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.DONE:
                return

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Raises:
            LexicalError: If invalid input is encountered
        """
        self._skip_whitespace_and_comments()

        if self._at_end():
            return Token(TokenType.DONE, self.line)

        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_word()

        if char.isdigit():
            return self._scan_number()

        if char == '"':
            return self._scan_string()

        return self._scan_operator()

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at current position + offset, or "" past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, counting newlines."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1

        return char

    def _location(self, line: Optional[int] = None) -> SourceLocation:
        return SourceLocation(self.filename, line or self.line)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        while not self._at_end():
            char = self._peek()

            if char in " \t\n\r":
                self._advance()
                continue

            # Single-line comment: //
            if char == "/" and self._peek(1) == "/":
                while not self._at_end() and self._peek() != "\n":
                    self._advance()
                continue

            break

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_word(self) -> Token:
        """
        Scan an identifier or keyword.

        Keywords are recognized regardless of case; identifiers keep
        their exact spelling since variable names are case-sensitive.
        """
        start_line = self.line
        chars = []
        while self._peek() and self._peek() in self.IDENT_CHARS:
            chars.append(self._advance())

        word = "".join(chars)

        keyword = KEYWORDS.get(word.upper())
        if keyword is not None:
            return Token(keyword, start_line)

        return Token(TokenType.IDENT, start_line, word)

    def _scan_number(self) -> Token:
        """Scan an integer constant, or a real constant if a point follows."""
        start_line = self.line
        chars = []
        while self._peek().isdigit():
            chars.append(self._advance())

        if self._peek() != ".":
            return Token(TokenType.ICONST, start_line, "".join(chars))

        chars.append(self._advance())  # consume .
        if not self._peek().isdigit():
            raise LexicalError(
                f"invalid real constant '{''.join(chars)}'",
                self._location(start_line),
                hint="a real constant needs digits after the decimal point",
            )

        while self._peek().isdigit():
            chars.append(self._advance())

        return Token(TokenType.RCONST, start_line, "".join(chars))

    def _scan_string(self) -> Token:
        """Scan a double-quoted string constant on a single line."""
        start_line = self.line
        self._advance()  # consume opening "

        chars = []
        while not self._at_end():
            char = self._peek()

            if char == '"':
                self._advance()  # consume closing "
                return Token(TokenType.SCONST, start_line, "".join(chars))

            if char == "\n":
                break

            chars.append(self._advance())

        raise UnterminatedStringError(self._location(start_line))

    def _scan_operator(self) -> Token:
        """Scan an operator or delimiter."""
        start_line = self.line
        char = self._advance()

        if char == "=":
            if self._peek() == "=":
                self._advance()
                return Token(TokenType.EQUAL, start_line)
            return Token(TokenType.ASSIGN, start_line)

        if char in self.SINGLE_TOKENS:
            return Token(self.SINGLE_TOKENS[char], start_line)

        raise InvalidCharacterError(char, self._location(start_line))
