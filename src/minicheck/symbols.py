"""
Declaration Symbol Table
========================

Tracks every variable declared in the program being checked. The
language has one flat namespace: names are case-sensitive, unique across
the whole program, and must be declared before any use. Entries are
only ever added, by declaration parsing, and live until the parse run
ends.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from minicheck.errors import DuplicateDeclarationError, SourceLocation
from minicheck.lexer import TokenType, TYPE_KEYWORDS


@dataclass(frozen=True)
class Symbol:
    """
    A declared variable.

    Attributes:
        name: Identifier lexeme
        kind: Declared type, TokenType.INT or TokenType.FLOAT
        line: Line of the declaration
    """
    name: str
    kind: TokenType
    line: int

    def __repr__(self) -> str:
        return f"Symbol({self.name}, {self.kind.name}, line {self.line})"


class SymbolTable:
    """
    Name -> declared kind map for one parse run.

    Example:
        table = SymbolTable()
        table.declare("a", TokenType.INT, line=1)
        assert "a" in table
        assert table.kind_of("a") is TokenType.INT
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self._symbols: dict[str, Symbol] = {}

    def declare(self, name: str, kind: TokenType, line: int) -> Symbol:
        """
        Record a new declaration.

        Raises:
            DuplicateDeclarationError: If the name is already declared;
                the existing entry is left untouched
            ValueError: If kind is not a declaration type
        """
        if kind not in TYPE_KEYWORDS:
            raise ValueError(f"{kind} is not a declaration type")

        existing = self._symbols.get(name)
        if existing is not None:
            raise DuplicateDeclarationError(
                name,
                location=SourceLocation(self.filename, line),
                original_location=SourceLocation(self.filename, existing.line),
            )

        symbol = Symbol(name, kind, line)
        self._symbols[name] = symbol
        return symbol

    def is_declared(self, name: str) -> bool:
        return name in self._symbols

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the symbol for name, or None if it was never declared."""
        return self._symbols.get(name)

    def kind_of(self, name: str) -> Optional[TokenType]:
        symbol = self._symbols.get(name)
        return symbol.kind if symbol else None

    def symbols(self) -> list[Symbol]:
        """All symbols in declaration order."""
        return list(self._symbols.values())

    def clear(self) -> None:
        self._symbols.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)
