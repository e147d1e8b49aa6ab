# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the mini language lexer.
#
# Test coverage includes:
#   - Keywords (case-insensitive) and identifiers (case-sensitive)
#   - Integer, real and string constants
#   - Operators and delimiters, including = versus ==
#   - Comments and line tracking
#   - Error conditions
# =============================================================================

import pytest
from minicheck.lexer import Lexer, Token, TokenType
from minicheck.errors import (
    LexicalError,
    UnterminatedStringError,
    InvalidCharacterError,
)


# =============================================================================
# Helper Function
# =============================================================================

def tokenize(source: str) -> list:
    """Tokenize and drop the trailing DONE token."""
    tokens = list(Lexer(source, "<test>").tokenize())
    assert tokens[-1].type == TokenType.DONE
    return tokens[:-1]


def types(source: str) -> list:
    return [t.type for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty source produces only DONE."""
        tokens = list(Lexer("").tokenize())
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.DONE

    def test_whitespace_only(self):
        assert tokenize("  \t\n\r\n  ") == []

    def test_done_repeats(self):
        """Asking past the end keeps returning DONE."""
        lexer = Lexer("a")
        assert lexer.next_token().type == TokenType.IDENT
        assert lexer.next_token().type == TokenType.DONE
        assert lexer.next_token().type == TokenType.DONE

    def test_identifier(self):
        tokens = tokenize("count_1")
        assert tokens == [Token(TokenType.IDENT, 1, "count_1")]

    def test_identifier_keeps_case(self):
        tokens = tokenize("Total total")
        assert [t.lexeme for t in tokens] == ["Total", "total"]


# =============================================================================
# Keyword Tests
# =============================================================================

class TestKeywords:
    """Keywords are recognized in any letter case."""

    @pytest.mark.parametrize("word,expected", [
        ("PROGRAM", TokenType.PROGRAM),
        ("END", TokenType.END),
        ("INT", TokenType.INT),
        ("FLOAT", TokenType.FLOAT),
        ("IF", TokenType.IF),
        ("WRITE", TokenType.WRITE),
    ])
    def test_keyword(self, word, expected):
        assert types(word) == [expected]

    def test_lowercase_keyword(self):
        assert types("program end write") == [
            TokenType.PROGRAM, TokenType.END, TokenType.WRITE,
        ]

    def test_keywords_have_no_lexeme(self):
        assert tokenize("INT")[0].lexeme is None

    def test_keyword_prefix_is_identifier(self):
        """A word that merely starts with a keyword is an identifier."""
        tokens = tokenize("INTEGER iffy")
        assert [t.type for t in tokens] == [TokenType.IDENT, TokenType.IDENT]

    def test_type_keyword_helper(self):
        int_tok, write_tok = tokenize("INT WRITE")
        assert int_tok.is_type_keyword()
        assert not write_tok.is_type_keyword()


# =============================================================================
# Constant Tests
# =============================================================================

class TestConstants:
    """Integer, real and string constants."""

    def test_integer(self):
        assert tokenize("42") == [Token(TokenType.ICONST, 1, "42")]

    def test_real(self):
        assert tokenize("3.14") == [Token(TokenType.RCONST, 1, "3.14")]

    def test_real_needs_fraction_digits(self):
        with pytest.raises(LexicalError, match="invalid real constant"):
            tokenize("5.;")

    def test_string(self):
        assert tokenize('"hello world"') == [
            Token(TokenType.SCONST, 1, "hello world")
        ]

    def test_empty_string(self):
        assert tokenize('""')[0].lexeme == ""

    def test_unterminated_string_at_end(self):
        with pytest.raises(UnterminatedStringError):
            tokenize('"hello')

    def test_unterminated_string_at_newline(self):
        with pytest.raises(UnterminatedStringError) as exc_info:
            tokenize('\n"hello\n"')
        assert exc_info.value.line == 2


# =============================================================================
# Operator Tests
# =============================================================================

class TestOperators:
    """Operators and delimiters."""

    def test_arithmetic(self):
        assert types("+ - * / %") == [
            TokenType.PLUS, TokenType.MINUS, TokenType.MULT,
            TokenType.DIV, TokenType.MOD,
        ]

    def test_assign_versus_equal(self):
        assert types("= == =") == [
            TokenType.ASSIGN, TokenType.EQUAL, TokenType.ASSIGN,
        ]

    def test_greater(self):
        assert types("a>b") == [TokenType.IDENT, TokenType.GREATER, TokenType.IDENT]

    def test_delimiters(self):
        assert types("( ) ; ,") == [
            TokenType.LPAREN, TokenType.RPAREN,
            TokenType.SEMICOLON, TokenType.COMMA,
        ]

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("a = b @ c")
        assert exc_info.value.char == "@"


# =============================================================================
# Comment and Line Tracking Tests
# =============================================================================

class TestLinesAndComments:
    """Line numbers and // comments."""

    def test_line_numbers(self):
        tokens = tokenize("PROGRAM p\nINT a;\n\nWRITE a;")
        assert [t.line for t in tokens] == [1, 1, 2, 2, 2, 4, 4, 4]

    def test_comment_skipped(self):
        assert types("a // b c d\nb") == [TokenType.IDENT, TokenType.IDENT]

    def test_comment_keeps_line_count(self):
        tokens = tokenize("// header\n// more\nx")
        assert tokens[0].line == 3

    def test_division_is_not_comment(self):
        assert types("a / b") == [TokenType.IDENT, TokenType.DIV, TokenType.IDENT]

    def test_lexer_line_advances(self):
        """The lexer's own line counter follows consumed newlines."""
        lexer = Lexer("a\n\nb")
        lexer.next_token()
        assert lexer.line == 1
        lexer.next_token()
        assert lexer.line == 3
