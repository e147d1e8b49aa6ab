"""
Token Source with One-Token Pushback
====================================

Every grammar rule peeks by consuming a token and, if the token does not
belong to it, pushing it back so an enclosing or sibling rule can read
it again. No rule needs more than one token of lookahead, so the source
holds at most one pending token. Pushing back a second token before the
first is re-read means two rules tried to un-consume independently; that
is a parser bug and raises PushbackOverflowError.
"""

from typing import Iterable, Optional, Union

from minicheck.errors import PushbackOverflowError
from minicheck.lexer import Lexer, Token, TokenType


class _TokenFeed:
    """Replays a pre-built token sequence, then DONE forever."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self.line = 1

    def next_token(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return Token(TokenType.DONE, self.line)
        self.line = token.line
        return token


class TokenSource:
    """
    Wrapper around a lexer that supports pushing one token back.

    Attributes:
        tokens_read: Number of tokens pulled from the lexer (pushback
            re-reads are not counted)
    """

    def __init__(self, producer: Union[Lexer, _TokenFeed]):
        """
        Args:
            producer: Object with a `next_token()` method and a `line`
                attribute, normally a Lexer
        """
        self._producer = producer
        self._pending: Optional[Token] = None
        self.tokens_read = 0

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "TokenSource":
        """Build a source over an existing token list (DONE is appended)."""
        return cls(_TokenFeed(tokens))

    @property
    def line(self) -> int:
        """Current source line, as advanced by the lexer."""
        return self._producer.line

    @property
    def pending(self) -> Optional[Token]:
        """The pushed-back token waiting to be re-read, if any."""
        return self._pending

    def next(self) -> Token:
        """Return the pending token if there is one, else lex a new one."""
        if self._pending is not None:
            token, self._pending = self._pending, None
            return token

        self.tokens_read += 1
        return self._producer.next_token()

    def push_back(self, token: Token) -> None:
        """
        Return a token to the source so the next `next()` yields it.

        Raises:
            PushbackOverflowError: If a token is already pending
        """
        if self._pending is not None:
            raise PushbackOverflowError(self._pending, token)
        self._pending = token
