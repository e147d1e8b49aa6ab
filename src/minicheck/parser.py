"""
Mini Language Recursive Descent Parser
======================================

This module implements the syntax-and-declaration checker for the mini
language. It pulls tokens from a TokenSource, consults and updates the
symbol table as declarations and uses are seen, and reports problems
through Diagnostics. No AST is built: each grammar rule is one method
that returns True on success and False on failure.

Grammar (EBNF)
--------------
program         ::= 'PROGRAM' IDENT statement_list 'END' 'PROGRAM'
statement_list  ::= statement ';' { statement ';' }
statement       ::= declaration | control_statement
declaration     ::= ('INT' | 'FLOAT') identifier_list
identifier_list ::= IDENT { ',' IDENT }
control_stmt    ::= assign_statement | if_statement | write_statement
write_statement ::= 'WRITE' expression_list
if_statement    ::= 'IF' '(' logic_expression ')' control_statement
assign_statement::= var_ref '=' expression
expression_list ::= expression { ',' expression }
expression      ::= term { ('+' | '-') term }
term            ::= signed_factor { ('*' | '/' | '%') signed_factor }
signed_factor   ::= [ '+' | '-' ] factor
factor          ::= IDENT | ICONST | RCONST | SCONST | '(' expression ')'
logic_expression::= expression ('==' | '>') expression
var_ref         ::= IDENT

Rule Contract
-------------
On success a rule returns True with the input positioned just past the
construct. On failure it pushes back any token that is not its own,
makes sure at least one diagnostic has been reported (by itself or a
callee) and returns False. Callers may add a second, contextual
diagnostic. There is no resynchronization: the first failure unwinds
all the way up to program().

Every identifier must be declared before it is used, and only once.

Example Usage
-------------
>>> from minicheck.lexer import Lexer
>>> from minicheck.token_source import TokenSource
>>> from minicheck.parser import Parser
>>> parser = Parser(TokenSource(Lexer("PROGRAM p INT a; a = 5; END PROGRAM")))
>>> parser.parse_program()
True
>>> parser.error_count()
0
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from minicheck.diagnostics import Diagnostics
from minicheck.errors import DuplicateDeclarationError
from minicheck.lexer import Token, TokenType, TYPE_KEYWORDS
from minicheck.symbols import SymbolTable
from minicheck.token_source import TokenSource

logger = logging.getLogger(__name__)


ADDITIVE_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
MULTIPLICATIVE_OPERATORS = (TokenType.MULT, TokenType.DIV, TokenType.MOD)
RELATIONAL_OPERATORS = (TokenType.EQUAL, TokenType.GREATER)
LITERALS = (TokenType.ICONST, TokenType.RCONST, TokenType.SCONST)


@dataclass
class ParseContext:
    """
    Mutable state of one parse run.

    A fresh context per run keeps independent parses from sharing
    declarations or error counts.
    """
    symbols: SymbolTable = field(default_factory=SymbolTable)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class Parser:
    """
    Recursive descent checker for the mini language.

    Attributes:
        tokens: Token source with one-token pushback
        context: Symbol table and diagnostics for this run
        program_name: Name given after PROGRAM, once parsed
    """

    def __init__(self, tokens: TokenSource, context: Optional[ParseContext] = None):
        self.tokens = tokens
        self.context = context or ParseContext()
        self.program_name = None

    @property
    def symbols(self) -> SymbolTable:
        return self.context.symbols

    @property
    def diagnostics(self) -> Diagnostics:
        return self.context.diagnostics

    def parse_program(self) -> bool:
        """Check a whole program. Entry point for drivers."""
        return self.program()

    def error_count(self) -> int:
        return self.diagnostics.error_count()

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _next(self) -> Token:
        return self.tokens.next()

    def _push_back(self, token: Token) -> None:
        self.tokens.push_back(token)

    def _error(self, message: str) -> bool:
        """Report a diagnostic at the current line. Always returns False."""
        self.diagnostics.report(self.tokens.line, message)
        return False

    def _reject(self, token: Token, message: str) -> bool:
        """Push back a token that is not ours, then report."""
        self._push_back(token)
        return self._error(message)

    # =========================================================================
    # Program Structure
    # =========================================================================

    def program(self) -> bool:
        """program ::= 'PROGRAM' IDENT statement_list 'END' 'PROGRAM'"""
        token = self._next()

        if token.type == TokenType.DONE:
            return self._error("Empty File")

        if token.type != TokenType.PROGRAM:
            return self._reject(token, "Missing PROGRAM.")

        token = self._next()
        if token.type != TokenType.IDENT:
            return self._reject(token, "Missing Program Name.")
        self.program_name = token.lexeme

        if not self.statement_list():
            logger.debug(f"program '{self.program_name}' rejected in statement list")
            return False

        token = self._next()
        if token.type != TokenType.END:
            return self._reject(token, "Missing END at end of program.")

        token = self._next()
        if token.type != TokenType.PROGRAM:
            return self._reject(token, "Missing PROGRAM at the End")

        logger.debug(
            f"program '{self.program_name}' accepted, "
            f"{len(self.symbols)} variables declared"
        )
        return True

    def statement_list(self) -> bool:
        """
        statement_list ::= statement ';' { statement ';' }

        A semicolon is required after every statement, including the
        last one before END. The END that closes the list is pushed
        back for program() to consume.
        """
        while True:
            if not self.statement():
                return False

            token = self._next()
            if token.type != TokenType.SEMICOLON:
                return self._reject(token, "Missing a semicolon.")

            token = self._next()
            self._push_back(token)
            if token.type == TokenType.END:
                return True

    def statement(self) -> bool:
        """statement ::= declaration | control_statement"""
        token = self._next()
        self._push_back(token)

        if token.type in TYPE_KEYWORDS:
            return self.declaration()

        if token.type in (TokenType.IDENT, TokenType.IF, TokenType.WRITE):
            return self.control_statement()

        # The token is still pending from the lookahead above
        return self._error("Invalid Statement")

    # =========================================================================
    # Declarations
    # =========================================================================

    def declaration(self) -> bool:
        """declaration ::= ('INT' | 'FLOAT') identifier_list"""
        token = self._next()

        if token.type not in TYPE_KEYWORDS:
            return self._reject(token, "Incorrect Declaration Type.")

        return self.identifier_list(token)

    def identifier_list(self, type_token: Token) -> bool:
        """
        identifier_list ::= IDENT { ',' IDENT }

        Every name in the list is declared with the kind of type_token.
        The token following the last name is pushed back, so the
        statement's semicolon is left for statement_list().
        """
        while True:
            token = self._next()
            if token.type != TokenType.IDENT:
                return self._reject(token, "Invalid Identifier List")

            try:
                self.symbols.declare(token.lexeme, type_token.type, token.line)
            except DuplicateDeclarationError as e:
                logger.debug(str(e))
                return self._error("Variable Redefinition")

            logger.debug(f"declared {token.lexeme} as {type_token.type.name}")

            token = self._next()
            if token.type != TokenType.COMMA:
                self._push_back(token)
                return True

    # =========================================================================
    # Control Statements
    # =========================================================================

    def control_statement(self) -> bool:
        """control_statement ::= assign_statement | if_statement | write_statement"""
        token = self._next()
        self._push_back(token)

        if token.type == TokenType.IDENT:
            return self.assign_statement()
        if token.type == TokenType.IF:
            return self.if_statement()
        if token.type == TokenType.WRITE:
            return self.write_statement()

        return self._error("Invalid Control Statement")

    def write_statement(self) -> bool:
        """write_statement ::= 'WRITE' expression_list"""
        token = self._next()
        if token.type != TokenType.WRITE:
            return self._reject(token, "Missing WRITE Keyword")

        if not self.expression_list():
            return self._error("Missing expression after WRITE")

        return True

    def if_statement(self) -> bool:
        """
        if_statement ::= 'IF' '(' logic_expression ')' control_statement

        The controlled statement is a single control statement, which
        may itself be another IF.
        """
        token = self._next()
        if token.type != TokenType.IF:
            return self._reject(token, "Missing IF")

        token = self._next()
        if token.type != TokenType.LPAREN:
            return self._reject(token, "Missing Left Parenthesis of IF")

        if not self.logic_expression():
            return False

        token = self._next()
        if token.type != TokenType.RPAREN:
            return self._reject(token, "Missing Right Parenthesis of IF")

        if not self.control_statement():
            return self._error("Missing Statement after IF")

        return True

    def assign_statement(self) -> bool:
        """assign_statement ::= var_ref '=' expression"""
        if not self.var_ref():
            return False

        token = self._next()
        if token.type != TokenType.ASSIGN:
            return self._reject(token, "Missing Assignment Operator")

        if not self.expression():
            return self._error("Missing Expression in Assignment Statement")

        return True

    # =========================================================================
    # Expressions
    # =========================================================================

    def expression_list(self) -> bool:
        """expression_list ::= expression { ',' expression }"""
        if not self.expression():
            return self._error("Missing Expression")

        token = self._next()
        while token.type == TokenType.COMMA:
            if not self.expression():
                return self._error("Missing Expression after Comma")
            token = self._next()

        self._push_back(token)
        return True

    def expression(self) -> bool:
        """expression ::= term { ('+' | '-') term }"""
        if not self.term():
            return self._error("Expression error")

        token = self._next()
        while token.type in ADDITIVE_OPERATORS:
            if not self.term():
                return self._error("Missing operand after operator")
            token = self._next()

        self._push_back(token)
        return True

    def term(self) -> bool:
        """term ::= signed_factor { ('*' | '/' | '%') signed_factor }"""
        if not self.signed_factor():
            return self._error("Term Error")

        token = self._next()
        while token.type in MULTIPLICATIVE_OPERATORS:
            if not self.signed_factor():
                return self._error("Missing operand after operator")
            token = self._next()

        self._push_back(token)
        return True

    def signed_factor(self) -> bool:
        """
        signed_factor ::= [ '+' | '-' ] factor

        The sign is handed to factor() but not applied to anything:
        nothing is evaluated at this stage.
        """
        token = self._next()

        if token.type == TokenType.PLUS:
            sign = 1
        elif token.type == TokenType.MINUS:
            sign = -1
        else:
            sign = 1
            self._push_back(token)

        return self.factor(sign)

    def factor(self, sign: int = 1) -> bool:
        """factor ::= IDENT | ICONST | RCONST | SCONST | '(' expression ')'"""
        token = self._next()

        if token.type == TokenType.IDENT:
            if not self.symbols.is_declared(token.lexeme):
                logger.debug(f"use of undeclared variable '{token.lexeme}'")
                return self._error("Undeclared Variable")
            return True

        if token.type in LITERALS:
            return True

        if token.type != TokenType.LPAREN:
            return self._reject(token, "No left parenthesis")

        if not self.expression():
            return self._error("Factor error")

        token = self._next()
        if token.type != TokenType.RPAREN:
            return self._reject(token, "No right parenthesis")

        return True

    def logic_expression(self) -> bool:
        """logic_expression ::= expression ('==' | '>') expression"""
        if not self.expression():
            return self._error("Missing Expression in Logic Expression")

        token = self._next()
        if token.type not in RELATIONAL_OPERATORS:
            return self._reject(token, "Relational Operator Error")

        if not self.expression():
            return self._error("Missing Expression after Relational Operator")

        return True

    def var_ref(self) -> bool:
        """var_ref ::= IDENT, which must already be declared"""
        token = self._next()

        if token.type != TokenType.IDENT:
            return self._reject(token, "Incorrect Identifier Statement")

        if not self.symbols.is_declared(token.lexeme):
            logger.debug(f"assignment to undeclared variable '{token.lexeme}'")
            return self._error("Undeclared Variable")

        return True
