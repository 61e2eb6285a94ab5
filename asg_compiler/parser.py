"""
Predictive recursive-descent translator for the assignment compiler.

Parses one statement and emits code while it parses: there is no AST and
no token stream. Each production is one method, every branch is decided
on a single character of lookahead, and nothing is ever re-read.

Grammar:

    assignment  ::= name '=' expression
    expression  ::= ( addop | term ) { addop term }
    term        ::= factor { mulop factor }
    factor      ::= '(' expression ')' | digit | ident
    ident       ::= name [ '(' ')' ]

    name        ::= one letter
    digit       ::= one decimal digit
    addop       ::= '+' | '-'
    mulop       ::= '*' | '/'

A leading addop is unary: the primary register is zeroed and the operator
is applied as if a literal 0 had been written in front of it.
"""

from __future__ import annotations
import logging
from typing import Iterable, Optional

from .emitter import TranslationContext
from .lookahead import LookaheadSource


logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Syntax error: what the translator expected and what it found instead."""

    def __init__(self, expected: str, found: Optional[str]):
        self.expected = expected
        self.found = found
        what = "end of input" if found is None else repr(found)
        super().__init__(f"Expected {expected}, found {what}")


class Translator:
    """Translates a single `name = expression` statement into a context."""

    def __init__(self, source: Iterable[str], context: TranslationContext):
        self.src = LookaheadSource(source)
        self.ctx = context

    # ── Entry point ───────────────────────────

    def process(self) -> str:
        """Translate one statement and return the finished program text."""
        self.ctx.start()
        self.assignment()
        if self.src.look != "\n":
            raise ParseError("Newline", self.src.look)
        return self.ctx.finish()

    # ── Recognizers ───────────────────────────

    def match_char(self, expected: str):
        if self.src.look != expected:
            raise ParseError(repr(expected), self.src.look)
        self.src.advance()

    def read_name(self) -> str:
        if not self.src.is_alpha():
            raise ParseError("Name", self.src.look)
        name = self.src.look
        self.src.advance()
        return name

    def read_digit(self) -> str:
        if not self.src.is_digit():
            raise ParseError("Digit", self.src.look)
        digit = self.src.look
        self.src.advance()
        return digit

    # ── Productions ───────────────────────────

    def assignment(self):
        name = self.read_name()
        logger.debug("assignment to %s", name)
        self.ctx.declare_variable(name)
        self.match_char("=")
        self.expression()
        self.ctx.store_variable(name)

    def expression(self):
        if self.src.is_addop():
            self.ctx.clear_primary()
        else:
            self.term()

        while self.src.is_addop():
            self.ctx.push_primary()
            if self.src.look == "+":
                self.add()
            else:
                self.sub()

    def term(self):
        self.factor()
        while self.src.is_mulop():
            self.ctx.push_primary()
            if self.src.look == "*":
                self.mul()
            else:
                self.div()

    def factor(self):
        if self.src.look == "(":
            self.match_char("(")
            self.expression()
            self.match_char(")")
        elif self.src.is_digit():
            self.ctx.load_literal(self.read_digit())
        elif self.src.is_alpha():
            self.ident()
        else:
            raise ParseError("Factor", self.src.look)

    def ident(self):
        name = self.read_name()
        if self.src.look == "(":
            self.match_char("(")
            self.match_char(")")
            self.ctx.call(name)
            self.ctx.declare_function(name)
        else:
            self.ctx.load_variable(name)
            self.ctx.declare_variable(name)

    # ── Operator applications ─────────────────
    # The left operand is on the stack; the right operand ends up in primary.

    def add(self):
        self.match_char("+")
        self.term()
        self.ctx.pop_secondary()
        self.ctx.add()

    def sub(self):
        self.match_char("-")
        self.term()
        self.ctx.pop_secondary()
        self.ctx.subtract()

    def mul(self):
        self.match_char("*")
        self.factor()
        self.ctx.pop_secondary()
        self.ctx.multiply()

    def div(self):
        self.match_char("/")
        self.factor()
        self.ctx.pop_secondary()
        self.ctx.divide()
