"""
  Lisp Reader

- Streaming: pulls one character at a time from a text stream, with a single
  character of pushback (peek / advance).
- Classic recursive descent straight into the runtime representation:

    - integers        -> int
    - symbols         -> Symbol (interned through the session's SymbolTable)
    - ()              -> Nil
    - (a b c)         -> Pair chain terminated by Nil
    - (a . b)         -> Pair chain terminated by b
    - 'x              -> (quote x)

The internal routine `_read_expr` may return the CloseParen and Dot markers;
`read` never lets them escape to the caller.
"""

from __future__ import annotations

import string
from typing import Iterator, Optional, TextIO

from minilisp import SExpression
from minilisp.config import get_symbol_max_len
from minilisp.errors import LispSyntaxError
from minilisp.logging_config import get_logger
from minilisp.types.nil import Nil, Dot, CloseParen
from minilisp.types.pair import Pair
from minilisp.types.symbol import SymbolTable

logger = get_logger(__name__)

WHITESPACE = " \t\n\r"
DIGITS = string.digits
SYMBOL_START = string.ascii_letters + "+=!@#$%^&*"
SYMBOL_REST = string.ascii_letters + string.digits + "-"


class Reader:
    def __init__(self, stream: TextIO, symbols: SymbolTable, symbol_max_len: Optional[int] = None):
        self.stream = stream
        self.symbols = symbols
        self.symbol_max_len = symbol_max_len if symbol_max_len is not None else get_symbol_max_len()
        self._pending: str = ""
        self._quote = symbols.intern("quote")

    # --- Character level ---
    def peek(self) -> str:
        """Next character without consuming it; '' at end of input."""
        if not self._pending:
            self._pending = self.stream.read(1)
        return self._pending

    def advance(self) -> str:
        """Consume and return the next character; '' at end of input."""
        if self._pending:
            c, self._pending = self._pending, ""
            return c
        return self.stream.read(1)

    def _skip_line(self) -> None:
        while True:
            c = self.advance()
            if c == "" or c == "\n":
                return
            if c == "\r":
                if self.peek() == "\n":
                    self.advance()
                return

    # --- Tokens ---
    def _read_number(self, value: int) -> int:
        while self.peek() and self.peek() in DIGITS:
            value = value * 10 + int(self.advance())
        return value

    def _read_symbol(self, first: str) -> SExpression:
        chars = [first]
        while self.peek() and self.peek() in SYMBOL_REST:
            if len(chars) >= self.symbol_max_len:
                raise LispSyntaxError("Symbol name too long")
            chars.append(self.advance())
        return self.symbols.intern("".join(chars))

    def _read_quote(self) -> SExpression:
        expr = self._read_expr()
        if expr is None:
            raise LispSyntaxError("Unexpected end of input after quote")
        if expr is CloseParen or expr is Dot:
            raise LispSyntaxError(f"Nothing to quote before {'.' if expr is Dot else ')'}")
        return Pair(self._quote, Pair(expr, Nil))

    def _read_list(self) -> SExpression:
        head: SExpression = Nil
        tail: Optional[Pair] = None
        while True:
            expr = self._read_expr()
            if expr is None:
                raise LispSyntaxError("Unclosed parenthesis")
            if expr is CloseParen:
                return head
            if expr is Dot:
                if tail is None:
                    raise LispSyntaxError("Stray dot")
                rest = self._read_expr()
                if rest is None:
                    raise LispSyntaxError("Unclosed parenthesis")
                if rest is CloseParen or rest is Dot:
                    raise LispSyntaxError("Expected one form after dot")
                tail.cdr = rest
                close = self._read_expr()
                if close is None:
                    raise LispSyntaxError("Unclosed parenthesis")
                if close is not CloseParen:
                    raise LispSyntaxError("Closed parenthesis expected after dot")
                return head
            cell = Pair(expr, Nil)
            if tail is None:
                head = cell
            else:
                tail.cdr = cell
            tail = cell

    def _read_expr(self) -> SExpression:
        while True:
            c = self.advance()
            if c == "":
                return None
            if c in WHITESPACE:
                continue
            if c == ";":
                self._skip_line()
                continue
            if c == "(":
                return self._read_list()
            if c == ")":
                return CloseParen
            if c == ".":
                return Dot
            if c == "'":
                return self._read_quote()
            if c in DIGITS:
                return self._read_number(int(c))
            if c == "-" and self.peek() and self.peek() in DIGITS:
                return -self._read_number(0)
            if c in SYMBOL_START:
                return self._read_symbol(c)
            raise LispSyntaxError(f"Don't know how to handle {c!r}")

    # --- Public ---
    def read(self) -> SExpression:
        """Read one top-level form, or return None at end of input."""
        expr = self._read_expr()
        if expr is CloseParen:
            raise LispSyntaxError("Stray close parenthesis")
        if expr is Dot:
            raise LispSyntaxError("Stray dot")
        if expr is not None:
            logger.debug("read form %r", expr)
        return expr

    def read_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr
