from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional, TextIO

from minilisp import SExpression, LispValue
from minilisp.builtin.env_builtin import register
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import to_lisp_string
from minilisp.reader.parser import Reader
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.symbol import Symbol, SymbolTable


class Interpreter:
    """
    One interpreter session: the symbol table and the global frame, created
    once and shared by the reader and the evaluator for every form.
    """

    def __init__(self, output: Optional[TextIO] = None, symbol_max_len: Optional[int] = None):
        self.symbols: SymbolTable = SymbolTable()
        self.env: Environment = Environment()
        self.output = output
        self.symbol_max_len = symbol_max_len
        self._reader: Optional[Reader] = None
        register(self.env, self.symbols, output)

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    def reader(self, stream: TextIO) -> Reader:
        return Reader(stream, self.symbols, self.symbol_max_len)

    def read(self, stream: TextIO) -> SExpression:
        """Read the next form from `stream`; None at end of input.

        The reader is kept between calls on the same stream so its lookahead
        character carries over to the next form.
        """
        if self._reader is None or self._reader.stream is not stream:
            self._reader = self.reader(stream)
        return self._reader.read()

    def read_all(self, code: str) -> Iterator[SExpression]:
        return self.reader(StringIO(code)).read_all()

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read and evaluate every form in `code`; return the last value (Nil if none)."""
        result: LispValue = Nil
        for expr in self.read_all(code):
            result = self.eval_expr(expr)
        return result

    def to_string(self, value: LispValue) -> str:
        return to_lisp_string(value)
