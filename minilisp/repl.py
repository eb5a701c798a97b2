"""Read-eval-print driver.

Reads one top-level form at a time from a text stream, evaluates it in the
session's global frame and prints the result. The first error ends the run;
`main` turns it into exit status 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from minilisp.config import get_log_level, get_recursion_limit, get_symbol_max_len
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def run(interp: Interpreter, stream: TextIO, echo: bool = True, out: Optional[TextIO] = None) -> None:
    """Evaluate every form in `stream`, printing each result when `echo` is set."""
    while (expr := interp.read(stream)) is not None:
        value = interp.eval_expr(expr)
        if echo:
            target = out if out is not None else sys.stdout
            target.write(interp.to_string(value))
            target.write("\n")
            target.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="A minimal Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to run (default: standard input)")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the value of each form")
    parser.add_argument("--log-level", default=None, help="logging level (default: $MINILISP_LOG_LEVEL or WARNING)")
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or get_log_level(), args.log_file)

    try:
        symbol_max_len = get_symbol_max_len()
        limit = get_recursion_limit()
    except ValueError as e:
        logger.error("Bad configuration: %s", e)
        return 1
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter(symbol_max_len=symbol_max_len)
    try:
        if not args.files:
            run(interp, sys.stdin, echo=not args.quiet)
        for path in args.files:
            logger.debug("running %s", path)
            with open(path, encoding="utf-8") as f:
                run(interp, f, echo=not args.quiet)
    except LispError as e:
        logger.error("%s", e)
        return 1
    except RecursionError:
        logger.error("Stack overflow")
        return 1
    return 0
