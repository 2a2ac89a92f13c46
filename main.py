import argparse
import json
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from frontend.ast.tree import Program
from frontend.lexer import lexer
from frontend.parser import parser
from frontend.typecheck.metrics import Metrics
from frontend.typecheck.namer import Namer
from utils.error import MiniError, NestingTooDeepError
from utils.printtree import TreePrinter

logger = logging.getLogger("minisem")

# Enough frames for the deepest block nesting a `ScopeStack` allows.
RECURSION_LIMIT = 5000


@contextmanager
def nestingGuard() -> Iterator[None]:
    """
    Run a recursive AST walk with a raised recursion limit.
    A tree that is still too deep is reported as a `MiniError`.
    """
    limit = sys.getrecursionlimit()
    sys.setrecursionlimit(max(limit, RECURSION_LIMIT))
    try:
        yield
    except RecursionError:
        raise NestingTooDeepError() from None
    finally:
        sys.setrecursionlimit(limit)


# The parser stage: MiniSem code -> abstract syntax tree
def step_parse(code: str) -> Program:
    lex = lexer.clone()
    lex.lineno = 1
    lex.error_stack = []
    parser.error_stack.clear()

    r: Optional[Program] = parser.parse(code, lexer=lex)
    errors = lex.error_stack + parser.error_stack
    if errors:
        raise errors[0]
    return r if r is not None else Program()


# The semantic stage: abstract syntax tree -> usage counters, or the first semantic error
def step_check(p: Program) -> Metrics:
    with nestingGuard():
        return Namer().transform(p)


def parseArgs(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MiniSem semantic checker")
    parser.add_argument("--input", type=str, required=True, help="the input source file")
    parser.add_argument("--parse", action="store_true", help="output parsed AST and stop")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format of the counters (default: text)",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def readCode(fileName: str) -> str:
    with open(fileName, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[list[str]] = None) -> int:
    args = parseArgs(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        program = step_parse(readCode(args.input))
        if args.parse:
            with nestingGuard():
                tree = TreePrinter().work(program)
            print(tree)
            return 0
        metrics = step_check(program)
    except MiniError as e:
        logger.debug("check of %s failed", args.input)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(metrics.asdict()))
    else:
        print(metrics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
