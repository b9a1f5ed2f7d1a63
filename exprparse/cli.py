"""Command line entry point: tokenize or parse an arithmetic expression."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import ll, predictive
from .grammar import ParseError
from .lexer import tokenize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprparse",
        description="Check an arithmetic expression over integers with + - * / and parentheses.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="expression to check; one line is read from standard input when omitted",
    )
    parser.add_argument(
        "-m",
        "--method",
        choices=("ll", "predictive", "tokens"),
        default="ll",
        help="table-driven LL(1) parser, recursive descent, or just list the tokens",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 when the input is accepted, 1 otherwise."""
    args = _build_parser().parse_args(argv)
    text = args.expression if args.expression is not None else sys.stdin.readline()

    try:
        if args.method == "tokens":
            for token in tokenize(text):
                print(token.text)
            return 0
        if args.method == "predictive":
            accepted = predictive.parse(text)
        else:
            accepted = ll.parse(text)
    except ParseError as error:
        print(f"Syntax error: {error}", file=sys.stderr)
        return 1

    if accepted:
        print("accepted")
        return 0
    print("rejected: input left over", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())