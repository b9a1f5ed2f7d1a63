"""Lexer, LL(1) and recursive-descent parsers, and LR(0) closure and goto for arithmetic expressions."""

__version__ = "0.1.0"