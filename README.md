# exprparse

A small toolkit for checking arithmetic expressions made of non-negative
integers, `+`, `-`, `*`, `/` and parentheses. It provides a lexer, two LL
parsers for the same grammar, and the item-set operations used to build LR
parsers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
exprparse [-m {ll,predictive,tokens}] [expression]
```

When `expression` is omitted, one line is read from standard input.

- `-m ll` (the default) checks the expression with the table-driven LL(1) parser.
- `-m predictive` checks it with the recursive-descent parser.
- `-m tokens` prints the text of each token, one per line.

On success the command prints `accepted` and exits with status 0. A syntax
error is printed to standard error as `Syntax error: ...` with exit status 1.
If the LL(1) parser finishes with input left over, the command prints
`rejected: input left over` to standard error and exits with status 1.

```
$ exprparse "(1+2)*3"
accepted
$ exprparse -m tokens "12*(3-4)"
12
*
(
3
-
4
)
```

## Library

### `exprparse.grammar`

- `Symbol`: an `IntEnum` of terminals (`NUM`, `LEFTPAR`, `RIGHTPAR`, `PLUS`,
  `MINUS`, `DOT`, `DIV`), nonterminals (`EXPR`, `TERM`, `FACTOR`, `EXPRP`,
  `TERMP`) and the markers `EMPTY` and `END`. `is_terminal()` and
  `is_variable()` classify a symbol.
- `Production`: a frozen dataclass with `head` and `body`.
- `TOP_DOWN_GRAMMAR` and `BOTTOM_UP_GRAMMAR`: the two grammars below, as
  tuples of productions.
- `symbol_char(symbol)`: the character for an operator or parenthesis;
  `ValueError` for any other symbol.
- `ParseError`: raised by the parsers on invalid input.

### `exprparse.lexer`

- `tokenize(text)` returns a list of `Token(kind, text)`.
- `Lexer(text)` yields tokens through `next_token()` (which returns `None`
  at the end) or by iteration.

Input ends at the end of the string, at a newline or at a NUL character.
Any other character that is neither a digit nor one of `+ - * / ( )`,
spaces included, raises `LexerError`, a subclass of `ParseError`.

### `exprparse.stack`

`SymbolStack` with `push`, `push_production` (pushes a body so its first
symbol is on top), `peek`, `pop`, `is_empty`, `len()` and iteration from the
top down. `peek` and `pop` raise `IndexError` on an empty stack.

### `exprparse.ll`

All functions take an optional grammar, `TOP_DOWN_GRAMMAR` by default.

- `derives_empty(symbol)`: whether the symbol has a rule whose body is `EMPTY`.
- `first(symbol)` and `follow(symbol)`: FIRST and FOLLOW sets as frozensets;
  FIRST may hold `Symbol.EMPTY`, FOLLOW uses `Symbol.END` for end of input.
- `first_of_production(production)`: FIRST of a rule's body.
- `build_parse_table()`: a dict from `(variable, terminal)` to the production
  to expand.
- `parse(text)`: table-driven LL(1) parse. Raises `ParseError` on a syntax
  error and returns `False` when the start symbol is fully derived but input
  remains. When input runs out, nonterminals still on the stack are
  discarded, so empty input is accepted.

### `exprparse.predictive`

`PredictiveParser(text)` has one method per nonterminal (`expr`,
`expr_prime`, `term`, `term_prime`, `factor`) plus `match(symbol)` and
`parse()`. The module-level `parse(text)` returns `True` or raises
`ParseError`, including when input is left over. Running out of input in the
middle of a rule is not itself an error, so inputs such as `5+` and the
empty string are accepted.

### `exprparse.items`

- `Item(production, dot)`: an LR(0) item; the dot must lie in `0..31`.
- `ItemSet`: `add`, `discard`, `in`, `union` (also `|`), `dots(production)`,
  `productions()`, `len()`, and iteration in (production, dot) order.
- `ItemCollection`: item sets held by identity, newest first, with `add`,
  `remove`, `clear` (which also empties every held set), `len()` and iteration.

### `exprparse.slr`

- `closure(item_set)`: the LR(0) closure, as a new `ItemSet`.
- `goto(item_set, symbol)`: the closure of the items with the dot moved over
  `symbol`.

Both use `BOTTOM_UP_GRAMMAR` unless another grammar is given, and raise
`ValueError` for an item whose production number is not in the grammar.

## Grammars

The LL parsers use the grammar with left recursion removed:

```
expr   -> term expr'
expr'  -> + term expr' | - term expr' | ε
term   -> factor term'
term'  -> * factor term' | / factor term' | ε
factor -> num | ( expr )
```

The LR tools use the left-recursive form:

```
expr   -> expr + term | expr - term | term
term   -> term * factor | term / factor | factor
factor -> ( expr ) | num
```

## What it does not do

- It checks expressions; it does not evaluate them or build a syntax tree.
- The LR side stops at `closure` and `goto`: there is no construction of the
  canonical collection of item sets, no SLR action or goto table, and no LR
  parser. The command line offers only the LL(1) and recursive-descent parsers.