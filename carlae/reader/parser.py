"""
  Carlae Reader: tokenizer and parser

- Tokens are plain strings: "(", ")" or a word (maximal run of anything else
  that is not whitespace or a comment).
- `#` starts a comment running to the end of the line.
- Emits Python primitives instead of node classes:

    - numbers -> int (no decimal point) or float
    - identifiers, keywords, @t / @f -> Symbol
    - S-expressions -> Python list (possibly empty)
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional

from carlae import SExpression
from carlae.errors import CarlaeSyntaxError
from carlae.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"
COMMENT = "#"

NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]*)?")


def tokenize(source: str) -> list[str]:
    """Split `source` into tokens with a single left-to-right scan."""
    tokens: list[str] = []
    word: list[str] = []
    in_comment = False

    def flush():
        if word:
            tokens.append("".join(word))
            word.clear()

    for ch in source:
        if in_comment:
            if ch == "\n":
                in_comment = False
        elif ch == COMMENT:
            flush()
            in_comment = True
        elif ch in (LPAREN, RPAREN):
            flush()
            tokens.append(ch)
        elif ch.isspace():
            flush()
        else:
            word.append(ch)
    flush()
    return tokens


def number_or_symbol(token: str) -> SExpression:
    """Classify a word as a numeric literal or a Symbol."""
    m = NUMBER_RE.fullmatch(token)
    if m is None:
        return Symbol(token)
    try:
        value = int(token) if m.group(1) is None else float(token)
    except ValueError as e:
        # int() refuses strings past the interpreter's digit limit
        raise CarlaeSyntaxError(f"Numeric literal too large: {token[:20]}...") from e
    if isinstance(value, float) and not math.isfinite(value):
        raise CarlaeSyntaxError(f"Numeric literal too large: {token[:20]}...")
    return value


class TokenStream:
    """Recursive-descent parser over a token list with an explicit cursor."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[str]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise CarlaeSyntaxError("Unexpected end of input")

        if tok == RPAREN:
            raise CarlaeSyntaxError("Unmatched ')'")

        if tok == LPAREN:
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise CarlaeSyntaxError("Unmatched '('")
                if nxt == RPAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        return number_or_symbol(tok)

    def parse_one(self) -> SExpression:
        """Parse exactly one form and require that it consumes every token."""
        if self.at_end():
            raise CarlaeSyntaxError("Empty input: expected an expression")
        try:
            expr = self.parse_expr()
        except RecursionError as e:
            # Nesting depth is bounded by the host call stack
            raise CarlaeSyntaxError("Expression nesting too deep") from e
        if not self.at_end():
            raise CarlaeSyntaxError(f"Unexpected trailing tokens: {self.tokens[self.pos:]!r}")
        return expr


def parse(tokens: Iterable[str]) -> SExpression:
    """Parse a token sequence representing exactly one form into an AST."""
    return TokenStream(tokens).parse_one()


def read(source: str) -> SExpression:
    """Tokenize and parse one top-level form from `source`."""
    return parse(tokenize(source))
