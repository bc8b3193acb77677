"""
  Schemer Reader

- Streaming, lazy parsing: one Expression per top-level form
- Only parenthesis balance is checked; special-form shapes are validated
  later by the evaluator

    - ( ... )    -> Combination
    - identifier -> Identifier
    - "text"     -> StringLiteral
    - number     -> NumberLiteral
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from schemer.errors import SchemerSyntaxError
from schemer.reader.tokenizer import (
    IDENTIFIER,
    LPAREN,
    NUMBER,
    RPAREN,
    STRING,
    Token,
    tokenize,
)
from schemer.types.expression import (
    Combination,
    Expression,
    Identifier,
    NumberLiteral,
    StringLiteral,
)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[Expression]:
        """Parse one expression, or return None at end of input."""
        token = self.advance()
        if token is None:
            return None

        if token.kind == LPAREN:
            items: list[Expression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SchemerSyntaxError("Unexpected end of input")
                if nxt.kind == RPAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return Combination(tuple(items))

        if token.kind == RPAREN:
            raise SchemerSyntaxError("Unexpected ')'")
        if token.kind == IDENTIFIER:
            return Identifier(token.value)
        if token.kind == STRING:
            return StringLiteral(token.value)
        if token.kind == NUMBER:
            return NumberLiteral(token.value)

        raise SchemerSyntaxError(f"Unknown token: {token.kind} {token.value}")

    def parse_all(self) -> Iterator[Expression]:
        while self.peek() is not None:
            yield self.parse_expr()


class Parser:
    """Iterator of top-level expressions over a token sequence."""

    def __init__(self, tokens: Iterable[Token]):
        self.stream = TokenStream(tokens)
        self.forms = self.stream.parse_all()

    def __iter__(self) -> Parser:
        return self

    def __next__(self) -> Expression:
        return next(self.forms)


def parse(source: str) -> Parser:
    """Lazily parse every top-level form in `source`."""
    return Parser(tokenize(source))
