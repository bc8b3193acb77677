"""Lexer for Schemer source text.

Lazily turns a string into (kind, value) tokens:

    lparen      "("
    rparen      ")"
    string      text between double quotes (unterminated strings run to EOF)
    number      a Number, for atoms that parse as one
    identifier  any other atom
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Union

from schemer.types.number import Number

LPAREN = "lparen"
RPAREN = "rparen"
IDENTIFIER = "identifier"
STRING = "string"
NUMBER = "number"

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|"(?P<string>[^"]*)"?'  # closing quote optional at end of input
    r'|(?P<atom>[^\s()"][^\s()]*)'
    r")"
)


class Token(NamedTuple):
    kind: str
    value: Union[str, Number]

    def __str__(self) -> str:
        if self.kind == STRING:
            return f'"{self.value}"'
        return str(self.value)


def classify_atom(atom: str) -> Token:
    """A token that parses as a number wins over an identifier."""
    try:
        return Token(NUMBER, Number.parse(atom))
    except ValueError:
        return Token(IDENTIFIER, atom)


def tokenize(source: str) -> Iterator[Token]:
    """Token generator over `source`; whitespace is skipped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # only trailing whitespace is left
            break
        pos = m.end()
        if m.group("lparen"):
            yield Token(LPAREN, "(")
        elif m.group("rparen"):
            yield Token(RPAREN, ")")
        elif m.group("string") is not None:
            yield Token(STRING, m.group("string"))
        elif m.group("atom"):
            yield classify_atom(m.group("atom"))
        else:
            break
