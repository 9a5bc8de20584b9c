"""
Tokenizer for curve equations.

Identifiers are checked against the closed lexicon here, so any name
outside it (``Math``, ``window``, ``x``, ``__import__``) is rejected
before the parser ever sees it.
"""

from dataclasses import dataclass
from typing import List

from .nodes import ALLOWED_IDENTIFIERS, OPERATORS, PUNCTUATION, ExpressionSyntaxError


NUMBER = "number"
IDENT = "ident"
OP = "op"
LPAREN = "lparen"
RPAREN = "rparen"
COMMA = "comma"
EOF = "eof"

_DIGITS = frozenset("0123456789")

_PUNCTUATION_KINDS = {"(": LPAREN, ")": RPAREN, ",": COMMA}

# "*" also appears here; the lexer checks for "**" before consulting this table.
_SINGLE_CHAR_TOKENS = {op: OP for op in OPERATORS if len(op) == 1}
_SINGLE_CHAR_TOKENS.update((ch, _PUNCTUATION_KINDS[ch]) for ch in PUNCTUATION)


@dataclass(frozen=True)
class Token:
    """A lexical token with its source offset."""
    kind: str
    text: str
    position: int


def _read_number(source: str, start: int) -> int:
    end = start
    while end < len(source) and (source[end] in _DIGITS or source[end] == "."):
        end += 1
    text = source[start:end]
    if text.count(".") > 1 or text == ".":
        raise ExpressionSyntaxError(
            f"malformed number '{text}'", position=start, fragment=text
        )
    return end


def _read_identifier(source: str, start: int) -> int:
    end = start
    while end < len(source) and (source[end].isalnum() or source[end] == "_"):
        end += 1
    return end


def tokenize(source: str) -> List[Token]:
    """
    Split ``source`` into tokens.

    Parameters
    ----------
    source : str
        Raw expression text

    Returns
    -------
    list of Token
        Tokens in source order, terminated by an EOF token

    Raises
    ------
    ExpressionSyntaxError
        On unknown identifiers, malformed numbers or unexpected characters
    """
    tokens: List[Token] = []
    i = 0
    n = len(source)

    while i < n:
        ch = source[i]

        if ch.isspace():
            i += 1
            continue

        if ch in _DIGITS or ch == ".":
            end = _read_number(source, i)
            tokens.append(Token(NUMBER, source[i:end], i))
            i = end
            continue

        if ch.isalpha() or ch == "_":
            end = _read_identifier(source, i)
            name = source[i:end]
            if name not in ALLOWED_IDENTIFIERS:
                raise ExpressionSyntaxError(
                    f"unknown symbol '{name}'", position=i, fragment=name
                )
            tokens.append(Token(IDENT, name, i))
            i = end
            continue

        if ch == "*":
            if source.startswith("**", i):
                tokens.append(Token(OP, "^", i))
                i += 2
            else:
                tokens.append(Token(OP, "*", i))
                i += 1
            continue

        kind = _SINGLE_CHAR_TOKENS.get(ch)
        if kind is None:
            raise ExpressionSyntaxError(
                f"unexpected character '{ch}'", position=i, fragment=ch
            )
        tokens.append(Token(kind, ch, i))
        i += 1

    tokens.append(Token(EOF, "", n))
    return tokens


__all__ = [
    "Token",
    "tokenize",
    "NUMBER",
    "IDENT",
    "OP",
    "LPAREN",
    "RPAREN",
    "COMMA",
    "EOF",
]
