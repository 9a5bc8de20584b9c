"""
Recursive-descent parser for curve equations.

GRAMMAR
-------
    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := "-" unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER
                | "t" | "pi" | "e"
                | FUNCTION "(" expression ("," expression)* ")"
                | "(" expression ")"

``^`` (also spelled ``**``) is right associative and binds tighter than
``*`` and ``/``. Unary minus binds looser than ``^``, so ``-t^2`` is
``-(t^2)`` while ``2^-t`` is still accepted.
"""

from contextlib import contextmanager
from typing import Iterator, List

from .lexer import (
    Token,
    tokenize,
    NUMBER,
    IDENT,
    OP,
    LPAREN,
    RPAREN,
    COMMA,
    EOF,
)
from .nodes import (
    ASTNode,
    NumberNode,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    CallNode,
    CONSTANTS,
    FUNCTION_ARITY,
    VARIABLE,
    MAX_EXPRESSION_LENGTH,
    MAX_NESTING_DEPTH,
    ExpressionSyntaxError,
)


def _describe(token: Token) -> str:
    if token.kind == EOF:
        return "end of expression"
    return f"'{token.text}'"


class _Parser:
    """Single-use parser over a token list."""

    def __init__(self, tokens: List[Token]):
        self._tokens = tokens
        self._index = 0
        self._depth = 0

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != EOF:
            self._index += 1
        return token

    def _error(self, reason: str, token: Token) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            reason, position=token.position, fragment=token.text or None
        )

    @contextmanager
    def _nested(self, token: Token) -> Iterator[None]:
        self._depth += 1
        try:
            if self._depth > MAX_NESTING_DEPTH:
                raise self._error(
                    f"expression nested deeper than {MAX_NESTING_DEPTH} levels", token
                )
            yield
        finally:
            self._depth -= 1

    def _expect_closing(self, opening: Token) -> None:
        token = self._peek()
        if token.kind != RPAREN:
            if token.kind == EOF:
                raise self._error("unbalanced parentheses: missing ')'", opening)
            raise self._error(f"expected ')' but found {_describe(token)}", token)
        self._advance()

    def parse(self) -> ASTNode:
        node = self._expression()
        token = self._peek()
        if token.kind == RPAREN:
            raise self._error("unbalanced parentheses: unexpected ')'", token)
        if token.kind != EOF:
            raise self._error(
                f"unexpected {_describe(token)} (missing operator?)", token
            )
        return node

    def _expression(self) -> ASTNode:
        left = self._term()
        while self._peek().kind == OP and self._peek().text in ("+", "-"):
            op = self._advance().text
            right = self._term()
            left = BinaryOpNode(op, left, right)
        return left

    def _term(self) -> ASTNode:
        left = self._unary()
        while self._peek().kind == OP and self._peek().text in ("*", "/"):
            op = self._advance().text
            right = self._unary()
            left = BinaryOpNode(op, left, right)
        return left

    def _unary(self) -> ASTNode:
        token = self._peek()
        if token.kind == OP and token.text == "-":
            self._advance()
            with self._nested(token):
                return UnaryOpNode("neg", self._unary())
        return self._power()

    def _power(self) -> ASTNode:
        base = self._primary()
        token = self._peek()
        if token.kind == OP and token.text == "^":
            self._advance()
            with self._nested(token):
                return BinaryOpNode("^", base, self._unary())
        return base

    def _primary(self) -> ASTNode:
        token = self._peek()

        if token.kind == NUMBER:
            self._advance()
            return NumberNode(float(token.text))

        if token.kind == IDENT:
            self._advance()
            if token.text == VARIABLE:
                return VariableNode(token.text)
            if token.text in CONSTANTS:
                return ConstantNode(token.text)
            return self._call(token)

        if token.kind == LPAREN:
            self._advance()
            with self._nested(token):
                node = self._expression()
            self._expect_closing(token)
            return node

        if token.kind == RPAREN:
            raise self._error("unbalanced parentheses: unexpected ')'", token)
        if token.kind == EOF:
            raise self._error("unexpected end of expression", token)
        raise self._error(f"unexpected {_describe(token)}", token)

    def _call(self, name_token: Token) -> ASTNode:
        name = name_token.text
        opening = self._peek()
        if opening.kind != LPAREN:
            raise self._error(f"function '{name}' must be called with parentheses", name_token)
        self._advance()

        args: List[ASTNode] = []
        with self._nested(opening):
            if self._peek().kind != RPAREN:
                args.append(self._expression())
                while self._peek().kind == COMMA:
                    self._advance()
                    args.append(self._expression())
        self._expect_closing(opening)

        expected = FUNCTION_ARITY[name]
        if len(args) != expected:
            plural = "argument" if expected == 1 else "arguments"
            raise self._error(
                f"function '{name}' expects {expected} {plural}, got {len(args)}",
                name_token,
            )
        return CallNode(name, tuple(args))


def parse_source(source: str) -> ASTNode:
    """
    Parse an equation string into an AST.

    Parameters
    ----------
    source : str
        Equation text over the free variable ``t``

    Returns
    -------
    ASTNode
        Root of the parsed tree

    Raises
    ------
    ExpressionSyntaxError
        If the text is empty, too long, or not in the grammar
    """
    if not isinstance(source, str):
        raise ExpressionSyntaxError(
            f"expression must be a string, got {type(source).__name__}"
        )
    if len(source) > MAX_EXPRESSION_LENGTH:
        raise ExpressionSyntaxError(
            f"expression longer than {MAX_EXPRESSION_LENGTH} characters"
        )
    if not source.strip():
        raise ExpressionSyntaxError("expression is empty")

    return _Parser(tokenize(source)).parse()


__all__ = ["parse_source"]
