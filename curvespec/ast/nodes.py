"""
AST node definitions and lexicon for knot_ast_v1 expressions.

This module defines the closed lexicon that user-supplied curve equations
may reference, and the immutable node types the parser produces.

AST FORMAT (knot_ast_v1)
------------------------
Each node serialises to a dict with a "type" key and type-specific fields:

Number: {"type": "number", "value": <float>}
Variable: {"type": "var", "name": "t"}
Constant: {"type": "const", "name": "pi" | "e"}
BinaryOp: {"type": "binop", "op": <string>, "left": <node>, "right": <node>}
UnaryOp: {"type": "unop", "op": "neg", "arg": <node>}
Call: {"type": "call", "name": <string>, "args": [<node>, ...]}

Supported binary operations: +, -, *, /, ^
Supported unary operations: neg
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple
import math


AST_FORMAT = "knot_ast_v1"

VARIABLE = "t"

FUNCTION_ARITY: Mapping[str, int] = MappingProxyType({
    "sin": 1, "cos": 1, "tan": 1,
    "asin": 1, "acos": 1, "atan": 1,
    "sinh": 1, "cosh": 1, "tanh": 1,
    "sqrt": 1, "pow": 2, "abs": 1,
    "floor": 1, "ceil": 1, "round": 1,
    "exp": 1, "log": 1, "log10": 1,
})

ALLOWED_FUNCTIONS: FrozenSet[str] = frozenset(FUNCTION_ARITY)

CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "e": math.e,
})

ALLOWED_IDENTIFIERS: FrozenSet[str] = (
    frozenset({VARIABLE}) | frozenset(CONSTANTS) | ALLOWED_FUNCTIONS
)

BINARY_OPS: FrozenSet[str] = frozenset({"+", "-", "*", "/", "^"})

UNARY_OPS: FrozenSet[str] = frozenset({"neg"})

# "**" is accepted as a spelling of "^" and normalised by the lexer.
OPERATORS: FrozenSet[str] = frozenset({"+", "-", "*", "/", "^", "**"})

PUNCTUATION: FrozenSet[str] = frozenset({"(", ")", ","})

MAX_EXPRESSION_LENGTH = 500
MAX_NESTING_DEPTH = 64


class ExpressionSyntaxError(ValueError):
    """
    Raised when an expression cannot be parsed.

    Attributes
    ----------
    reason : str
        Human-readable description of the problem
    position : int or None
        Zero-based character offset of the offending text, when known
    fragment : str or None
        The offending substring, when known
    """

    def __init__(
        self,
        reason: str,
        position: Optional[int] = None,
        fragment: Optional[str] = None,
    ):
        self.reason = reason
        self.position = position
        self.fragment = fragment
        if position is not None:
            super().__init__(f"{reason} (at position {position})")
        else:
            super().__init__(reason)


@dataclass(frozen=True)
class ASTNode:
    """Base class for AST nodes."""

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError

    def children(self) -> Tuple["ASTNode", ...]:
        return ()


@dataclass(frozen=True)
class NumberNode(ASTNode):
    """A numeric literal."""
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "number", "value": self.value}


@dataclass(frozen=True)
class VariableNode(ASTNode):
    """A reference to the free parameter."""
    name: str = VARIABLE

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "var", "name": self.name}


@dataclass(frozen=True)
class ConstantNode(ASTNode):
    """A named constant (pi or e)."""
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "const", "name": self.name}


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    """A binary operation."""
    op: str
    left: ASTNode
    right: ASTNode

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "binop",
            "op": self.op,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
        }

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class UnaryOpNode(ASTNode):
    """A unary operation."""
    op: str
    arg: ASTNode

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "unop",
            "op": self.op,
            "arg": self.arg.to_dict(),
        }

    def children(self) -> Tuple[ASTNode, ...]:
        return (self.arg,)


@dataclass(frozen=True)
class CallNode(ASTNode):
    """A call of an allowed function."""
    name: str
    args: Tuple[ASTNode, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "call",
            "name": self.name,
            "args": [arg.to_dict() for arg in self.args],
        }

    def children(self) -> Tuple[ASTNode, ...]:
        return self.args


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def ast_to_dict(root: ASTNode) -> Dict[str, Any]:
    """Wrap a node tree in the versioned knot_ast_v1 envelope."""
    return {"format": AST_FORMAT, "root": root.to_dict()}


__all__ = [
    "AST_FORMAT",
    "VARIABLE",
    "FUNCTION_ARITY",
    "ALLOWED_FUNCTIONS",
    "CONSTANTS",
    "ALLOWED_IDENTIFIERS",
    "BINARY_OPS",
    "UNARY_OPS",
    "OPERATORS",
    "PUNCTUATION",
    "MAX_EXPRESSION_LENGTH",
    "MAX_NESTING_DEPTH",
    "ExpressionSyntaxError",
    "ASTNode",
    "NumberNode",
    "VariableNode",
    "ConstantNode",
    "BinaryOpNode",
    "UnaryOpNode",
    "CallNode",
    "walk",
    "ast_to_dict",
]
