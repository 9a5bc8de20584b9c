"""
AST subsystem for curve equations.

This module provides tokenizing, parsing and compilation of the restricted
expression language used for parametric knot equations.

The AST format is "knot_ast_v1" which supports:
- Numeric literals (integer or decimal)
- The free variable t
- The constants pi and e
- Binary operations (+, -, *, /, ^)
- Unary negation
- Calls of the allowed functions (all unary except pow)
"""

from .nodes import (
    ASTNode,
    NumberNode,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    CallNode,
    ExpressionSyntaxError,
    ALLOWED_FUNCTIONS,
    ALLOWED_IDENTIFIERS,
    FUNCTION_ARITY,
    CONSTANTS,
    VARIABLE,
    BINARY_OPS,
    UNARY_OPS,
    OPERATORS,
    PUNCTUATION,
    MAX_EXPRESSION_LENGTH,
    MAX_NESTING_DEPTH,
    walk,
    ast_to_dict,
)

from .lexer import Token, tokenize

from .parser import parse_source

from .compile import (
    compile_node,
    ExpressionEvaluationError,
)

__all__ = [
    # Nodes
    "ASTNode",
    "NumberNode",
    "VariableNode",
    "ConstantNode",
    "BinaryOpNode",
    "UnaryOpNode",
    "CallNode",
    "ExpressionSyntaxError",
    "walk",
    "ast_to_dict",
    # Lexicon
    "ALLOWED_FUNCTIONS",
    "ALLOWED_IDENTIFIERS",
    "FUNCTION_ARITY",
    "CONSTANTS",
    "VARIABLE",
    "BINARY_OPS",
    "UNARY_OPS",
    "OPERATORS",
    "PUNCTUATION",
    "MAX_EXPRESSION_LENGTH",
    "MAX_NESTING_DEPTH",
    # Lexer / parser
    "Token",
    "tokenize",
    "parse_source",
    # Compile
    "compile_node",
    "ExpressionEvaluationError",
]
