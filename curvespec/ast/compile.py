"""
AST compiler for knot_ast_v1 expressions.

This module compiles parsed AST nodes into closures over the free
parameter ``t``. The closures accept a float64 scalar or a float64 array,
so the same compiled form serves single evaluations and curve sampling.

SAFETY
------
Only the operations listed in the tables below can be reached. No dynamic
imports, no eval(), no exec(), no attribute access.

NUMERICS
--------
All arithmetic runs on numpy float64 with IEEE-754 semantics. Domain
violations produce nan or +/-inf instead of raising; callers wrap
evaluation in ``np.errstate(all="ignore")`` to silence the warnings.
"""

from typing import Callable, Dict, Union
import numpy as np

from .nodes import (
    ASTNode,
    NumberNode,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    CallNode,
    CONSTANTS,
)


Scalar = Union[float, np.floating]
ArrayOrScalar = Union[Scalar, np.ndarray]
CompiledFn = Callable[[ArrayOrScalar], ArrayOrScalar]


class ExpressionEvaluationError(TypeError):
    """Raised when evaluation is requested for something that is not a parsed expression."""
    pass


def _round_half_up(a):
    floor = np.floor(a)
    return np.where(a - floor >= 0.5, np.ceil(a), floor)


BINARY_OP_FUNCS: Dict[str, Callable] = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "^": np.power,
}

UNARY_OP_FUNCS: Dict[str, Callable] = {
    "neg": np.negative,
}

FUNCTION_IMPLS: Dict[str, Callable] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "sqrt": np.sqrt,
    "pow": np.power,
    "abs": np.abs,
    "floor": np.floor,
    "ceil": np.ceil,
    "round": _round_half_up,
    "exp": np.exp,
    "log": np.log,
    "log10": np.log10,
}


def compile_node(node: ASTNode) -> CompiledFn:
    """
    Compile an AST node into a callable evaluator.

    Parameters
    ----------
    node : ASTNode
        The node to compile

    Returns
    -------
    callable
        A function that takes ``t`` (float64 scalar or array) and returns
        a value of the same shape
    """
    if isinstance(node, NumberNode):
        value = np.float64(node.value)
        return lambda t: value

    elif isinstance(node, VariableNode):
        return lambda t: t

    elif isinstance(node, ConstantNode):
        value = np.float64(CONSTANTS[node.name])
        return lambda t: value

    elif isinstance(node, BinaryOpNode):
        op_func = BINARY_OP_FUNCS.get(node.op)
        if op_func is None:
            raise ExpressionEvaluationError(f"Unknown binary op: {node.op}")

        left_fn = compile_node(node.left)
        right_fn = compile_node(node.right)

        return lambda t: op_func(left_fn(t), right_fn(t))

    elif isinstance(node, UnaryOpNode):
        op_func = UNARY_OP_FUNCS.get(node.op)
        if op_func is None:
            raise ExpressionEvaluationError(f"Unknown unary op: {node.op}")

        arg_fn = compile_node(node.arg)

        return lambda t: op_func(arg_fn(t))

    elif isinstance(node, CallNode):
        impl = FUNCTION_IMPLS.get(node.name)
        if impl is None:
            raise ExpressionEvaluationError(f"Unknown function: {node.name}")

        arg_fns = tuple(compile_node(arg) for arg in node.args)
        if len(arg_fns) == 1:
            (arg_fn,) = arg_fns
            return lambda t: impl(arg_fn(t))
        return lambda t: impl(*(fn(t) for fn in arg_fns))

    else:
        raise ExpressionEvaluationError(f"Unknown node type: {type(node).__name__}")


__all__ = [
    "compile_node",
    "ExpressionEvaluationError",
    "BINARY_OP_FUNCS",
    "UNARY_OP_FUNCS",
    "FUNCTION_IMPLS",
]
