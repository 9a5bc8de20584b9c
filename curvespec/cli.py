"""
Command-Line Interface

CLI for validating, evaluating and sampling knot curve equations.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from knot_policies import CurveValidationPolicy, PolicyError, SamplingPolicy, load_policy
from validity import validate_curve

from . import __version__
from .catalog import get_preset, load_curve, preset_names
from .expression import ExpressionSyntaxError, evaluate, parse


# Options of the commands that take equations, mapped to whether they take a value.
_EQUATION_COMMAND_OPTIONS = {
    "validate": {"-h": False, "--help": False, "--policy": True, "--lenient": False, "--json": False},
    "evaluate": {"-h": False, "--help": False, "-t": True, "--ast": False},
}


def _separate_equations(argv: List[str]) -> List[str]:
    """
    Move equation arguments behind ``--``.

    Equations such as ``-sin(3*t)`` or ``-t^2`` start with a minus sign, and
    argparse would otherwise read them as options. Only arguments that are
    exactly one of the command's option strings (or ``--long=value``) stay
    options; everything else is an equation.
    """
    argv = list(argv)
    for index, arg in enumerate(argv):
        if not arg.startswith("-"):
            break
    else:
        return argv

    options = _EQUATION_COMMAND_OPTIONS.get(argv[index])
    if options is None:
        return argv

    flags: List[str] = []
    equations: List[str] = []
    rest = iter(argv[index + 1:])
    for arg in rest:
        if arg == "--":
            equations.extend(rest)
            break
        name, has_value, _ = arg.partition("=") if arg.startswith("--") else (arg, "", "")
        if name not in options:
            equations.append(arg)
            continue
        flags.append(arg)
        if options[name] and not has_value:
            value = next(rest, None)
            if value is not None:
                flags.append(value)

    return argv[:index + 1] + flags + ["--"] + equations


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knot-curves",
        description="Knot Curve Spec - validate and evaluate parametric knot equations",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    val_parser = subparsers.add_parser("validate", help="Validate three axis equations")
    val_parser.add_argument("x", type=str, help="Equation for the x axis")
    val_parser.add_argument("y", type=str, help="Equation for the y axis")
    val_parser.add_argument("z", type=str, help="Equation for the z axis")
    val_parser.add_argument(
        "--policy",
        type=str,
        default=None,
        help="Path to a JSON validation policy",
    )
    val_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Report periodicity/degeneracy/magnitude findings as warnings",
    )
    val_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the verdict as JSON",
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate one equation")
    eval_parser.add_argument("expression", type=str, help="Equation over t")
    eval_parser.add_argument(
        "-t",
        type=float,
        action="append",
        dest="values",
        default=None,
        help="Parameter value (repeatable, default: 0)",
    )
    eval_parser.add_argument(
        "--ast",
        action="store_true",
        help="Also print the parsed AST as JSON",
    )

    # Presets command
    subparsers.add_parser("presets", help="List preset curves")

    # Sample command
    sample_parser = subparsers.add_parser("sample", help="Sample a preset curve")
    sample_parser.add_argument("name", type=str, help="Preset name")
    sample_parser.add_argument(
        "--segments", "-s",
        type=int,
        default=SamplingPolicy().segments,
        help="Number of points (default: 400)",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_separate_equations(argv))

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "validate":
        return run_validate(args)
    elif args.command == "evaluate":
        return run_evaluate(args)
    elif args.command == "presets":
        return run_presets(args)
    elif args.command == "sample":
        return run_sample(args)
    return 1


def run_validate(args) -> int:
    """Run the validate command."""
    try:
        policy = load_policy(args.policy) if args.policy else CurveValidationPolicy()
    except PolicyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    if args.lenient:
        policy.strict_geometry = False

    verdict = validate_curve(args.x, args.y, args.z, policy=policy)

    if args.json:
        print(verdict.to_json())
    else:
        print(f"Status: {verdict.status}")
        for d in verdict.diagnostics:
            print(f"  error: {d.message}")
        for d in verdict.warnings:
            print(f"  warning: {d.message}")
    return 0 if verdict.is_valid else 1


def run_evaluate(args) -> int:
    """Run the evaluate command."""
    try:
        expr = parse(args.expression)
    except ExpressionSyntaxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.ast:
        print(json.dumps(expr.to_dict(), indent=2))
    for t in args.values or [0.0]:
        print(f"t={t!r}: {evaluate(expr, t)!r}")
    return 0


def run_presets(args) -> int:
    """Run the presets command."""
    for name in preset_names():
        preset = get_preset(name)
        eq = preset.equations
        marker = "" if preset.closed else " (open)"
        print(f"{name}{marker}")
        print(f"  x = {eq.x}")
        print(f"  y = {eq.y}")
        print(f"  z = {eq.z}")
    return 0


def run_sample(args) -> int:
    """Run the sample command."""
    try:
        curve = load_curve(args.name)
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    if args.segments < 1:
        print("Error: --segments must be positive", file=sys.stderr)
        return 1

    points = curve.sample(segments=args.segments)
    print(json.dumps({"name": args.name, "points": points.tolist()}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
