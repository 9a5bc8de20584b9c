"""
Tests for Knot Curve Spec

This package contains tests for:
- Expression parsing and evaluation (curvespec)
- Curve definitions and the preset catalog
- Curve validity checks and the validation runner
- Policies and the command-line interface
"""
