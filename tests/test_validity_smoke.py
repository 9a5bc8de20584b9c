"""
Smoke tests for validity checks.

These tests exercise the public validity API end to end on preset curves
and a handful of malformed inputs.
"""

import pytest


class TestValiditySmoke:
    """Smoke tests for the validation entry points."""

    def test_all_presets_run(self):
        """Every preset produces a verdict without raising."""
        from curvespec.catalog import get_preset, preset_names
        from validity import validate_curve

        for name in preset_names():
            eq = get_preset(name).equations
            verdict = validate_curve(eq.x, eq.y, eq.z)
            assert verdict.is_valid == get_preset(name).closed

    @pytest.mark.parametrize("equations", [
        ("", "", ""),
        ("(((", ")))", "()"),
        ("t t t", "sin", "pow(t)"),
        ("1/0", "log(0)", "sqrt(-1)"),
        ("1e999", "9" * 400, "t"),
    ])
    def test_never_raises(self, equations):
        """Malformed input becomes diagnostics, never exceptions."""
        from validity import validate_curve

        verdict = validate_curve(*equations)
        assert not verdict.is_valid

    def test_non_string_input(self):
        """Non-string equations are treated as empty."""
        from validity import validate_curve

        verdict = validate_curve(None, 1, "sin(t)")
        assert verdict.errors[:2] == ["X equation cannot be empty", "Y equation cannot be empty"]
