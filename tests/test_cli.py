"""
Tests for the knot-curves command-line interface.
"""

import json

import pytest

from curvespec.cli import build_parser, main, _separate_equations


TREFOIL = ["sin(t) + 2*sin(2*t)", "cos(t) - 2*cos(2*t)", "-sin(3*t)"]


class TestValidateCommand:
    """Tests for `knot-curves validate`."""

    def test_valid(self, capsys):
        assert main(["validate", *TREFOIL]) == 0
        assert "Status: ok" in capsys.readouterr().out

    def test_invalid(self, capsys):
        assert main(["validate", "t", "cos(t)", "sin(t)"]) == 1
        out = capsys.readouterr().out
        assert "Status: fail" in out
        assert "error: X equation may not be periodic" in out

    def test_lenient(self, capsys):
        assert main(["validate", "t", "cos(t)", "sin(t)", "--lenient"]) == 0
        out = capsys.readouterr().out
        assert "Status: warnings" in out
        assert "warning: X equation may not be periodic" in out

    def test_json(self, capsys):
        assert main(["validate", "1", "1", "1", "--json"]) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["is_valid"] is False
        assert payload["diagnostics"][0]["check"] == "degenerate"

    def test_policy_file(self, tmp_path, capsys):
        path = tmp_path / "policy.json"
        path.write_text(json.dumps({"check_periodicity": False}))
        assert main(["validate", "t", "cos(t)", "sin(t)", "--policy", str(path)]) == 0

    def test_bad_policy_file(self, tmp_path, capsys):
        path = tmp_path / "policy.json"
        path.write_text(json.dumps({"max_magnitude": -1}))
        assert main(["validate", *TREFOIL, "--policy", str(path)]) == 2
        assert "Error:" in capsys.readouterr().err


class TestLeadingMinusEquations:
    """Equations starting with a minus sign are not read as options."""

    def test_validate_trefoil(self, capsys):
        assert main(["validate", "sin(t) + 2*sin(2*t)", "cos(t) - 2*cos(2*t)", "-sin(3*t)"]) == 0
        assert "Status: ok" in capsys.readouterr().out

    def test_validate_options_after_equations(self, capsys):
        assert main(["validate", "-t", "cos(t)", "-sin(t)", "--lenient", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["warnings"][0]["message"].startswith("X equation may not be periodic")

    def test_validate_policy_equals_form(self, tmp_path, capsys):
        path = tmp_path / "policy.json"
        path.write_text(json.dumps({"check_periodicity": False}))
        assert main(["validate", f"--policy={path}", "-t", "cos(t)", "sin(t)"]) == 0

    def test_evaluate_negated_power(self, capsys):
        assert main(["evaluate", "-t^2", "-t", "2"]) == 0
        assert capsys.readouterr().out.strip() == "t=2.0: -4.0"

    def test_evaluate_negative_parameter(self, capsys):
        assert main(["evaluate", "-t", "-3", "-cos(t) * t"]) == 0
        assert capsys.readouterr().out.strip().startswith("t=-3.0: ")

    def test_explicit_separator_still_accepted(self, capsys):
        assert main(["evaluate", "-t", "1", "--", "-t"]) == 0
        assert capsys.readouterr().out.strip() == "t=1.0: -1.0"

    def test_separation(self):
        assert _separate_equations(["-v", "evaluate", "-t^2", "-t", "2", "--ast"]) == [
            "-v", "evaluate", "-t", "2", "--ast", "--", "-t^2",
        ]

    def test_other_commands_untouched(self):
        argv = ["sample", "trefoil", "-s", "5"]
        assert _separate_equations(argv) == argv


class TestEvaluateCommand:
    """Tests for `knot-curves evaluate`."""

    def test_default_parameter(self, capsys):
        assert main(["evaluate", "cos(t)"]) == 0
        assert capsys.readouterr().out.strip() == "t=0.0: 1.0"

    def test_multiple_parameters(self, capsys):
        assert main(["evaluate", "t * 2", "-t", "1", "-t", "2.5"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["t=1.0: 2.0", "t=2.5: 5.0"]

    def test_non_finite(self, capsys):
        assert main(["evaluate", "sqrt(t)", "-t", "-1"]) == 0
        assert "nan" in capsys.readouterr().out

    def test_ast(self, capsys):
        assert main(["evaluate", "t", "--ast"]) == 0
        out = capsys.readouterr().out
        assert '"format": "knot_ast_v1"' in out

    def test_syntax_error(self, capsys):
        assert main(["evaluate", "Math.sin(t)"]) == 1
        assert "unknown symbol 'Math'" in capsys.readouterr().err


class TestPresetAndSampleCommands:
    """Tests for `knot-curves presets` and `knot-curves sample`."""

    def test_presets(self, capsys):
        assert main(["presets"]) == 0
        out = capsys.readouterr().out
        assert "trefoil" in out
        assert "helix (open)" in out

    def test_sample(self, capsys):
        assert main(["sample", "trefoil", "--segments", "5"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["name"] == "trefoil"
        assert len(payload["points"]) == 5
        assert len(payload["points"][0]) == 3

    def test_sample_unknown(self, capsys):
        assert main(["sample", "unknot"]) == 1
        assert "Unknown preset" in capsys.readouterr().err

    def test_sample_bad_segments(self, capsys):
        assert main(["sample", "trefoil", "-s", "0"]) == 1


class TestParser:
    """Tests for argument parsing."""

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "knot-curves" in capsys.readouterr().out
