"""Tests for NUnit3Options and ToolRunResult."""

from pathlib import Path

import pytest

from nunit_pipeline_mcp.core.runner import NUnit3Options, ToolRunResult
from nunit_pipeline_mcp.core.runner.models import BOOLEAN_FIELDS


class TestOptionsFromDict:
    """Coercion of tool arguments into options."""

    def test_basic_fields(self):
        options = NUnit3Options.from_dict({
            "assemblies": ["a.dll", "b.dll"],
            "where": "cat == Smoke",
            "no_header": True,
            "workers": 2,
        })

        assert options.assemblies == ["a.dll", "b.dll"]
        assert options.where == "cat == Smoke"
        assert options.no_header is True
        assert options.workers == 2
        assert options.team_city is False

    def test_single_assembly_string(self):
        assert NUnit3Options.from_dict({"assemblies": "a.dll"}).assemblies == ["a.dll"]

    def test_path_objects_accepted(self):
        options = NUnit3Options.from_dict({"assemblies": [Path("bin") / "a.dll"]})
        assert options.assemblies == [str(Path("bin") / "a.dll")]

    def test_empty_assemblies_allowed(self):
        assert NUnit3Options.from_dict({"assemblies": []}).assemblies == []

    def test_unknown_keys_ignored(self):
        options = NUnit3Options.from_dict({"assemblies": ["a.dll"], "colour": "blue"})
        assert options == NUnit3Options(assemblies=["a.dll"])

    def test_none_keeps_default(self):
        options = NUnit3Options.from_dict({"verbose": None, "where": None})

        assert options.verbose is False
        assert options.where is None

    def test_boolean_must_be_bool(self):
        with pytest.raises(ValueError, match="verbose"):
            NUnit3Options.from_dict({"verbose": "false"})

    def test_value_rejects_lists(self):
        with pytest.raises(ValueError, match="where"):
            NUnit3Options.from_dict({"where": ["cat == Smoke"]})

    def test_value_rejects_bool(self):
        with pytest.raises(ValueError, match="workers"):
            NUnit3Options.from_dict({"workers": True})

    def test_assemblies_must_be_paths(self):
        with pytest.raises(ValueError, match="assemblies"):
            NUnit3Options.from_dict({"assemblies": [1, 2]})

    def test_execution_timeout(self):
        assert NUnit3Options.from_dict({"execution_timeout": "90"}).execution_timeout == 90.0

        with pytest.raises(ValueError):
            NUnit3Options.from_dict({"execution_timeout": 0})
        with pytest.raises(ValueError):
            NUnit3Options.from_dict({"execution_timeout": "soon"})

    @pytest.mark.parametrize("value", ["-1", "0", "nan", "inf", -5])
    def test_execution_timeout_rejects_non_positive_and_non_finite(self, value):
        with pytest.raises(ValueError, match="positive"):
            NUnit3Options.from_dict({"execution_timeout": value})

    def test_environment_values_stringified(self):
        options = NUnit3Options.from_dict({"environment": {"RETRIES": 3}})
        assert options.environment == {"RETRIES": "3"}

    def test_mutually_informative_filters_kept(self):
        options = NUnit3Options.from_dict({
            "test_names": "A.B",
            "test_list": "list.txt",
            "where": "cat == X",
        })

        assert (options.test_names, options.test_list, options.where) == ("A.B", "list.txt", "cat == X")

    def test_boolean_fields(self):
        assert BOOLEAN_FIELDS == {
            "force_32bit", "dispose_runners", "stop_on_error", "debug",
            "no_result", "shadow_copy", "team_city", "no_header", "verbose",
        }


class TestToolRunResult:
    """Status properties and serialization."""

    def test_success(self):
        result = ToolRunResult("nunit3-console", ["a.dll"], status="succeeded", exit_code=0)

        assert result.success is True
        assert result.failed is False

    @pytest.mark.parametrize("status", ["failed", "launch_failed", "timed_out"])
    def test_failure_statuses(self, status):
        result = ToolRunResult("nunit3-console", [], status=status)

        assert result.success is False
        assert result.failed is True

    def test_to_dict(self):
        result = ToolRunResult(
            "nunit3-console",
            ["a.dll", "--where", "cat == Smoke"],
            status="failed",
            exit_code=1,
            stderr_lines=["boom"],
        )
        data = result.to_dict()

        assert data["success"] is False
        assert data["exit_code"] == 1
        assert data["stderr"] == ["boom"]
        assert "cat == Smoke" in data["command_line"]
