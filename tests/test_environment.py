"""Tests for git_hooks.environment."""

import pytest

from git_hooks.environment import (
    MissingToolError,
    find_missing_tool,
    is_recorded,
    marker_path,
    record_validation,
    validate_environment,
)

TOOLS = ("git", "pylint", "yapf", "gofmt", "golangci-lint")


def which_from(installed):
    return lambda tool: f"/usr/bin/{tool}" if tool in installed else None


class TestValidateEnvironment:
    def test_all_tools_present(self):
        validate_environment(TOOLS, which=which_from(TOOLS))

    def test_missing_tool_is_named(self):
        with pytest.raises(MissingToolError) as excinfo:
            validate_environment(TOOLS, which=which_from({"git", "pylint", "yapf", "gofmt"}))
        assert excinfo.value.tool == "golangci-lint"
        assert "golangci-lint" in str(excinfo.value)

    def test_first_missing_tool_wins(self):
        assert find_missing_tool(TOOLS, which=which_from({"git"})) == "pylint"
        assert find_missing_tool(TOOLS, which=which_from(TOOLS)) is None

    def test_uses_search_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))
        with pytest.raises(MissingToolError):
            validate_environment(["definitely-not-a-real-linter"])


class TestMarker:
    def test_record_and_detect(self, tmp_path):
        assert not is_recorded(tmp_path)
        path = record_validation(tmp_path, TOOLS)

        assert path == marker_path(tmp_path)
        assert is_recorded(tmp_path)
        assert path.read_text(encoding="utf-8").split() == list(TOOLS)
