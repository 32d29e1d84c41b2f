"""Tests for git_hooks.formatters."""

import pytest

from git_hooks import formatters
from git_hooks.tools import ToolRun

from conftest import FakeTools, git


class TestWithStubbedGit:
    @pytest.fixture
    def stub(self, monkeypatch):
        def install(changed=(), tool_result=(0, "", "")):
            fake = FakeTools(default=tool_result)
            monkeypatch.setattr(formatters, "run_tool", fake)
            monkeypatch.setattr(formatters, "get_unstaged_changes", lambda paths, cwd=None: list(changed))
            return fake

        return install

    def test_yapf_command(self, stub, tmp_path):
        fake = stub()
        result = formatters.run_yapf(["a.py", "b.py"], tmp_path, ["--style", "google"])

        assert result.status == "SUCCESS"
        assert fake.calls == [
            ("yapf", "--in-place", "--recursive", "--style", "google", "a.py", "b.py")
        ]

    def test_gofmt_command(self, stub, tmp_path):
        fake = stub()
        formatters.run_gofmt(["main.go"], tmp_path)
        assert fake.calls == [("gofmt", "-w", "main.go")]

    def test_changed_files_fail_with_count(self, stub, tmp_path):
        stub(changed=["a.py", "b.py"])
        result = formatters.run_yapf(["a.py", "b.py", "c.py"], tmp_path)

        assert result.failed
        assert result.details[0].startswith("2 file(s) reformatted")
        assert result.details[1:] == ["  a.py", "  b.py"]

    def test_formatter_error_fails(self, stub, tmp_path):
        stub(tool_result=(2, "", "main.go:3:1: expected declaration"))
        result = formatters.run_gofmt(["main.go"], tmp_path)

        assert result.failed
        assert result.details == ["main.go:3:1: expected declaration"]

    def test_yapf_with_everything_excluded_is_skipped(self, stub, tmp_path):
        fake = stub()
        result = formatters.run_yapf([], tmp_path)
        assert result.status == "SKIPPED"
        assert result.details == ["only generated files"]
        assert fake.calls == []


class TestAgainstRealIndex:
    """Formatting drift is detected with ``git diff`` against the index."""

    @staticmethod
    def strip_trailing_whitespace(command, cwd):
        for path in command[3:]:
            target = cwd / path
            lines = target.read_text(encoding="utf-8").splitlines()
            target.write_text("".join(line.rstrip() + "\n" for line in lines), encoding="utf-8")
        return ToolRun(tuple(command), 0, "", "")

    def test_second_run_after_staging_is_clean(self, git_repo, monkeypatch):
        monkeypatch.setattr(formatters, "run_tool", self.strip_trailing_whitespace)
        (git_repo / "a.py").write_text("x = 1   \n", encoding="utf-8")
        (git_repo / "b.py").write_text("y = 2\n", encoding="utf-8")
        git(git_repo, "add", "a.py", "b.py")

        first = formatters.run_yapf(["a.py", "b.py"], git_repo)
        assert first.failed
        assert first.details[0].startswith("1 file(s) reformatted")
        assert first.details[1:] == ["  a.py"]
        assert (git_repo / "a.py").read_text(encoding="utf-8") == "x = 1\n"

        git(git_repo, "add", "a.py")
        second = formatters.run_yapf(["a.py", "b.py"], git_repo)
        assert second.status == "SUCCESS"
