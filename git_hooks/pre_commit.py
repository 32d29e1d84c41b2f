"""Pre-commit hook that lints and formats staged Python and Go files.

Checks, in order:

1. the linters and formatters this hook calls are installed (fatal, exit 2);
2. no staged file contains leftover debugging statements;
3. Python files: pylint, then yapf;
4. Go files: golangci-lint per directory, then gofmt.

Every check runs even after an earlier one failed, so a single commit attempt
shows every problem. The exit code is 1 if any check failed.
"""

import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Optional

from git_hooks._git import get_git_dir, get_git_root, get_staged_files
from git_hooks.classify import classify, without_excluded
from git_hooks.config import ConfigError, HookConfig, load_config
from git_hooks.debug_scan import scan_files
from git_hooks.environment import (
    MissingToolError,
    is_recorded,
    record_validation,
    validate_environment,
)
from git_hooks.formatters import run_gofmt, run_yapf
from git_hooks.linters import run_golangci_lint, run_pylint
from git_hooks.output import (
    EXIT_FAILED,
    EXIT_MISSING_TOOL,
    CheckResult,
    exit_status,
    log_error,
    report,
)


def check_environment(
    config: HookConfig,
    git_dir: Optional[Path] = None,
    validate: Callable[[Sequence[str]], None] = validate_environment,
) -> tuple[CheckResult, HookConfig]:
    """Verify the required tools unless a skip flag says it was already done.

    Args:
        config: Current configuration.
        git_dir: Git directory holding the verification marker. None disables
            the marker entirely.
        validate: Validation function; raises MissingToolError.

    Returns:
        Tuple of (result, config with the environment marked as checked).

    Raises:
        MissingToolError: If a required tool is missing.
    """
    name = "environment"
    if config.skip_env_check:
        return CheckResult.skipped(name, "skip flag set"), config
    if git_dir is not None and config.persist_env_check and is_recorded(git_dir):
        return CheckResult.skipped(name, "verified by a previous run"), config.with_env_checked()

    validate(config.required_tools)

    if git_dir is not None and config.persist_env_check:
        record_validation(git_dir, config.required_tools)
    return CheckResult.success(name), config.with_env_checked()


def check_debug_statements(files: Sequence[str], root: Path) -> CheckResult:
    """Fail if any staged file contains a debugging statement."""
    hits = scan_files(root, files)
    if hits:
        details = [str(hit) for hit in hits]
        return CheckResult.failure("debugging statements", details)
    return CheckResult.success("debugging statements")


def run_checks(files: Sequence[str], root: Path, config: HookConfig) -> list[CheckResult]:
    """Run every content check over the staged files and print each result.

    Language checks with no staged files of that language are skipped
    silently and return no result.
    """
    results: list[CheckResult] = []

    def emit(result: CheckResult) -> None:
        results.append(report(result, color=config.color))

    emit(check_debug_statements(files, root))

    buckets = classify(files)

    python_files = buckets["python"]
    if python_files:
        emit(run_pylint(python_files, root, config.pylint_args))
        emit(run_yapf(without_excluded(python_files, config.python_exclude), root, config.yapf_args))

    go_files = buckets["go"]
    if go_files:
        emit(run_golangci_lint(go_files, root, config.golangci_lint_args))
        emit(run_gofmt(go_files, root))

    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pre-commit hook.

    Args:
        argv: Command line arguments. Optional arguments:
            --skip-env-check: Do not look for the external tools
            --no-color: Print status words without ANSI colors

    Returns:
        Exit code: 0 if every check passed, 1 if any failed, 2 if a required
        tool is missing.
    """
    if argv is None:
        argv = sys.argv[1:]

    skip_env_check = False
    no_color = False
    for arg in argv:
        if arg == "--skip-env-check":
            skip_env_check = True
        elif arg == "--no-color":
            no_color = True
        else:
            print(f"Warning: Unknown argument: {arg}")

    try:
        try:
            git_root = get_git_root()
        except RuntimeError as e:
            log_error("Failed to get git repository root", e)
            return EXIT_FAILED

        try:
            config = load_config(git_root)
        except ConfigError as e:
            log_error("Invalid [tool.git-hooks] configuration", e)
            return EXIT_FAILED

        if skip_env_check:
            config = config.with_env_checked()
        if no_color:
            config = replace(config, color=False)

        try:
            env_result, config = check_environment(config, git_dir=get_git_dir())
        except MissingToolError as e:
            report(CheckResult.failure("environment", [str(e)]), color=config.color)
            print(f"Install '{e.tool}' or rerun with --skip-env-check.")
            return EXIT_MISSING_TOOL
        report(env_result, color=config.color)

        try:
            staged = get_staged_files(cwd=git_root)
        except RuntimeError as e:
            log_error("Failed to list staged files", e)
            return EXIT_FAILED

        results = [env_result, *run_checks(staged, git_root, config)]
        return exit_status(results)

    except Exception as e:
        log_error("Unexpected error in pre-commit hook execution", e)
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
