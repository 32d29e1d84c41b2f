"""Hook configuration read from the ``[tool.git-hooks]`` table of pyproject.toml.

Example::

    [tool.git-hooks]
    skip-env-check = false
    python-exclude = ["*_pb2.py", "*_pb2_grpc.py", "migrations/*.py"]
    golangci-lint-args = ["--timeout", "5m"]
    issue-pattern = "[A-Z]+-\\d+"
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

# Try to import tomllib (Python 3.11+) or fall back to tomli
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found]


SECTION = "git-hooks"
SKIP_ENV_VAR = "GIT_HOOKS_SKIP_ENV_CHECK"

DEFAULT_REQUIRED_TOOLS = ("git", "pylint", "yapf", "gofmt", "golangci-lint")
DEFAULT_PYTHON_EXCLUDE = ("*_pb2.py", "*_pb2_grpc.py")
DEFAULT_ISSUE_PATTERN = r"[A-Za-z0-9]{1,10}-?[A-Za-z0-9]+-\d+"

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(ValueError):
    """Raised when the ``[tool.git-hooks]`` table holds invalid values."""


@dataclass(frozen=True)
class HookConfig:
    """Settings shared by both hooks. Immutable for the duration of a run."""

    skip_env_check: bool = False
    persist_env_check: bool = True
    required_tools: tuple[str, ...] = DEFAULT_REQUIRED_TOOLS
    python_exclude: tuple[str, ...] = DEFAULT_PYTHON_EXCLUDE
    pylint_args: tuple[str, ...] = ()
    yapf_args: tuple[str, ...] = ()
    golangci_lint_args: tuple[str, ...] = ()
    issue_pattern: str = DEFAULT_ISSUE_PATTERN
    color: bool = True

    def with_env_checked(self) -> "HookConfig":
        """Return a copy with the environment check marked as done."""
        return replace(self, skip_env_check=True)


# pyproject key -> (HookConfig attribute, expected type)
_KEYS: dict[str, tuple[str, type]] = {
    "skip-env-check": ("skip_env_check", bool),
    "persist-env-check": ("persist_env_check", bool),
    "required-tools": ("required_tools", list),
    "python-exclude": ("python_exclude", list),
    "pylint-args": ("pylint_args", list),
    "yapf-args": ("yapf_args", list),
    "golangci-lint-args": ("golangci_lint_args", list),
    "issue-pattern": ("issue_pattern", str),
    "color": ("color", bool),
}


def _read_section(pyproject_path: Path) -> dict[str, Any]:
    if not pyproject_path.exists():
        return {}

    with open(pyproject_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

    section = data.get("tool", {}).get(SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.{SECTION}] in {pyproject_path} must be a table")
    return section


def parse_section(section: Mapping[str, Any]) -> dict[str, Any]:
    """Validate a ``[tool.git-hooks]`` table and map it to HookConfig fields.

    Args:
        section: The raw table as loaded from TOML.

    Returns:
        Keyword arguments for HookConfig.

    Raises:
        ConfigError: On unknown keys, wrong value types or a bad issue pattern.
    """
    values: dict[str, Any] = {}
    for key, raw in section.items():
        if key not in _KEYS:
            known = ", ".join(sorted(_KEYS))
            raise ConfigError(f"Unknown key '{key}' in [tool.{SECTION}]. Known keys: {known}")

        attr, expected = _KEYS[key]
        if not isinstance(raw, expected):
            raise ConfigError(
                f"'{key}' in [tool.{SECTION}] must be {expected.__name__}, "
                f"got {type(raw).__name__}"
            )
        if expected is list:
            if not all(isinstance(item, str) for item in raw):
                raise ConfigError(f"'{key}' in [tool.{SECTION}] must be a list of strings")
            raw = tuple(raw)
        values[attr] = raw

    if "issue_pattern" in values:
        try:
            re.compile(values["issue_pattern"])
        except re.error as e:
            raise ConfigError(f"Invalid issue-pattern: {e}") from e

    return values


def load_config(
    git_root: Optional[Path],
    environ: Optional[Mapping[str, str]] = None,
) -> HookConfig:
    """Build the hook configuration for a repository.

    File values come from ``<git_root>/pyproject.toml``; environment variables
    (``GIT_HOOKS_SKIP_ENV_CHECK``, ``NO_COLOR``) take precedence over them.

    Args:
        git_root: Repository root, or None to use defaults only.
        environ: Environment mapping (defaults to ``os.environ``).

    Returns:
        The resolved configuration.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    if environ is None:
        environ = os.environ

    values: dict[str, Any] = {}
    if git_root is not None:
        values = parse_section(_read_section(git_root / "pyproject.toml"))

    if environ.get(SKIP_ENV_VAR, "").strip().lower() in _TRUTHY:
        values["skip_env_check"] = True
    # https://no-color.org: any non-empty value disables color
    if environ.get("NO_COLOR"):
        values["color"] = False

    return HookConfig(**values)
