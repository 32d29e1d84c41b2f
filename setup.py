"""Setup script for lint-git-hooks."""

from setuptools import setup

setup(
    entry_points={
        "console_scripts": [
            "pre-commit-lint=git_hooks.pre_commit:main",
            "commit-msg-issue=git_hooks.commit_msg:main",
        ],
    },
)
