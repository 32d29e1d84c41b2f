"""Commit-msg hook that tags the message with the issue ID from the branch name.

A branch named ``feature/PROJ-1234-fix`` turns the message ``Fix login`` into
``Fix login #PROJ-1234``. Branches without an issue ID leave the message
untouched. This hook never blocks a commit.
"""

import re
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from git_hooks._git import get_current_branch, get_git_root
from git_hooks.config import DEFAULT_ISSUE_PATTERN, ConfigError, load_config
from git_hooks.output import log_error

COMMENT_CHAR = "#"
SCISSORS_LINE = "# ------------------------ >8 ------------------------"


def extract_issue_id(branch: str, pattern: str = DEFAULT_ISSUE_PATTERN) -> Optional[str]:
    """Find the first issue identifier in a branch name.

    Args:
        branch: Branch name, e.g. "feature/PROJ-1234-fix".
        pattern: Regex matching an identifier.

    Returns:
        The identifier (e.g. "PROJ-1234"), or None if the branch has none.
    """
    match = re.search(pattern, branch)
    if not match:
        return None
    return match.group(0)


def split_at_scissors(message: str) -> tuple[str, str]:
    """Split off the part of the message git discards.

    ``git commit -v`` appends the diff below a scissors line; everything from
    that line on is removed by git, so it is never searched or edited.

    Returns:
        Tuple of (editable head, discarded tail). The tail is empty when the
        message has no scissors line.
    """
    offset = 0
    for line in message.splitlines(keepends=True):
        if line.rstrip("\r\n") == SCISSORS_LINE:
            return message[:offset], message[offset:]
        offset += len(line)
    return message, ""


def has_issue_id(message: str, issue_id: str) -> bool:
    """True if ``#<issue_id>`` already appears above the scissors line."""
    head, _ = split_at_scissors(message)
    return re.search(rf"{COMMENT_CHAR}{re.escape(issue_id)}\b", head) is not None


def append_issue_id(message: str, issue_id: str) -> str:
    """Append ``#<issue_id>`` to the last line of the message body.

    Git comment lines (``# ...``) after the body and a verbose-mode diff
    below the scissors line stay where they are, so the tag is not stripped
    together with them. Line endings are preserved.
    """
    tag = f"{COMMENT_CHAR}{issue_id}"
    head, tail = split_at_scissors(message)
    lines = head.splitlines(keepends=True)

    for i in range(len(lines) - 1, -1, -1):
        content = lines[i].rstrip("\r\n")
        if content.strip() and not content.startswith(COMMENT_CHAR):
            ending = lines[i][len(content):]
            lines[i] = f"{content.rstrip()} {tag}{ending}"
            return "".join(lines) + tail

    # Empty message: put the tag on its own line ahead of any comments.
    return f"{tag}\n{message}" if message else f"{tag}\n"


def augment_commit_message(
    message_file: Path,
    branch: Optional[str],
    pattern: str = DEFAULT_ISSUE_PATTERN,
) -> Optional[str]:
    """Rewrite the commit message file with the branch's issue ID.

    The file is only written when an identifier is found and the message does
    not already mention it (amend and rebase rerun this hook).

    Args:
        message_file: Path to the draft commit message.
        branch: Current branch name, None for a detached HEAD.
        pattern: Regex matching an identifier.

    Returns:
        The identifier that was appended, or None if the file was left alone.
    """
    if not branch:
        return None
    issue_id = extract_issue_id(branch, pattern)
    if issue_id is None:
        return None

    with open(message_file, "r", encoding="utf-8", newline="") as f:
        message = f.read()
    if has_issue_id(message, issue_id):
        return None

    with open(message_file, "w", encoding="utf-8", newline="") as f:
        f.write(append_issue_id(message, issue_id))
    return issue_id


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the commit-msg hook.

    Args:
        argv: Command line arguments: the path of the commit message file.

    Returns:
        Always 0; failures are reported but never abort the commit.
    """
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        print("Warning: commit message file path required, skipping.", file=sys.stderr)
        return 0

    message_file = Path(argv[0])
    try:
        pattern = DEFAULT_ISSUE_PATTERN
        try:
            pattern = load_config(get_git_root()).issue_pattern
        except (RuntimeError, ConfigError) as e:
            print(f"Warning: using default issue pattern: {e}", file=sys.stderr)

        issue_id = augment_commit_message(message_file, get_current_branch(), pattern)
        if issue_id is not None:
            print(f"Info: Appended #{issue_id} to commit message.")
    except (OSError, UnicodeDecodeError) as e:
        log_error(f"Could not update commit message file {message_file}", e)
    return 0


if __name__ == "__main__":
    sys.exit(main())
