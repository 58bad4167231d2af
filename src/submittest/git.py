# git.py
# Small, focused builders for the Git CLI invocations submittest performs.
# The runner never spells out "git ..." itself; it asks this module for argv.

from __future__ import annotations

from typing import Tuple


def _git(*args: str) -> Tuple[str, ...]:
    """
    Build a git argv.

    This is the single low-level entry point for every git command in this
    file, so that the executable name lives in one place.

    Args:
        args: git arguments (e.g. "push", "origin", "main")

    Returns:
        Tuple argv starting with "git".
    """
    return ("git", *args)


def commit_all(message: str) -> Tuple[str, ...]:
    """
    Return argv for committing every tracked modification.

    `-a` stages modified and deleted tracked files (untracked files are not
    added). `--allow-empty` makes the commit succeed even if nothing changed,
    so a run always produces a fresh commit to push.

    Args:
        message: Literal commit message, passed as a single argv element.

    Returns:
        argv for `git commit`.
    """
    # -am must stay last: -m consumes the next element as the message
    return _git("commit", "--allow-empty", "-am", message)


def push(remote: str, branch: str) -> Tuple[str, ...]:
    """
    Return argv for pushing `branch` to `remote`.

    The branch is passed verbatim as a refspec; git resolves it against the
    local branch of the same name.
    """
    return _git("push", remote, branch)
