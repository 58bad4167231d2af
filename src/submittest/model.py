# model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_MESSAGE = "Test: Work in Progress"
DEFAULT_BRANCH = "master"

# Caller-facing parameter name -> Parameters field
PARAMETER_NAMES = {
    "MSG": "message",
    "BRANCH": "branch",
}


@dataclass(frozen=True)
class Parameters:
    """
    Overridable inputs of one submittest run.

    `message` is only announced; the commit itself uses TaskConfig.commit_message.
    """
    message: str = DEFAULT_MESSAGE
    branch: str = DEFAULT_BRANCH


@dataclass(frozen=True)
class Step:
    """A single external command inside the task, with the notice printed before it."""
    name: str
    argv: Tuple[str, ...]
    notice: Optional[str] = None
