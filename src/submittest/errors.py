"""
Exception types used across submittest.

Input problems (bad NAME=VALUE assignments) are kept apart from StepFailure,
which is the only error an actual run can produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


class SubmitTestError(Exception):
    """Base class for all submittest specific errors."""


class ParameterError(SubmitTestError):
    """Raised when a parameter assignment is malformed."""


class UnknownParameterError(ParameterError):
    """Raised when a parameter name is not one the task accepts."""


@dataclass
class StepFailure(SubmitTestError):
    step: str
    argv: Tuple[str, ...]
    exit_code: int

    def __str__(self) -> str:
        return f"step '{self.step}' failed (exit={self.exit_code}): {' '.join(self.argv)}"
