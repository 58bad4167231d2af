"""
Configuration for a submittest run.

Two layers live here:

* TaskConfig: how the collaborators are wired (which check tool, which
  remote, the literal commit message). Fixed per invocation, built by the CLI.
* Parameters resolution: MSG / BRANCH values coming from the command line,
  the environment, or the defaults in model.py.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .errors import ParameterError, UnknownParameterError
from .model import PARAMETER_NAMES, Parameters

DEFAULT_CHECK_COMMAND: Tuple[str, ...] = ("cargo", "check")
DEFAULT_COMMIT_MESSAGE = "submit & test"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class TaskConfig:
    check_command: Tuple[str, ...] = DEFAULT_CHECK_COMMAND
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    remote: str = DEFAULT_REMOTE
    cwd: str = "."
    timeout: Optional[float] = None  # seconds per external command

    def __post_init__(self) -> None:
        if not self.check_command:
            raise ValueError("check_command must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.remote.startswith("-"):
            raise ValueError(f"remote must not start with '-', got {self.remote!r}")


# ---------------------------------------------------------------------
# Parameter resolution
# ---------------------------------------------------------------------

def parse_assignments(assignments: Iterable[str]) -> Dict[str, str]:
    """
    Parse make-style NAME=VALUE words, e.g. ["MSG=fix bug", "BRANCH=main"].

    Later assignments win. The value may be empty or contain '='.
    """
    out: Dict[str, str] = {}
    for word in assignments:
        name, sep, value = word.partition("=")
        if not sep or not name:
            raise ParameterError(f"Expected NAME=VALUE, got: {word!r}")
        out[name] = value
    return out


def _check_names(names: Iterable[str]) -> None:
    unknown = sorted(n for n in names if n not in PARAMETER_NAMES)
    if unknown:
        raise UnknownParameterError(
            f"Unknown parameter(s): {', '.join(unknown)}. "
            f"Known parameters: {', '.join(PARAMETER_NAMES)}"
        )


def resolve_parameters(
    overrides: Optional[Mapping[str, str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Parameters:
    """
    Resolve MSG / BRANCH the way `NAME ?= default` does in make:
    explicit override > environment variable > default.

    Unknown names in `overrides` are rejected; unrelated environment
    variables are ignored. A BRANCH starting with '-' is rejected since
    git would read it as an option (e.g. BRANCH=--force).
    """
    overrides = dict(overrides or {})
    _check_names(overrides)

    params = Parameters()
    for name, field_name in PARAMETER_NAMES.items():
        if name in overrides:
            params = replace(params, **{field_name: overrides[name]})
        elif environ is not None and name in environ:
            params = replace(params, **{field_name: environ[name]})

    if params.branch.startswith("-"):
        raise ParameterError(f"BRANCH must not start with '-', got {params.branch!r}")
    return params
