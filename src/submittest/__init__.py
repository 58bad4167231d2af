from .config import TaskConfig, resolve_parameters, parse_assignments
from .errors import StepFailure, SubmitTestError, ParameterError, UnknownParameterError
from .executor import CommandExecutor, SubprocessExecutor
from .model import Parameters, Step
from .runner import TaskRunner, build_steps

__all__ = [
    "TaskConfig",
    "resolve_parameters",
    "parse_assignments",
    "StepFailure",
    "SubmitTestError",
    "ParameterError",
    "UnknownParameterError",
    "CommandExecutor",
    "SubprocessExecutor",
    "Parameters",
    "Step",
    "TaskRunner",
    "build_steps",
]
