# runner.py
from __future__ import annotations

import shlex
from typing import List, Optional

from . import git
from .config import TaskConfig
from .errors import StepFailure
from .executor import CommandExecutor
from .model import Parameters, Step
from .ui.console import Console, get_console

DONE_NOTICE = "✅ Done."


# ----------------------------------------------------------------------
# Step list
# ----------------------------------------------------------------------

def build_steps(params: Parameters, config: TaskConfig = TaskConfig()) -> List[Step]:
    """
    The submittest sequence: static check, commit, push.

    Note the commit uses config.commit_message, not params.message; the
    message parameter only shows up in the notice.
    """
    return [
        Step(
            name="check",
            argv=tuple(config.check_command),
            notice=">>> 1. Staging all changes...",
        ),
        Step(
            name="commit",
            argv=git.commit_all(config.commit_message),
            notice=f'>>> 2. Committing with message: "{params.message}"',
        ),
        Step(
            name="push",
            argv=git.push(config.remote, params.branch),
            notice=f">>> 3. Pushing to {config.remote}/{params.branch}...",
        ),
    ]


def format_argv(argv) -> str:
    return " ".join(shlex.quote(a) for a in argv)


# ----------------------------------------------------------------------
# Runner
# ----------------------------------------------------------------------

class TaskRunner:
    """
    Runs the submittest steps in order, stopping at the first failure.

    Nothing is rolled back: if the push fails, the commit made by the
    previous step stays in the local repository.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        config: TaskConfig = TaskConfig(),
        console: Optional[Console] = None,
    ):
        self.executor = executor
        self.config = config
        self._console = console

    @property
    def console(self) -> Console:
        return self._console or get_console()

    def steps(self, params: Optional[Parameters] = None) -> List[Step]:
        return build_steps(params or Parameters(), self.config)

    def _run_step(self, step: Step) -> None:
        if step.notice:
            self.console.print_notice(step.notice)
        self.console.print_debug(f"step '{step.name}': {format_argv(step.argv)}")

        status = self.executor.execute(step.argv)
        if status != 0:
            raise StepFailure(step=step.name, argv=step.argv, exit_code=status)

    def execute(self, params: Optional[Parameters] = None) -> None:
        """Run every step; raises StepFailure for the first one that fails."""
        for step in self.steps(params):
            self._run_step(step)
        self.console.print_notice(DONE_NOTICE)

    def run(self, params: Optional[Parameters] = None) -> int:
        """
        Run the task and return its exit status.

        Returns:
            0 if all steps succeeded, otherwise the status of the failing step.
        """
        try:
            self.execute(params)
        except StepFailure as e:
            # the tool already printed its own diagnostics
            self.console.print_debug(str(e))
            return e.exit_code
        return 0
