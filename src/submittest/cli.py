# cli.py
from __future__ import annotations

import os
import shlex
import sys

import click

from .config import (
    DEFAULT_CHECK_COMMAND,
    DEFAULT_REMOTE,
    TaskConfig,
    parse_assignments,
    resolve_parameters,
)
from .errors import ParameterError
from .executor import SubprocessExecutor
from .runner import TaskRunner, build_steps, format_argv
from .ui.console import Console, set_console


def _collect_overrides(assignments, msg, branch) -> dict[str, str]:
    """
    Merge NAME=VALUE words with --msg/--branch. Options win over words.
    """
    overrides = parse_assignments(assignments)
    if msg is not None:
        overrides["MSG"] = msg
    if branch is not None:
        overrides["BRANCH"] = branch
    return overrides


@click.command(name="submittest")
@click.argument("assignments", nargs=-1, metavar="[NAME=VALUE]...")
@click.option("--msg", default=None, help="Message announced before committing (env: MSG)")
@click.option("--branch", default=None, help="Branch to push (env: BRANCH)")
@click.option(
    "--check-cmd",
    default=format_argv(DEFAULT_CHECK_COMMAND),
    show_default=True,
    help="Static check command run before committing",
)
@click.option("--remote", default=DEFAULT_REMOTE, show_default=True, help="Remote to push to")
@click.option(
    "--cwd",
    default=".",
    type=click.Path(file_okay=False),
    help="Repository directory to run in",
)
@click.option("--timeout", default=None, type=click.FloatRange(min=0, min_open=True), help="Per-command timeout in seconds")
@click.option("--dry-run", is_flag=True, default=False, help="Print the steps without running them")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show commands and stack traces)",
)
def cli(assignments, msg, branch, check_cmd, remote, cwd, timeout, dry_run, debug):
    """Check, commit and push in one go.

    Parameters can be given make-style, e.g.

    \b
        submittest MSG="fix bug" BRANCH=main
    """
    console = Console(debug=debug)
    set_console(console)

    try:
        overrides = _collect_overrides(assignments, msg, branch)
        params = resolve_parameters(overrides, environ=os.environ)
        check_command = tuple(shlex.split(check_cmd))
        if not check_command:
            raise click.BadParameter("must not be empty", param_hint="--check-cmd")
        config = TaskConfig(
            check_command=check_command,
            remote=remote,
            cwd=cwd,
            timeout=timeout,
        )
    except (ParameterError, ValueError) as e:
        raise click.UsageError(str(e))

    console.print_debug(f"parameters: {params}")

    if dry_run:
        console.print_plan(
            [(s.name, s.notice, format_argv(s.argv)) for s in build_steps(params, config)]
        )
        return

    try:
        executor = SubprocessExecutor(config.cwd, timeout=config.timeout)
        runner = TaskRunner(executor, config=config, console=console)
        status = runner.run(params)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except FileNotFoundError as e:
        console.print_error(
            "Working directory not found",
            str(e),
            suggestion="Pass an existing repository directory:\n  submittest --cwd path/to/repo",
        )
        sys.exit(1)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    sys.exit(status)


def main() -> None:
    cli(prog_name="submittest")


if __name__ == "__main__":
    main()
