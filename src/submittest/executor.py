# executor.py
from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Protocol, Sequence

from .ui.console import get_console

# Conventional statuses for failures that happen before/around the tool itself
EXIT_TIMEOUT = 124          # as reported by timeout(1)
EXIT_CANNOT_EXECUTE = 126   # shell "permission denied" / not executable
EXIT_NOT_FOUND = 127        # shell "command not found"


class CommandExecutor(Protocol):
    """Runs one external command and reports its exit status."""

    def execute(self, argv: Sequence[str]) -> int:
        ...


class SubprocessExecutor:
    """
    Execute commands as child processes.

    Output is NOT captured: the tool's own diagnostics are the only failure
    detail a user sees, so they go straight to the terminal.
    """

    def __init__(self, cwd: str | Path = ".", *, timeout: Optional[float] = None):
        self.cwd = Path(cwd).resolve()
        if not self.cwd.is_dir():
            raise FileNotFoundError(f"Working directory not found: {self.cwd}")
        self.timeout = timeout

    def execute(self, argv: Sequence[str]) -> int:
        console = get_console()
        console.print_debug(f"exec: {list(argv)} (cwd={self.cwd})")

        try:
            proc = subprocess.run(
                list(argv),
                cwd=str(self.cwd),
                timeout=self.timeout,
            )
        except FileNotFoundError:
            console.print_error("Command not found", f"{argv[0]}: command not found")
            return EXIT_NOT_FOUND
        except OSError as e:
            # exists but cannot be run: no exec bit, a directory, bad format
            console.print_error("Cannot execute command", f"{argv[0]}: {e.strerror or e}")
            return EXIT_CANNOT_EXECUTE
        except subprocess.TimeoutExpired:
            console.print_error(
                "Command timed out",
                f"{' '.join(argv)} did not finish within {self.timeout}s",
            )
            return EXIT_TIMEOUT

        if proc.returncode < 0:
            # killed by signal N: report it the way a shell does
            return 128 - proc.returncode
        return proc.returncode
