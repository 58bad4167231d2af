from __future__ import annotations

from typing import Dict, List, Sequence

import pytest

from submittest.ui import console as console_mod


class FakeExecutor:
    """
    Records every argv and answers with a scripted status.

    statuses maps the executable-plus-subcommand ("cargo", "git commit",
    "git push") to an exit status; anything unlisted succeeds.
    """

    def __init__(self, statuses: Dict[str, int] | None = None):
        self.statuses = statuses or {}
        self.calls: List[tuple] = []

    @staticmethod
    def _key(argv: Sequence[str]) -> str:
        if argv[0] == "git" and len(argv) > 1:
            return f"git {argv[1]}"
        return argv[0]

    def execute(self, argv: Sequence[str]) -> int:
        self.calls.append(tuple(argv))
        return self.statuses.get(self._key(argv), 0)

    @property
    def invoked(self) -> List[str]:
        return [self._key(c) for c in self.calls]


@pytest.fixture(autouse=True)
def reset_console():
    console_mod.set_console(console_mod.Console())
    yield
    console_mod.set_console(console_mod.Console())
