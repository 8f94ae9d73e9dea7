from datetime import datetime
from io import StringIO

import pytest
from rich.console import Console

from prologger.constants import EnvVars
from prologger.infrastructure.logging import ConsoleLogger

FIXED_NOW = datetime(2024, 3, 5, 7, 8, 9, 123456)
FIXED_STAMP = "[2024/03/05 7:08:09.123]"


@pytest.fixture(autouse=True)
def _clean_logger_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PROLOGGER_* and color-forcing variables from the host out of the tests."""
    for name in (EnvVars.LEVELS, EnvVars.NOPREFIX, EnvVars.DATEFORMAT, "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def make_console() -> Console:
    return Console(
        file=StringIO(), force_terminal=False, color_system=None, width=120
    )


class CapturedLogger:
    """ConsoleLogger wired to in-memory consoles and a frozen clock."""

    def __init__(self, **kwargs: object) -> None:
        self.stamp = FIXED_STAMP
        self.out = make_console()
        self.err = make_console()
        self.logger = ConsoleLogger(
            self.out, self.err, clock=lambda: FIXED_NOW, **kwargs
        )

    def stdout(self) -> str:
        return self.out.file.getvalue()

    def stderr(self) -> str:
        return self.err.file.getvalue()

    def stdout_lines(self) -> list[str]:
        return self.stdout().splitlines()

    def stderr_lines(self) -> list[str]:
        return self.stderr().splitlines()


@pytest.fixture
def captured() -> CapturedLogger:
    return CapturedLogger()


@pytest.fixture
def captured_factory() -> type[CapturedLogger]:
    return CapturedLogger
