"""Common test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

import ansicss.console


@dataclass
class ConsoleFixture:
    """Console output fixture that tracks whether output was checked.

    Usage patterns:
    1. Verify specific output: assert console_out.getvalue() == "expected"
    2. No output expected: don't call getvalue(), fixture verifies empty
    3. Ignore output: call console_out.ignore_output()
    """

    _output: StringIO
    _checked: bool = field(default=False, init=False)

    def getvalue(self) -> str:
        """Get console output, marking it as checked."""
        self._checked = True
        return self._output.getvalue()

    def ignore_output(self) -> None:
        """Mark output as intentionally ignored."""
        self._checked = True

    def assert_no_unexpected_output(self) -> None:
        """Assert no unexpected output if not already checked."""
        if not self._checked:
            output = self._output.getvalue()
            assert output == "", "Unexpected console output"


@pytest.fixture
def console_out() -> Iterator[ConsoleFixture]:
    """Patch console with test console using StringIO (no colors)."""
    output = StringIO()
    test_console = Console(file=output, force_terminal=False, width=200)
    fixture = ConsoleFixture(output)

    with (
        patch("ansicss.console._console", test_console),
        patch("ansicss.console._verbose", False),
    ):
        yield fixture

    fixture.assert_no_unexpected_output()
