from collections.abc import Sequence

import pytest

from subcmd.logging import configure_logging
from subcmd.registry import Registry


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Start every test with non-verbose logging."""
    configure_logging(verbose=False)


class RecordingHandler:
    """Handler double that remembers the arguments it was called with."""

    def __init__(self, status: int | bool | None = 0) -> None:
        self.status = status
        self.calls: list[list[str]] = []

    def __call__(self, args: Sequence[str]) -> int | bool | None:
        self.calls.append(list(args))
        return self.status


@pytest.fixture
def handlers() -> dict[str, RecordingHandler]:
    return {name: RecordingHandler() for name in ('build', 'clean', 'test')}


@pytest.fixture
def registry(handlers: dict[str, RecordingHandler]) -> Registry:
    registry = Registry()
    registry.register('build', 'Compile the current project', handlers['build'])
    registry.register('clean', 'Remove the target directory', handlers['clean'])
    registry.register('test', 'Run the tests', handlers['test'])
    return registry
