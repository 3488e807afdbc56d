import os
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel
from pytest_mock import MockerFixture

from subcmd.cli.demo import main as demo_main


def strip_ansi(text: str) -> str:
    """Remove ANSI color codes from text."""
    return re.sub(r'\x1b\[[0-9;]*m', '', text)


class Result(BaseModel):
    returncode: int
    stdout: str
    stderr: str

    @property
    def all_output(self) -> str:
        """Combine stdout and stderr for unified output checking."""
        return (self.stdout or '') + (self.stderr or '')


@dataclass
class RunCommandContext:
    cli_name: str
    main_func: Callable[[], int]
    args: list[str]
    cwd: Path
    capsys: pytest.CaptureFixture
    mocker: MockerFixture


def _run_command(ctx: RunCommandContext) -> Result:
    """Helper for CLI main function execution with pytest fixtures."""
    old_cwd = Path.cwd()
    try:
        os.chdir(ctx.cwd)
        ctx.mocker.patch.object(sys, 'argv', [ctx.cli_name, *ctx.args])
        try:
            exit_code = ctx.main_func()
        except SystemExit as e:
            exit_code = e.code if isinstance(e.code, int) else 1
        captured = ctx.capsys.readouterr()
        return Result(
            returncode=exit_code,
            stdout=strip_ansi(captured.out),
            stderr=strip_ansi(captured.err),
        )
    finally:
        os.chdir(old_cwd)


CliCommand = Callable[[list[str], Path], Result]


@pytest.fixture
def run_demo(
    capsys: pytest.CaptureFixture,
    mocker: MockerFixture,
) -> CliCommand:
    def _run(args: list[str], cwd: Path) -> Result:
        ctx = RunCommandContext(
            cli_name='subcmd-demo',
            main_func=demo_main,
            args=args,
            cwd=cwd,
            capsys=capsys,
            mocker=mocker,
        )
        return _run_command(ctx)

    return _run


def assert_contains_all(output: str, snippets: list[str], context: str = '') -> None:
    missing = [s for s in snippets if s not in output]
    if missing:
        pytest.fail(
            f'Missing expected snippet(s) in {context}: {missing}\nActual output:\n{output}',
        )
