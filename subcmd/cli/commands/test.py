"""subcmd-demo test subcommand."""

import argparse
import sys
from collections.abc import Sequence

from subcmd.registry import Registry

from . import _shared

DESCRIPTION = 'Run the tests'


def _build_parser() -> argparse.ArgumentParser:
    parser = _shared.build_parser('test', DESCRIPTION)
    parser.add_argument(
        'names',
        nargs='*',
        help='Only run tests whose name contains one of these strings',
    )
    parser.add_argument(
        '--fail',
        action='store_true',
        help='Report a failing test run',
    )
    return parser


def _handle(args: Sequence[str]) -> int:
    namespace = _build_parser().parse_args(list(args))
    selection = ', '.join(namespace.names) if namespace.names else 'all tests'
    sys.stdout.write(f'Running {selection}\n')
    if namespace.fail:
        sys.stdout.write('test result: FAILED\n')
        return 101
    sys.stdout.write('test result: ok\n')
    return 0


def register(registry: Registry) -> None:
    """Register the test subcommand."""
    registry.register(
        'test',
        DESCRIPTION,
        _handle,
        help=_shared.format_help(_build_parser()),
    )
