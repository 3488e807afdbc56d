"""Helpers shared by the subcmd-demo subcommands."""

import argparse
from pathlib import Path

DEMO_PROGRAM = 'subcmd-demo'
DEFAULT_TARGET_DIR = 'target'


def build_parser(name: str, description: str) -> argparse.ArgumentParser:
    """Create the argument parser a subcommand uses for its own arguments."""
    return argparse.ArgumentParser(
        prog=f'{DEMO_PROGRAM} {name}',
        description=description,
    )


def add_target_dir_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--target-dir',
        type=Path,
        default=Path(DEFAULT_TARGET_DIR),
        help='Directory for build artifacts (default: %(default)s)',
    )


def format_help(parser: argparse.ArgumentParser) -> str:
    return parser.format_help()
