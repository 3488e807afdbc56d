"""subcmd-demo clean subcommand."""

import argparse
import shutil
import sys
from collections.abc import Sequence

from subcmd.logging import get_logger
from subcmd.registry import Registry

from . import _shared

logger = get_logger(__name__)

DESCRIPTION = 'Remove the target directory'


def _build_parser() -> argparse.ArgumentParser:
    parser = _shared.build_parser('clean', DESCRIPTION)
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Show what would be removed without removing it',
    )
    _shared.add_target_dir_argument(parser)
    return parser


def _handle(args: Sequence[str]) -> int:
    namespace = _build_parser().parse_args(list(args))
    target_dir = namespace.target_dir

    if not target_dir.exists():
        sys.stdout.write(f'Nothing to clean in {target_dir}\n')
        return 0

    if namespace.dry_run:
        sys.stdout.write(f'Would remove {target_dir}\n')
        return 0

    logger.debug('removing_target_dir', path=str(target_dir))
    shutil.rmtree(target_dir)
    sys.stdout.write(f'Removed {target_dir}\n')
    return 0


def register(registry: Registry) -> None:
    """Register the clean subcommand."""
    registry.register(
        'clean',
        DESCRIPTION,
        _handle,
        help=_shared.format_help(_build_parser()),
    )
