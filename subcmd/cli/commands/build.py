"""subcmd-demo build subcommand."""

import argparse
import sys
from collections.abc import Sequence

from subcmd.logging import get_logger
from subcmd.registry import Registry

from . import _shared

logger = get_logger(__name__)

DESCRIPTION = 'Compile the current project'
ARTIFACT_NAME = 'artifact.txt'


def _build_parser() -> argparse.ArgumentParser:
    parser = _shared.build_parser('build', DESCRIPTION)
    parser.add_argument(
        '--release',
        action='store_true',
        help='Build with optimizations',
    )
    _shared.add_target_dir_argument(parser)
    return parser


def _handle(args: Sequence[str]) -> int:
    namespace = _build_parser().parse_args(list(args))
    profile = 'release' if namespace.release else 'debug'
    out_dir = namespace.target_dir / profile
    logger.debug('building', profile=profile, out_dir=str(out_dir))

    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / ARTIFACT_NAME).write_text(f'{profile}\n')
    sys.stdout.write(f'Finished {profile} build in {out_dir}\n')
    return 0


def register(registry: Registry) -> None:
    """Register the build subcommand."""
    registry.register(
        'build',
        DESCRIPTION,
        _handle,
        help=_shared.format_help(_build_parser()),
    )
