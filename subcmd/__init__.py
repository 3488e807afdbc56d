"""Cargo/Git style subcommand dispatching."""

from subcmd.config import DispatcherConfig, load_config
from subcmd.dispatcher import Dispatcher
from subcmd.errors import (
    DuplicateSubcommandError,
    InvalidSubcommandDescriptionError,
    InvalidSubcommandNameError,
    SubcmdConfigError,
    SubcmdError,
)
from subcmd.models import Matched, NotFound, ResolutionResult, Subcommand
from subcmd.registry import Registry
from subcmd.resolver import resolve

__version__ = '0.0.0.dev0'

__all__ = [
    'Dispatcher',
    'DispatcherConfig',
    'DuplicateSubcommandError',
    'InvalidSubcommandDescriptionError',
    'InvalidSubcommandNameError',
    'Matched',
    'NotFound',
    'Registry',
    'ResolutionResult',
    'SubcmdConfigError',
    'SubcmdError',
    'Subcommand',
    'load_config',
    'resolve',
]
