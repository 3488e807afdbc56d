"""Subcommand registrations for the subcmd-demo CLI."""

from subcmd.registry import Registry

from . import build, clean, test


def register_all(registry: Registry) -> None:
    """Register all subcmd-demo subcommands."""
    build.register(registry)
    clean.register(registry)
    test.register(registry)
