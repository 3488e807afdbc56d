"""subcmd-demo: a cargo-like CLI showing how subcmd is wired up."""

import sys
from pathlib import Path

from subcmd.cli.commands import register_all
from subcmd.cli.commands._shared import DEMO_PROGRAM
from subcmd.config import DEFAULT_CONFIG_FILENAME, DispatcherConfig, load_config
from subcmd.dispatcher import EXIT_FAILURE, Dispatcher
from subcmd.errors import SubcmdConfigError
from subcmd.logging import configure_logging
from subcmd.message import Message, make_console
from subcmd.registry import Registry

DEMO_DESCRIPTION = 'Build, clean and test a toy project'


def build_registry() -> Registry:
    """Build the registry holding every demo subcommand."""
    registry = Registry()
    register_all(registry)
    return registry


def load_demo_config(config_path: Path | None = None) -> DispatcherConfig:
    """Load settings from subcmd.config.yaml in the working directory, if present."""
    path = config_path or Path(DEFAULT_CONFIG_FILENAME)
    defaults = {'program_name': DEMO_PROGRAM, 'description': DEMO_DESCRIPTION}
    if not path.exists():
        return DispatcherConfig(**defaults)
    return load_config(path, **defaults)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the subcmd-demo CLI."""
    try:
        config = load_demo_config()
    except SubcmdConfigError as exc:
        Message(f'Error: {exc}', is_error=True).print(make_console(stderr=True))
        return EXIT_FAILURE
    configure_logging(verbose=config.verbose)
    dispatcher = Dispatcher(build_registry(), config)
    return dispatcher.main(argv)


if __name__ == '__main__':
    sys.exit(main())
