"""Exceptions raised by subcmd."""


class SubcmdError(RuntimeError):
    """Base class for subcmd errors."""


class DuplicateSubcommandError(SubcmdError):
    """Raised when a subcommand name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'subcommand already registered: {name}')


class InvalidSubcommandNameError(SubcmdError):
    """Raised when a subcommand name contains unsupported characters."""


class SubcmdConfigError(SubcmdError):
    """Raised when dispatcher configuration is invalid."""


class InvalidSubcommandDescriptionError(SubcmdError):
    """Raised when a subcommand description spans more than one line."""
