"""Ordered collection of the subcommands a program knows about."""

from collections.abc import Callable, Iterator

from subcmd.errors import DuplicateSubcommandError
from subcmd.logging import get_logger
from subcmd.models import Handler, Subcommand

logger = get_logger(__name__)


class Registry:
    """Insertion-ordered mapping of subcommand name to Subcommand.

    Names are unique. The order of registration is the order used when
    listing subcommands in help output and when breaking ties between
    equally close suggestions.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Subcommand] = {}

    def add(self, subcommand: Subcommand) -> Subcommand:
        """Register a prebuilt subcommand.

        Raises:
            DuplicateSubcommandError: when the name is already taken. The
                registry is left unchanged.
        """
        if subcommand.name in self._commands:
            raise DuplicateSubcommandError(subcommand.name)
        self._commands[subcommand.name] = subcommand
        logger.debug('subcommand_registered', name=subcommand.name)
        return subcommand

    def register(
        self,
        name: str,
        description: str,
        handler: Handler,
        help: str | None = None,  # noqa: A002 - mirrors Subcommand.help
    ) -> Subcommand:
        """Build and register a subcommand."""
        if name in self._commands:
            raise DuplicateSubcommandError(name)
        return self.add(
            Subcommand(name=name, description=description, handler=handler, help=help),
        )

    def command(
        self,
        name: str | None = None,
        description: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator registering the wrapped function as a subcommand.

        The name defaults to the function name with underscores turned
        into dashes; the description defaults to the first docstring line.
        """

        def decorator(func: Handler) -> Handler:
            cmd_name = name or func.__name__.replace('_', '-')
            doc = (func.__doc__ or '').strip()
            cmd_description = description if description is not None else doc.split('\n', 1)[0]
            self.register(cmd_name, cmd_description, func, help=None)
            return func

        return decorator

    def lookup(self, name: str) -> Subcommand | None:
        return self._commands.get(name)

    def all(self) -> tuple[Subcommand, ...]:
        return tuple(self._commands.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Subcommand]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
