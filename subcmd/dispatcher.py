"""Route an argument vector to the matching subcommand handler."""

import sys
from collections.abc import Sequence

from rich.console import Console

from subcmd import help as help_text
from subcmd.config import DispatcherConfig
from subcmd.logging import get_logger
from subcmd.message import Message, make_console
from subcmd.models import Matched, NotFound, Status
from subcmd.registry import Registry
from subcmd.resolver import resolve

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

HELP_FLAGS = frozenset({'-h', '--help'})
HELP_COMMAND = 'help'
# `help help` and `help --help` ask for the full help text
SELF_HELP_TOPICS = HELP_FLAGS | {HELP_COMMAND}


def normalize_status(status: Status) -> int:
    """Convert a handler's return value into a process exit code."""
    if status is None or status is True:
        return EXIT_SUCCESS
    if status is False:
        return EXIT_FAILURE
    return int(status)


class Dispatcher:
    """Splits argv into a subcommand token and its arguments and runs it.

    Help goes to stdout, errors to stderr. Handler return values are
    turned into exit codes with ``normalize_status``; exceptions raised by
    a handler are not caught.
    """

    def __init__(
        self,
        registry: Registry,
        config: DispatcherConfig | None = None,
        *,
        stdout: Console | None = None,
        stderr: Console | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or DispatcherConfig()
        self.stdout = stdout or make_console(color=self.config.color)
        self.stderr = stderr or make_console(stderr=True, color=self.config.color)

    @property
    def program_name(self) -> str:
        return self.config.program_name

    def help(self) -> str:
        return help_text.render(self.registry, self.program_name, self.config.description)

    def run(self, argv: Sequence[str]) -> int:
        """Dispatch ``argv`` (without the program name) and return an exit code."""
        args = list(argv)
        logger.debug('dispatch_started', program=self.program_name, argv=args)

        if not args:
            return self._print_help()

        token, rest = args[0], args[1:]

        if token in HELP_FLAGS:
            if rest:
                return self._bad_usage()
            return self._print_help()

        if not token or token.startswith('-'):
            return self._bad_usage()

        if token == HELP_COMMAND and HELP_COMMAND not in self.registry:
            if not rest or (len(rest) == 1 and rest[0] in SELF_HELP_TOPICS):
                return self._print_help()
            if len(rest) > 1 or not rest[0]:
                return self._bad_usage()
            return self._help_for_command(rest[0])

        result = resolve(
            token,
            self.registry,
            rest,
            max_distance=self.config.max_suggestion_distance,
        )
        if isinstance(result, Matched):
            return self._run_handler(result)
        return self._not_found(result)

    def main(self, argv: Sequence[str] | None = None) -> int:
        """Run with ``sys.argv[1:]`` unless an explicit argv is given."""
        if argv is None:
            argv = sys.argv[1:]
        return self.run(argv)

    def _run_handler(self, result: Matched) -> int:
        subcommand = result.subcommand
        logger.debug(
            'running_handler',
            name=subcommand.name,
            args=list(result.remaining_args),
        )
        status = normalize_status(subcommand(list(result.remaining_args)))
        logger.debug('handler_finished', name=subcommand.name, status=status)
        return status

    def _print_help(self) -> int:
        Message(self.help()).print(self.stdout)
        return EXIT_SUCCESS

    def _help_for_command(self, name: str) -> int:
        subcommand = self.registry.lookup(name)
        if subcommand is None:
            result = resolve(
                name,
                self.registry,
                max_distance=self.config.max_suggestion_distance,
            )
            return self._not_found(result)
        Message(help_text.render_command(subcommand, self.program_name)).print(self.stdout)
        return EXIT_SUCCESS

    def _bad_usage(self) -> int:
        msg = Message(is_error=True)
        msg.add_line('Invalid arguments.')
        msg.extend(help_text.short_usage(self.program_name))
        msg.print(self.stderr)
        return EXIT_USAGE

    def _not_found(self, result: NotFound) -> int:
        msg = Message(is_error=True)
        msg.add_line(f'No such subcommand `{result.attempted_name}`')
        if result.best_guess is not None:
            msg.add_line()
            msg.add_line(f'{help_text.INDENT}Did you mean `{result.best_guess}`?')
        msg.add_line()
        msg.add_line(f"Run '{self.program_name} --help' to see available commands.")
        msg.print(self.stderr)
        return EXIT_FAILURE
