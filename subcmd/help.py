"""Help text generation.

Every function here is pure: it only builds text, and the dispatcher
decides which stream receives it.
"""

from subcmd.models import Subcommand
from subcmd.registry import Registry

INDENT = '    '
COLUMN_GAP = 2


def short_usage(program_name: str) -> str:
    """Return the usage block shared by full help and bad-usage errors."""
    return '\n'.join(
        [
            'Usage:',
            f'{INDENT}{program_name} <command> [<args>...]',
            f'{INDENT}{program_name} [options]',
        ],
    )


def _format_rows(rows: list[tuple[str, str]]) -> list[str]:
    if not rows:
        return []
    width = max(len(left) for left, _ in rows) + COLUMN_GAP
    return [f'{INDENT}{left.ljust(width)}{right}'.rstrip() for left, right in rows]


def render_command_list(registry: Registry) -> list[str]:
    """One aligned ``name  description`` line per subcommand, in registry order."""
    return _format_rows([(cmd.name, cmd.description) for cmd in registry.all()])


def render(
    registry: Registry,
    program_name: str,
    description: str | None = None,
) -> str:
    """Render the full help text for a program."""
    lines: list[str] = []
    if description:
        lines.extend([description, ''])
    lines.append(short_usage(program_name))
    lines.extend(['', 'Options:'])
    lines.extend(_format_rows([('-h, --help', 'print this help menu')]))
    lines.extend(['', 'Commands are:'])
    lines.extend(render_command_list(registry))
    lines.extend(
        [
            '',
            f"See '{program_name} help <command>' for more information on a specific command.",
        ],
    )
    return '\n'.join(lines)


def render_command(subcommand: Subcommand, program_name: str) -> str:
    """Render the help shown by ``<program> help <name>``."""
    if subcommand.help:
        return subcommand.help.rstrip()
    lines = [f'usage: {program_name} {subcommand.name} [<args>...]']
    if subcommand.description:
        lines.extend(['', subcommand.description])
    return '\n'.join(lines)
