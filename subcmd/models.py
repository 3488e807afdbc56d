"""Pydantic models for subcmd."""

import re
from collections.abc import Callable, Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subcmd.errors import InvalidSubcommandDescriptionError, InvalidSubcommandNameError

Status = int | bool | None
Handler = Callable[[Sequence[str]], Status]

_NAME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9_-]*$')


class Subcommand(BaseModel):
    """A named verb of the CLI and the handler that implements it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str = ''
    handler: Handler
    help: str | None = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that name is a single ASCII word."""
        if not _NAME_PATTERN.match(v):
            msg = (
                f'Invalid subcommand name: {v!r} '
                '(expected an ASCII letter followed by letters, digits, "-" or "_")'
            )
            raise InvalidSubcommandNameError(msg)
        return v

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate that description is a single line."""
        v = v.strip()
        if '\n' in v or '\r' in v:
            msg = f'Subcommand description must be a single line: {v!r}'
            raise InvalidSubcommandDescriptionError(msg)
        return v

    def __call__(self, args: Sequence[str]) -> Status:
        return self.handler(args)


class Matched(BaseModel):
    """The token named a registered subcommand."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['matched'] = 'matched'
    subcommand: Subcommand
    remaining_args: tuple[str, ...] = ()


class NotFound(BaseModel):
    """The token named no registered subcommand."""

    model_config = ConfigDict(frozen=True)

    kind: Literal['not_found'] = 'not_found'
    attempted_name: str
    best_guess: str | None = None


ResolutionResult = Annotated[Matched | NotFound, Field(discriminator='kind')]
