"""Map a typed token to a registered subcommand or a suggestion."""

from collections.abc import Sequence

from subcmd.config import DEFAULT_MAX_SUGGESTION_DISTANCE
from subcmd.logging import get_logger
from subcmd.models import Matched, NotFound
from subcmd.registry import Registry
from subcmd.similarity import closest_match

logger = get_logger(__name__)


def resolve(
    token: str,
    registry: Registry,
    remaining_args: Sequence[str] = (),
    *,
    max_distance: int = DEFAULT_MAX_SUGGESTION_DISTANCE,
) -> Matched | NotFound:
    """Resolve ``token`` against the registry.

    An exact name match yields ``Matched`` carrying ``remaining_args``.
    Otherwise the registered name with the smallest edit distance is
    offered as ``best_guess`` when it is at most ``max_distance`` edits
    away; ties go to the name registered first.
    """
    subcommand = registry.lookup(token)
    if subcommand is not None:
        logger.debug('subcommand_matched', name=token, args=list(remaining_args))
        return Matched(subcommand=subcommand, remaining_args=tuple(remaining_args))

    best_guess = closest_match(token, registry.names(), max_distance=max_distance)
    logger.debug(
        'subcommand_not_found',
        name=token,
        best_guess=best_guess,
        _verbose_known=list(registry.names()),
    )
    return NotFound(attempted_name=token, best_guess=best_guess)
