"""String similarity used for "did you mean" suggestions."""

from collections.abc import Iterable


def edit_distance(a: str, b: str) -> int:
    """Return the Damerau-Levenshtein distance between two strings.

    Counts insertions, deletions, substitutions and transpositions of
    adjacent characters. Unlike the optimal string alignment variant,
    a transposed pair may be edited again afterwards, so
    ``edit_distance('ca', 'abc') == 2``.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    max_dist = len(a) + len(b)
    last_row_for_char: dict[str, int] = {}

    # Matrix is offset by one row/column holding the sentinel max_dist.
    width = len(b) + 2
    d = [[0] * width for _ in range(len(a) + 2)]
    d[0][0] = max_dist
    for i in range(len(a) + 1):
        d[i + 1][0] = max_dist
        d[i + 1][1] = i
    for j in range(len(b) + 1):
        d[0][j + 1] = max_dist
        d[1][j + 1] = j

    for i in range(1, len(a) + 1):
        last_match_col = 0
        for j in range(1, len(b) + 1):
            prev_row = last_row_for_char.get(b[j - 1], 0)
            prev_col = last_match_col
            if a[i - 1] == b[j - 1]:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[prev_row][prev_col] + (i - prev_row - 1) + 1 + (j - prev_col - 1),
            )
        last_row_for_char[a[i - 1]] = i

    return d[len(a) + 1][len(b) + 1]


def closest_match(
    token: str,
    candidates: Iterable[str],
    *,
    max_distance: int,
) -> str | None:
    """Return the candidate nearest to ``token`` within ``max_distance`` edits.

    Ties go to the candidate seen first.
    """
    best: str | None = None
    best_distance = max_distance + 1
    for candidate in candidates:
        distance = edit_distance(token, candidate)
        if distance < best_distance:
            best = candidate
            best_distance = distance
    return best
