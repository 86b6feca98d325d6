from typing import Sequence

from .types import U32_MAX


class DistanceOverflowError(OverflowError):
    """Raised when an input is too long for the distance counter."""


def _check_limit(m: int, n: int, limit: int) -> None:
    """
    Reject inputs whose length the counter cannot represent.

    The distance never exceeds the longer length, so checking the lengths
    is enough to keep the result in range.
    """
    longest = m if m > n else n
    if longest > limit:
        raise DistanceOverflowError(
            f"Input length {longest} exceeds the distance counter limit {limit}"
        )


def levenshtein(a: Sequence, b: Sequence, limit: int = U32_MAX) -> int:
    """
    Compute the Levenshtein distance between two unit sequences.

    Units only need to support ``==``, so this works the same for bytes,
    str and token lists. A single working row sized to the shorter input
    holds the DP frontier.

    :param a: First sequence.
    :param b: Second sequence.
    :param limit: Largest input length accepted.
    :returns: Minimum number of insertions, deletions and substitutions.
    :raises DistanceOverflowError: If either input is longer than ``limit``.
    """
    m, n = len(a), len(b)
    _check_limit(m, n, limit)

    if m < n:
        a, b = b, a
        m, n = n, m

    # Handle edge cases
    if n == 0:
        return m
    if m == n and a == b:
        return 0

    row = list(range(n + 1))

    for i in range(1, m + 1):
        unit = a[i - 1]
        diagonal = row[0]
        row[0] = i

        for j in range(1, n + 1):
            above = row[j]
            if unit == b[j - 1]:
                substitution = diagonal
            else:
                substitution = diagonal + 1
            row[j] = min(
                substitution,
                above + 1,  # insertion
                row[j - 1] + 1,  # deletion
            )
            diagonal = above

    return row[n]


def bounded_levenshtein(
    a: Sequence, b: Sequence, max_distance: int, limit: int = U32_MAX
) -> bool:
    """
    Check if the Levenshtein distance between a and b is <= max_distance.

    Same sweep as :func:`levenshtein`, abandoned as soon as every entry of
    the working row is above ``max_distance``.

    :param a: First sequence.
    :param b: Second sequence.
    :param max_distance: Maximum allowed Levenshtein distance.
    :param limit: Largest input length accepted.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    m, n = len(a), len(b)
    _check_limit(m, n, limit)

    if m < n:
        a, b = b, a
        m, n = n, m

    # Quick length check
    if m - n > max_distance:
        return False

    if n == 0:
        return m <= max_distance

    row = list(range(n + 1))

    for i in range(1, m + 1):
        unit = a[i - 1]
        diagonal = row[0]
        row[0] = i
        best = i

        for j in range(1, n + 1):
            above = row[j]
            if unit == b[j - 1]:
                value = diagonal
            else:
                value = diagonal + 1
            value = min(value, above + 1, row[j - 1] + 1)
            row[j] = value
            diagonal = above
            if value < best:
                best = value

        # Early termination, row minima never decrease
        if best > max_distance:
            return False

    return row[n] <= max_distance
