"""Edit-distance scoring of normalized filename keys."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> int:
    """Similarity of two keys as an integer percentage in [0, 100].

    100 * (max_len - distance) / max_len, rounded half up. Identical keys
    (including two empty ones) score 100; an empty key against a non-empty
    one scores 0.
    """
    if a == b:
        return 100
    if not a or not b:
        return 0

    distance = levenshtein_distance(a, b)
    max_len = max(len(a), len(b))
    return _round_half_up((max_len - distance) * 100, max_len)


def _round_half_up(numerator: int, denominator: int) -> int:
    # Integer form of floor(n / d + 0.5); exact for .5 cases.
    return (2 * numerator + denominator) // (2 * denominator)
