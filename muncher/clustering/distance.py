"""
Edit-distance strategies for the metric index.

Any callable (a, b) -> int can be plugged into BKTree and LabelConsolidator.
The BK-tree is only exact for strategies that satisfy the triangle inequality.
"""

from __future__ import annotations

from typing import Callable

from rapidfuzz.distance import DamerauLevenshtein, Levenshtein, OSA

DistanceFn = Callable[[str, str], int]


def damerau_levenshtein(a: str, b: str) -> int:
    """
    Unrestricted Damerau-Levenshtein distance.

    Unit cost for substitution, insertion, deletion and adjacent
    transposition. Unlike OSA this is a true metric.
    """
    return DamerauLevenshtein.distance(a, b)


def levenshtein(a: str, b: str) -> int:
    """Levenshtein distance (no transpositions)."""
    return Levenshtein.distance(a, b)


def optimal_string_alignment(a: str, b: str) -> int:
    """
    Restricted Damerau-Levenshtein (optimal string alignment).

    Violates the triangle inequality ("ca" -> "ac" -> "abc" is 2,
    "ca" -> "abc" is 3), so BK-tree pruning can miss matches with it.
    """
    return OSA.distance(a, b)


DISTANCES: dict[str, DistanceFn] = {
    "damerau_levenshtein": damerau_levenshtein,
    "levenshtein": levenshtein,
    "osa": optimal_string_alignment,
}

DEFAULT_DISTANCE = "damerau_levenshtein"


def get_distance(name: str) -> DistanceFn:
    """Look up a distance strategy by name."""
    try:
        return DISTANCES[name]
    except KeyError:
        known = ", ".join(sorted(DISTANCES))
        raise ValueError(f"Unknown distance '{name}'. Known: {known}") from None
