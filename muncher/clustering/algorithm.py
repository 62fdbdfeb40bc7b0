"""
Label clustering algorithms.

Closest-candidate selection for the online phase and the greedy single-pass
clustering used by the offline consolidation.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from .distance import DistanceFn
from .models import Cluster, FrequencyTable


def find_closest(
    label: str,
    candidates: Iterable[str],
    distance: DistanceFn,
) -> Optional[str]:
    """
    Pick the candidate nearest to label.

    Ordered by ascending distance, then descending length. Remaining ties
    keep the first candidate in iteration order.
    """
    return min(
        candidates,
        key=lambda candidate: (distance(label, candidate), -len(candidate)),
        default=None,
    )


def pairwise_distances(labels: Sequence[str], distance: DistanceFn) -> np.ndarray:
    """Symmetric n x n matrix of direct distances between labels."""
    n = len(labels)
    matrix = np.zeros((n, n), dtype=np.int64)
    for i in range(n):
        for j in range(i + 1, n):
            d = distance(labels[i], labels[j])
            matrix[i, j] = d
            matrix[j, i] = d
    return matrix


def find_similar_labels(
    label: str,
    labels: Iterable[str],
    distance: DistanceFn,
    threshold: int,
) -> list[str]:
    """All labels (label itself included when present) within threshold."""
    return [candidate for candidate in labels if distance(label, candidate) <= threshold]


def select_representative(labels: Sequence[str], frequencies: FrequencyTable) -> str:
    """
    Choose the label standing in for a cluster.

    Highest frequency wins, then the longest label. Further ties go to the
    first label in iteration order, so the choice depends on the order in
    which labels were first seen.
    """
    return max(labels, key=lambda name: (frequencies.get(name), len(name)))


def build_label_map(
    labels: Sequence[str],
    frequencies: FrequencyTable,
    distance: DistanceFn,
    threshold: int,
) -> tuple[dict[str, str], list[Cluster]]:
    """
    Greedy single-pass clustering of labels.

    Each label not yet assigned seeds a cluster of everything within
    threshold of it (direct pairwise distance, not transitive). Members
    already claimed by an earlier cluster keep their first assignment.

    Args:
        labels: Labels in iteration order (first-seen order)
        frequencies: Frequency table used to rank representatives
        distance: Distance strategy
        threshold: Inclusive cluster radius

    Returns:
        (label -> representative map, clusters in creation order)
    """
    labels = list(labels)
    matrix = pairwise_distances(labels, distance)

    label_map: dict[str, str] = {}
    clusters: list[Cluster] = []

    for i, label in enumerate(labels):
        if label in label_map:
            continue

        similar = [labels[j] for j in np.flatnonzero(matrix[i] <= threshold)]
        representative = select_representative(similar, frequencies)

        cluster = Cluster(representative=representative)
        for name in similar:
            if name in label_map:
                continue
            label_map[name] = representative
            cluster.members.append(name)
        clusters.append(cluster)

    return label_map, clusters
