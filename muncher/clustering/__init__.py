"""
Near-duplicate label clustering.

BK-tree metric index, online vote merging and offline consolidation of
noisy labels under canonical representatives.
"""

from .models import (
    Cluster,
    FrequencyTable,
    VoteTable,
    OUTCOME_NEW,
    OUTCOME_MERGED,
    OUTCOME_PROMOTED,
    OUTCOMES,
)
from .distance import (
    DISTANCES,
    DEFAULT_DISTANCE,
    damerau_levenshtein,
    levenshtein,
    optimal_string_alignment,
    get_distance,
)
from .bktree import BKNode, BKTree
from .algorithm import (
    find_closest,
    find_similar_labels,
    select_representative,
    build_label_map,
    pairwise_distances,
)
from .consolidator import LabelConsolidator

__all__ = [
    # Models
    "Cluster",
    "FrequencyTable",
    "VoteTable",
    "OUTCOME_NEW",
    "OUTCOME_MERGED",
    "OUTCOME_PROMOTED",
    "OUTCOMES",
    # Distance
    "DISTANCES",
    "DEFAULT_DISTANCE",
    "damerau_levenshtein",
    "levenshtein",
    "optimal_string_alignment",
    "get_distance",
    # Index
    "BKNode",
    "BKTree",
    # Algorithm
    "find_closest",
    "find_similar_labels",
    "select_representative",
    "build_label_map",
    "pairwise_distances",
    # Consolidator
    "LabelConsolidator",
]
