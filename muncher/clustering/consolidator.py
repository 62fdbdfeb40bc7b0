"""
Label consolidator.

Drives the BK-tree as labels arrive, folding near-duplicates into one
vote-bearing entry, then groups everything seen into clusters with a single
representative each.
"""

from __future__ import annotations

from collections import Counter

from .algorithm import build_label_map, find_closest
from .bktree import BKTree
from .distance import DistanceFn, damerau_levenshtein
from .models import (
    Cluster,
    FrequencyTable,
    VoteTable,
    OUTCOME_NEW,
    OUTCOME_MERGED,
    OUTCOME_PROMOTED,
)


class LabelConsolidator:
    """
    Online vote merging plus offline consolidation for one processing run.

    Results depend on the order labels arrive in. Single writer only.
    """

    def __init__(
        self,
        distance: DistanceFn = damerau_levenshtein,
        search_radius: int = 2,
        merge_threshold: int = 2,
        cluster_threshold: int = 2,
        verbose: bool = False,
    ):
        self.distance = distance
        self.search_radius = search_radius
        self.merge_threshold = merge_threshold
        self.cluster_threshold = cluster_threshold
        self.verbose = verbose

        self.index = BKTree(distance)
        self.votes = VoteTable()
        self.frequencies = FrequencyTable()
        self.stats: Counter = Counter()

    def process(self, label: str) -> str:
        """
        Account for one normalized label.

        Returns:
            The outcome: "new", "merged" or "promoted"
        """
        candidates = self.index.search(label, self.search_radius)
        closest = find_closest(label, candidates, self.distance)

        if closest is None:
            outcome = self._register(label)
        else:
            outcome = self.handle_vote(label, closest)

        self.stats["processed"] += 1
        self.stats[outcome] += 1
        return outcome

    def handle_vote(self, label: str, closest: str) -> str:
        """
        Decide whether label merges into closest.

        The distance is recomputed here rather than trusted from the search
        radius; a pair over merge_threshold is registered as a new label.
        Otherwise the longer spelling becomes the vote-bearing entry, and on
        equal length the existing label is kept.
        """
        distance = self.distance(label, closest)

        if distance > self.merge_threshold:
            return self._register(label)

        if len(label) > len(closest):
            moved = self.votes.transfer(closest, label)
            self.votes.increment(label)
            self.frequencies.increment(label)
            self.index.insert(label)
            if self.verbose:
                print(f"  {closest!r} -> {label!r} ({moved} votes moved)")
            return OUTCOME_PROMOTED

        self.votes.increment(closest)
        self.frequencies.increment(closest)
        return OUTCOME_MERGED

    def _register(self, label: str) -> str:
        self.index.insert(label)
        self.votes.increment(label)
        self.frequencies.increment(label)
        return OUTCOME_NEW

    def clusters(self) -> list[Cluster]:
        """
        Group every label seen into clusters with summed votes.

        Cluster membership is greedy and order dependent (see
        build_label_map). Labels never seen by the frequency table cannot
        hold votes, so every vote lands in exactly one cluster.
        """
        label_map, clusters = build_label_map(
            self.frequencies.labels(),
            self.frequencies,
            self.distance,
            self.cluster_threshold,
        )
        by_label = {}
        for cluster in clusters:
            for member in cluster.members:
                by_label[member] = cluster
        for name, count in self.votes.items():
            cluster = by_label.get(name)
            if cluster is not None:
                cluster.votes += count
        return clusters

    def consolidate(self) -> dict[str, int]:
        """
        Final canonical label -> total votes.

        Re-sums the vote table keyed by each label's representative. Does
        not mutate any state, so repeated calls give identical results.
        """
        label_map, _ = build_label_map(
            self.frequencies.labels(),
            self.frequencies,
            self.distance,
            self.cluster_threshold,
        )

        consolidated: dict[str, int] = {}
        for name, count in self.votes.items():
            representative = label_map.get(name, name)
            consolidated[representative] = consolidated.get(representative, 0) + count

        if self.verbose:
            print(f"Consolidated {len(self.votes)} vote entries into {len(consolidated)} labels")

        return consolidated
