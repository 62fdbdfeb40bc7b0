"""
Data models for label consolidation.

Vote and frequency tables filled during the online phase, plus the cluster
records produced by the offline pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Outcomes of processing one label
OUTCOME_NEW = "new"            # registered as a novel label
OUTCOME_MERGED = "merged"      # vote folded into an existing label
OUTCOME_PROMOTED = "promoted"  # longer label took over an existing entry

OUTCOMES = (OUTCOME_NEW, OUTCOME_MERGED, OUTCOME_PROMOTED)


class VoteTable:
    """Canonical label -> accumulated vote count."""

    def __init__(self):
        self.votes: dict[str, int] = {}

    def get(self, label: str) -> int:
        return self.votes.get(label, 0)

    def increment(self, label: str, n: int = 1) -> None:
        self.votes[label] = self.votes.get(label, 0) + n

    def transfer(self, source: str, target: str) -> int:
        """
        Move source's entire count into target and drop the source entry.

        A source without an entry (its votes already moved elsewhere)
        transfers nothing.

        Returns:
            Number of votes moved
        """
        moved = self.votes.pop(source, 0)
        self.increment(target, moved)
        return moved

    def items(self) -> list[tuple[str, int]]:
        return list(self.votes.items())

    def total(self) -> int:
        return sum(self.votes.values())

    def __contains__(self, label: str) -> bool:
        return label in self.votes

    def __len__(self) -> int:
        return len(self.votes)

    def to_dict(self) -> dict:
        return {"votes": dict(self.votes)}

    @classmethod
    def from_dict(cls, data: dict) -> VoteTable:
        table = cls()
        for label, count in data.get("votes", {}).items():
            table.votes[label] = int(count)
        return table


class FrequencyTable:
    """
    Every label ever chosen as the operative label -> times chosen.

    Append-only; used to rank cluster representatives.
    """

    def __init__(self):
        self.frequencies: dict[str, int] = {}

    def get(self, label: str) -> int:
        return self.frequencies.get(label, 0)

    def increment(self, label: str) -> None:
        self.frequencies[label] = self.frequencies.get(label, 0) + 1

    def labels(self) -> list[str]:
        """Labels in first-seen order."""
        return list(self.frequencies)

    def __contains__(self, label: str) -> bool:
        return label in self.frequencies

    def __len__(self) -> int:
        return len(self.frequencies)

    def to_dict(self) -> dict:
        return {"frequencies": dict(self.frequencies)}

    @classmethod
    def from_dict(cls, data: dict) -> FrequencyTable:
        table = cls()
        for label, count in data.get("frequencies", {}).items():
            table.frequencies[label] = int(count)
        return table


@dataclass
class Cluster:
    """A group of near-duplicate labels and its canonical representative."""

    representative: str
    members: list[str] = field(default_factory=list)
    votes: int = 0

    def to_dict(self) -> dict:
        return {
            "representative": self.representative,
            "members": list(self.members),
            "votes": self.votes,
        }
