"""
Tally runner.

Core loop: read line → extract label → normalize → consolidate.
Consolidation runs once after the whole log has been read.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import yaml

from .clustering import LabelConsolidator, get_distance
from .config import MuncherConfig
from .core.log_reader import iter_labels, iter_lines
from .core.logger import Logger


def format_results(consolidated: dict[str, int]) -> str:
    """One `name: N votes` line per label, most votes first, then the total."""
    ranked = sorted(consolidated.items(), key=lambda item: -item[1])
    lines = [f"{name}: {votes} votes" for name, votes in ranked]
    lines.append("")
    lines.append(f"Total votes: {sum(consolidated.values())}")
    return "\n".join(lines)


def save_results(path: Path, consolidated: dict[str, int], clusters: Optional[list[dict]] = None) -> None:
    """
    Write results as JSON or YAML, chosen by file suffix.

    Args:
        path: Output file (.yaml/.yml for YAML, anything else JSON)
        consolidated: Representative -> votes
        clusters: Optional cluster details to include
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "results": dict(sorted(consolidated.items(), key=lambda item: -item[1])),
        "total_votes": sum(consolidated.values()),
    }
    if clusters is not None:
        data["clusters"] = clusters

    with open(path, 'w', encoding='utf-8') as f:
        if path.suffix in (".yaml", ".yml"):
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        else:
            json.dump(data, f, indent=2, ensure_ascii=False)


class TallyRunner:
    """
    Runs one election log through a LabelConsolidator.

    Usage:
        runner = TallyRunner(MuncherConfig())
        consolidated = runner.run(Path("data/log.txt"))
        print(format_results(consolidated))
    """

    def __init__(self, config: MuncherConfig, logger: Optional[Logger] = None):
        config.validate()
        self.config = config
        self.logger = logger
        self.consolidator = LabelConsolidator(
            distance=get_distance(config.distance),
            search_radius=config.search_radius,
            merge_threshold=config.merge_threshold,
            cluster_threshold=config.cluster_threshold,
            verbose=config.verbose,
        )
        self.lines_read = 0

    def _count_lines(self, lines):
        for line in lines:
            self.lines_read += 1
            yield line

    def feed(self, lines) -> int:
        """
        Process every vote in an iterable of log lines.

        Returns:
            Number of labels processed
        """
        processed = 0
        for line_num, raw, label in iter_labels(self._count_lines(lines), self.config.vote_pattern):
            outcome = self.consolidator.process(label)
            processed += 1

            if self.logger:
                self.logger.log_label(line_num, raw, label, outcome)

        return processed

    def feed_file(self, log_path: Path) -> int:
        """Process every vote in a log file. Failures are logged, then re-raised."""
        try:
            return self.feed(iter_lines(log_path, self.config.encoding))
        except (FileNotFoundError, UnicodeDecodeError) as e:
            if self.logger:
                self.logger.log_error(str(e), error_type="abort")
            raise

    def run(self, log_path: Path) -> dict[str, int]:
        """
        Tally a log file.

        Args:
            log_path: Election log to read

        Returns:
            Representative -> total votes

        Raises:
            FileNotFoundError: If the log file does not exist
        """
        if self.logger:
            self.logger.log_run_start(self.config.to_dict(), str(log_path))

        processed = self.feed_file(log_path)

        if self.config.verbose:
            stats = self.consolidator.stats
            print(f"Read {self.lines_read} lines, {processed} votes "
                  f"({stats['new']} new, {stats['merged']} merged, {stats['promoted']} promoted)")

        consolidated = self.consolidator.consolidate()

        if self.logger:
            total = sum(consolidated.values())
            clusters = [c.to_dict() for c in self.consolidator.clusters()]
            self.logger.log_consolidation(clusters, total)
            self.logger.log_run_end(self.lines_read, dict(self.consolidator.stats), total)

        return consolidated
