"""
Structured logging for tally runs.

Single JSONL file with typed events for streaming and analysis.

Event types:
- run_start: Config, log file
- label: One processed vote (raw and normalized label, outcome)
- consolidation: Final clusters and representatives
- error: Failures that stop the run
- run_end: Summary stats
"""

import json
from pathlib import Path
from datetime import datetime
from typing import Any


class Logger:
    def __init__(self, output_dir: Path):
        """
        Initialize logger for a run.

        Args:
            output_dir: Directory for log files (created if missing)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.output_dir / "events.jsonl"

        # Open file in append mode
        self.file_handle = open(self.log_file, 'a', encoding='utf-8')

    def _write_event(self, event_type: str, data: dict[str, Any]) -> None:
        """Write typed event to JSONL log."""
        event = {
            "type": event_type,
            "timestamp": datetime.now().isoformat(),
            **data
        }
        self.file_handle.write(json.dumps(event, ensure_ascii=False) + '\n')
        self.file_handle.flush()  # Ensure streaming writes

    def log_run_start(self, config: dict[str, Any], log_path: str) -> None:
        """
        Log run initialization.

        Args:
            config: Run configuration parameters
            log_path: Election log being tallied
        """
        self._write_event("run_start", {
            "config": config,
            "log_path": log_path,
        })

    def log_label(
        self,
        line_num: int,
        raw_label: str,
        label: str,
        outcome: str,
    ) -> None:
        """
        Log one processed vote.

        Args:
            line_num: Line in the log file (1-based)
            raw_label: Label as extracted from the line
            label: Normalized label fed to the consolidator
            outcome: new, merged or promoted
        """
        self._write_event("label", {
            "line": line_num,
            "raw_label": raw_label,
            "label": label,
            "outcome": outcome,
        })

    def log_consolidation(self, clusters: list[dict], total_votes: int) -> None:
        """
        Log consolidation results.

        Args:
            clusters: Cluster details (representative, members, votes)
            total_votes: Sum of votes over all clusters
        """
        self._write_event("consolidation", {
            "num_clusters": len(clusters),
            "total_votes": total_votes,
            "clusters": clusters,
        })

    def log_error(self, message: str, error_type: str = "error") -> None:
        """
        Log error event.

        Args:
            message: Error description
            error_type: Error category (error, warning, abort)
        """
        self._write_event("error", {
            "message": message,
            "error_type": error_type,
        })

    def log_run_end(self, lines_read: int, stats: dict[str, int], total_votes: int) -> None:
        """
        Log run completion.

        Args:
            lines_read: Lines read from the log file
            stats: Consolidator counters (processed, new, merged, promoted)
            total_votes: Total votes after consolidation
        """
        self._write_event("run_end", {
            "lines_read": lines_read,
            "stats": stats,
            "total_votes": total_votes,
        })

    def close(self) -> None:
        """Close log file."""
        if hasattr(self, 'file_handle') and self.file_handle:
            self.file_handle.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
