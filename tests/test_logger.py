"""
Test logger.py functionality
"""

import json
import tempfile
from pathlib import Path

from muncher.core.logger import Logger


def test_logger():
    """Test logger writes JSONL correctly."""
    print("Testing Logger class...")

    with tempfile.TemporaryDirectory() as tmpdir:
        log_dir = Path(tmpdir) / "logs"

        with Logger(log_dir) as logger:
            print(f"  ✓ Logger created in {log_dir}")

            logger.log_run_start(config={"merge_threshold": 2}, log_path="data/log.txt")
            logger.log_label(line_num=3, raw_label="ИвановИван", label="Иванов Иван", outcome="new")
            logger.log_consolidation(
                clusters=[{"representative": "Иванов Иван", "members": ["Иванов Иван"], "votes": 1}],
                total_votes=1,
            )
            logger.log_error("disk full", error_type="warning")
            logger.log_run_end(lines_read=10, stats={"processed": 1, "new": 1}, total_votes=1)
            print("  ✓ Logged all event types")

        log_file = log_dir / "events.jsonl"
        assert log_file.exists()

        with open(log_file, encoding="utf-8") as f:
            events = [json.loads(line) for line in f]

        assert [e["type"] for e in events] == [
            "run_start", "label", "consolidation", "error", "run_end",
        ]
        for event in events:
            assert "timestamp" in event

        assert events[0]["config"] == {"merge_threshold": 2}
        assert events[1]["label"] == "Иванов Иван"
        assert events[1]["line"] == 3
        assert events[2]["num_clusters"] == 1
        assert events[3]["error_type"] == "warning"
        assert events[4]["stats"]["processed"] == 1

        # Cyrillic is written as-is, not escaped
        assert "Иванов" in log_file.read_text(encoding="utf-8")
        print(f"  ✓ {len(events)} events parsed back")


def test_logger_appends():
    with tempfile.TemporaryDirectory() as tmpdir:
        for _ in range(2):
            with Logger(Path(tmpdir)) as logger:
                logger.log_error("again")

        lines = (Path(tmpdir) / "events.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2


if __name__ == "__main__":
    test_logger()
    test_logger_appends()
