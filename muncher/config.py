"""
Configuration for tally runs.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import yaml

from .clustering.distance import DEFAULT_DISTANCE, get_distance
from .core.log_reader import VOTE_PATTERN

__all__ = [
    "MuncherConfig",
    "load_config",
]


@dataclass
class MuncherConfig:
    """Configuration for a tally run."""

    # Extraction
    vote_pattern: str = VOTE_PATTERN
    encoding: str = "utf-8"

    # Matching
    distance: str = DEFAULT_DISTANCE
    search_radius: int = 2      # BK-tree query radius for online matching
    merge_threshold: int = 2    # Max distance for folding a vote into a match
    cluster_threshold: int = 2  # Max distance for offline cluster membership

    # Output
    log_dir: Optional[str] = None  # JSONL event log directory (None = off)
    verbose: bool = True

    def validate(self) -> None:
        """Raise ValueError on unusable settings."""
        get_distance(self.distance)
        for name in ("search_radius", "merge_threshold", "cluster_threshold"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MuncherConfig":
        """Create from dict, filtering out unknown keys."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def load_config(config_path: Path) -> MuncherConfig:
    """
    Load a YAML config file, merging with defaults.

    Args:
        config_path: Path to YAML file

    Returns:
        Validated MuncherConfig

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping or a setting is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping: {config_path}")

    config = MuncherConfig.from_dict(data)
    config.validate()
    return config
