"""
Muncher - vote tallies from noisy election logs.

Near-duplicate candidate names are merged through a BK-tree index and a
greedy consolidation pass before votes are counted.
"""

from .config import MuncherConfig, load_config
from .runner import TallyRunner, format_results, save_results

__all__ = ["MuncherConfig", "load_config", "TallyRunner", "format_results", "save_results"]
