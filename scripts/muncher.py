#!/usr/bin/env python3
"""
Muncher CLI - tally votes from election logs, merging misspelled names.

Usage:
    python scripts/muncher.py tally data/log.txt
    python scripts/muncher.py tally data/log.txt --config muncher.yaml --output results.yaml
    python scripts/muncher.py similar data/log.txt "Иванов" --radius 2
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from muncher.config import MuncherConfig, load_config
from muncher.core.log_reader import normalize_label
from muncher.core.logger import Logger
from muncher.runner import TallyRunner, format_results, save_results


def build_config(args) -> MuncherConfig:
    """Config file (if any) with command-line overrides applied."""
    config = load_config(Path(args.config)) if args.config else MuncherConfig()

    if args.threshold is not None:
        config.search_radius = args.threshold
        config.merge_threshold = args.threshold
        config.cluster_threshold = args.threshold
    if args.distance:
        config.distance = args.distance
    if getattr(args, "log_dir", None):
        config.log_dir = args.log_dir
    if not args.verbose:
        config.verbose = False

    config.validate()
    return config


def cmd_tally(args):
    """Tally a log and print consolidated results."""
    config = build_config(args)

    if config.log_dir:
        with Logger(Path(config.log_dir)) as logger:
            runner = TallyRunner(config, logger)
            consolidated = runner.run(Path(args.log_file))
    else:
        runner = TallyRunner(config)
        consolidated = runner.run(Path(args.log_file))

    print(format_results(consolidated))

    if args.output:
        clusters = [c.to_dict() for c in runner.consolidator.clusters()]
        save_results(Path(args.output), consolidated, clusters)
        print(f"\nResults saved to {args.output}")

    return 0


def cmd_similar(args):
    """List indexed labels near a name after reading a log."""
    config = build_config(args)
    config.verbose = False

    runner = TallyRunner(config)
    runner.feed_file(Path(args.log_file))

    consolidator = runner.consolidator
    target = normalize_label(args.name)
    radius = args.radius if args.radius is not None else config.search_radius
    matches = consolidator.index.search(target, radius)

    if not matches:
        print(f"No labels within {radius} of '{target}'")
        return 0

    matches.sort(key=lambda label: (consolidator.distance(target, label), -len(label)))
    print(f"Labels within {radius} of '{target}':")
    for label in matches:
        distance = consolidator.distance(target, label)
        print(f"  [{distance}] {label}  (votes: {consolidator.votes.get(label)}, "
              f"seen: {consolidator.frequencies.get(label)})")

    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Muncher - election log vote tally with fuzzy name merging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", help="YAML config file")
    common.add_argument("--threshold", type=int, help="Edit-distance threshold (all phases)")
    common.add_argument("--distance", help="Distance strategy (damerau_levenshtein, levenshtein, osa)")
    common.add_argument("--verbose", action="store_true", default=True)
    common.add_argument("--quiet", dest="verbose", action="store_false")

    # tally
    p_tally = subparsers.add_parser("tally", parents=[common], help="Tally votes from a log")
    p_tally.add_argument("log_file", help="Election log file")
    p_tally.add_argument("--output", help="Save results (.json or .yaml)")
    p_tally.add_argument("--log-dir", help="Directory for JSONL event log")

    # similar
    p_similar = subparsers.add_parser("similar", parents=[common], help="Find labels near a name")
    p_similar.add_argument("log_file", help="Election log file")
    p_similar.add_argument("name", help="Name to look up")
    p_similar.add_argument("--radius", type=int, help="Search radius (default: search_radius)")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    # Dispatch
    commands = {
        "tally": cmd_tally,
        "similar": cmd_similar,
    }

    try:
        return commands[args.command](args)
    except (FileNotFoundError, ValueError, UnicodeDecodeError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
