"""
Command-line interface for the consumer attack credits.

Subcommands:
    attacks - build the credits and write them to data.js
    stats   - tally how the newest attacks turned out, per season
"""

import argparse
import json
import random
import sys
from typing import Optional

from src.ingest.base_fetcher import FetchError, load_ingest_config
from src.ingest.fetch_events import EventLogFetcher
from src.ingest.fetch_players import PlayerFetcher
from src.logging_config import configure_logging, logging_settings

from . import output
from . import pipeline
from .diagnostics import Diagnostics
from .outcomes import to_season_arrays


def cmd_attacks(args: argparse.Namespace) -> int:
    """Fetch, merge, classify and write the credits."""
    config = args.settings
    rng = random.Random(args.seed) if args.seed is not None else None
    diagnostics = Diagnostics()

    try:
        lines = pipeline.run_attacks(
            EventLogFetcher(config),
            PlayerFetcher(config),
            variance=rng,
            diagnostics=diagnostics,
        )
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    out_path = args.output or config["output"]["path"]
    if args.dry_run:
        print(output.render_data_js(lines), end="")
    else:
        output.write_data_js(lines, out_path)
        print(f"Wrote {len(lines)} line(s) to {out_path}")

    if args.verbose and len(diagnostics):
        for code, count in sorted(diagnostics.summary().items()):
            print(f"  {code}: {count}")

    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print per-season outcome counts as JSON."""
    config = args.settings
    try:
        counts = pipeline.run_outcome_stats(EventLogFetcher(config), limit=args.limit, diagnostics=Diagnostics())
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_season_arrays(counts), indent=2))
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="credits",
        description="Consumer attack credits from the SIBR event log"
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to ingest config (default: config/ingest.yaml)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    attacks_parser = subparsers.add_parser("attacks", help="Build credits and write data.js")
    attacks_parser.add_argument("--output", "-o", help="Output file (default from config)")
    attacks_parser.add_argument("--seed", type=int, help="Seed the rating jitter")
    attacks_parser.add_argument("--dry-run", action="store_true", help="Print instead of writing")
    attacks_parser.set_defaults(func=cmd_attacks)

    stats_parser = subparsers.add_parser("stats", help="Count attack outcomes per season")
    stats_parser.add_argument("--limit", type=int, help="Number of events to fetch")
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    args.settings = load_ingest_config(args.config)
    configure_logging(**logging_settings(args.settings))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
