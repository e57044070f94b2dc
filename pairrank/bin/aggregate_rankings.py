#!/usr/bin/env python
"""
aggregate_rankings.py - Merge several people's rankings into one consensus.

Reads a YAML file shaped like:

    items: [Alien, Heat, Ran]
    contributions:
      alice: [Heat, Alien, Ran]
      bob:   [Ran, Heat]          # partial rankings are fine

Usage:
    pairrank-aggregate movies.yaml
    pairrank-aggregate movies.yaml --scores
"""

import argparse
import pathlib
from typing import Any, Dict, List, Optional, Tuple

import yaml
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pairrank.core.aggregation import aggregate, score_items
from pairrank.core.errors import RankingError
from pairrank.core.models import Contribution, Item, make_items
from pairrank.utils.io_helpers import ensure_utf8_windows, read_utf8
from pairrank.utils.logging_helper import get_logger
from pairrank.utils.text_processing import clean_label

console = Console()
log = get_logger()


def load_config(config_path: pathlib.Path) -> Tuple[List[Item], List[Contribution]]:
    """Load canonical items and contributions from a YAML file."""
    data: Dict[str, Any] = yaml.safe_load(read_utf8(config_path)) or {}
    if not isinstance(data.get("items"), list):
        raise ValueError(f"{config_path}: 'items' must be a list of labels")

    items = make_items(str(label) for label in data["items"])
    contributions = []
    for person, ranking in (data.get("contributions") or {}).items():
        ranking = ranking or []
        if not isinstance(ranking, list):
            raise ValueError(f"{config_path}: ranking for {person!r} must be a list")
        contributions.append(
            Contribution(str(person), tuple(clean_label(str(label)) for label in ranking))
        )
    log.info(f"Loaded {len(items)} items and {len(contributions)} contributions from {config_path}")
    return items, contributions


def consensus_table(consensus: List[Item], scores: Optional[Dict[Any, int]] = None) -> Table:
    table = Table(title="Consensus ranking")
    table.add_column("Rank", justify="right")
    table.add_column("Item")
    if scores is not None:
        table.add_column("Score", justify="right")
    for rank, item in enumerate(consensus, 1):
        row = [str(rank), escape(str(item))]
        if scores is not None:
            row.append(str(scores[item.id]))
        table.add_row(*row)
    return table


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    ensure_utf8_windows()

    ap = argparse.ArgumentParser(description="Consensus ranking from several contributions")
    ap.add_argument("config", type=pathlib.Path, help="YAML file with items and contributions")
    ap.add_argument("--scores", action="store_true", help="Show each item's total score")
    args = ap.parse_args(argv)

    try:
        items, contributions = load_config(args.config)
        consensus = aggregate(items, contributions)
        scores = score_items(items, contributions) if args.scores else None
    except (RankingError, ValueError, yaml.YAMLError) as e:
        log.error(f"Aggregation failed: {e}")
        console.print(f"[red]✗ {e}[/]")
        return 1

    if not contributions:
        console.print("[dim]No contributions yet; showing the original order.[/]")
    console.print(consensus_table(consensus, scores))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
