#!/usr/bin/env python
"""
rank_items.py  –  Rank a list of items in the terminal, two at a time.

Examples
────────
# 1) Rank a fresh list (one label per line)
pairrank-rank movies.txt

# 2) Slot new items into an order you already have
pairrank-rank new_movies.txt --existing ranked_movies.txt --output ranked_movies.txt
"""

from __future__ import annotations
import argparse
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from pairrank.core.errors import RankingError
from pairrank.core.models import Choice, Item, make_items
from pairrank.core.ranking import BatchRankingSession, RankingSession, build_ranking, start_session
from pairrank.utils.io_helpers import ensure_utf8_windows, read_labels, write_labels
from pairrank.utils.logging_helper import get_logger

console = Console()
log = get_logger()

PROMPT = "[bold]Which do you prefer?[/] [cyan]l[/]eft / [cyan]r[/]ight / [cyan]b[/]ack / [cyan]q[/]uit"


# ─── session driver ─────────────────────────────────────────────────────────
def show_matchup(session: RankingSession, out: Console) -> None:
    matchup = session.current_matchup()
    title = "Matchup"
    if isinstance(session, BatchRankingSession):
        title = f"Item {session.processed_count() + 1}/{session.total_count()}"
    body = (f"[green]LEFT:[/]  {escape(str(matchup.left))}\n"
            f"[magenta]RIGHT:[/] {escape(str(matchup.right))}")
    out.print(Panel(body, title=title, expand=False))


def run_session(session: RankingSession,
                ask: Callable[[str], str],
                out: Console = console) -> bool:
    """Drive ``session`` until it completes. Returns False if the user quit."""
    while not session.is_complete():
        show_matchup(session, out)
        answer = ask(PROMPT).strip().lower()

        if answer in ("q", "quit"):
            log.info("Session abandoned with %d item(s) placed", len(session.result()))
            return False
        if answer in ("b", "back"):
            if session.can_go_back():
                session.go_back()
            else:
                out.print("[yellow]Nothing to undo[/]")
            continue

        try:
            choice = Choice.parse(answer)
        except ValueError:
            out.print(f"[red]Please answer l, r, b or q (got {escape(repr(answer))})[/]")
            continue
        session.choose(choice)
    return True


def result_table(items: List[Item]) -> Table:
    table = Table(title="Final ranking")
    table.add_column("Rank", justify="right")
    table.add_column("Item")
    for rank, item in enumerate(items, 1):
        table.add_row(str(rank), escape(str(item)))
    return table


# ─── CLI ────────────────────────────────────────────────────────────────────
def main(argv: Optional[List[str]] = None,
         ask: Optional[Callable[[str], str]] = None) -> int:
    load_dotenv()
    ensure_utf8_windows()

    ap = argparse.ArgumentParser(description="Rank items by answering pairwise matchups.")
    ap.add_argument("items", type=Path, help="File with one item label per line")
    ap.add_argument("--existing", type=Path,
                    help="Already-ranked file (best first) to insert the items into")
    ap.add_argument("--output", type=Path, help="Write the final order here, one label per line")
    ap.add_argument("--strict", action="store_true", default=None,
                    help="Treat stray choices or undos as errors")
    args = ap.parse_args(argv)

    if ask is None:
        ask = lambda message: Prompt.ask(message, console=console)

    try:
        new_items = make_items(read_labels(args.items))
        if args.existing:
            existing = make_items(read_labels(args.existing))
            session = start_session(existing, new_items, strict=args.strict)
        else:
            session = build_ranking(new_items, strict=args.strict)

        if not run_session(session, ask):
            console.print("[yellow]Stopped before the ranking was finished.[/]")
            return 1
    except RankingError as e:
        log.error(f"Ranking failed: {e}")
        console.print(f"[red]✗ {e}[/]")
        return 1

    ranked = session.result()
    console.print(result_table(ranked))
    if args.output:
        write_labels(args.output, [item.label for item in ranked])
        log.info("Saved ranking → %s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
