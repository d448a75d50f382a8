"""Suggestion reporting."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.table import Table

from diedat.pipeline import NO_MASK_MESSAGE, Suggestion, format_candidates
from diedat.utils.io import save_jsonl


def suggestion_table(suggestions: Iterable[Suggestion]) -> Table:
    table = Table(title="die/dat suggestions")
    table.add_column("sentence")
    table.add_column("candidates")
    table.add_column("p(top)", justify="right")
    table.add_column("corrected")
    for s in suggestions:
        if not s.masked:
            table.add_row(s.sentence, NO_MASK_MESSAGE, "-", s.corrected_sentence)
            continue
        top = f"{s.scores[0]:.3f}" if s.scores else "-"
        table.add_row(s.sentence, format_candidates(s.candidates), top, s.corrected_sentence)
    return table


def print_suggestions(suggestions: Iterable[Suggestion], console: Console | None = None) -> None:
    console = console or Console()
    console.print(suggestion_table(suggestions))


def save_suggestions(path: str | Path, suggestions: Iterable[Suggestion]) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    save_jsonl(out, (s.to_row() for s in suggestions))
