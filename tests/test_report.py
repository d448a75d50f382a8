import io
from pathlib import Path

from rich.console import Console

from diedat.eval.report import print_suggestions, save_suggestions, suggestion_table
from diedat.pipeline import Suggestion
from diedat.utils.io import load_jsonl

_SUGGESTIONS = [
    Suggestion(
        sentence="Ik weet die ik het kan.",
        masked_sentence="Ik weet <mask> ik het kan.",
        mask_index=2,
        candidates=["dat", "die"],
        scores=[0.8, 0.1],
        corrected_sentence="Ik weet dat ik het kan.",
    ),
    Suggestion(
        sentence="Dit is een test.",
        masked_sentence="Dit is een test.",
        mask_index=None,
        corrected_sentence="Dit is een test.",
    ),
]


def test_table_rows() -> None:
    assert suggestion_table(_SUGGESTIONS).row_count == 2


def test_print_suggestions() -> None:
    buffer = io.StringIO()
    print_suggestions(_SUGGESTIONS, console=Console(file=buffer, width=200))
    text = buffer.getvalue()
    assert "dat, die" in text
    assert "No mask token found in input" in text


def test_save_suggestions(tmp_path: Path) -> None:
    out = tmp_path / "out" / "suggestions.jsonl"
    save_suggestions(out, _SUGGESTIONS)
    rows = load_jsonl(out)
    assert [r["mask_index"] for r in rows] == [2, None]
    assert rows[0]["candidates"] == ["dat", "die"]
