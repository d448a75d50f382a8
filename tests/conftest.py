"""Shared fixtures: a small RobBERT-style vocabulary and a fixed-logit model."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import pytest
import torch

from diedat.data.vocab import Vocabulary

TOKENS = [
    "<s>", "<pad>", "</s>", "<unk>", "<mask>", "Ġ", ".", ",",
    "ĠIk", "Ġweet", "Ġdie", "Ġdat", "Ġik", "Ġhet", "Ġkan",
]
TOKEN_IDS = {tok: i for i, tok in enumerate(TOKENS)}


class FixedLogitsInvoker:
    """Returns the same logits for every call and records its inputs."""

    def __init__(
        self,
        max_seq_len: int,
        vocab_size: int,
        scores: Optional[Dict[Tuple[int, int], float]] = None,
    ) -> None:
        logits = torch.zeros(max_seq_len, vocab_size)
        for (row, idx), value in (scores or {}).items():
            logits[row, idx] = value
        self.logits = logits.reshape(-1).tolist()
        self.calls: List[Tuple[List[int], List[int]]] = []

    def __call__(self, attention_mask: Sequence[int], input_ids: Sequence[int]) -> List[float]:
        self.calls.append((list(attention_mask), list(input_ids)))
        return self.logits


@pytest.fixture
def vocab() -> Vocabulary:
    return Vocabulary(TOKEN_IDS)


@pytest.fixture
def dat_invoker(vocab: Vocabulary) -> FixedLogitsInvoker:
    """Prefers "dat" over "die" at token row 3, i.e. word index 2."""
    return FixedLogitsInvoker(
        128,
        len(vocab),
        {
            (3, TOKEN_IDS["Ġdat"]): 6.0,
            (3, TOKEN_IDS["Ġdie"]): 4.0,
            (2, TOKEN_IDS["Ġkan"]): 50.0,
        },
    )
