"""Decode masked-LM logits into ranked word candidates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import torch

from diedat.data.sequence import MAX_SEQUENCE_LENGTH
from diedat.data.vocab import UNK_TOKEN, WORD_PREFIX, Vocabulary
from diedat.errors import MaskPositionOutOfRange
from diedat.model.invoker import as_flat_logits

logger = logging.getLogger("diedat.decode")


@dataclass(frozen=True)
class ScoredCandidate:
    token: str
    probability: float
    token_id: int


def stable_softmax(logits: torch.Tensor) -> torch.Tensor:
    shifted = logits - logits.max()
    exp = shifted.exp()
    return exp / exp.sum()


def top_k_indices(probs: torch.Tensor, k: int) -> List[int]:
    # Stable sort keeps the lower index first among equal probabilities.
    order = torch.sort(probs, descending=True, stable=True).indices
    return order[: max(k, 0)].tolist()


def strip_prefix(token: str) -> str:
    return token.replace(WORD_PREFIX, "")


def mask_row(
    logits: Any,
    mask_word_index: int,
    vocab_size: int,
    max_seq_len: int = MAX_SEQUENCE_LENGTH,
) -> torch.Tensor:
    """Return the logit row for the masked word.

    Row ``mask_word_index + 1`` is used because ``<s>`` occupies row 0.
    """
    flat = as_flat_logits(logits)
    expected = max_seq_len * vocab_size
    if flat.numel() != expected:
        raise ValueError(f"Expected {expected} logits ({max_seq_len} x {vocab_size}), got {flat.numel()}")
    row = mask_word_index + 1
    if mask_word_index < 0 or row >= max_seq_len:
        raise MaskPositionOutOfRange(mask_word_index, max_seq_len)
    return flat.view(max_seq_len, vocab_size)[row]


def decode_scored(
    logits: Any,
    vocab: Vocabulary,
    mask_word_index: Optional[int],
    top_k: int = 5,
    max_seq_len: int = MAX_SEQUENCE_LENGTH,
    vocab_size: Optional[int] = None,
) -> List[ScoredCandidate]:
    if mask_word_index is None:
        logger.debug("decode_skipped=true reason=no_mask")
        return []
    size = vocab_size if vocab_size is not None else len(vocab)
    row = mask_row(logits, mask_word_index, size, max_seq_len=max_seq_len)
    probs = stable_softmax(row)
    candidates: List[ScoredCandidate] = []
    for idx in top_k_indices(probs, top_k):
        token = vocab.token_for(idx)
        if token is None:
            logger.debug("reverse_lookup_miss id=%s", idx)
            token = UNK_TOKEN
        candidates.append(ScoredCandidate(strip_prefix(token), float(probs[idx]), idx))
    logger.debug("top_k=%s candidates=%s", top_k, [c.token for c in candidates])
    return candidates


def decode(
    logits: Any,
    vocab: Vocabulary,
    mask_word_index: Optional[int],
    top_k: int = 5,
    max_seq_len: int = MAX_SEQUENCE_LENGTH,
    vocab_size: Optional[int] = None,
) -> List[str]:
    scored = decode_scored(
        logits,
        vocab,
        mask_word_index,
        top_k=top_k,
        max_seq_len=max_seq_len,
        vocab_size=vocab_size,
    )
    return [c.token for c in scored]
