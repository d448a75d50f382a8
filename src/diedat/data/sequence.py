"""Fixed-length model input assembly."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import torch

from diedat.data.vocab import BOS_TOKEN, EOS_TOKEN, PAD_TOKEN, Vocabulary

MAX_SEQUENCE_LENGTH = 128


@dataclass(frozen=True)
class ModelInput:
    input_ids: List[int]
    attention_mask: List[int]

    def __len__(self) -> int:
        return len(self.input_ids)

    def as_tensors(self, device: torch.device | str = "cpu") -> tuple[torch.Tensor, torch.Tensor]:
        """Batch-of-one ``(attention_mask, input_ids)`` long tensors."""
        mask = torch.tensor([self.attention_mask], dtype=torch.long, device=device)
        ids = torch.tensor([self.input_ids], dtype=torch.long, device=device)
        return mask, ids


def pad_or_truncate(ids: Sequence[int], max_length: int, pad_id: int) -> List[int]:
    if len(ids) > max_length:
        return list(ids[:max_length])
    return list(ids) + [pad_id] * (max_length - len(ids))


def create_attention_mask(length: int) -> List[int]:
    # Padding positions are attended too; the model output depends on it.
    return [1] * length


def build_input(
    token_ids: Sequence[int],
    max_length: int = MAX_SEQUENCE_LENGTH,
    vocab: Vocabulary | None = None,
) -> ModelInput:
    if max_length <= 0:
        raise ValueError(f"max_length must be positive, got {max_length}")
    if vocab is None:
        bos_id, eos_id, pad_id = 0, 0, 1
    else:
        bos_id = vocab.lookup(BOS_TOKEN, default=0)
        eos_id = vocab.lookup(EOS_TOKEN, default=0)
        pad_id = vocab.lookup(PAD_TOKEN, default=1)
    ids = [bos_id] + list(token_ids) + [eos_id]
    ids = pad_or_truncate(ids, max_length, pad_id)
    return ModelInput(input_ids=ids, attention_mask=create_attention_mask(len(ids)))
