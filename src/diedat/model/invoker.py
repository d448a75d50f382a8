"""Masked language model invocation."""

from __future__ import annotations

import logging
from typing import Any, Dict, Protocol, Sequence

import numpy as np
import torch
from torch import nn
from transformers import AutoModelForMaskedLM

from diedat.data.sequence import ModelInput
from diedat.errors import InferenceFailure

logger = logging.getLogger("diedat.invoker")


class ModelInvoker(Protocol):
    """``(attention_mask, input_ids) -> logits[seq_len * vocab_size]``."""

    def __call__(self, attention_mask: Sequence[int], input_ids: Sequence[int]) -> Any:
        ...


def as_flat_logits(output: Any) -> torch.Tensor:
    if isinstance(output, torch.Tensor):
        tensor = output.detach()
    elif isinstance(output, np.ndarray):
        tensor = torch.from_numpy(output)
    else:
        tensor = torch.as_tensor(output)
    return tensor.to(device="cpu", dtype=torch.float32).reshape(-1)


def invoke(invoker: ModelInvoker, model_input: ModelInput, expected_size: int) -> torch.Tensor:
    """Run the invoker once and return its logits as a flat float tensor.

    Any exception from the invoker, or a buffer whose element count differs
    from ``expected_size``, becomes an ``InferenceFailure``.
    """
    try:
        output = invoker(model_input.attention_mask, model_input.input_ids)
        logits = as_flat_logits(output)
    except Exception as exc:
        logger.error("inference_failed=true error=%s", exc)
        raise InferenceFailure(f"Model invocation failed: {exc}", cause=exc) from exc
    if logits.numel() != expected_size:
        logger.error("inference_failed=true got_size=%s expected_size=%s", logits.numel(), expected_size)
        raise InferenceFailure(
            f"Model returned {logits.numel()} logits, expected {expected_size}"
        )
    return logits


class TransformersMaskedLM:
    """Wraps a HuggingFace masked LM as a batch-of-one invoker."""

    def __init__(self, model: nn.Module, device: torch.device | str = "cpu") -> None:
        self.device = torch.device(device)
        self.model = model.to(self.device)
        self.model.eval()

    @classmethod
    def from_pretrained(cls, path: str, device: torch.device | str = "cpu") -> "TransformersMaskedLM":
        logger.info("model_load path=%s device=%s", path, device)
        model = AutoModelForMaskedLM.from_pretrained(path)
        return cls(model, device=device)

    @property
    def vocab_size(self) -> int | None:
        config = getattr(self.model, "config", None)
        return getattr(config, "vocab_size", None)

    def __call__(self, attention_mask: Sequence[int], input_ids: Sequence[int]) -> torch.Tensor:
        mask = torch.as_tensor(attention_mask, dtype=torch.long, device=self.device).reshape(1, -1)
        ids = torch.as_tensor(input_ids, dtype=torch.long, device=self.device).reshape(1, -1)
        with torch.no_grad():
            outputs = self.model(input_ids=ids, attention_mask=mask)
        return outputs.logits[0].reshape(-1).float().cpu()

    def describe(self, seq_len: int) -> Dict[str, Dict[str, Any]]:
        return {
            "attention_mask": {"index": 0, "shape": [1, seq_len], "dtype": str(torch.long)},
            "input_ids": {"index": 1, "shape": [1, seq_len], "dtype": str(torch.long)},
            "logits": {"index": 0, "shape": [1, seq_len, self.vocab_size], "dtype": str(torch.float32)},
        }
