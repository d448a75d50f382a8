"""Pipeline configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

from diedat.data.sequence import MAX_SEQUENCE_LENGTH
from diedat.utils.io import load_yaml


@dataclass
class PipelineConfig:
    max_seq_len: int = MAX_SEQUENCE_LENGTH
    top_k: int = 5
    # Overrides len(vocab) when the model head is wider than vocab.json.
    vocab_size: Optional[int] = None
    vocab_path: Optional[str] = None
    model_path: Optional[str] = None
    device: str = "auto"

    def __post_init__(self) -> None:
        if self.max_seq_len < 2:
            raise ValueError(f"max_seq_len must be at least 2, got {self.max_seq_len}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.top_k}")
        if self.vocab_size is not None and self.vocab_size < 1:
            raise ValueError(f"vocab_size must be positive, got {self.vocab_size}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def config_from_dict(data: dict[str, Any]) -> PipelineConfig:
    known = {f.name for f in fields(PipelineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown pipeline config keys: {', '.join(unknown)}")
    return PipelineConfig(**data)


def load_config(path: str | Path | None = None, **overrides: Any) -> PipelineConfig:
    data: dict[str, Any] = {}
    if path is not None:
        cfg = load_yaml(path)
        data.update(cfg.get("pipeline", cfg))
    data.update({k: v for k, v in overrides.items() if v is not None})
    return config_from_dict(data)
