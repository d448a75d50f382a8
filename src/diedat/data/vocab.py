"""Subword vocabulary with ordered fallback lookups."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from diedat.utils.io import load_json

BOS_TOKEN = "<s>"
EOS_TOKEN = "</s>"
PAD_TOKEN = "<pad>"
MASK_TOKEN = "<mask>"
UNK_TOKEN = "<unk>"
# Byte-level BPE marker for a subword that starts a new word.
WORD_PREFIX = "Ġ"

SPECIAL_TOKENS = (BOS_TOKEN, EOS_TOKEN, PAD_TOKEN, MASK_TOKEN, UNK_TOKEN, WORD_PREFIX)

logger = logging.getLogger("diedat.vocab")


class Vocabulary:
    """Read-only ``token -> id`` table with a reverse index.

    Several tokens may share an id. The reverse index keeps the first token
    in insertion order for each id, so ``token_for`` is deterministic.
    """

    def __init__(self, token_to_id: Mapping[str, int]) -> None:
        table: dict[str, int] = {}
        for token, idx in token_to_id.items():
            if not isinstance(token, str) or isinstance(idx, bool) or not isinstance(idx, int):
                raise ValueError(f"Vocabulary entries must map str to int, got {token!r}: {idx!r}")
            if idx < 0:
                raise ValueError(f"Vocabulary id for {token!r} must be non-negative, got {idx}")
            table[token] = idx
        self._token_to_id = MappingProxyType(table)
        reverse: dict[int, str] = {}
        for token, idx in table.items():
            reverse.setdefault(idx, token)
        self._id_to_token = MappingProxyType(reverse)

    @classmethod
    def from_mapping(cls, token_to_id: Mapping[str, int]) -> "Vocabulary":
        return cls(token_to_id)

    def __len__(self) -> int:
        return len(self._token_to_id)

    def __contains__(self, token: object) -> bool:
        return token in self._token_to_id

    def __iter__(self) -> Iterator[str]:
        return iter(self._token_to_id)

    @property
    def token_to_id(self) -> Mapping[str, int]:
        return self._token_to_id

    def get(self, token: str) -> int | None:
        return self._token_to_id.get(token)

    def lookup(self, *tokens: str, default: int | None = None) -> int | None:
        """Return the id of the first token present, else ``default``."""
        for token in tokens:
            idx = self._token_to_id.get(token)
            if idx is not None:
                return idx
        return default

    def token_for(self, idx: int, default: str | None = None) -> str | None:
        return self._id_to_token.get(idx, default)

    def missing_specials(self) -> list[str]:
        return [tok for tok in SPECIAL_TOKENS if tok not in self._token_to_id]


def load_vocab(path: str | Path) -> Vocabulary:
    """Load a ``vocab.json`` file as written by HuggingFace BPE tokenizers."""
    logger.info("vocab_load path=%s", path)
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Vocabulary file {path} must contain a JSON object")
    vocab = Vocabulary(data)
    missing = vocab.missing_specials()
    if missing:
        logger.warning("vocab_missing_specials=%s", ",".join(missing))
    logger.info("vocab_loaded size=%s", len(vocab))
    return vocab
