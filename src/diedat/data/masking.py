"""Locate and mask the ambiguous relative pronoun."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from diedat.data.vocab import MASK_TOKEN

TARGET_WORDS = frozenset({"die", "dat"})


@dataclass(frozen=True)
class MaskedSentence:
    text: str
    mask_index: Optional[int]
    words: List[str]

    @property
    def masked(self) -> bool:
        return self.mask_index is not None


def split_words(sentence: str) -> List[str]:
    # Single-space split: runs of spaces yield empty words that keep their index.
    return sentence.split(" ")


def mask_sentence(sentence: str, targets: Iterable[str] = TARGET_WORDS) -> MaskedSentence:
    """Replace the first target word (case-insensitive) with ``<mask>``.

    Later occurrences are left as they are. Without a match the sentence is
    returned unchanged with ``mask_index=None``.
    """
    target_set = {t.lower() for t in targets}
    words = split_words(sentence)
    for index, word in enumerate(words):
        if word.lower() in target_set:
            masked_words = list(words)
            masked_words[index] = MASK_TOKEN
            return MaskedSentence(text=" ".join(masked_words), mask_index=index, words=masked_words)
    return MaskedSentence(text=sentence, mask_index=None, words=words)
