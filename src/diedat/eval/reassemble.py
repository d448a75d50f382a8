"""Splice a predicted word back into the original sentence."""

from __future__ import annotations

import logging
from typing import Sequence

from diedat.data.masking import split_words

logger = logging.getLogger("diedat.reassemble")


def splice(sentence: str, word: str, index: int) -> str:
    words = split_words(sentence)
    words[index] = word
    return " ".join(words)


def reassemble(original_sentence: str, candidates: Sequence[str], mask_word_index: int) -> str:
    """Replace the masked word with the top candidate.

    A mask at index 0 yields an empty string rather than a spliced sentence.
    """
    if mask_word_index == 0:
        logger.debug("reassemble_skipped=true reason=mask_index_zero")
        return ""
    top = candidates[0] if candidates else ""
    return splice(original_sentence, top, mask_word_index)
