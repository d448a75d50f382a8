"""Word-level tokenizer over a byte-level BPE vocabulary."""

from __future__ import annotations

import logging
import re
from typing import List

from diedat.data.vocab import MASK_TOKEN, UNK_TOKEN, WORD_PREFIX, Vocabulary

logger = logging.getLogger("diedat.tokenizer")

# ASCII classes: accented letters and non-breaking spaces are single
# punctuation segments.
_SEGMENT_RE = re.compile(re.escape(MASK_TOKEN) + r"|\w+|[^\w\s]", re.ASCII)
_PUNCT_RE = re.compile(r"[^\w\s]", re.ASCII)


def segment(text: str) -> List[str]:
    """Split text into ``<mask>``, word runs and single punctuation marks."""
    return _SEGMENT_RE.findall(text)


class PrefixWordTokenizer:
    """Maps whole words to their ``Ġ``-prefixed vocabulary entry.

    Words are never split into smaller subwords: a word missing from the
    vocabulary becomes ``<unk>``. Punctuation emits the bare ``Ġ`` marker
    followed by the mark itself.
    """

    def __init__(self, vocab: Vocabulary) -> None:
        self.vocab = vocab
        self.mask_id = vocab.lookup(MASK_TOKEN, UNK_TOKEN, default=0)

    def encode(self, text: str) -> List[int]:
        segments = segment(text)
        logger.debug("segments=%s", segments)
        ids: List[int] = []
        for seg in segments:
            if seg == MASK_TOKEN:
                ids.append(self.mask_id)
            elif _PUNCT_RE.fullmatch(seg):
                self._append(ids, WORD_PREFIX)
                self._append(ids, seg)
            else:
                self._append(ids, WORD_PREFIX + seg)
        logger.debug("token_ids=%s", ids)
        return ids

    def _append(self, ids: List[int], token: str) -> None:
        idx = self.vocab.lookup(token, UNK_TOKEN)
        if idx is None:
            logger.debug("lookup_miss token=%r", token)
            return
        ids.append(idx)


def tokenize(text: str, vocab: Vocabulary) -> List[int]:
    return PrefixWordTokenizer(vocab).encode(text)
