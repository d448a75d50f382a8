"""die/dat suggestion pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from diedat.config import PipelineConfig
from diedat.data.masking import mask_sentence
from diedat.data.sequence import ModelInput, build_input
from diedat.data.tokenizer import PrefixWordTokenizer
from diedat.data.vocab import Vocabulary, load_vocab
from diedat.eval.decode import ScoredCandidate, decode_scored
from diedat.eval.reassemble import reassemble, splice
from diedat.model.invoker import ModelInvoker, TransformersMaskedLM, invoke
from diedat.utils.runtime import resolve_device

logger = logging.getLogger("diedat.pipeline")

NO_MASK_MESSAGE = "No mask token found in input"


@dataclass(frozen=True)
class Suggestion:
    sentence: str
    masked_sentence: str
    mask_index: Optional[int]
    candidates: List[str] = field(default_factory=list)
    scores: List[float] = field(default_factory=list)
    corrected_sentence: str = ""

    @property
    def masked(self) -> bool:
        return self.mask_index is not None

    def to_row(self) -> dict:
        return {
            "sentence": self.sentence,
            "mask_index": self.mask_index,
            "candidates": list(self.candidates),
            "scores": list(self.scores),
            "corrected_sentence": self.corrected_sentence,
        }


def format_candidates(candidates: Iterable[str], sep: str = ", ") -> str:
    return sep.join(candidates)


class DieDatPipeline:
    """Masks die/dat, queries the model and ranks replacement words.

    The vocabulary and the model invoker are shared read-only across calls.
    """

    def __init__(
        self,
        vocab: Vocabulary,
        invoker: ModelInvoker,
        config: PipelineConfig | None = None,
    ) -> None:
        self.vocab = vocab
        self.invoker = invoker
        self.config = config or PipelineConfig()
        self.tokenizer = PrefixWordTokenizer(vocab)
        self.vocab_size = self.config.vocab_size or len(vocab)

    @classmethod
    def from_config(cls, config: PipelineConfig) -> "DieDatPipeline":
        if not config.vocab_path or not config.model_path:
            raise ValueError("vocab_path and model_path are required to build a pipeline from config")
        vocab = load_vocab(config.vocab_path)
        invoker = TransformersMaskedLM.from_pretrained(config.model_path, device=resolve_device(config.device))
        return cls(vocab, invoker, config)

    def prepare(self, masked_text: str) -> ModelInput:
        token_ids = self.tokenizer.encode(masked_text)
        return build_input(token_ids, self.config.max_seq_len, self.vocab)

    def rank(self, sentence: str, top_k: int | None = None) -> tuple[Optional[int], str, List[ScoredCandidate]]:
        k = top_k if top_k is not None else self.config.top_k
        masked = mask_sentence(sentence)
        logger.debug("masked_sentence=%r mask_index=%s", masked.text, masked.mask_index)
        if not masked.masked:
            return None, masked.text, []
        model_input = self.prepare(masked.text)
        logits = invoke(self.invoker, model_input, self.config.max_seq_len * self.vocab_size)
        scored = decode_scored(
            logits,
            self.vocab,
            masked.mask_index,
            top_k=k,
            max_seq_len=self.config.max_seq_len,
            vocab_size=self.vocab_size,
        )
        return masked.mask_index, masked.text, scored

    def suggest(self, sentence: str, top_k: int | None = None) -> Suggestion:
        """Rank die/dat replacements and build the corrected sentence.

        A sentence without either word comes back unchanged with no
        candidates. Model failures raise ``InferenceFailure``.
        """
        mask_index, masked_text, scored = self.rank(sentence, top_k=top_k)
        if mask_index is None:
            logger.info("mask_found=false")
            return Suggestion(
                sentence=sentence,
                masked_sentence=masked_text,
                mask_index=None,
                corrected_sentence=sentence,
            )
        candidates = [c.token for c in scored]
        logger.info("mask_found=true mask_index=%s candidates=%s", mask_index, format_candidates(candidates))
        return Suggestion(
            sentence=sentence,
            masked_sentence=masked_text,
            mask_index=mask_index,
            candidates=candidates,
            scores=[c.probability for c in scored],
            corrected_sentence=reassemble(sentence, candidates, mask_index),
        )

    def suggest_many(self, sentences: Iterable[str], top_k: int | None = None) -> List[Suggestion]:
        return [self.suggest(sentence, top_k=top_k) for sentence in sentences]

    def correct(self, text: str, top_k: int = 3) -> str:
        """Return ``text`` with the masked word replaced by the top candidate.

        Text without die/dat is returned as is. Unlike ``suggest``, a mask at
        word 0 is replaced too.
        """
        mask_index, _, scored = self.rank(text, top_k=top_k)
        if mask_index is None or not scored:
            return text
        return splice(text, scored[0].token, mask_index)
