"""Smoke test for the die/dat pipeline on a tiny random model."""

from __future__ import annotations

from transformers import RobertaConfig, RobertaForMaskedLM

from diedat.config import PipelineConfig
from diedat.data.vocab import Vocabulary
from diedat.eval.report import print_suggestions
from diedat.model.invoker import TransformersMaskedLM
from diedat.pipeline import DieDatPipeline
from diedat.utils.runtime import resolve_device, setup_logging
from diedat.utils.seed import set_seed

_TOKENS = [
    "<s>", "<pad>", "</s>", "<unk>", "<mask>", "Ġ", ".", ",",
    "ĠIk", "Ġik", "Ġweet", "Ġdie", "Ġdat", "Ġhet", "Ġkan", "ĠDe", "Ġkat",
    "Ġop", "Ġdak", "Ġzit", "Ġis", "Ġvan", "Ġons", "ĠDit", "Ġeen", "Ġtest",
]


def main() -> None:
    logger = setup_logging("diedat.smoke")
    device = resolve_device("auto")
    set_seed(0)
    logger.info("smoke_start=true")

    vocab = Vocabulary({tok: i for i, tok in enumerate(_TOKENS)})
    config = PipelineConfig(max_seq_len=32, top_k=3)
    model_config = RobertaConfig(
        vocab_size=len(vocab),
        hidden_size=32,
        num_hidden_layers=1,
        num_attention_heads=2,
        intermediate_size=64,
        max_position_embeddings=config.max_seq_len + 2,
        pad_token_id=vocab.get("<pad>"),
        bos_token_id=vocab.get("<s>"),
        eos_token_id=vocab.get("</s>"),
    )
    invoker = TransformersMaskedLM(RobertaForMaskedLM(model_config), device=device)
    pipeline = DieDatPipeline(vocab, invoker, config)

    sentences = [
        "Ik weet die ik het kan.",
        "De kat dat op het dak zit, is van ons.",
        "Dit is een test.",
    ]
    suggestions = pipeline.suggest_many(sentences)
    print_suggestions(suggestions)
    logger.info("smoke_done=true")


if __name__ == "__main__":
    main()
