import numpy as np
import torch
from transformers import RobertaConfig, RobertaForMaskedLM

from diedat.config import PipelineConfig
from diedat.data.sequence import build_input
from diedat.data.vocab import Vocabulary
from diedat.model.invoker import TransformersMaskedLM, as_flat_logits, invoke
from diedat.pipeline import DieDatPipeline
from diedat.utils.seed import set_seed


def _tiny_invoker(vocab: Vocabulary, max_seq_len: int) -> TransformersMaskedLM:
    set_seed(0)
    config = RobertaConfig(
        vocab_size=len(vocab),
        hidden_size=16,
        num_hidden_layers=1,
        num_attention_heads=2,
        intermediate_size=32,
        max_position_embeddings=max_seq_len + 2,
        pad_token_id=1,
        bos_token_id=0,
        eos_token_id=2,
    )
    return TransformersMaskedLM(RobertaForMaskedLM(config))


def test_as_flat_logits() -> None:
    assert as_flat_logits([[1, 2], [3, 4]]).tolist() == [1.0, 2.0, 3.0, 4.0]
    flat = as_flat_logits(np.zeros((2, 3), dtype=np.float64))
    assert flat.dtype == torch.float32
    assert flat.numel() == 6


def test_transformers_invoker_output_size(vocab: Vocabulary) -> None:
    invoker = _tiny_invoker(vocab, 32)
    model_input = build_input([8, 9, 4], 32, vocab)
    logits = invoke(invoker, model_input, 32 * len(vocab))
    assert logits.shape == (32 * len(vocab),)
    assert torch.isfinite(logits).all()


def test_pipeline_with_transformers_model(vocab: Vocabulary) -> None:
    invoker = _tiny_invoker(vocab, 32)
    pipeline = DieDatPipeline(vocab, invoker, PipelineConfig(max_seq_len=32, top_k=4))
    first = pipeline.suggest("Ik weet die ik het kan.")
    second = pipeline.suggest("Ik weet die ik het kan.")
    assert first.mask_index == 2
    assert len(first.candidates) == 4
    assert all("Ġ" not in c for c in first.candidates)
    assert first.candidates == second.candidates


def test_describe(vocab: Vocabulary) -> None:
    details = _tiny_invoker(vocab, 32).describe(32)
    assert details["input_ids"]["shape"] == [1, 32]
    assert details["logits"]["shape"] == [1, 32, len(vocab)]
