"""Print the input and output tensor layout of a masked LM."""

from __future__ import annotations

import argparse

from diedat.config import load_config
from diedat.model.invoker import TransformersMaskedLM
from diedat.utils.runtime import resolve_device, setup_logging


def main() -> None:
    logger = setup_logging("diedat.describe_model")
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default=None)
    parser.add_argument("--model", default=None)
    args = parser.parse_args()

    cfg = load_config(args.config, model_path=args.model)
    if not cfg.model_path:
        parser.error("--model or a config with model_path is required")
    invoker = TransformersMaskedLM.from_pretrained(cfg.model_path, device=resolve_device(cfg.device))
    for name, detail in invoker.describe(cfg.max_seq_len).items():
        print(f"{name} index={detail['index']} shape={detail['shape']} dtype={detail['dtype']}")
    logger.info("model_vocab_size=%s", invoker.vocab_size)


if __name__ == "__main__":
    main()
