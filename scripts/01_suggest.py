"""Suggest die/dat for sentences given on the command line."""

from __future__ import annotations

import argparse
import sys

from diedat.config import load_config
from diedat.errors import PipelineError
from diedat.eval.report import print_suggestions
from diedat.pipeline import DieDatPipeline
from diedat.utils.runtime import setup_logging


def main() -> int:
    logger = setup_logging("diedat.suggest")
    parser = argparse.ArgumentParser()
    parser.add_argument("sentences", nargs="+")
    parser.add_argument("--config", default=None)
    parser.add_argument("--vocab", default=None)
    parser.add_argument("--model", default=None)
    parser.add_argument("--top-k", type=int, default=None)
    parser.add_argument("--correct", action="store_true", help="print corrected text only")
    parser.add_argument("--cpu", action="store_true")
    args = parser.parse_args()

    cfg = load_config(
        args.config,
        vocab_path=args.vocab,
        model_path=args.model,
        top_k=args.top_k,
        device="cpu" if args.cpu else None,
    )
    logger.info("config=%s", cfg.to_dict())
    pipeline = DieDatPipeline.from_config(cfg)

    try:
        if args.correct:
            for sentence in args.sentences:
                print(pipeline.correct(sentence))
        else:
            print_suggestions(pipeline.suggest_many(args.sentences))
    except PipelineError as exc:
        logger.error("suggest_failed=true error=%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
