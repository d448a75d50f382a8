"""Run the pipeline over a JSONL file of sentences."""

from __future__ import annotations

import argparse

from diedat.config import load_config
from diedat.eval.report import save_suggestions
from diedat.pipeline import DieDatPipeline
from diedat.utils.io import load_jsonl
from diedat.utils.runtime import setup_logging


def main() -> None:
    logger = setup_logging("diedat.suggest_jsonl")
    parser = argparse.ArgumentParser()
    parser.add_argument("--data", required=True)
    parser.add_argument("--out", required=True)
    parser.add_argument("--config", default=None)
    parser.add_argument("--field", default="sentence")
    parser.add_argument("--top-k", type=int, default=None)
    parser.add_argument("--cpu", action="store_true")
    args = parser.parse_args()

    cfg = load_config(args.config, top_k=args.top_k, device="cpu" if args.cpu else None)
    logger.info("config=%s", cfg.to_dict())
    pipeline = DieDatPipeline.from_config(cfg)

    rows = load_jsonl(args.data)
    sentences = [str(row[args.field]) for row in rows if args.field in row]
    logger.info("rows=%s sentences=%s", len(rows), len(sentences))
    suggestions = pipeline.suggest_many(sentences)
    save_suggestions(args.out, suggestions)
    masked = sum(1 for s in suggestions if s.masked)
    logger.info("written=%s masked=%s out=%s", len(suggestions), masked, args.out)


if __name__ == "__main__":
    main()
