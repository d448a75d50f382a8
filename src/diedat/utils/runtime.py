"""Logging setup and inference device selection."""

from __future__ import annotations

import logging

import torch

AUTO_DEVICE = "auto"


def setup_logging(name: str = "diedat", level: int = logging.INFO) -> logging.Logger:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    return logging.getLogger(name)


def resolve_device(device: str | torch.device | None = AUTO_DEVICE) -> torch.device:
    """Map a configured device name to a ``torch.device``.

    ``"auto"`` (or ``None``) picks ``cuda`` when available, else ``cpu``.
    Explicit names are passed through unchanged.
    """
    logger = logging.getLogger("diedat.runtime")
    if device is None or device == AUTO_DEVICE:
        resolved = torch.device("cuda" if torch.cuda.is_available() else "cpu")
        logger.info("device=%s source=auto", resolved)
        return resolved
    resolved = torch.device(device)
    logger.info("device=%s source=config", resolved)
    return resolved
