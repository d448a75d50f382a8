"""Pipeline error types."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for failures that end a single suggestion request."""


class InferenceFailure(PipelineError):
    """The model invoker raised or returned a malformed logit buffer."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class MaskPositionOutOfRange(PipelineError):
    """The masked word lies beyond the truncated model input."""

    def __init__(self, mask_index: int, max_seq_len: int) -> None:
        super().__init__(
            f"mask_index={mask_index} maps to row {mask_index + 1}, "
            f"outside the {max_seq_len} positions of the model input"
        )
        self.mask_index = mask_index
        self.max_seq_len = max_seq_len
