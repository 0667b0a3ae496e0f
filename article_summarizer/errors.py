from __future__ import annotations


class SummarizerError(Exception):
    """Base class for every error raised by the summarization engine."""


class EmptyInputError(SummarizerError, ValueError):
    """Input text is empty or whitespace only; there is nothing to summarize."""

    def __init__(self, message: str = "cannot summarize empty or whitespace-only text"):
        super().__init__(message)


class TokenizationFailure(SummarizerError):
    """Raised by a tokenizer that cannot process its input.

    The engine never retries or wraps it: tokenization is deterministic, so the
    error reaches the caller as raised.
    """
