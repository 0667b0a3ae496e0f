from __future__ import annotations
from dataclasses import dataclass

DEFAULT_MAX_SENTENCES = 3
DEFAULT_SIMILARITY_THRESHOLD = 0.3
DEFAULT_DAMPING = 0.85
DEFAULT_ITERATIONS = 50

@dataclass(frozen=True)
class SummarizerConfig:
    """
    Engine-wide knobs. The defaults reproduce the reference behaviour:
      - max_sentences: upper bound on summary length (M)
      - similarity_threshold: an edge exists only when similarity is strictly greater
      - damping: share of the score that flows along graph edges
      - iterations: TextRank always runs exactly this many sweeps
    """
    max_sentences: int = DEFAULT_MAX_SENTENCES
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    damping: float = DEFAULT_DAMPING
    iterations: int = DEFAULT_ITERATIONS

    def __post_init__(self) -> None:
        if self.max_sentences < 1:
            raise ValueError(f"max_sentences must be >= 1, got {self.max_sentences}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be >= 1, got {self.iterations}")
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be within [0, 1], got {self.damping}")
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(f"similarity_threshold must be within [0, 1], got {self.similarity_threshold}")
