from __future__ import annotations
import logging
from typing import Callable, Dict, Optional
import numpy as np
from .config import DEFAULT_DAMPING, DEFAULT_ITERATIONS, DEFAULT_SIMILARITY_THRESHOLD, SummarizerConfig
from .datatypes import Document, FrequencyTable, ScoreVector, SimilarityMatrix
from .features import compute_similarity_matrix

logger = logging.getLogger(__name__)

Scorer = Callable[[Document, SummarizerConfig], ScoreVector]

def textrank_scores(simM: SimilarityMatrix,
                    iterations: int = DEFAULT_ITERATIONS,
                    damping: float = DEFAULT_DAMPING,
                    threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> ScoreVector:
    """
    Weighted TextRank over a sentence similarity matrix.

    Formula: TR(Si) = (1-d) + d * Σ_j sim(Sj,Si) * TR(Sj) / Out(Sj)

    where j ranges over the other sentences with sim(Sj,Si) > threshold and
    Out(Sj) sums sim(Sj,Sk) over every k with sim(Sj,Sk) > threshold, Sj itself
    included. A j with Out(Sj) == 0 contributes nothing.

    Args:
        simM: N x N similarity matrix
        iterations: Number of sweeps; always run in full, there is no convergence check
        damping: Damping factor
        threshold: Minimum similarity (exclusive) for an edge

    Returns:
        List of TextRank scores, one per sentence
    """
    M = np.asarray(simM, dtype=float)
    n = M.shape[0] if M.ndim == 2 else 0
    if n == 0:
        return []
    if M.shape != (n, n):
        raise ValueError(f"similarity matrix must be square, got shape {M.shape}")

    W = np.where(M > threshold, M, 0.0)
    outbound = W.sum(axis=1)
    # incoming contributions only come from other sentences
    np.fill_diagonal(W, 0.0)

    scores = np.full(n, 1.0 / n)
    for _ in range(iterations):
        share = np.divide(scores, outbound, out=np.zeros(n), where=outbound > 0)
        # every new score is computed from the previous snapshot
        scores = (1.0 - damping) + damping * (W.T @ share)

    logger.debug("TextRank finished %d iterations over %d sentences (d=%.2f, t=%.2f)",
                 iterations, n, damping, threshold)
    return scores.tolist()

def frequency_scores(doc: Document, frequencies: Optional[FrequencyTable] = None) -> ScoreVector:
    # mean global frequency of a sentence's tokens; 0.0 when it has none
    freqs = doc.word_frequencies if frequencies is None else frequencies
    scores: ScoreVector = []
    for s in doc.sentences:
        total = float(sum(freqs.get(t, 0) for t in s.tokens))
        scores.append(total / len(s.tokens) if s.tokens else 0.0)
    return scores

def score_by_textrank(doc: Document, cfg: SummarizerConfig) -> ScoreVector:
    simM = compute_similarity_matrix(doc.sentences)
    return textrank_scores(simM,
                           iterations=cfg.iterations,
                           damping=cfg.damping,
                           threshold=cfg.similarity_threshold)

def score_by_frequency(doc: Document, cfg: SummarizerConfig) -> ScoreVector:
    return frequency_scores(doc)

SCORERS: Dict[str, Scorer] = {
    "textrank": score_by_textrank,
    "frequency": score_by_frequency,
}

def get_scorer(method: str) -> Scorer:
    try:
        return SCORERS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method!r} (expected one of {sorted(SCORERS)})") from None
