from __future__ import annotations
from typing import AbstractSet, List, Sequence
from .datatypes import Sentence, SimilarityMatrix

def jaccard_similarity(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """|a & b| / |a | b|, and 0.0 when both sets are empty."""
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union

def compute_similarity_matrix(sentences: Sequence[Sentence]) -> SimilarityMatrix:
    """
    N x N Jaccard similarity between sentence token sets.
    The diagonal is pinned to 1.0 whatever the tokens are (a sentence with no
    tokens is still fully similar to itself). Only the upper triangle is
    computed; the lower one is mirrored.
    """
    n = len(sentences)
    token_sets = [s.token_set for s in sentences]
    M: List[List[float]] = [[0.0]*n for _ in range(n)]
    for i in range(n):
        M[i][i] = 1.0
        for j in range(i+1, n):
            M[i][j] = M[j][i] = jaccard_similarity(token_sets[i], token_sets[j])
    return M
