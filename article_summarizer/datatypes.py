from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, NamedTuple, Tuple

@dataclass(frozen=True)
class Sentence:
    idx: int
    text: str
    tokens: Tuple[str, ...] = ()

    @property
    def token_set(self) -> FrozenSet[str]:
        return frozenset(self.tokens)

@dataclass(frozen=True)
class Document:
    raw_text: str
    sentences: List[Sentence]
    word_frequencies: Dict[str, int] = field(default_factory=dict)

@dataclass
class Edge:
    i: int
    j: int
    weight: float  # similarity

@dataclass
class Graph:
    nodes: List[Sentence]
    edges: List[Edge]  # undirected weighted edges

class ScoredSentence(NamedTuple):
    text: str
    score: float
    position: int

SimilarityMatrix = List[List[float]]  # N x N, diagonal fixed at 1.0
ScoreVector = List[float]             # one score per sentence position
FrequencyTable = Dict[str, int]       # token -> count over the whole document
