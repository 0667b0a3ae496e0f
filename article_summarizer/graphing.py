from __future__ import annotations
from typing import List
from .datatypes import Document, Edge, Graph, SimilarityMatrix

def build_graph(doc: Document, simM: SimilarityMatrix, threshold: float) -> Graph:
    # Same edge rule as the ranker: strictly above threshold, no self loops
    nodes = doc.sentences
    edges: List[Edge] = []
    n = len(nodes)
    for i in range(n):
        for j in range(i+1, n):
            w = simM[i][j]
            if w > threshold:
                edges.append(Edge(i=i, j=j, weight=w))
    return Graph(nodes=nodes, edges=edges)

def isolated_nodes(graph: Graph) -> List[int]:
    """Sentences without a single edge; TextRank leaves them at 1 - damping."""
    linked = set()
    for e in graph.edges:
        linked.update((e.i, e.j))
    return [i for i in range(len(graph.nodes)) if i not in linked]
