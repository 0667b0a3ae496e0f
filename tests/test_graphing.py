from article_summarizer.datatypes import Document, Sentence
from article_summarizer.graphing import build_graph, isolated_nodes


def _doc(n):
    return Document(raw_text="", sentences=[Sentence(i, f"s{i}") for i in range(n)])


def test_build_graph_uses_strict_threshold():
    simM = [
        [1.0, 0.3, 0.5],
        [0.3, 1.0, 0.0],
        [0.5, 0.0, 1.0],
    ]
    graph = build_graph(_doc(3), simM, threshold=0.3)

    assert [(e.i, e.j, e.weight) for e in graph.edges] == [(0, 2, 0.5)]
    assert len(graph.nodes) == 3


def test_isolated_nodes():
    simM = [
        [1.0, 0.8, 0.0],
        [0.8, 1.0, 0.0],
        [0.0, 0.0, 1.0],
    ]
    assert isolated_nodes(build_graph(_doc(3), simM, threshold=0.3)) == [2]
