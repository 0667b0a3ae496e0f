import pytest

from article_summarizer.config import SummarizerConfig
from article_summarizer.datatypes import Document, Sentence
from article_summarizer.preprocessing import build_document, split_sentences
from article_summarizer.scoring import (
    SCORERS,
    frequency_scores,
    get_scorer,
    score_by_frequency,
    score_by_textrank,
    textrank_scores,
)


def _identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def test_textrank_empty_matrix():
    assert textrank_scores([]) == []


@pytest.mark.parametrize("iterations", [1, 2, 50])
def test_textrank_isolated_sentences_score_one_minus_damping(iterations):
    scores = textrank_scores(_identity(4), iterations=iterations)
    assert scores == pytest.approx([1 - 0.85] * 4)


def test_textrank_connected_pair_reaches_fixed_point():
    M = _identity(5)
    M[0][1] = M[1][0] = 1.0
    scores = textrank_scores(M)

    # Out(S0) = 2 (self + S1), so TR = 0.15 + 0.85 * TR / 2
    expected = 0.15 / (1 - 0.85 / 2)
    assert scores[0] == pytest.approx(expected)
    assert scores[1] == pytest.approx(expected)
    assert scores[2:] == pytest.approx([0.15, 0.15, 0.15])


def test_textrank_single_sweep_reads_previous_snapshot():
    M = [
        [1.0, 0.5, 0.0],
        [0.5, 1.0, 0.4],
        [0.0, 0.4, 1.0],
    ]
    s = 1 / 3
    out0, out1, out2 = 1.5, 1.9, 1.4
    expected = [
        0.15 + 0.85 * (0.5 * s / out1),
        0.15 + 0.85 * (0.5 * s / out0 + 0.4 * s / out2),
        0.15 + 0.85 * (0.4 * s / out1),
    ]
    assert textrank_scores(M, iterations=1) == pytest.approx(expected)


def test_textrank_threshold_is_exclusive():
    M = [
        [1.0, 0.3],
        [0.3, 1.0],
    ]
    assert textrank_scores(M, threshold=0.3) == pytest.approx([0.15, 0.15])
    assert textrank_scores(M, threshold=0.29)[0] > 0.15


def test_textrank_scores_are_non_negative():
    M = [
        [1.0, 0.9, 0.35, 0.0],
        [0.9, 1.0, 0.6, 0.31],
        [0.35, 0.6, 1.0, 0.2],
        [0.0, 0.31, 0.2, 1.0],
    ]
    scores = textrank_scores(M)
    assert len(scores) == 4
    assert all(s >= 0 for s in scores)


def test_textrank_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        textrank_scores([[1.0, 0.5]])


def test_frequency_scores_mean_of_global_counts():
    doc = Document(
        raw_text="",
        sentences=[
            Sentence(0, "a", ("rocket", "fuel")),
            Sentence(1, "b", ()),
            Sentence(2, "c", ("moon",)),
        ],
        word_frequencies={"rocket": 4, "fuel": 2},
    )
    assert frequency_scores(doc) == [3.0, 0.0, 0.0]


def test_frequency_scores_favor_short_sentence_with_frequent_token():
    text = (
        "Rocket. "
        "Rocket engineers designed elaborate turbines yesterday. "
        "Rocket launches continue. "
        "Rocket science matters. "
        "Rocket parts arrived."
    )
    doc = build_document(text, split_sentences(text))
    scores = frequency_scores(doc)

    # rocket appears 5 times; the long sentence dilutes it with 5 rare tokens
    assert scores[0] == pytest.approx(5.0)
    assert scores[1] == pytest.approx(10 / 6)
    assert scores[0] >= scores[1]


def test_frequency_scores_accept_explicit_table():
    doc = Document(raw_text="", sentences=[Sentence(0, "a", ("x1", "x2"))])
    assert frequency_scores(doc, {"x1": 1, "x2": 3}) == [2.0]


def test_scorers_return_one_score_per_sentence():
    text = "Stars burn hydrogen. Stars burn helium. Planets orbit stars. Comets carry ice. Ice melts."
    doc = build_document(text, split_sentences(text))
    cfg = SummarizerConfig()
    assert len(score_by_textrank(doc, cfg)) == 5
    assert len(score_by_frequency(doc, cfg)) == 5


def test_get_scorer():
    assert set(SCORERS) == {"textrank", "frequency"}
    assert get_scorer("textrank") is score_by_textrank
    assert get_scorer("frequency") is score_by_frequency
    with pytest.raises(ValueError):
        get_scorer("lexrank")
