import pytest

from article_summarizer.config import SummarizerConfig
from article_summarizer.errors import EmptyInputError, TokenizationFailure
from article_summarizer.preprocessing import build_document, split_sentences
from article_summarizer.summarize import (
    generate_summary,
    selected_positions,
    summarize,
    summarize_by_frequency,
    summarize_by_graph_rank,
)

QUANTUM = "Quantum computers factor numbers."
BANANAS = "Bananas ripen slowly."
VOLCANOES = "Volcanoes erupt violently."
GLACIERS = "Glaciers carve valleys."

PAIR_FIRST = " ".join([QUANTUM, QUANTUM, BANANAS, VOLCANOES, GLACIERS])
PAIR_LAST = " ".join([BANANAS, VOLCANOES, GLACIERS, QUANTUM, QUANTUM])

BOTH = [summarize_by_graph_rank, summarize_by_frequency]


@pytest.mark.parametrize("fn", BOTH)
def test_connected_pair_is_selected_in_document_order(fn):
    assert fn(PAIR_FIRST) == " ".join([QUANTUM, QUANTUM, BANANAS])


@pytest.mark.parametrize("fn", BOTH)
def test_summary_follows_document_order_not_score_order(fn):
    # the pair scores highest but sits at the end of the text
    assert fn(PAIR_LAST) == " ".join([BANANAS, QUANTUM, QUANTUM])


@pytest.mark.parametrize("fn", BOTH)
def test_two_sentences_are_returned_verbatim(fn):
    assert fn("The cat sat. The dog ran.") == "The cat sat. The dog ran."


@pytest.mark.parametrize("fn", BOTH)
def test_up_to_max_sentences_returned_whole(fn):
    text = "First point here. Second point there! Third point everywhere?"
    assert fn(text) == text


@pytest.mark.parametrize("fn", BOTH)
def test_short_input_skips_tokenizing(fn):
    def exploding_tokenizer(text):
        raise AssertionError("tokenizer must not run for short input")

    assert fn("One. Two.", tokenizer=exploding_tokenizer) == "One. Two."


@pytest.mark.parametrize("fn", BOTH)
@pytest.mark.parametrize("text", ["", "   ", "\n\t  \n", None])
def test_blank_input_is_rejected(fn, text):
    with pytest.raises(EmptyInputError):
        fn(text)


def test_empty_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        summarize_by_graph_rank("")


def test_splitter_without_sentences_is_rejected():
    with pytest.raises(EmptyInputError):
        summarize_by_frequency("some text", splitter=lambda t: [])


@pytest.mark.parametrize("fn", BOTH)
def test_tokenization_failure_propagates(fn):
    def failing_tokenizer(text):
        raise TokenizationFailure("tokenizer offline")

    with pytest.raises(TokenizationFailure, match="tokenizer offline"):
        fn(PAIR_FIRST, tokenizer=failing_tokenizer)


@pytest.mark.parametrize("fn", BOTH)
def test_summarizing_twice_gives_identical_output(fn):
    text = (
        "Solar panels convert sunlight into electricity. "
        "Wind turbines convert wind into electricity. "
        "Batteries store electricity for later use. "
        "Grid operators balance supply and demand. "
        "Cheap storage makes solar panels and wind turbines more useful."
    )
    assert fn(text) == fn(text)


@pytest.mark.parametrize("fn", BOTH)
def test_max_sentences_is_configurable(fn):
    cfg = SummarizerConfig(max_sentences=1)
    assert fn(PAIR_FIRST, cfg) == QUANTUM


def test_summarize_dispatches_on_method():
    assert summarize(PAIR_LAST, method="frequency") == summarize_by_frequency(PAIR_LAST)
    assert summarize(PAIR_LAST) == summarize_by_graph_rank(PAIR_LAST)
    with pytest.raises(ValueError):
        summarize(PAIR_LAST, method="abstractive")


def _doc(text):
    return build_document(text, split_sentences(text))


def test_selected_positions_ties_keep_document_order():
    doc = _doc(PAIR_FIRST)
    assert selected_positions(doc, [1.0] * 5, max_sentences=3) == [0, 1, 2]


def test_selected_positions_sorted_by_position():
    doc = _doc(PAIR_FIRST)
    assert selected_positions(doc, [0.1, 0.9, 0.2, 0.8, 0.7], max_sentences=3) == [1, 3, 4]


def test_selected_positions_never_exceed_limit():
    doc = _doc(PAIR_FIRST)
    for m in range(1, 8):
        positions = selected_positions(doc, [0.5, 0.4, 0.3, 0.2, 0.1], max_sentences=m)
        assert len(positions) == min(m, 5)
        assert positions == sorted(positions)


def test_generate_summary_joins_with_single_space():
    doc = _doc(PAIR_FIRST)
    assert generate_summary(doc, [0.0, 0.0, 3.0, 2.0, 1.0]) == " ".join([BANANAS, VOLCANOES, GLACIERS])


def test_generate_summary_rejects_mismatched_scores():
    with pytest.raises(ValueError):
        generate_summary(_doc(PAIR_FIRST), [1.0, 2.0])
