from __future__ import annotations
import logging
from typing import List, Optional, Sequence
from .config import SummarizerConfig
from .datatypes import Document, ScoredSentence
from .preprocessing import Splitter, Tokenizer, build_document, extract_sentences
from .scoring import Scorer, get_scorer, score_by_frequency, score_by_textrank

logger = logging.getLogger(__name__)

def selected_positions(doc: Document, scores: Sequence[float], max_sentences: int = 3) -> List[int]:
    """Positions of the sentences kept in the summary, in ascending order."""
    n = len(doc.sentences)
    if n <= max_sentences:
        return list(range(n))
    if len(scores) != n:
        raise ValueError(f"expected {n} scores, got {len(scores)}")

    scored = [ScoredSentence(s.text, scores[i], i) for i, s in enumerate(doc.sentences)]
    # sorted() is stable, ties keep document order
    top = sorted(scored, key=lambda x: x.score, reverse=True)[:max_sentences]
    positions = sorted(x.position for x in top)  # restore original order
    logger.debug("Selected positions %s out of %d sentences", positions, n)
    return positions

def generate_summary(doc: Document, scores: Sequence[float], max_sentences: int = 3) -> str:
    positions = selected_positions(doc, scores, max_sentences)
    return " ".join(doc.sentences[i].text for i in positions)

def _run(text: Optional[str],
         scorer: Scorer,
         cfg: Optional[SummarizerConfig],
         splitter: Optional[Splitter],
         tokenizer: Optional[Tokenizer]) -> str:
    cfg = cfg or SummarizerConfig()
    sentences = extract_sentences(text, splitter)
    logger.debug("Extracted %d sentences", len(sentences))

    if len(sentences) <= cfg.max_sentences:
        logger.debug("Short input (%d <= %d), returning it whole", len(sentences), cfg.max_sentences)
        return " ".join(sentences)

    doc = build_document(text, sentences, tokenizer)
    scores = scorer(doc, cfg)
    return generate_summary(doc, scores, max_sentences=cfg.max_sentences)

def summarize_by_graph_rank(text: str,
                            cfg: Optional[SummarizerConfig] = None,
                            splitter: Optional[Splitter] = None,
                            tokenizer: Optional[Tokenizer] = None) -> str:
    """Summarize `text` with TextRank over the Jaccard sentence graph."""
    return _run(text, score_by_textrank, cfg, splitter, tokenizer)

def summarize_by_frequency(text: str,
                           cfg: Optional[SummarizerConfig] = None,
                           splitter: Optional[Splitter] = None,
                           tokenizer: Optional[Tokenizer] = None) -> str:
    """Summarize `text` by mean document-wide word frequency per sentence."""
    return _run(text, score_by_frequency, cfg, splitter, tokenizer)

def summarize(text: str,
              method: str = "textrank",
              cfg: Optional[SummarizerConfig] = None,
              splitter: Optional[Splitter] = None,
              tokenizer: Optional[Tokenizer] = None) -> str:
    # Pipeline glue
    return _run(text, get_scorer(method), cfg, splitter, tokenizer)
