from __future__ import annotations
import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence
from .datatypes import Document, FrequencyTable, Sentence
from .errors import EmptyInputError, TokenizationFailure

Splitter = Callable[[str], List[str]]    # raw text -> ordered sentences
Tokenizer = Callable[[str], List[str]]   # raw text -> normalized tokens

_SENT_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")
_PUNCT_RE = re.compile(r"[^a-z0-9\s]")
_PUNCT_CASED_RE = re.compile(r"[^A-Za-z0-9\s]")
_SPACES_RE = re.compile(r"\s+")

STOPWORDS: FrozenSet[str] = frozenset({
    'a','an','the','and','but','or','for','nor','on','at','to','by','about',
    'in','of','with','this','that','these','those','is','are','was','were','be',
    'been','being','have','has','had','do','does','did','can','could','will',
    'would','shall','should','may','might','must','i','you','he','she','it','we',
    'they','me','him','her','us','them','who','whom','which','what','whose'
})

@dataclass(frozen=True)
class PreprocessConfig:
    lowercase: bool = True
    remove_stopwords: bool = True
    min_token_length: int = 2
    stopwords: FrozenSet[str] = STOPWORDS

def split_sentences(text: str) -> List[str]:
    # Split on . ! ? followed by whitespace, keeping order
    parts = _SENT_SPLIT_RE.split(text.strip())
    return [p.strip() for p in parts if p.strip()]

def clean_text(text: str, cfg: Optional[PreprocessConfig] = None) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace."""
    cfg = cfg or PreprocessConfig()
    if not text:
        return ""
    if cfg.lowercase:
        text = _PUNCT_RE.sub(" ", text.lower())
    else:
        text = _PUNCT_CASED_RE.sub(" ", text)
    return _SPACES_RE.sub(" ", text).strip()

def tokenize(cleaned: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    cfg = cfg or PreprocessConfig()
    toks = cleaned.split()
    if cfg.remove_stopwords:
        toks = [t for t in toks if t.lower() not in cfg.stopwords]
    return [t for t in toks if len(t) >= cfg.min_token_length]

def normalize(text: str, cfg: Optional[PreprocessConfig] = None) -> List[str]:
    """Default tokenizer: clean_text followed by tokenize.

    Both scoring strategies go through this one rule, so the similarity graph and
    the frequency table always agree on what a token is.
    """
    if not isinstance(text, str):
        raise TokenizationFailure(f"expected str, got {type(text).__name__}")
    return tokenize(clean_text(text, cfg), cfg)

def token_frequencies(tokens: Sequence[str]) -> FrequencyTable:
    return dict(Counter(tokens))

def build_document(text: str,
                   sentences: Sequence[str],
                   tokenizer: Optional[Tokenizer] = None) -> Document:
    """
    Tokenize each sentence once and the whole text once.
    Token tuples live on the Sentence objects for the rest of the call, so
    neither the similarity builder nor the frequency scorer re-tokenizes.
    """
    tokenizer = tokenizer or normalize
    sents = [Sentence(idx=i, text=s, tokens=tuple(tokenizer(s)))
             for i, s in enumerate(sentences)]
    freqs = token_frequencies(tokenizer(text))
    return Document(raw_text=text, sentences=sents, word_frequencies=freqs)

def extract_sentences(text: Optional[str], splitter: Optional[Splitter] = None) -> List[str]:
    """Split `text`, raising EmptyInputError for blank input or when no sentence comes out."""
    if text is None or not text.strip():
        raise EmptyInputError()
    sentences = (splitter or split_sentences)(text)
    if not sentences:
        raise EmptyInputError("no sentences found in input text")
    return list(sentences)

def preprocess_text(text: str,
                    splitter: Optional[Splitter] = None,
                    tokenizer: Optional[Tokenizer] = None) -> Document:
    return build_document(text, extract_sentences(text, splitter), tokenizer)
