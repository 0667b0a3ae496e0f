from .datatypes import Sentence, Document, Edge, Graph, ScoredSentence
from .errors import SummarizerError, EmptyInputError, TokenizationFailure
from .config import SummarizerConfig
from .preprocessing import PreprocessConfig, split_sentences, clean_text, tokenize, normalize, token_frequencies, build_document, extract_sentences, preprocess_text
from .features import jaccard_similarity, compute_similarity_matrix
from .graphing import build_graph, isolated_nodes
from .scoring import textrank_scores, frequency_scores, score_by_textrank, score_by_frequency, get_scorer, SCORERS
from .summarize import generate_summary, selected_positions, summarize, summarize_by_graph_rank, summarize_by_frequency

__version__ = "0.1.0"
