from __future__ import annotations
import io
from pathlib import Path
from typing import List
import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import pandas as pd
import streamlit as st

from article_summarizer.config import SummarizerConfig
from article_summarizer.datatypes import Document, Graph
from article_summarizer.errors import SummarizerError
from article_summarizer.features import compute_similarity_matrix
from article_summarizer.graphing import build_graph, isolated_nodes
from article_summarizer.loaders import decode_document
from article_summarizer.preprocessing import preprocess_text
from article_summarizer.scoring import frequency_scores, textrank_scores
from article_summarizer.summarize import generate_summary, selected_positions, summarize

METHODS = {"TextRank (graph)": "textrank", "Word frequency": "frequency"}

def _preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text

def load_text_from_file(uploaded_file) -> str:
    """Decode an uploaded .txt/.md/.rtf file into plain text."""
    content = uploaded_file.read().decode("utf-8")
    return decode_document(content, Path(uploaded_file.name).suffix)

def draw_graph_visualization(graph: Graph, scores: List[float], selected: List[int]):
    """Sentence graph: node size follows the score, selected sentences are highlighted."""
    G = nx.Graph()
    for s in graph.nodes:
        G.add_node(s.idx)
    for edge in graph.edges:
        G.add_edge(edge.i, edge.j, weight=edge.weight)

    fig, ax = plt.subplots(figsize=(10, 8))
    ax.set_title("Sentence Graph (edges above threshold)", fontsize=14, fontweight='bold')

    pos = nx.spring_layout(G, k=2, iterations=50, seed=42)
    top = max(scores) if scores and max(scores) > 0 else 1.0
    sizes = [400 + 1200 * (scores[i] / top) for i in G.nodes()]
    colors = ['gold' if i in selected else 'lightblue' for i in G.nodes()]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_size=sizes, node_color=colors, alpha=0.8)

    if G.number_of_edges():
        weights = [d['weight'] for _, _, d in G.edges(data=True)]
        nx.draw_networkx_edges(G, pos, ax=ax, width=[4 * w for w in weights], alpha=0.5, edge_color='gray')
        if G.number_of_nodes() <= 10:
            edge_labels = {(u, v): f"{d['weight']:.2f}" for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    nx.draw_networkx_labels(G, pos, {i: f"S{i+1}" for i in G.nodes()}, ax=ax, font_size=10, font_weight='bold')
    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    method_label = st.sidebar.radio("Scoring strategy", list(METHODS))
    max_sentences = st.sidebar.slider("Summary sentences", min_value=1, max_value=10, value=3)
    threshold = st.sidebar.slider(
        "Similarity threshold", min_value=0.0, max_value=1.0, value=0.3, step=0.05,
        help="An edge exists when Jaccard similarity is strictly above this value"
    )
    damping = st.sidebar.slider("Damping factor", min_value=0.0, max_value=1.0, value=0.85, step=0.05)
    iterations = st.sidebar.number_input("Iterations", min_value=1, max_value=500, value=50)

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    cfg = SummarizerConfig(max_sentences=max_sentences,
                           similarity_threshold=threshold,
                           damping=damping,
                           iterations=int(iterations))
    return METHODS[method_label], cfg, debug_mode

def show_similarity_matrix(simM: List[List[float]], threshold: float):
    n = len(simM)
    if n <= 50:
        labels = [f"S{i+1}" for i in range(n)]
        st.dataframe(pd.DataFrame(simM, columns=labels, index=labels), use_container_width=True)
        return

    st.info(f"Matrix too large to display ({n}×{n} = {n**2:,} cells)")
    upper = np.array(simM)[np.triu_indices(n, k=1)]
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Max Similarity", f"{upper.max():.3f}")
    col2.metric("Mean Similarity", f"{upper.mean():.3f}")
    col3.metric("Std Similarity", f"{upper.std():.3f}")
    col4.metric("Pairs Above Threshold", int((upper > threshold).sum()))

def debug_pipeline(text: str, method: str, cfg: SummarizerConfig) -> str:
    """Run the pipeline step by step, showing every intermediate value."""

    st.header("Step 1: Pre-processing")
    doc: Document = preprocess_text(text)
    st.success(f"Processed {len(doc.sentences)} sentences")
    col1, col2, col3 = st.columns(3)
    col1.metric("Total Sentences", len(doc.sentences))
    col2.metric("Total Tokens", sum(len(s.tokens) for s in doc.sentences))
    col3.metric("Unique Terms", len(doc.word_frequencies))
    st.dataframe(pd.DataFrame([{
        "Sentence #": s.idx + 1,
        "Original Text": _preview(s.text),
        "Tokens": len(s.tokens),
        "Processed Tokens": ", ".join(s.tokens[:8]) + ("..." if len(s.tokens) > 8 else ""),
    } for s in doc.sentences]), use_container_width=True)

    if len(doc.sentences) <= cfg.max_sentences:
        st.info(f"{len(doc.sentences)} sentences ≤ {cfg.max_sentences}: the whole text is the summary")
        return generate_summary(doc, [], max_sentences=cfg.max_sentences)

    if method == "textrank":
        st.header("Step 2: Similarity Matrix (Jaccard)")
        simM = compute_similarity_matrix(doc.sentences)
        show_similarity_matrix(simM, cfg.similarity_threshold)

        st.header("Step 3: Sentence Graph")
        graph = build_graph(doc, simM, threshold=cfg.similarity_threshold)
        lonely = isolated_nodes(graph)
        col1, col2 = st.columns(2)
        col1.metric("Edges", len(graph.edges))
        col2.metric("Isolated Sentences", len(lonely))

        st.header("Step 4: TextRank")
        scores = textrank_scores(simM, iterations=cfg.iterations, damping=cfg.damping,
                                 threshold=cfg.similarity_threshold)
    else:
        st.header("Step 2: Word Frequencies")
        freq_df = pd.DataFrame(sorted(doc.word_frequencies.items(), key=lambda x: x[1], reverse=True),
                               columns=["Term", "Count"])
        st.dataframe(freq_df, use_container_width=True, height=250)

        st.header("Step 3: Frequency Scoring")
        scores = frequency_scores(doc)
        graph = None

    selected = selected_positions(doc, scores, max_sentences=cfg.max_sentences)
    st.dataframe(pd.DataFrame([{
        "Sentence #": s.idx + 1,
        "Score": f"{scores[s.idx]:.4f}",
        "Selected": "✅" if s.idx in selected else "❌",
        "Text": _preview(s.text),
    } for s in doc.sentences]), use_container_width=True)

    if graph is not None and len(graph.nodes) <= 50:
        st.subheader("Graph Visualization")
        try:
            st.image(draw_graph_visualization(graph, scores, selected),
                     caption="Node size follows the TextRank score; selected sentences are gold")
        except Exception as e:
            st.error(f"Could not generate graph visualization: {e}")

    return generate_summary(doc, scores, max_sentences=cfg.max_sentences)

def main():
    st.title("Article Summarizer")
    st.write("Extract the most important sentences of a document with TextRank or word-frequency scoring")

    method, cfg, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Upload a text file to summarize (supports .txt, .rtf, .md formats)"
    )
    if uploaded_file is not None:
        text = load_text_from_file(uploaded_file)
    else:
        text = st.text_area("...or paste the article text", height=200)

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                result = debug_pipeline(text, method, cfg)
            else:
                with st.spinner("Generating summary..."):
                    result = summarize(text, method=method, cfg=cfg)
        except SummarizerError as e:
            st.error(str(e))
            return

        st.markdown("---")
        st.header("Final Summary")
        st.text_area("Summary", result, height=150, disabled=True)

        col1, col2, col3 = st.columns(3)
        col1.metric("Original Length", len(text.split()))
        col2.metric("Summary Length", len(result.split()))
        col3.metric("Compression", f"{len(result.split()) / max(1, len(text.split())):.2%}")

if __name__ == "__main__":
    main()
