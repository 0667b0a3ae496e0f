from __future__ import annotations
import logging
import sys
from enum import Enum
from pathlib import Path
import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from .config import (DEFAULT_DAMPING, DEFAULT_ITERATIONS, DEFAULT_MAX_SENTENCES,
                     DEFAULT_SIMILARITY_THRESHOLD, SummarizerConfig)
from .errors import SummarizerError
from .loaders import read_document
from .preprocessing import preprocess_text
from .scoring import get_scorer
from .summarize import selected_positions, summarize

app = typer.Typer(help="Extractive summaries of plain text, Markdown and RTF documents")
console = Console()
err_console = Console(stderr=True)

class Method(str, Enum):
    textrank = "textrank"
    frequency = "frequency"

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

def _load_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return read_document(Path(path))
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Cannot read[/red] {path}: {e}")
        raise typer.Exit(code=1)

def _build_config(sentences: int, threshold: float, damping: float, iterations: int) -> SummarizerConfig:
    try:
        return SummarizerConfig(max_sentences=sentences,
                                similarity_threshold=threshold,
                                damping=damping,
                                iterations=iterations)
    except ValueError as e:
        err_console.print(f"[red]Invalid option:[/red] {e}")
        raise typer.Exit(code=2)

@app.command("summarize")
def summarize_cmd(
    path: str = typer.Argument(..., help="Document to summarize (.txt, .md, .rtf) or '-' for stdin"),
    method: Method = typer.Option(Method.textrank, help="Scoring strategy"),
    sentences: int = typer.Option(DEFAULT_MAX_SENTENCES, help="Maximum number of sentences"),
    threshold: float = typer.Option(DEFAULT_SIMILARITY_THRESHOLD, help="Similarity threshold for graph edges"),
    damping: float = typer.Option(DEFAULT_DAMPING, help="TextRank damping factor"),
    iterations: int = typer.Option(DEFAULT_ITERATIONS, help="TextRank iterations"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline steps"),
):
    """Print an extractive summary of a document."""
    _setup_logging(verbose)
    cfg = _build_config(sentences, threshold, damping, iterations)
    text = _load_text(path)
    try:
        result = summarize(text, method=method.value, cfg=cfg)
    except SummarizerError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    typer.echo(result)

@app.command("inspect")
def inspect_cmd(
    path: str = typer.Argument(..., help="Document to score (.txt, .md, .rtf) or '-' for stdin"),
    method: Method = typer.Option(Method.textrank, help="Scoring strategy"),
    sentences: int = typer.Option(DEFAULT_MAX_SENTENCES, help="Maximum number of sentences"),
    threshold: float = typer.Option(DEFAULT_SIMILARITY_THRESHOLD, help="Similarity threshold for graph edges"),
    damping: float = typer.Option(DEFAULT_DAMPING, help="TextRank damping factor"),
    iterations: int = typer.Option(DEFAULT_ITERATIONS, help="TextRank iterations"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline steps"),
):
    """Show every sentence with its score and whether it makes the summary."""
    _setup_logging(verbose)
    cfg = _build_config(sentences, threshold, damping, iterations)
    text = _load_text(path)
    try:
        doc = preprocess_text(text)
        if len(doc.sentences) <= cfg.max_sentences:
            # short input is returned whole and never scored
            scores = None
            selected = set(range(len(doc.sentences)))
        else:
            scores = get_scorer(method.value)(doc, cfg)
            selected = set(selected_positions(doc, scores, max_sentences=cfg.max_sentences))
    except SummarizerError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Sentence scores ({method.value})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Tokens", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Selected", justify="center")
    table.add_column("Sentence")
    for s in doc.sentences:
        preview = s.text if len(s.text) <= 80 else s.text[:77] + "..."
        score = "-" if scores is None else f"{scores[s.idx]:.4f}"
        table.add_row(str(s.idx), str(len(s.tokens)), score,
                      "[green]yes[/green]" if s.idx in selected else "", preview)
    console.print(table)

def main():
    app()

if __name__ == "__main__":
    main()
