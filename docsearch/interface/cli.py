# docsearch/interface/cli.py

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from docsearch.config import settings
from docsearch.domain.models import Document, Span


console = Console()


def display_welcome_banner() -> None:
    console.print(Panel.fit(
        "[bold cyan]🔍 Document Search Engine[/bold cyan]\n"
        "[dim]Enter your query to search across your document corpus.[/dim]",
        box=box.DOUBLE,
        border_style="cyan",
    ))


def prompt_for_query() -> str:
    return Prompt.ask("\n[bold yellow]❓ Your query[/bold yellow]", default="", show_default=False)


def display_results(documents: Sequence[Document]) -> None:
    table = Table(
        title="Top Results",
        title_style="bold #3730a3",
        box=box.ROUNDED,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Document")
    table.add_column("Score", justify="right")

    for rank, document in enumerate(documents, start=1):
        score_color = _score_to_color(document.score)
        table.add_row(
            str(rank),
            f"[bold]Doc {escape(str(document.doc_id))}[/bold] ({escape(document.filename)})",
            f"[{score_color}]{document.score:.4f}[/{score_color}]",
        )

    console.print(table)


def prompt_for_selection(count: int) -> Optional[int]:
    """Ask which result to open. Returns a 0-based index, or None to skip."""
    choices = [str(i) for i in range(1, count + 1)]
    answer = Prompt.ask(
        "\n[dim]Open document #[/dim]",
        choices=choices,
        default="",
        show_choices=False,
        show_default=False,
    )
    if not answer:
        return None
    return int(answer) - 1


def render_segments(segments: Sequence[Span], style: Optional[str] = None) -> Text:
    """
    Turn a Segmentation into rich Text. Matches come from the segments
    themselves; nothing is re-matched here.
    """
    highlight_style = style or settings.highlight_style
    text = Text()
    for span in segments:
        text.append(span.text, style=highlight_style if span.matched else None)
    return text


def display_document(document: Document, segments: Sequence[Span]) -> None:
    console.print(Panel(
        render_segments(segments),
        title=f"[bold]{escape(document.filename)}[/bold]",
        subtitle=f"Score: {document.score:.4f}",
        border_style="#3730a3",
        box=box.ROUNDED,
        padding=(1, 2),
    ))


def display_error(message: str) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {escape(message)}\n")


def ask_continue() -> bool:
    answer = Prompt.ask(
        "\n[dim]Search again?[/dim]",
        choices=["y", "n"],
        default="y",
    )
    return answer.lower() == "y"


def _score_to_color(score: float) -> str:
    if score >= 0.75:
        return "green"
    elif score >= 0.50:
        return "yellow"
    else:
        return "red"
