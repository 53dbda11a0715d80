"""Rich console output for summaries, analytics, and model listings."""

import logging

from rich.bar import Bar
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from config.config_loader import AppConfig, ModelOption
from src.analytics import AVERAGE, difference, format_score, score
from src.models import (
    OPEN_SOURCE,
    PROPRIETARY,
    RATING_CATEGORIES,
    AnalyticsSnapshot,
    SummaryResponse,
    SummaryResult,
)
from src.registry import resolve_display_name
from src.text_input import RECOMMENDED_WORDS, word_count

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)

_CLASS_LABELS = {OPEN_SOURCE: "Open Source", PROPRIETARY: "Proprietary"}
_CLASS_STYLES = {OPEN_SOURCE: "blue", PROPRIETARY: "green"}
_BAR_WIDTH = 30
_MAX_RATING = 5


def column_label(model_class: str, model_id: str) -> str:
    """e.g. 'BART (Open Source)'."""
    return f"{resolve_display_name(model_id)} ({_CLASS_LABELS[model_class]})"


def print_text_stats(text: str) -> None:
    count = word_count(text)
    low, high = RECOMMENDED_WORDS
    style = "dim" if low <= count <= high else "yellow"
    console.print(Text(f"Word count: {count} ({low}-{high} words recommended)", style=style))


def _summary_panel(response: SummaryResponse) -> Panel:
    subtitle = "placeholder" if response.placeholder else f"{response.latency_sec:.1f}s"
    return Panel(
        response.content,
        title=f"[bold]{_CLASS_LABELS[response.model_class]}: {resolve_display_name(response.model)}[/bold]",
        subtitle=subtitle,
        border_style=_CLASS_STYLES[response.model_class],
    )


def print_summaries(result: SummaryResult) -> None:
    """Print both summaries side by side."""
    console.print(Rule("[bold cyan]Summary Comparison[/bold cyan]"))
    console.print(
        Columns(
            [_summary_panel(result.open_source), _summary_panel(result.proprietary)],
            equal=True,
            expand=True,
        )
    )


def build_ratings_table(snapshot: AnalyticsSnapshot, open_source_model: str, proprietary_model: str) -> Table:
    table = Table(title="Detailed Ratings", show_lines=False)
    table.add_column("Metric")
    table.add_column(column_label(OPEN_SOURCE, open_source_model), justify="right")
    table.add_column(column_label(PROPRIETARY, proprietary_model), justify="right")
    table.add_column("Difference", justify="right")

    for metric in (*RATING_CATEGORIES, AVERAGE):
        row = [
            metric.title(),
            format_score(score(snapshot, OPEN_SOURCE, metric)),
            format_score(score(snapshot, PROPRIETARY, metric)),
            format_score(difference(snapshot, metric)),
        ]
        table.add_row(*row, style="bold" if metric == AVERAGE else None)
    return table


def build_chart(snapshot: AnalyticsSnapshot) -> Group:
    """Horizontal bars of category averages on a 0..5 scale."""
    lines = []
    for category in RATING_CATEGORIES:
        lines.append(Text(category.title(), style="bold"))
        for model_class in (OPEN_SOURCE, PROPRIETARY):
            value = snapshot.average_ratings[model_class][category]
            lines.append(
                Columns([
                    Text(f"{_CLASS_LABELS[model_class]:<12} {format_score(value)}"),
                    Bar(size=_MAX_RATING, begin=0, end=value, width=_BAR_WIDTH, color=_CLASS_STYLES[model_class]),
                ])
            )
    return Group(*lines)


def build_preferences_panel(snapshot: AnalyticsSnapshot, open_source_model: str, proprietary_model: str) -> Panel:
    body = Text.assemble(
        (f"{snapshot.preferences[OPEN_SOURCE]}", "bold blue"),
        f"  {resolve_display_name(open_source_model)}\n",
        (f"{snapshot.preferences[PROPRIETARY]}", "bold green"),
        f"  {resolve_display_name(proprietary_model)}",
    )
    return Panel(body, title="Preferred Model", subtitle=f"{snapshot.comparisons} comparisons")


def print_analytics(snapshot: AnalyticsSnapshot, open_source_model: str, proprietary_model: str) -> None:
    console.print(Rule("[bold green]Analytics Dashboard[/bold green]"))
    console.print(Panel(build_chart(snapshot), title="Model Performance Comparison", subtitle="Rating (1-5)"))
    console.print(build_preferences_panel(snapshot, open_source_model, proprietary_model))
    console.print(build_ratings_table(snapshot, open_source_model, proprietary_model))


def _options_table(title: str, options: list[ModelOption], default: str) -> Table:
    table = Table(title=title)
    table.add_column("Model id")
    table.add_column("Label")
    table.add_column("Short name")
    for opt in options:
        marker = " *" if opt.id == default else ""
        table.add_row(opt.id + marker, opt.label, resolve_display_name(opt.id))
    return table


def print_model_options(config: AppConfig) -> None:
    console.print(_options_table(
        "Open-Source Models (Hugging Face)", config.open_source_models, config.defaults.open_source_model,
    ))
    console.print(_options_table(
        "Proprietary Models", config.proprietary_models, config.defaults.proprietary_model,
    ))
    console.print(Text("* default", style="dim"))
