"""
vidcoach.cli - Typer CLI entry point.

Provides subcommands for analyzing transcripts, browsing trending videos,
and the creative generation tools.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vidcoach import __version__
from vidcoach.config import (
    CONFIG_FILENAME,
    VidcoachConfig,
    create_default_config,
    load_config,
    write_config,
)
from vidcoach.exceptions import VidcoachError
from vidcoach.llm.client import create_client_from_config
from vidcoach.logging import configure_logging
from vidcoach.utils import format_duration

app = typer.Typer(
    name="vidcoach",
    help="AI-assisted video content coaching.\n\n"
    "Scores transcripts with parallel LLM analysis passes, ranks them against "
    "previously analyzed videos, and surfaces trending content.",
    add_completion=False,
)
console = Console()

_state: dict[str, Path | None] = {"config_path": None}


def get_config() -> VidcoachConfig:
    """Load the config given with --config, or ./vidcoach.yaml, or defaults."""
    config_path = _state["config_path"]
    if config_path is not None:
        return load_config(config_path)
    local = Path.cwd() / CONFIG_FILENAME
    if local.exists():
        return load_config(local)
    return VidcoachConfig()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"vidcoach {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """vidcoach - AI-assisted video content coaching."""
    configure_logging(verbose)
    _state["config_path"] = config


@app.command("init-config")
def init_config(
    path: str = typer.Option(".", "--path", "-d", help="Directory to write the config in"),
) -> None:
    """Write a default vidcoach.yaml."""
    config_path = Path(path) / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[red]Error: {config_path} already exists[/red]")
        raise typer.Exit(1)

    write_config(create_default_config(), config_path)
    console.print(f"[green]✓[/green] Wrote {config_path}")


@app.command("analyze")
def analyze(
    transcripts: list[Path] = typer.Argument(..., help="Speech-to-text JSON file(s)"),
    competitor: bool = typer.Option(
        False, "--competitor", help="Break down a competitor's video instead of scoring it"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the report(s) as JSON to this file"
    ),
) -> None:
    """Analyze one or more transcripts.

    Scores are ranked against the transcripts analyzed earlier in the same run.
    """
    from vidcoach.benchmark import BenchmarkStore
    from vidcoach.io import write_reports
    from vidcoach.llm.templates import PromptTemplateManager
    from vidcoach.service import AnalysisService
    from vidcoach.transcript import load_transcript

    try:
        config = get_config()
    except (FileNotFoundError, VidcoachError, ValueError) as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(1)

    client = create_client_from_config(config)
    service = AnalysisService(
        client,
        PromptTemplateManager(),
        benchmark=BenchmarkStore(config.benchmark_capacity, config.benchmark_min_history),
        max_workers=config.max_workers,
    )

    reports = []
    failed = 0

    for path in transcripts:
        try:
            transcript = load_transcript(path)
            console.print(
                f"\n[cyan]Analyzing {path.name}[/cyan] "
                f"[dim]({transcript.word_count} words, "
                f"{format_duration(transcript.duration_seconds)})[/dim]"
            )
            if competitor:
                results = service.analyze_competitor(transcript)
                data = {"source": str(path), **results}
                _print_results(results)
            else:
                report = service.analyze(transcript)
                data = {"source": str(path), **report.to_dict()}
                _print_results(report.results)
                _print_score(report.overall_score, report.percentile, report.total_analyzed)
            reports.append(data)
        except (FileNotFoundError, VidcoachError) as e:
            console.print(f"[red]Error: {path}: {e}[/red]")
            failed += 1

    if output and reports:
        write_reports(output, reports)
        console.print(f"\n[green]✓[/green] Report written to {output}")

    usage = client.get_token_usage()
    if usage["total_tokens"] > 0:
        console.print(f"[dim]Token usage: {usage['total_tokens']:,} total[/dim]")

    if failed:
        raise typer.Exit(1)


def _print_results(results: dict[str, str]) -> None:
    for key, text in results.items():
        title = key.replace("_", " ").title()
        console.print(Panel(Text(text), title=title, title_align="left", border_style="dim"))


def _print_score(score: int | None, percentile: int | None, total: int) -> None:
    if score is None:
        console.print("[yellow]No overall score found in the score report[/yellow]")
        return
    line = f"[bold]Overall score: {score}/100[/bold]"
    if percentile is not None:
        line += f"  [green]better than {percentile}% of analyzed videos[/green]"
    console.print(line)
    console.print(f"[dim]Videos analyzed: {total}[/dim]")


@app.command("trending")
def trending(
    category: str | None = typer.Option(
        None, "--category", "-k", help="Category (gaming, music, tech, ...); default all"
    ),
) -> None:
    """List trending videos."""
    from vidcoach.cache import TTLCache
    from vidcoach.catalog import CatalogCategory, CatalogClient, TrendingService

    try:
        selected = CatalogCategory.parse(category)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    try:
        config = get_config()
    except (FileNotFoundError, VidcoachError, ValueError) as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(1)

    service = TrendingService(
        CatalogClient(config.resolved_api_key()),
        TTLCache(ttl=config.cache_ttl_seconds),
        region=config.catalog_region,
        max_results=config.catalog_max_results,
    )

    try:
        result = service.get_trending(selected)
    except VidcoachError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        service.client.close()

    table = Table(title=f"Trending: {selected.value}")
    table.add_column("Title", style="cyan")
    table.add_column("Channel", style="green")
    table.add_column("Views", justify="right")
    table.add_column("URL", style="dim")
    for item in result.items:
        table.add_row(escape(item.title), escape(item.channel), item.views, item.url)
    console.print(table)


@app.command("script")
def script(
    topic: str = typer.Argument(..., help="What the video is about"),
    length: str | None = typer.Option(None, "--length", "-l", help="short, medium, or long"),
    style: str | None = typer.Option(
        None,
        "--style",
        "-s",
        help="educational, entertaining, storytelling, tutorial, or motivational",
    ),
    audience: str | None = typer.Option(None, "--audience", "-a", help="Target audience"),
) -> None:
    """Write a complete video script for a topic."""
    from vidcoach.llm.creative import ScriptLength, ScriptStyle, generate_script
    from vidcoach.llm.templates import PromptTemplateManager

    try:
        script_length = ScriptLength.parse(length)
        script_style = ScriptStyle.parse(style)
        config = get_config()
    except (FileNotFoundError, VidcoachError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    client = create_client_from_config(config)
    try:
        text = generate_script(
            client,
            PromptTemplateManager(),
            topic,
            length=script_length,
            style=script_style,
            target_audience=audience,
            model=config.script_model,
        )
    except (VidcoachError, ValueError) as e:
        console.print(f"[red]Error generating script: {e}[/red]")
        raise typer.Exit(1)

    console.print(text, markup=False, highlight=False)


@app.command("thumbnail")
def thumbnail(
    title: str = typer.Argument(..., help="Video title or topic"),
    style: str | None = typer.Option(
        None,
        "--style",
        "-s",
        help="youtube, minimal, dramatic, colorful, or professional",
    ),
    summary: str | None = typer.Option(None, "--summary", help="Short content summary"),
) -> None:
    """Generate a thumbnail image and print its URL."""
    from vidcoach.exceptions import ContentPolicyError
    from vidcoach.llm.creative import ThumbnailStyle, generate_thumbnail
    from vidcoach.llm.templates import PromptTemplateManager

    try:
        thumb_style = ThumbnailStyle.parse(style)
        config = get_config()
    except (FileNotFoundError, VidcoachError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    client = create_client_from_config(config)
    try:
        image = generate_thumbnail(
            client, PromptTemplateManager(), title=title, summary=summary, style=thumb_style
        )
    except ContentPolicyError:
        console.print(
            "[yellow]This content triggered AI safety filters. "
            "Try a different title or select a different style.[/yellow]"
        )
        raise typer.Exit(1)
    except (VidcoachError, ValueError) as e:
        console.print(f"[red]Error generating thumbnail: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {image['url']}")
    if image.get("revised_prompt"):
        console.print(f"[dim]{escape(image['revised_prompt'])}[/dim]")


if __name__ == "__main__":
    app()
