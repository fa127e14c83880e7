"""CLI entry point for the Meeting Memo Engine.

Usage:
    memo samples/dps_budget_meeting.json
    memo samples/dps_budget_meeting.json --now 2025-11-10T09:00:00-07:00 --json
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from memo_engine.brief.dates import fixed_clock, parse_timestamp
from memo_engine.brief.generator import MemoInputError, MemoOptions, generate_memo
from memo_engine.brief.loader import load_bundle
from memo_engine.brief.renderer import render_markdown
from memo_engine.config import settings

console = Console()

_CONFIDENCE_COLORS = {"high": "green", "medium": "yellow", "low": "red"}


def _setup_logging():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.command("memo")
@click.argument("bundle", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the memo as JSON")
@click.option(
    "--window-days",
    type=click.IntRange(min=0),
    default=None,
    help="Interaction recency window for attendee backgrounds",
)
@click.option(
    "--max-interactions",
    type=click.IntRange(min=1),
    default=None,
    help="Interactions rendered per attendee",
)
@click.option("--now", "now_text", default=None, help="Freeze 'now' (ISO-8601) for repeatable output")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Verbose logging")
def cli(
    bundle: str,
    as_json: bool,
    window_days: int | None,
    max_interactions: int | None,
    now_text: str | None,
    verbose: bool,
):
    """Generate a meeting memo from a JSON bundle of event, profiles and organization."""
    if verbose:
        settings.log_level = "DEBUG"
    _setup_logging()

    clock = None
    if now_text:
        frozen = parse_timestamp(now_text)
        if frozen is None:
            raise click.BadParameter(f"not an ISO-8601 timestamp: {now_text}", param_hint="--now")
        clock = fixed_clock(frozen)

    overrides = {}
    if window_days is not None:
        overrides["recency_window_days"] = window_days
    if max_interactions is not None:
        overrides["max_rendered_interactions"] = max_interactions

    try:
        inputs = load_bundle(bundle)
        memo = generate_memo(
            inputs.event,
            inputs.profiles,
            inputs.organization,
            clock=clock,
            options=MemoOptions(**overrides),
        )
    except MemoInputError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        sys.exit(1)

    if as_json:
        click.echo(memo.model_dump_json(indent=2, by_alias=True))
        return

    confidence = memo.metadata.confidence.value
    color = _CONFIDENCE_COLORS[confidence]
    console.print(
        Panel(
            f"[bold]{memo.meeting_title}[/bold]\n"
            f"{memo.date}\n"
            f"Confidence: [{color}]{confidence.upper()}[/{color}]",
            title="Meeting Memo",
            border_style=color,
        )
    )
    console.print()
    console.print(Markdown(render_markdown(memo)))


def main():
    cli()


if __name__ == "__main__":
    main()
