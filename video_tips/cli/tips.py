# video_tips/cli/tips.py
"""
CLI entrypoint for video-to-tip generation.

Thin adapter — no business logic.
Responsibilities:
- Parse arguments
- Invoke the generator
- Print or write the tip JSON
- Turn taxonomy errors into a user-safe message and exit code 1

Structured JSON logs go to stderr; results go to stdout.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from video_tips.config import settings
from video_tips.logging_core.logger import configure_logging
from video_tips.tip_generator.errors import TipGenerationError
from video_tips.tip_generator.runner import generate_tip_content_from_video
from video_tips.tip_generator.stages.validate_input import validate_video_url


app = typer.Typer(
    name="video-tips",
    help="Generate structured life hack tips from YouTube and Instagram videos",
    no_args_is_help=True,
)


@app.command()
def validate(url: str = typer.Argument(..., help="YouTube or Instagram video URL")) -> None:
    """
    Check a video URL without calling the model.
    """
    result = validate_video_url(url)
    typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def generate(
    url: str = typer.Argument(..., help="YouTube or Instagram video URL"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the tip JSON to this file"),
) -> None:
    """
    Generate tip content from a video and print it as JSON.
    """
    configure_logging(settings.log_level)

    try:
        content = asyncio.run(generate_tip_content_from_video(url))
    except TipGenerationError as exc:
        typer.echo(typer.style("✗ Tip generation failed", fg=typer.colors.RED, bold=True), err=True)
        typer.echo(f"Error: {exc.message}", err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        typer.echo("\nInterrupted by user.", err=True)
        raise typer.Exit(code=1)

    payload = json.dumps(content.to_dict(), ensure_ascii=False, indent=2)

    if out is None:
        typer.echo(payload)
        return

    output_path = out.expanduser()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload + "\n", encoding="utf-8")
    typer.echo(typer.style("✓ Tip generated", fg=typer.colors.GREEN, bold=True), err=True)
    typer.echo(f"Written to: {output_path}", err=True)


if __name__ == "__main__":
    app()
