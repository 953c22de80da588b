#!/usr/bin/env python
"""CLI entry point for synthqa."""

import asyncio
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

import click
from dotenv import load_dotenv

from synthqa.config import load_settings, setup_logging
from synthqa.pipeline import EvolInstructPipeline, GenerationError, filter_result
from synthqa.pipeline.utils.passages import extract_passages
from synthqa.providers import PROVIDER_MAP, create_provider
from synthqa.schemas import Document, EvolutionKind, GenerationResult

load_dotenv()


def read_document(path: Path) -> Document:
    """Read a text or markdown file as a pipeline document."""
    content = path.read_bytes().decode("utf-8", errors="replace")
    return Document(
        text=content,
        metadata={
            "source": path.name,
            "size": path.stat().st_size,
            "upload_timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


def print_summary(result: GenerationResult) -> None:
    metadata = result.generation_metadata
    counts = metadata.evolution_kind_counts

    click.echo("\nGENERATION SUMMARY")
    click.echo("-" * 60)
    click.echo(f"Questions: {metadata.total_questions}")
    click.echo(f"  simple:        {counts.simple}")
    click.echo(f"  multi_context: {counts.multi_context}")
    click.echo(f"  reasoning:     {counts.reasoning}")
    click.echo(f"Answers:   {len(result.question_answers)}")
    click.echo(f"Contexts:  {len(result.question_contexts)}")

    if metadata.processing_errors:
        click.echo(f"Errors ({len(metadata.processing_errors)}):")
        for error in metadata.processing_errors:
            click.echo(f"  - {error}")
    click.echo("-" * 60)


@click.group()
def cli():
    """synthqa - Evol-Instruct question/answer/context generation from documents."""
    pass


@cli.command()
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the JSON result to this file (default: stdout)",
)
@click.option(
    "--provider",
    type=click.Choice(sorted(PROVIDER_MAP)),
    default=None,
    help="Completion provider (default: from config)",
)
@click.option("--model", type=str, default=None, help="Model name override")
@click.option(
    "--api-key",
    type=str,
    default=None,
    help="API key override (default: OPENAI_API_KEY)",
)
@click.option(
    "--max-questions",
    type=click.IntRange(1, 50),
    default=None,
    help="Keep at most this many questions (default: all)",
)
@click.option(
    "--evolution-kind",
    "evolution_kinds",
    type=click.Choice([kind.value for kind in EvolutionKind]),
    multiple=True,
    help="Keep only this evolution kind (repeatable, default: all)",
)
def generate(
    files: Tuple[Path, ...],
    output: Optional[Path],
    provider: Optional[str],
    model: Optional[str],
    api_key: Optional[str],
    max_questions: Optional[int],
    evolution_kinds: Tuple[str, ...],
):
    """Generate evolved questions, answers and contexts from FILES."""
    settings = load_settings()
    setup_logging(settings.log_level)

    documents = [read_document(path) for path in files]

    try:
        llm = create_provider(settings, provider_id=provider, api_key=api_key, model=model)
    except ValueError as e:
        raise click.ClickException(str(e))

    pipeline = EvolInstructPipeline(llm)

    try:
        result = asyncio.run(pipeline.run(documents))
    except GenerationError as e:
        click.echo(f"Pipeline failed: {e}", err=True)
        sys.exit(1)

    result = filter_result(
        result,
        max_questions=max_questions,
        evolution_kinds=[EvolutionKind(kind) for kind in evolution_kinds],
    )

    payload = json.dumps(result.model_dump(mode="json"), indent=2)
    if output:
        output.write_text(payload, encoding="utf-8")
        click.echo(f"Result written to {output}")
        print_summary(result)
    else:
        click.echo(payload)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def passages(file: Path):
    """Show the context passages extracted from FILE."""
    document = read_document(file)
    found = extract_passages("", document.text)

    if not found:
        click.echo("No passages found")
        return

    for i, passage in enumerate(found, 1):
        click.echo(f"--- Passage {i} ({len(passage)} chars) ---")
        click.echo(passage)


@cli.command()
def stages():
    """List pipeline stages in execution order."""
    # Building the graph makes no completion calls
    for i, name in enumerate(EvolInstructPipeline(llm=None).stage_names(), 1):
        click.echo(f"{i}. {name}")


if __name__ == "__main__":
    cli()
