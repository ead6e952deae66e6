#!/usr/bin/env python3
"""
Command-line interface for résumé text parsing.

Subcommands:
- parse: Parse a plain-text résumé into a structured record (YAML or JSON)
- default: Write the placeholder record used to bootstrap an empty editor
- sections: Show which sections were detected and their content blocks
"""

import json
import os
import time
from datetime import datetime
from pathlib import Path

import typer
from dotenv import load_dotenv

from resumate.contexts.intake import (
    ParseConfigError,
    default_resume_record,
    extract_sections,
    parse_resume_text,
)
from resumate.contexts.intake.logger import (
    _log_error,
    _log_info,
    log_parse_result,
    log_parse_start,
    setup_intake_logger,
)
from resumate.contexts.intake.normalizer import normalize_resume_text

load_dotenv()

OUTPUT_FORMATS = ("yaml", "json")

app = typer.Typer(
    add_completion=False,
    help="Parse freeform resume text into a structured record",
    invoke_without_command=True,
)


def logs_path() -> Path:
    """Log root from LOGS_PATH (default: outs/logs)."""
    return Path(os.getenv("LOGS_PATH", "outs/logs"))


def read_input(input_file: Path) -> str:
    """Read a résumé text file, exiting with code 1 if it can't be read."""
    if not input_file.is_file():
        _log_error(f"Input file not found: {input_file}")
        typer.secho(f"Error: input file not found: {input_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return input_file.read_text(encoding="utf-8", errors="replace")


def render(record, output_format: str) -> str:
    """Serialize a record as YAML or JSON text."""
    if output_format == "json":
        return json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"
    return record.to_yaml()


def write_output(content: str, output: Path) -> None:
    """Write to a file, or to stdout when no output path is given."""
    if output is None:
        typer.echo(content, nl=False)
        return
    output.parent.mkdir(exist_ok=True, parents=True)
    output.write_text(content, encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, err=True)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("parse")
def parse_command(
    input_file: Path = typer.Argument(
        ...,
        help="Plain-text resume file",
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (if not specified, prints to stdout)",
    ),
    output_format: str = typer.Option(
        "yaml",
        "--format",
        "-f",
        help="Output format: yaml or json",
    ),
):
    """
    Parse a plain-text resume into a structured record.

    Logs are saved to LOGS_PATH/parse_TIMESTAMP/.

    Examples:\n

        $ parse_resume.py parse resume.txt

        $ parse_resume.py parse resume.txt -o resume.yaml

        $ parse_resume.py parse resume.txt --format json
    """
    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        typer.secho(
            f"Error: unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = setup_intake_logger(logs_path() / f"parse_{timestamp}", source=str(input_file))

    text = read_input(input_file)
    log_parse_start(input_file.name, len(text))

    start_time = time.time()
    try:
        record = parse_resume_text(text)
    except ParseConfigError as e:
        _log_error(str(e))
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_parse_result(input_file.name, record, time.time() - start_time)
    _log_info(f"Log file: {log_file}")

    write_output(render(record, output_format), output)


@app.command("default")
def default_command(
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (if not specified, prints to stdout)",
    ),
):
    """
    Write the placeholder record used before any resume is uploaded.

    Example:\n

        $ parse_resume.py default -o empty.yaml
    """
    write_output(default_resume_record().to_yaml(), output)


@app.command("sections")
def sections_command(
    input_file: Path = typer.Argument(
        ...,
        help="Plain-text resume file",
        dir_okay=False,
    ),
):
    """
    Show the section blocks the parser detects.

    Example:\n

        $ parse_resume.py sections resume.txt
    """
    text = normalize_resume_text(read_input(input_file))
    try:
        sections = extract_sections(text)
    except ParseConfigError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for name, block in sections.items():
        if block:
            typer.secho(f"\n[{name}] ({len(block)} chars)", fg=typer.colors.BLUE, bold=True)
            typer.echo(block)
        else:
            typer.secho(f"\n[{name}] not found", fg=typer.colors.YELLOW)


if __name__ == "__main__":
    app()
