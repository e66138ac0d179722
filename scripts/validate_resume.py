#!/usr/bin/env python3
"""
Validate a resume file against the document schema.

Prints every violation clang-style (file:line:col: warning: message, the
source line and a caret under the column).

Usage:
    python scripts/validate_resume.py resume.yml
    python scripts/validate_resume.py resume.json --no-log
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from yamlresume.contexts.validation import format_report, read_source, validate_source
from yamlresume.contexts.validation.logger import log_report_summary, setup_validation_logger
from yamlresume.utils.errors import YAMLResumeError
from yamlresume.utils.logger import session_log_dir

app = typer.Typer(help="Validate a YAMLResume document.", add_completion=False)


@app.command()
def main(
    source: Annotated[Path, typer.Argument(help="Resume file (.yaml, .yml or .json)")],
    log: Annotated[
        bool, typer.Option("--log/--no-log", help="Write a session log under YAMLRESUME_LOG_DIR")
    ] = True,
):
    """Validate a resume and list every schema violation."""
    if log:
        setup_validation_logger(session_log_dir("validate"), source=source)

    try:
        text, source_format = read_source(source)
    except YAMLResumeError as e:
        typer.secho(f"Error: {e.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report = validate_source(text, source_format=source_format, source_name=source.name)
    if log:
        log_report_summary(source.name, report)

    if report.ok:
        typer.secho(f"✓ {source.name} is valid", fg=typer.colors.GREEN, bold=True)
        return

    for block in format_report(str(source), text, report):
        typer.echo(block)
        typer.echo("")

    if report.parse_error is None:
        typer.secho(f"✗ {len(report.errors)} schema violations", fg=typer.colors.RED, bold=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
