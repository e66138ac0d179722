#!/usr/bin/env python3
"""
Build a resume: validate it and write one file per layout.

LaTeX layouts produce a .tex file; compile it with xelatex or tectonic.

Usage:
    python scripts/build_resume.py resume.yml
    python scripts/build_resume.py resume.yml --output-dir outs/resumes
    python scripts/build_resume.py resume.yml --no-compiler-check
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from yamlresume.contexts.rendering import build_resume
from yamlresume.contexts.rendering.logger import setup_rendering_logger
from yamlresume.utils.errors import YAMLResumeError
from yamlresume.utils.logger import session_log_dir

app = typer.Typer(help="Build a YAMLResume document into LaTeX, HTML or Markdown.", add_completion=False)


@app.command()
def main(
    source: Annotated[Path, typer.Argument(help="Resume file (.yaml, .yml or .json)")],
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for output files (default: YAMLRESUME_OUTPUT_DIR, else beside the source)",
        ),
    ] = None,
    compiler_check: Annotated[
        bool,
        typer.Option(
            "--compiler-check/--no-compiler-check",
            help="Report whether a LaTeX compiler is available for .tex outputs",
        ),
    ] = True,
    log: Annotated[
        bool, typer.Option("--log/--no-log", help="Write a session log under YAMLRESUME_LOG_DIR")
    ] = True,
):
    """
    Validate a resume and render every layout it declares.

    Examples:\n

        $ build_resume.py resume.yml                    # Outputs beside resume.yml

        $ build_resume.py resume.yml -o outs/resumes    # Outputs in outs/resumes
    """
    if log:
        setup_rendering_logger(session_log_dir("build"), source=source)

    typer.secho(f"\nBuilding: {source}", fg=typer.colors.BLUE, bold=True)

    try:
        result = build_resume(source, output_dir=output_dir, check_compiler=compiler_check)
    except YAMLResumeError as e:
        typer.secho(f"Error: {e.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not result.success:
        for block in result.errors:
            typer.echo(block)
            typer.echo("")
        typer.secho("✗ Build failed: resume is invalid", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
    for path in result.outputs:
        typer.echo(f"  {path}")

    if result.compiler is not None:
        if result.compiler.available:
            typer.echo(f"  LaTeX compiler: {result.compiler.compiler} ({result.compiler.path})")
        else:
            typer.secho(f"  {result.compiler.error}", fg=typer.colors.YELLOW)


if __name__ == "__main__":
    app()
