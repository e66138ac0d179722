#!/usr/bin/env python3
"""
Export the document schema as JSON Schema (for editor autocompletion).

Usage:
    python scripts/export_schema.py                  # Print to stdout
    python scripts/export_schema.py -o schema.json   # Write to a file
"""

import json
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from yamlresume.contexts.schema import export_json_schema

app = typer.Typer(help="Export the YAMLResume JSON Schema.", add_completion=False)


@app.command()
def main(
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write the schema to this file")
    ] = None,
    indent: Annotated[int, typer.Option("--indent", help="JSON indentation", min=0)] = 2,
):
    """Print or write the JSON Schema of a YAMLResume document."""
    schema_text = json.dumps(export_json_schema(), indent=indent, ensure_ascii=False)

    if output is None:
        typer.echo(schema_text)
        return

    output.write_text(schema_text + "\n", encoding="utf-8")
    typer.secho(f"✓ Schema written to {output}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
