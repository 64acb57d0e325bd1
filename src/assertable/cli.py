from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="assertable", help="Inspect assertable messages and settings")


@app.command()
def messages(
    relation: str | None = typer.Option(None, help="Show only this relation"),
):
    """List every relation with its failure message template."""
    from assertable.messages import TEMPLATES
    from assertable.predicates import relation_names

    names = relation_names()
    if relation:
        if relation not in names:
            typer.echo(f"Error: unknown relation: {relation}", err=True)
            raise typer.Exit(1)
        names = [relation]

    for name in names:
        typer.echo(f"{name}: {TEMPLATES[name]}")


@app.command()
def schema(
    out: str = typer.Option("assertable.schema.json", help="Where to write the config JSON Schema"),
    doc: str | None = typer.Option(None, help="Also write a markdown message catalogue here"),
):
    """Write the JSON Schema of the assertable YAML config."""
    from assertable.schema import write_json_schema, write_messages_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Schema: {out_path}")
    if doc:
        doc_path = Path(doc)
        write_messages_doc(doc_path)
        typer.echo(f"Messages: {doc_path}")


@app.command("check-config")
def check_config(
    config: str = typer.Argument(help="Path to assertable YAML config"),
):
    """Validate a config file and print the resulting settings."""
    from pydantic import ValidationError

    from assertable.config import load_config

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        settings = load_config(config_path)
    except (ValidationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for key, value in settings.model_dump().items():
        typer.echo(f"{key}: {value}")
