"""CLI entry point for dt2js."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click

from .config import Config
from .converter import convert_type_declaration
from .exceptions import Dt2jsError
from .logging_setup import configure_logging
from .raml.loader import load_raml_context


def _read_raml(raml_file: str) -> bytes:
    try:
        return Path(raml_file).read_bytes()
    except OSError as e:
        click.echo(f"Error reading RAML file {raml_file}: {e}", err=True)
        sys.exit(1)


def _dump(schema: Dict[str, Any], config: Config) -> str:
    output = config.output
    return json.dumps(
        schema,
        indent=output.indent or None,
        sort_keys=output.sort_keys,
        ensure_ascii=output.ensure_ascii,
    )


@click.group()
@click.option(
    "--config-file", "-c",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="Path to a JSON configuration file.",
    envvar="DT2JS_CONFIG_FILE"
)
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override the logging level (e.g., DEBUG, INFO)."
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"], case_sensitive=False),
    default=None,
    help="Override logging format."
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], log_level: Optional[str], log_format: Optional[str]) -> None:
    """dt2js - converts RAML 1.0 data types to JSON Schema (draft-04)."""
    try:
        if config_file:
            cfg = Config.from_file(Path(config_file))
        else:
            cfg = Config()
    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    if log_level:
        cfg.logging.level = log_level.upper()
    if log_format:
        cfg.logging.format = log_format.lower()

    configure_logging(cfg.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@cli.command()
@click.argument("raml_file", type=click.Path(dir_okay=False))
@click.argument("type_name")
@click.option(
    "--output-file", "-o",
    type=click.Path(dir_okay=False, writable=True, resolve_path=True),
    help="Write the JSON Schema to this file instead of stdout."
)
@click.pass_context
def convert(ctx: click.Context, raml_file: str, type_name: str, output_file: Optional[str]) -> None:
    """Converts TYPE_NAME declared in RAML_FILE to JSON Schema."""
    config: Config = ctx.obj["config"]
    raml_data = _read_raml(raml_file)

    try:
        schema = convert_type_declaration(raml_data, type_name)
    except Dt2jsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    rendered = _dump(schema, config)
    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(rendered + "\n")
        except IOError as e:
            click.echo(f"Error writing output file {output_file}: {e}", err=True)
            sys.exit(1)
        click.echo(f"JSON Schema for {type_name} written to {output_file}", err=True)
    else:
        click.echo(rendered)


@cli.command()
@click.argument("raml_file", type=click.Path(dir_okay=False))
def types(raml_file: str) -> None:
    """Lists the data types declared in RAML_FILE."""
    try:
        context = load_raml_context(_read_raml(raml_file))
    except Dt2jsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    for type_name in context:
        click.echo(type_name)


@cli.command()
def version() -> None:
    """Show version information."""
    from . import __version__
    click.echo(f"dt2js v{__version__}")


@cli.command()
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration."""
    config: Config = ctx.obj["config"]
    click.echo(config.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
