"""CLI entry point for api-spec-dsl."""

import logging
from pathlib import Path

import click

from api_spec_dsl.emit import DEFAULT_OPENAPI_VERSION, dump_json, dump_yaml, to_openapi
from api_spec_dsl.parser.base import Document
from api_spec_dsl.parser.dsl import parse_dsl_file
from api_spec_dsl.parser.errors import DslError


def _parse(dsl_path: Path) -> Document:
    """Parse a DSL file, turning parse errors into CLI errors."""
    try:
        return parse_dsl_file(dsl_path)
    except DslError as e:
        raise click.ClickException(str(e)) from e


def _output_format(output: Path | None, fmt: str) -> str:
    if fmt != "auto":
        return fmt
    if output is not None and output.suffix.lower() == ".json":
        return "json"
    return "yaml"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Spec DSL: compile API description DSL files to OpenAPI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command(name="compile")
@click.argument("dsl_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (default: stdout).")
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "yaml", "json"]), help="Output format.")
@click.option("--openapi-version", default=DEFAULT_OPENAPI_VERSION, envvar="API_SPEC_DSL_OPENAPI_VERSION", show_default=True, help="Value of the top-level openapi field.")
def compile_cmd(dsl_path: Path, output: Path | None, fmt: str, openapi_version: str):
    """Compile a DSL file into an OpenAPI document."""
    doc = _parse(dsl_path)
    data = to_openapi(doc, version=openapi_version)

    if _output_format(output, fmt) == "json":
        text = dump_json(data)
    else:
        text = dump_yaml(data)

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"OpenAPI document saved to {output}", err=True)


@main.command()
@click.argument("dsl_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(dsl_paths: tuple[Path, ...]):
    """Parse DSL files and report what they define."""
    for dsl_path in dsl_paths:
        doc = _parse(dsl_path)
        click.echo(
            f"{dsl_path}: {len(doc.paths)} paths, {len(doc.schemas)} schemas, "
            f"{len(doc.security_schemes)} security schemes"
        )
