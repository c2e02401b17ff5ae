"""CLI entry point for routedoc."""

import json
import logging
from pathlib import Path

import click
import yaml

from routedoc.config import settings
from routedoc.errors import RoutedocError
from routedoc.generator.document import ProxyEvent, RequestContext, SwaggerGenerator
from routedoc.loader import load_target


def _build_event(host: str | None, scheme: str | None, stage: str | None) -> ProxyEvent:
    """Stand-in for the request the document would normally be served to."""
    headers = {}
    if host:
        headers["Host"] = host
    if scheme:
        headers["X-Forwarded-Proto"] = scheme
    return ProxyEvent(headers=headers, request_context=RequestContext(stage=stage))


def _generate(target: str, app_dir: Path, host: str | None, scheme: str | None, stage: str | None) -> dict:
    try:
        namespace = load_target(target, app_dir=app_dir)
        generator = SwaggerGenerator()
        return generator.generate_json(namespace.info, _build_event(host, scheme, stage), namespace.routes)
    except RoutedocError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Generate Swagger 2.0 documents from route trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("target")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file. Defaults to stdout.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--host", default=None, help="Value for the document's host field.")
@click.option("--scheme", default=None, help="Scheme to advertise (defaults to ROUTEDOC_DEFAULT_SCHEME).")
@click.option("--stage", default=None, help="Deployment stage used for basePath.")
@click.option("--app-dir", default=".", type=click.Path(file_okay=False, path_type=Path), help="Directory to import TARGET from.")
def generate(target: str, output: Path | None, fmt: str, host: str | None, scheme: str | None, stage: str | None, app_dir: Path):
    """Generate the Swagger document for TARGET (module:attribute)."""
    document = _generate(target, app_dir, host, scheme, stage)

    if fmt == "yaml":
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Swagger document saved to {output} ({len(document['paths'])} paths)")


@main.command()
@click.argument("target")
@click.option("--app-dir", default=".", type=click.Path(file_okay=False, path_type=Path), help="Directory to import TARGET from.")
def paths(target: str, app_dir: Path):
    """List the operations TARGET documents."""
    document = _generate(target, app_dir, None, None, None)
    for path, operations in document["paths"].items():
        for method, operation in operations.items():
            click.echo(f"{method.upper():7} {path}  {operation['operationId']}")
