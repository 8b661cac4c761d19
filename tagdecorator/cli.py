"""Command-line interface for the tag decorator."""

import logging
from dataclasses import replace
from pathlib import Path

import typer
from lxml import etree
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tagdecorator import __version__
from tagdecorator.config.store import ConfigurationStore
from tagdecorator.errors import ConfigurationError
from tagdecorator.logging_config import setup_logging
from tagdecorator.models import Tag
from tagdecorator.pipeline import DecorationPipeline
from tagdecorator.xml_adapter import descriptor_from_string

app = typer.Typer(
    name="tagdecorator",
    help="Decorate markup tags with namespaces, mappings and context-root links.",
)
console = Console()


def _load_store(config: Path | None) -> ConfigurationStore:
    if config is None:
        return ConfigurationStore.get_instance()
    return ConfigurationStore.load(config)


def _print_tag(tag: Tag) -> None:
    console.print(f"[bold]<{tag.qualified_name}>[/bold]")
    console.print(f"  Namespace: [green]{escape(tag.namespace) or '(none)'}[/green]")
    console.print(f"  Local name: {tag.local_name}")

    table = Table("Attribute", "Value")
    for attribute in tag.attributes:
        table.add_row(escape(attribute.name), escape(attribute.value))
    console.print(table)


@app.command("check-config")
def check_config(
    path: Path = typer.Argument(
        ...,
        help="Configuration file (.yaml, .yml or .xml)",
    ),
) -> None:
    """Validate a configuration file and list its contents."""
    try:
        store = ConfigurationStore.load(path)
        store.validate()
    except ConfigurationError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    namespaces = Table("Letter", "Prefix", "URL", "Mandatory", title="Namespaces")
    for namespace in store.namespaces:
        namespaces.add_row(
            namespace.letter,
            namespace.prefix,
            namespace.url,
            "yes" if namespace.mandatory else "no",
        )
    console.print(namespaces)

    mappings = Table("Source", "Target", "Letter", title="Mappings")
    for entry in store.mappings:
        mappings.add_row(
            str(entry.source),
            entry.target_qualified_name,
            entry.target_namespace_letter or "",
        )
    console.print(mappings)
    console.print("[bold green]Configuration OK[/bold green]")


@app.command()
def decorate(
    tag_xml: str = typer.Argument(
        ...,
        help='Element snippet, e.g. \'<c:button xmlns:c="urn:custom" href="x"/>\'',
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: $TAGDECORATOR_CONFIG or built-in)",
    ),
    dedupe: bool = typer.Option(
        False,
        "--dedupe",
        help="Do not add namespace declarations that are already present",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log the decoration stages",
    ),
) -> None:
    """Decorate a single tag and show the result."""
    if verbose:
        setup_logging(logging.DEBUG)

    try:
        descriptor = descriptor_from_string(tag_xml)
    except etree.XMLSyntaxError as e:
        console.print(f"[bold red]Invalid tag:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    try:
        store = _load_store(config)
        options = store.options
        if dedupe:
            options = replace(options, dedupe_namespaces=True)
        tag = DecorationPipeline(store, options).decorate(descriptor)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e

    _print_tag(tag)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tagdecorator {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
