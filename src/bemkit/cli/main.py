"""CLI entry point for bemkit.

Invoked as::

    bemkit [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m bemkit.cli.main

Commands
--------
check       Validate one or more BEM strings
convert     Convert a BEM structure between object, vector and string forms
modifiers   List the modifiers of a block found in a class list
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _format_modifier(mod: tuple[str, ...]) -> tuple[str, str]:
    return mod[0], mod[1] if len(mod) == 2 else ""


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="bemkit")
@click.option("--debug", is_flag=True, default=False, help="Log debug messages to stderr")
def cli(debug: bool) -> None:
    """BEM class-name toolkit: validate, convert and inspect BEM structures."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format=_LOG_FORMAT)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from bemkit import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]bemkit[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("values", nargs=-1, required=True)
def check_command(values: tuple[str, ...]) -> None:
    """Validate BEM strings.

    VALUES are class names such as ``button__icon--size_large``.
    """
    from bemkit.validator import validate_bem_string

    results = [(value, validate_bem_string(value)) for value in values]
    failures = [result for _, result in results if not result.ok]

    table = Table(title="BEM check", show_lines=True)
    table.add_column("Value", min_width=10, no_wrap=True)
    table.add_column("Result", style="bold", min_width=8, no_wrap=True)
    table.add_column("Detail")

    for value, result in results:
        if result.ok:
            table.add_row(escape(value), "[green]OK[/green]", "")
        else:
            table.add_row(
                escape(value),
                f"[red]{result.error.kind.name}[/red]",
                escape(str(result.error)),
            )

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {len(results) - len(failures)} valid, {len(failures)} invalid"
    )

    if failures:
        sys.exit(1)


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


@cli.command(name="convert")
@click.argument("value")
@click.option(
    "--to",
    "form",
    type=click.Choice(["object", "vector", "string"], case_sensitive=False),
    default="object",
    help="Target BEM form",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option(
    "--json-input",
    is_flag=True,
    default=False,
    help="Decode VALUE as JSON, so objects and vectors can be given.",
)
def convert_command(value: str, form: str, output_format: str, json_input: bool) -> None:
    """Convert a BEM structure to another form.

    VALUE is a BEM string, or with --json-input a JSON-encoded BEM
    object, vector or string.
    """
    from bemkit.convert import BemSerializer
    from bemkit.validator import BemValidationError

    structure: Any = value
    if json_input:
        try:
            structure = json.loads(value)
        except json.JSONDecodeError as exc:
            err_console.print(f"[red]Error:[/red] VALUE is not valid JSON: {escape(str(exc))}")
            sys.exit(1)

    serializer = BemSerializer()
    try:
        if output_format == "json":
            text = serializer.to_json(structure, form=form.lower())
        else:
            text = serializer.to_yaml(structure, form=form.lower()).rstrip("\n")
    except BemValidationError as exc:
        err_console.print(f"[red]Invalid BEM structure[/red] ({exc.kind.name}): {escape(str(exc))}")
        sys.exit(1)

    click.echo(text)


# ---------------------------------------------------------------------------
# modifiers command
# ---------------------------------------------------------------------------


@cli.command(name="modifiers")
@click.argument("base")
@click.argument("class_names")
@click.option("--name", "modifier_name", default=None, help="Only list modifiers with this name")
def modifiers_command(base: str, class_names: str, modifier_name: str | None) -> None:
    """List the modifiers of BASE found in a class list.

    BASE is a BEM string naming the block (and element); CLASS_NAMES is
    a whitespace-separated class attribute.
    """
    from bemkit.core import get_bem_modifiers
    from bemkit.validator import BemValidationError

    try:
        modifiers = get_bem_modifiers(base, class_names, modifier_name)
    except BemValidationError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if not modifiers:
        console.print(f"[yellow]No modifiers of[/yellow] {escape(base)} found")
        sys.exit(0)

    table = Table(title=f"Modifiers: {escape(base)}")
    table.add_column("Name", style="bold", min_width=8)
    table.add_column("Value")

    for mod in modifiers:
        name, mod_value = _format_modifier(mod)
        table.add_row(escape(name), escape(mod_value))

    console.print(table)
    console.print(f"\n[bold]{len(modifiers)}[/bold] modifier(s)")


if __name__ == "__main__":
    cli()
