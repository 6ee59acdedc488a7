"""CLI command: stylegen compile -- render style fragments as CSS."""

from __future__ import annotations

import json
import sys

import click

from stylegen.cli.loader import load_fragments
from stylegen.compiler import generate_css
from stylegen.config import CompileConfig
from stylegen.errors import StyleError
from stylegen.handlers import DEFAULT_STRING_HANDLERS
from stylegen.prefixer import no_prefix, prefix_all


@click.command("compile")
@click.argument("stylefile", type=click.File("r", encoding="utf-8"))
@click.option("--selector", "-s", default=".style", show_default=True, help="Root selector")
@click.option("--important/--no-important", default=True, help="Mark declarations !important")
@click.option("--prefix/--no-prefix", default=True, help="Add vendor-prefixed declarations")
@click.option("--sort", is_flag=True, help="Sort declarations by property name")
@click.option("--unit", default="px", show_default=True, help="Unit for numeric lengths")
def compile_styles(
    stylefile, selector: str, important: bool, prefix: bool, sort: bool, unit: str
) -> None:
    """Compile a JSON style object (or list of fragments) into CSS.

    Pass ``-`` as STYLEFILE to read from standard input.
    """
    config = CompileConfig(default_unit=unit, sort_declarations=sort)
    try:
        fragments = load_fragments(stylefile)
        css = generate_css(
            selector,
            fragments,
            DEFAULT_STRING_HANDLERS,
            None if important else False,
            prefixer=prefix_all if prefix else no_prefix,
            config=config,
        )
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)
    except StyleError as exc:
        click.echo(f"Style error: {exc}", err=True)
        sys.exit(1)

    click.echo(css)
