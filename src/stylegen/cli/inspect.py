"""CLI command: stylegen inspect -- show how a style tree will be compiled."""

from __future__ import annotations

import json
import sys

import click

from stylegen.cli.loader import load_fragments
from stylegen.compiler import partition_styles
from stylegen.errors import StyleError
from stylegen.merge import find_names_for_descendants, merge_styles


@click.command()
@click.argument("stylefile", type=click.File("r", encoding="utf-8"))
def inspect(stylefile) -> None:
    """Merge style fragments and display the top-level buckets.

    Shows declarations, pseudo selectors, media queries, and the class names
    each descendant block resolves to.
    """
    try:
        fragments = load_fragments(stylefile)
        merged = merge_styles(fragments)
        names = find_names_for_descendants(merged)
        partition = partition_styles(merged, names)
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON: {exc}", err=True)
        sys.exit(1)
    except StyleError as exc:
        click.echo(f"Style error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Fragments: {len(fragments)}")
    click.echo()

    click.echo(f"Declarations ({len(partition.declarations)}):")
    for key, value in partition.declarations.items():
        click.echo(f"  {key} = {value!r}")
    click.echo()

    click.echo(f"Pseudo selectors ({len(partition.pseudo_styles)}):")
    for key in partition.pseudo_styles:
        click.echo(f"  {key}")
    click.echo()

    click.echo(f"Media queries ({len(partition.media_queries)}):")
    for key in partition.media_queries:
        click.echo(f"  {key}")
    click.echo()

    # Names cover every nesting depth, not only the top-level blocks.
    click.echo("Descendants:")
    for key, resolved in names.items():
        click.echo(f"  {key} -> {', '.join(resolved)}")
    for block in partition.descendants:
        if not block.names:
            click.echo(f"  {block.key} -> (unreachable)")
