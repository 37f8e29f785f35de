# src/pattern_validation/cli.py
"""
Pattern Validation Command Line Interface (CLI).

This module implements an offline checker for pattern markup using `typer`
and `rich`. It runs the same pre-insert checks as the REST write path,
against a fresh in-memory store, so a pattern file can be vetted before it is
submitted.

Usage
-----
    # Validate a pattern file as a new, published pattern
    $ pattern-validation check pattern.html --title "Hero banner"

    # Show the parsed block tree and how each block classifies
    $ pattern-validation blocks pattern.html
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.tree import Tree

from pattern_validation.core.blocks.parser import parse_blocks
from pattern_validation.core.contracts.block import BlockNode
from pattern_validation.core.contracts.post import WriteRequest
from pattern_validation.core.registry.block_types import BlockTypeRegistry, default_registry
from pattern_validation.core.settings import load_settings
from pattern_validation.core.store.posts import InMemoryPostStore
from pattern_validation.core.validation.emptiness import EmptinessPolicy, is_not_empty_block
from pattern_validation.core.validation.pattern import apply_pre_insert_filters

load_dotenv()

app = typer.Typer(
    help="Pattern Validation: check block pattern content before it is saved.",
    rich_markup_mode="markdown",
)
console = Console()

FileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to a file containing serialized block markup.",
    ),
]


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _label(block: BlockNode, registry: BlockTypeRegistry, policy: EmptinessPolicy) -> str:
    if block.block_name is None:
        return f"[red]freeform[/red] [dim]{escape(repr(block.inner_html.strip()[:40]))}[/dim]"
    if not registry.is_registered(block.block_name):
        return f"[red]{block.block_name}[/red] [dim](unregistered)[/dim]"
    if is_not_empty_block(block, registry, policy):
        return f"[green]{block.block_name}[/green] NOT EMPTY"
    return f"[yellow]{block.block_name}[/yellow] EMPTY"


def _add_branch(
    tree: Tree, block: BlockNode, registry: BlockTypeRegistry, policy: EmptinessPolicy
) -> None:
    pending = [(tree, block)]
    while pending:
        parent, node = pending.pop()
        branch = parent.add(_label(node, registry, policy))
        pending.extend((branch, child) for child in reversed(node.inner_blocks))


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def check(
    file: FileArgument,
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Pattern title to validate alongside the content."),
    ] = None,
    status: Annotated[
        str,
        typer.Option("--status", "-s", help="Post status (drafts skip the title check)."),
    ] = "publish",
) -> None:
    """
    Validate a pattern file as a new pattern.

    Exits with code 0 when the pattern would be accepted and 1 when it would
    be rejected.
    """
    config = load_settings()
    request = WriteRequest(title=title, status=status, content=file.read_text(encoding="utf-8"))

    outcome = apply_pre_insert_filters(
        request.to_prepared_post(),
        request,
        registry=default_registry(),
        store=InMemoryPostStore(),
        policy=EmptinessPolicy.from_settings(config),
        draft_statuses=config.draft_statuses,
    )

    if outcome.is_ok():
        console.print(
            Panel.fit(f"[bold green]Accepted[/bold green] {file.name}", border_style="green")
        )
        return

    failure = outcome.unwrap_err()
    console.print(
        Panel.fit(
            f"[bold red]Rejected[/bold red] {file.name}\n"
            f"[dim]{failure.code.value}[/dim]: {failure.message}",
            border_style="red",
        )
    )
    raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def blocks(file: FileArgument) -> None:
    """
    Print the parsed block tree with each block's emptiness classification.
    """
    registry = default_registry()
    policy = EmptinessPolicy.from_settings(load_settings())
    content = file.read_text(encoding="utf-8").replace("\n\n", "")

    tree = Tree(f"[bold]{file.name}[/bold]")
    for block in parse_blocks(content):
        _add_branch(tree, block, registry, policy)
    console.print(tree)


if __name__ == "__main__":
    app()
