"""CLI commands for groupwise."""

from __future__ import annotations

import functools
import logging
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from groupwise.combinatorial import combinations
from groupwise.config import GroupwiseConfig, load_config
from groupwise.errors import GroupwiseError
from groupwise.models import Group
from groupwise.reporters import ConsoleReporter, JSONReporter
from groupwise.scheduling import generate_schedule
from groupwise.storage import GroupStore

console = Console()

FORMATS = ["console", "json"]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report GroupwiseError in red and exit 1 instead of a traceback."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GroupwiseError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            for suggestion in e.suggestions:
                console.print(f"[dim]  - {escape(suggestion)}[/dim]")
            sys.exit(1)

    return wrapper


def _config(ctx: click.Context) -> GroupwiseConfig:
    return ctx.obj["config"]


def _store(ctx: click.Context) -> GroupStore:
    if "store" not in ctx.obj:
        ctx.obj["store"] = GroupStore(_config(ctx).store_path)
    return ctx.obj["store"]


def _emit_schedule(ctx: click.Context, members: list[str], size: int, output_format: str | None) -> None:
    config = _config(ctx)
    schedule = generate_schedule(members, size, coverage_threshold=config.coverage_threshold)

    if (output_format or config.output_format) == "json":
        click.echo(JSONReporter().report_schedule(members, schedule, size))
    else:
        click.echo(ConsoleReporter(color=config.color).report_schedule(members, schedule, size), nl=False)


format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format (default from config)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
@handle_errors
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """groupwise - fair pairs and groups for a roster of members."""
    ctx.ensure_object(dict)

    config_obj = load_config(config)
    if verbose:
        config_obj.verbose = True

    ctx.obj["config"] = config_obj
    setup_logging(config_obj.verbose)


@cli.command()
@click.argument("members", nargs=-1)
@click.option("--size", "-k", type=int, required=True, help="Members per combination")
@format_option
@click.pass_context
def combos(ctx: click.Context, members: tuple[str, ...], size: int, output_format: str | None) -> None:
    """List every combination of SIZE members."""
    config = _config(ctx)
    roster = list(members)
    result = combinations(roster, size)

    if (output_format or config.output_format) == "json":
        click.echo(JSONReporter().report_combinations(roster, result, size))
    else:
        click.echo(ConsoleReporter(color=config.color).report_combinations(roster, result, size), nl=False)


@cli.command()
@click.argument("members", nargs=-1)
@click.option("--size", "-s", type=int, default=None, help="Members per group (default from config)")
@format_option
@click.pass_context
def schedule(ctx: click.Context, members: tuple[str, ...], size: int | None, output_format: str | None) -> None:
    """Generate a round-robin schedule for MEMBERS."""
    _emit_schedule(ctx, list(members), size if size is not None else _config(ctx).default_size, output_format)


@cli.group()
def group() -> None:
    """Manage saved groups."""


@group.command("create")
@click.argument("name")
@click.argument("members", nargs=-1)
@click.pass_context
@handle_errors
def create_group(ctx: click.Context, name: str, members: tuple[str, ...]) -> None:
    """Create a group called NAME with optional MEMBERS."""
    created = _store(ctx).add(Group.create(name, members))
    console.print(f"Created group [bold]{escape(created.name)}[/bold] ({created.id})")


@group.command("list")
@click.pass_context
@handle_errors
def list_groups(ctx: click.Context) -> None:
    """List saved groups."""
    groups = _store(ctx).list_groups()
    if not groups:
        console.print("[dim]No groups yet. Create one with 'groupwise group create NAME'.[/dim]")
        return

    table = Table(title="Groups", title_justify="left")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Members", justify="right")
    table.add_column("Created")
    for g in groups:
        table.add_row(g.id, escape(g.name), str(len(g.members)), g.created_at.strftime("%Y-%m-%d %H:%M"))
    console.print(table)


@group.command("show")
@click.argument("group_id")
@click.pass_context
@handle_errors
def show_group(ctx: click.Context, group_id: str) -> None:
    """Show a group and its members."""
    g = _store(ctx).get(group_id)
    console.print(f"[bold]{escape(g.name)}[/bold] ({g.id})")
    console.print(f"[dim]Created {g.created_at.isoformat()}[/dim]")
    if not g.members:
        console.print("[dim]No members yet.[/dim]")
    for index, member in enumerate(g.members, start=1):
        console.print(f"  {index}. {escape(member)}")


@group.command("add-member")
@click.argument("group_id")
@click.argument("name")
@click.pass_context
@handle_errors
def add_member(ctx: click.Context, group_id: str, name: str) -> None:
    """Add NAME to a group."""
    store = _store(ctx)
    g = store.get(group_id)
    g.add_member(name)
    store.update(g)
    console.print(f"Added {escape(g.members[-1])} to [bold]{escape(g.name)}[/bold] ({len(g.members)} members)")


@group.command("remove-member")
@click.argument("group_id")
@click.argument("index", type=int)
@click.pass_context
@handle_errors
def remove_member(ctx: click.Context, group_id: str, index: int) -> None:
    """Remove the member at 1-based INDEX from a group."""
    store = _store(ctx)
    g = store.get(group_id)
    try:
        removed = g.remove_member(index - 1)
    except IndexError as e:
        raise click.BadParameter(str(e), param_hint="INDEX") from e
    store.update(g)
    console.print(f"Removed {escape(removed)} from [bold]{escape(g.name)}[/bold]")


@group.command("rename")
@click.argument("group_id")
@click.argument("name")
@click.pass_context
@handle_errors
def rename_group(ctx: click.Context, group_id: str, name: str) -> None:
    """Rename a group."""
    store = _store(ctx)
    g = store.get(group_id)
    g.rename(name)
    store.update(g)
    console.print(f"Renamed group to [bold]{escape(g.name)}[/bold]")


@group.command("delete")
@click.argument("group_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@handle_errors
def delete_group(ctx: click.Context, group_id: str, yes: bool) -> None:
    """Delete a group."""
    store = _store(ctx)
    g = store.get(group_id)
    if not yes:
        click.confirm(f"Delete group '{g.name}'? This cannot be undone", abort=True)
    store.delete(g.id)
    console.print(f"Deleted group [bold]{escape(g.name)}[/bold]")


@group.command("schedule")
@click.argument("group_id")
@click.option("--size", "-s", type=int, default=None, help="Members per group (default from config)")
@format_option
@click.pass_context
@handle_errors
def schedule_group(ctx: click.Context, group_id: str, size: int | None, output_format: str | None) -> None:
    """Generate a round-robin schedule for a saved group."""
    g = _store(ctx).get(group_id)
    _emit_schedule(ctx, list(g.members), size if size is not None else _config(ctx).default_size, output_format)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    cli(args=args, prog_name="groupwise")
