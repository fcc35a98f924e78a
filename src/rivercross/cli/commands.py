"""CLI commands for rivercross."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import NoReturn

import click

from rivercross.config import SearchConfig, load_config
from rivercross.errors import ValidationError
from rivercross.exploration import Agent, SearchResult, Strategy
from rivercross.reporting import ConsoleReporter, JSONReporter, Reporter
from rivercross.world import CrossingState, GoalMode, Rules, parse_state

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2

STRATEGY_CHOICES = [s.value for s in Strategy]
GOAL_CHOICES = [g.value for g in GoalMode]


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _fail(error: ValidationError, verbose: bool) -> NoReturn:
    click.echo(error.format_verbose() if verbose else str(error), err=True)
    sys.exit(EXIT_INVALID)


def _resolve_rules(config: SearchConfig, goal: str | None) -> Rules:
    rules = config.rules()
    if goal is not None:
        rules = dataclasses.replace(rules, goal=GoalMode(goal))
    return rules


def _resolve_state(ctx: click.Context, state_text: str | None, rules: Rules) -> CrossingState:
    config: SearchConfig = ctx.obj["config"]
    text = state_text if state_text is not None else config.initial_state
    try:
        return parse_state(text, rules=rules)
    except ValidationError as e:
        _fail(e, ctx.obj["verbose"])


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", type=click.Path(exists=True), help="Path to config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """rivercross - Missionaries and cannibals state-space search."""
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
    except ValidationError as e:
        _fail(e, verbose)
    if verbose:
        config_obj.verbose = True

    ctx.obj["config"] = config_obj
    ctx.obj["verbose"] = config_obj.verbose

    setup_logging(config_obj.verbose)


@cli.command()
@click.argument("state", required=False)
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(STRATEGY_CHOICES, case_sensitive=False),
    default=None,
    help="Search strategy (default from config: bfs)",
)
@click.option(
    "--goal",
    "-g",
    type=click.Choice(GOAL_CHOICES, case_sensitive=False),
    default=None,
    help="missionaries: all missionaries on the left bank; everyone: the whole party",
)
@click.option("--max-expansions", type=click.IntRange(min=1), default=None, help="Stop after N expansions")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in text output")
@click.pass_context
def solve(
    ctx: click.Context,
    state: str | None,
    strategy: str | None,
    goal: str | None,
    max_expansions: int | None,
    output_format: str,
    no_color: bool,
) -> None:
    """Search for a crossing plan from STATE.

    STATE is five tokens, e.g. "0 0 3 3 right". Quote it on the shell.
    """
    config: SearchConfig = ctx.obj["config"]
    rules = _resolve_rules(config, goal)
    initial = _resolve_state(ctx, state, rules)

    agent = Agent(
        initial,
        strategy=strategy or config.strategy,
        max_expansions=max_expansions if max_expansions is not None else config.max_expansions,
    )
    result = agent.run()

    reporter: Reporter
    if output_format == "json":
        reporter = JSONReporter()
    else:
        reporter = ConsoleReporter(color=not no_color)
    click.echo(reporter.report(result), nl=output_format == "json")

    sys.exit(EXIT_FOUND if result.found else EXIT_NOT_FOUND)


@cli.command()
@click.argument("state", required=False)
@click.option(
    "--goal",
    "-g",
    type=click.Choice(GOAL_CHOICES, case_sensitive=False),
    default=None,
    help="Goal mode for every run",
)
@click.pass_context
def compare(ctx: click.Context, state: str | None, goal: str | None) -> None:
    """Run every strategy from STATE and compare them."""
    from rich.console import Console
    from rich.table import Table

    config: SearchConfig = ctx.obj["config"]
    rules = _resolve_rules(config, goal)
    initial = _resolve_state(ctx, state, rules)

    results: list[SearchResult] = [
        Agent(initial, strategy=strategy, max_expansions=config.max_expansions).run()
        for strategy in Strategy
    ]

    table = Table(title=f"Strategies from {initial.canonical_key()!r}")
    table.add_column("Strategy", style="cyan")
    table.add_column("Status")
    table.add_column("Moves", justify="right")
    table.add_column("Visited", justify="right")
    table.add_column("Generated", justify="right")
    table.add_column("ms", justify="right")

    for result in results:
        status_style = "green" if result.found else "red"
        table.add_row(
            result.strategy.value,
            f"[{status_style}]{result.status.value}[/{status_style}]",
            str(result.move_count) if result.found else "-",
            str(result.states_visited),
            str(result.states_generated),
            f"{result.duration_ms:.2f}",
        )

    Console().print(table)
    sys.exit(EXIT_FOUND if any(r.found for r in results) else EXIT_NOT_FOUND)


@cli.command()
@click.argument("state")
@click.option(
    "--goal",
    "-g",
    type=click.Choice(GOAL_CHOICES, case_sensitive=False),
    default=None,
    help="Goal mode used to flag goal states",
)
@click.pass_context
def successors(ctx: click.Context, state: str, goal: str | None) -> None:
    """List every legal crossing from STATE and where it leads."""
    config: SearchConfig = ctx.obj["config"]
    rules = _resolve_rules(config, goal)
    current = _resolve_state(ctx, state, rules)

    click.echo(f"From {current.canonical_key()!r} (boat on the {current.boat.value}):")
    for load, child in current.iter_moves():
        if isinstance(child, Exception):
            click.echo(f"  {load.cannibals}C {load.missionaries}M -> invalid: {child}")
            continue
        flags = []
        if child.is_failure():
            flags.append("failure")
        if child.is_goal():
            flags.append("goal")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        click.echo(f"  {child.describe_move_from(current)} -> {child.canonical_key()}{suffix}")


__all__ = ["cli", "setup_logging"]
