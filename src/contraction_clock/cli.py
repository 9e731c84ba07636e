"""
Command-line interface for the contraction clock.

Provides commands for timing contractions, checking the 5-1-1 rule, viewing
the timeline, and managing configuration and logs.
"""

import logging
import time

from collections.abc import Callable
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Any

import click

from contraction_clock.analysis.rules import AVAILABLE_RULES
from contraction_clock.config import (
    get_config_path,
    get_default_intensity,
    get_follow_mode,
    get_rule_name,
    load_config,
    set_rule_name,
    unset_rule_name,
)
from contraction_clock.constants import SessionConstants as SC
from contraction_clock.database.repository import SessionRepository
from contraction_clock.database.session import init_database
from contraction_clock.logging_config import get_log_path, list_log_files, setup_logging
from contraction_clock.render import AsciiTimelineRenderer, render_log, render_status
from contraction_clock.service import ClockService
from contraction_clock.utils.clock import now_ms
from contraction_clock.utils.formatting import format_duration, format_time

logger = logging.getLogger(__name__)

try:
    __version__ = get_version("contraction-clock")
except PackageNotFoundError:
    __version__ = "dev"


def get_service(ctx: click.Context) -> ClockService:
    """
    Build the session service for this invocation.

    ``ctx.obj`` may carry a ``clock`` callable (used by tests) and the
    ``db`` path chosen on the command group.
    """
    obj: dict[str, Any] = ctx.ensure_object(dict)
    init_database(obj.get("db"))

    clock: Callable[[], int] = obj.get("clock", now_ms)
    try:
        return ClockService(
            SessionRepository(),
            clock=clock,
            rule_name=get_rule_name(),
            default_intensity=get_default_intensity(),
        )
    except ValueError as e:
        raise click.ClickException(
            f"{e}. Fix with: contraction-clock config set-rule <name>"
        ) from e


@click.group()
@click.version_option(__version__, prog_name="contraction-clock")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--db", type=click.Path(), help="Database path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, db: str | None) -> None:
    """Contraction Clock: time contractions and track the 5-1-1 rule"""
    setup_logging(verbose=verbose)
    obj = ctx.ensure_object(dict)
    if db:
        obj["db"] = Path(db)


# ============================================================================
# Timing Commands
# ============================================================================


@cli.command()
@click.pass_context
def start(ctx: click.Context) -> None:
    """Start timing a contraction."""
    service = get_service(ctx)
    active = service.load().in_progress
    if active is not None:
        click.echo(
            f"A contraction is already in progress "
            f"(since {format_time(active.started_at)})"
        )
        return

    active = service.begin()
    click.echo(f"● Contraction started at {format_time(active.started_at)}")


@cli.command()
@click.pass_context
def stop(ctx: click.Context) -> None:
    """Stop timing the current contraction."""
    service = get_service(ctx)
    if not service.load().is_active:
        click.echo("No contraction in progress.")
        return

    event = service.end()
    if event is None:
        click.echo("Contraction shorter than 1s discarded.")
        return

    click.echo(
        f"✓ Recorded contraction: {format_duration(event.duration)} "
        f"at intensity {event.intensity_level}/10"
    )


@cli.command()
@click.pass_context
def toggle(ctx: click.Context) -> None:
    """Start a contraction if idle, otherwise stop the current one."""
    if get_service(ctx).load().is_active:
        ctx.invoke(stop)
    else:
        ctx.invoke(start)


@cli.command()
@click.argument("level", type=click.IntRange(SC.INTENSITY_MIN, SC.INTENSITY_MAX))
@click.pass_context
def intensity(ctx: click.Context, level: int) -> None:
    """Set intensity (1-10) for contractions recorded from now on."""
    get_service(ctx).set_intensity(level)
    click.echo(f"Intensity: {level}/10")


@cli.command()
@click.confirmation_option(prompt="Clear the whole session?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Clear all recorded contractions."""
    get_service(ctx).clear()
    click.echo("✓ Session cleared")


# ============================================================================
# Display Commands
# ============================================================================


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show the rule status and session statistics."""
    service = get_service(ctx)
    click.echo(render_status(service.frame(), service.rule))


@cli.command("log")
@click.pass_context
def show_log(ctx: click.Context) -> None:
    """Show the contraction log, newest first."""
    click.echo(render_log(get_service(ctx).frame()))


@cli.command()
@click.option("--width", "-w", type=click.IntRange(20), default=80, help="Chart width")
@click.option("--height", type=click.IntRange(3), default=11, help="Chart height")
@click.option(
    "--follow/--no-follow",
    default=None,
    help="Keep the latest contraction in view (default from config)",
)
@click.pass_context
def chart(ctx: click.Context, width: int, height: int, follow: bool | None) -> None:
    """Draw the contraction timeline."""
    if follow is None:
        follow = get_follow_mode()
    renderer = AsciiTimelineRenderer(width=width, height=height)
    frame = get_service(ctx).frame(
        viewport_width=renderer.viewport_width(), follow=follow
    )
    click.echo(renderer.render(frame))


@cli.command()
@click.option(
    "--interval-ms",
    type=click.IntRange(10),
    default=SC.TICK_MS,
    help="Refresh interval in milliseconds",
)
@click.option("--width", "-w", type=click.IntRange(20), default=80, help="Chart width")
@click.option("--ticks", type=click.IntRange(1), help="Stop after N refreshes")
@click.pass_context
def watch(ctx: click.Context, interval_ms: int, width: int, ticks: int | None) -> None:
    """Live status and timeline, refreshed every tick until Ctrl+C."""
    service = get_service(ctx)
    renderer = AsciiTimelineRenderer(width=width)
    follow = get_follow_mode()

    count = 0
    try:
        while ticks is None or count < ticks:
            frame = service.frame(viewport_width=renderer.viewport_width(), follow=follow)
            click.clear()
            click.echo(render_status(frame, service.rule))
            click.echo("")
            click.echo(renderer.render(frame))
            count += 1
            if ticks is None or count < ticks:
                time.sleep(interval_ms / 1000)
    except KeyboardInterrupt:
        click.echo("")
    logger.debug(f"watch stopped after {count} ticks")


# ============================================================================
# Configuration Commands
# ============================================================================


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command("set-rule")
@click.argument("name", type=click.Choice(sorted(AVAILABLE_RULES)))
def set_rule_cmd(name: str) -> None:
    """Set the timing rule used for evaluation."""
    set_rule_name(name)
    click.echo(f"✓ Rule: {AVAILABLE_RULES[name].title}")
    click.echo(f"  Config: {get_config_path()}")


@config.command("unset-rule")
def unset_rule_cmd() -> None:
    """Remove the rule setting (back to 5-1-1)."""
    current = get_rule_name()
    if current:
        unset_rule_name()
        click.echo(f"✓ Removed rule setting: {current}")
    else:
        click.echo("No rule was configured.")


@config.command("show")
def show_config_cmd() -> None:
    """Show all configuration settings."""
    config_path = get_config_path()
    if not config_path.exists():
        click.echo(f"No config file: {config_path}")
        return

    click.echo(f"Config file: {config_path}\n")
    config_data = load_config()
    if not config_data:
        click.echo("Configuration is empty.")
        return

    click.echo("Settings:")
    for section, values in config_data.items():
        click.echo(f"  [{section}]")
        if isinstance(values, dict):
            for key, value in values.items():
                click.echo(f"    {key} = {value!r}")


# ============================================================================
# Log Commands
# ============================================================================


@cli.group()
def logs() -> None:
    """Log file management commands."""
    pass


@logs.command("path")
def logs_path() -> None:
    """Show log file location."""
    log_path = get_log_path()
    click.echo(f"Log file: {log_path}")

    if log_path.exists():
        size_mb = log_path.stat().st_size / (1024 * 1024)
        click.echo(f"Size: {size_mb:.2f} MB")


@logs.command("clear")
@click.confirmation_option(prompt="Are you sure you want to delete all log files?")
def logs_clear() -> None:
    """Delete all log files."""
    removed_count = 0
    for log_file in list_log_files():
        try:
            log_file.unlink()
            removed_count += 1
        except OSError as e:
            click.echo(f"Failed to remove {log_file}: {e}", err=True)

    if removed_count > 0:
        click.echo(f"Removed {removed_count} log file(s)")
    else:
        click.echo("No log files to remove")


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
