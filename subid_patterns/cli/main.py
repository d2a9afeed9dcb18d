"""CLI commands for subid-patterns."""

import json
import logging
import sys
from pathlib import Path

import click

from subid_patterns import (
    VARIABLES,
    PatternRenderer,
    PatternSuggester,
    SubIDDecoder,
    describe_pattern,
    validate as validate_pattern,
)
from subid_patterns.clock import SystemClock
from subid_patterns.config import CONFIG_FILENAME, Config, load_default_config
from subid_patterns.exceptions import ConfigError, SubIDDecodeError
from subid_patterns.random_source import SeededRandomSource

existing_option = click.option(
    "--existing",
    "-e",
    multiple=True,
    help="Pattern already registered by another website (repeatable)",
)
existing_file_option = click.option(
    "--existing-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="File with one registered pattern per line",
)


def _collect_existing(existing: tuple[str, ...], existing_file: Path | None) -> set[str]:
    patterns = set(existing)
    if existing_file is not None:
        for line in existing_file.read_text().splitlines():
            if line.strip():
                patterns.add(line.strip())
    return patterns


@click.group()
@click.version_option(package_name="subid-patterns")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f"Path to {CONFIG_FILENAME} (searched upward from cwd by default)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """subid-patterns - render, validate and suggest Sub-ID patterns."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if config_path is not None:
            config = Config.from_toml(config_path)
        else:
            try:
                config = Config.find_and_load()
            except FileNotFoundError:
                config = load_default_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    ctx.obj = config


@cli.command()
@click.argument("pattern")
@click.option("--count", type=int, default=1, show_default=True, help="Number of Sub-IDs to render")
@click.option("--seed", type=int, help="Seed for reproducible output")
@click.option("--utc", is_flag=True, help="Read date placeholders in UTC")
@click.pass_obj
def render(config: Config, pattern: str, count: int, seed: int | None, utc: bool) -> None:
    """Render Sub-ID(s) from PATTERN."""
    if count < 1:
        click.echo("Error: --count must be at least 1", err=True)
        sys.exit(1)

    renderer = PatternRenderer(
        source=SeededRandomSource(seed) if seed is not None else None,
        clock=SystemClock(utc=True) if utc else None,
        config=config.render,
    )
    for value in renderer.render_batch(pattern, count):
        click.echo(value)


@cli.command()
@click.argument("pattern")
@existing_option
@existing_file_option
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
def validate(
    pattern: str,
    existing: tuple[str, ...],
    existing_file: Path | None,
    quiet: bool,
) -> None:
    """Check that PATTERN is not already registered."""
    result = validate_pattern(pattern, _collect_existing(existing, existing_file))

    if quiet:
        sys.exit(0 if result.valid else 1)

    for warning in result.warnings or []:
        click.echo(f"! {warning}", err=True)

    if result.valid:
        click.echo(f"✓ Pattern is available: {pattern}")
        sys.exit(0)
    else:
        click.echo(f"✗ {result.error}", err=True)
        sys.exit(1)


@cli.command()
@existing_option
@existing_file_option
@click.option("--seed", type=int, help="Seed for the fallback suffix")
@click.pass_obj
def suggest(
    config: Config,
    existing: tuple[str, ...],
    existing_file: Path | None,
    seed: int | None,
) -> None:
    """Suggest a pattern not already registered."""
    suggester = PatternSuggester(
        source=SeededRandomSource(seed) if seed is not None else None,
        config=config.suggestion,
    )
    click.echo(suggester.suggest(_collect_existing(existing, existing_file)))


@cli.command()
@click.argument("pattern")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def describe(pattern: str, output_json: bool) -> None:
    """Explain each segment of PATTERN."""
    segments = describe_pattern(pattern)

    if output_json:
        click.echo(
            json.dumps(
                [{"text": text, "description": description} for text, description in segments],
                indent=2,
            )
        )
        return

    click.echo(f"Pattern: {pattern}")
    for text, description in segments:
        click.echo(f"  {text:<20} {description}")


@cli.command()
def variables() -> None:
    """List insertable placeholder tokens."""
    for variable in VARIABLES:
        click.echo(f"{variable.token:<18} {variable.description}")


@cli.command()
@click.argument("pattern")
@click.argument("value")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def decode(pattern: str, value: str, output_json: bool) -> None:
    """Split VALUE into the placeholder values of PATTERN."""
    decoder = SubIDDecoder(pattern)

    try:
        decoded = decoder.decode(value)

        if output_json:
            click.echo(
                json.dumps(
                    [{"token": token, "value": text} for token, text in decoded.components],
                    indent=2,
                )
            )
        else:
            click.echo(f"Sub-ID: {decoded.raw_value}")
            for token, text in decoded.components:
                click.echo(f"  {token:<20} {text}")

    except SubIDDecodeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILENAME,
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: Path, force: bool) -> None:
    """Write a default configuration file (default: ./subid-patterns.toml)."""
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    load_default_config().to_toml(path)
    click.echo(f"Wrote {path}")


if __name__ == "__main__":
    cli()
