"""CLI for inspecting and validating SDK options."""

import click
import yaml
from dotenv import load_dotenv

from core.config.defaults import ENVIRONMENTS
from core.config.exceptions import ConfigError
from core.config.loader import OptionsLoader
from core.config.merger import merge_options
from core.config.validator import validate_options
from core.utils.logging import setup_logging

load_dotenv()


def parse_assignments(assignments: tuple[str, ...]) -> dict:
    """
    Turn ("media.video=true", "log_level=debug") into a nested options dict.

    Values are parsed as YAML scalars, so "true" becomes True and "5" becomes 5.
    """
    overrides: dict = {}
    for item in assignments:
        if "=" not in item:
            raise click.BadParameter(f"Expected key=value, got '{item}'", param_hint="--set")

        path, raw = item.split("=", 1)
        value = yaml.safe_load(raw) if raw else ""

        for key in reversed(path.split(".")):
            value = {key: value}
        merge_options(overrides, value)

    return overrides


@click.group()
@click.version_option(version="1.0.0", prog_name="webrtc-sdk")
@click.option("--log-level", default="warn", help="Log level (debug/log/info/warn/error)")
def cli(log_level: str):
    """WebRTC SDK CLI - inspect and validate client options."""
    setup_logging(level=log_level)


@cli.command()
@click.option("--file", "-f", "config_file", type=click.Path(), default=None, help="YAML options file")
@click.option("--set", "-s", "assignments", multiple=True, help="Override, e.g. media.video=true")
def config(config_file: str, assignments: tuple[str, ...]):
    """Show merged options."""
    loader = OptionsLoader(config_file=config_file)

    try:
        options = loader.load(parse_assignments(assignments))
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if options.get("access_token"):
        options["access_token"] = "********"

    click.echo(yaml.safe_dump(options, sort_keys=False), nl=False)


@cli.command()
@click.option("--file", "-f", "config_file", type=click.Path(), default=None, help="YAML options file")
def validate(config_file: str):
    """Validate options from file and environment."""
    loader = OptionsLoader(config_file=config_file)

    try:
        options = validate_options(loader.load())
    except ConfigError as e:
        click.echo(f"✗ Invalid options: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✓ Options valid (environment: {options['environment']})")


@cli.command()
def environments():
    """List known environments."""
    click.echo(f"\n{'='*60}")
    click.echo("Known Environments")
    click.echo(f"{'='*60}\n")

    for name in ENVIRONMENTS:
        click.echo(f"  • {name}")

    click.echo("\nUsage: webrtc-sdk config --set environment=<name>")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
