"""
exgen — CLI entrypoint.

Usage:
    exgen --help
    exgen exercise new --source section --chapter 1 --section 1.1 --number 6 \\
        --slug functions-and-relations --output-dir chapters/01
    exgen exercise name --source review --chapter 1 --number 1 --variant a \\
        --slug determine-function
    exgen config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from exgen import __version__
from exgen.core.observability.logging_config import level_from_flags, setup_logging_from_env


@click.group()
@click.version_option(version=__version__, prog_name="exgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to exgen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """exgen — generate exercise documents from a template."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_env(level_from_flags(debug=debug, verbose=verbose, quiet=quiet))


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate exgen.yml and the template it points at."""
    from exgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Config:   {result.config_path or '(defaults)'}")
        click.echo(f"   Prefix:   {result.config.prefix}")
        click.echo(f"   Template: {result.config.resolved_template()}")
        click.echo(f"   Output:   {result.config.output_dir}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


# ── Sub-command groups ─────────────────────────────────────────

from exgen.ui.cli.exercise import exercise  # noqa: E402

cli.add_command(exercise)


if __name__ == "__main__":
    cli()
