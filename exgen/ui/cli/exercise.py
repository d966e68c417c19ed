"""
CLI commands for exercise generation.

Thin wrappers over ``exgen.core.services.generators.exercise``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import click

from exgen.core.errors import ExerciseError
from exgen.core.models.exercise import SourceKind


def _metadata_options(f: Callable) -> Callable:
    """Attach the exercise metadata options shared by every command."""
    options = [
        click.option(
            "--source",
            type=click.Choice([k.value for k in SourceKind]),
            required=True,
            help="Where the exercise comes from: a numbered section or a chapter review.",
        ),
        click.option("--chapter", type=int, required=True, help="Chapter number."),
        click.option("--section", default=None, help="Section id like 1.1 (required for --source section)."),
        click.option("--number", type=int, required=True, help="Exercise number."),
        click.option("--variant", default=None, help="Sub-part letter, e.g. a or (a)."),
        click.option("--slug", required=True, help="Short identifier, e.g. functions-and-relations."),
        click.option("--title", default=None, help="Display title (default: derived from slug)."),
        click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON."),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _fail(err: ExerciseError, as_json: bool) -> None:
    """Report an error and exit 1."""
    if as_json:
        click.echo(json.dumps({"ok": False, **err.to_dict()}, indent=2))
    else:
        click.secho(f"❌ {err}", fg="red")
    sys.exit(1)


def _load_config(ctx: click.Context, **overrides: Any):
    """Load exgen.yml (explicit or discovered) and apply CLI overrides."""
    from exgen.core.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    updates = {k: v for k, v in overrides.items() if v is not None}
    if updates:
        config = config.model_copy(update=updates)
    return config


def _build_metadata(params: dict[str, Any]):
    from exgen.core.services.generators.exercise import build_metadata

    return build_metadata(
        source=params["source"],
        chapter=params["chapter"],
        section=params["section"],
        number=params["number"],
        variant=params["variant"],
        slug=params["slug"],
        title=params["title"],
    )


@click.group("exercise")
def exercise() -> None:
    """Exercise — create new exercise documents from the template."""


# ── Generate ────────────────────────────────────────────────────


@exercise.command("new")
@_metadata_options
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Template file (default: from exgen.yml, else the bundled template).",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write into (default: from exgen.yml, else the current directory; created if missing).",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.option("--dry-run", is_flag=True, help="Render and report, but write nothing.")
@click.pass_context
def new(
    ctx: click.Context,
    template_path: Path | None,
    output_dir: Path | None,
    force: bool,
    dry_run: bool,
    **params: Any,
) -> None:
    """Create a new exercise file from the template."""
    from exgen.core.services.generators.exercise import generate_exercise, plan_exercise

    as_json = params.pop("as_json")

    try:
        config = _load_config(
            ctx,
            template_path=template_path,
            output_dir=output_dir,
            overwrite=True if force else None,
        )
        meta = _build_metadata(params)
        if dry_run:
            result = plan_exercise(meta, config)
        else:
            result = generate_exercise(meta, config)
    except ExerciseError as e:
        _fail(e, as_json)
        return

    if as_json:
        data = {"ok": True, "dry_run": dry_run, **result.model_dump()}
        if not dry_run:
            data.pop("content")
        click.echo(json.dumps(data, indent=2))
        return

    if dry_run:
        click.secho(f"📝 Would write: {result.path}", fg="cyan", bold=True)
        click.echo()
        click.echo(result.content)
        return

    click.secho(f"✅ Created {result.path}", fg="green", bold=True)


@exercise.command("name")
@_metadata_options
@click.pass_context
def name(ctx: click.Context, **params: Any) -> None:
    """Print the canonical filename for an exercise, without creating it."""
    from exgen.core.services.naming import exercise_fields, exercise_filename, validate_metadata

    as_json = params.pop("as_json")

    try:
        config = _load_config(ctx)
        meta = _build_metadata(params)
        validate_metadata(meta)
        filename = exercise_filename(meta, prefix=config.prefix)
        fields = exercise_fields(meta)
    except ExerciseError as e:
        _fail(e, as_json)
        return

    if as_json:
        click.echo(json.dumps({"ok": True, "filename": filename, "fields": fields.model_dump()}, indent=2))
        return

    click.echo(filename)
