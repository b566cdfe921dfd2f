"""Sildish CLI - Main entry point."""

import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from sildish.catalog.phonemes import CLUSTERS, PHONEMES, find_phoneme
from sildish.models import GraphemeKind, code_points
from sildish.qc.catalog_sanity import check_catalog
from sildish.transliterate import get_transliteration_tree, transliterate
from sildish.utils.io import read_text_lines, write_json, write_text_lines
from sildish.utils.log import log_with_context, setup_logging
from sildish.utils.schema import validate_catalog


# Root directory
ROOT_DIR = Path(__file__).parent.parent

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {"level": "WARNING", "format": "pretty", "file": None},
    "paths": {"catalog": "build/catalog.json", "schemas": "etc/schemas"},
    "transliterate": {"encoding": "utf-8"},
}


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """Load settings.yaml, filling in defaults for missing sections."""
    settings_path = settings_path or ROOT_DIR / "etc" / "settings.yaml"
    settings = {section: dict(values) for section, values in DEFAULT_SETTINGS.items()}
    if not settings_path.exists():
        return settings

    with settings_path.open(encoding="utf-8") as f:
        loaded: dict[str, Any] = yaml.safe_load(f) or {}

    for section, values in loaded.items():
        if isinstance(values, dict):
            settings.setdefault(section, {}).update(values)
        else:
            settings[section] = values
    return settings


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to settings.yaml (default: etc/settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Roman-to-Sildish transliteration toolkit."""
    settings = load_settings(settings_path)

    log_level = "DEBUG" if verbose else settings["logging"]["level"]
    log_format = settings["logging"].get("format", "pretty")
    log_file = settings["logging"].get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=ROOT_DIR / log_file if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command(name="transliterate")
@click.argument("text", nargs=-1)
@click.option(
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Transliterate a text file line by line",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the result to a file instead of stdout",
)
@click.pass_context
def transliterate_command(
    ctx: click.Context,
    text: tuple[str, ...],
    input_path: Path | None,
    output_path: Path | None,
) -> None:
    """Transliterate Roman TEXT (or a file, or stdin) to Sildish."""
    logger = ctx.obj["logger"]
    encoding = ctx.obj["settings"]["transliterate"].get("encoding", "utf-8")

    try:
        if text and input_path:
            raise click.UsageError("Pass TEXT or --input, not both")

        if text:
            lines = [" ".join(text)]
        elif input_path:
            lines = list(read_text_lines(input_path, encoding=encoding))
            logger.info(f"Read {len(lines)} lines from {input_path}")
        else:
            lines = [line.rstrip("\r\n") for line in sys.stdin]

        results = [
            transliterate(line)
            for line in tqdm(lines, desc="Transliterating", unit="line", disable=len(lines) < 100)
        ]

        if output_path:
            count = write_text_lines(output_path, results, encoding=encoding)
            log_with_context(
                logger, "info", "Wrote transliteration", path=str(output_path), lines=count
            )
            click.echo(f"Transliterated {count} lines to {output_path}")
        else:
            for line in results:
                click.echo(line)

    except click.UsageError:
        raise
    except Exception as e:
        logger.error(f"Transliteration failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.group()
def catalog() -> None:
    """Phoneme catalog commands."""
    pass


@catalog.command(name="list")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in GraphemeKind], case_sensitive=False),
    help="Only list phonemes of this kind",
)
@click.option("--clusters/--no-clusters", default=True, help="Include clusters")
def list_phonemes(kind: str | None, clusters: bool) -> None:
    """List catalog phonemes with IPA and standard glyphs."""
    entries = list(PHONEMES) + (list(CLUSTERS) if clusters else [])
    if kind:
        entries = [e for e in entries if e.kind.value == kind.upper()]

    for entry in entries:
        standard = " ".join(code_points(entry.graphemes.standard))
        click.echo(
            f"{entry.roman:<4s} /{entry.pronunciation}/".ljust(12)
            + f"{entry.kind.value:<24s}{entry.graphemes.standard}  {standard}"
        )
    click.echo(f"\n{len(entries)} entries")


@catalog.command()
@click.argument("roman")
def show(roman: str) -> None:
    """Show every glyph variant of the phoneme spelled ROMAN."""
    entry = find_phoneme(roman.lower())
    if entry is None:
        click.echo(f"Error: '{roman}' is not a Sildish phoneme or cluster", err=True)
        sys.exit(1)

    click.echo(f"Roman: {entry.roman}")
    click.echo(f"IPA:   {entry.pronunciation}")
    click.echo(f"Kind:  {entry.kind.value}")
    for name, glyph in entry.graphemes.variants().items():
        click.echo(f"  {name:<22s}{glyph}  {' '.join(code_points(glyph))}")


@catalog.command()
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: paths.catalog from settings)",
)
@click.pass_context
def export(ctx: click.Context, output_path: Path | None) -> None:
    """Write the phoneme catalog as JSON."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    try:
        from sildish.export.catalog import build_catalog

        catalog_path = output_path or ROOT_DIR / settings["paths"]["catalog"]
        catalog_data = build_catalog(logger)

        schema_dir = ROOT_DIR / settings["paths"]["schemas"]
        if schema_dir.exists():
            errors = validate_catalog(catalog_data, schema_dir)
            if errors:
                for error in errors:
                    click.echo(f"  ERROR: {error}", err=True)
                raise ValueError(f"Catalog does not match its schema ({len(errors)} errors)")
        else:
            logger.warning(f"Schema directory not found: {schema_dir}, skipping validation")

        write_json(catalog_path, catalog_data)
        click.echo(f"Catalog written to {catalog_path}")

    except Exception as e:
        logger.error(f"Catalog export failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@catalog.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Check the catalog and build the transliteration tree."""
    logger: logging.Logger = ctx.obj["logger"]

    result = check_catalog(PHONEMES, CLUSTERS, logger)
    for warning in result.warnings:
        click.echo(f"  WARNING: {warning}")
    if not result.valid:
        for error in result.errors:
            click.echo(f"  ERROR: {error}", err=True)
        sys.exit(1)

    try:
        get_transliteration_tree()
    except Exception as e:
        logger.error(f"Tree construction failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Catalog OK: {result.entries} entries")


@cli.command()
@click.option("--prefix", default="", help="Only show the subtree below this Roman prefix")
def tree(prefix: str) -> None:
    """Print the transliteration tree as an outline."""
    node = get_transliteration_tree()
    for char in prefix.lower():
        branches = getattr(node, "branches", {})
        if char not in branches:
            click.echo(f"Error: no entry starts with '{prefix}'", err=True)
            sys.exit(1)
        node = branches[char]
    click.echo(node.describe(indent="  "), nl=False)


if __name__ == "__main__":
    cli()
