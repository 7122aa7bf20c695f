#!/usr/bin/env python3
"""
Font Catalog CLI
================

Commands to validate, query and regenerate the font catalog.
"""

import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError as PydanticValidationError

from .core.config import CatalogConfig, setup_logging
from .core.exceptions import CatalogError
from .fonts.catalog import (
    catalog_json_schema,
    families_by_format,
    find_family,
    load_catalog,
    summarize_catalog,
)
from .fonts.chunks import write_chunks
from .fonts.css import font_face_css
from .fonts.scanner import scan_fonts_directory, write_catalog_document
from .fonts.validator import missing_files, validate_catalog

logger = logging.getLogger(__name__)


def _format_size(size_bytes: int) -> str:
    return f"{size_bytes // 1024}KB"


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to catalog configuration YAML file",
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path),
    help="Catalog JSON file (defaults to the packaged catalog)",
)
@click.pass_context
def cli(ctx, verbose, config_path, catalog_path):
    """Font Catalog CLI."""
    try:
        config = CatalogConfig.from_env_and_yaml(yaml_path=config_path)
    except (CatalogError, PydanticValidationError) as e:
        raise click.ClickException(str(e))

    if catalog_path:
        config.catalog_path = catalog_path

    setup_logging(config.log_level)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.obj = config


def _load(config: CatalogConfig):
    try:
        return load_catalog(config.catalog_path)
    except CatalogError as e:
        logger.error(f"Failed to load catalog: {e}")
        sys.exit(1)


@cli.command()
@click.option(
    "--base-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Also check that variant files exist under this directory",
)
@click.pass_obj
def validate(config, base_dir):
    """Validate the catalog schema and invariants."""
    catalog = _load(config)
    result = validate_catalog(catalog)

    if base_dir:
        for path in missing_files(catalog, base_dir):
            result.add_warning(f"Missing font file: {path}")

    for warning in result.warnings:
        click.echo(f"WARNING: {warning}")
    click.echo(f"Catalog OK: {result.family_count} families")


@cli.command()
@click.argument("family_name")
@click.option("--ignore-case", "-i", is_flag=True, help="Case-insensitive lookup")
@click.pass_obj
def info(config, family_name, ignore_case):
    """Show detailed information about a font family."""
    catalog = _load(config)
    family = find_family(catalog, family_name, case_sensitive=not ignore_case)

    if family is None:
        click.echo(f"Font family not found: {family_name}", err=True)
        sys.exit(1)

    click.echo(f"Family: {family.display_name}")
    click.echo(f"   Key: {family.family_name}")
    click.echo(f"   Fonts: {family.font_count}")
    click.echo(f"   Total size: {_format_size(family.total_size)}")
    click.echo(f"   Formats: {', '.join(fmt.value for fmt in family.formats) or '-'}")
    click.echo(f"   Default font: {'yes' if family.has_default_font else 'no'}")
    if family.license_file:
        click.echo(f"   License: {family.license_file}")
    for variant in family.variants:
        click.echo(f"   - {variant} {_format_size(variant.file_size)}")


@cli.command(name="list")
@click.option("--format", "-f", "fmt", help="Only families with this format (otf, ttf, ...)")
@click.pass_obj
def list_families(config, fmt):
    """List font families."""
    catalog = _load(config)
    families = families_by_format(catalog, fmt) if fmt else list(catalog)

    click.echo(f"Found {len(families)} font families:")
    for family in families:
        click.echo(f"   {family.family_name} ({family.font_count} fonts)")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_obj
def summary(config, as_json):
    """Show aggregate catalog statistics."""
    metadata = summarize_catalog(_load(config))

    if as_json:
        click.echo(
            json.dumps(metadata.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2)
        )
        return

    click.echo(f"Families: {metadata.family_count}")
    click.echo(f"Font files: {metadata.total_fonts}")
    click.echo(f"Total size: {metadata.total_file_size / (1024 * 1024):.2f} MB")
    formats = ", ".join(f"{fmt} ({count})" for fmt, count in metadata.format_summary.items())
    click.echo(f"Formats: {formats or '-'}")
    weights = ", ".join(f"{weight}: {count}" for weight, count in metadata.weight_summary.items())
    click.echo(f"Weights: {weights or '-'}")


@cli.command()
def schema():
    """Print the JSON Schema of the catalog."""
    click.echo(json.dumps(catalog_json_schema(), indent=2))


@cli.command()
@click.argument("fonts_dir", required=False, type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output JSON path")
@click.option("--base64", "embed", is_flag=True, help="Embed fonts as data URIs")
@click.pass_obj
def scan(config, fonts_dir, output, embed):
    """Generate a catalog from a directory of family folders."""
    fonts_dir = fonts_dir or config.fonts_dir
    output = output or config.output_path
    embed = embed or config.embed_fonts

    try:
        document = scan_fonts_directory(fonts_dir, embed=embed)
        write_catalog_document(document, output)
    except CatalogError as e:
        logger.exception(f"Catalog generation failed: {e}")
        sys.exit(1)

    metadata = document.metadata
    click.echo(f"Generated {output} with {metadata.family_count} font families")
    click.echo(f"Total font files: {metadata.total_fonts}")
    click.echo(f"Total size: {metadata.total_file_size / (1024 * 1024):.2f} MB")


@cli.command()
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Chunk directory")
@click.pass_obj
def split(config, output):
    """Split the catalog into an index and alphabetical chunks."""
    catalog = _load(config)
    out_dir = output or config.chunk_dir
    written = write_chunks(catalog, out_dir)
    click.echo(f"Wrote {len(written)} files to {out_dir}")


@cli.command()
@click.argument("family_name")
@click.option("--base-url", help="Prefix for relative font paths")
@click.pass_obj
def css(config, family_name, base_url):
    """Print @font-face rules for a font family."""
    catalog = _load(config)
    family = find_family(catalog, family_name, case_sensitive=False)

    if family is None:
        click.echo(f"Font family not found: {family_name}", err=True)
        sys.exit(1)

    click.echo(font_face_css(family, base_url if base_url is not None else config.base_url), nl=False)


if __name__ == "__main__":
    cli()
