"""Catalog Generator
=================

Scans a ``fonts/`` directory whose immediate subfolders are font families and
builds a catalog document from the files it finds. Weight and style come from
file names only; font tables are never parsed.
"""

import base64
import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import FontsDirectoryNotFoundError, ScanError
from .catalog import summarize_catalog
from .models import (
    DEFAULT_WEIGHT,
    CatalogDocument,
    FamilyRecord,
    FontFormat,
    FontStyle,
    VariantRecord,
)
from .validator import FONTS_ROOT, folder_key

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {f".{fmt.value}" for fmt in FontFormat}

# Longer names first so "extrabold" is not read as "bold"
WEIGHT_KEYWORDS = {
    "extrablack": 950,
    "ultrablack": 950,
    "extralight": 200,
    "ultralight": 200,
    "extrabold": 800,
    "ultrabold": 800,
    "semibold": 600,
    "demibold": 600,
    "hairline": 100,
    "regular": 400,
    "medium": 500,
    "normal": 400,
    "light": 300,
    "black": 900,
    "heavy": 900,
    "thin": 100,
    "book": 400,
    "bold": 700,
}

_NUMERIC_WEIGHT = re.compile(r"[-_](\d{3})[-_.]")


def guess_weight(filename: str) -> int:
    """
    Guess the numeric weight of a font from its file name.

    A three-digit weight between separators (``OpenSans-600.otf``) wins;
    otherwise a weight keyword next to ``-`` or ``_`` is used. Defaults to 400.
    """
    lower = filename.lower()

    match = _NUMERIC_WEIGHT.search(lower)
    if match:
        weight = int(match.group(1))
        if 100 <= weight <= 950:
            return weight

    for keyword, weight in WEIGHT_KEYWORDS.items():
        if (
            f"-{keyword}" in lower
            or f"_{keyword}" in lower
            or f"{keyword}-" in lower
            or f"{keyword}_" in lower
            or f" {keyword} " in lower
        ):
            return weight

    return DEFAULT_WEIGHT


def guess_style(filename: str) -> FontStyle:
    lower = filename.lower()
    if "italic" in lower:
        return FontStyle.ITALIC
    if "oblique" in lower:
        return FontStyle.OBLIQUE
    return FontStyle.NORMAL


def format_display_name(folder_name: str) -> str:
    """Turn a folder name into a display name: ``adobe-caslon_pro`` -> ``Adobe Caslon Pro``."""
    spaced = re.sub(r"[-_]", " ", folder_name)
    return " ".join(word[:1].upper() + word[1:] for word in spaced.split(" "))


def encode_data_uri(font_path: Path, fmt: FontFormat) -> str:
    """Read a font file into a base64 ``data:`` URI."""
    payload = base64.b64encode(font_path.read_bytes()).decode("ascii")
    return f"data:{fmt.mime_type};base64,{payload}"


def is_license_file(filename: str) -> bool:
    lower = filename.lower()
    return "license" in lower or lower == "readme.md"


def _variant_sort_key(variant: VariantRecord) -> tuple[int, int]:
    return variant.weight, 0 if variant.style == FontStyle.NORMAL else 1


def scan_family(folder: Path, embed: bool = False) -> FamilyRecord:
    """Build the family record for one family folder."""
    variants: list[VariantRecord] = []
    formats: dict[FontFormat, None] = {}
    license_file = None
    license_text = None

    for file_path in sorted(p for p in folder.iterdir() if p.is_file()):
        extension = file_path.suffix.lower()

        if extension in SUPPORTED_EXTENSIONS:
            fmt = FontFormat(extension[1:])
            file_size = file_path.stat().st_size
            if file_size == 0:
                logger.warning(f"Skipping empty font file: {file_path}")
                continue
            formats[fmt] = None

            if embed:
                file_ref = encode_data_uri(file_path, fmt)
            else:
                file_ref = f"{FONTS_ROOT}/{folder.name}/{file_path.name}"

            variants.append(
                VariantRecord(
                    name=file_path.stem,
                    weight=guess_weight(file_path.name),
                    style=guess_style(file_path.name),
                    format=fmt,
                    file_size=file_size,
                    file=file_ref,
                )
            )

        elif is_license_file(file_path.name):
            license_file = f"{FONTS_ROOT}/{folder.name}/{file_path.name}"
            if embed:
                try:
                    license_text = file_path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    license_text = f"Unable to read license file: {e}"

    variants.sort(key=_variant_sort_key)

    return FamilyRecord(
        display_name=format_display_name(folder.name),
        family_name=folder_key(folder.name),
        variants=tuple(variants),
        formats=tuple(formats),
        has_default_font=any(variant.is_regular for variant in variants),
        font_count=len(variants),
        total_size=sum(variant.file_size for variant in variants),
        license_file=license_file,
        license_text=license_text,
    )


def scan_fonts_directory(fonts_dir: str | Path, embed: bool = False) -> CatalogDocument:
    """
    Scan a fonts directory into a catalog document.

    Args:
        fonts_dir: Directory whose subfolders are font families
        embed: Embed font files (and license text) instead of referencing paths

    Returns:
        CatalogDocument with families sorted by display name

    Raises:
        ScanError: If the directory is missing or a family cannot be read
    """
    fonts_dir = Path(fonts_dir)
    if not fonts_dir.is_dir():
        raise FontsDirectoryNotFoundError(str(fonts_dir))

    subdirs = sorted(p for p in fonts_dir.iterdir() if p.is_dir())
    logger.info(f"Found {len(subdirs)} font directories to process...")
    if embed:
        logger.info("Base64 encoding enabled - this may take a moment...")

    families = []
    folders_by_key: dict[str, Path] = {}
    for index, folder in enumerate(subdirs, start=1):
        logger.debug(f"Processing [{index}/{len(subdirs)}]: {folder.name}")
        try:
            family = scan_family(folder, embed=embed)
        except OSError as e:
            raise ScanError(f"Failed to scan {folder}: {e}", details=str(folder)) from e
        except PydanticValidationError as e:
            raise ScanError(
                f"Failed to scan {folder}: {e.error_count()} invalid fields",
                details=e.errors(include_url=False),
            ) from e

        other = folders_by_key.setdefault(family.family_name, folder)
        if other != folder:
            raise ScanError(
                f"Folders '{other.name}' and '{folder.name}' both map to "
                f"family key '{family.family_name}'",
                details=[str(other), str(folder)],
            )
        families.append(family)

    families.sort(key=lambda family: family.display_name.casefold())
    catalog = tuple(families)

    metadata = summarize_catalog(catalog, generated=datetime.now(timezone.utc))
    metadata.base64_encoded = embed

    logger.info(
        f"Generated catalog with {metadata.family_count} font families, "
        f"{metadata.total_fonts} font files, "
        f"{metadata.total_file_size / (1024 * 1024):.2f} MB"
    )
    return CatalogDocument(metadata=metadata, fonts=catalog)


def write_catalog_document(document: CatalogDocument, output_path: str | Path) -> Path:
    """Write a catalog document as indented JSON."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(document.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    logger.info(f"Wrote catalog to {output_path}")
    return output_path
