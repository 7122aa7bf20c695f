"""
Font Catalog Table
==================

Loads the font catalog JSON asset, validates it and answers lookups and
aggregate queries over the loaded (immutable) table.
"""

import json
import logging
from collections import Counter
from datetime import datetime
from importlib.resources import files
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import (
    CatalogNotFoundError,
    InvalidCatalogJSONError,
    SchemaError,
    UnexpectedCatalogShapeError,
)
from .models import CatalogMetadata, FamilyRecord, FontFormat
from .validator import validate_catalog

logger = logging.getLogger(__name__)

Catalog = tuple[FamilyRecord, ...]

PACKAGED_CATALOG = "data/fonts.json"

_catalog_adapter = TypeAdapter(Catalog)


def packaged_catalog_text() -> str:
    """Read the catalog shipped with the package."""
    return files("fontcatalog").joinpath(PACKAGED_CATALOG).read_text(encoding="utf-8")


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Load and validate a font catalog.

    Args:
        path: Catalog JSON file. The packaged catalog is used when omitted.

    Returns:
        Tuple of validated family records, in file order

    Raises:
        CatalogNotFoundError: If ``path`` does not exist
        SchemaError: If the JSON is malformed or a record has the wrong shape
        InvariantViolation: If derived fields disagree with the variants
    """
    if path is None:
        logger.debug("Loading packaged font catalog")
        return loads_catalog(packaged_catalog_text(), source=PACKAGED_CATALOG)

    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(str(path))

    logger.debug(f"Loading font catalog from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidCatalogJSONError(str(path), str(e)) from e
    return loads_catalog(text, source=str(path))


def loads_catalog(text: str, source: str = "<string>") -> Catalog:
    """Parse and validate a catalog from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidCatalogJSONError(source, str(e)) from e
    return parse_catalog(data)


def parse_catalog(data: Any) -> Catalog:
    """
    Validate already-decoded catalog data.

    Accepts either a bare list of families or a generated document with the
    families under ``"fonts"``.
    """
    if isinstance(data, dict) and "fonts" in data:
        data = data["fonts"]
    if not isinstance(data, list | tuple):
        raise UnexpectedCatalogShapeError(type(data).__name__)

    try:
        catalog = _catalog_adapter.validate_python(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise SchemaError(
            f"Catalog schema validation failed ({e.error_count()} errors); "
            f"first at {location}: {first['msg']}",
            details=e.errors(include_url=False),
        ) from e

    validate_catalog(catalog).raise_for_errors()

    logger.info(f"Loaded font catalog with {len(catalog)} families")
    return catalog


def dump_catalog(catalog: Catalog) -> list[dict[str, Any]]:
    """Serialize a catalog back to its JSON-compatible form."""
    return [family.to_dict() for family in catalog]


def dumps_catalog(catalog: Catalog, indent: int | None = 2) -> str:
    return json.dumps(dump_catalog(catalog), indent=indent, ensure_ascii=False)


def find_family(
    catalog: Catalog, family_name: str, case_sensitive: bool = True
) -> FamilyRecord | None:
    """
    Look up a family by its key.

    Returns:
        The matching family, or None when the catalog has no such key
    """
    if not family_name:
        return None

    if case_sensitive:
        for family in catalog:
            if family.family_name == family_name:
                return family
        return None

    wanted = family_name.casefold()
    for family in catalog:
        if family.family_name.casefold() == wanted:
            return family
    return None


def total_catalog_size(catalog: Catalog) -> int:
    """Sum of every family's totalSize in bytes."""
    return sum(family.total_size for family in catalog)


def families_by_format(catalog: Catalog, fmt: str | FontFormat) -> list[FamilyRecord]:
    """Families whose formats contain ``fmt``. Unknown tags match nothing."""
    try:
        wanted = FontFormat(fmt.lower())
    except ValueError:
        return []
    return [family for family in catalog if wanted in family.formats]


def summarize_catalog(catalog: Catalog, generated: datetime | None = None) -> CatalogMetadata:
    """Aggregate counts for a catalog: families, fonts, bytes, formats and weights."""
    format_summary: dict[str, int] = {}
    weights: Counter[int] = Counter()
    embedded = False

    for family in catalog:
        for fmt in dict.fromkeys(family.formats):
            format_summary[fmt.value] = format_summary.get(fmt.value, 0) + 1
        for variant in family.variants:
            weights[variant.weight] += 1
            embedded = embedded or variant.is_embedded

    return CatalogMetadata(
        generated=generated,
        family_count=len(catalog),
        total_fonts=sum(family.font_count for family in catalog),
        total_file_size=total_catalog_size(catalog),
        base64_encoded=embedded,
        format_summary=format_summary,
        weight_summary=dict(sorted(weights.items())),
    )


def catalog_json_schema() -> dict[str, Any]:
    """JSON Schema of the catalog table, using the camelCase keys."""
    return _catalog_adapter.json_schema(by_alias=True)
