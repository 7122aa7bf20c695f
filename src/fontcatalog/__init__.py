"""Font Catalog
============

Static catalog of font families and their font files: a validated JSON asset,
lookup and aggregate helpers, and the tooling that regenerates the asset from
a fonts directory.
"""

__version__ = "1.0.0"
__author__ = "Font Catalog Team"

from .core.config import CatalogConfig
from .core.exceptions import CatalogError, InvariantViolation, SchemaError
from .fonts import (
    FamilyRecord,
    FontFormat,
    FontStyle,
    VariantRecord,
    families_by_format,
    find_family,
    load_catalog,
    total_catalog_size,
)

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "FamilyRecord",
    "FontFormat",
    "FontStyle",
    "InvariantViolation",
    "SchemaError",
    "VariantRecord",
    "families_by_format",
    "find_family",
    "load_catalog",
    "total_catalog_size",
]
