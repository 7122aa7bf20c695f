"""Font Catalog Module
===================

Loading, validation, lookup and generation of the font-family catalog.
"""

from .catalog import (
    Catalog,
    catalog_json_schema,
    dump_catalog,
    dumps_catalog,
    families_by_format,
    find_family,
    load_catalog,
    loads_catalog,
    parse_catalog,
    summarize_catalog,
    total_catalog_size,
)
from .models import (
    CatalogDocument,
    CatalogMetadata,
    FamilyRecord,
    FontFormat,
    FontStyle,
    VariantRecord,
)
from .scanner import scan_fonts_directory, write_catalog_document
from .validator import CatalogValidator, ValidationResult, missing_files, validate_catalog

__all__ = [
    "Catalog",
    "CatalogDocument",
    "CatalogMetadata",
    "CatalogValidator",
    "FamilyRecord",
    "FontFormat",
    "FontStyle",
    "ValidationResult",
    "VariantRecord",
    "catalog_json_schema",
    "dump_catalog",
    "dumps_catalog",
    "families_by_format",
    "find_family",
    "load_catalog",
    "loads_catalog",
    "missing_files",
    "parse_catalog",
    "scan_fonts_directory",
    "summarize_catalog",
    "total_catalog_size",
    "validate_catalog",
    "write_catalog_document",
]
