"""Custom exceptions for the font catalog."""

from typing import Any


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaError(CatalogError):
    """Exception raised when a record fails type or shape validation."""


class InvariantViolation(CatalogError):
    """Exception raised when derived fields disagree with the variant list."""


class ConfigurationError(CatalogError):
    """Exception raised for configuration errors."""


class ScanError(CatalogError):
    """Exception raised while scanning a fonts directory."""


class CatalogNotFoundError(CatalogError):
    """Exception raised when the catalog file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Catalog file not found: {path}")


class InvalidCatalogJSONError(SchemaError):
    """Exception raised when the catalog file is not valid JSON."""

    def __init__(self, source: str, error: str):
        super().__init__(f"Invalid JSON in {source}: {error}")


class UnexpectedCatalogShapeError(SchemaError):
    """Exception raised when the top-level JSON value is not a catalog."""

    def __init__(
        self,
        type_name: str,
        expected: str = "a list of families or an object with a 'fonts' list",
    ):
        super().__init__(f"Catalog must be {expected}, got {type_name}")


class FontCountMismatchError(InvariantViolation):
    """Exception raised when fontCount differs from the number of variants."""

    def __init__(self, family_name: str, font_count: int, actual: int):
        super().__init__(
            f"{family_name}: fontCount is {font_count} but family has {actual} variants"
        )


class TotalSizeMismatchError(InvariantViolation):
    """Exception raised when totalSize differs from the summed variant sizes."""

    def __init__(self, family_name: str, total_size: int, actual: int):
        super().__init__(
            f"{family_name}: totalSize is {total_size} but variant sizes sum to {actual}"
        )


class FormatSetMismatchError(InvariantViolation):
    """Exception raised when formats differs from the variant formats."""

    def __init__(self, family_name: str, declared: list[str], actual: list[str]):
        super().__init__(
            f"{family_name}: formats {declared} do not match variant formats {actual}"
        )


class VariantPathError(InvariantViolation):
    """Exception raised when a variant file does not belong to its family."""

    def __init__(self, family_name: str, file: str, reason: str):
        super().__init__(f"{family_name}: bad variant file '{file}': {reason}")


class DuplicateFamilyNameError(InvariantViolation):
    """Exception raised when two families share a familyName."""

    def __init__(self, family_name: str):
        super().__init__(f"Duplicate familyName: {family_name}")


class EmptyFamilyError(InvariantViolation):
    """Exception raised when a family without variants carries non-empty aggregates."""

    def __init__(self, family_name: str, field: str):
        super().__init__(f"{family_name}: family has no variants but {field} is set")


class ChunkNotFoundError(CatalogError):
    """Exception raised when a chunk file is missing from a chunk directory."""

    def __init__(self, chunk_dir: str, chunk_id: str):
        super().__init__(f"Chunk '{chunk_id}' not found in {chunk_dir}")


class FontsDirectoryNotFoundError(ScanError):
    """Exception raised when the fonts directory to scan does not exist."""

    def __init__(self, path: str):
        super().__init__(f"\"fonts\" folder not found at {path}")
