"""
Catalog Validator
=================

Checks the invariants that tie each family's aggregate fields to its variant
list, and the uniqueness of family keys across the table.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ..core.exceptions import (
    DuplicateFamilyNameError,
    EmptyFamilyError,
    FontCountMismatchError,
    FormatSetMismatchError,
    InvariantViolation,
    TotalSizeMismatchError,
    VariantPathError,
)
from .models import FamilyRecord, VariantRecord

logger = logging.getLogger(__name__)

FONTS_ROOT = "fonts"
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ValidationResult:
    """Result of catalog validation."""

    family_count: int = 0
    errors: list[InvariantViolation] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def add_error(self, error: InvariantViolation):
        """Add validation error."""
        self.errors.append(error)

    def add_warning(self, warning: str):
        """Add validation warning."""
        self.warnings.append(warning)

    def raise_for_errors(self) -> None:
        """Raise the collected violation(s), if any."""
        if not self.errors:
            return
        if len(self.errors) == 1:
            raise self.errors[0]
        raise InvariantViolation(
            f"{len(self.errors)} invariant violations in catalog; first: {self.errors[0]}",
            details=list(self.errors),
        )


def folder_key(folder: str) -> str:
    """Family key derived from a family folder name."""
    return _WHITESPACE.sub("", folder)


class CatalogValidator:
    """
    Validates a parsed font catalog.

    Checks per family:
    - fontCount matches the variant count
    - totalSize matches the summed variant sizes
    - formats matches the distinct variant formats
    - variant files live in the family folder with a matching extension
    - families without variants carry empty aggregates

    Across the table, family keys must be unique.
    """

    def validate(self, families: Iterable[FamilyRecord]) -> ValidationResult:
        result = ValidationResult()
        seen: set[str] = set()

        for family in families:
            result.family_count += 1
            if family.family_name in seen:
                result.add_error(DuplicateFamilyNameError(family.family_name))
            seen.add(family.family_name)
            self.validate_family(family, result)

        logger.debug(
            f"Validated {result.family_count} families: "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    def validate_family(self, family: FamilyRecord, result: ValidationResult) -> None:
        self._validate_font_count(family, result)
        self._validate_total_size(family, result)
        self._validate_formats(family, result)
        for variant in family.variants:
            self._validate_variant_file(family, variant, result)
        self._validate_default_font(family, result)

    def _validate_font_count(self, family: FamilyRecord, result: ValidationResult):
        if family.font_count != len(family.variants):
            result.add_error(
                FontCountMismatchError(family.family_name, family.font_count, len(family.variants))
            )

    def _validate_total_size(self, family: FamilyRecord, result: ValidationResult):
        actual = sum(variant.file_size for variant in family.variants)
        if family.total_size != actual:
            result.add_error(TotalSizeMismatchError(family.family_name, family.total_size, actual))

    def _validate_formats(self, family: FamilyRecord, result: ValidationResult):
        declared = [fmt.value for fmt in family.formats]
        actual = sorted(fmt.value for fmt in family.variant_formats)
        if len(set(declared)) != len(declared) or set(declared) != set(actual):
            result.add_error(FormatSetMismatchError(family.family_name, declared, actual))

    def _validate_variant_file(
        self, family: FamilyRecord, variant: VariantRecord, result: ValidationResult
    ):
        if variant.is_embedded:
            prefix = f"data:{variant.format.mime_type};base64,"
            if not variant.file.startswith(prefix):
                result.add_error(
                    VariantPathError(
                        family.family_name,
                        variant.file[:40],
                        f"data URI does not start with '{prefix}'",
                    )
                )
            return

        parts = variant.path.parts
        if len(parts) != 3 or parts[0] != FONTS_ROOT:
            result.add_error(
                VariantPathError(
                    family.family_name, variant.file, "expected fonts/<folder>/<file name>"
                )
            )
            return

        folder, filename = parts[1], parts[2]
        if folder_key(folder) != family.family_name:
            result.add_error(
                VariantPathError(
                    family.family_name, variant.file, f"folder '{folder}' belongs to another family"
                )
            )

        extension = PurePosixPath(filename).suffix.lower().lstrip(".")
        if extension != variant.format.value:
            result.add_error(
                VariantPathError(
                    family.family_name,
                    variant.file,
                    f"extension '{extension}' does not match format '{variant.format.value}'",
                )
            )

    def _validate_default_font(self, family: FamilyRecord, result: ValidationResult):
        if not family.variants:
            if family.has_default_font:
                result.add_error(EmptyFamilyError(family.family_name, "hasDefaultFont"))
            return

        # Not a hard invariant: the flag is a convention of the generator.
        has_regular = family.default_variant is not None
        if family.has_default_font != has_regular:
            result.add_warning(
                f"{family.family_name}: hasDefaultFont is {family.has_default_font} "
                f"but a 400/normal variant is {'present' if has_regular else 'absent'}"
            )


def validate_catalog(families: Iterable[FamilyRecord]) -> ValidationResult:
    """Validate every family and the uniqueness of family keys."""
    return CatalogValidator().validate(families)


def missing_files(families: Iterable[FamilyRecord], base_dir: str | Path) -> list[Path]:
    """Return the variant files that do not exist under ``base_dir``.

    Embedded variants are skipped.
    """
    base_dir = Path(base_dir)
    missing = []
    for family in families:
        for variant in family.variants:
            if variant.is_embedded:
                continue
            font_path = base_dir / variant.file
            if not font_path.is_file():
                missing.append(font_path)
    return missing
