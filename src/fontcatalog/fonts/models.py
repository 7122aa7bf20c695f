"""
Font catalog data models and types.
"""

from datetime import datetime
from enum import Enum
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FontStyle(str, Enum):
    """Slant classification of a variant."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class FontFormat(str, Enum):
    """Font file container types."""

    OTF = "otf"
    TTF = "ttf"
    WOFF = "woff"
    WOFF2 = "woff2"
    EOT = "eot"

    @property
    def mime_type(self) -> str:
        return MIME_TYPES[self]

    @property
    def css_format(self) -> str:
        """Value of the CSS ``format()`` hint for this container."""
        return CSS_FORMATS[self]


MIME_TYPES = {
    FontFormat.OTF: "font/otf",
    FontFormat.TTF: "font/ttf",
    FontFormat.WOFF: "font/woff",
    FontFormat.WOFF2: "font/woff2",
    FontFormat.EOT: "application/vnd.ms-fontobject",
}

CSS_FORMATS = {
    FontFormat.OTF: "opentype",
    FontFormat.TTF: "truetype",
    FontFormat.WOFF: "woff",
    FontFormat.WOFF2: "woff2",
    FontFormat.EOT: "embedded-opentype",
}

DEFAULT_WEIGHT = 400
DATA_URI_PREFIX = "data:"


class VariantRecord(BaseModel):
    """One physical font file within a family."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=1, strict=True, description="Internal font name")
    weight: int = Field(..., ge=100, le=950, strict=True, description="CSS/OpenType weight")
    style: FontStyle
    format: FontFormat
    file_size: int = Field(..., gt=0, strict=True, alias="fileSize", description="Bytes")
    file: str = Field(..., min_length=1, strict=True, description="Relative path or data URI")

    @property
    def is_embedded(self) -> bool:
        """True when ``file`` carries the font bytes as a data URI."""
        return self.file.startswith(DATA_URI_PREFIX)

    @property
    def path(self) -> PurePosixPath | None:
        """Relative path of the font file, or None for embedded fonts."""
        if self.is_embedded:
            return None
        return PurePosixPath(self.file)

    @property
    def is_regular(self) -> bool:
        return self.weight == DEFAULT_WEIGHT and self.style == FontStyle.NORMAL

    def __str__(self) -> str:
        return f"{self.name} ({self.weight} {self.style.value}, {self.format.value})"


class FamilyRecord(BaseModel):
    """A named group of related font files sharing a base design."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    display_name: str = Field(..., min_length=1, strict=True, alias="displayName")
    family_name: str = Field(..., min_length=1, strict=True, alias="familyName")
    variants: tuple[VariantRecord, ...]
    formats: tuple[FontFormat, ...]
    has_default_font: bool = Field(..., strict=True, alias="hasDefaultFont")
    font_count: int = Field(..., ge=0, strict=True, alias="fontCount")
    total_size: int = Field(..., ge=0, strict=True, alias="totalSize")
    license_file: str | None = Field(None, alias="licenseFile")
    license_text: str | None = Field(None, alias="licenseText")

    @field_validator("display_name", "family_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @property
    def default_variant(self) -> VariantRecord | None:
        """The regular (400, normal) face if the family has one."""
        for variant in self.variants:
            if variant.is_regular:
                return variant
        return None

    @property
    def variant_formats(self) -> set[FontFormat]:
        return {variant.format for variant in self.variants}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON form."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return f"{self.display_name} [{self.family_name}] ({self.font_count} fonts)"


class CatalogMetadata(BaseModel):
    """Aggregate information about a whole catalog."""

    model_config = ConfigDict(populate_by_name=True)

    generated: datetime | None = None
    family_count: int = Field(0, ge=0, alias="familyCount")
    total_fonts: int = Field(0, ge=0, alias="totalFonts")
    total_file_size: int = Field(0, ge=0, alias="totalFileSize")
    base64_encoded: bool = Field(False, alias="base64Encoded")
    format_summary: dict[str, int] = Field(default_factory=dict, alias="formatSummary")
    weight_summary: dict[int, int] = Field(default_factory=dict, alias="weightSummary")


class CatalogDocument(BaseModel):
    """Generated catalog file: metadata block plus the family table."""

    model_config = ConfigDict(populate_by_name=True)

    metadata: CatalogMetadata
    fonts: tuple[FamilyRecord, ...]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
