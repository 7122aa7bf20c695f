"""Tests for the Catalog Generator
==============================

Directory scanning and the file-name heuristics behind weight and style.
"""

import base64
import json

import pytest

from fontcatalog.core.exceptions import FontsDirectoryNotFoundError, ScanError
from fontcatalog.fonts.catalog import find_family, load_catalog
from fontcatalog.fonts.models import FontFormat, FontStyle
from fontcatalog.fonts.scanner import (
    encode_data_uri,
    format_display_name,
    guess_style,
    guess_weight,
    is_license_file,
    scan_fonts_directory,
    write_catalog_document,
)


class TestFileNameHeuristics:
    """Test weight/style guessing and display names."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("ACaslonPro-Regular.otf", 400),
            ("ACaslonPro-Semibold.otf", 600),
            ("ACaslonPro-BoldItalic.otf", 700),
            ("Montserrat-ExtraBold.ttf", 800),
            ("Montserrat-ExtraLight.ttf", 200),
            ("Montserrat-Thin.ttf", 100),
            ("Montserrat-Black.ttf", 900),
            ("InterDisplay-ExtraBlack.otf", 950),
            ("Helvetica_Light.ttf", 300),
            ("OpenSans-600.otf", 600),
            ("OpenSans_350-Italic.otf", 350),
            ("Font-050.otf", 400),
            ("BebasNeue.ttf", 400),
            ("MinionPro-It.otf", 400),
        ],
    )
    def test_guess_weight(self, filename, expected):
        assert guess_weight(filename) == expected

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("ACaslonPro-Italic.otf", FontStyle.ITALIC),
            ("ACaslonPro-BoldItalic.otf", FontStyle.ITALIC),
            ("DejaVuSans-Oblique.ttf", FontStyle.OBLIQUE),
            ("ACaslonPro-Regular.otf", FontStyle.NORMAL),
        ],
    )
    def test_guess_style(self, filename, expected):
        assert guess_style(filename) == expected

    @pytest.mark.parametrize(
        ("folder", "expected"),
        [
            ("Adobe Caslon Pro", "Adobe Caslon Pro"),
            ("open-sans", "Open Sans"),
            ("source_code_pro", "Source Code Pro"),
            ("0.RandomCollections", "0.RandomCollections"),
        ],
    )
    def test_format_display_name(self, folder, expected):
        assert format_display_name(folder) == expected

    def test_license_files(self):
        assert is_license_file("LICENSE.txt")
        assert is_license_file("OFL-License.md")
        assert is_license_file("README.md")
        assert not is_license_file("readme.txt")

    def test_encode_data_uri(self, tmp_path):
        font = tmp_path / "Font-Regular.woff2"
        font.write_bytes(b"wOF2data")

        uri = encode_data_uri(font, FontFormat.WOFF2)

        assert uri == "data:font/woff2;base64," + base64.b64encode(b"wOF2data").decode()


class TestScanFontsDirectory:
    """Test scanning a fonts directory into a catalog document."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FontsDirectoryNotFoundError):
            scan_fonts_directory(tmp_path / "nope")

    def test_missing_directory_is_scan_error(self, tmp_path):
        with pytest.raises(ScanError):
            scan_fonts_directory(tmp_path / "nope")

    def test_unusable_folder_name_is_scan_error(self, tmp_path):
        """Test that a folder whose display name is blank fails as a ScanError."""
        folder = tmp_path / "fonts" / "-"
        folder.mkdir(parents=True)
        (folder / "X-Regular.ttf").write_bytes(b"\x00" * 10)

        with pytest.raises(ScanError, match="Failed to scan") as exc_info:
            scan_fonts_directory(tmp_path / "fonts")

        assert exc_info.value.details

    def test_colliding_family_keys(self, fonts_dir):
        """Test that two folders with the same whitespace-free name are rejected."""
        (fonts_dir / "AdobeCaslonPro").mkdir()

        with pytest.raises(ScanError, match="both map to family key 'AdobeCaslonPro'"):
            scan_fonts_directory(fonts_dir)

    def test_families_sorted_by_display_name(self, fonts_dir):
        document = scan_fonts_directory(fonts_dir)

        assert [family.display_name for family in document.fonts] == [
            "0.RandomCollections",
            "Adobe Caslon Pro",
            "Open Sans",
        ]
        assert [family.family_name for family in document.fonts] == [
            "0.RandomCollections",
            "AdobeCaslonPro",
            "open-sans",
        ]

    def test_family_record(self, fonts_dir):
        document = scan_fonts_directory(fonts_dir)
        family = find_family(document.fonts, "AdobeCaslonPro")

        assert [(v.name, v.weight, v.style) for v in family.variants] == [
            ("ACaslonPro-Regular", 400, FontStyle.NORMAL),
            ("ACaslonPro-Semibold", 600, FontStyle.NORMAL),
            ("ACaslonPro-BoldItalic", 700, FontStyle.ITALIC),
        ]
        assert family.variants[0].file == "fonts/Adobe Caslon Pro/ACaslonPro-Regular.otf"
        assert family.formats == (FontFormat.OTF,)
        assert family.font_count == 3
        assert family.total_size == 300
        assert family.has_default_font is True
        assert family.license_file == "fonts/Adobe Caslon Pro/LICENSE.txt"
        assert family.license_text is None

    def test_mixed_formats_without_regular_face(self, fonts_dir):
        document = scan_fonts_directory(fonts_dir)
        family = find_family(document.fonts, "open-sans")

        assert [(v.weight, v.style, v.format) for v in family.variants] == [
            (400, FontStyle.ITALIC, FontFormat.WOFF2),
            (600, FontStyle.NORMAL, FontFormat.TTF),
        ]
        assert set(family.formats) == {FontFormat.TTF, FontFormat.WOFF2}
        assert family.has_default_font is False
        assert family.total_size == 80

    def test_empty_folder_becomes_placeholder(self, fonts_dir):
        document = scan_fonts_directory(fonts_dir)
        family = find_family(document.fonts, "0.RandomCollections")

        assert family.variants == ()
        assert family.formats == ()
        assert family.font_count == 0
        assert family.total_size == 0
        assert family.has_default_font is False

    def test_empty_font_files_are_skipped(self, fonts_dir):
        (fonts_dir / "open-sans" / "OpenSans-Bold.otf").write_bytes(b"")

        family = find_family(scan_fonts_directory(fonts_dir).fonts, "open-sans")

        assert family.font_count == 2
        assert FontFormat.OTF not in family.formats

    def test_metadata(self, fonts_dir):
        metadata = scan_fonts_directory(fonts_dir).metadata

        assert metadata.generated is not None
        assert metadata.family_count == 3
        assert metadata.total_fonts == 5
        assert metadata.total_file_size == 380
        assert metadata.base64_encoded is False
        assert metadata.format_summary == {"otf": 1, "ttf": 1, "woff2": 1}
        assert metadata.weight_summary == {400: 2, 600: 2, 700: 1}

    def test_embedded_scan(self, fonts_dir):
        document = scan_fonts_directory(fonts_dir, embed=True)
        family = find_family(document.fonts, "AdobeCaslonPro")

        assert document.metadata.base64_encoded is True
        assert all(v.is_embedded for v in family.variants)
        assert family.variants[0].file.startswith("data:font/otf;base64,")
        assert family.license_text == "Licensed for testing."

    def test_written_document_loads_as_catalog(self, fonts_dir, tmp_path):
        output = write_catalog_document(
            scan_fonts_directory(fonts_dir), tmp_path / "out" / "fonts.json"
        )

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["metadata"]["familyCount"] == 3
        assert data["metadata"]["weightSummary"] == {"400": 2, "600": 2, "700": 1}

        catalog = load_catalog(output)
        assert [family.family_name for family in catalog] == [
            "0.RandomCollections",
            "AdobeCaslonPro",
            "open-sans",
        ]

    def test_embedded_document_loads_as_catalog(self, fonts_dir, tmp_path):
        output = write_catalog_document(
            scan_fonts_directory(fonts_dir, embed=True), tmp_path / "fonts.json"
        )

        catalog = load_catalog(output)

        assert find_family(catalog, "open-sans").variants[0].file.startswith(
            "data:font/woff2;base64,"
        )
