"""
Pytest configuration and fixtures for font catalog tests.
"""

import copy

import pytest

from fontcatalog.fonts.catalog import load_catalog


@pytest.fixture(scope="session")
def catalog():
    """The packaged catalog, loaded once."""
    return load_catalog()


@pytest.fixture
def sample_family_data():
    """A valid family in its JSON form."""
    return {
        "displayName": "Test Sans",
        "familyName": "TestSans",
        "variants": [
            {
                "name": "TestSans-Regular",
                "weight": 400,
                "style": "normal",
                "format": "ttf",
                "fileSize": 1000,
                "file": "fonts/Test Sans/TestSans-Regular.ttf",
            },
            {
                "name": "TestSans-BoldItalic",
                "weight": 700,
                "style": "italic",
                "format": "otf",
                "fileSize": 2500,
                "file": "fonts/Test Sans/TestSans-BoldItalic.otf",
            },
        ],
        "formats": ["ttf", "otf"],
        "hasDefaultFont": True,
        "fontCount": 2,
        "totalSize": 3500,
    }


@pytest.fixture
def empty_family_data():
    """A placeholder family without variants."""
    return {
        "displayName": "Collections",
        "familyName": "Collections",
        "variants": [],
        "formats": [],
        "hasDefaultFont": False,
        "fontCount": 0,
        "totalSize": 0,
    }


@pytest.fixture
def catalog_data(sample_family_data, empty_family_data):
    """A small valid catalog in its JSON form."""
    return [copy.deepcopy(sample_family_data), copy.deepcopy(empty_family_data)]


@pytest.fixture
def fonts_dir(tmp_path):
    """A fonts directory laid out the way the generator expects."""
    root = tmp_path / "fonts"

    caslon = root / "Adobe Caslon Pro"
    caslon.mkdir(parents=True)
    (caslon / "ACaslonPro-Regular.otf").write_bytes(b"\x00" * 120)
    (caslon / "ACaslonPro-BoldItalic.otf").write_bytes(b"\x00" * 80)
    (caslon / "ACaslonPro-Semibold.otf").write_bytes(b"\x00" * 100)
    (caslon / "LICENSE.txt").write_text("Licensed for testing.", encoding="utf-8")
    (caslon / "notes.pdf").write_bytes(b"%PDF")

    open_sans = root / "open-sans"
    open_sans.mkdir()
    (open_sans / "OpenSans-600.ttf").write_bytes(b"\x01" * 50)
    (open_sans / "OpenSans-Italic.woff2").write_bytes(b"\x02" * 30)

    (root / "0.RandomCollections").mkdir()

    return root
