"""Catalog chunking.

Splits a catalog into an ``index.json`` (family metadata without variants)
and alphabetical chunk files so a consumer can load one chunk per lookup.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..core.exceptions import (
    ChunkNotFoundError,
    InvalidCatalogJSONError,
    UnexpectedCatalogShapeError,
)
from .catalog import Catalog, dump_catalog, parse_catalog
from .models import FamilyRecord

logger = logging.getLogger(__name__)

CHUNK_IDS = ("a-f", "g-m", "n-z", "0-9", "symbols")
INDEX_FILE = "index.json"

_INDEX_FIELDS = ("familyName", "displayName", "formats", "hasDefaultFont", "fontCount", "totalSize")
_INDEX_SHAPE = "an index: a list of objects with a string familyName"


def chunk_id_for(family_name: str) -> str:
    """Chunk holding ``family_name``, chosen by its first character."""
    if not family_name or not family_name.strip():
        return "symbols"

    first = family_name.strip()[0].lower()
    if "a" <= first <= "f":
        return "a-f"
    if "g" <= first <= "m":
        return "g-m"
    if "n" <= first <= "z":
        return "n-z"
    if "0" <= first <= "9":
        return "0-9"
    return "symbols"


def split_catalog(catalog: Catalog) -> dict[str, list[FamilyRecord]]:
    chunks: dict[str, list[FamilyRecord]] = {chunk_id: [] for chunk_id in CHUNK_IDS}
    for family in catalog:
        chunks[chunk_id_for(family.family_name)].append(family)
    return chunks


def build_index(catalog: Catalog) -> list[dict[str, Any]]:
    """Per-family metadata that stays valid regardless of chunking."""
    return [
        {key: value for key, value in family.to_dict().items() if key in _INDEX_FIELDS}
        for family in catalog
    ]


def write_chunks(catalog: Catalog, out_dir: str | Path) -> list[Path]:
    """
    Write ``index.json`` and one ``<chunk>.json`` per chunk id.

    Returns:
        Paths written, index first
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    index_path = out_dir / INDEX_FILE
    index_path.write_text(json.dumps(build_index(catalog), indent=2), encoding="utf-8")
    logger.info(f"Created {INDEX_FILE} with metadata for {len(catalog)} fonts")
    written = [index_path]

    for chunk_id, families in split_catalog(catalog).items():
        chunk_path = out_dir / f"{chunk_id}.json"
        chunk_path.write_text(
            json.dumps({"fonts": dump_catalog(tuple(families))}, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info(
            f"Created {chunk_path.name} with {len(families)} fonts, "
            f"size: {chunk_path.stat().st_size / 1024 / 1024:.2f} MB"
        )
        written.append(chunk_path)

    return written


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidCatalogJSONError(str(path), str(e)) from e


def load_index(chunk_dir: str | Path) -> list[dict[str, Any]]:
    """Read ``index.json``; every entry must be an object with a string familyName."""
    index_path = Path(chunk_dir) / INDEX_FILE
    if not index_path.is_file():
        raise ChunkNotFoundError(str(chunk_dir), INDEX_FILE)

    index = _read_json(index_path)
    if not isinstance(index, list):
        raise UnexpectedCatalogShapeError(type(index).__name__, expected=_INDEX_SHAPE)
    for entry in index:
        if not isinstance(entry, dict) or not isinstance(entry.get("familyName"), str):
            raise UnexpectedCatalogShapeError(f"entry {entry!r}", expected=_INDEX_SHAPE)
    return index


def load_chunk(chunk_dir: str | Path, chunk_id: str) -> Catalog:
    """Load and validate one chunk file."""
    chunk_path = Path(chunk_dir) / f"{chunk_id}.json"
    if not chunk_path.is_file():
        raise ChunkNotFoundError(str(chunk_dir), chunk_id)
    return parse_catalog(_read_json(chunk_path))


def find_family_in_chunks(chunk_dir: str | Path, family_name: str) -> FamilyRecord | None:
    """
    Case-insensitive lookup that reads the index, then only the owning chunk.

    Returns:
        The family, or None if the index does not list it
    """
    if not family_name:
        return None

    wanted = family_name.casefold()
    entry = next(
        (item for item in load_index(chunk_dir) if item.get("familyName", "").casefold() == wanted),
        None,
    )
    if entry is None:
        logger.debug(f"Font '{family_name}' not found in index")
        return None

    key = entry["familyName"]
    chunk_id = chunk_id_for(key)
    for family in load_chunk(chunk_dir, chunk_id):
        if family.family_name == key:
            return family

    logger.warning(f"Chunk '{chunk_id}' loaded, but font '{family_name}' not found within it")
    return None
