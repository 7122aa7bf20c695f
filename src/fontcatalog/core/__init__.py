"""Core components for the font catalog."""

from .config import CatalogConfig, load_config_from_yaml, setup_logging
from .exceptions import (
    CatalogError,
    CatalogNotFoundError,
    ConfigurationError,
    InvariantViolation,
    ScanError,
    SchemaError,
)

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogNotFoundError",
    "ConfigurationError",
    "InvariantViolation",
    "ScanError",
    "SchemaError",
    "load_config_from_yaml",
    "setup_logging",
]
