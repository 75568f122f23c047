"""Shared types and settings."""

from slicekit.core.config import Settings, settings
from slicekit.core.types import NUMERIC_TYPES, Numeric, is_numeric, validate_numeric

__all__ = [
    "Settings",
    "settings",
    "NUMERIC_TYPES",
    "Numeric",
    "is_numeric",
    "validate_numeric",
]
