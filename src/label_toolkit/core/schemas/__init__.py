"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_design,
    ValidationError,
    DESIGN_SCHEMA_VERSION,
)

__all__ = [
    "validate_design",
    "ValidationError",
    "DESIGN_SCHEMA_VERSION",
]
