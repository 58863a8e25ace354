"""Schema validator — recursive, schema-driven validation of in-memory values.

Usage:
    from schemaguard.validators import validation_engine

    result = validation_engine.validate(schema, value)
    if not result.ok:
        # Report result.errors
"""

from schemaguard.validators.engine import ValidationEngine, validation_engine, validate, is_valid
from schemaguard.validators.models import (
    ValidationResult,
    ValidationError,
    ErrorCode,
    SchemaError,
    SchemaValidationFailed,
)
from schemaguard.validators.schema import Schema

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "is_valid",
    "ValidationResult",
    "ValidationError",
    "ErrorCode",
    "SchemaError",
    "SchemaValidationFailed",
    "Schema",
]
