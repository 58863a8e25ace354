"""schemaguard — validate in-memory values against declarative schemas."""

from schemaguard.logging_config import configure_logging
from schemaguard.validators import (
    ValidationEngine,
    validation_engine,
    validate,
    is_valid,
    ValidationResult,
    ValidationError,
    ErrorCode,
    SchemaError,
    SchemaValidationFailed,
    Schema,
)

__version__ = "1.0.0"

__all__ = [
    "configure_logging",
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
