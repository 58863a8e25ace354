"""Validation models — error codes, findings, and the result structure.

Every finding describes invalid data, never a fault of the validator itself.
Malformed schemas are reported through SchemaError instead.
"""

from collections import Counter
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Deterministic error codes, one per kind of violated constraint."""

    TYPE_MISMATCH = "TYPE_MISMATCH"                  # Runtime kind vs declared type
    RANGE_VIOLATION = "RANGE_VIOLATION"              # minimum/maximum, lengths, counts
    SET_VIOLATION = "SET_VIOLATION"                  # enum
    PATTERN_VIOLATION = "PATTERN_VIOLATION"          # pattern, format
    UNIQUENESS_VIOLATION = "UNIQUENESS_VIOLATION"    # uniqueItems
    CONTAINMENT_VIOLATION = "CONTAINMENT_VIOLATION"  # contains
    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    ADDITIONAL_PROPERTY_FORBIDDEN = "ADDITIONAL_PROPERTY_FORBIDDEN"
    COMBINATOR_VIOLATION = "COMBINATOR_VIOLATION"    # oneOf/anyOf, item alternatives
    NULL_NOT_PERMITTED = "NULL_NOT_PERMITTED"
    UNKNOWN_TYPE = "UNKNOWN_TYPE"


class ValidationError(BaseModel):
    """A single validation finding."""

    code: ErrorCode
    message: str
    path: str = "$"                    # Where in the value the finding applies
    constraint: Optional[str] = None   # Schema keyword that triggered it
    evidence: Optional[str] = None     # What data triggered the finding

    model_config = {"use_enum_values": True}

    def render(self) -> str:
        return f"{self.path}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of validating one value against one schema."""

    ok: bool = Field(description="True if no finding was recorded anywhere in the tree")
    errors: list[str] = Field(default_factory=list, description="Rendered '<path>: <message>' lines")
    violations: list[ValidationError] = Field(default_factory=list)
    summary: dict[str, int] = Field(
        default_factory=dict,
        description="Count of findings by error code",
    )

    @classmethod
    def build(cls, violations: list[ValidationError]) -> "ValidationResult":
        """Build a complete result from the collected findings."""
        summary = dict(Counter(str(ErrorCode(v.code).value) for v in violations))
        return cls(
            ok=not violations,
            errors=[v.render() for v in violations],
            violations=violations,
            summary=summary,
        )

    def has_code(self, code: ErrorCode) -> bool:
        return any(v.code == code for v in self.violations)

    def raise_for_errors(self) -> None:
        """Raise SchemaValidationFailed if any finding was recorded."""
        if not self.ok:
            raise SchemaValidationFailed(self)


class SchemaError(ValueError):
    """Raised when the schema itself is malformed (wrong keyword shapes)."""


class SchemaValidationFailed(Exception):
    """Raised on request when a value does not conform to its schema."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__(
            f"{len(result.violations)} violation(s): " + "; ".join(result.errors)
        )
