"""Validation Engine — dispatches values to kind checkers and produces a result.

This is the main entry point. Combinator branches, array items and object
members are each evaluated in isolation: every evaluation returns a fresh
list of findings, and the caller decides how to merge it.

Usage:
    engine = ValidationEngine()
    result = engine.validate(schema, value)
    if not result.ok:
        # Report result.errors
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

from schemaguard.config import Settings, get_settings
from schemaguard.logging_config import get_logger
from schemaguard.validators.base import BaseChecker
from schemaguard.validators.models import ValidationError, ValidationResult, ErrorCode, SchemaError
from schemaguard.validators.kinds import ValueKind, kind_of
from schemaguard.validators.schema import Schema, KNOWN_TYPES
from schemaguard.validators.formats import format_checks

# Kind checkers
from schemaguard.validators.number_validator import NumberChecker
from schemaguard.validators.boolean_validator import BooleanChecker
from schemaguard.validators.string_validator import StringChecker
from schemaguard.validators.array_validator import ArrayChecker
from schemaguard.validators.object_validator import ObjectChecker

logger = get_logger(__name__)


class ValidationEngine:
    """Validates one value against one schema tree.

    Design principles:
        - Deterministic: same input → same output
        - Re-entrant: no state survives a call, checkers hold configuration only
        - Collects every problem rather than stopping at the first
        - Observable: logs every top-level run with timing
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize checkers from settings.

        Args:
            settings: Optional settings. If None, uses the environment.
        """
        self.settings = settings or get_settings()
        self.number = NumberChecker()
        self.boolean = BooleanChecker()
        self.string = StringChecker(format_checks(strict_dates=self.settings.STRICT_DATES))
        self.array = ArrayChecker()
        self.object = ObjectChecker()

    def validate(self, schema: Union[Schema, Mapping, None], value: Any) -> ValidationResult:
        """Validate ``value`` against ``schema`` and produce a result.

        Args:
            schema: Schema tree (plain mapping or Schema)
            value: Already deserialized value

        Returns:
            ValidationResult with ok flag and every finding

        Raises:
            SchemaError: If the schema itself is malformed
        """
        start_time = time.perf_counter()

        try:
            parsed = Schema.parse(schema)
        except SchemaError as e:
            logger.error("schema_rejected", error=str(e))
            raise

        result = ValidationResult.build(self.evaluate(parsed, value))

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            ok=result.ok,
            summary=result.summary,
            total_errors=len(result.violations),
            duration_ms=round(total_duration, 2),
        )

        return result

    def is_valid(self, schema: Union[Schema, Mapping, None], value: Any) -> bool:
        """Boolean shorthand for validate()."""
        return self.validate(schema, value).ok

    def evaluate(self, schema: Schema, value: Any, path: str = "$") -> list[ValidationError]:
        """Evaluate a normalized schema node. Returns this node's findings only."""
        if schema.one_of is not None:
            return self._check_one_of(schema.one_of, value, path)
        if schema.any_of is not None:
            return self._check_any_of(schema.any_of, value, path)

        kind = kind_of(value)

        if kind == ValueKind.NULL:
            if schema.nullable:
                return []
            return [ValidationError(
                code=ErrorCode.NULL_NOT_PERMITTED,
                message="null not permitted.",
                path=path,
                constraint="nullable",
            )]

        checker = self._checker_for(kind)
        if checker is None or schema.type not in KNOWN_TYPES:
            return [ValidationError(
                code=ErrorCode.UNKNOWN_TYPE,
                message="unknown type",
                path=path,
                constraint="type",
                evidence=f"declared: {schema.type}, actual: {type(value).__name__}",
            )]

        return checker.check(schema, value, path, self.evaluate)

    def _checker_for(self, kind: ValueKind) -> Optional[BaseChecker]:
        if kind == ValueKind.NUMBER:
            return self.number
        elif kind == ValueKind.BOOLEAN:
            return self.boolean
        elif kind == ValueKind.STRING:
            return self.string
        elif kind == ValueKind.ARRAY:
            return self.array
        elif kind == ValueKind.OBJECT:
            return self.object
        # NULL is handled before dispatch; UNKNOWN has no checker
        return None

    # ── Combinators ──

    def _matching_branches(self, branches: list[Schema], value: Any, path: str) -> list[int]:
        """Indices of branches the value satisfies, each probed in isolation."""
        return [i for i, branch in enumerate(branches) if not self.evaluate(branch, value, path)]

    def _check_any_of(self, branches: list[Schema], value: Any, path: str) -> list[ValidationError]:
        if self._matching_branches(branches, value, path):
            return []
        return [ValidationError(
            code=ErrorCode.COMBINATOR_VIOLATION,
            message="no schema matched.",
            path=path,
            constraint="anyOf",
            evidence=f"{len(branches)} branch(es) tried",
        )]

    def _check_one_of(self, branches: list[Schema], value: Any, path: str) -> list[ValidationError]:
        matched = self._matching_branches(branches, value, path)

        if len(matched) == 1:
            return []
        if not matched:
            return [ValidationError(
                code=ErrorCode.COMBINATOR_VIOLATION,
                message="no schema matched.",
                path=path,
                constraint="oneOf",
                evidence=f"{len(branches)} branch(es) tried",
            )]
        return [ValidationError(
            code=ErrorCode.COMBINATOR_VIOLATION,
            message="ambiguous: multiple schemas matched",
            path=path,
            constraint="oneOf",
            evidence=f"matched branches: {matched}",
        )]


# Module-level singleton
validation_engine = ValidationEngine()


def validate(schema: Union[Schema, Mapping, None], value: Any) -> ValidationResult:
    """Validate with the shared engine (convenience function)."""
    return validation_engine.validate(schema, value)


def is_valid(schema: Union[Schema, Mapping, None], value: Any) -> bool:
    """Boolean validation with the shared engine (convenience function)."""
    return validation_engine.is_valid(schema, value)
