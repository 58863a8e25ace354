"""String Checker — length bounds, pattern, enum, and named formats."""

from typing import Any, Optional

from schemaguard.logging_config import get_logger
from schemaguard.validators.base import BaseChecker, Evaluate
from schemaguard.validators.formats import FormatCheck, format_checks
from schemaguard.validators.models import ValidationError, ErrorCode
from schemaguard.validators.schema import Schema

logger = get_logger(__name__)


class StringChecker(BaseChecker):
    """Validates strings. Length is counted in characters, not bytes."""

    def __init__(self, formats: Optional[dict[str, FormatCheck]] = None):
        self.formats = formats if formats is not None else format_checks()

    @property
    def kind(self) -> str:
        return "string"

    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        errors = self._check_type(schema, path)

        errors.extend(self._check_bounds(
            len(value), schema.min_length, schema.max_length, path,
            keywords=("minLength", "maxLength"),
            subject="length",
        ))

        # Unanchored, like a regex test
        if schema.pattern is not None and schema.pattern.search(value) is None:
            errors.append(self._error(
                code=ErrorCode.PATTERN_VIOLATION,
                message="string does not match pattern",
                path=path,
                constraint="pattern",
                evidence=f"pattern: {schema.pattern.pattern!r}",
            ))

        errors.extend(self._check_enum(schema, value, path))
        errors.extend(self._check_format(schema, value, path))

        return errors

    def _check_format(self, schema: Schema, value: str, path: str) -> list[ValidationError]:
        if schema.format is None:
            return []

        predicate = self.formats.get(schema.format)
        if predicate is None:
            logger.debug("unknown_format", format=schema.format, path=path)
            return []

        if predicate(value):
            return []
        return [self._error(
            code=ErrorCode.PATTERN_VIOLATION,
            message=f"string is not a valid {schema.format}",
            path=path,
            constraint="format",
            evidence=f"got {value!r}",
        )]
