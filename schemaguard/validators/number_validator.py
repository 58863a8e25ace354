"""Number Checker — inclusive bounds and enum membership."""

from typing import Any

from schemaguard.validators.base import BaseChecker, Evaluate
from schemaguard.validators.models import ValidationError
from schemaguard.validators.schema import Schema


class NumberChecker(BaseChecker):

    @property
    def kind(self) -> str:
        return "number"

    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        errors = self._check_type(schema, path)
        errors.extend(self._check_bounds(
            value, schema.minimum, schema.maximum, path,
            keywords=("minimum", "maximum"),
            subject="value",
        ))
        errors.extend(self._check_enum(schema, value, path))
        return errors
