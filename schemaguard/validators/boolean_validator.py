"""Boolean Checker — booleans carry no constraints beyond their type."""

from typing import Any

from schemaguard.validators.base import BaseChecker, Evaluate
from schemaguard.validators.models import ValidationError
from schemaguard.validators.schema import Schema


class BooleanChecker(BaseChecker):

    @property
    def kind(self) -> str:
        return "boolean"

    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        return self._check_type(schema, path)
