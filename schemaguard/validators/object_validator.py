"""Object Checker — property counts, required keys, declared and extra properties."""

from typing import Any

from schemaguard.validators.base import BaseChecker, Evaluate
from schemaguard.validators.kinds import is_truthy
from schemaguard.validators.models import ValidationError, ErrorCode
from schemaguard.validators.schema import Schema


class ObjectChecker(BaseChecker):
    """Validates mappings against object schemas."""

    @property
    def kind(self) -> str:
        return "object"

    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        errors = self._check_type(schema, path)

        # 1. Property count
        errors.extend(self._check_bounds(
            len(value), schema.min_properties, schema.max_properties, path,
            keywords=("minProperties", "maxProperties"),
            subject="property count",
        ))

        # 2. Required keys, present with a truthy value
        for key in schema.required or []:
            if key not in value or not is_truthy(value[key]):
                errors.append(self._error(
                    code=ErrorCode.REQUIRED_FIELD_MISSING,
                    message=f"required property '{key}' is missing or empty",
                    path=self._child_path(path, key),
                    constraint="required",
                ))

        # 3. Declared properties and anything beyond them
        if schema.properties is not None:
            for key, member in value.items():
                member_path = self._child_path(path, key)
                if key in schema.properties:
                    errors.extend(evaluate(schema.properties[key], member, member_path))
                elif not schema.additional_properties:
                    errors.append(self._error(
                        code=ErrorCode.ADDITIONAL_PROPERTY_FORBIDDEN,
                        message="additional properties not permitted.",
                        path=member_path,
                        constraint="additionalProperties",
                        evidence=f"declared: {', '.join(schema.properties) or 'none'}",
                    ))

        return errors
