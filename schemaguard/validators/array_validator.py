"""Array Checker — item counts, containment, enum, uniqueness, and item schemas."""

from typing import Any

from schemaguard.validators.base import BaseChecker, Evaluate
from schemaguard.validators.equality import contains_equal, values_equal
from schemaguard.validators.models import ValidationError, ErrorCode
from schemaguard.validators.schema import Schema


class ArrayChecker(BaseChecker):
    """Validates sequences. Every check runs independently of the others."""

    @property
    def kind(self) -> str:
        return "array"

    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        items = list(value)
        errors = self._check_type(schema, path)

        # ── 1. Item count ──
        errors.extend(self._check_bounds(
            len(items), schema.min_items, schema.max_items, path,
            keywords=("minItems", "maxItems"),
            subject="item count",
        ))

        # ── 2. Containment ──
        if schema.has_contains and not contains_equal(items, schema.contains):
            errors.append(self._error(
                code=ErrorCode.CONTAINMENT_VIOLATION,
                message="array does not contain the required value",
                path=path,
                constraint="contains",
                evidence=f"required: {schema.contains!r}",
            ))

        # ── 3. Whole-array enum ──
        errors.extend(self._check_enum(schema, items, path))

        # ── 4. Uniqueness ──
        if schema.unique_items:
            errors.extend(self._check_unique(items, path))

        # ── 5. Item schemas ──
        if schema.items is not None:
            errors.extend(self._check_items(schema, items, path, evaluate))

        return errors

    def _check_unique(self, items: list, path: str) -> list[ValidationError]:
        """One finding per duplicate pair (i < j)."""
        errors = []

        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if values_equal(items[i], items[j]):
                    errors.append(self._error(
                        code=ErrorCode.UNIQUENESS_VIOLATION,
                        message=f"items {i} and {j} are equal",
                        path=path,
                        constraint="uniqueItems",
                        evidence=f"duplicate: {items[i]!r}",
                    ))

        return errors

    def _check_items(
        self, schema: Schema, items: list, path: str, evaluate: Evaluate
    ) -> list[ValidationError]:
        """Single schema: fold each element's findings in.
        Alternatives: each element must satisfy at least one, probed in isolation.
        """
        errors = []
        alternatives = schema.item_alternatives

        for index, element in enumerate(items):
            element_path = self._child_path(path, index)

            if alternatives is None:
                errors.extend(evaluate(schema.items, element, element_path))
                continue

            if not any(not evaluate(alt, element, element_path) for alt in alternatives):
                errors.append(self._error(
                    code=ErrorCode.COMBINATOR_VIOLATION,
                    message="item matched none of the allowed schemas",
                    path=element_path,
                    constraint="items",
                    evidence=f"{len(alternatives)} alternative(s) tried",
                ))

        return errors
