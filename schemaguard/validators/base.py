"""Base checker — abstract class implementing the Strategy Pattern.

Each value kind has one checker. Checkers are standalone, independently
testable units; the engine picks one per value and never the other way round.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from schemaguard.validators.equality import contains_equal
from schemaguard.validators.models import ValidationError, ErrorCode
from schemaguard.validators.schema import Schema

# Evaluates a nested schema against a nested value and returns its own findings
Evaluate = Callable[[Schema, Any, str], list[ValidationError]]


class BaseChecker(ABC):
    """Abstract base for all per-kind constraint checkers.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns a list of ValidationError (empty = no issues)
        - check() keeps no state between calls
        - Nested schemas go through ``evaluate`` only; each call returns an
          isolated list the checker merges explicitly
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Declared type name this checker asserts, e.g. 'number'."""
        ...

    @abstractmethod
    def check(self, schema: Schema, value: Any, path: str, evaluate: Evaluate) -> list[ValidationError]:
        """Run every constraint of ``schema`` that applies to ``value``.

        Args:
            schema: Normalized schema node
            value: Value of this checker's kind
            path: Location of value, '$' for the root
            evaluate: Callback for nested schema evaluation

        Returns:
            List of ValidationError findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(
        self,
        code: ErrorCode,
        message: str,
        path: str,
        constraint: Optional[str] = None,
        evidence: Optional[str] = None,
    ) -> ValidationError:
        """Convenience method to create a ValidationError."""
        return ValidationError(
            code=code,
            message=message,
            path=path,
            constraint=constraint,
            evidence=evidence,
        )

    def _check_type(self, schema: Schema, path: str) -> list[ValidationError]:
        """Declared type must match this checker's kind. Does not stop later checks."""
        if schema.type == self.kind:
            return []
        return [self._error(
            code=ErrorCode.TYPE_MISMATCH,
            message="type incorrect",
            path=path,
            constraint="type",
            evidence=f"declared: {schema.type}, actual: {self.kind}",
        )]

    def _check_bounds(
        self,
        actual: Union[int, float],
        low: Optional[Union[int, float]],
        high: Optional[Union[int, float]],
        path: str,
        keywords: tuple[str, str],
        subject: str,
    ) -> list[ValidationError]:
        """Inclusive low/high bounds. A bound of None is not checked."""
        errors = []
        low_keyword, high_keyword = keywords

        if low is not None and actual < low:
            errors.append(self._error(
                code=ErrorCode.RANGE_VIOLATION,
                message=f"{subject} {actual} is less than {low_keyword} {low}",
                path=path,
                constraint=low_keyword,
            ))
        if high is not None and actual > high:
            errors.append(self._error(
                code=ErrorCode.RANGE_VIOLATION,
                message=f"{subject} {actual} is greater than {high_keyword} {high}",
                path=path,
                constraint=high_keyword,
            ))

        return errors

    def _check_enum(self, schema: Schema, value: Any, path: str) -> list[ValidationError]:
        if schema.enum is None or contains_equal(schema.enum, value):
            return []
        return [self._error(
            code=ErrorCode.SET_VIOLATION,
            message="value is not one of the enum values",
            path=path,
            constraint="enum",
            evidence=f"got {value!r}, allowed: {schema.enum!r}",
        )]

    @staticmethod
    def _child_path(path: str, key: Union[int, str]) -> str:
        """Path of an array element or object member."""
        if isinstance(key, int):
            return f"{path}[{key}]"
        if isinstance(key, str) and key.isidentifier():
            return f"{path}.{key}"
        return f"{path}[{key!r}]"
