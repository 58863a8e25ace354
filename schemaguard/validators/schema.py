"""Schema model — the typed tree a plain dict schema is normalized into.

Keywords are accepted in their camelCase spelling (``minLength``) or by
field name (``min_length``). Unknown keywords are ignored.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from schemaguard.validators.models import SchemaError

Number = Union[int, float]

# Declared types the engine knows how to check
KNOWN_TYPES = ("number", "boolean", "string", "array", "object")

# Keys that make a mapping a schema on its own (rather than a set of alternatives)
SCHEMA_MARKERS = ("type", "oneOf", "anyOf")


class Schema(BaseModel):
    """Declarative description of the permitted shape of a value."""

    type: Optional[str] = None
    nullable: bool = False

    # Combinators
    one_of: Optional[list["Schema"]] = Field(default=None, alias="oneOf")
    any_of: Optional[list["Schema"]] = Field(default=None, alias="anyOf")

    # Shared by number, string and array
    enum: Optional[list[Any]] = None

    # Number
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None

    # String
    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    pattern: Optional[re.Pattern] = None
    format: Optional[str] = None

    # Array
    min_items: Optional[int] = Field(default=None, alias="minItems")
    max_items: Optional[int] = Field(default=None, alias="maxItems")
    unique_items: bool = Field(default=False, alias="uniqueItems")
    contains: Any = None
    items: Optional[Union["Schema", list["Schema"]]] = None

    # Object
    min_properties: Optional[int] = Field(default=None, alias="minProperties")
    max_properties: Optional[int] = Field(default=None, alias="maxProperties")
    required: Optional[list[str]] = None
    properties: Optional[dict[str, "Schema"]] = None
    additional_properties: bool = Field(default=False, alias="additionalProperties")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("items", mode="before")
    @classmethod
    def _split_item_alternatives(cls, value: Any) -> Any:
        """A mapping without a type or combinator is a keyed set of alternatives.

        Shape is decided by keys alone, so a single item schema must carry
        ``type``, ``oneOf`` or ``anyOf``. A bare ``{"nullable": true, "enum": [1]}``
        is read as alternatives named "nullable" and "enum", and parsing fails
        with SchemaError because their values are not schemas.
        """
        if isinstance(value, dict) and not any(key in value for key in SCHEMA_MARKERS):
            return list(value.values())
        return value

    @property
    def has_contains(self) -> bool:
        """True when ``contains`` was given, even as null."""
        return "contains" in self.model_fields_set

    @property
    def item_alternatives(self) -> Optional[list["Schema"]]:
        """Alternatives for array items, or None when items is a single schema."""
        if isinstance(self.items, list):
            return self.items
        return None

    @classmethod
    def parse(cls, raw: Union["Schema", Mapping, None]) -> "Schema":
        """Normalize a plain mapping (or None) into a Schema.

        Raises:
            SchemaError: If a keyword value has the wrong shape
        """
        if isinstance(raw, Schema):
            return raw
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise SchemaError(f"Schema must be a mapping, got {type(raw).__name__}")
        try:
            return cls.model_validate(dict(raw))
        except PydanticValidationError as e:
            raise SchemaError(f"Malformed schema: {e}") from e


Schema.model_rebuild()
