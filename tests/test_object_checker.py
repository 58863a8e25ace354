"""Tests for the object checker."""

from schemaguard.validators import ErrorCode

from conftest import codes

PERSON = {
    "type": "object",
    "required": ["name"],
    "properties": {"name": {"type": "string"}},
}


class TestRequired:
    """Test required keys."""

    def test_present_value(self, engine):
        """A present, non-empty value satisfies required."""
        assert engine.validate(PERSON, {"name": "x"}).ok

    def test_empty_string_counts_as_missing(self, engine):
        """An empty string is treated as missing."""
        result = engine.validate(PERSON, {"name": ""})

        assert not result.ok
        assert codes(result) == [ErrorCode.REQUIRED_FIELD_MISSING]
        assert result.violations[0].path == "$.name"

    def test_missing_key(self, engine):
        """An absent key is missing."""
        assert codes(engine.validate(PERSON, {})) == [ErrorCode.REQUIRED_FIELD_MISSING]

    def test_falsy_values_count_as_missing(self, engine):
        """0, False and None are missing; empty containers are present."""
        schema = {"type": "object", "required": ["v"]}

        for value in (0, 0.0, False, None, "", float("nan")):
            assert not engine.is_valid(schema, {"v": value}), value
        for value in ([], {}, "0", -1, True):
            assert engine.is_valid(schema, {"v": value}), value


class TestProperties:
    """Test properties and additionalProperties."""

    def test_property_findings_carry_paths(self, engine):
        """Nested findings are folded in under the member path."""
        schema = {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string"}},
                "meta": {
                    "type": "object",
                    "properties": {"size": {"type": "number", "maximum": 10}},
                },
            },
        }
        result = engine.validate(schema, {"tags": ["a", 1], "meta": {"size": 11}})

        assert result.errors == [
            "$.tags[1]: type incorrect",
            "$.meta.size: value 11 is greater than maximum 10",
        ]

    def test_declared_but_absent_property(self, engine):
        """Declared properties are only checked when present."""
        schema = {"type": "object", "properties": {"a": {"type": "number"}}}

        assert engine.is_valid(schema, {})

    def test_additional_forbidden_by_default(self, engine):
        """Undeclared keys fail when additionalProperties is not set."""
        result = engine.validate(PERSON, {"name": "x", "age": 3})

        assert codes(result) == [ErrorCode.ADDITIONAL_PROPERTY_FORBIDDEN]
        assert result.errors == ["$.age: additional properties not permitted."]

    def test_each_extra_key_reported(self, engine):
        """Every undeclared key is reported."""
        result = engine.validate(PERSON, {"name": "x", "a": 1, "b": 2})

        assert codes(result) == [ErrorCode.ADDITIONAL_PROPERTY_FORBIDDEN] * 2

    def test_additional_allowed(self, engine):
        """additionalProperties: true allows extra keys."""
        schema = dict(PERSON, additionalProperties=True)

        assert engine.is_valid(schema, {"name": "x", "age": 3, "city": "y"})

    def test_no_properties_means_no_restriction(self, engine):
        """Without properties, extra keys are not checked."""
        assert engine.is_valid({"type": "object"}, {"anything": 1})

    def test_extra_key_reported_alongside_invalid_member(self, engine):
        """A failing member does not hide extra keys."""
        result = engine.validate(PERSON, {"name": 5, "x": 1})

        assert codes(result) == [
            ErrorCode.TYPE_MISMATCH,
            ErrorCode.ADDITIONAL_PROPERTY_FORBIDDEN,
        ]

    def test_odd_keys_are_quoted_in_paths(self, engine):
        """Keys that are not identifiers are bracketed."""
        schema = {"type": "object", "properties": {"first name": {"type": "string"}}}
        result = engine.validate(schema, {"first name": 1})

        assert result.errors == ["$['first name']: type incorrect"]


class TestPropertyCounts:
    """Test minProperties and maxProperties."""

    def test_property_bounds(self, engine):
        """Counts are inclusive and use own keys."""
        schema = {"type": "object", "minProperties": 1, "maxProperties": 2}

        assert engine.is_valid(schema, {"a": 1})
        assert engine.is_valid(schema, {"a": 1, "b": 2})
        assert codes(engine.validate(schema, {})) == [ErrorCode.RANGE_VIOLATION]
        assert codes(engine.validate(schema, {"a": 1, "b": 2, "c": 3})) == [
            ErrorCode.RANGE_VIOLATION
        ]
