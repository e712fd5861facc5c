"""Schema conversion failures."""

from __future__ import annotations

from typing import Any

LEGAL_DIRECTIVES: tuple[str, ...] = ("object", "array", "enum", "*")


class PicoschemaError(Exception):
    """Raised when a schema fragment cannot be converted."""


class UnsupportedScalarTypeError(PicoschemaError):
    """Raised when a scalar shorthand names an unknown type."""

    def __init__(self, scalar_type: str) -> None:
        self.scalar_type = scalar_type
        super().__init__(f"picoschema: unsupported scalar type {scalar_type!r}")


class EnumNotArrayError(PicoschemaError):
    """Raised when an (enum) directive annotates a value that is not a list."""

    def __init__(self, property_name: str, value: Any) -> None:
        self.property_name = property_name
        self.value = value
        super().__init__(
            f"picoschema: enum value {value!r} for property {property_name!r} is not an array"
        )


class UnknownParentheticalTypeError(PicoschemaError):
    """Raised when a key directive is not one of the legal directives."""

    def __init__(self, directive: str, property_name: str | None = None) -> None:
        self.directive = directive
        self.property_name = property_name
        if property_name:
            message = (
                f"picoschema: parenthetical type {directive!r} on property {property_name!r} "
                "is only valid on an unnamed wildcard key"
            )
        else:
            message = (
                f"picoschema: parenthetical type {directive!r} "
                f"is none of {list(LEGAL_DIRECTIVES)!r}"
            )
        super().__init__(message)


class InvalidPicoschemaValueError(PicoschemaError):
    """Raised when a value is neither a string, a list nor a mapping."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"picoschema: value {value!r} of type {type(value).__name__} "
            "is not an object, array or string"
        )


class UnrecognizedFieldNameError(PicoschemaError):
    """Raised when a JSON Schema document uses an unknown field name."""

    def __init__(self, field_name: str, location: str = "") -> None:
        self.field_name = field_name
        self.location = location
        message = f"picoschema: unrecognized JSON schema field name {field_name!r}"
        if location:
            message += f" in {location!r}"
        super().__init__(message)


class FieldShapeError(PicoschemaError):
    """Raised when a JSON Schema field holds a value of the wrong shape."""

    def __init__(self, field_name: str, actual: Any, expected: str) -> None:
        self.field_name = field_name
        self.actual_type = type(actual).__name__
        self.expected = expected
        super().__init__(
            f"picoschema: found type {self.actual_type} for field {field_name!r}, want {expected}"
        )
