"""Schema conversion exports."""

from .conversion_errors import (
    EnumNotArrayError,
    FieldShapeError,
    InvalidPicoschemaValueError,
    PicoschemaError,
    UnknownParentheticalTypeError,
    UnrecognizedFieldNameError,
    UnsupportedScalarTypeError,
)
from .field_mapping import map_schema_fields
from .fragment_detection import (
    PassthroughFragment,
    SchemaFragment,
    ShorthandFragment,
    classify_fragment,
)
from .schema_dispatch import convert_to_schema
from .shorthand_grammar import parse_shorthand

__all__ = [
    "EnumNotArrayError",
    "FieldShapeError",
    "InvalidPicoschemaValueError",
    "PassthroughFragment",
    "PicoschemaError",
    "SchemaFragment",
    "ShorthandFragment",
    "UnknownParentheticalTypeError",
    "UnrecognizedFieldNameError",
    "UnsupportedScalarTypeError",
    "classify_fragment",
    "convert_to_schema",
    "map_schema_fields",
    "parse_shorthand",
]
