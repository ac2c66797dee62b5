"""Shared extraction algorithms used by every reflection host."""

from ngreflect.application.extraction.decorator_array import (
    extract_decorator,
    extract_decorators,
)
from ngreflect.application.extraction.object_literal import (
    find_property_value,
    reflect_object_literal,
)

__all__ = [
    "extract_decorator",
    "extract_decorators",
    "find_property_value",
    "reflect_object_literal",
]
