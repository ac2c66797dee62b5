"""Reflection configuration.

Names of the static properties the emit toolchains write, and the
naming heuristic used to spot class-like functions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ngreflect.domain.exceptions.configuration import ConfigurationError


@dataclass(frozen=True, slots=True)
class ReflectionConfig:
    """Reflection host configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults matching the Angular package format.

    Attributes:
        decorators_property: Static property holding class decorator
            descriptors (``X.decorators = [...]``)
        prop_decorators_property: Static property mapping member names
            to decorator descriptors (``X.propDecorators = {...}``)
        ctor_parameters_property: Static property describing constructor
            parameters (``X.ctorParameters = () => [...]``)
        class_name_pattern: Regex a function name must match to be
            treated as a class in wrapped-function output
    """

    decorators_property: str = "decorators"
    prop_decorators_property: str = "propDecorators"
    ctor_parameters_property: str = "ctorParameters"
    class_name_pattern: str = "^[A-Z]"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in (
            "decorators_property",
            "prop_decorators_property",
            "ctor_parameters_property",
        ):
            value = getattr(self, name)
            if not value:
                raise ConfigurationError(name, "must not be empty")
            if not value.isidentifier():
                raise ConfigurationError(name, f"'{value}' is not a valid property name")

        if self.decorators_property == self.prop_decorators_property:
            raise ConfigurationError(
                "prop_decorators_property",
                "must differ from decorators_property",
            )

        if not self.class_name_pattern:
            raise ConfigurationError("class_name_pattern", "must not be empty")
        try:
            re.compile(self.class_name_pattern)
        except re.error as e:
            raise ConfigurationError("class_name_pattern", f"invalid regex: {e}") from e

    def looks_like_class_name(self, name: str) -> bool:
        """Check a binding name against the class naming heuristic."""
        return re.match(self.class_name_pattern, name) is not None
