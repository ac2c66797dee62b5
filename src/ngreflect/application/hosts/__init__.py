"""Reflection hosts, one per emit format."""

from ngreflect.application.hosts.canonical import CanonicalReflectionHost
from ngreflect.application.hosts.registry import (
    ENTRY_POINT_FORMATS,
    create_reflection_host,
    format_for_entry_point,
)
from ngreflect.application.hosts.static_properties import Esm2015ReflectionHost
from ngreflect.application.hosts.wrapped_functions import Esm5ReflectionHost

__all__ = [
    "CanonicalReflectionHost",
    "Esm2015ReflectionHost",
    "Esm5ReflectionHost",
    "ENTRY_POINT_FORMATS",
    "create_reflection_host",
    "format_for_entry_point",
]
