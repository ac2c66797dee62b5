"""ngreflect - recover decorator metadata from compiled JavaScript packages."""

__version__ = "0.1.0"

from ngreflect.application.discovery import find_decorated_classes
from ngreflect.application.hosts import (
    CanonicalReflectionHost,
    Esm2015ReflectionHost,
    Esm5ReflectionHost,
    create_reflection_host,
    format_for_entry_point,
)
from ngreflect.domain.model import (
    DecoratedClass,
    Decorator,
    EmitFormat,
    ImportProvenance,
    NotRecognized,
    NotSupported,
    Recovered,
    ReflectionConfig,
)
from ngreflect.infrastructure.adapters import TreeSitterParser, TreeSitterProgram

__all__ = [
    "__version__",
    # Hosts
    "CanonicalReflectionHost",
    "Esm2015ReflectionHost",
    "Esm5ReflectionHost",
    "create_reflection_host",
    "format_for_entry_point",
    "find_decorated_classes",
    # Model
    "Decorator",
    "DecoratedClass",
    "EmitFormat",
    "ImportProvenance",
    "ReflectionConfig",
    # Results
    "Recovered",
    "NotRecognized",
    "NotSupported",
    # Front end
    "TreeSitterParser",
    "TreeSitterProgram",
]
