"""Front-end adapters producing the syntax model and program context."""

from ngreflect.infrastructure.adapters.program import TreeSitterProgram
from ngreflect.infrastructure.adapters.tree_sitter_parser import TreeSitterParser

__all__ = [
    "TreeSitterParser",
    "TreeSitterProgram",
]
