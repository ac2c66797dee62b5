"""Domain enumerations."""

from enum import Enum, auto


class EmitFormat(Enum):
    """Structural convention a toolchain used to lower decorator syntax."""

    DECORATOR_SYNTAX = auto()  # @Directive({...}) class X {}
    STATIC_PROPERTIES = auto()  # X.decorators = [...] (ES2015 output)
    WRAPPED_FUNCTIONS = auto()  # var X = (function () { function X() {} ... }()) (ES5 output)


class MemberKind(Enum):
    """Class member kind."""

    CONSTRUCTOR = auto()
    METHOD = auto()
    GETTER = auto()
    SETTER = auto()
    PROPERTY = auto()
