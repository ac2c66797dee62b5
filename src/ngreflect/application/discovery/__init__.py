"""Discovery of decorated classes in parsed source files."""

from ngreflect.application.discovery.decorated_classes import find_decorated_classes

__all__ = ["find_decorated_classes"]
