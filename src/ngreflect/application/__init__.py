"""ngreflect application layer.

Reflection hosts, shared extraction algorithms, discovery and reporters.
Depends on the domain layer only.
"""
