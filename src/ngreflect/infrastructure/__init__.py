"""ngreflect infrastructure layer.

Tree-sitter based front end implementing the domain ports.
"""
