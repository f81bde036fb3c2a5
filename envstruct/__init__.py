"""
envstruct - Go struct metadata for environment-variable loaders.

This package extracts field names, types, pointer/slice shape and `env` tags
from Go struct definitions using tree-sitter, for code generators that emit
struct population logic.
"""

__version__ = "0.1.0"

from envstruct.ast import FieldDefinition, TypeDefinition, parse_type  # noqa: E402

__all__ = [
    "FieldDefinition",
    "TypeDefinition",
    "parse_type",
    "__version__",
]
