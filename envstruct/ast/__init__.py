"""
AST-Based Struct Extraction

Tree-sitter based extraction of Go struct metadata: field names, types,
pointer/slice shape and the environment variable each field maps to.
"""

from envstruct.ast.models import (
    FieldDefinition,
    LocatedType,
    TypeDefinition,
    parse_type,
)
from envstruct.ast.parser import ASTParser, get_parser
from envstruct.ast.tags import StructTag

__all__ = [
    # Models
    "TypeDefinition",
    "FieldDefinition",
    "LocatedType",
    "parse_type",
    # Parser
    "ASTParser",
    "get_parser",
    # Tags
    "StructTag",
]
