"""
Go AST Extractor

Locates struct types in Go source files and normalizes their fields into
FieldDefinition records using tree-sitter.
"""

from enum import Enum
from typing import Iterator, Optional

from tree_sitter import Node, Tree

from envstruct.ast.extractors.base import LanguageExtractor, register_extractor
from envstruct.ast.models import FieldDefinition, LocatedType
from envstruct.ast.render import render_field_type
from envstruct.ast.tags import StructTag, env_tag
from envstruct.configs.constants import POINTER_MARKER, SLICE_MARKER
from envstruct.configs.logging import get_logger

logger = get_logger("ast.go")


class NodeKind(Enum):
    """Declaration-level node kinds the locator distinguishes."""

    TYPE_SPEC = "type_spec"
    OTHER = "other"


class TypeKind(Enum):
    """Kinds of type a type spec can define."""

    STRUCT = "struct"
    OTHER = "other"


def classify_node(node: Node) -> NodeKind:
    # `type A = B` is a type_alias node and falls through to OTHER
    if node.type == "type_spec":
        return NodeKind.TYPE_SPEC
    return NodeKind.OTHER


def classify_type(node: Optional[Node]) -> TypeKind:
    if node is not None and node.type == "struct_type":
        return TypeKind.STRUCT
    return TypeKind.OTHER


def is_pointer(type_name: str) -> bool:
    """Checks if a rendered type string is a pointer type."""
    return len(type_name) > 0 and type_name[0] == POINTER_MARKER


def is_array(type_name: str) -> bool:
    """Checks if a rendered type string is a slice type."""
    return len(type_name) > 2 and type_name[:2] == SLICE_MARKER


def clean_type_str(type_name: str) -> str:
    """
    Strip surrounding whitespace, then one leading marker: a '*', or else a '[]'.

    A single pass: `*[]byte` becomes `[]byte` and `[]*int` becomes `*int`.
    """
    type_name = type_name.strip()
    if type_name.startswith(POINTER_MARKER):
        type_name = type_name[len(POINTER_MARKER):]
    elif type_name.startswith(SLICE_MARKER):
        type_name = type_name[len(SLICE_MARKER):]
    return type_name


class GoExtractor(LanguageExtractor):
    """Extracts struct metadata from Go source files."""

    @property
    def language(self) -> str:
        return "go"

    def get_package(self, tree: Tree) -> str:
        """Package name from the package clause."""
        clause = self.find_child(tree.root_node, "package_clause")
        if clause is None:
            return ""
        identifier = self.find_child(clause, "package_identifier")
        return self.get_node_text(identifier)

    def iter_type_specs(self, tree: Tree) -> Iterator[Node]:
        """
        Top-level type specs and aliases in document order.

        Covers both `type X ...` and grouped `type ( ... )` declarations.
        Types declared inside function bodies are not visited.
        """
        for decl in tree.root_node.named_children:
            if decl.type != "type_declaration":
                continue
            for spec in decl.named_children:
                if spec.type != "comment":
                    yield spec

    def locate(self, tree: Tree, name: str) -> Optional[LocatedType]:
        """
        Find the first top-level struct type named `name`.

        Returns:
            LocatedType with package, fields and doc, or None if absent
        """

        def visit(node: Node) -> Optional[LocatedType]:
            if classify_node(node) is not NodeKind.TYPE_SPEC:
                return None
            type_node = node.child_by_field_name("type")
            if classify_type(type_node) is not TypeKind.STRUCT:
                return None
            if self.get_node_text(node.child_by_field_name("name")) != name:
                return None
            return LocatedType(
                package=self.get_package(tree),
                fields=self.extract_fields(type_node),
                doc=self.type_doc(node),
            )

        located = self.inspect(self.iter_type_specs(tree), visit)
        if located is None:
            logger.debug(f"No struct type named {name!r}")
        else:
            logger.debug(
                f"Found struct {located.package}.{name} with {len(located.fields)} fields"
            )
        return located

    def list_struct_types(self, tree: Tree) -> list[str]:
        """Names of all top-level struct types."""
        return [
            self.get_node_text(spec.child_by_field_name("name"))
            for spec in self.iter_type_specs(tree)
            if classify_node(spec) is NodeKind.TYPE_SPEC
            and classify_type(spec.child_by_field_name("type")) is TypeKind.STRUCT
        ]

    def type_doc(self, spec: Node) -> str:
        """Doc comment of a type spec, or of its enclosing `type` declaration."""
        doc = self.leading_comment(spec)
        if doc:
            return doc
        decl = spec.parent
        if decl is not None and decl.type == "type_declaration":
            specs = [child for child in decl.named_children if child.type != "comment"]
            if len(specs) == 1:
                return self.leading_comment(decl)
        return ""

    def extract_fields(self, type_node: Node) -> list[FieldDefinition]:
        """
        Normalize each field declaration of a struct type.

        Embedded fields produce one record with an empty name; grouped
        declarations (`a, b int`) produce one record per name.
        """
        fields: list[FieldDefinition] = []
        body = self.find_child(type_node, "field_declaration_list")
        if body is None:
            return fields

        for decl in body.named_children:
            if decl.type != "field_declaration":
                continue

            type_str = render_field_type(decl)
            tag = StructTag.from_literal(self.get_node_text(decl.child_by_field_name("tag")))
            doc = self.leading_comment(decl) or self.trailing_comment(decl)
            shape = {
                "type": clean_type_str(type_str),
                "is_pointer": is_pointer(type_str),
                "is_array": is_array(type_str),
                "doc": doc,
            }

            names = decl.children_by_field_name("name")
            if not names:
                fields.append(FieldDefinition(name="", env_tag=env_tag(tag, type_str), **shape))
                continue

            for name_node in names:
                field_name = self.get_node_text(name_node)
                fields.append(
                    FieldDefinition(name=field_name, env_tag=env_tag(tag, field_name), **shape)
                )

        return fields


# Register the extractor
register_extractor(GoExtractor())
