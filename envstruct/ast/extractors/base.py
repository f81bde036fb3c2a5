"""
Base Extractor Interface

Abstract base class that all language extractors must implement.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, TypeVar

from tree_sitter import Node, Tree

from envstruct.ast.models import FieldDefinition, LocatedType
from envstruct.ast.render import node_text

T = TypeVar("T")


class LanguageExtractor(ABC):
    """
    Abstract base class for language-specific struct extractors.

    Each language implements this interface to locate a named record type
    and describe its fields.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language name (e.g., 'go')."""
        pass

    @abstractmethod
    def locate(self, tree: Tree, name: str) -> Optional[LocatedType]:
        """
        Find the first record type with the given name.

        Args:
            tree: Parsed AST tree
            name: Exact, case-sensitive type name

        Returns:
            LocatedType, or None when no record type has that name
        """
        pass

    @abstractmethod
    def extract_fields(self, type_node: Node) -> list[FieldDefinition]:
        """
        Describe the fields of a located record type.

        Args:
            type_node: The record type node (e.g. a Go struct_type)

        Returns:
            FieldDefinition list in declaration order
        """
        pass

    @abstractmethod
    def list_struct_types(self, tree: Tree) -> list[str]:
        """
        Names of all top-level record types, in declaration order.

        Args:
            tree: Parsed AST tree

        Returns:
            List of type names
        """
        pass

    # Helper methods for AST traversal

    def get_node_text(self, node: Optional[Node]) -> str:
        """Extract the text content of an AST node."""
        return node_text(node)

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def inspect(self, nodes: Iterable[Node], visit: Callable[[Node], Optional[T]]) -> Optional[T]:
        """
        Visit nodes in order until one visit returns a result.

        A non-None return from `visit` is the stop signal: traversal ends
        immediately and that value is returned.

        Args:
            nodes: Nodes to visit, in traversal order
            visit: Callback returning a result to stop, or None to continue

        Returns:
            The first non-None visit result, or None
        """
        for node in nodes:
            result = visit(node)
            if result is not None:
                return result
        return None

    def leading_comment(self, node: Node) -> str:
        """
        Comment block directly above a node.

        Collects consecutive comment siblings ending on the line just above
        the node, skipping comments that trail code on their own line.
        """
        lines: list[str] = []
        current = node
        sibling = node.prev_named_sibling
        while sibling is not None and sibling.type == "comment":
            if sibling.end_point[0] != current.start_point[0] - 1:
                break
            before = sibling.prev_named_sibling
            if before is not None and before.end_point[0] == sibling.start_point[0]:
                break
            lines[:0] = strip_comment(node_text(sibling))
            current = sibling
            sibling = sibling.prev_named_sibling
        return "\n".join(lines)

    def trailing_comment(self, node: Node) -> str:
        """Comment starting on the same line a node ends on."""
        sibling = node.next_named_sibling
        if (
            sibling is not None
            and sibling.type == "comment"
            and sibling.start_point[0] == node.end_point[0]
        ):
            return "\n".join(strip_comment(node_text(sibling)))
        return ""


def strip_comment(text: str) -> list[str]:
    """Remove `//` or `/* */` markers; returns the comment's lines."""
    if text.startswith("//"):
        return [text[2:].strip()]
    if text.startswith("/*"):
        body = text[2:]
        if body.endswith("*/"):
            body = body[:-2]
        return [line.strip() for line in body.strip().splitlines()]
    return [text.strip()]


# Registry of extractors by language
_extractors: dict[str, LanguageExtractor] = {}


def register_extractor(extractor: LanguageExtractor) -> None:
    """Register an extractor for a language."""
    _extractors[extractor.language] = extractor


def get_extractor(language: str) -> Optional[LanguageExtractor]:
    """
    Get the extractor for a language.

    Args:
        language: Language name (go)

    Returns:
        LanguageExtractor or None if unsupported
    """
    return _extractors.get(language)
