"""
Tree-sitter Parser Wrapper

Handles language detection and tree-sitter parsing of Go source files.
"""

from pathlib import Path
from typing import Optional, Union

import tree_sitter_go
from tree_sitter import Language, Node, Parser, Tree

from envstruct.configs.constants import EXTENSION_TO_LANGUAGE
from envstruct.configs.logging import get_logger
from envstruct.exceptions import GoSyntaxError, UnsupportedLanguageError

logger = get_logger("ast.parser")


# Supported languages and their tree-sitter modules
LANGUAGE_MODULES = {
    "go": tree_sitter_go,
}


class ASTParser:
    """
    Tree-sitter based parser for Go source.

    Lazily initializes the language and parser on first use. Comments are
    kept in the resulting tree as `comment` nodes.
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, Language] = {}

    def _get_language(self, lang_name: str) -> Language:
        """Get or create Language object for a language."""
        if lang_name in self._languages:
            return self._languages[lang_name]

        module = LANGUAGE_MODULES.get(lang_name)
        if module is None:
            raise UnsupportedLanguageError(f"Unsupported language: {lang_name}")

        language = Language(module.language())
        self._languages[lang_name] = language
        return language

    def _get_parser(self, lang_name: str) -> Parser:
        """Get or create Parser for a language."""
        if lang_name in self._parsers:
            return self._parsers[lang_name]

        parser = Parser(self._get_language(lang_name))
        self._parsers[lang_name] = parser
        return parser

    def detect_language(self, file_path: str) -> Optional[str]:
        """
        Detect language from file extension.

        Args:
            file_path: Path to the source file

        Returns:
            Language name or None if unsupported
        """
        ext = Path(file_path).suffix.lower()
        return EXTENSION_TO_LANGUAGE.get(ext)

    def is_supported(self, file_path: str) -> bool:
        """Check if a file's language is supported."""
        return self.detect_language(file_path) is not None

    def parse(self, source: Union[str, bytes], file_name: Optional[str] = None) -> Tree:
        """
        Parse Go source code into an AST.

        Args:
            source: Source code as string or UTF-8 bytes
            file_name: Used only in error reports

        Returns:
            Tree-sitter Tree

        Raises:
            GoSyntaxError: Source is not valid Go
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        tree = self._get_parser("go").parse(source)
        check_syntax(tree, source, file_name)
        logger.debug(f"Parsed {file_name or '<source>'} ({len(source)} bytes)")
        return tree

    def parse_file(self, file_path: str) -> tuple[Tree, bytes]:
        """
        Read and parse a Go file.

        Args:
            file_path: Path to the source file

        Returns:
            Tuple of (Tree, raw file content)

        Raises:
            OSError: File could not be read
            GoSyntaxError: File is not valid Go
        """
        content = Path(file_path).read_bytes()
        return self.parse(content, file_name=file_path), content


def check_syntax(tree: Tree, source: bytes, file_name: Optional[str] = None) -> None:
    """
    Raise GoSyntaxError if the tree holds parse errors or lacks a package clause.
    """
    root = tree.root_node
    if root.has_error:
        bad = _first_error_node(root) or root
        row, column = bad.start_point
        if bad.is_missing:
            message = f"expected '{bad.type}'"
        else:
            message = "unexpected token"
        _raise_syntax_error(source, message, file_name, row, column)

    if not any(child.type == "package_clause" for child in root.children):
        _raise_syntax_error(source, "expected 'package'", file_name, 0, 0)


def _first_error_node(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or missing node."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None


def _raise_syntax_error(
    source: bytes, message: str, file_name: Optional[str], row: int, column: int
) -> None:
    lines = source.decode("utf-8", errors="replace").splitlines()
    line_text = lines[row] if row < len(lines) else None
    location = f"{file_name or '<source>'}:{row + 1}:{column + 1}"
    logger.error(f"Syntax error at {location}: {message}")
    raise GoSyntaxError(
        message,
        filename=file_name,
        lineno=row + 1,
        offset=column + 1,
        text=line_text,
    )


# Global parser instance (lazy singleton)
_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Get the global ASTParser instance."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
