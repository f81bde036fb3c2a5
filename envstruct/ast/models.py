"""
Data Models for Struct Extraction

Structured representations of Go struct metadata extracted from source files.
"""

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from envstruct.ast.parser import ASTParser


@dataclass
class FieldDefinition:
    """Represents one struct field."""

    name: str  # Empty for embedded fields
    type: str  # Declared type with one leading '*' or '[]' stripped
    env_tag: str  # Environment variable key
    is_pointer: bool = False
    is_array: bool = False
    doc: str = ""


@dataclass
class LocatedType:
    """Result of locating a struct type in a parsed file."""

    package: str
    fields: list[FieldDefinition] = field(default_factory=list)
    doc: str = ""


@dataclass
class TypeDefinition:
    """
    Struct type metadata consumed by code generators.

    Constructed with only a name, then filled in by a single parse() call.
    An empty `fields` list after parsing means the type was not found.
    """

    name: str
    file_name: str = ""
    package: str = ""
    fields: list[FieldDefinition] = field(default_factory=list)
    doc: str = ""

    @property
    def found(self) -> bool:
        """True once a matching struct type populated this definition."""
        return bool(self.package)

    def parse(self, file_name: str, parser: Optional["ASTParser"] = None) -> "TypeDefinition":
        """
        Parse struct metadata for this type's name from a Go file.

        Args:
            file_name: Path to the Go source file
            parser: Parser to use (defaults to the shared instance)

        Returns:
            self, for chaining

        Raises:
            OSError: File could not be read
            GoSyntaxError: File is not valid Go
        """
        from envstruct.ast.extractors import get_extractor
        from envstruct.ast.parser import get_parser

        self.file_name = file_name
        parser = parser or get_parser()
        tree, _ = parser.parse_file(file_name)

        return self.assign(get_extractor("go").locate(tree, self.name))

    def assign(self, located: Optional[LocatedType]) -> "TypeDefinition":
        """Take package, fields and doc from a locate result; None leaves them empty."""
        if located is not None:
            self.package = located.package
            self.fields = located.fields
            self.doc = located.doc
        return self

    def to_dict(self) -> dict:
        """Plain-dict form for JSON serialization."""
        return asdict(self)


def parse_type(file_name: str, name: str) -> TypeDefinition:
    """Parse the struct type `name` from `file_name`."""
    return TypeDefinition(name).parse(file_name)
