"""Data models for parsed Java declarations.

These mirror what an IDE's semantic model exposes about a class: names,
modifiers, annotations resolved to qualified names, and canonical type
text. They are the read-only input the structural analyzer works from.
"""

from dataclasses import dataclass, field
from enum import Enum


class DeclarationKind(Enum):
    """Kinds of type declarations found in a source file."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    ANNOTATION = "annotation"


@dataclass(frozen=True)
class ParameterDeclaration:
    """A formal parameter of a method or constructor."""

    name: str
    type_name: str  # Canonical text, e.g. "java.util.List<com.example.User>"


@dataclass(frozen=True)
class FieldDeclaration:
    """A field declared in a class body."""

    name: str
    type_name: str
    modifiers: frozenset[str] = frozenset()
    annotations: tuple[str, ...] = ()  # Qualified where resolvable

    def has_annotation(self, qualified_names: frozenset[str]) -> bool:
        """Check whether any annotation on this field is in the given set."""
        return any(ann in qualified_names for ann in self.annotations)


@dataclass(frozen=True)
class MethodDeclaration:
    """A method or constructor declared in a class body."""

    name: str
    return_type: str | None  # None for constructors
    parameters: tuple[ParameterDeclaration, ...] = ()
    throws: tuple[str, ...] = ()
    modifiers: frozenset[str] = frozenset()
    annotations: tuple[str, ...] = ()
    is_constructor: bool = False
    line: int = 0

    @property
    def is_public(self) -> bool:
        """Whether the method is declared public."""
        return "public" in self.modifiers

    @property
    def is_static(self) -> bool:
        """Whether the method is declared static."""
        return "static" in self.modifiers


@dataclass(frozen=True)
class ClassDeclaration:
    """A type declaration with its members, in declaration order."""

    name: str
    kind: DeclarationKind
    package_name: str = ""
    fields: tuple[FieldDeclaration, ...] = ()
    methods: tuple[MethodDeclaration, ...] = ()
    annotations: tuple[str, ...] = ()
    modifiers: frozenset[str] = frozenset()
    outer: str | None = None  # Enclosing class name for nested declarations
    start_line: int = 0
    end_line: int = 0

    @property
    def qualified_name(self) -> str:
        """Fully qualified name of the declaration."""
        simple = f"{self.outer}.{self.name}" if self.outer else self.name
        return f"{self.package_name}.{simple}" if self.package_name else simple

    @property
    def constructors(self) -> list[MethodDeclaration]:
        """Declared constructors in declaration order."""
        return [m for m in self.methods if m.is_constructor]

    @property
    def is_interface(self) -> bool:
        """Whether this declaration is an interface."""
        return self.kind == DeclarationKind.INTERFACE

    @property
    def is_annotation_type(self) -> bool:
        """Whether this declaration is an annotation type (@interface)."""
        return self.kind == DeclarationKind.ANNOTATION


@dataclass
class ParsedSource:
    """Result of parsing a single source file."""

    path: str
    language: str
    package_name: str
    classes: list[ClassDeclaration]
    imports: list[str] = field(default_factory=list)
    line_count: int = 0

    def find_class(self, name: str) -> ClassDeclaration | None:
        """Find a declaration by simple or qualified name."""
        for decl in self.classes:
            if name in (decl.name, decl.qualified_name):
                return decl
        return None

    def primary_class(self) -> ClassDeclaration | None:
        """The first top-level declaration in the file, if any."""
        for decl in self.classes:
            if decl.outer is None:
                return decl
        return None


@dataclass
class ParseResult:
    """Result of a parse operation (success or failure)."""

    ok: bool
    source: ParsedSource | None
    error: str | None
    path: str | None = None

    @classmethod
    def success(cls, parsed: ParsedSource) -> "ParseResult":
        """Create a successful parse result."""
        return cls(ok=True, source=parsed, error=None, path=parsed.path)

    @classmethod
    def failure(cls, path: str, error: str) -> "ParseResult":
        """Create a failed parse result."""
        return cls(ok=False, source=None, error=error, path=path)
