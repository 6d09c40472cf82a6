"""Java declaration parser using tree-sitter."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter_java as ts_java
from tree_sitter import Language, Parser

from testgen.constants import INJECTION_MARKERS
from testgen.parsing.base import BaseParser
from testgen.parsing.models import (
    ClassDeclaration,
    DeclarationKind,
    FieldDeclaration,
    MethodDeclaration,
    ParameterDeclaration,
    ParsedSource,
    ParseResult,
)

logger = logging.getLogger(__name__)


DECLARATION_KINDS: dict[str, DeclarationKind] = {
    "class_declaration": DeclarationKind.CLASS,
    "interface_declaration": DeclarationKind.INTERFACE,
    "enum_declaration": DeclarationKind.ENUM,
    "record_declaration": DeclarationKind.RECORD,
    "annotation_type_declaration": DeclarationKind.ANNOTATION,
}

ANNOTATION_NODES = frozenset({"marker_annotation", "annotation"})

# Capitalized identifier not preceded by a qualifier, e.g. "User" in List<User>
SIMPLE_TYPE_PATTERN = re.compile(r"(?<![\w.$])([A-Z][\w$]*)")
TYPE_ANNOTATION_PATTERN = re.compile(r"@[\w.]+\s*")


@dataclass
class _ImportContext:
    """Package and import information used to qualify names in one file."""

    package_name: str = ""
    single_imports: dict[str, str] = field(default_factory=dict)
    wildcard_imports: list[str] = field(default_factory=list)


class JavaParser(BaseParser):
    """Parser for Java source files using tree-sitter.

    Produces ClassDeclaration objects whose annotation and type names are
    qualified through the file's imports, so downstream code sees roughly
    what an IDE's semantic model would report.
    """

    def __init__(self):
        """Initialize the Java parser."""
        self._language = Language(ts_java.language())
        self._parser = Parser(self._language)

    @property
    def supported_extensions(self) -> list[str]:
        """File extensions this parser handles."""
        return [".java"]

    @property
    def language_name(self) -> str:
        """Human-readable language name."""
        return "Java"

    def parse(self, file_path: Path, content: str) -> ParseResult:
        """Parse Java file content and extract type declarations.

        Args:
            file_path: Path to the file (for error messages).
            content: File content as string.

        Returns:
            ParseResult with extracted declarations or error.
        """
        try:
            tree = self._parser.parse(content.encode("utf-8"))
            root = tree.root_node
            if root.has_error:
                logger.debug(f"Syntax errors in {file_path}, extracting what parsed")

            ctx = self._collect_imports(root)
            classes: list[ClassDeclaration] = []
            for child in root.children:
                if child.type in DECLARATION_KINDS:
                    self._extract_declaration(child, ctx, classes, outer=None)

            parsed = ParsedSource(
                path=str(file_path),
                language="java",
                package_name=ctx.package_name,
                classes=classes,
                imports=list(ctx.single_imports.values())
                + [f"{pkg}.*" for pkg in ctx.wildcard_imports],
                line_count=content.count("\n") + 1,
            )
            logger.debug(f"Parsed {len(classes)} declaration(s) from {file_path}")
            return ParseResult.success(parsed)

        except Exception as e:
            return ParseResult.failure(str(file_path), f"Parse error: {e}")

    # -------------------------------------------------------------------------
    # File header
    # -------------------------------------------------------------------------

    def _collect_imports(self, root) -> _ImportContext:
        """Read the package declaration and non-static imports."""
        ctx = _ImportContext()

        for child in root.children:
            if child.type == "package_declaration":
                for sub in child.children:
                    if sub.type in ("scoped_identifier", "identifier"):
                        ctx.package_name = self._text(sub)
                        break
            elif child.type == "import_declaration":
                if any(sub.type == "static" for sub in child.children):
                    continue
                target = None
                wildcard = False
                for sub in child.children:
                    if sub.type in ("scoped_identifier", "identifier"):
                        target = self._text(sub)
                    elif sub.type == "asterisk":
                        wildcard = True
                if target is None:
                    continue
                if wildcard:
                    ctx.wildcard_imports.append(target)
                else:
                    ctx.single_imports[target.rsplit(".", 1)[-1]] = target

        return ctx

    # -------------------------------------------------------------------------
    # Declarations
    # -------------------------------------------------------------------------

    def _extract_declaration(
        self,
        node,
        ctx: _ImportContext,
        classes: list[ClassDeclaration],
        outer: str | None,
    ) -> None:
        """Extract a type declaration and, recursively, its nested types.

        Args:
            node: A *_declaration node for a class-like type.
            ctx: Import context of the enclosing file.
            classes: List to append declarations to.
            outer: Dotted name of the enclosing declaration, if nested.
        """
        name_node = node.child_by_field_name("name")
        if not name_node:
            return

        name = self._text(name_node)
        modifiers, annotations = self._extract_modifiers(node, ctx)

        fields: list[FieldDeclaration] = []
        methods: list[MethodDeclaration] = []
        nested: list = []

        for member in self._body_members(node):
            if member.type == "field_declaration":
                fields.extend(self._extract_fields(member, ctx))
            elif member.type == "method_declaration":
                methods.append(self._extract_method(member, ctx))
            elif member.type == "constructor_declaration":
                methods.append(self._extract_method(member, ctx, is_constructor=True))
            elif member.type in DECLARATION_KINDS:
                nested.append(member)

        classes.append(
            ClassDeclaration(
                name=name,
                kind=DECLARATION_KINDS[node.type],
                package_name=ctx.package_name,
                fields=tuple(fields),
                methods=tuple(methods),
                annotations=tuple(annotations),
                modifiers=frozenset(modifiers),
                outer=outer,
                start_line=node.start_point[0] + 1,
                end_line=node.end_point[0] + 1,
            )
        )

        nested_outer = f"{outer}.{name}" if outer else name
        for child in nested:
            self._extract_declaration(child, ctx, classes, outer=nested_outer)

    def _body_members(self, node) -> list:
        """Return member nodes of a declaration body in source order."""
        body = node.child_by_field_name("body")
        if body is None:
            return []

        members = []
        for child in body.children:
            # Enum members live in a nested enum_body_declarations node
            if child.type == "enum_body_declarations":
                members.extend(child.children)
            else:
                members.append(child)
        return members

    def _extract_fields(self, node, ctx: _ImportContext) -> list[FieldDeclaration]:
        """Extract one FieldDeclaration per declarator (int a, b; gives two)."""
        type_node = node.child_by_field_name("type")
        if type_node is None:
            return []

        type_name = self._resolve_type(self._text(type_node), ctx)
        modifiers, annotations = self._extract_modifiers(node, ctx)

        fields = []
        for child in node.children:
            if child.type != "variable_declarator":
                continue
            name_node = child.child_by_field_name("name")
            if name_node is None:
                continue
            dims = child.child_by_field_name("dimensions")
            fields.append(
                FieldDeclaration(
                    name=self._text(name_node),
                    type_name=type_name + (self._text(dims) if dims else ""),
                    modifiers=frozenset(modifiers),
                    annotations=tuple(annotations),
                )
            )
        return fields

    def _extract_method(
        self,
        node,
        ctx: _ImportContext,
        is_constructor: bool = False,
    ) -> MethodDeclaration:
        """Extract a method or constructor.

        Args:
            node: method_declaration or constructor_declaration node.
            ctx: Import context of the enclosing file.
            is_constructor: Whether this is a constructor.

        Returns:
            The extracted MethodDeclaration.
        """
        name_node = node.child_by_field_name("name")
        name = self._text(name_node) if name_node else ""
        modifiers, annotations = self._extract_modifiers(node, ctx)

        return_type = None
        if not is_constructor:
            type_node = node.child_by_field_name("type")
            return_type = self._resolve_type(self._text(type_node), ctx) if type_node else "void"
            dims = node.child_by_field_name("dimensions")
            if dims:
                return_type += self._text(dims)

        params_node = node.child_by_field_name("parameters")
        parameters = self._extract_parameters(params_node, ctx) if params_node else []

        throws: list[str] = []
        for child in node.children:
            if child.type == "throws":
                for sub in child.children:
                    if sub.is_named:
                        throws.append(self._resolve_type(self._text(sub), ctx))

        return MethodDeclaration(
            name=name,
            return_type=return_type,
            parameters=tuple(parameters),
            throws=tuple(throws),
            modifiers=frozenset(modifiers),
            annotations=tuple(annotations),
            is_constructor=is_constructor,
            line=node.start_point[0] + 1,
        )

    def _extract_parameters(self, node, ctx: _ImportContext) -> list[ParameterDeclaration]:
        """Extract formal parameters, reporting varargs as arrays."""
        parameters = []

        for child in node.children:
            if child.type == "formal_parameter":
                type_node = child.child_by_field_name("type")
                name_node = child.child_by_field_name("name")
                if type_node is None or name_node is None:
                    continue
                type_name = self._resolve_type(self._text(type_node), ctx)
                dims = child.child_by_field_name("dimensions")
                if dims:
                    type_name += self._text(dims)
                parameters.append(
                    ParameterDeclaration(name=self._text(name_node), type_name=type_name)
                )
            elif child.type == "spread_parameter":
                type_text = None
                param_name = None
                for sub in child.children:
                    if sub.type == "variable_declarator":
                        name_node = sub.child_by_field_name("name")
                        param_name = self._text(name_node) if name_node else None
                    elif sub.is_named and sub.type != "modifiers" and type_text is None:
                        type_text = self._text(sub)
                if type_text and param_name:
                    parameters.append(
                        ParameterDeclaration(
                            name=param_name,
                            type_name=self._resolve_type(type_text, ctx) + "[]",
                        )
                    )

        return parameters

    # -------------------------------------------------------------------------
    # Modifiers and names
    # -------------------------------------------------------------------------

    def _extract_modifiers(self, node, ctx: _ImportContext) -> tuple[list[str], list[str]]:
        """Extract keyword modifiers and resolved annotation names.

        Annotations in Java are children of the modifiers node, alongside
        keywords such as public and static.

        Returns:
            Tuple of (modifier keywords, annotation names).
        """
        modifiers: list[str] = []
        annotations: list[str] = []

        # child_by_field_name doesn't work reliably for modifiers
        modifiers_node = None
        for child in node.children:
            if child.type == "modifiers":
                modifiers_node = child
                break

        if modifiers_node is None:
            return modifiers, annotations

        for child in modifiers_node.children:
            if child.type in ANNOTATION_NODES:
                name_node = child.child_by_field_name("name")
                if name_node is not None:
                    annotations.append(self._resolve_annotation(self._text(name_node), ctx))
            else:
                modifiers.append(self._text(child))

        return modifiers, annotations

    def _resolve_annotation(self, name: str, ctx: _ImportContext) -> str:
        """Qualify an annotation name through the file's imports."""
        if "." in name:
            return name
        if name in ctx.single_imports:
            return ctx.single_imports[name]
        for package in ctx.wildcard_imports:
            candidate = f"{package}.{name}"
            if candidate in INJECTION_MARKERS:
                return candidate
        return name

    def _resolve_type(self, text: str, ctx: _ImportContext) -> str:
        """Qualify simple type names through single-type imports.

        Generic arguments are resolved too; whitespace is normalized so that
        type text reads like "Map<String, List<User>>".
        """
        text = TYPE_ANNOTATION_PATTERN.sub("", text)
        text = re.sub(r"\s*,\s*", ", ", text)
        text = re.sub(r"\s*([<>\[\]])\s*", r"\1", text)
        text = re.sub(r"\s+", " ", text).strip()
        return SIMPLE_TYPE_PATTERN.sub(
            lambda m: ctx.single_imports.get(m.group(1), m.group(1)),
            text,
        )

    def _text(self, node) -> str:
        """Get the source text of a tree-sitter node."""
        return node.text.decode("utf-8")
