"""Source parsing utilities."""

from testgen.parsing.models import (
    ClassDeclaration,
    DeclarationKind,
    FieldDeclaration,
    MethodDeclaration,
    ParameterDeclaration,
    ParsedSource,
    ParseResult,
)
from testgen.parsing.base import BaseParser
from testgen.parsing.java_parser import JavaParser

__all__ = [
    "ClassDeclaration",
    "DeclarationKind",
    "FieldDeclaration",
    "MethodDeclaration",
    "ParameterDeclaration",
    "ParsedSource",
    "ParseResult",
    "BaseParser",
    "JavaParser",
]
