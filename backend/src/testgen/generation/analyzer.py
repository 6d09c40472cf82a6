"""Structural analysis of a class declaration.

Turns a parsed ClassDeclaration into a ClassModel: the injected collaborators
the test must mock and the public operations it must exercise.
"""

import logging

from testgen.constants import INJECTION_MARKERS, OBJECT_METHOD_NAMES, VOID_TYPE
from testgen.generation.models import ClassModel, Dependency, Operation, Parameter
from testgen.generation.types import normalize_type_name, simple_name
from testgen.parsing.models import ClassDeclaration, MethodDeclaration

logger = logging.getLogger(__name__)


class StructuralAnalyzer:
    """Builds ClassModel snapshots from class declarations.

    Stateless: analyzing the same declaration twice yields equal models.
    """

    def __init__(self, injection_markers: frozenset[str] = INJECTION_MARKERS):
        """Initialize the analyzer.

        Args:
            injection_markers: Qualified annotation names that mark a field
                as an injected dependency.
        """
        self._markers = injection_markers

    def analyze(self, declaration: ClassDeclaration | None) -> ClassModel | None:
        """Analyze a class declaration.

        Args:
            declaration: The parsed declaration, or None.

        Returns:
            ClassModel for the class, or None when the declaration is missing,
            an interface, or an annotation type.
        """
        if declaration is None or declaration.is_interface or declaration.is_annotation_type:
            return None

        dependencies = self._field_dependencies(declaration)
        if not dependencies:
            dependencies = self._constructor_dependencies(declaration)

        operations = self._operations(declaration)
        logger.debug(
            f"Analyzed {declaration.name}: {len(dependencies)} dependencies, "
            f"{len(operations)} operations"
        )

        return ClassModel(
            package_name=declaration.package_name,
            class_name=declaration.name,
            dependencies=tuple(dependencies),
            operations=tuple(operations),
        )

    def _field_dependencies(self, declaration: ClassDeclaration) -> list[Dependency]:
        """Fields carrying a recognized injection marker, in declaration order."""
        return [
            Dependency(type_name=normalize_type_name(f.type_name), field_name=f.name)
            for f in declaration.fields
            if f.has_annotation(self._markers)
        ]

    def _constructor_dependencies(self, declaration: ClassDeclaration) -> list[Dependency]:
        """Parameters of the constructor with the most parameters.

        Ties go to the first constructor encountered.
        """
        best: MethodDeclaration | None = None
        for ctor in declaration.constructors:
            if best is None or len(ctor.parameters) > len(best.parameters):
                best = ctor

        if best is None:
            return []

        if best.parameters:
            logger.info(
                f"No injected fields on {declaration.name}, "
                f"using {len(best.parameters)}-arg constructor"
            )
        return [
            Dependency(type_name=normalize_type_name(p.type_name), field_name=p.name)
            for p in best.parameters
        ]

    def _operations(self, declaration: ClassDeclaration) -> list[Operation]:
        """Public, non-static, non-Object methods in declaration order."""
        operations = []

        for method in declaration.methods:
            if method.is_constructor:
                continue
            if not method.is_public or method.is_static:
                continue
            if method.name in OBJECT_METHOD_NAMES:
                continue

            operations.append(
                Operation(
                    name=method.name,
                    return_type=normalize_type_name(method.return_type or VOID_TYPE),
                    parameters=tuple(
                        Parameter(type_name=normalize_type_name(p.type_name), name=p.name)
                        for p in method.parameters
                    ),
                    declared_failure_modes=tuple(simple_name(t) for t in method.throws),
                )
            )

        return operations


def analyze(declaration: ClassDeclaration | None) -> ClassModel | None:
    """Analyze a declaration with the default injection markers."""
    return StructuralAnalyzer().analyze(declaration)
