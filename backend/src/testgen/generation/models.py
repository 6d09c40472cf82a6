"""Data model of a class under test.

A ClassModel is an immutable snapshot built once per analysis pass. Narrowing
the operations to a user selection produces a new model; nothing here holds
a reference back to the parsed declaration.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from testgen.constants import VOID_TYPE
from testgen.generation.types import decapitalize


@dataclass(frozen=True)
class Dependency:
    """A collaborator injected into the class under test."""

    type_name: str  # Normalized, generics preserved
    field_name: str


@dataclass(frozen=True)
class Parameter:
    """A declared parameter of an operation."""

    type_name: str
    name: str


@dataclass(frozen=True)
class Operation:
    """A public, testable method of the class under test."""

    name: str
    return_type: str
    parameters: tuple[Parameter, ...] = ()
    declared_failure_modes: tuple[str, ...] = ()
    is_void: bool = field(init=False)

    def __post_init__(self):
        """Derive is_void from the return type sentinel."""
        # Since frozen=True, we need to use object.__setattr__
        object.__setattr__(self, "is_void", self.return_type == VOID_TYPE)

    @property
    def signature(self) -> str:
        """Selection key distinguishing overloads, e.g. ``find(Long)``."""
        return f"{self.name}({', '.join(p.type_name for p in self.parameters)})"

    @property
    def argument_list(self) -> str:
        """Parameter names joined as a call argument list."""
        return ", ".join(p.name for p in self.parameters)


@dataclass(frozen=True)
class ClassModel:
    """Everything the synthesizer needs to know about one class."""

    package_name: str
    class_name: str
    dependencies: tuple[Dependency, ...] = ()
    operations: tuple[Operation, ...] = ()

    @property
    def target_field_name(self) -> str:
        """Name of the @InjectMocks field holding the class under test."""
        return decapitalize(self.class_name)

    @property
    def operation_names(self) -> list[str]:
        """Operation names in declaration order (overloads repeat)."""
        return [op.name for op in self.operations]

    def selects(self, key: str) -> bool:
        """Whether a selection key names at least one operation."""
        return any(key in (op.name, op.signature) for op in self.operations)

    def with_operations(self, keys: Iterable[str]) -> "ClassModel":
        """Return a copy keeping only the selected operations.

        A key is either an operation signature such as ``find(Long)``, which
        picks exactly that overload, or a bare name, which picks every
        overload of that name. Declaration order is preserved regardless of
        the order of ``keys``.
        """
        selected = set(keys)
        return replace(
            self,
            operations=tuple(
                op for op in self.operations if op.name in selected or op.signature in selected
            ),
        )
