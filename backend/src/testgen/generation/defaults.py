"""Default-value policy for arranging test inputs and stubbed returns.

Keyed on the normalized type name. Anything not recognized falls through to
an opaque mock of the raw type, which is always valid Java.
"""

from testgen.constants import (
    CONTAINER_DEFAULTS,
    GUIDANCE_BOOLEAN,
    LITERAL_DEFAULTS,
    OPTIONAL_DEFAULT,
)
from testgen.generation.types import (
    container_kind,
    is_array,
    is_boolean,
    is_optional,
    strip_generics,
)


def default_value_for(type_name: str) -> str:
    """Return a Java expression producing a usable value of the given type.

    Args:
        type_name: Normalized type name, e.g. "Long" or "List<User>".

    Returns:
        Java expression text, e.g. "1L", "new ArrayList<>()", "mock(User.class)".
    """
    if type_name in LITERAL_DEFAULTS:
        return LITERAL_DEFAULTS[type_name]

    kind = container_kind(type_name)
    if kind is not None:
        return CONTAINER_DEFAULTS[kind]

    if is_optional(type_name):
        return OPTIONAL_DEFAULT

    if is_array(type_name):
        # new int[0], new String[0][]; generic array creation is illegal
        element = strip_generics(type_name.split("[", 1)[0])
        extra_dims = "[]" * (type_name.count("[]") - 1)
        return f"new {element}[0]{extra_dims}"

    return f"mock({strip_generics(type_name)}.class)"


def extra_assertion_for(return_type: str, add_guidance: bool = False) -> str | None:
    """Return the type-specific assertion for a captured result, if any.

    Boolean results are asserted true, containers non-empty and optionals
    present. Other types only get the non-null assertion.
    """
    if is_boolean(return_type):
        line = "assertTrue(result);"
        return f"{line} {GUIDANCE_BOOLEAN}" if add_guidance else line
    if container_kind(return_type) is not None:
        return "assertFalse(result.isEmpty());"
    if is_optional(return_type):
        return "assertTrue(result.isPresent());"
    return None
