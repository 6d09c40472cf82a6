"""Type-name helpers shared by the analyzer and the synthesizer.

Type names arrive as canonical text (``java.util.List<com.example.User>``)
and are reduced to the form a test author would write (``List<User>``).
"""

import re

from testgen.constants import (
    BOOLEAN_TYPES,
    CONTAINER_DEFAULTS,
    OPTIONAL_TYPE,
    VOID_TYPE,
)

# A run of lowercase-leading dotted segments followed by an uppercase-leading
# identifier, e.g. "java.util." before "List". Only the identifier survives.
QUALIFIER_PATTERN = re.compile(r"\b[a-z][a-zA-Z0-9_]*(?:\.[a-z][a-zA-Z0-9_]*)*\.(?=[A-Z])")

# Enclosing-type qualifiers left after package stripping, e.g. "Outer." in
# "Outer.Inner". Keeps the innermost identifier only.
OUTER_TYPE_PATTERN = re.compile(r"\b(?:[A-Z][\w$]*\.)+(?=[A-Z])")


def normalize_type_name(type_name: str) -> str:
    """Strip package and enclosing-type qualifiers, keeping generics.

    Applied across the whole text, so every generic argument is reduced
    independently:

        pkg.sub.Outer.Inner<pkg2.Generic<pkg3.T>>  ->  Inner<Generic<T>>

    The void sentinel is returned untouched.
    """
    if type_name == VOID_TYPE:
        return type_name
    stripped = QUALIFIER_PATTERN.sub("", type_name)
    return OUTER_TYPE_PATTERN.sub("", stripped)


def simple_name(type_name: str) -> str:
    """Unqualified raw name of a type, e.g. java.io.IOException -> IOException."""
    return strip_generics(normalize_type_name(type_name))


def strip_generics(type_name: str) -> str:
    """Drop generic arguments: Map<String, User> -> Map."""
    idx = type_name.find("<")
    return type_name[:idx] if idx >= 0 else type_name


def decapitalize(name: str) -> str:
    """Lower-case the first character: UserService -> userService."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def _has_raw_prefix(type_name: str, raw: str) -> bool:
    """Whether type_name is raw or a parameterization of raw (arrays excluded)."""
    if is_array(type_name):
        return False
    return type_name == raw or type_name.startswith(raw + "<")


def container_kind(type_name: str) -> str | None:
    """Return the recognized container name a type is shaped like, if any."""
    for raw in CONTAINER_DEFAULTS:
        if _has_raw_prefix(type_name, raw):
            return raw
    return None


def is_optional(type_name: str) -> bool:
    """Whether the type is an Optional."""
    return _has_raw_prefix(type_name, OPTIONAL_TYPE)


def is_boolean(type_name: str) -> bool:
    """Whether the type is boolean or Boolean."""
    return type_name in BOOLEAN_TYPES


def is_array(type_name: str) -> bool:
    """Whether the type is an array type."""
    return type_name.endswith("[]")
