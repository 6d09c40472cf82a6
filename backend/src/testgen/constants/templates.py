"""Test source template constants.

Everything the synthesizer emits verbatim lives here: the import block,
naming suffixes, the placeholder collaborator call, and the literal values
used to arrange test inputs.
"""

# =============================================================================
# Naming
# =============================================================================
# Test method names are built by substituting {method} and {suffix} into the
# configured pattern. The default yields names like findById_shouldSucceed.

DEFAULT_NAMING_PATTERN = "{method}_{suffix}"
METHOD_PLACEHOLDER = "{method}"
SUFFIX_PLACEHOLDER = "{suffix}"

SUCCESS_SUFFIX = "shouldSucceed"
FAILURE_SUFFIX_PREFIX = "shouldThrow"

TEST_CLASS_SUFFIX = "Test"
JAVA_EXTENSION = ".java"

# =============================================================================
# Imports
# =============================================================================
# Emitted unconditionally and always in this order so repeated generations
# produce stable diffs.

TEST_IMPORTS = (
    "org.junit.jupiter.api.BeforeEach",
    "org.junit.jupiter.api.Test",
    "org.junit.jupiter.api.extension.ExtendWith",
    "org.mockito.InjectMocks",
    "org.mockito.Mock",
    "org.mockito.MockitoAnnotations",
    "org.mockito.junit.jupiter.MockitoExtension",
    "java.util.*",
)

STATIC_TEST_IMPORTS = (
    "org.junit.jupiter.api.Assertions.*",
    "org.mockito.Mockito.*",
)

# =============================================================================
# Placeholder Collaborator Call
# =============================================================================
# The generator cannot know which dependency method a service method calls,
# so stubs and verifications go through this name for a human to replace.

PLACEHOLDER_METHOD = "someMethod"
ANY_MATCHER = "any()"
FAILURE_MESSAGE = "test error"

GUIDANCE_PLACEHOLDER = "// TODO: replace someMethod with the real collaborator call"
GUIDANCE_SIDE_EFFECTS = "// TODO: verify expected side effects"
GUIDANCE_BOOLEAN = "// or assertFalse, adjust to your logic"

# =============================================================================
# Default Values
# =============================================================================
# Literal used to arrange a local of the given (normalized) type. Types not
# listed here fall through to the container, optional, array and mock rules
# in testgen.generation.defaults.

STRING_PLACEHOLDER = '"testValue"'

LITERAL_DEFAULTS: dict[str, str] = {
    "int": "1",
    "Integer": "1",
    "long": "1L",
    "Long": "1L",
    "short": "(short) 1",
    "Short": "(short) 1",
    "byte": "(byte) 1",
    "Byte": "(byte) 1",
    "double": "1.0",
    "Double": "1.0",
    "float": "1.0f",
    "Float": "1.0f",
    "char": "'a'",
    "Character": "'a'",
    "boolean": "true",
    "Boolean": "true",
    "String": STRING_PLACEHOLDER,
    "CharSequence": STRING_PLACEHOLDER,
    "void": "null",
}

# Raw container type -> empty instance expression. A type matches when its
# normalized name starts with the key followed by "<" or nothing else.
CONTAINER_DEFAULTS: dict[str, str] = {
    "List": "new ArrayList<>()",
    "Collection": "new ArrayList<>()",
    "Set": "new HashSet<>()",
    "Map": "new HashMap<>()",
}

OPTIONAL_TYPE = "Optional"
OPTIONAL_DEFAULT = "Optional.empty()"

BOOLEAN_TYPES = frozenset({"boolean", "Boolean"})
