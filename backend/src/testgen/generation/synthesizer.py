"""Render a ClassModel as a JUnit 5 + Mockito test class.

Output layout, in fixed order:

    package <pkg>;                       (only when the package is non-empty)
    <fixed import block>
    @ExtendWith(MockitoExtension.class)
    class <ClassName>Test {
        @Mock fields, one per dependency
        @InjectMocks field for the class under test
        @BeforeEach setUp()
        per operation: happy-path test, then one failure test per declared throw
    }

Rendering is pure: the same model and config always give identical text,
which is what lets the merger diff regenerated output against a file on disk.
"""

import logging

from testgen.config import NamingConfig
from testgen.constants import (
    ANY_MATCHER,
    FAILURE_MESSAGE,
    FAILURE_SUFFIX_PREFIX,
    GUIDANCE_PLACEHOLDER,
    GUIDANCE_SIDE_EFFECTS,
    PLACEHOLDER_METHOD,
    STATIC_TEST_IMPORTS,
    SUCCESS_SUFFIX,
    TEST_CLASS_SUFFIX,
    TEST_IMPORTS,
)
from testgen.generation.defaults import default_value_for, extra_assertion_for
from testgen.generation.models import ClassModel, Dependency, Operation

logger = logging.getLogger(__name__)

INDENT = "    "
BODY_INDENT = INDENT * 2


class TestCodeSynthesizer:
    """Builds test source text from a ClassModel.

    Configuration is passed in at construction; the synthesizer never reads
    global settings.
    """

    # Keep pytest from collecting this class because of its name
    __test__ = False

    def __init__(self, config: NamingConfig | None = None):
        """Initialize the synthesizer.

        Args:
            config: Naming pattern and optional-block toggles.
        """
        self._config = config or NamingConfig()

    def synthesize(self, model: ClassModel) -> str:
        """Render the complete test class for a model.

        Args:
            model: The class under test.

        Returns:
            Java source text ending with a newline.
        """
        lines: list[str] = []
        self._append_package(lines, model)
        self._append_imports(lines)
        self._append_class_declaration(lines, model)

        tests: list[list[str]] = []
        for operation in model.operations:
            tests.append(self._happy_path_test(model, operation))
            if self._config.generate_failure_tests:
                for failure in operation.declared_failure_modes:
                    tests.append(self._failure_test(model, operation, failure))

        for member in [*self._fields(model), self._set_up(), *tests]:
            lines.extend(member)
            lines.append("")
        lines.append("}")

        logger.debug(
            f"Synthesized {generated_class_name(model)} with "
            f"{len(tests)} test method(s)"
        )
        return "\n".join(lines) + "\n"

    # -------------------------------------------------------------------------
    # Header
    # -------------------------------------------------------------------------

    def _append_package(self, lines: list[str], model: ClassModel) -> None:
        if model.package_name:
            lines.append(f"package {model.package_name};")
            lines.append("")

    def _append_imports(self, lines: list[str]) -> None:
        for imp in TEST_IMPORTS:
            lines.append(f"import {imp};")
        lines.append("")
        for imp in STATIC_TEST_IMPORTS:
            lines.append(f"import static {imp};")
        lines.append("")

    def _append_class_declaration(self, lines: list[str], model: ClassModel) -> None:
        lines.append("@ExtendWith(MockitoExtension.class)")
        lines.append(f"class {generated_class_name(model)} {{")
        lines.append("")

    def _fields(self, model: ClassModel) -> list[list[str]]:
        """@Mock fields in dependency order, then the @InjectMocks target."""
        fields = [
            [
                f"{INDENT}@Mock",
                f"{INDENT}private {dep.type_name} {dep.field_name};",
            ]
            for dep in model.dependencies
        ]
        fields.append(
            [
                f"{INDENT}@InjectMocks",
                f"{INDENT}private {model.class_name} {model.target_field_name};",
            ]
        )
        return fields

    def _set_up(self) -> list[str]:
        return [
            f"{INDENT}@BeforeEach",
            f"{INDENT}void setUp() {{",
            f"{BODY_INDENT}MockitoAnnotations.openMocks(this);",
            f"{INDENT}}}",
        ]

    # -------------------------------------------------------------------------
    # Test methods
    # -------------------------------------------------------------------------

    def _happy_path_test(self, model: ClassModel, operation: Operation) -> list[str]:
        """Arrange / Act / Assert test of the normal path."""
        name = self._config.test_name(operation.name, SUCCESS_SUFFIX)
        throws = " throws Exception" if operation.declared_failure_modes else ""

        lines = [f"{INDENT}@Test", f"{INDENT}void {name}(){throws} {{"]

        lines.append(f"{BODY_INDENT}// Arrange")
        lines.extend(self._parameter_declarations(operation))
        if not operation.is_void and model.dependencies:
            first = model.dependencies[0]
            stub = (
                f"when({first.field_name}.{self._placeholder_call(operation)})"
                f".thenReturn({default_value_for(operation.return_type)});"
            )
            lines.append(f"{BODY_INDENT}{self._with_guidance(stub)}")

        lines.append("")
        lines.append(f"{BODY_INDENT}// Act")
        call = f"{model.target_field_name}.{operation.name}({operation.argument_list});"
        if operation.is_void:
            lines.append(f"{BODY_INDENT}{call}")
        else:
            lines.append(f"{BODY_INDENT}{operation.return_type} result = {call}")

        lines.append("")
        lines.append(f"{BODY_INDENT}// Assert")
        lines.extend(self._assertions(model, operation))

        lines.append(f"{INDENT}}}")
        return lines

    def _failure_test(self, model: ClassModel, operation: Operation, failure: str) -> list[str]:
        """Test that a declared failure from a collaborator surfaces to the caller."""
        name = self._config.test_name(operation.name, FAILURE_SUFFIX_PREFIX + failure)

        lines = [f"{INDENT}@Test", f"{INDENT}void {name}() {{"]

        lines.append(f"{BODY_INDENT}// Arrange")
        lines.extend(self._parameter_declarations(operation))
        if model.dependencies:
            first = model.dependencies[0]
            stub = (
                f'doThrow(new {failure}("{FAILURE_MESSAGE}"))'
                f".when({first.field_name}).{self._placeholder_call(operation)};"
            )
            lines.append(f"{BODY_INDENT}{self._with_guidance(stub)}")

        lines.append("")
        lines.append(f"{BODY_INDENT}// Act & Assert")
        lines.append(f"{BODY_INDENT}assertThrows({failure}.class, () ->")
        lines.append(
            f"{BODY_INDENT}{INDENT}{model.target_field_name}.{operation.name}"
            f"({operation.argument_list}));"
        )

        lines.append(f"{INDENT}}}")
        return lines

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _parameter_declarations(self, operation: Operation) -> list[str]:
        return [
            f"{BODY_INDENT}{p.type_name} {p.name} = {default_value_for(p.type_name)};"
            for p in operation.parameters
        ]

    def _assertions(self, model: ClassModel, operation: Operation) -> list[str]:
        if operation.is_void:
            if not model.dependencies:
                if self._config.add_guidance_comments:
                    return [f"{BODY_INDENT}{GUIDANCE_SIDE_EFFECTS}"]
                return []
            return [
                f"{BODY_INDENT}{self._with_guidance(self._verify_line(dep, operation))}"
                for dep in model.dependencies
            ]

        lines = [f"{BODY_INDENT}assertNotNull(result);"]
        extra = extra_assertion_for(operation.return_type, self._config.add_guidance_comments)
        if extra:
            lines.append(f"{BODY_INDENT}{extra}")
        return lines

    def _verify_line(self, dep: Dependency, operation: Operation) -> str:
        return f"verify({dep.field_name}, atLeastOnce()).{self._placeholder_call(operation)};"

    def _placeholder_call(self, operation: Operation) -> str:
        """someMethod(any(), ...) with one matcher per operation parameter."""
        matchers = ", ".join(ANY_MATCHER for _ in operation.parameters)
        return f"{PLACEHOLDER_METHOD}({matchers})"

    def _with_guidance(self, line: str) -> str:
        if self._config.add_guidance_comments:
            return f"{line} {GUIDANCE_PLACEHOLDER}"
        return line


def generated_class_name(model: ClassModel) -> str:
    """Name of the generated test class, e.g. UserServiceTest."""
    return f"{model.class_name}{TEST_CLASS_SUFFIX}"


def synthesize(model: ClassModel, config: NamingConfig | None = None) -> str:
    """Render a test class for a model with the given naming config."""
    return TestCodeSynthesizer(config).synthesize(model)
