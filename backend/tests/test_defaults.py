"""Default-value and assertion policy tests."""

import pytest

from testgen.constants import GUIDANCE_BOOLEAN
from testgen.generation.defaults import default_value_for, extra_assertion_for


@pytest.mark.parametrize(
    "type_name,expected",
    [
        ("int", "1"),
        ("Integer", "1"),
        ("long", "1L"),
        ("Long", "1L"),
        ("double", "1.0"),
        ("float", "1.0f"),
        ("boolean", "true"),
        ("char", "'a'"),
        ("String", '"testValue"'),
    ],
)
def test_literal_defaults(type_name, expected):
    """Primitives, boxes and strings get literals."""
    assert default_value_for(type_name) == expected


@pytest.mark.parametrize(
    "type_name,expected",
    [
        ("List<User>", "new ArrayList<>()"),
        ("Collection<User>", "new ArrayList<>()"),
        ("Set<String>", "new HashSet<>()"),
        ("Map<String, List<User>>", "new HashMap<>()"),
    ],
)
def test_container_defaults(type_name, expected):
    """Container-shaped types get an empty instance of their kind."""
    assert default_value_for(type_name) == expected


def test_optional_default():
    """Optional-shaped types get an empty optional."""
    assert default_value_for("Optional<User>") == "Optional.empty()"


def test_array_defaults():
    """Arrays get a zero-length instance."""
    assert default_value_for("int[]") == "new int[0]"
    assert default_value_for("String[][]") == "new String[0][]"
    assert default_value_for("List<String>[]") == "new List[0]"


def test_other_types_are_mocked():
    """Anything unrecognized becomes a mock of the raw type."""
    assert default_value_for("UserRepository") == "mock(UserRepository.class)"
    assert default_value_for("Repository<User>") == "mock(Repository.class)"
    assert default_value_for("ListenerRegistry") == "mock(ListenerRegistry.class)"


class TestExtraAssertion:
    """Tests for extra_assertion_for."""

    def test_boolean_asserts_true(self):
        """Boolean results are asserted true."""
        assert extra_assertion_for("boolean") == "assertTrue(result);"
        assert extra_assertion_for("Boolean") == "assertTrue(result);"

    def test_boolean_guidance(self):
        """Guidance comment is appended only when requested."""
        line = extra_assertion_for("boolean", add_guidance=True)
        assert line.startswith("assertTrue(result);")
        assert GUIDANCE_BOOLEAN in line

    def test_container_asserts_not_empty(self):
        """Container results are asserted non-empty."""
        assert extra_assertion_for("List<User>") == "assertFalse(result.isEmpty());"
        assert extra_assertion_for("Map<String, User>") == "assertFalse(result.isEmpty());"

    def test_optional_asserts_present(self):
        """Optional results are asserted present."""
        assert extra_assertion_for("Optional<User>") == "assertTrue(result.isPresent());"

    @pytest.mark.parametrize("type_name", ["User", "int", "String", "User[]"])
    def test_other_types_have_none(self, type_name):
        """Other types only get the non-null assertion."""
        assert extra_assertion_for(type_name) is None
