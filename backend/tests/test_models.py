"""Class model tests."""

from testgen.generation.models import ClassModel, Operation, Parameter

FIND_BY_ID = Operation("find", "Widget", (Parameter("Long", "id"),))
FIND_BY_NAME = Operation("find", "Widget", (Parameter("String", "name"),))
COUNT = Operation("count", "long")


def _model():
    return ClassModel("org.sample", "Widget", operations=(FIND_BY_ID, FIND_BY_NAME, COUNT))


class TestSignature:
    """Operation signatures."""

    def test_parameter_types_listed(self):
        """Signature is the name with parameter types in order."""
        op = Operation("put", "void", (Parameter("String", "k"), Parameter("List<Long>", "v")))

        assert op.signature == "put(String, List<Long>)"

    def test_no_parameters(self):
        """An operation without parameters has empty parentheses."""
        assert COUNT.signature == "count()"


class TestWithOperations:
    """Selecting a subset of operations."""

    def test_signature_keeps_one_overload(self):
        """A signature picks exactly one of two overloads."""
        narrowed = _model().with_operations(["find(Long)"])

        assert narrowed.operations == (FIND_BY_ID,)

    def test_name_keeps_every_overload(self):
        """A bare name picks all overloads of that name."""
        narrowed = _model().with_operations(["find"])

        assert narrowed.operations == (FIND_BY_ID, FIND_BY_NAME)

    def test_declaration_order_preserved(self):
        """Selection order does not reorder operations."""
        narrowed = _model().with_operations(["count", "find(String)"])

        assert narrowed.operations == (FIND_BY_NAME, COUNT)

    def test_original_unchanged(self):
        """Narrowing returns a new model."""
        model = _model()

        model.with_operations(["count"])

        assert len(model.operations) == 3

    def test_selects(self):
        """Names and signatures are recognized, other keys are not."""
        model = _model()

        assert model.selects("find")
        assert model.selects("find(String)")
        assert not model.selects("find(Integer)")
        assert not model.selects("evict")
