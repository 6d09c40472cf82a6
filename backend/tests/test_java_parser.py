"""Java parser tests."""

import pytest

from testgen.parsing import DeclarationKind
from testgen.parsing.java_parser import JavaParser


@pytest.fixture
def parser():
    """Create Java parser instance."""
    return JavaParser()


def test_parser_supported_extensions(parser):
    """Parser supports .java files."""
    assert ".java" in parser.supported_extensions
    assert parser.language_name == "Java"


def test_parses_package_and_class(parser, user_service_source):
    """Extracts the package name and the top-level class."""
    result = parser.parse_string(user_service_source, "UserService.java")

    assert result.ok
    assert result.source.package_name == "com.example.service"
    decl = result.source.primary_class()
    assert decl.name == "UserService"
    assert decl.kind == DeclarationKind.CLASS
    assert decl.qualified_name == "com.example.service.UserService"


def test_resolves_field_annotations_through_imports(parser, user_service_source):
    """Annotation names are qualified via single-type imports."""
    result = parser.parse_string(user_service_source, "UserService.java")

    fields = {f.name: f for f in result.source.primary_class().fields}
    assert fields["userRepository"].annotations == (
        "org.springframework.beans.factory.annotation.Autowired",
    )
    assert fields["userRepository"].type_name == "com.example.repo.UserRepository"
    assert fields["cacheSize"].annotations == ()
    assert fields["cacheSize"].type_name == "int"


def test_resolves_generic_type_arguments(parser, user_service_source):
    """Return types are qualified inside generic arguments too."""
    result = parser.parse_string(user_service_source, "UserService.java")

    methods = {m.name: m for m in result.source.primary_class().methods}
    assert methods["findAll"].return_type == "java.util.List<com.example.model.User>"
    assert methods["findById"].return_type == "java.util.Optional<com.example.model.User>"
    assert methods["findById"].parameters[0].type_name == "Long"


def test_extracts_throws_clause(parser, user_service_source):
    """Declared checked exceptions are listed in order."""
    result = parser.parse_string(user_service_source, "UserService.java")

    delete = next(m for m in result.source.primary_class().methods if m.name == "delete")
    assert delete.throws == ("java.io.IOException",)
    assert delete.return_type == "void"


def test_extracts_modifiers(parser, user_service_source):
    """Visibility and static modifiers are reported."""
    result = parser.parse_string(user_service_source, "UserService.java")

    methods = {m.name: m for m in result.source.primary_class().methods}
    assert methods["findAll"].is_public
    assert not methods["evict"].is_public
    assert methods["create"].is_static
    assert methods["toString"].annotations == ("Override",)


def test_multiple_declarators_yield_multiple_fields(parser):
    """int a, b; produces two fields."""
    code = """
public class Counter {
    private int hits, misses;
    private String[] labels;
    private long history[];
}
"""
    result = parser.parse_string(code, "Counter.java")

    fields = result.source.primary_class().fields
    assert [f.name for f in fields] == ["hits", "misses", "labels", "history"]
    assert fields[2].type_name == "String[]"
    assert fields[3].type_name == "long[]"


def test_normalizes_whitespace_in_generic_types(parser):
    """Spacing inside type arguments is normalized."""
    code = """
import java.util.Map;
import java.util.List;

public class Index {
    public Map< String ,List<Long> > lookup() { return null; }
}
"""
    result = parser.parse_string(code, "Index.java")

    method = result.source.primary_class().methods[0]
    assert method.return_type == "java.util.Map<String, java.util.List<Long>>"


def test_constructors_are_flagged(parser):
    """Constructors are methods with is_constructor set and no return type."""
    code = """
public class OrderService {
    public OrderService() {}
    public OrderService(OrderRepository repository, Clock clock) {}
    public void place() {}
}
"""
    result = parser.parse_string(code, "OrderService.java")

    decl = result.source.primary_class()
    assert len(decl.constructors) == 2
    assert decl.constructors[1].return_type is None
    assert [p.name for p in decl.constructors[1].parameters] == ["repository", "clock"]


def test_varargs_reported_as_array(parser):
    """A spread parameter is reported with an array type."""
    code = """
public class Tagger {
    public void tag(String name, String... tags) {}
}
"""
    result = parser.parse_string(code, "Tagger.java")

    params = result.source.primary_class().methods[0].parameters
    assert [(p.name, p.type_name) for p in params] == [("name", "String"), ("tags", "String[]")]


def test_wildcard_import_resolves_injection_marker(parser):
    """@Inject under a wildcard import resolves to the known marker."""
    code = """
import javax.inject.*;

public class Mailer {
    @Inject
    private Transport transport;
}
"""
    result = parser.parse_string(code, "Mailer.java")

    field = result.source.primary_class().fields[0]
    assert field.annotations == ("javax.inject.Inject",)


def test_unresolved_annotation_keeps_simple_name(parser):
    """An annotation with no matching import stays unqualified."""
    code = """
public class Mailer {
    @Inject
    private Transport transport;
}
"""
    result = parser.parse_string(code, "Mailer.java")

    assert result.source.primary_class().fields[0].annotations == ("Inject",)


def test_qualified_annotation_kept(parser):
    """A fully qualified annotation name is kept as written."""
    code = """
public class Mailer {
    @jakarta.inject.Inject
    private Transport transport;
}
"""
    result = parser.parse_string(code, "Mailer.java")

    assert result.source.primary_class().fields[0].annotations == ("jakarta.inject.Inject",)


def test_static_imports_ignored(parser):
    """Static imports do not appear in the import list."""
    code = """
import static java.util.Objects.requireNonNull;
import java.util.List;

public class Holder {}
"""
    result = parser.parse_string(code, "Holder.java")

    assert result.source.imports == ["java.util.List"]


def test_parses_interface(parser):
    """Interfaces are reported with the INTERFACE kind."""
    code = """
public interface Repository<T> {
    T findById(long id);
}
"""
    result = parser.parse_string(code, "Repository.java")

    decl = result.source.primary_class()
    assert decl.is_interface
    assert decl.name == "Repository"


def test_parses_annotation_type(parser):
    """@interface declarations are reported as annotation types."""
    code = """
public @interface Audited {
    String value() default "";
}
"""
    result = parser.parse_string(code, "Audited.java")

    assert result.source.primary_class().is_annotation_type


def test_parses_enum_methods(parser):
    """Methods after the enum constants are extracted."""
    code = """
public enum Color {
    RED, GREEN;

    public String label() {
        return name().toLowerCase();
    }
}
"""
    result = parser.parse_string(code, "Color.java")

    decl = result.source.primary_class()
    assert decl.kind == DeclarationKind.ENUM
    assert [m.name for m in decl.methods] == ["label"]


def test_parses_record(parser):
    """Records are reported with their body methods."""
    code = """
public record Point(int x, int y) {
    public int sum() {
        return x + y;
    }
}
"""
    result = parser.parse_string(code, "Point.java")

    decl = result.source.primary_class()
    assert decl.kind == DeclarationKind.RECORD
    assert [m.name for m in decl.methods] == ["sum"]


def test_nested_classes(parser):
    """Nested declarations follow their outer class and record it."""
    code = """
package com.example;

public class Outer {
    public void run() {}

    public static class Inner {
        public void step() {}
    }
}
"""
    result = parser.parse_string(code, "Outer.java")

    names = [c.name for c in result.source.classes]
    assert names == ["Outer", "Inner"]
    inner = result.source.find_class("Inner")
    assert inner.outer == "Outer"
    assert inner.qualified_name == "com.example.Outer.Inner"
    assert result.source.find_class("com.example.Outer.Inner") is inner
    assert result.source.primary_class().name == "Outer"


def test_nested_methods_stay_with_their_class(parser):
    """Methods of a nested class are not attributed to the outer class."""
    code = """
public class Outer {
    public void run() {}
    static class Inner {
        public void step() {}
    }
}
"""
    result = parser.parse_string(code, "Outer.java")

    outer = result.source.find_class("Outer")
    assert [m.name for m in outer.methods] == ["run"]


def test_garbage_input_has_no_classes(parser):
    """Text that is not Java parses to an empty result, not an error."""
    result = parser.parse_string("this is not java at all", "Broken.java")

    assert result.ok
    assert result.source.classes == []
    assert result.source.primary_class() is None


def test_can_parse_by_extension(parser):
    """can_parse checks the file extension."""
    from pathlib import Path

    assert parser.can_parse(Path("src/main/java/App.java"))
    assert not parser.can_parse(Path("app.py"))
