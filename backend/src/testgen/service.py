"""Generation pipeline: source -> declaration -> model -> test source -> file."""

import logging
from collections.abc import Iterable
from pathlib import Path

from testgen.config import Config, NamingConfig
from testgen.generation.analyzer import StructuralAnalyzer
from testgen.generation.merger import MergeResult, extract_test_blocks, merge_with_report
from testgen.generation.models import ClassModel
from testgen.generation.synthesizer import TestCodeSynthesizer
from testgen.generation.writer import TestFileWriter, WriteResult
from testgen.parsing.java_parser import JavaParser
from testgen.parsing.models import ClassDeclaration
from testgen.repo.test_paths import TestPaths

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base error for a generation request that cannot be fulfilled."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SourceParseError(GenerationError):
    """The source text could not be parsed."""


class ClassNotFoundError(GenerationError):
    """No matching class declaration in the source."""


class NotAnalyzableError(GenerationError):
    """The declaration is an interface or annotation type."""


class NoOperationsError(GenerationError):
    """The class has no public methods to test, or none were selected."""


class UnknownOperationError(GenerationError):
    """A selected method name is not a public operation of the class."""


class GenerationService:
    """Runs the analyze -> select -> synthesize -> merge pipeline.

    Holds no per-request state; every call is independent.
    """

    def __init__(self, config: Config):
        """Initialize the service.

        Args:
            config: Application config; its naming section is handed to the
                synthesizer explicitly.
        """
        self._config = config
        self._parser = JavaParser()
        self._analyzer = StructuralAnalyzer()
        self._writer = TestFileWriter()
        self._paths = TestPaths(config.workspace_path, config.paths)

    def analyze_source(
        self,
        source: str,
        class_name: str | None = None,
        filename: str = "<source>.java",
    ) -> ClassModel:
        """Parse Java source and build the model of one class.

        Args:
            source: Java source text.
            class_name: Simple or qualified class to analyze. Defaults to the
                first top-level type in the file.
            filename: Name used in parse error messages.

        Returns:
            The class model, possibly with no operations.

        Raises:
            SourceParseError: If the source cannot be parsed.
            ClassNotFoundError: If no matching declaration exists.
            NotAnalyzableError: If the declaration is not a concrete class.
        """
        declaration = self._find_declaration(source, class_name, filename)
        model = self._analyzer.analyze(declaration)
        if model is None:
            raise NotAnalyzableError(
                f"Cannot generate tests for {declaration.kind.value} {declaration.name}. "
                "Open a concrete class."
            )
        return model

    def generate(
        self,
        source: str,
        class_name: str | None = None,
        methods: Iterable[str] | None = None,
        existing: str | None = None,
        naming: NamingConfig | None = None,
    ) -> tuple[ClassModel, MergeResult]:
        """Generate a test class, merged into ``existing`` when given.

        Args:
            source: Java source text of the class under test.
            class_name: Class to analyze (defaults to the first in the file).
            methods: Method names or signatures such as ``find(Long)`` to
                generate tests for (defaults to all).
            existing: Current content of the test file, if one exists.
            naming: Overrides the configured naming section.

        Returns:
            Tuple of (selected model, merge result). Without ``existing`` the
            result content is the freshly synthesized class and every test is
            reported as added.

        Raises:
            GenerationError: If the class cannot be analyzed or nothing is selected.
        """
        model = self._select(self.analyze_source(source, class_name), methods)
        generated = TestCodeSynthesizer(naming or self._config.generation).synthesize(model)

        if existing is None:
            added = [b.name for b in extract_test_blocks(generated) if b.name]
            return model, MergeResult(content=generated, added=added)
        return model, merge_with_report(existing, generated)

    def write(
        self,
        source_path: Path,
        class_name: str | None = None,
        methods: Iterable[str] | None = None,
    ) -> WriteResult:
        """Generate tests for a source file and write them under the test root.

        Args:
            source_path: Java file, absolute or relative to the workspace.
            class_name: Class to analyze (defaults to the first in the file).
            methods: Method names or signatures such as ``find(Long)`` to
                generate tests for (defaults to all).

        Returns:
            WriteResult with the test file path and what changed.

        Raises:
            GenerationError: If the class cannot be analyzed or nothing is selected.
            OSError: If reading the source or writing the test file fails.
        """
        if not source_path.is_absolute():
            source_path = self._config.workspace_path / source_path

        source = source_path.read_text(encoding="utf-8")
        model = self._select(
            self.analyze_source(source, class_name, filename=str(source_path)), methods
        )
        generated = TestCodeSynthesizer(self._config.generation).synthesize(model)
        target = self._paths.test_file_for(model, source_path)
        return self._writer.write(target, generated)

    def _find_declaration(
        self, source: str, class_name: str | None, filename: str
    ) -> ClassDeclaration:
        result = self._parser.parse_string(source, filename)
        if not result.ok or result.source is None:
            raise SourceParseError(result.error or f"Could not parse {filename}")

        parsed = result.source
        declaration = parsed.find_class(class_name) if class_name else parsed.primary_class()
        if declaration is None:
            target = class_name or "any class"
            raise ClassNotFoundError(f"No Java class found for {target} in {filename}")
        return declaration

    def _select(self, model: ClassModel, methods: Iterable[str] | None) -> ClassModel:
        if not model.operations:
            raise NoOperationsError(f"No public methods found in {model.class_name}.")
        if methods is None:
            return model

        selected = list(methods)
        unknown = [key for key in selected if not model.selects(key)]
        if unknown:
            raise UnknownOperationError(
                f"{model.class_name} has no public method(s): {', '.join(unknown)}"
            )
        if not selected:
            raise NoOperationsError("No methods selected.")

        logger.info(f"Generating tests for {len(selected)} selected method(s)")
        return model.with_operations(selected)
