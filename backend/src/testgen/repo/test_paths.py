"""Locate where a generated test file belongs in a project."""

from __future__ import annotations

import logging
from pathlib import Path

from testgen.config import PathsConfig
from testgen.constants import TEST_CLASS_SUFFIX
from testgen.generation.models import ClassModel

logger = logging.getLogger(__name__)


class TestPaths:
    """
    Computes test file locations for a project.

    Layout (Maven/Gradle convention, roots configurable):
        {project_root}/
            src/main/java/{package/path}/{ClassName}.java
            src/test/java/{package/path}/{ClassName}Test.java
    """

    __test__ = False

    def __init__(self, project_root: Path, paths: PathsConfig | None = None) -> None:
        """
        Initialize test paths.

        Args:
            project_root: Root directory of the Java project.
            paths: Configured source roots. Defaults to the Maven layout.
        """
        self.project_root = project_root
        self.paths = paths or PathsConfig()

        self.test_root_default = project_root / self.paths.test_root

    def test_root_for(self, source_file: Path | None = None) -> Path:
        """
        Find the test source root that should hold tests for a source file.

        Order of preference:
            1. A sibling of the main root the source file lives under
               (``.../src/main/java`` becomes ``.../src/test/java``), so each
               module of a multi-module build keeps its own tests.
            2. The configured test root under the project root.
        """
        if source_file is not None:
            main_parts = Path(self.paths.main_root).parts
            test_parts = Path(self.paths.test_root).parts
            parts = source_file.parts
            for i in range(len(parts) - len(main_parts), -1, -1):
                if parts[i : i + len(main_parts)] == main_parts:
                    derived = Path(*parts[:i], *test_parts)
                    logger.debug(f"Derived test root {derived} from {source_file}")
                    return derived

        return self.test_root_default

    def test_file_for(self, model: ClassModel, source_file: Path | None = None) -> Path:
        """
        Path of the test file for a class.

        Returns:
            ``<test-root>/<package/path>/<ClassName>Test<ext>``
        """
        directory = self.test_root_for(source_file)
        if model.package_name:
            directory = directory.joinpath(*model.package_name.split("."))
        return directory / f"{model.class_name}{TEST_CLASS_SUFFIX}{self.paths.file_extension}"
