"""Project layout helpers."""

from testgen.repo.test_paths import TestPaths

__all__ = ["TestPaths"]
