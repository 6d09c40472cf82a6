"""Write generated test classes to disk, merging into existing files."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from testgen.generation.merger import extract_test_blocks, merge_with_report

logger = logging.getLogger(__name__)


class WriteStatus(str, Enum):
    """Outcome of writing a test file."""

    CREATED = "created"
    MERGED = "merged"
    UNCHANGED = "unchanged"


@dataclass
class WriteResult:
    """Where a test file was written and what changed."""

    path: Path
    status: WriteStatus
    added: list[str] = field(default_factory=list)


class TestFileWriter:
    """Creates test files, or appends only missing methods to existing ones."""

    __test__ = False

    def write(self, path: Path, generated: str) -> WriteResult:
        """Write generated source to ``path``.

        Args:
            path: Target test file.
            generated: Synthesized test class.

        Returns:
            WriteResult describing the outcome.

        Raises:
            OSError: If the file cannot be read or written.
            MergeError: If an existing file cannot receive merged methods.
        """
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(generated, encoding="utf-8")
            names = [b.name for b in extract_test_blocks(generated) if b.name]
            logger.info(f"Created {path} with {len(names)} test(s)")
            return WriteResult(path=path, status=WriteStatus.CREATED, added=names)

        existing = path.read_text(encoding="utf-8")
        result = merge_with_report(existing, generated)
        if not result.changed:
            logger.info(f"{path} already has all generated tests")
            return WriteResult(path=path, status=WriteStatus.UNCHANGED)

        path.write_text(result.content, encoding="utf-8")
        return WriteResult(path=path, status=WriteStatus.MERGED, added=result.added)
