"""Merge regenerated test methods into an existing test class.

The merge is textual. Generated output is scanned for @Test blocks using a
line-oriented brace counter, and each block whose method name does not
already appear as ``name(`` in the existing document is inserted before
the document's last closing brace.

Brace counting ignores strings and comments. It is reliable for the
synthesizer's own output but not for arbitrary hand-written Java; merging
hand-edited generated text needs a real parse.
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

TEST_ANNOTATION = "@Test"
VOID_PREFIX = "void "


class MergeError(Exception):
    """Raised when the existing document cannot receive merged methods."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class TestBlock:
    """One @Test method cut out of generated source."""

    __test__ = False

    name: str | None
    text: str


@dataclass
class MergeResult:
    """Merged document plus the test names that were appended or skipped."""

    content: str
    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether any block was appended."""
        return bool(self.added)


def extract_test_blocks(generated: str) -> list[TestBlock]:
    """Split generated source into @Test method blocks.

    A block starts at a line beginning with @Test and ends when the running
    brace depth returns to zero after at least one opening brace.

    Args:
        generated: Source text produced by the synthesizer.

    Returns:
        Blocks in the order encountered.
    """
    blocks: list[TestBlock] = []
    current: list[str] = []
    in_method = False
    depth = 0
    seen_open = False
    name: str | None = None

    for line in generated.split("\n"):
        stripped = line.strip()
        if not in_method and stripped.startswith(TEST_ANNOTATION):
            in_method = True
            current = []
            depth = 0
            seen_open = False
            name = None

        if not in_method:
            continue

        current.append(line)
        opens = line.count("{")
        depth += opens - line.count("}")
        seen_open = seen_open or opens > 0

        if name is None and stripped.startswith(VOID_PREFIX):
            end = stripped.find("(")
            if end > len(VOID_PREFIX):
                name = stripped[len(VOID_PREFIX) : end].strip()

        if seen_open and depth == 0:
            blocks.append(TestBlock(name=name, text="\n".join(current) + "\n"))
            in_method = False

    return blocks


def merge_with_report(existing: str, generated: str) -> MergeResult:
    """Append generated test methods missing from an existing document.

    Args:
        existing: Current content of the test file.
        generated: Freshly synthesized test class.

    Returns:
        MergeResult with the merged content. The content is ``existing``
        unchanged when every generated method is already present.

    Raises:
        MergeError: If methods need inserting and ``existing`` has no closing
            brace to insert before.
    """
    added: list[str] = []
    skipped: list[str] = []
    to_append: list[str] = []

    for block in extract_test_blocks(generated):
        if block.name is None:
            continue
        if f"{block.name}(" in existing:
            skipped.append(block.name)
            continue
        added.append(block.name)
        to_append.append(block.text + "\n")

    if not to_append:
        logger.debug(f"Nothing to merge, {len(skipped)} test(s) already present")
        return MergeResult(content=existing, added=added, skipped=skipped)

    last_brace = existing.rfind("}")
    if last_brace < 0:
        raise MergeError("Existing test file has no closing brace to insert before")

    content = existing[:last_brace] + "".join(to_append) + existing[last_brace:]
    logger.info(f"Merged {len(added)} new test(s), skipped {len(skipped)} existing")
    return MergeResult(content=content, added=added, skipped=skipped)


def merge(existing: str, generated: str) -> str:
    """Return ``existing`` with missing generated test methods appended."""
    return merge_with_report(existing, generated).content
