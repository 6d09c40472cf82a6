"""Base parser interface."""

from abc import ABC, abstractmethod
from pathlib import Path

from testgen.parsing.models import ParseResult


class BaseParser(ABC):
    """Abstract base class for language-specific declaration parsers."""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """File extensions this parser handles (e.g., ['.java'])."""
        pass

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Human-readable language name."""
        pass

    @abstractmethod
    def parse(self, file_path: Path, content: str) -> ParseResult:
        """Parse file content and extract type declarations.

        Args:
            file_path: Path to the file (for error messages).
            content: File content as string.

        Returns:
            ParseResult with extracted declarations or error.
        """
        pass

    def can_parse(self, file_path: Path) -> bool:
        """Check if this parser can handle the given file.

        Args:
            file_path: Path to check.

        Returns:
            True if this parser supports the file extension.
        """
        return file_path.suffix.lower() in self.supported_extensions

    def parse_string(self, code: str, filename: str = "<string>") -> ParseResult:
        """Convenience method to parse a string of source code.

        Args:
            code: Source code as string.
            filename: Filename to use in error messages.

        Returns:
            ParseResult with extracted declarations or error.
        """
        return self.parse(Path(filename), code)
