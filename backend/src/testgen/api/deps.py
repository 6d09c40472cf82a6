"""FastAPI dependency injection functions."""

from pathlib import Path

from fastapi import Depends, HTTPException, status

from testgen.config import Config, ConfigError, load_settings
from testgen.service import GenerationService


def get_settings() -> Config:
    """Get application settings (cached).

    Raises:
        HTTPException: 500 if the workspace is not configured or config.ini is invalid.
    """
    try:
        return load_settings()
    except (ValueError, ConfigError) as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e


def get_generation_service(settings: Config = Depends(get_settings)) -> GenerationService:
    """Get a GenerationService bound to the configured workspace."""
    return GenerationService(settings)


def validate_source_path(path: str, workspace: Path) -> tuple[bool, str, Path | None]:
    """Validate that a requested source file lies inside the workspace.

    Args:
        path: Requested path, relative to the workspace or absolute.
        workspace: The workspace root.

    Returns:
        Tuple of (is_valid, error_message, resolved_path).
    """
    base = workspace.resolve()
    try:
        requested = (base / path).resolve()
    except (ValueError, OSError) as e:
        return False, f"Invalid path: {e}", None

    # resolve() collapses .. and symlinks, so containment covers traversal
    try:
        requested.relative_to(base)
    except ValueError:
        return False, "Path is outside the workspace", None

    if not requested.is_file():
        return False, "Source file does not exist", None

    return True, "", requested
