"""Test generation API endpoints."""

from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException, status

from testgen.api.deps import get_generation_service, get_settings, validate_source_path
from testgen.api.schemas import (
    AnalyzeRequest,
    ClassModelResponse,
    GenerateRequest,
    GenerateResponse,
    WriteRequest,
    WriteResponse,
)
from testgen.config import Config, ConfigError
from testgen.generation.merger import MergeError
from testgen.generation.synthesizer import generated_class_name
from testgen.service import (
    ClassNotFoundError,
    GenerationError,
    GenerationService,
    UnknownOperationError,
)

router = APIRouter(prefix="/api/tests", tags=["tests"])


def _http_error(error: GenerationError) -> HTTPException:
    """Map a generation error to an HTTP error."""
    if isinstance(error, ClassNotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, UnknownOperationError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    return HTTPException(status_code=code, detail=error.message)


@router.post("/analyze", response_model=ClassModelResponse)
async def analyze(
    request: AnalyzeRequest,
    service: GenerationService = Depends(get_generation_service),
) -> ClassModelResponse:
    """Analyze a Java class.

    Returns its injected dependencies and public operations.
    """
    try:
        model = service.analyze_source(request.source, request.class_name)
    except GenerationError as e:
        raise _http_error(e) from e
    return ClassModelResponse.from_model(model)


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    settings: Config = Depends(get_settings),
    service: GenerationService = Depends(get_generation_service),
) -> GenerateResponse:
    """Generate a JUnit 5 test class for a Java class.

    When ``existing`` is given, only test methods it does not already
    contain are merged in.
    """
    naming = settings.generation
    if request.naming is not None:
        overrides = request.naming.model_dump(exclude_none=True)
        try:
            naming = replace(naming, **overrides)
        except ConfigError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    try:
        model, result = service.generate(
            request.source,
            class_name=request.class_name,
            methods=request.methods,
            existing=request.existing,
            naming=naming,
        )
    except GenerationError as e:
        raise _http_error(e) from e
    except MergeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e

    return GenerateResponse(
        class_name=generated_class_name(model),
        content=result.content,
        added=result.added,
        skipped=result.skipped,
    )


@router.post("/write", response_model=WriteResponse)
async def write(
    request: WriteRequest,
    settings: Config = Depends(get_settings),
    service: GenerationService = Depends(get_generation_service),
) -> WriteResponse:
    """Generate tests for a workspace source file and write them to the test root.

    Creates the test file, or appends missing test methods to an existing one.
    """
    is_valid, error_msg, source_path = validate_source_path(
        request.path, settings.workspace_path
    )
    if not is_valid or source_path is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_msg)

    try:
        result = service.write(source_path, request.class_name, request.methods)
    except GenerationError as e:
        raise _http_error(e) from e
    except MergeError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to write test file: {e}",
        ) from e

    workspace = settings.workspace_path.resolve()
    try:
        display_path = str(result.path.resolve().relative_to(workspace))
    except ValueError:
        display_path = str(result.path)

    return WriteResponse(path=display_path, status=result.status, added=result.added)
