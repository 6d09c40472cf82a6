"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field

from testgen.generation.models import ClassModel
from testgen.generation.writer import WriteStatus


class DependencyInfo(BaseModel):
    """A collaborator the generated test mocks."""

    type_name: str
    field_name: str


class ParameterInfo(BaseModel):
    """One parameter of an operation."""

    type_name: str
    name: str


class OperationInfo(BaseModel):
    """A public method of the class under test."""

    name: str
    signature: str = Field(..., description="Selection key, e.g. find(Long)")
    return_type: str
    parameters: list[ParameterInfo] = Field(default_factory=list)
    declared_failure_modes: list[str] = Field(default_factory=list)
    is_void: bool


class ClassModelResponse(BaseModel):
    """Structural model of an analyzed class."""

    package_name: str
    class_name: str
    dependencies: list[DependencyInfo] = Field(default_factory=list)
    operations: list[OperationInfo] = Field(default_factory=list)

    @classmethod
    def from_model(cls, model: ClassModel) -> "ClassModelResponse":
        """Build the response from a ClassModel."""
        return cls(
            package_name=model.package_name,
            class_name=model.class_name,
            dependencies=[
                DependencyInfo(type_name=d.type_name, field_name=d.field_name)
                for d in model.dependencies
            ],
            operations=[
                OperationInfo(
                    name=op.name,
                    signature=op.signature,
                    return_type=op.return_type,
                    parameters=[
                        ParameterInfo(type_name=p.type_name, name=p.name) for p in op.parameters
                    ],
                    declared_failure_modes=list(op.declared_failure_modes),
                    is_void=op.is_void,
                )
                for op in model.operations
            ],
        )


class AnalyzeRequest(BaseModel):
    """Request to analyze Java source."""

    source: str = Field(..., min_length=1, description="Java source text")
    class_name: str | None = Field(
        None,
        description="Class to analyze (defaults to the first top-level type)",
    )


class NamingOverride(BaseModel):
    """Per-request naming options; unset fields fall back to config."""

    naming_pattern: str | None = Field(
        None,
        description="Test name template containing {method} and {suffix}",
    )
    generate_failure_tests: bool | None = Field(
        None, description="Emit one test per declared throw"
    )
    add_guidance_comments: bool | None = Field(
        None, description="Mark placeholder calls with TODO comments"
    )


class GenerateRequest(BaseModel):
    """Request to generate a test class from Java source."""

    source: str = Field(..., min_length=1, description="Java source text")
    class_name: str | None = Field(
        None,
        description="Class to analyze (defaults to the first top-level type)",
    )
    methods: list[str] | None = Field(
        None,
        description="Method names or signatures such as find(Long) (defaults to all)",
    )
    existing: str | None = Field(
        None,
        description="Current test file content to merge new tests into",
    )
    naming: NamingOverride | None = Field(None, description="Naming overrides")


class GenerateResponse(BaseModel):
    """Generated (or merged) test source."""

    class_name: str = Field(..., description="Name of the generated test class")
    content: str = Field(..., description="Test source text")
    added: list[str] = Field(default_factory=list, description="Test methods added")
    skipped: list[str] = Field(
        default_factory=list,
        description="Test methods already present in the existing content",
    )


class WriteRequest(BaseModel):
    """Request to generate tests for a source file in the workspace."""

    path: str = Field(
        ...,
        min_length=1,
        description="Java source file, relative to the workspace",
    )
    class_name: str | None = Field(None, description="Class to analyze")
    methods: list[str] | None = Field(
        None,
        description="Method names or signatures such as find(Long) (defaults to all)",
    )


class WriteResponse(BaseModel):
    """Outcome of writing a test file."""

    path: str = Field(..., description="Test file path, relative to the workspace")
    status: WriteStatus
    added: list[str] = Field(default_factory=list, description="Test methods added")
