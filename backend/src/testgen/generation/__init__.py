"""Test generation: analysis, synthesis and merging."""

from testgen.generation.models import ClassModel, Dependency, Operation, Parameter
from testgen.generation.analyzer import StructuralAnalyzer, analyze
from testgen.generation.synthesizer import TestCodeSynthesizer, synthesize
from testgen.generation.merger import MergeError, MergeResult, merge, merge_with_report
from testgen.generation.writer import TestFileWriter, WriteResult, WriteStatus

__all__ = [
    "ClassModel",
    "Dependency",
    "Operation",
    "Parameter",
    "StructuralAnalyzer",
    "analyze",
    "TestCodeSynthesizer",
    "synthesize",
    "MergeError",
    "MergeResult",
    "merge",
    "merge_with_report",
    "TestFileWriter",
    "WriteResult",
    "WriteStatus",
]
