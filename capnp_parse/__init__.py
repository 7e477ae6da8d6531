"""Cap'n Proto Schema Annotation Extractor

A Python package for extracting the fields, enumerants, methods and
custom annotations of Cap'n Proto schemas into a JSON document.
"""

__version__ = "0.2.0"

from .pipeline import (
    CompilerError,
    ExtractionError,
    ExtractorConfig,
    OutputConfig,
    OutputError,
    OutputFormat,
    OutputMode,
    PipelineExtractor,
    SchemaDecodeError,
)

__all__ = [
    "PipelineExtractor",
    "ExtractorConfig",
    "OutputConfig",
    "OutputFormat",
    "OutputMode",
    "ExtractionError",
    "CompilerError",
    "SchemaDecodeError",
    "OutputError",
]
