"""
Pipeline - Cap'n Proto schema annotation extractor.

1. Discovery: Find schema files matching a glob
2. Compiler: Run ``capnp compile -o -`` over them
3. Reader: Decode the CodeGeneratorRequest into SchemaNodes
4. Analyzer pass 1: Index annotation declarations by id
5. Analyzer pass 2: Reduce nodes to structs, enums and interfaces
6. Writer: Render JSON (or Markdown) and write it atomically
"""

from __future__ import annotations

from .config import ExtractorConfig, OutputConfig, OutputFormat, OutputMode
from .errors import CompilerError, ExtractionError, OutputError, SchemaDecodeError
from .extractor import PipelineExtractor

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
