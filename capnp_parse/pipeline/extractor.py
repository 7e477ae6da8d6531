"""
Pipeline extractor that ties the phases together.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .analyzer import ExtractionResult, SchemaReducer, build_annotation_index
from .compiler import SchemaCompiler
from .config import ExtractorConfig, OutputFormat, OutputMode
from .discovery import discover_schema_files
from .reader import CodeGeneratorRequestReader
from .schema_nodes import SchemaNode
from .writer import AtomicWriter, MarkdownRenderer, serialize_result

logger = logging.getLogger(__name__)


class PipelineExtractor:
    """Runs discovery, compilation, reduction and output for one config."""

    def __init__(
        self,
        config: ExtractorConfig | None = None,
        compiler: SchemaCompiler | None = None,
        reader: CodeGeneratorRequestReader | None = None,
        writer: AtomicWriter | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Extraction configuration
            compiler: Compiler runner (built from config when omitted)
            reader: Request decoder (built from config when omitted)
            writer: Output writer
        """
        self.config = config or ExtractorConfig()
        self.compiler = compiler or SchemaCompiler(self.config)
        self.reader = reader or CodeGeneratorRequestReader.from_config(self.config)
        self.writer = writer or AtomicWriter()

    def collect_files(self) -> list[Path]:
        return discover_schema_files(self.config.glob, self.config.excludes)

    def load_nodes(self, files: Sequence[Path]) -> list[SchemaNode]:
        """Compile the files and decode the node stream."""
        return self.reader.read(self.compiler.compile(files))

    def extract_nodes(self, nodes: Sequence[SchemaNode]) -> ExtractionResult:
        """
        Reduce a node stream.

        The annotation index is complete before the reducer starts, so
        annotations declared after their use sites still resolve.
        """
        index = build_annotation_index(nodes)
        return SchemaReducer(index).reduce(nodes)

    def render(self, result: ExtractionResult, command_line: str = "capnp_parse") -> str:
        output = self.config.output
        if output.format is OutputFormat.MARKDOWN:
            return MarkdownRenderer().render(result, command_line)
        return serialize_result(result, indent=output.indent)

    def write(self, content: str) -> Path:
        output = self.config.output
        path = Path(output.path)
        if output.mode is OutputMode.ERROR_IF_EXISTS:
            self.writer.write_if_not_exists(path, content, output.format, output.validate_before_write)
        else:
            self.writer.write(path, content, output.format, output.validate_before_write)
        logger.info(f"Wrote {output.format.value} output to {path}")
        return path

    def extract(self) -> ExtractionResult:
        """Run every phase up to the reduced result."""
        files = self.collect_files()
        nodes = self.load_nodes(files)
        return self.extract_nodes(nodes)

    def run(self, command_line: str = "capnp_parse") -> Path:
        """
        Run the whole extraction and write the output file.

        Nothing is written unless every phase succeeds.

        Returns:
            The output path
        """
        result = self.extract()
        return self.write(self.render(result, command_line))
