"""
Configuration for the extraction pipeline.

Values can come from a JSON config file (``--config``) and are then
overridden by explicit command line flags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_GLOB = "./**/*.capnp"
DEFAULT_OUTPUT = "./output.json"
DEFAULT_COMPILER = "/usr/local/bin/capnp"


class OutputFormat(str, Enum):
    """Format of the written document."""

    JSON = "json"
    MARKDOWN = "markdown"


class OutputMode(str, Enum):
    """Output mode for file writing.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Refuse to replace an existing file
    FORCE = "force"  # Default: overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        path: Destination file
        format: Rendered document format
        mode: How to handle an existing output file
        indent: JSON indentation width
        validate_before_write: Whether to re-parse the document before replacing the target
    """

    path: str = DEFAULT_OUTPUT
    format: OutputFormat = OutputFormat.JSON
    mode: OutputMode = OutputMode.FORCE
    indent: int = 2
    validate_before_write: bool = True


@dataclass
class ExtractorConfig:
    """Configuration options for schema extraction."""

    # Pattern used to discover schema files (supports **)
    glob: str = DEFAULT_GLOB

    # File names (not paths) to leave out of the compilation
    excludes: list[str] = field(default_factory=list)

    # Schema compiler binary
    compiler_path: str = DEFAULT_COMPILER

    # Seconds before the compiler subprocess is killed
    compiler_timeout: float = 60.0

    # Extra import directories for both the compiler and the schema loader
    import_paths: list[str] = field(default_factory=list)

    # Explicit location of capnp/schema.capnp (empty = search)
    schema_file: str = ""

    # Upper bound on words traversed while decoding the compiler output
    traversal_limit_in_words: int = 1 << 30

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> ExtractorConfig:
        """Create a config from a dictionary."""
        if not isinstance(d, dict):
            raise ValueError(f"Expected a JSON object, got {type(d).__name__}")
        config = ExtractorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                fmt = v.get("format", OutputFormat.JSON)
                if isinstance(fmt, str):
                    fmt = OutputFormat(fmt)
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    path=v.get("path", DEFAULT_OUTPUT),
                    format=fmt,
                    mode=mode,
                    indent=v.get("indent", 2),
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "glob": self.glob,
            "excludes": self.excludes,
            "compiler_path": self.compiler_path,
            "compiler_timeout": self.compiler_timeout,
            "import_paths": self.import_paths,
            "schema_file": self.schema_file,
            "traversal_limit_in_words": self.traversal_limit_in_words,
            "output": {
                "path": self.output.path,
                "format": self.output.format.value,
                "mode": self.output.mode.value,
                "indent": self.output.indent,
                "validate_before_write": self.output.validate_before_write,
            },
        }
