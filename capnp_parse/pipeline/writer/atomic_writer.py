"""
Atomic file writer for extraction output.

Ensures that an interrupted or failed run never leaves a partial
document at the output path.
"""

from __future__ import annotations

import json
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..config import OutputFormat
from ..errors import OutputError


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(
        self,
        validate_json: Callable[[str], None] | None = None,
        validate_markdown: Callable[[str], None] | None = None,
    ):
        """Initialize the atomic writer.

        Args:
            validate_json: Optional validation function for JSON documents
            validate_markdown: Optional validation function for Markdown documents
        """
        self._validate_json = validate_json or self._default_validate_json
        self._validate_markdown = validate_markdown or self._default_validate_markdown

    def write(
        self,
        path: Path,
        content: str,
        output_format: OutputFormat,
        validate: bool = True,
    ) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            output_format: Format used for validation
            validate: Whether to validate before finalizing

        Raises:
            OutputError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_content(content, output_format)

            temp_path.replace(path)

        except Exception:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise

    def write_if_not_exists(
        self,
        path: Path,
        content: str,
        output_format: OutputFormat,
        validate: bool = True,
    ) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            OutputError: If the file already exists or validation fails
        """
        if path.exists():
            raise OutputError(f"Output file already exists: {path}. Use force mode to overwrite.")

        self.write(path, content, output_format, validate)

    def _validate_content(self, content: str, output_format: OutputFormat) -> None:
        if output_format is OutputFormat.JSON:
            self._validate_json(content)
        elif output_format is OutputFormat.MARKDOWN:
            self._validate_markdown(content)

    def _default_validate_json(self, content: str) -> None:
        """Check the document parses and has the expected top-level keys."""
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise OutputError(f"Rendered JSON is not valid: {e}") from e

        missing = {"structs", "enums", "interfaces", "unk"} - set(document)
        if missing:
            raise OutputError(f"Rendered JSON is missing keys: {', '.join(sorted(missing))}")

    def _default_validate_markdown(self, content: str) -> None:
        if not content.strip():
            raise OutputError("Rendered Markdown is empty")
