"""
Schema compiler invocation.

Runs ``capnp compile -o -`` which writes a CodeGeneratorRequest message
for the given files to stdout.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from .config import ExtractorConfig
from .errors import CompilerError

logger = logging.getLogger(__name__)


class SchemaCompiler:
    """Runs the external schema compiler."""

    def __init__(self, config: ExtractorConfig):
        self.compiler_path = config.compiler_path
        self.timeout = config.compiler_timeout
        self.import_paths = list(config.import_paths)

    def build_command(self, files: Sequence[Path]) -> list[str]:
        """Build the compiler command line for the given files."""
        cmd = [self.compiler_path, "compile", "-o", "-"]
        for import_path in self.import_paths:
            cmd.append(f"--import-path={import_path}")
        cmd.extend(str(f) for f in files)
        return cmd

    def compile(self, files: Sequence[Path]) -> bytes:
        """
        Compile the schema files.

        Args:
            files: Schema files to compile together

        Returns:
            The raw CodeGeneratorRequest message

        Raises:
            CompilerError: If there is nothing to compile, the compiler is
                missing, times out or exits with an error
        """
        if not files:
            raise CompilerError("No schema files to compile")

        cmd = self.build_command(files)
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise CompilerError(f"Schema compiler not found: {self.compiler_path}") from e
        except subprocess.TimeoutExpired as e:
            raise CompilerError(f"Schema compiler timed out after {self.timeout}s") from e
        except OSError as e:
            raise CompilerError(f"Could not run schema compiler: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise CompilerError(f"Schema compiler exited with status {result.returncode}: {stderr}")

        logger.info(f"Compiled {len(files)} schema files ({len(result.stdout)} bytes)")
        return result.stdout
