"""
Errors raised by the extraction pipeline.

Every error here is fatal: the run stops and nothing is written. Soft
conditions (unknown annotation ids, unsupported value kinds, unrecognised
node kinds) are handled by the reducer and never raise.
"""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for all fatal extraction failures."""

    pass


class CompilerError(ExtractionError):
    """Raised when the schema compiler cannot be run or exits with an error."""

    pass


class SchemaDecodeError(ExtractionError):
    """Raised when the compiler output cannot be decoded.

    Attributes:
        detail: The message without the context suffix
        phase: Decoding phase that failed ("schema", "message", "node",
            "member" or "annotation")
        node_id: Id of the node being decoded, if known
        node_name: Display name of the node being decoded, if known
    """

    def __init__(
        self,
        message: str,
        phase: str,
        node_id: int | None = None,
        node_name: str | None = None,
    ):
        self.detail = message
        self.phase = phase
        self.node_id = node_id
        self.node_name = node_name
        super().__init__(self._format(message))

    def _format(self, message: str) -> str:
        context = [f"phase={self.phase}"]
        if self.node_id is not None:
            context.append(f"node_id={self.node_id:#x}")
        if self.node_name:
            context.append(f"node={self.node_name}")
        return f"{message} ({' '.join(context)})"


class OutputError(ExtractionError):
    """Raised when the rendered result cannot be validated or written."""

    pass
