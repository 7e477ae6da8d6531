"""
Writer module.

Renders extraction results to JSON or Markdown and writes them atomically.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .json_serializer import serialize_result
from .markdown_renderer import MarkdownRenderer

__all__ = [
    "AtomicWriter",
    "MarkdownRenderer",
    "serialize_result",
]
