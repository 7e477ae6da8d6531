"""
Markdown annotation reference renderer.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..analyzer.result_nodes import ExtractionResult

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


def _escape_cell(value: str) -> str:
    """Make a value safe inside a Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")


class MarkdownRenderer:
    """Renders an ExtractionResult with the packaged report template."""

    TEMPLATE_NAME = "report.md.jinja2"

    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["cell"] = _escape_cell
        self.template = self.jinja_env.get_template(self.TEMPLATE_NAME)

    def render(self, result: ExtractionResult, command_line: str = "capnp_parse") -> str:
        """
        Render the report.

        Args:
            result: The reduced schema
            command_line: Invocation recorded in the report header

        Returns:
            Markdown text
        """
        document = result.to_dict()
        return self.template.render(
            command_line=command_line,
            sections=[
                ("Structs", document["structs"], "fields", "Field"),
                ("Enums", document["enums"], "enumerants", "Enumerant"),
                ("Interfaces", document["interfaces"], "methods", "Method"),
            ],
            unk=document["unk"],
        )
