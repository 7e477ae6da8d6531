"""
JSON serializer for extraction results.
"""

from __future__ import annotations

import json

from ..analyzer.result_nodes import ExtractionResult


def serialize_result(result: ExtractionResult, indent: int = 2) -> str:
    """
    Render a result as pretty-printed JSON.

    Annotation keys are already sorted by ``to_dict``; the remaining keys
    keep their fixed order, so the same result always gives the same text.

    Args:
        result: The reduced schema
        indent: Indentation width

    Returns:
        JSON text
    """
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)
