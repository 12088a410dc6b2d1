"""
Serialization export for client-side consumption.

Client code addresses options by name, so the payload maps every option name
to itself, in declaration order:

    {"draft":"draft","published":"published"}

Build tooling injects these payloads into client-side sources; the exact
injection format is up to the tooling.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .registry import EnumType


def export_payload(enum_type: EnumType) -> dict[str, str]:
    """Map each option name of the enum type to itself."""
    return {key: key for key in enum_type.keys()}


def to_json(enum_type: EnumType, indent: int | None = None) -> str:
    """
    Serialize the export payload of one enum type.

    Args:
        enum_type: Enum type to export
        indent: JSON indentation; None gives the compact form

    Returns:
        JSON object string, e.g. '{"draft":"draft","published":"published"}'
    """
    return _dumps(export_payload(enum_type), indent)


def export_document(enum_types: Iterable[EnumType]) -> dict[str, dict[str, str]]:
    """Build a {TypeName: payload} document for several enum types."""
    return {enum_type.name: export_payload(enum_type) for enum_type in enum_types}


def document_to_json(enum_types: Iterable[EnumType], indent: int | None = None) -> str:
    """Serialize export_document() output."""
    return _dumps(export_document(enum_types), indent)


def _dumps(data: Any, indent: int | None) -> str:
    if indent is None:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=indent, ensure_ascii=False)
