"""
Node-level rewrites of RAML scalar type keywords into JSON Schema vocabulary.

Every converter is total: a node it does not recognize is returned unchanged.
Converters mutate the node they are given and return it.
"""
from typing import Any, Callable, Dict

from ..constants import (
    DATE_ONLY_PATTERN,
    DATETIME_ONLY_PATTERN,
    RFC2616_DATETIME_PATTERN,
    RFC3339_DATETIME_PATTERN,
    TIME_ONLY_PATTERN,
)

Converter = Callable[[Dict[str, Any]], Dict[str, Any]]


def _relabel(new_type: str) -> Converter:
    def convert(node: Dict[str, Any]) -> Dict[str, Any]:
        node["type"] = new_type
        return node
    return convert


def convert_file_type(node: Dict[str, Any]) -> Dict[str, Any]:
    """RAML `file` becomes a binary-encoded string; `fileTypes` move under `media.anyOf`."""
    node["type"] = "string"
    media = node.get("media")
    if not isinstance(media, dict):
        media = {}
    media["binaryEncoding"] = "binary"
    if "fileTypes" in node:
        file_types = node.pop("fileTypes")
        if isinstance(file_types, str):
            file_types = [file_types]
        media["anyOf"] = [{"mediaType": media_type} for media_type in file_types or []]
    node["media"] = media
    return node


def _datetime_pattern(node: Dict[str, Any]) -> str:
    if node.get("format") == "rfc2616":
        return RFC2616_DATETIME_PATTERN
    return RFC3339_DATETIME_PATTERN


_DATE_PATTERNS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "date-only": lambda node: DATE_ONLY_PATTERN,
    "time-only": lambda node: TIME_ONLY_PATTERN,
    "datetime-only": lambda node: DATETIME_ONLY_PATTERN,
    "datetime": _datetime_pattern,
}


def convert_date_type(node: Dict[str, Any]) -> Dict[str, Any]:
    """Date/time types become strings constrained by a fixed pattern. `format` is always dropped."""
    pattern_for = _DATE_PATTERNS.get(node.get("type")) if isinstance(node.get("type"), str) else None
    if pattern_for is None:
        return node
    node["pattern"] = pattern_for(node)
    node["type"] = "string"
    node.pop("format", None)
    return node


TYPE_CONVERTERS: Dict[str, Converter] = {
    "union": _relabel("object"),
    "nil": _relabel("null"),
    "file": convert_file_type,
    "date-only": convert_date_type,
    "time-only": convert_date_type,
    "datetime-only": convert_date_type,
    "datetime": convert_date_type,
}


def convert_type(node: Any) -> Any:
    """Dispatches on the node's `type` keyword through TYPE_CONVERTERS."""
    if not isinstance(node, dict):
        return node
    type_name = node.get("type")
    if not isinstance(type_name, str):
        return node
    converter = TYPE_CONVERTERS.get(type_name)
    if converter is None:
        return node
    return converter(node)
