"""
Recursive transformation of a RAML type-declaration tree into JSON Schema draft-04.

`schema_form` is the single recursive entry point. Each call hoists
`required: true` property flags, rewrites nested lists and mappings through
`process_nested`, converts the node's own `type` keyword and overlays the
nested delta on the result.

The `trace` argument is threaded through every call unchanged; it records the
type names along the current path for callers that want cycle detection and
is not inspected here.
"""
from typing import Any, Dict, List, Optional

from ..constants import DRAFT04_SCHEMA_URI
from .converters import convert_type


def add_root_keywords(node: Dict[str, Any]) -> Dict[str, Any]:
    """Declares the schema dialect on the root node without overwriting an existing one."""
    node.setdefault("$schema", DRAFT04_SCHEMA_URI)
    return node


def _hoist_required(node: Dict[str, Any]) -> None:
    # Only direct entries of `properties` are scanned; flags under `items` stay where they are.
    # A node without a `type` keyword is a properties map, not a type node.
    properties = node.get("properties")
    if not isinstance(properties, dict) or not isinstance(node.get("type"), str):
        return
    required = node.get("required")
    if not isinstance(required, list):
        required = []
    for prop_name, prop_node in properties.items():
        if isinstance(prop_node, dict) and prop_node.get("required") is True:
            required.append(prop_name)
            del prop_node["required"]
    node["required"] = required


def process_array(sequence: List[Any], trace: List[str]) -> List[Any]:
    """Maps every element through convert_type then schema_form."""
    return [schema_form(convert_type(element), trace) for element in sequence]


def process_nested(node: Dict[str, Any], trace: List[str]) -> Dict[str, Any]:
    """
    Rewrites the list- and mapping-valued fields of `node`.

    Returns only the rewritten fields; scalar fields are left out of the
    result and remain untouched on `node`.
    """
    updates: Dict[str, Any] = {}
    for key, value in node.items():
        if isinstance(value, list):
            updates[key] = process_array(value, trace)
        elif isinstance(value, dict):
            updates[key] = schema_form(convert_type(value), trace)
    return updates


def schema_form(node: Any, trace: Optional[List[str]] = None) -> Any:
    """Transforms one subtree. Non-mapping values are returned unchanged."""
    if not isinstance(node, dict):
        return node

    if trace is None:
        trace = []
    _hoist_required(node)
    updates = process_nested(node, trace)
    node = convert_type(node)
    node.update(updates)
    return node
