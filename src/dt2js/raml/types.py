"""
Normalization of RAML 1.0 type declarations into the expanded form consumed
by the schema transformer, and inlining of references to declared types.
"""
import copy
import json
from typing import Any, Dict, List, Optional

import structlog

from ..constants import BUILTIN_TYPES
from ..exceptions import RecursionLimitError

logger = structlog.get_logger(__name__)

TypeNode = Dict[str, Any]

# Facets whose values are themselves type declarations.
_NESTED_DECLARATION_FACETS = ("items", "additionalProperties")


def _split_top_level(expression: str, separator: str) -> List[str]:
    parts: List[str] = []
    depth = 0
    current = []
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts]


def _is_wrapped_in_parens(expression: str) -> bool:
    if not (expression.startswith("(") and expression.endswith(")")):
        return False
    depth = 0
    for index, char in enumerate(expression):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index != len(expression) - 1:
                return False
    return True


def parse_type_expression(expression: str) -> TypeNode:
    """
    Parses a RAML type expression into a type node.

    `Cat[]` -> {"type": "array", "items": {"type": "Cat"}}
    `Cat | Dog` -> {"type": "union", "anyOf": [{"type": "Cat"}, {"type": "Dog"}]}
    Parentheses group, so `(Cat | Dog)[]` is an array of unions.
    """
    expression = expression.strip()
    members = _split_top_level(expression, "|")
    if len(members) > 1:
        return {"type": "union", "anyOf": [parse_type_expression(member) for member in members]}
    if expression.endswith("[]"):
        return {"type": "array", "items": parse_type_expression(expression[:-2])}
    if _is_wrapped_in_parens(expression):
        return parse_type_expression(expression[1:-1])
    return {"type": expression}


def _is_type_expression(value: str) -> bool:
    return any(token in value for token in ("|", "[]", "("))


def _inline_json_schema(value: str) -> Optional[TypeNode]:
    # RAML allows a JSON Schema document in place of a type declaration.
    if not value.lstrip().startswith("{"):
        return None
    try:
        schema = json.loads(value)
    except ValueError:
        return None
    return schema if isinstance(schema, dict) else None


def _normalize_type_facet(type_value: Any) -> Any:
    if isinstance(type_value, str):
        inline = _inline_json_schema(type_value)
        if inline is not None:
            return inline
        if _is_type_expression(type_value):
            return parse_type_expression(type_value)
        return type_value
    if isinstance(type_value, list):
        return [_normalize_type_facet(parent) for parent in type_value]
    if isinstance(type_value, dict):
        return normalize_type_declaration(type_value)
    return type_value


def _normalize_properties(properties: Dict[str, Any]) -> Dict[str, Any]:
    normalized: Dict[str, Any] = {}
    for raw_name, declaration in properties.items():
        name = str(raw_name)
        prop_node = normalize_type_declaration(declaration)
        explicit_required = isinstance(declaration, dict) and "required" in declaration
        if prop_node.get("required") is False:
            # Optional is the JSON Schema default; a boolean `required` is not draft-04.
            del prop_node["required"]
        if name.endswith("?") and len(name) > 1:
            name = name[:-1]
        elif not explicit_required:
            prop_node["required"] = True
        normalized[name] = prop_node
    return normalized


def normalize_type_declaration(declaration: Any) -> TypeNode:
    """
    Expands a RAML type declaration into a canonical type node.

    Shorthand declarations (`Age: integer`, `Tags: string[]`) become mappings,
    type expressions are parsed, and properties default to `required: true`
    unless their name ends with `?`.
    """
    if declaration is None:
        return {"type": "string"}
    if isinstance(declaration, str):
        inline = _inline_json_schema(declaration)
        if inline is not None:
            return inline
        return parse_type_expression(declaration)
    if isinstance(declaration, list):
        return {"type": _normalize_type_facet(declaration)}
    if not isinstance(declaration, dict):
        return parse_type_expression(str(declaration))

    node: TypeNode = dict(declaration)
    if "type" in node:
        type_value = _normalize_type_facet(node["type"])
        if isinstance(type_value, dict) and isinstance(declaration.get("type"), str):
            # Parsed expression: its keys form the base, the declaration's own facets win.
            node.pop("type")
            node = {**type_value, **node}
        else:
            node["type"] = type_value
    elif isinstance(node.get("properties"), dict):
        node["type"] = "object"
    elif "items" in node:
        node["type"] = "array"
    elif "anyOf" not in node:
        node["type"] = "string"

    if isinstance(node.get("properties"), dict):
        node["properties"] = _normalize_properties(node["properties"])
    for facet in _NESTED_DECLARATION_FACETS:
        value = node.get(facet)
        if isinstance(value, (str, dict)):
            node[facet] = normalize_type_declaration(value)
    if isinstance(node.get("anyOf"), list):
        node["anyOf"] = [normalize_type_declaration(member) for member in node["anyOf"]]
    return node


def merge_type_nodes(base: TypeNode, override: TypeNode) -> TypeNode:
    """Deep-merges `override` onto a copy of `base`; `properties` are merged per property."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key == "properties" and isinstance(value, dict) and isinstance(merged.get(key), dict):
            properties = merged[key]
            for prop_name, prop_node in value.items():
                if isinstance(prop_node, dict) and isinstance(properties.get(prop_name), dict):
                    properties[prop_name] = merge_type_nodes(properties[prop_name], prop_node)
                else:
                    properties[prop_name] = copy.deepcopy(prop_node)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _refers_to_declared_type(parent: Any, context: Dict[str, TypeNode]) -> bool:
    if isinstance(parent, dict):
        return True
    return isinstance(parent, str) and parent not in BUILTIN_TYPES and parent in context


def _is_undeclared_reference(parent: Any, context: Dict[str, TypeNode]) -> bool:
    # "null" comes from inline JSON Schema declarations.
    return (isinstance(parent, str) and parent not in BUILTIN_TYPES
            and parent != "null" and parent not in context)


def _resolve_parent(parent: Any, context: Dict[str, TypeNode], trace: List[str]) -> TypeNode:
    if isinstance(parent, dict):
        return resolve_type_references(parent, context, trace)
    if isinstance(parent, str) and parent not in BUILTIN_TYPES and parent in context:
        if parent in trace:
            raise RecursionLimitError(parent, trace)
        logger.debug("Expanding declared type reference.", type_name=parent, depth=len(trace))
        return resolve_type_references(copy.deepcopy(context[parent]), context, [*trace, parent])
    return {"type": parent}


def resolve_type_references(node: Any, context: Dict[str, TypeNode], trace: List[str]) -> Any:
    """
    Inlines references to declared types.

    A node whose `type` names declared types (single inheritance, multiple
    inheritance or an inline declaration) is rebuilt from its resolved parents
    with its own facets merged on top. `trace` holds the declared type names
    being expanded on the current path; meeting one of them again raises
    RecursionLimitError.
    """
    if not isinstance(node, dict):
        return node

    type_value = node.get("type")
    parents = type_value if isinstance(type_value, list) else [type_value]
    for parent in parents:
        if _is_undeclared_reference(parent, context):
            logger.warning("Reference to undeclared type left unresolved.",
                           type_name=parent, trace=list(trace))
    if "type" in node and any(_refers_to_declared_type(parent, context) for parent in parents):
        resolved: TypeNode = {}
        for parent in parents:
            resolved = merge_type_nodes(resolved, _resolve_parent(parent, context, trace))
        own_facets = {key: value for key, value in node.items() if key != "type"}
        node = merge_type_nodes(resolved, own_facets)
    elif isinstance(type_value, list):
        # Only built-in parents; the last one decides the JSON type.
        node["type"] = type_value[-1] if type_value else "string"

    if node.get("type") == "any":
        del node["type"]

    if isinstance(node.get("properties"), dict):
        node["properties"] = {
            prop_name: resolve_type_references(prop_node, context, trace)
            for prop_name, prop_node in node["properties"].items()
        }
    for facet in _NESTED_DECLARATION_FACETS:
        if isinstance(node.get(facet), dict):
            node[facet] = resolve_type_references(node[facet], context, trace)
    if isinstance(node.get("anyOf"), list):
        node["anyOf"] = [resolve_type_references(member, context, trace) for member in node["anyOf"]]
    return node
