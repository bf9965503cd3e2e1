"""
RAML 1.0 document loading and type-declaration normalization.
"""
from .loader import RamlLoader, load_raml_context
from .types import (
    merge_type_nodes,
    normalize_type_declaration,
    parse_type_expression,
    resolve_type_references,
)

__all__ = [
    "RamlLoader",
    "load_raml_context",
    "merge_type_nodes",
    "normalize_type_declaration",
    "parse_type_expression",
    "resolve_type_references",
]
