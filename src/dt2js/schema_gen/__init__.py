"""
Schema generation: rewrites RAML type declarations into JSON Schema draft-04.
"""
from .converters import TYPE_CONVERTERS, convert_date_type, convert_file_type, convert_type
from .transformer import add_root_keywords, process_array, process_nested, schema_form

__all__ = [
    "TYPE_CONVERTERS",
    "add_root_keywords",
    "convert_date_type",
    "convert_file_type",
    "convert_type",
    "process_array",
    "process_nested",
    "schema_form",
]
