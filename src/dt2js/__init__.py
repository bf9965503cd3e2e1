"""dt2js - converts RAML 1.0 data types to JSON Schema (draft-04).

Parses the `types` section of a RAML 1.0 document and rewrites a named type
declaration into an equivalent draft-04 JSON Schema.
"""

__version__ = "0.1.0"

from .config import Config
from .converter import convert_type_declaration, dt2js, dt2js_async
from .exceptions import DocumentParseError, Dt2jsError, RecursionLimitError, TypeNotFoundError
from .models import ConversionResult

__all__ = [
    "Config",
    "ConversionResult",
    "DocumentParseError",
    "Dt2jsError",
    "RecursionLimitError",
    "TypeNotFoundError",
    "convert_type_declaration",
    "dt2js",
    "dt2js_async",
]
