"""
Custom exceptions for dt2js.
"""
from typing import List, Optional

from .constants import INVALID_RAML_MESSAGE


class Dt2jsError(Exception):
    """Base class for all dt2js errors."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class DocumentParseError(Dt2jsError):
    """Raised when the input text is not a valid RAML 1.0 document.
    The message is fixed; the underlying cause is kept in `reason`."""
    def __init__(self, reason: Optional[str] = None):
        super().__init__(INVALID_RAML_MESSAGE)
        self.reason = reason

class TypeNotFoundError(Dt2jsError):
    """Raised when the requested type is not declared in the document."""
    def __init__(self, type_name: str):
        super().__init__(f"Type '{type_name}' not found in RAML data types")
        self.type_name = type_name

class RecursionLimitError(Dt2jsError):
    """Raised when a declared type refers back to a type that is still being expanded."""
    def __init__(self, type_name: str, trace: List[str]):
        path = " -> ".join([*trace, type_name])
        super().__init__(f"Recursive reference to type '{type_name}' ({path})")
        self.type_name = type_name
        self.trace = list(trace)
