"""
Pydantic models for dt2js results.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import Dt2jsError


class ConversionResult(BaseModel):
    """Outcome of one conversion: exactly one of `json_schema` or `error` is set."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    type_name: str
    json_schema: Optional[Dict[str, Any]] = Field(default=None, alias="schema")
    error: Optional[Dt2jsError] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "ConversionResult":
        if (self.json_schema is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of schema or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None
