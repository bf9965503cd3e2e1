"""
Public conversion entry points: RAML 1.0 data type in, JSON Schema draft-04 out.

`dt2js` is the callback API, `convert_type_declaration` the raising variant
and `dt2js_async` the coroutine wrapper. All three run the same pipeline:
load the RAML context, look up the type, inline declared-type references,
transform, and declare the schema dialect.
"""
import copy
from typing import Any, Callable, Dict, Optional, Union

import structlog

from .exceptions import Dt2jsError, TypeNotFoundError
from .models import ConversionResult
from .raml.loader import load_raml_context
from .raml.types import resolve_type_references
from .schema_gen.transformer import add_root_keywords, schema_form

logger = structlog.get_logger(__name__)

DoneCallback = Callable[[Optional[Dt2jsError], Optional[Dict[str, Any]]], Any]


def convert_type_declaration(raml_data: Union[str, bytes], type_name: str) -> Dict[str, Any]:
    """
    Converts the RAML type `type_name` declared in `raml_data` to a JSON Schema.

    Raises DocumentParseError, TypeNotFoundError or RecursionLimitError.
    """
    log = logger.bind(type_name=type_name)
    context = load_raml_context(raml_data)
    if type_name not in context:
        raise TypeNotFoundError(type_name)

    node = resolve_type_references(copy.deepcopy(context[type_name]), context, [type_name])
    schema = add_root_keywords(schema_form(node, []))
    log.info("RAML type converted to JSON Schema.", declared_types=len(context))
    return schema


def dt2js(raml_data: Union[str, bytes], type_name: str, done: DoneCallback) -> Any:
    """
    Converts a RAML data type and reports through `done(error, schema)`.

    `done` is called exactly once, before this function returns, with either
    an error and None or None and the schema. Its return value is passed through.
    """
    try:
        schema = convert_type_declaration(raml_data, type_name)
    except Dt2jsError as e:
        logger.warning("RAML type conversion failed.", type_name=type_name, error=e.message,
                       error_type=type(e).__name__, reason=getattr(e, "reason", None))
        return done(e, None)
    return done(None, schema)


async def dt2js_async(raml_data: Union[str, bytes], type_name: str) -> ConversionResult:
    """Awaitable form of `dt2js`. The conversion itself runs inline on the event loop."""
    def collect(error: Optional[Dt2jsError], schema: Optional[Dict[str, Any]]) -> ConversionResult:
        return ConversionResult(type_name=type_name, json_schema=schema, error=error)

    return dt2js(raml_data, type_name, collect)
