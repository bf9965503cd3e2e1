"""
Loads the declared data types of a RAML 1.0 document.

Only the parts of RAML needed to reach type declarations are handled: the
header line, the YAML body and the `types` (or legacy `schemas`) section, or
the body of a `DataType` fragment.
"""
import re
from typing import Any, Dict, Optional, Union

import structlog
import yaml

from ..exceptions import DocumentParseError
from .types import TypeNode, normalize_type_declaration

logger = structlog.get_logger(__name__)

_HEADER_RE = re.compile(r"^#%RAML\s+1\.0(?:\s+(?P<fragment>[A-Za-z]+))?\s*$")

DATA_TYPE_FRAGMENT = "DataType"


class RamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps YAML timestamps as their source strings."""


def _construct_timestamp_as_str(loader: yaml.SafeLoader, node: yaml.Node) -> str:
    return loader.construct_scalar(node)


RamlLoader.add_constructor("tag:yaml.org,2002:timestamp", _construct_timestamp_as_str)


def _read_header(text: str) -> Optional[str]:
    """Returns the fragment kind ('' for a full API document) or None when the header is missing."""
    first_line = text.lstrip("\ufeff").split("\n", 1)[0].rstrip("\r")
    match = _HEADER_RE.match(first_line)
    if match is None:
        return None
    return match.group("fragment") or ""


def _declared_types(document: Dict[str, Any]) -> Dict[str, Any]:
    declared: Dict[str, Any] = {}
    # `schemas` is the RAML 0.8 spelling still accepted by RAML 1.0; `types` wins on clashes.
    for section_name in ("schemas", "types"):
        section = document.get(section_name)
        if section is None:
            continue
        if not isinstance(section, dict):
            raise DocumentParseError(f"'{section_name}' section must be a mapping")
        for type_name, declaration in section.items():
            declared[str(type_name)] = declaration
    return declared


def load_raml_context(raml_data: Union[str, bytes]) -> Dict[str, TypeNode]:
    """
    Parses RAML text into a mapping of declared type name to normalized type node.

    Raises DocumentParseError when the text is not a RAML 1.0 document.
    """
    if isinstance(raml_data, bytes):
        try:
            raml_data = raml_data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentParseError("RAML data is not valid UTF-8") from e
    if not isinstance(raml_data, str) or not raml_data.strip():
        raise DocumentParseError("RAML data is empty")

    fragment = _read_header(raml_data)
    if fragment is None:
        raise DocumentParseError("Missing '#%RAML 1.0' header")

    try:
        document = yaml.load(raml_data, Loader=RamlLoader)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"YAML error: {e}") from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise DocumentParseError("RAML document root must be a mapping")

    if fragment == DATA_TYPE_FRAGMENT:
        type_name = str(document.get("displayName") or DATA_TYPE_FRAGMENT)
        declared = {type_name: document}
    else:
        declared = _declared_types(document)

    context = {name: normalize_type_declaration(declaration) for name, declaration in declared.items()}
    logger.debug("RAML context loaded.", fragment=fragment or "api", type_count=len(context))
    return context
