"""
Fixed literals shared by the converters and the entry point.

The date/time patterns are consumed verbatim by existing schema consumers;
they must not be re-derived or reformatted.
"""

DRAFT04_SCHEMA_URI = "http://json-schema.org/draft-04/schema#"

# date-only, e.g. 2015-05-23
DATE_ONLY_PATTERN = r"^(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$"

# time-only, e.g. 12:30:00 or 12:30:00.123
TIME_ONLY_PATTERN = r"^(0[0-9]|1[0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])(\.\d+)?$"

# datetime-only, e.g. 2015-07-04T21:00:00
DATETIME_ONLY_PATTERN = (
    r"^(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])"
    r"T(0[0-9]|1[0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])(\.\d+)?$"
)

# datetime in RFC3339 form, e.g. 2016-02-28T16:41:41.090Z
RFC3339_DATETIME_PATTERN = (
    r"^(\d{4})-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])"
    r"T(0[0-9]|1[0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])(\.\d+)?"
    r"(Z|([+-])(0[0-9]|1[0-9]|2[0-3]):([0-5][0-9]))$"
)

# datetime in RFC2616 form, e.g. Sun, 28 Feb 2016 16:41:41 GMT
RFC2616_DATETIME_PATTERN = (
    r"^(?:(Sun|Mon|Tue|Wed|Thu|Fri|Sat),\s\d{2}\s"
    r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s\d{4}\s\d{2}:\d{2}:\d{2}\sGMT"
    r"|(Sunday|Monday|Tuesday|Wednesday|Thursday|Friday|Saturday),\s\d{2}-"
    r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)-\d{2}\s\d{2}:\d{2}:\d{2}\sGMT"
    r"|(Sun|Mon|Tue|Wed|Thu|Fri|Sat)\s"
    r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s(?:\d{2}|\s\d)\s\d{2}:\d{2}:\d{2}\s\d{4})$"
)

INVALID_RAML_MESSAGE = "Invalid RAML data"

# RAML 1.0 built-in type names; anything else in a `type` facet refers to a user type.
BUILTIN_TYPES = frozenset({
    "any",
    "object",
    "array",
    "union",
    "string",
    "number",
    "integer",
    "boolean",
    "date-only",
    "time-only",
    "datetime-only",
    "datetime",
    "file",
    "nil",
})
