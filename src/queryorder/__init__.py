"""
queryorder - Whitelisted ordering directives for list APIs.

Turns a caller-supplied ``orderBy`` value such as ``"name,DESC"`` into a
validated ordering instruction and renders it into a fragment for the query
layer. Only storage identifiers declared by trusted code are ever rendered.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "queryorder"
__license__ = "AGPL-3.0-or-later"

from queryorder.exceptions import (
    FieldConfigurationError,
    InvalidDirectionError,
    MalformedOrderDirective,
    QueryOrderError,
    UnknownFieldError,
)
from queryorder.order import (
    ASC,
    DESC,
    Direction,
    Field,
    FieldSet,
    OrderBy,
    parse,
    parse_direction,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "ASC",
    "DESC",
    "Direction",
    "Field",
    "FieldConfigurationError",
    "FieldSet",
    "InvalidDirectionError",
    "MalformedOrderDirective",
    "OrderBy",
    "QueryOrderError",
    "UnknownFieldError",
    "parse",
    "parse_direction",
]
