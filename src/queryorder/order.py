"""
Ordering directives for list endpoints.

A service declares, per entity type, which fields callers may order by and
how each public name maps to a storage identifier. A caller then supplies a
directive of the form ``"field[,DIRECTION]"`` which is validated against that
whitelist and rendered into an ordering fragment for the query layer.

Examples
--------
>>> USER_ORDERING = FieldSet(
...     Field("name", "user_name"),
...     Field("created", "date_created"),
... )
>>> USER_DEFAULT_ORDER = OrderBy(USER_ORDERING.lookup("name"), ASC)
>>> parse("created,DESC", USER_ORDERING, USER_DEFAULT_ORDER).render()
'date_created DESC'
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from sqlalchemy import text

from queryorder.exceptions import (
    FieldConfigurationError,
    InvalidDirectionError,
    MalformedOrderDirective,
    UnknownFieldError,
)

if TYPE_CHECKING:
    from sqlalchemy import Select, TextClause

logger = logging.getLogger(__name__)

# Reasons carried by MalformedOrderDirective
REASON_PARSING_FIELDS = "parsing fields"
REASON_PARSING_DIRECTION = "parsing direction"
REASON_UNKNOWN_ORDER_FIELD = "unknown order field"

# Plain or dotted SQL identifier, e.g. "user_name" or "users.user_name"
_STORAGE_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*")


# =============================================================================
# Direction
# =============================================================================


class Direction(str, Enum):
    """Sort direction.

    The member value is the canonical token used both when parsing a
    directive and when rendering an ordering fragment.
    """

    ASC = "ASC"
    DESC = "DESC"

    @property
    def token(self) -> str:
        """Canonical external representation."""
        return self.value

    def __str__(self) -> str:
        return self.value


ASC = Direction.ASC
DESC = Direction.DESC

_DIRECTIONS: Mapping[str, Direction] = MappingProxyType(
    {direction.value: direction for direction in Direction}
)


def parse_direction(token: str) -> Direction:
    """Convert a token to a Direction.

    Matching is exact and case-sensitive; the caller strips whitespace.

    Raises
    ------
    InvalidDirectionError
        If ``token`` is not a canonical direction token.
    """
    direction = _DIRECTIONS.get(token)
    if direction is None:
        raise InvalidDirectionError(token)
    return direction


# =============================================================================
# Field / FieldSet
# =============================================================================


@dataclass(frozen=True)
class Field:
    """
    A sortable attribute of an entity.

    Attributes
    ----------
    name : str
        Public name callers use in a directive.
    storage : str
        Storage identifier rendered into the ordering fragment. Only trusted
        code sets it; it is never taken from caller input.

    Raises
    ------
    FieldConfigurationError
        At construction time, if either name is unusable.
    """

    name: str
    storage: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise FieldConfigurationError("public name must be a non-empty string")
        if self.name != self.name.strip() or "," in self.name:
            raise FieldConfigurationError(
                "public name must not contain commas or surrounding whitespace",
                field_name=self.name,
            )
        if not isinstance(self.storage, str) or not _STORAGE_IDENTIFIER.fullmatch(
            self.storage
        ):
            raise FieldConfigurationError(
                f"storage identifier {self.storage!r} is not a plain SQL identifier",
                field_name=self.name,
            )

    def with_storage(self, storage: str) -> Field:
        """Return a copy of this field bound to another storage identifier."""
        return dataclasses.replace(self, storage=storage)


class FieldSet(Mapping[str, Field]):
    """
    Immutable whitelist of sortable fields for one entity type.

    Built once from a fixed list of fields and keyed by public name. Duplicate
    public names are rejected so that a declaration can never silently
    shadow an earlier field.

    Parameters
    ----------
    *fields : Field
        The sortable fields, in declaration order.

    Raises
    ------
    FieldConfigurationError
        If an entry is not a Field or a public name appears more than once.
    """

    __slots__ = ("_fields",)

    def __init__(self, *fields: Field) -> None:
        by_name: dict[str, Field] = {}
        duplicates: list[str] = []
        for field in fields:
            if not isinstance(field, Field):
                raise FieldConfigurationError(
                    f"expected Field, got {type(field).__name__}"
                )
            if field.name in by_name and field.name not in duplicates:
                duplicates.append(field.name)
            by_name[field.name] = field

        if duplicates:
            raise FieldConfigurationError(
                f"duplicate public names: {', '.join(duplicates)}"
            )

        self._fields: Mapping[str, Field] = MappingProxyType(by_name)
        logger.debug("Registered ordering fields: %s", ", ".join(by_name))

    @classmethod
    def build(cls, *fields: Field) -> FieldSet:
        """Build a FieldSet from the given fields."""
        return cls(*fields)

    @property
    def names(self) -> tuple[str, ...]:
        """Public names in declaration order."""
        return tuple(self._fields)

    def lookup(self, name: str) -> Field:
        """Return the field registered under ``name``.

        Raises
        ------
        UnknownFieldError
            If ``name`` is not part of this set.
        """
        field = self._fields.get(name)
        if field is None:
            raise UnknownFieldError(name)
        return field

    def __getitem__(self, name: str) -> Field:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSet({', '.join(repr(f) for f in self._fields.values())})"


# =============================================================================
# OrderBy
# =============================================================================


@dataclass(frozen=True)
class OrderBy:
    """A validated field and direction to order by.

    Built by :func:`parse` or directly by trusted code for defaults.
    """

    field: Field
    direction: Direction = Direction.ASC

    def render(self) -> str:
        """Render as ``"<storage> <DIRECTION>"`` for the query layer."""
        return f"{self.field.storage} {self.direction.token}"

    def clause(self) -> str:
        """Alias of :meth:`render`."""
        return self.render()

    def to_sqlalchemy(self) -> TextClause:
        """Return the rendered fragment as a SQLAlchemy text clause.

        The fragment only ever contains a declared storage identifier and a
        canonical direction token.
        """
        return text(self.render())

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Add this ordering to a SQLAlchemy ``select()`` statement."""
        return statement.order_by(self.to_sqlalchemy())

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# Parser
# =============================================================================


def parse(
    raw: str | None,
    fields: FieldSet,
    default: OrderBy,
    *,
    param: str = "orderBy",
) -> OrderBy:
    """
    Parse a ``"field[,DIRECTION]"`` directive against a whitelist.

    Parameters
    ----------
    raw : str | None
        The directive as received from the caller. Empty or missing selects
        ``default``.
    fields : FieldSet
        The fields callers may order by.
    default : OrderBy
        Returned unchanged when no directive was supplied.
    param : str, optional
        Name of the request parameter, reported in errors (default: "orderBy").

    Returns
    -------
    OrderBy
        The validated ordering. A directive without a direction orders
        ascending.

    Raises
    ------
    MalformedOrderDirective
        With reason "parsing fields" for an unknown field, "parsing
        direction" for an unknown direction, or "unknown order field" when
        the directive has more than two comma-separated parts.
    """
    if not raw:
        return default

    parts = [part.strip() for part in raw.split(",")]
    if len(parts) > 2:
        raise MalformedOrderDirective(raw, REASON_UNKNOWN_ORDER_FIELD, field=param)

    try:
        field = fields.lookup(parts[0])
    except UnknownFieldError as e:
        raise MalformedOrderDirective(raw, REASON_PARSING_FIELDS, field=param) from e

    if len(parts) == 1:
        return OrderBy(field, Direction.ASC)

    try:
        direction = parse_direction(parts[1])
    except InvalidDirectionError as e:
        raise MalformedOrderDirective(
            raw, REASON_PARSING_DIRECTION, field=param
        ) from e

    return OrderBy(field, direction)
