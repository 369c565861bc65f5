"""
Typed filter-predicate builder.

Each entity declares a FilterSpec: a closed allow-list of the request
parameters that may participate in filtering. Anything not on the list is
ignored. The builder is a pure function of (spec, params, tenant_id).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy import and_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from legacore.core.exceptions import ValidationException, validate_enum


@dataclass(frozen=True)
class ExactField:
    """Equality filter on column, optionally restricted to an enum or int"""

    column: str
    enum: type[Enum] | None = None
    as_int: bool = False
    as_bool: bool = False


@dataclass(frozen=True)
class FilterSpec:
    model: type
    tenant_column: str | None = "tenant_id"
    search_fields: tuple[str, ...] = ()
    exact_fields: Mapping[str, ExactField] = field(default_factory=dict)
    min_fields: Mapping[str, str] = field(default_factory=dict)
    ordering: tuple[tuple[str, str], ...] = (("created_at", "desc"),)


def _column(spec: FilterSpec, name: str):
    return getattr(spec.model, name)


def _exact_value(param: str, raw: str, exact: ExactField):
    if exact.enum is not None:
        return validate_enum(raw, exact.enum, param)
    if exact.as_int:
        try:
            return int(raw)
        except ValueError:
            raise ValidationException(f"Invalid {param}. Must be an integer")
    if exact.as_bool:
        lowered = raw.lower()
        if lowered in ("true", "1", "yes"):
            return True
        if lowered in ("false", "0", "no"):
            return False
        raise ValidationException(f"Invalid {param}. Must be true or false")
    return raw


def build_filter(
    spec: FilterSpec, params: Mapping[str, str], tenant_id: int | None
) -> ColumnElement[bool]:
    """
    Compose the WHERE predicate for a list query.

    Args:
        spec: Allow-list for the entity
        params: Raw query parameters (unknown keys are ignored)
        tenant_id: Tenant to scope to; required unless the FilterSpec is global

    Returns:
        SQLAlchemy boolean clause (AND of all active conditions)

    Raises:
        ValidationException: If an allow-listed value is malformed
    """
    conditions: list[ColumnElement[bool]] = []

    if spec.tenant_column is not None:
        if tenant_id is None:
            raise ValueError(f"{spec.model.__name__} queries must be scoped to a tenant")
        conditions.append(_column(spec, spec.tenant_column) == tenant_id)

    search = (params.get("search") or "").strip()
    if search and spec.search_fields:
        # Literal substring match: % and _ in the term are escaped
        conditions.append(
            or_(
                *[
                    _column(spec, name).icontains(search, autoescape=True)
                    for name in spec.search_fields
                ]
            )
        )

    for param, exact in spec.exact_fields.items():
        raw = (params.get(param) or "").strip()
        if raw:
            conditions.append(_column(spec, exact.column) == _exact_value(param, raw, exact))

    for param, column in spec.min_fields.items():
        raw = (params.get(param) or "").strip()
        if not raw:
            continue
        try:
            threshold = float(raw)
        except ValueError:
            raise ValidationException(f"Invalid {param}. Must be a number")
        conditions.append(_column(spec, column) >= threshold)

    if not conditions:
        return true()
    return and_(*conditions)


def build_ordering(spec: FilterSpec) -> list:
    """ORDER BY clauses for the spec, with id desc as the final tiebreak"""
    clauses = []
    for name, direction in spec.ordering:
        column = _column(spec, name)
        clauses.append(column.desc() if direction == "desc" else column.asc())
    clauses.append(_column(spec, "id").desc())
    return clauses
