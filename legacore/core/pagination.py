"""Pagination parameters and the paginated response envelope."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

T = TypeVar("T")


def int_param(params: Mapping[str, str], name: str, default: int) -> int:
    """
    Read an integer query parameter, falling back to default when absent or malformed.

    Only whole-number text counts: "5.7" is malformed and yields the
    default rather than being truncated to 5.
    """
    raw = params.get(name)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class PageRequest:
    """Effective page/limit after clamping. Limit is always within [1, MAX_LIMIT]."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def paginate(params: Mapping[str, str]) -> PageRequest:
    """
    Derive pagination from raw query parameters.

    page = max(1, page), limit = clamp(limit, 1, 100). Never rejects input.
    """
    page = max(1, int_param(params, "page", DEFAULT_PAGE))
    limit = min(MAX_LIMIT, max(1, int_param(params, "limit", DEFAULT_LIMIT)))
    return PageRequest(page=page, limit=limit)


def page_count(total: int, limit: int) -> int:
    """ceil(total / limit); zero only when total is zero"""
    if total <= 0:
        return 0
    return (total + limit - 1) // limit


class PaginationMeta(BaseModel):
    total: int
    page: int
    limit: int
    pages: int


class Paginated(BaseModel, Generic[T]):
    """Standard list envelope: {data: [...], pagination: {...}}"""

    data: list[T]
    pagination: PaginationMeta

    @classmethod
    def create(cls, items: list, total: int, page_request: PageRequest, **extra) -> "Paginated":
        """Wrap a result page; extra carries fields declared by subclasses"""
        return cls(
            data=items,
            pagination=PaginationMeta(
                total=total,
                page=page_request.page,
                limit=page_request.limit,
                pages=page_count(total, page_request.limit),
            ),
            **extra,
        )
