"""
Pagination types for list queries.

Example:
    pagination = validate_pagination_params(page, limit)
    items, total = job_repository.find_all_open_paginated(pagination)
    result = PaginatedResult(items=items, total=total, pagination=pagination)
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Maximum allowed page size
MAX_LIMIT = 100
# Largest page whose offset still fits a signed 64-bit SQL integer
MAX_PAGE = (2**63 - 1) // MAX_LIMIT


@dataclass(frozen=True)
class Pagination:
    """
    Pagination parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        limit: Number of items per page
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page > MAX_PAGE:
            raise ValueError(f"Page cannot exceed {MAX_PAGE}")
        if self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.limit > MAX_LIMIT:
            raise ValueError(f"Limit cannot exceed {MAX_LIMIT}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.limit


def _sanitize(value: float | None, default: int) -> int:
    if value is None or not math.isfinite(value):
        return default
    value = math.floor(value)
    return value if value > 0 else default


def validate_pagination_params(
    page: float | None = None, limit: float | None = None
) -> Pagination:
    """
    Turn raw page/limit input into valid Pagination. Never fails.

    Missing, non-positive or non-finite values fall back to the defaults,
    fractions are floored, the page is capped at MAX_PAGE and the limit is
    capped at MAX_LIMIT.

    Example:
        validate_pagination_params(0, 500) == Pagination(page=1, limit=100)
    """
    return Pagination(
        page=min(_sanitize(page, DEFAULT_PAGE), MAX_PAGE),
        limit=min(_sanitize(limit, DEFAULT_LIMIT), MAX_LIMIT),
    )


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    Paginated result containing items and metadata.

    Attributes:
        items: List of items for the current page
        total: Total number of items across all pages
        pagination: The pagination parameters used
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        """Current page number."""
        return self.pagination.page

    @property
    def limit(self) -> int:
        """Number of items per page."""
        return self.pagination.limit

    @property
    def total_pages(self) -> int:
        """Total number of pages."""
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.pagination.limit)

    @property
    def has_next(self) -> bool:
        """Check if there is a next page."""
        return self.pagination.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Check if there is a previous page."""
        return self.pagination.page > 1
