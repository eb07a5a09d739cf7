"""Base models for generated pagination requests and responses."""

import math
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from src.paging.domain.ordering import SortDirection
from src.paging.errors import (
    MalformedParameterError,
    PaginationRequestError,
    UnknownOrderFieldError,
)

T = TypeVar("T")

# Raw attribute name -> query parameter name
QUERY_ALIASES = {
    "requested_page": "page",
    "requested_limit": "limit",
    "requested_search": "search",
    "requested_sort": "sort",
    "requested_order": "order",
}

_PARAMETER_MESSAGES = {
    "page": "must be a positive integer",
    "limit": "must be a non-negative integer",
    "sort": "must be one of: asc, desc",
    "search": "must be a string",
}


class PaginationRequest(BaseModel):
    """Page request decoded from query parameters.

    Generated subclasses (one per entity) narrow ``requested_order`` to
    the entity's order enum and carry the defaults as class variables.
    Raw inputs stay optional; the accessor methods apply defaults and
    bounds so the query layer never sees a missing value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    default_page: ClassVar[int] = 1
    default_limit: ClassVar[int] = 10
    max_limit: ClassVar[int] = 1000
    order_enum: ClassVar[type[Enum] | None] = None
    default_order: ClassVar[Enum | None] = None

    requested_page: int | None = Field(
        default=None,
        alias="page",
        ge=1,
        examples=[1],
        description="Page number, starting at 1",
    )
    requested_limit: int | None = Field(
        default=None,
        alias="limit",
        ge=0,
        examples=[10],
        description="Items per page, capped at the configured maximum",
    )
    requested_search: str | None = Field(
        default=None,
        alias="search",
        description="Free-text search term passed to the query layer",
    )
    requested_sort: SortDirection | None = Field(
        default=None,
        alias="sort",
        description="Sort direction",
    )
    requested_order: Any = Field(
        default=None,
        alias="order",
        description="Field to order by",
    )

    def page(self) -> int:
        if self.requested_page is None:
            return self.default_page
        return self.requested_page

    def limit(self) -> int:
        limit = self.default_limit if self.requested_limit is None else self.requested_limit
        return min(limit, self.max_limit)

    def offset(self) -> int:
        """Number of rows to skip: ``(page - 1) * limit``."""
        return (self.page() - 1) * self.limit()

    def search(self) -> str | None:
        return self.requested_search

    def sort_direction(self) -> SortDirection:
        if self.requested_sort is None:
            return SortDirection.Desc
        return self.requested_sort

    def order_field(self) -> Enum | None:
        """Requested order member, or the entity's default member."""
        if self.requested_order is None:
            return self.default_order
        return self.requested_order

    @classmethod
    def allowed_orders(cls) -> list[str]:
        """Wire values accepted by the ``order`` parameter."""
        if cls.order_enum is None:
            return []
        return [member.value for member in cls.order_enum]

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> "PaginationRequest":
        """Decode a mapping of query parameters into a request.

        Only the query names (``page``, ``limit``, ``search``, ``sort``,
        ``order``) are read; every other key, including the ``requested_*``
        attribute names, is ignored.

        Args:
            params: Query parameter names mapped to their (string) values

        Returns:
            Validated request instance

        Raises:
            UnknownOrderFieldError: If ``order`` is not an orderable field
            MalformedParameterError: If ``page``, ``limit``, ``sort`` or
                ``search`` cannot be decoded (``page=0`` included)
        """
        wire_names = QUERY_ALIASES.values()
        query = {key: value for key, value in params.items() if key in wire_names}
        try:
            return cls.model_validate(query)
        except ValidationError as e:
            raise cls._translate_errors(e) from e

    @classmethod
    def _translate_errors(cls, exc: ValidationError) -> PaginationRequestError:
        """Group pydantic errors by query parameter."""
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = str(error["loc"][0]) if error["loc"] else "query"
            parameter = QUERY_ALIASES.get(loc, loc)
            if parameter == "order":
                allowed = ", ".join(cls.allowed_orders())
                message = f"unknown order field '{error.get('input')}', expected one of: {allowed}"
            else:
                message = _PARAMETER_MESSAGES.get(parameter, error["msg"])
            errors.setdefault(parameter, []).append(message)

        if "order" in errors:
            return UnknownOrderFieldError(errors, allowed=cls.allowed_orders())
        return MalformedParameterError(errors)


class PaginationResponse(BaseModel, Generic[T]):
    """Envelope wrapping one page of entities with paging metadata.

    ``pages`` is supplied by the caller; the plain constructor does not
    cross-check ``total``, ``page``, ``pages`` and ``len(data)``.
    ``from_page`` derives ``page`` and ``pages`` from the request instead.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(ge=0, examples=[451], description="Total matching items")
    page: int = Field(ge=0, examples=[1], description="Current page number")
    pages: int = Field(ge=0, examples=[10], description="Total number of pages")
    data: list[T] = Field(description="Entities on this page")

    @classmethod
    def from_page(
        cls,
        data: Sequence[T],
        total: int,
        request: PaginationRequest,
    ) -> "PaginationResponse[T]":
        """Build an envelope for ``data`` using the request's page and limit.

        ``pages`` is ``ceil(total / limit)``, or 0 when the limit is 0.
        """
        limit = request.limit()
        pages = math.ceil(total / limit) if limit > 0 else 0
        return cls(total=total, page=request.page(), pages=pages, data=list(data))
