# Domain models package (Pydantic models)

from src.paging.domain.article import Article
from src.paging.domain.ordering import CREATED_AT, OrderableFieldSet, SortDirection
from src.paging.domain.pagination import PaginationRequest, PaginationResponse
from src.paging.domain.schema import (
    EntitySchema,
    FieldDescriptor,
    default_order,
    orderable,
    schema_from_model,
)

__all__ = [
    "Article",
    "CREATED_AT",
    "EntitySchema",
    "FieldDescriptor",
    "OrderableFieldSet",
    "PaginationRequest",
    "PaginationResponse",
    "SortDirection",
    "default_order",
    "orderable",
    "schema_from_model",
]
