# Services package (schema resolution and type generation)

from src.paging.services.orderable_resolver import resolve
from src.paging.services.registry import (
    PaginationContract,
    SchemaRegistry,
    get_registry,
)
from src.paging.services.request_generator import (
    build_order_enum,
    build_request_model,
)
from src.paging.services.response_generator import build_response_model, respond

__all__ = [
    # Resolver
    "resolve",
    # Registry
    "PaginationContract",
    "SchemaRegistry",
    "get_registry",
    # Request generator
    "build_order_enum",
    "build_request_model",
    # Response generator
    "build_response_model",
    "respond",
]
