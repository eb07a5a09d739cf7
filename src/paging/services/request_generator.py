"""Generate per-entity pagination request models from an orderable field set."""

import logging
from enum import Enum

from pydantic import Field, create_model

from src.paging.config import Settings, get_settings
from src.paging.domain.ordering import OrderableFieldSet
from src.paging.domain.pagination import PaginationRequest
from src.paging.utils.identifiers import camelize

logger = logging.getLogger(__name__)


def build_order_enum(entity_name: str, field_set: OrderableFieldSet) -> type[Enum]:
    """Create the ``{Entity}PaginationOrder`` enum.

    Member names are the capitalized identifiers, values are their
    camel-case wire forms (``PublishedAt = "publishedAt"``).
    """
    return Enum(
        f"{entity_name}PaginationOrder",
        [(identifier, camelize(identifier)) for identifier in field_set.fields],
        type=str,
    )


def build_request_model(
    entity_name: str,
    field_set: OrderableFieldSet,
    settings: Settings | None = None,
    order_enum: type[Enum] | None = None,
) -> type[PaginationRequest]:
    """Create the ``{Entity}PaginationRequest`` model for an entity.

    The generated model narrows the ``order`` parameter to the entity's
    order enum and fixes the page/limit defaults from settings at build
    time, so later settings changes do not affect existing models.

    Args:
        entity_name: Entity name used as the type name prefix
        field_set: Resolved orderable fields and default
        settings: Defaults source, falls back to the cached settings
        order_enum: Pre-built order enum (built from field_set if omitted)

    Returns:
        A PaginationRequest subclass
    """
    settings = settings or get_settings()
    if order_enum is None:
        order_enum = build_order_enum(entity_name, field_set)

    model = create_model(
        f"{entity_name}PaginationRequest",
        __base__=PaginationRequest,
        __module__=__name__,
        requested_order=(
            order_enum | None,
            Field(
                default=None,
                alias="order",
                description=f"Field to order by (default: {camelize(field_set.default)})",
            ),
        ),
    )
    model.default_page = settings.default_page
    model.default_limit = settings.default_limit
    model.max_limit = settings.max_limit
    model.order_enum = order_enum
    model.default_order = order_enum[field_set.default]

    logger.debug(
        "Built %s (orders: %s)",
        model.__name__,
        ", ".join(member.value for member in order_enum),
    )
    return model
