"""Resolve which fields of an entity schema a client may order by."""

import logging

from src.paging.domain.ordering import CREATED_AT, OrderableFieldSet
from src.paging.domain.schema import EntitySchema
from src.paging.errors import SchemaConflictError
from src.paging.utils.identifiers import capitalize

logger = logging.getLogger(__name__)


def resolve(schema: EntitySchema) -> OrderableFieldSet:
    """Compute the orderable field set and its default for a schema.

    The result always starts with the synthetic ``CreatedAt`` entry. Each
    orderable field follows in declaration order under its capitalized
    name; a field that capitalizes to ``CreatedAt`` (case-insensitively)
    is folded into the synthetic entry, default tag included.

    The default is the tagged field when one survived, otherwise the
    first appended field, otherwise ``CreatedAt``.

    Args:
        schema: Entity schema to scan

    Returns:
        OrderableFieldSet with identifiers and the resolved default

    Raises:
        SchemaConflictError: If two fields map to the same identifier, or a
            field name has no usable identifier (e.g. only underscores)
    """
    identifiers = [CREATED_AT]
    sources: dict[str, str] = {}
    default: str | None = None

    for field in schema.orderable_fields:
        identifier = capitalize(field.name)
        if not identifier:
            raise SchemaConflictError(identifier, field.name)

        if identifier.lower() == CREATED_AT.lower():
            continue

        if identifier in sources:
            raise SchemaConflictError(identifier, sources[identifier], field.name)
        sources[identifier] = field.name
        identifiers.append(identifier)

        if field.is_default_order and default is None:
            default = identifier

    if default is None:
        default = identifiers[1] if len(identifiers) > 1 else CREATED_AT

    logger.debug(
        "Resolved orderable fields for %s: %s (default %s)",
        schema.name,
        ", ".join(identifiers),
        default,
    )
    return OrderableFieldSet(fields=tuple(identifiers), default=default)
