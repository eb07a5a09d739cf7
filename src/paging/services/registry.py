"""Registry of pagination contracts, one per entity type.

Schemas are resolved once at registration time. The cached contract is
immutable and shared read-only by every request handler.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from pydantic import BaseModel

from src.paging.config import Settings, get_settings
from src.paging.domain.ordering import CREATED_AT, OrderableFieldSet
from src.paging.domain.pagination import PaginationRequest, PaginationResponse
from src.paging.domain.schema import EntitySchema, schema_from_model
from src.paging.errors import SchemaNotRegisteredError, SchemaRegistrationError
from src.paging.services.orderable_resolver import resolve
from src.paging.services.request_generator import build_order_enum, build_request_model
from src.paging.services.response_generator import build_response_model
from src.paging.utils.identifiers import capitalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaginationContract:
    """Generated pagination types for one entity."""

    entity_name: str
    schema: EntitySchema
    field_set: OrderableFieldSet
    order_enum: type[Enum]
    request_model: type[PaginationRequest]
    response_model: type[PaginationResponse] | None = None

    def column_for(self, order: Enum) -> str:
        """Map an order member back to the schema field it came from.

        ``CreatedAt`` maps to ``created_at`` whether or not the schema
        declares that field.
        """
        for field in self.schema.orderable_fields:
            if capitalize(field.name) == order.name:
                return field.name
        if order.name == CREATED_AT:
            return "created_at"
        raise KeyError(f"'{order.name}' is not an order field of {self.entity_name}")


class SchemaRegistry:
    """Resolves entity schemas and caches their pagination contracts."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize an empty registry.

        Args:
            settings: Defaults baked into generated request models
        """
        self._settings = settings
        self._contracts: dict[str, PaginationContract] = {}
        self._lock = threading.Lock()

    def register(
        self,
        schema: EntitySchema,
        entity_model: type[BaseModel] | None = None,
    ) -> PaginationContract:
        """Resolve a schema and cache the generated types under its name.

        Args:
            schema: Entity schema to register
            entity_model: Entity type wrapped by the response envelope

        Returns:
            The new PaginationContract

        Raises:
            SchemaConflictError: If two fields map to the same identifier
            SchemaRegistrationError: If the entity name is already registered
        """
        with self._lock:
            if schema.name in self._contracts:
                raise SchemaRegistrationError(
                    f"Entity '{schema.name}' is already registered"
                )

            field_set = resolve(schema)
            order_enum = build_order_enum(schema.name, field_set)
            contract = PaginationContract(
                entity_name=schema.name,
                schema=schema,
                field_set=field_set,
                order_enum=order_enum,
                request_model=build_request_model(
                    schema.name,
                    field_set,
                    settings=self._settings or get_settings(),
                    order_enum=order_enum,
                ),
                response_model=(
                    build_response_model(entity_model) if entity_model is not None else None
                ),
            )
            self._contracts[schema.name] = contract

        logger.info(
            "Registered pagination contract for %s (%d orderable fields, default %s)",
            schema.name,
            len(field_set.fields),
            field_set.default,
        )
        return contract

    def register_model(
        self, model: type[BaseModel], name: str | None = None
    ) -> PaginationContract:
        """Derive a schema from a pydantic model's order markers and register it."""
        return self.register(schema_from_model(model, name=name), entity_model=model)

    def get(self, entity_name: str) -> PaginationContract:
        """Look up a registered contract.

        Raises:
            SchemaNotRegisteredError: If the entity was never registered
        """
        contract = self._contracts.get(entity_name)
        if contract is None:
            raise SchemaNotRegisteredError(
                f"No pagination contract registered for '{entity_name}'"
            )
        return contract

    def __contains__(self, entity_name: object) -> bool:
        return entity_name in self._contracts

    def __len__(self) -> int:
        return len(self._contracts)


@lru_cache
def get_registry() -> SchemaRegistry:
    """Get the process-wide schema registry."""
    return SchemaRegistry()
