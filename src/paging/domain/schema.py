"""Pydantic models describing the entities that can be paginated."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Key used in a pydantic field's ``json_schema_extra`` to mark it orderable
ORDER_MARKER = "order"
DEFAULT_ORDER = "default"


class FieldDescriptor(BaseModel):
    """Single field of an entity schema.

    A field marked as the default order is always orderable as well.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Field name in snake_case (e.g., 'published_at')")
    orderable: bool = Field(
        default=False,
        description="Whether clients may sort by this field",
    )
    is_default_order: bool = Field(
        default=False,
        description="Whether this field is used when no order is requested",
    )

    @model_validator(mode="before")
    @classmethod
    def default_implies_orderable(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("is_default_order"):
            return {**data, "orderable": True}
        return data


class EntitySchema(BaseModel):
    """Ordered field listing for one entity type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Entity name (e.g., 'Article')")
    fields: tuple[FieldDescriptor, ...] = Field(
        default=(),
        description="Fields in declaration order",
    )

    @model_validator(mode="after")
    def validate_fields(self) -> "EntitySchema":
        """Reject duplicate names and more than one default-order field."""
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name '{field.name}'")
            seen.add(field.name)

        defaults = [f.name for f in self.fields if f.is_default_order]
        if len(defaults) > 1:
            raise ValueError(
                f"At most one default order field is allowed, got {', '.join(defaults)}"
            )
        return self

    @property
    def orderable_fields(self) -> list[FieldDescriptor]:
        """Fields clients may sort by, in declaration order."""
        return [f for f in self.fields if f.orderable]


def orderable() -> dict[str, Any]:
    """Field keyword arguments marking a model field as orderable.

    Usage:
        title: str = Field(**orderable())
    """
    return {"json_schema_extra": {ORDER_MARKER: True}}


def default_order() -> dict[str, Any]:
    """Field keyword arguments marking a model field as the default order."""
    return {"json_schema_extra": {ORDER_MARKER: DEFAULT_ORDER}}


def schema_from_model(model: type[BaseModel], name: str | None = None) -> EntitySchema:
    """Build an EntitySchema from a pydantic model's field markers.

    Fields declared with ``orderable()`` or ``default_order()`` (or any
    ``json_schema_extra`` dict carrying the ``order`` key) become orderable.

    Args:
        model: Pydantic model describing the entity
        name: Entity name, defaults to the model's class name

    Returns:
        EntitySchema with one descriptor per model field
    """
    descriptors = []
    for field_name, info in model.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        marker = extra.get(ORDER_MARKER)
        descriptors.append(
            FieldDescriptor(
                name=field_name,
                orderable=bool(marker),
                is_default_order=marker == DEFAULT_ORDER,
            )
        )
    return EntitySchema(name=name or model.__name__, fields=tuple(descriptors))
