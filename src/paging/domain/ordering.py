"""Ordering models shared by the request generator and the query layer."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Synthetic entry present in every orderable field set
CREATED_AT = "CreatedAt"


class SortDirection(str, Enum):
    """Sort direction accepted in the ``sort`` query parameter."""

    Asc = "asc"
    Desc = "desc"


class OrderableFieldSet(BaseModel):
    """Resolved orderable identifiers for one entity.

    ``fields`` always starts with ``CreatedAt`` and never repeats an entry.
    ``default`` is one of ``fields``.
    """

    model_config = ConfigDict(frozen=True)

    fields: tuple[str, ...] = Field(
        default=(CREATED_AT,),
        description="Capitalized identifiers clients may order by",
    )
    default: str = Field(
        default=CREATED_AT,
        description="Identifier used when the client requests no order",
    )

    @model_validator(mode="after")
    def validate_entries(self) -> "OrderableFieldSet":
        if not self.fields or self.fields[0] != CREATED_AT:
            raise ValueError(f"Orderable fields must start with '{CREATED_AT}'")
        if len(set(self.fields)) != len(self.fields):
            raise ValueError("Orderable fields must be unique")
        if self.default not in self.fields:
            raise ValueError(f"Default order '{self.default}' is not an orderable field")
        return self

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.fields
