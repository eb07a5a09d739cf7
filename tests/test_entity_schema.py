"""Tests for entity schema models and model-derived schemas."""

import pytest
from pydantic import BaseModel, Field, ValidationError

from src.paging.domain.article import Article
from src.paging.domain.schema import (
    EntitySchema,
    FieldDescriptor,
    default_order,
    orderable,
    schema_from_model,
)


class TestFieldDescriptor:
    """Tests for the FieldDescriptor model."""

    def test_defaults(self) -> None:
        field = FieldDescriptor(name="title")
        assert field.orderable is False
        assert field.is_default_order is False

    def test_default_order_implies_orderable(self) -> None:
        field = FieldDescriptor(name="published_at", is_default_order=True)
        assert field.orderable is True

    def test_is_frozen(self) -> None:
        field = FieldDescriptor(name="title")
        with pytest.raises(ValidationError):
            field.orderable = True


class TestEntitySchema:
    """Tests for EntitySchema validation."""

    def test_orderable_fields_keep_declaration_order(self) -> None:
        schema = EntitySchema(
            name="Post",
            fields=(
                FieldDescriptor(name="body"),
                FieldDescriptor(name="title", orderable=True),
                FieldDescriptor(name="rating", orderable=True),
            ),
        )
        assert [f.name for f in schema.orderable_fields] == ["title", "rating"]

    def test_rejects_two_default_fields(self) -> None:
        with pytest.raises(ValidationError, match="At most one default order field"):
            EntitySchema(
                name="Post",
                fields=(
                    FieldDescriptor(name="title", is_default_order=True),
                    FieldDescriptor(name="rating", is_default_order=True),
                ),
            )

    def test_rejects_duplicate_names(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate field name"):
            EntitySchema(
                name="Post",
                fields=(FieldDescriptor(name="title"), FieldDescriptor(name="title")),
            )

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            EntitySchema(name="")

    def test_schema_without_fields(self) -> None:
        schema = EntitySchema(name="Empty")
        assert schema.fields == ()
        assert schema.orderable_fields == []


class TestSchemaFromModel:
    """Tests for deriving schemas from pydantic field markers."""

    def test_article_markers(self) -> None:
        schema = schema_from_model(Article)

        assert schema.name == "Article"
        by_name = {f.name: f for f in schema.fields}
        assert by_name["title"].orderable is True
        assert by_name["title"].is_default_order is False
        assert by_name["published_at"].orderable is True
        assert by_name["published_at"].is_default_order is True
        assert by_name["author"].orderable is False
        assert by_name["created_at"].orderable is False

    def test_preserves_field_order(self) -> None:
        schema = schema_from_model(Article)
        assert [f.name for f in schema.fields] == list(Article.model_fields)

    def test_name_override(self) -> None:
        schema = schema_from_model(Article, name="Story")
        assert schema.name == "Story"

    def test_unmarked_model(self) -> None:
        class Tag(BaseModel):
            label: str

        schema = schema_from_model(Tag)
        assert schema.orderable_fields == []

    def test_raw_json_schema_extra_marker(self) -> None:
        """A hand-written ``order`` key works like the helper functions."""

        class Event(BaseModel):
            starts_at: str = Field(json_schema_extra={"order": "default"})
            venue: str = Field(json_schema_extra={"order": True, "example": "Hall"})
            notes: str = Field(json_schema_extra={"example": "n/a"})

        by_name = {f.name: f for f in schema_from_model(Event).fields}
        assert by_name["starts_at"].is_default_order is True
        assert by_name["venue"].orderable is True
        assert by_name["notes"].orderable is False

    def test_marker_helpers(self) -> None:
        assert orderable() == {"json_schema_extra": {"order": True}}
        assert default_order() == {"json_schema_extra": {"order": "default"}}
