"""Tests for orderable field resolution."""

import pytest
from pydantic import ValidationError

from src.paging.domain.ordering import CREATED_AT, OrderableFieldSet
from src.paging.domain.schema import EntitySchema, FieldDescriptor
from src.paging.errors import SchemaConflictError
from src.paging.services.orderable_resolver import resolve


def _schema(*fields: FieldDescriptor, name: str = "Post") -> EntitySchema:
    return EntitySchema(name=name, fields=fields)


class TestResolveBasics:
    """Result shape and default selection."""

    def test_no_orderable_fields(self) -> None:
        result = resolve(_schema(FieldDescriptor(name="body")))
        assert result.fields == (CREATED_AT,)
        assert result.default == CREATED_AT

    def test_empty_schema(self) -> None:
        result = resolve(_schema())
        assert result.fields == ("CreatedAt",)
        assert result.default == "CreatedAt"

    def test_tagged_default(self) -> None:
        """Title orderable, published_at orderable and default."""
        result = resolve(
            _schema(
                FieldDescriptor(name="title", orderable=True),
                FieldDescriptor(name="published_at", orderable=True, is_default_order=True),
            )
        )
        assert result.fields == ("CreatedAt", "Title", "PublishedAt")
        assert result.default == "PublishedAt"

    def test_untagged_default_is_first_appended_field(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="body"),
                FieldDescriptor(name="rating", orderable=True),
                FieldDescriptor(name="title", orderable=True),
            )
        )
        assert result.fields == ("CreatedAt", "Rating", "Title")
        assert result.default == "Rating"

    def test_non_orderable_fields_are_skipped(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="author"),
                FieldDescriptor(name="title", orderable=True),
            )
        )
        assert "Author" not in result.fields

    def test_declaration_order_is_kept(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="zeta", orderable=True),
                FieldDescriptor(name="alpha", orderable=True),
                FieldDescriptor(name="mid_point", orderable=True),
            )
        )
        assert result.fields == ("CreatedAt", "Zeta", "Alpha", "MidPoint")

    def test_default_order_tag_without_orderable_flag(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="title", orderable=True),
                FieldDescriptor(name="rating", is_default_order=True),
            )
        )
        assert result.fields == ("CreatedAt", "Title", "Rating")
        assert result.default == "Rating"


class TestCreatedAtFolding:
    """A schema field named created_at reuses the synthetic entry."""

    def test_created_at_not_duplicated(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="created_at", orderable=True),
                FieldDescriptor(name="title", orderable=True),
            )
        )
        assert result.fields == ("CreatedAt", "Title")

    @pytest.mark.parametrize("name", ["created_at", "CREATED_AT", "_created__at_", "createdAt"])
    def test_case_insensitive_match(self, name: str) -> None:
        result = resolve(_schema(FieldDescriptor(name=name, orderable=True)))
        assert result.fields == ("CreatedAt",)

    def test_tagged_created_at_falls_back_to_first_field(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="created_at", orderable=True, is_default_order=True),
                FieldDescriptor(name="title", orderable=True),
            )
        )
        assert result.default == "Title"

    def test_tagged_created_at_alone_defaults_to_created_at(self) -> None:
        result = resolve(
            _schema(FieldDescriptor(name="created_at", is_default_order=True))
        )
        assert result.fields == ("CreatedAt",)
        assert result.default == "CreatedAt"


class TestSchemaConflicts:
    """Identifier collisions are configuration errors."""

    def test_colliding_names_raise(self) -> None:
        with pytest.raises(SchemaConflictError) as exc_info:
            resolve(
                _schema(
                    FieldDescriptor(name="published_at", orderable=True),
                    FieldDescriptor(name="published__at", orderable=True),
                )
            )
        assert exc_info.value.identifier == "PublishedAt"
        assert exc_info.value.fields == ("published_at", "published__at")
        assert "published_at" in str(exc_info.value)
        assert "published__at" in str(exc_info.value)

    def test_leading_underscore_collision(self) -> None:
        with pytest.raises(SchemaConflictError):
            resolve(
                _schema(
                    FieldDescriptor(name="title", orderable=True),
                    FieldDescriptor(name="_title", orderable=True),
                )
            )

    def test_collision_between_unorderable_fields_is_ignored(self) -> None:
        result = resolve(
            _schema(
                FieldDescriptor(name="note"),
                FieldDescriptor(name="_note"),
            )
        )
        assert result.fields == ("CreatedAt",)

    def test_underscore_only_name_raises(self) -> None:
        with pytest.raises(SchemaConflictError, match="___"):
            resolve(_schema(FieldDescriptor(name="___", orderable=True)))


class TestUniqueness:
    """Resolved identifiers never repeat."""

    @pytest.mark.parametrize(
        "names",
        [
            ["title"],
            ["title", "created_at"],
            ["created_at", "updated_at", "title", "rating"],
            ["a", "b", "c", "created_at"],
        ],
    )
    def test_entries_are_unique(self, names: list[str]) -> None:
        schema = _schema(*(FieldDescriptor(name=n, orderable=True) for n in names))
        result = resolve(schema)
        assert len(result.fields) == len(set(result.fields))
        assert result.fields[0] == CREATED_AT
        assert result.default in result.fields


class TestOrderableFieldSet:
    """Validation of the result model itself."""

    def test_must_start_with_created_at(self) -> None:
        with pytest.raises(ValidationError):
            OrderableFieldSet(fields=("Title",), default="Title")

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValidationError):
            OrderableFieldSet(fields=("CreatedAt", "Title", "Title"), default="Title")

    def test_default_must_be_listed(self) -> None:
        with pytest.raises(ValidationError):
            OrderableFieldSet(fields=("CreatedAt",), default="Title")

    def test_contains(self) -> None:
        field_set = OrderableFieldSet(fields=("CreatedAt", "Title"), default="Title")
        assert "Title" in field_set
        assert "Rating" not in field_set
