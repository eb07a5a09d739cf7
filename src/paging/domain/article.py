"""Pydantic model for articles served by the demo API."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator

from src.paging.domain.schema import default_order, orderable


class Article(BaseModel):
    """Published article.

    ``title`` and ``published_at`` are orderable; listings default to
    ``published_at``. Creation time is always orderable as ``createdAt``.
    Timestamps are stored in UTC; naive inputs are taken to be UTC.
    """

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    title: str = Field(min_length=1, description="Headline", **orderable())
    author: str = Field(description="Author display name")
    body: str = Field(default="", description="Article text")
    published_at: datetime | None = Field(
        default=None,
        description="When the article went live",
        **default_order(),
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the article was created",
    )

    @field_validator("published_at", "created_at")
    @classmethod
    def normalize_to_utc(cls, v: datetime | None) -> datetime | None:
        """Attach UTC to naive timestamps and convert aware ones to UTC."""
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)
