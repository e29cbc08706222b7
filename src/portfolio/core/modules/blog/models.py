"""Blog post models.

JSON field names are camelCase (``publishedAt``, ``readTime``, ``isDraft``)
to match what the admin console and public pages send and expect.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from portfolio import utils

SLUG_PATTERN = utils.SLUG_RE.pattern

# Fields that may be omitted from a partial update but never set to null
NON_NULLABLE_FIELDS = (
    "title",
    "slug",
    "content",
    "excerpt",
    "category",
    "published_at",
    "read_time",
    "featured",
    "is_draft",
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Blog(CamelModel):
    """Stored blog post."""

    id: int = Field(..., description="Blog ID, assigned by the store")
    title: str
    slug: str = Field(..., description="URL-friendly unique identifier")
    content: str
    excerpt: str
    category: str
    tags: list[str] = Field(default_factory=list)  # Order kept, duplicates allowed
    published_at: datetime
    read_time: int = Field(..., description="Estimated reading time in minutes")
    featured: bool = False  # Presentation only, does not affect visibility
    is_draft: bool = False  # Hidden from anonymous readers


class BlogCreate(CamelModel):
    """Payload for creating a blog post."""

    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, pattern=SLUG_PATTERN)
    content: str
    excerpt: str
    category: str = Field(..., min_length=1)
    tags: list[str] | None = None
    published_at: datetime
    read_time: int = Field(..., ge=1)
    featured: bool | None = None
    is_draft: bool | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Understanding Retrieval-Augmented Generation (RAG)",
                    "slug": "understanding-rag",
                    "content": "Retrieval-Augmented Generation combines language models with retrieval...",
                    "excerpt": "How RAG systems ground model output in retrieved documents.",
                    "category": "AI/ML",
                    "tags": ["RAG", "NLP"],
                    "publishedAt": "2024-01-15T00:00:00Z",
                    "readTime": 8,
                    "featured": True,
                    "isDraft": False,
                }
            ]
        }
    )

    @field_validator("published_at")
    @classmethod
    def _published_at_utc(cls, value: datetime) -> datetime:
        return utils.ensure_utc(value)


class BlogUpdate(CamelModel):
    """Partial payload for updating a blog post. Only provided fields change."""

    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(None, min_length=1, pattern=SLUG_PATTERN)
    content: str | None = None
    excerpt: str | None = None
    category: str | None = Field(None, min_length=1)
    tags: list[str] | None = None  # null clears the tags
    published_at: datetime | None = None
    read_time: int | None = Field(None, ge=1)
    featured: bool | None = None
    is_draft: bool | None = None

    @field_validator(*NON_NULLABLE_FIELDS, mode="before")
    @classmethod
    def _reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{to_camel(info.field_name or '')} cannot be null")
        return value

    @field_validator("published_at")
    @classmethod
    def _published_at_utc(cls, value: datetime | None) -> datetime | None:
        return utils.ensure_utc(value) if value is not None else None

    def changes(self) -> dict[str, Any]:
        """Fields explicitly present in the payload, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)
