"""Tag representation shared by tag and post use cases."""

from datetime import datetime

from pydantic import BaseModel

from scribe.domain.model.tag import Tag


class TagItem(BaseModel):
    """Tag item in responses."""

    id: str
    name: str
    slug: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(
            id=str(tag.id),
            name=tag.name.root,
            slug=tag.slug.root,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class TagListResponse(BaseModel):
    """A list of tags."""

    tags: list[TagItem]
