"""Domain value objects for Scribe.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from scribe.domain.value.common import RootValueObject

# Word characters are ASCII only; whitespace includes Unicode spaces
_NON_SLUG_CHARS = re.compile(r"[^0-9A-Za-z_\s-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Derive a URL-safe slug from free text.

    ``"  Hello, World!  "`` becomes ``"hello-world"``. Applying it twice
    gives the same result as applying it once.
    """
    slug = text.lower().strip()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _SEPARATOR_RUNS.sub("-", slug)
    return slug.strip("-")


class PostStatus(str, Enum):
    """Publication status of a post.

    Any status may move to any other; nothing transitions automatically.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class TagName(RootValueObject[str]):
    """Display name of a tag.

    Stored trimmed with its original casing. Examples: 'Rust', 'Machine Learning'
    """

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Reject names that are blank or that produce an empty slug."""
        if not v:
            raise ValueError("Tag name must not be blank")
        if len(v) > 100:
            raise ValueError("Tag name must be at most 100 characters")
        if not slugify(v):
            raise ValueError(f"Tag name '{v}' has no URL-safe characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe slug derived from a tag name.

    Lowercase ASCII alphanumerics separated by single hyphens.
    Examples: 'rust', 'machine-learning'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumerics separated by single hyphens"
            )
        return v

    @classmethod
    def from_name(cls, name: TagName | str) -> "Slug":
        """Build the slug for a tag name."""
        raw = name.root if isinstance(name, TagName) else name
        return cls(slugify(raw))
