"""Shared in-memory store backing the in-memory repositories.

Repositories are created per request but read and write the same
``InMemoryDatabase``, which emulates the constraints the Postgres schema
enforces: unique tag names and slugs, one profile per user, and the
``ON DELETE CASCADE`` from posts and tags into posts_tags.
"""

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from scribe.domain.model import Post, PostTag, Profile, Tag
from scribe.domain.value import PostId, TagId, UserId


class InMemoryDatabase:
    """Tables as dicts keyed by primary key."""

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}
        self.tags: dict[TagId, Tag] = {}
        self.posts_tags: dict[tuple[PostId, TagId], PostTag] = {}
        self.profiles: dict[UserId, Profile] = {}

    def insert_tag(self, tag: Tag) -> None:
        for existing in self.tags.values():
            if existing.name == tag.name:
                raise IntegrityError("Duplicate tag name", None, Exception())
            if existing.slug == tag.slug:
                raise IntegrityError("Duplicate tag slug", None, Exception())
        self.tags[tag.id] = tag

    def insert_post_tag(self, post_tag: PostTag) -> None:
        key = (post_tag.post_id, post_tag.tag_id)
        if post_tag.post_id not in self.posts or post_tag.tag_id not in self.tags:
            raise IntegrityError("posts_tags foreign key violation", None, Exception())
        if key in self.posts_tags:
            raise IntegrityError("Duplicate posts_tags row", None, Exception())
        self.posts_tags[key] = post_tag

    def delete_post(self, post_id: PostId) -> bool:
        if self.posts.pop(post_id, None) is None:
            return False
        for key in [k for k in self.posts_tags if k[0] == post_id]:
            del self.posts_tags[key]
        return True

    def delete_tag(self, tag_id: TagId) -> bool:
        if self.tags.pop(tag_id, None) is None:
            return False
        for key in [k for k in self.posts_tags if k[1] == tag_id]:
            del self.posts_tags[key]
        return True

    def snapshot(self) -> "InMemorySnapshot":
        """Copy the tables, for restoring when a request rolls back.

        Rows are frozen models, so copying the dicts is enough.
        """
        return InMemorySnapshot(
            posts=dict(self.posts),
            tags=dict(self.tags),
            posts_tags=dict(self.posts_tags),
            profiles=dict(self.profiles),
        )

    def restore(self, snapshot: "InMemorySnapshot") -> None:
        self.posts = dict(snapshot.posts)
        self.tags = dict(snapshot.tags)
        self.posts_tags = dict(snapshot.posts_tags)
        self.profiles = dict(snapshot.profiles)


@dataclass(frozen=True)
class InMemorySnapshot:
    """Table contents at the start of a request."""

    posts: dict[PostId, Post]
    tags: dict[TagId, Tag]
    posts_tags: dict[tuple[PostId, TagId], PostTag]
    profiles: dict[UserId, Profile]
