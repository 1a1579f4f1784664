"""Post domain service."""

from datetime import timedelta
from typing import Optional
from uuid import uuid4

import logfire

from scribe.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from scribe.domain.model.common import utcnow
from scribe.domain.model.post import Post, PostPatch
from scribe.domain.repository.post import PostRepository
from scribe.domain.repository.transaction import AfterCommit
from scribe.domain.value import PostId, PostStatus, UserId

from .asset_service import AssetService
from .base import Service
from .post_tag_service import PostTagService


class PostService(Service):
    """Domain service for post operations.

    Every method that depends on who is asking takes ``requesting_user``,
    which is None for anonymous callers. Posts that are not published are
    reported as missing to anyone but their owner.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        post_tag_service: PostTagService,
        asset_service: AssetService,
        after_commit: AfterCommit,
        list_limit: int = 200,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            post_tag_service: Association service used for tag names
            asset_service: Asset service used to remove featured images
            after_commit: Hooks run once the request transaction commits
            list_limit: Default cap on listing queries
        """
        self.post_repository = post_repository
        self.post_tag_service = post_tag_service
        self.asset_service = asset_service
        self.after_commit = after_commit
        self.list_limit = list_limit

    async def get_post(self, post_id: PostId, requesting_user: Optional[UserId]) -> Post:
        """Get a post the caller is allowed to see.

        Args:
            post_id: Post ID
            requesting_user: Caller, None if anonymous

        Returns:
            The post

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
        """
        with logfire.span(
            "post_service.get_post",
            post_id=str(post_id),
            requesting_user=str(requesting_user) if requesting_user else None,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post or not post.is_visible_to(requesting_user):
                logfire.warn("Post not found or not visible", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_public_post(self, post_id: PostId) -> Post:
        """Get a post only if it is published, even when the owner asks.

        Raises:
            NotFoundError: If the post is missing or not published
        """
        with logfire.span("post_service.get_public_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post or not post.is_published:
                logfire.warn("Published post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_published(self, limit: Optional[int] = None) -> list[Post]:
        """Published posts, newest first."""
        limit = self.list_limit if limit is None else limit
        with logfire.span("post_service.list_published", limit=limit):
            posts = await self.post_repository.find_published(limit=limit)
            logfire.info("Published posts retrieved", count=len(posts))
            return posts

    async def list_owned(
        self,
        owner_id: UserId,
        requesting_user: Optional[UserId],
        limit: Optional[int] = None,
    ) -> list[Post]:
        """All posts of an owner in any status, newest first.

        Raises:
            NotAuthorizedError: If the caller is not the owner
        """
        limit = self.list_limit if limit is None else limit
        with logfire.span(
            "post_service.list_owned", owner_id=str(owner_id), limit=limit
        ):
            if requesting_user is None or requesting_user != owner_id:
                logfire.warn(
                    "Listing another user's posts denied",
                    owner_id=str(owner_id),
                    requesting_user=str(requesting_user),
                )
                raise NotAuthorizedError("posts of", str(owner_id), str(requesting_user))
            posts = await self.post_repository.find_by_owner(owner_id, limit=limit)
            logfire.info("Owned posts retrieved", owner_id=str(owner_id), count=len(posts))
            return posts

    async def count_owned(self, owner_id: UserId) -> int:
        with logfire.span("post_service.count_owned", owner_id=str(owner_id)):
            return await self.post_repository.count_by_owner(owner_id)

    async def create_post(
        self,
        owner_id: Optional[UserId],
        title: str,
        body: Optional[str] = None,
        status: Optional[PostStatus] = None,
        featured_image: Optional[str] = None,
        tag_names: Optional[list[str]] = None,
    ) -> Post:
        """Create a post owned by the caller.

        Args:
            owner_id: Caller, becomes the owner
            title: Post title, trimmed
            body: Post body
            status: Initial status, draft when omitted
            featured_image: URL or path of an uploaded image
            tag_names: Tags to attach, created as needed

        Returns:
            The created post

        Raises:
            NotAuthorizedError: If the caller is anonymous
            ValidationError: If the title is blank or a tag name is invalid;
                nothing is written in that case
        """
        with logfire.span(
            "post_service.create_post",
            owner_id=str(owner_id) if owner_id else None,
            status=status.value if status else None,
        ):
            if owner_id is None:
                raise NotAuthorizedError("post", "new", "anonymous")

            if tag_names:
                self.post_tag_service.parse_names(tag_names)

            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                title=self._clean_title(title),
                body=body,
                owner_id=owner_id,
                status=status or PostStatus.DRAFT,
                featured_image=featured_image,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)

            if tag_names:
                await self.post_tag_service.reconcile(saved.id, tag_names)

            logfire.info(
                "Post created",
                post_id=str(saved.id),
                owner_id=str(owner_id),
                status=saved.status.value,
            )
            return saved

    async def update_post(
        self, post_id: PostId, requesting_user: Optional[UserId], patch: PostPatch
    ) -> Post:
        """Apply a partial update to a post the caller owns.

        Only fields present in ``patch`` change. A present ``tag_names``
        replaces the whole tag set, an absent one leaves it alone.
        ``updated_at`` always advances.

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
            NotAuthorizedError: If the caller can see but does not own it
            ValidationError: If the patch blanks the title, nulls the status
                or carries an invalid tag name; nothing is written in that case
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            fields=sorted(patch.model_fields_set),
        ):
            post = await self._get_owned(post_id, requesting_user)

            changes: dict = {"updated_at": utcnow()}
            if patch.has("title"):
                if patch.title is None:
                    raise ValidationError("Title cannot be null")
                changes["title"] = self._clean_title(patch.title)
            if patch.has("status"):
                if patch.status is None:
                    raise ValidationError("Status cannot be null")
                changes["status"] = patch.status
            if patch.has("body"):
                changes["body"] = patch.body
            if patch.has("featured_image"):
                changes["featured_image"] = patch.featured_image
            if patch.has("tag_names"):
                self.post_tag_service.parse_names(patch.tag_names or [])

            updated = post.model_copy(update=changes)
            # updated_at must move forward even when two writes share a clock tick
            if updated.updated_at <= post.updated_at:
                updated = updated.model_copy(
                    update={"updated_at": post.updated_at + timedelta(microseconds=1)}
                )
            saved = await self.post_repository.save(updated)

            if patch.has("tag_names"):
                await self.post_tag_service.reconcile(post_id, patch.tag_names or [])

            logfire.info("Post updated", post_id=str(post_id), status=saved.status.value)
            return saved

    async def delete_post(self, post_id: PostId, requesting_user: Optional[UserId]) -> None:
        """Delete a post the caller owns.

        Tag associations go with the row. A featured image is removed from
        the asset store once the deletion has committed, on a best-effort
        basis; if the transaction rolls back the image is kept.

        Raises:
            NotFoundError: If the post is missing or hidden from the caller
            NotAuthorizedError: If the caller can see but does not own it
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            post = await self._get_owned(post_id, requesting_user)
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))

            if post.featured_image:
                featured_image = post.featured_image
                self.after_commit.add(
                    lambda: self.asset_service.discard(featured_image)
                )

    async def _get_owned(self, post_id: PostId, requesting_user: Optional[UserId]) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if not post or not post.is_visible_to(requesting_user):
            logfire.warn("Post not found for mutation", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        if not post.is_owned_by(requesting_user):
            logfire.warn(
                "Post mutation denied",
                post_id=str(post_id),
                requesting_user=str(requesting_user),
            )
            raise NotAuthorizedError("post", str(post_id), str(requesting_user))
        return post

    @staticmethod
    def _clean_title(title: str) -> str:
        cleaned = title.strip()
        if not cleaned:
            raise ValidationError("Title must not be empty")
        return cleaned
