"""
Posts API — Post Service
=========================

What:  Business logic for the five post operations.
How:   Each method performs exactly one repository call, converts a missing
       record into NotFoundError where the operation distinguishes it, and
       wraps store failures in DatabaseError.
Who:   Called by the route handlers in app.routes.posts.

Error Handling Strategy:
    - Validation and identifier checks happen before the service is called.
    - Store errors are not retried. They are logged with a traceback and
      re-raised as DatabaseError, which the global handler turns into a 500
      carrying the underlying error.
    - Delete never reports "not found"; read and update do.
    - Writes commit inside the same try block as the repository call, so a
      failed commit is reported as a 500 before any response is built.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError, NotFoundError
from app.repositories import PostRepository
from app.schemas.post import PostCreate, PostResponse, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """
    Stateless service; the session comes in with every call.

    Methods:
        - create_post(): persist a validated PostCreate
        - list_posts(): every stored post
        - get_post(): one post or NotFoundError
        - delete_post(): remove by id, silent when absent
        - update_post(): partial update returning the new state or NotFoundError
    """

    async def create_post(self, db: AsyncSession, data: PostCreate) -> PostResponse:
        try:
            post = await PostRepository(db).create(data.model_dump())
            await db.commit()
        except Exception as e:
            logger.error("Database error creating post: %s", str(e), exc_info=True)
            raise DatabaseError(message="Could not save the post", original=e)

        logger.info("Post created: %s (%d tags)", post.id, len(post.tags))
        return PostResponse.model_validate(post)

    async def list_posts(self, db: AsyncSession) -> List[PostResponse]:
        try:
            posts = await PostRepository(db).find_all()
        except Exception as e:
            logger.error("Database error listing posts: %s", str(e), exc_info=True)
            raise DatabaseError(message="Could not retrieve posts", original=e)

        return [PostResponse.model_validate(post) for post in posts]

    async def get_post(self, db: AsyncSession, post_id: str) -> PostResponse:
        """
        Raises:
            NotFoundError: no post has this id (→ 404)
            DatabaseError: the query failed (→ 500)
        """
        try:
            post = await PostRepository(db).find_by_id(post_id)
        except Exception as e:
            logger.error("Database error fetching post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the post",
                original=e,
                context={"post_id": post_id},
            )

        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        return PostResponse.model_validate(post)

    async def delete_post(self, db: AsyncSession, post_id: str) -> None:
        try:
            await PostRepository(db).delete_by_id(post_id)
            await db.commit()
        except Exception as e:
            logger.error("Database error deleting post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the post",
                original=e,
                context={"post_id": post_id},
            )

        logger.info("Post deleted: %s", post_id)

    async def update_post(
        self, db: AsyncSession, post_id: str, data: PostUpdate
    ) -> PostResponse:
        """
        Apply only the fields the client sent and return the post as it is
        after the update.

        Raises:
            NotFoundError: no post has this id (→ 404)
            DatabaseError: the update failed (→ 500)
        """
        fields = data.model_dump(exclude_unset=True)
        try:
            post = await PostRepository(db).update_by_id(post_id, fields)
            if post is not None:
                await db.commit()
        except Exception as e:
            logger.error("Database error updating post %s: %s", post_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the post",
                original=e,
                context={"post_id": post_id},
            )

        if post is None:
            raise NotFoundError(resource="post", resource_id=post_id)
        logger.info("Post updated: %s (fields: %s)", post_id, ", ".join(sorted(fields)) or "none")
        return PostResponse.model_validate(post)


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
