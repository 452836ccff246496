"""
Post persistence.

One method per store operation the API needs. Methods return ORM rows or
``None``; they do not translate errors, which is the service layer's job.
Writes are flushed, not committed: the request's session dependency commits.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.post import Post


class PostRepository:
    """Data access for the ``posts`` collection, bound to one session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, fields: Dict[str, Any]) -> Post:
        """Insert a post; the store assigns ``id`` and ``published_date``."""
        post = Post(**fields)
        self.db.add(post)
        await self.db.flush()
        return post

    async def find_all(self) -> List[Post]:
        # No ORDER BY: callers get the store's natural order
        result = await self.db.execute(select(Post))
        return list(result.scalars().all())

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        return result.scalar_one_or_none()

    async def delete_by_id(self, post_id: str) -> None:
        """Remove the post if present. A missing id is not an error."""
        await self.db.execute(delete(Post).where(Post.id == post_id))

    async def update_by_id(self, post_id: str, fields: Dict[str, Any]) -> Optional[Post]:
        """
        Apply *fields* onto the stored post and return it after modification.

        Fields not present in *fields* keep their stored values. Returns
        ``None`` when no post has that id.
        """
        post = await self.find_by_id(post_id)
        if post is None:
            return None
        for name, value in fields.items():
            setattr(post, name, value)
        if fields:
            await self.db.flush()
        return post
