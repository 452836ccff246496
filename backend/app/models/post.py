"""
Posts API — Post SQLAlchemy Model
==================================

What:  ORM model representing the `posts` collection.
How:   Each post is a self-contained row whose `tags` field is stored as a
       JSON document array. Alembic reads this model for migrations.
Who:   Used by PostRepository for CRUD operations.

Identifier format:
    24 lowercase hex characters: 4-byte big-endian creation time in seconds,
    followed by 8 random bytes. The store assigns it on insert; it never
    changes afterwards.
"""

import re
import secrets
import time
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

POST_ID_LENGTH = 24
POST_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_post_id() -> str:
    """Generates a fresh post identifier (timestamp prefix + random suffix)."""
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_valid_post_id(value: str) -> bool:
    """True when *value* has the shape of a post identifier."""
    return bool(POST_ID_PATTERN.match(value or ""))


class Post(Base):
    """
    A blog post.

    Lifecycle:
        1. Created by POST /api/posts (id and published_date assigned here)
        2. Read or listed any number of times
        3. Partially updated in place by PATCH /api/posts/{id}
        4. Deleted by DELETE /api/posts/{id}
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(
        String(POST_ID_LENGTH),
        primary_key=True,
        default=new_post_id,
        comment="Store-assigned identifier (24 hex chars)",
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    body: Mapped[str] = mapped_column(Text, nullable=False)

    # Ordered list of strings; empty list allowed
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    published_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this post was created (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}')>"
