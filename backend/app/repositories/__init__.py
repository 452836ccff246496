# Repositories package init
"""
Posts API — Data Access Layer
==============================

What:  Thin wrappers over SQLAlchemy queries, one class per collection.
How:   Each repository is bound to the request's AsyncSession and exposes
       create / find / update / delete operations keyed by identifier.

Repository Inventory:
    - PostRepository: create, find_all, find_by_id, delete_by_id, update_by_id
"""

from app.repositories.post_repository import PostRepository

__all__ = ["PostRepository"]
