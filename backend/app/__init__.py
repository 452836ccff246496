"""
Posts API — Application Package Initializer
============================================

Layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, id guard
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, error translation
    ├─────────────────────────────────────┤
    │   Repositories (Data Access)        │  ← one query per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
