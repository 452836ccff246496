# Services package init
"""
Posts API — Services Layer
===========================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - validation: validate_payload() / format_errors(), schema-driven body checks
    - PostService: create, list, read, delete and partial update of posts
"""
