# Routes package init
"""
Posts API — API Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - posts.py:   POST   /api/posts          (create)
                  GET    /api/posts          (list)
                  GET    /api/posts/{id}     (read)
                  DELETE /api/posts/{id}     (delete)
                  PATCH  /api/posts/{id}     (partial update)
    - health.py:  GET    /health             (service health check)

Routes are thin: they validate input, call a service and shape the response.
"""
