"""
Posts API — Post Route Handlers
================================

What:  CRUD endpoints for /api/posts.
How:   Each handler runs as a short pipeline of FastAPI dependencies and
       steps: id-format guard → body validation → one service call → response.
       Bodies are read inside the handler, after the guard has run.
       Any step can stop the request by raising; the global exception
       handlers in main.py turn that into the response.

Endpoints:
    POST   /api/posts        create   200 Post | 400 | 500
    GET    /api/posts        list     200 Post[] | 500
    GET    /api/posts/{id}   read     200 Post | 400 | 404 | 500
    DELETE /api/posts/{id}   delete   204 | 400 | 500
    PATCH  /api/posts/{id}   update   200 Post | 400 | 404 | 500
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import MalformedIdentifierError
from app.models.post import is_valid_post_id
from app.schemas.post import ErrorResponse, PostCreate, PostResponse, PostUpdate
from app.services.post_service import post_service
from app.services.validation import parse_json_body, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Posts"])


def _json_body(schema) -> dict:
    """OpenAPI request body for handlers that read the raw body themselves."""
    return {
        "requestBody": {
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


# ── Guard ─────────────────────────────────────────────────────────────────
async def check_post_id(
    post_id: str = Path(description="Post identifier (24 hex chars)"),
) -> str:
    """
    Reject identifiers that cannot belong to a post before any lookup.

    Stored ids are lower-case hex, so an accepted id is lower-cased before
    it reaches the store.

    Raises:
        MalformedIdentifierError: → 400 with an empty body
    """
    if not is_valid_post_id(post_id):
        raise MalformedIdentifierError(post_id)
    return post_id.lower()


@router.post(
    "/posts",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"description": "Invalid request body", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a post",
    openapi_extra=_json_body(PostCreate),
)
async def write_post(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    payload = parse_json_body(await request.body())
    data = validate_payload(PostCreate, payload)
    return await post_service.create_post(db=db, data=data)


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List all posts",
)
async def list_posts(db: AsyncSession = Depends(get_db_session)) -> List[PostResponse]:
    return await post_service.list_posts(db=db)


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"description": "Malformed post id"},
        404: {"description": "Post not found"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a single post by ID",
)
async def read_post(
    post_id: str = Depends(check_post_id),
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    return await post_service.get_post(db=db, post_id=post_id)


@router.delete(
    "/posts/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Malformed post id"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a post",
    description="Returns 204 whether or not a post with this id existed.",
)
async def remove_post(
    post_id: str = Depends(check_post_id),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await post_service.delete_post(db=db, post_id=post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"description": "Malformed post id or invalid body", "model": ErrorResponse},
        404: {"description": "Post not found"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Partially update a post",
    description="Only the supplied fields change. The response is the post after the update.",
    openapi_extra=_json_body(PostUpdate),
)
async def update_post(
    request: Request,
    post_id: str = Depends(check_post_id),
    db: AsyncSession = Depends(get_db_session),
) -> PostResponse:
    # Read after the guard so a malformed id wins over a malformed body
    payload = parse_json_body(await request.body())
    data = validate_payload(PostUpdate, payload)
    return await post_service.update_post(db=db, post_id=post_id, data=data)
