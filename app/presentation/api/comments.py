"""Comment API endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from app.application.dtos.comment_dto import (
    CommentDTO,
    CreateCommentDTO,
    LikeDTO,
    UpdateCommentDTO,
)
from app.application.services.comment_service import MAX_PAGE_SIZE, CommentService
from app.presentation.dependencies import (
    CurrentIdentity,
    OptionalIdentity,
    get_comment_service,
)
from app.presentation.error_schemas import error_responses

router = APIRouter(prefix="/comments", tags=["comments"])

TOTAL_COUNT_HEADER = "X-Total-Count"


@router.post(
    "",
    response_model=CommentDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a comment",
    description="Create a comment on a resource, optionally as a reply to another comment.",
    responses=error_responses(status.HTTP_401_UNAUTHORIZED, status.HTTP_404_NOT_FOUND),
)
async def create_comment(
    dto: CreateCommentDTO,
    identity: CurrentIdentity,
    service: CommentService = Depends(get_comment_service),
) -> CommentDTO:
    """Create a comment owned by the caller."""
    return await service.create_comment(identity, dto)


@router.get(
    "",
    response_model=list[CommentDTO],
    summary="List comments of a resource",
    description=(
        "Public, oldest first, with pagination. The total number of live "
        "comments is returned in the X-Total-Count header. With a bearer "
        "token, each comment also tells whether the caller likes it."
    ),
    responses=error_responses(status.HTTP_401_UNAUTHORIZED),
)
async def list_comments(
    response: Response,
    viewer: OptionalIdentity,
    resource: str = Query(..., min_length=1, description="Resource identifier"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=MAX_PAGE_SIZE),
    service: CommentService = Depends(get_comment_service),
) -> list[CommentDTO]:
    """List live comments of a resource."""
    comments = await service.list_comments(
        resource, skip=skip, limit=limit, viewer=viewer
    )
    response.headers[TOTAL_COUNT_HEADER] = str(await service.count_comments(resource))
    return comments


@router.get(
    "/{comment_id}",
    response_model=CommentDTO,
    summary="Get comment by ID",
    responses=error_responses(status.HTTP_404_NOT_FOUND),
)
async def get_comment(
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
) -> CommentDTO:
    """Get comment by ID."""
    return await service.get_comment(comment_id)


@router.put(
    "/{comment_id}",
    response_model=CommentDTO,
    summary="Update comment",
    description="Replace the body of a comment. Only its author may do this.",
    responses=error_responses(
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
    ),
)
async def update_comment(
    comment_id: int,
    dto: UpdateCommentDTO,
    identity: CurrentIdentity,
    service: CommentService = Depends(get_comment_service),
) -> CommentDTO:
    """Update comment."""
    return await service.update_comment(comment_id, identity, dto)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
    description="Delete a comment. Only its author may do this.",
    responses=error_responses(
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
    ),
)
async def delete_comment(
    comment_id: int,
    identity: CurrentIdentity,
    service: CommentService = Depends(get_comment_service),
) -> None:
    """Delete comment."""
    await service.delete_comment(comment_id, identity)


@router.post(
    "/{comment_id}/like",
    response_model=LikeDTO,
    summary="Like or unlike a comment",
    responses=error_responses(status.HTTP_401_UNAUTHORIZED, status.HTTP_404_NOT_FOUND),
)
async def toggle_like(
    comment_id: int,
    identity: CurrentIdentity,
    service: CommentService = Depends(get_comment_service),
) -> LikeDTO:
    """Toggle the caller's like on a comment."""
    return await service.toggle_like(comment_id, identity)
