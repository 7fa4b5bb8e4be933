"""Course discussion routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from campus.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from campus.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from campus.domain.service import JWTService
from campus.domain.value import ThreadOrder

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


@router.get("/courses/{course_code}/comments", response_model=ListCommentsResponse)
async def list_comments(
    course_code: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """Get all comments of a course as a flat list, oldest first.

    Args:
        course_code: Course code
        list_comments_use_case: List comments use case from DI

    Returns:
        Flat comment list with author display info

    Raises:
        HTTPException: 404 if the course does not exist
    """
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(course_code=course_code)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/courses/{course_code}/comments/thread", response_model=GetThreadResponse)
async def get_thread(
    course_code: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    order: ThreadOrder | None = None,
) -> GetThreadResponse:
    """Get a course discussion as a nested thread.

    Replies whose parent no longer exists are returned as roots with
    ``is_orphan`` set.

    Args:
        course_code: Course code
        get_thread_use_case: Get thread use case from DI
        order: Sibling order (defaults to the configured order)

    Returns:
        Root nodes with replies nested recursively
    """
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(course_code=course_code, order=order)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/courses/{course_code}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    course_code: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Comment on a course or reply to a comment.

    Requires authentication.

    Args:
        course_code: Course code
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: 401 if not authenticated, 400 for empty content or an
            invalid parent, 404 if the course does not exist
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to post comments",
        )

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                course_code=course_code,
                content=request.content,
                author_id=str(actor.user_id),
                parent_id=request.parent_id,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment rejected", course_code=course_code, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Delete a comment and every reply below it.

    Only the author or an administrator can delete.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Raises:
        HTTPException: 401 if not authenticated, 403 if not author or
            admin, 404 if the comment does not exist
    """
    actor = jwt_service.get_actor_from_token(auth_token)
    if not actor:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, actor=actor)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return Response(status_code=status.HTTP_204_NO_CONTENT)
