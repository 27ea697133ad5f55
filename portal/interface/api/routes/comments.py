"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from portal.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    PostCommentRequest,
    PostCommentResponse,
    PostCommentUseCase,
)
from portal.domain.error import DomainError
from portal.domain.service import JWTService
from portal.interface.error import require_account, to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentBody(BaseModel):
    """Body of a post comment request."""

    text: str


@router.post(
    "/content/{content_id}/comments",
    response_model=PostCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_comment(
    content_id: str,
    body: CommentBody,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostCommentResponse:
    """Comment on a content item, awarding the commenter and the owner.

    Requires authentication.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "comment"
    )

    try:
        request = PostCommentRequest(
            content_id=content_id, author_id=account_id, text=body.text
        )
        return await post_comment_use_case.execute(request)
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/content/{content_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    content_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get the live comments on a content item, newest first."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(content_id=content_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comment.

    Only the comment's author or a class admin may delete it. Requires
    authentication.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "delete comments"
    )

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, actor_id=account_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
