"""Comment use cases."""

from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .post_comment import PostCommentRequest, PostCommentResponse, PostCommentUseCase

__all__ = [
    "CommentItem",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "PostCommentRequest",
    "PostCommentResponse",
    "PostCommentUseCase",
]
