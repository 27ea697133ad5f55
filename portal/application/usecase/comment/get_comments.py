"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import CommentService
from portal.domain.value import ContentId


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    content_id: str
    author_id: str
    text: str
    created_at: datetime


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    content_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    content_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing the live comments on a content item."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Returns:
            Comments newest first
        """
        comments = await self.comment_service.get_comments_for_content(
            ContentId(UUID(request.content_id))
        )

        items = [
            CommentItem(
                comment_id=str(comment.id),
                content_id=str(comment.content_id),
                author_id=str(comment.author_id),
                text=comment.text,
                created_at=comment.created_at,
            )
            for comment in comments
        ]
        return GetCommentsResponse(
            content_id=request.content_id, comments=items, total=len(items)
        )
