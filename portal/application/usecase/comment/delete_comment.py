"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from portal.domain.service import CommentService
from portal.domain.value import AccountId, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    actor_id: str  # Account ID from authenticated caller


class DeleteCommentUseCase:
    """Use case for deleting a comment.

    Points awarded for the comment are kept.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)),
            AccountId(UUID(request.actor_id)),
        )
