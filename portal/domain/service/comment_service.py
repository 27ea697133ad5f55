"""Comment domain service."""

from datetime import datetime

import logfire

from portal.domain.error import NotAuthorizedError, NotFoundError
from portal.domain.model.comment import Comment
from portal.domain.repository import (
    AccountRepository,
    CommentRepository,
    ContentRepository,
    TransactionManager,
)
from portal.domain.value import AccountId, CommentId, ContentId

from .base import Service


class CommentService(Service):
    """Domain service for reading and deleting comments.

    Posting goes through the content interaction service because it awards
    points; deleting does not take those points back.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_repository: ContentRepository,
        account_repository: AccountRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_repository: Content repository
            account_repository: Account repository (actor roles)
            transaction_manager: Atomic unit provider
        """
        self.comment_repository = comment_repository
        self.content_repository = content_repository
        self.account_repository = account_repository
        self.transaction_manager = transaction_manager

    async def get_comments_for_content(self, content_id: ContentId) -> list[Comment]:
        """Get live comments on a content item, newest first.

        Raises:
            NotFoundError: If the content item does not exist
        """
        with logfire.span(
            "comment_service.get_comments_for_content", content_id=str(content_id)
        ):
            if not await self.content_repository.find_by_id(content_id):
                raise NotFoundError("Content", str(content_id))
            comments = await self.comment_repository.find_by_content(content_id)
            logfire.info(
                "Comments retrieved for content",
                content_id=str(content_id),
                count=len(comments),
            )
            return comments

    async def delete_comment(self, comment_id: CommentId, actor_id: AccountId) -> Comment:
        """Soft-delete a comment.

        Only the comment's author or an admin of the class instance the
        commented item belongs to may delete it.

        Args:
            comment_id: Comment ID
            actor_id: Account requesting the deletion

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment or actor does not exist
            NotAuthorizedError: If the actor may not delete the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            async with self.transaction_manager.atomic():
                comment = await self.comment_repository.find_by_id(comment_id)
                if not comment or comment.deleted_at is not None:
                    raise NotFoundError("Comment", str(comment_id))

                actor = await self.account_repository.find_by_id(actor_id)
                if not actor:
                    raise NotFoundError("Account", str(actor_id))

                content = await self.content_repository.find_by_id(comment.content_id)
                class_admin = (
                    actor.role.is_admin
                    and content is not None
                    and content.class_instance_id == actor.class_instance_id
                )
                if comment.author_id != actor_id and not class_admin:
                    logfire.warn(
                        "Unauthorized comment deletion",
                        comment_id=str(comment_id),
                        actor_id=str(actor_id),
                    )
                    raise NotAuthorizedError(
                        "delete", "comment", str(comment_id), str(actor_id)
                    )

                deleted = await self.comment_repository.soft_delete(
                    comment_id, datetime.now()
                )
                if not deleted:
                    raise NotFoundError("Comment", str(comment_id))
                await self.content_repository.adjust_counters(
                    comment.content_id, comment_delta=-1
                )

                logfire.info(
                    "Comment deleted",
                    comment_id=str(comment_id),
                    content_id=str(comment.content_id),
                )
                return deleted
