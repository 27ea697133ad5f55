"""Unit tests for the comment use cases."""

from decimal import Decimal

import pytest

from portal.application.usecase.comment.delete_comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from portal.application.usecase.comment.get_comments import (
    GetCommentsRequest,
    GetCommentsUseCase,
)
from portal.application.usecase.comment.post_comment import (
    PostCommentRequest,
    PostCommentUseCase,
)
from portal.domain.error import InvalidInputError, NotAuthorizedError
from portal.domain.repository import AccountRepository, ContentRepository
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    account_repo = await unit_env.get(AccountRepository)
    content_repo = await unit_env.get(ContentRepository)
    owner = await account_repo.save(make_account(full_name="Owner"))
    commenter = await account_repo.save(make_account(full_name="Commenter"))
    content = await content_repo.save(make_content(owner))
    return owner, commenter, content


class TestPostCommentUseCase:
    """Tests for PostCommentUseCase."""

    @pytest.mark.asyncio
    async def test_post_comment_reports_awards(self, unit_env):
        """Posting returns the saved comment and both awards."""
        # Arrange
        use_case = await unit_env.get(PostCommentUseCase)
        _, commenter, content = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            PostCommentRequest(
                content_id=str(content.id),
                author_id=str(commenter.id),
                text="Page 4 has the answer key",
            )
        )

        # Assert
        assert response.content_id == str(content.id)
        assert response.text == "Page 4 has the answer key"
        assert response.author_delta == Decimal("1")
        assert response.author_balance == Decimal("1")
        assert response.owner_delta == Decimal("1")

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, unit_env):
        """Whitespace-only comments are rejected."""
        use_case = await unit_env.get(PostCommentUseCase)
        _, commenter, content = await _seed(unit_env)

        with pytest.raises(InvalidInputError):
            await use_case.execute(
                PostCommentRequest(
                    content_id=str(content.id), author_id=str(commenter.id), text="\n\t"
                )
            )


class TestGetAndDeleteComments:
    """Tests for GetCommentsUseCase and DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_deleted_comments_disappear_from_listing(self, unit_env):
        """A deleted comment is no longer listed."""
        # Arrange
        post = await unit_env.get(PostCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        _, commenter, content = await _seed(unit_env)
        kept = await post.execute(
            PostCommentRequest(
                content_id=str(content.id), author_id=str(commenter.id), text="Keep me"
            )
        )
        removed = await post.execute(
            PostCommentRequest(
                content_id=str(content.id), author_id=str(commenter.id), text="Typo"
            )
        )

        # Act
        await delete.execute(
            DeleteCommentRequest(comment_id=removed.comment_id, actor_id=str(commenter.id))
        )
        response = await get_comments.execute(GetCommentsRequest(content_id=str(content.id)))

        # Assert
        assert response.total == 1
        assert [c.comment_id for c in response.comments] == [kept.comment_id]
        assert response.comments[0].author_id == str(commenter.id)

    @pytest.mark.asyncio
    async def test_other_students_cannot_delete(self, unit_env):
        """Only the author or an admin may delete a comment."""
        post = await unit_env.get(PostCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        owner, commenter, content = await _seed(unit_env)
        posted = await post.execute(
            PostCommentRequest(
                content_id=str(content.id), author_id=str(commenter.id), text="Mine"
            )
        )

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(comment_id=posted.comment_id, actor_id=str(owner.id))
            )
