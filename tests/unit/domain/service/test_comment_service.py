"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from portal.domain.error import NotAuthorizedError, NotFoundError
from portal.domain.repository import AccountRepository, ContentRepository
from portal.domain.service import CommentService, ContentInteractionService
from portal.domain.value import (
    AccountId,
    AccountRole,
    ClassInstanceId,
    CommentId,
    ContentId,
)
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_comment(unit_env):
    account_repo = await unit_env.get(AccountRepository)
    content_repo = await unit_env.get(ContentRepository)
    interactions = await unit_env.get(ContentInteractionService)
    owner = await account_repo.save(make_account(full_name="Owner"))
    author = await account_repo.save(make_account(full_name="Author"))
    content = await content_repo.save(make_content(owner))
    outcome = await interactions.post_comment(content.id, author.id, "Great summary")
    return owner, author, content, outcome.comment


class TestGetComments:
    """Tests for listing comments."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        service = await unit_env.get(CommentService)
        interactions = await unit_env.get(ContentInteractionService)
        _, author, content, first = await _seed_comment(unit_env)
        second = (await interactions.post_comment(content.id, author.id, "And another")).comment

        comments = await service.get_comments_for_content(content.id)

        assert [c.id for c in comments] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_missing_content(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.get_comments_for_content(ContentId(uuid4()))


class TestDeleteComment:
    """Tests for soft-deleting comments."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        content_repo = await unit_env.get(ContentRepository)
        _, author, content, comment = await _seed_comment(unit_env)

        deleted = await service.delete_comment(comment.id, author.id)

        assert deleted.deleted_at is not None
        assert await service.get_comments_for_content(content.id) == []
        assert (await content_repo.find_by_id(content.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_deletion_keeps_awarded_points(self, unit_env):
        service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        owner, author, _, comment = await _seed_comment(unit_env)

        await service.delete_comment(comment.id, author.id)

        assert (await account_repo.find_by_id(author.id)).points == 1
        assert (await account_repo.find_by_id(owner.id)).points == 1

    @pytest.mark.asyncio
    async def test_admin_can_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        _, _, _, comment = await _seed_comment(unit_env)
        admin = await account_repo.save(make_account(role=AccountRole.ADMIN))

        deleted = await service.delete_comment(comment.id, admin.id)

        assert deleted.id == comment.id

    @pytest.mark.asyncio
    async def test_admin_of_another_class_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        account_repo = await unit_env.get(AccountRepository)
        _, _, content, comment = await _seed_comment(unit_env)
        outside_admin = await account_repo.save(
            make_account(
                role=AccountRole.ADMIN, class_instance_id=ClassInstanceId(uuid4())
            )
        )

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(comment.id, outside_admin.id)

        assert len(await service.get_comments_for_content(content.id)) == 1

    @pytest.mark.asyncio
    async def test_content_owner_cannot_delete_others_comment(self, unit_env):
        service = await unit_env.get(CommentService)
        owner, _, content, comment = await _seed_comment(unit_env)

        with pytest.raises(NotAuthorizedError):
            await service.delete_comment(comment.id, owner.id)

        assert len(await service.get_comments_for_content(content.id)) == 1

    @pytest.mark.asyncio
    async def test_deleting_twice(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, _, comment = await _seed_comment(unit_env)
        await service.delete_comment(comment.id, author.id)

        with pytest.raises(NotFoundError):
            await service.delete_comment(comment.id, author.id)

    @pytest.mark.asyncio
    async def test_unknown_comment_or_actor(self, unit_env):
        service = await unit_env.get(CommentService)
        _, author, _, comment = await _seed_comment(unit_env)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(uuid4()), author.id)
        with pytest.raises(NotFoundError):
            await service.delete_comment(comment.id, AccountId(uuid4()))
