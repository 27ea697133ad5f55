"""Unit tests for RecordUploadUseCase."""

from decimal import Decimal

import pytest

from portal.application.usecase.content.record_upload import (
    RecordUploadRequest,
    RecordUploadUseCase,
)
from portal.domain.repository import AccountRepository, ContentRepository
from portal.domain.value import ContentType
from tests.conftest import make_account, make_content
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecordUploadUseCase:
    """Tests for RecordUploadUseCase."""

    @pytest.mark.asyncio
    async def test_retried_upload_awarded_once(self, unit_env):
        """The uploader gains the upload award exactly once."""
        # Arrange
        use_case = await unit_env.get(RecordUploadUseCase)
        account_repo = await unit_env.get(AccountRepository)
        content_repo = await unit_env.get(ContentRepository)
        uploader = await account_repo.save(make_account())
        content = await content_repo.save(
            make_content(uploader, content_type=ContentType.PAST_PAPER)
        )
        request = RecordUploadRequest(content_id=str(content.id), owner_id=str(uploader.id))

        # Act
        first = await use_case.execute(request)
        retry = await use_case.execute(request)

        # Assert
        assert first.awarded is True
        assert first.delta == Decimal("5")
        assert retry.awarded is False
        assert retry.delta == 0
        assert retry.balance == Decimal("5")
        assert (await account_repo.find_by_id(uploader.id)).points == Decimal("5")
