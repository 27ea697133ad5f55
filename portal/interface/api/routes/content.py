"""Content routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from portal.application.usecase.content import (
    RecordUploadRequest,
    RecordUploadResponse,
    RecordUploadUseCase,
)
from portal.domain.error import DomainError
from portal.domain.service import JWTService
from portal.interface.error import require_account, to_http_exception

router = APIRouter(tags=["content"], route_class=DishkaRoute)


@router.post("/content/{content_id}/upload-award", response_model=RecordUploadResponse)
async def record_upload(
    content_id: str,
    record_upload_use_case: FromDishka[RecordUploadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RecordUploadResponse:
    """Award the uploader of a content item.

    Called by the upload flow once the file is stored. Repeating the call
    for the same item awards nothing.

    Requires authentication as the item's owner.
    """
    account_id = require_account(
        jwt_service.get_account_id_from_token(auth_token), "record uploads"
    )

    try:
        return await record_upload_use_case.execute(
            RecordUploadRequest(content_id=content_id, owner_id=account_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
