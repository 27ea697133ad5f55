"""Content use cases."""

from .record_upload import RecordUploadRequest, RecordUploadResponse, RecordUploadUseCase

__all__ = [
    "RecordUploadRequest",
    "RecordUploadResponse",
    "RecordUploadUseCase",
]
