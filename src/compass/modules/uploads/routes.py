"""Upload API routes."""

from typing import Annotated

from fastapi import File, Query, UploadFile

from compass.core.auth import AdminIdentity
from compass.core.schemas import SuccessResponse
from compass.modules.uploads import router
from compass.modules.uploads.schemas import UploadResponse
from compass.modules.uploads.services import UploadSvc


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload media",
    description=(
        "Upload a banner image (10MB max) or video (50MB max) and return its public URL."
    ),
)
async def upload_file(
    file: Annotated[UploadFile, File()],
    service: UploadSvc,
    identity: AdminIdentity,
) -> UploadResponse:
    """Upload a file to blob storage."""
    service.precheck(file.content_type, file.size)
    content = await file.read()
    return await service.upload(
        content,
        filename=file.filename,
        mime_type=file.content_type,
        tenant_id=identity.tenant_id,
    )


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete media",
    description="Delete a previously uploaded file by its URL.",
)
async def delete_file(
    service: UploadSvc,
    identity: AdminIdentity,
    url: Annotated[str, Query(min_length=1)],
) -> SuccessResponse:
    """Delete a file from blob storage."""
    await service.delete(url, tenant_id=identity.tenant_id)
    return SuccessResponse(message="File deleted successfully")
