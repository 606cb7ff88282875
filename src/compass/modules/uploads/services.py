"""Upload service: validate banner media and hand it to blob storage."""

import re
import time
from dataclasses import dataclass, field
from typing import Annotated

import httpx
import structlog
from fastapi import Depends

from compass.config import settings
from compass.core.constants import MAX_IMAGE_UPLOAD_BYTES, MAX_VIDEO_UPLOAD_BYTES
from compass.core.errors import UnauthorizedError, ValidationError
from compass.modules.uploads.schemas import MediaKind, UploadResponse
from compass.modules.uploads.storage import BlobStorage, get_blob_storage


logger = structlog.get_logger()

_UNSAFE_NAME_CHARS = re.compile(r"[^a-z0-9.-]", re.IGNORECASE)

_MB = 1024 * 1024


@dataclass(frozen=True)
class UploadPolicy:
    """Which files may be uploaded and how large they may be."""

    image_types: frozenset[str] = field(default_factory=frozenset)
    video_types: frozenset[str] = field(default_factory=frozenset)
    max_image_bytes: int = MAX_IMAGE_UPLOAD_BYTES
    max_video_bytes: int = MAX_VIDEO_UPLOAD_BYTES

    @classmethod
    def from_settings(cls) -> "UploadPolicy":
        return cls(
            image_types=frozenset(settings.upload_image_types),
            video_types=frozenset(settings.upload_video_types),
            max_image_bytes=settings.upload_max_image_bytes,
            max_video_bytes=settings.upload_max_video_bytes,
        )

    def classify(self, mime_type: str | None) -> MediaKind:
        """Return the media kind of an allowed MIME type.

        Raises:
            ValidationError: If the type is neither an allowed image nor video
        """
        normalized = (mime_type or "").lower()
        if normalized in self.image_types:
            return MediaKind.IMAGE
        if normalized in self.video_types:
            return MediaKind.VIDEO
        raise ValidationError(
            "Invalid file type. Only images (JPG, PNG, GIF, WebP, SVG) and "
            "videos (MP4, WebM, OGG, MOV) are allowed",
            error_code="invalid_file_type",
            errors=[{"field": "file", "message": f"{mime_type or 'unknown'} is not allowed"}],
        )

    def check(self, mime_type: str | None, size: int | None) -> MediaKind:
        """Validate type and size of an upload.

        A ``size`` of None (unknown) only checks the type.

        Raises:
            ValidationError: If the type is not allowed or the file is too large
        """
        kind = self.classify(mime_type)
        limit = self.max_video_bytes if kind == MediaKind.VIDEO else self.max_image_bytes
        if size is None:
            return kind
        if size > limit:
            raise ValidationError(
                f"File too large. Maximum size is {limit // _MB}MB for {kind.value}s",
                error_code="file_too_large",
                errors=[{"field": "file", "message": f"{size} bytes exceeds {limit}"}],
            )
        if size == 0:
            raise ValidationError(
                "File is empty",
                error_code="empty_file",
                errors=[{"field": "file", "message": "no content"}],
            )
        return kind


def tenant_prefix(prefix: str, tenant_id: str) -> str:
    """Key prefix under which one tenant's uploads are stored."""
    return f"{prefix.strip('/')}/{_UNSAFE_NAME_CHARS.sub('_', tenant_id)}"


def build_pathname(
    filename: str | None,
    prefix: str,
    tenant_id: str,
    now_ms: int | None = None,
) -> str:
    """Build the object key for an upload.

    Characters other than letters, digits, dot and dash become ``_`` and
    the name is lowercased: ``{prefix}/{tenant_id}/{epoch_ms}-{safe_name}``.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    safe_name = _UNSAFE_NAME_CHARS.sub("_", filename or "upload").lower()
    return f"{tenant_prefix(prefix, tenant_id)}/{now_ms}-{safe_name}"


def is_tenant_url(url: str, prefix: str, tenant_id: str) -> bool:
    """Check that a stored file URL lies under the tenant's key prefix."""
    try:
        path = httpx.URL(url).path
    except httpx.InvalidURL:
        return False
    segments = path.split("/")
    if ".." in segments or "." in segments:
        return False
    return path.startswith(f"/{tenant_prefix(prefix, tenant_id)}/")


class UploadService:
    """Service for banner media uploads."""

    def __init__(
        self,
        storage: Annotated[BlobStorage, Depends(get_blob_storage)],
    ) -> None:
        self.storage = storage
        self.policy = UploadPolicy.from_settings()

    def precheck(self, mime_type: str | None, declared_size: int | None) -> None:
        """Reject a file from its declared type and size before it is read.

        Raises:
            ValidationError: If the file type or size is not allowed
        """
        self.policy.check(mime_type, declared_size)

    async def upload(
        self,
        content: bytes,
        filename: str | None,
        mime_type: str | None,
        tenant_id: str,
    ) -> UploadResponse:
        """Validate and store a file.

        Validation happens before any storage call.

        Raises:
            ValidationError: If the file type or size is not allowed
            UpstreamError: If blob storage fails
        """
        kind = self.policy.check(mime_type, len(content))
        pathname = build_pathname(filename, settings.blob_path_prefix, tenant_id)
        # check() guarantees a non-empty, allowed type
        content_type = (mime_type or "").lower()

        blob = await self.storage.put(pathname, content, content_type)
        logger.info(
            "upload_stored",
            tenant_id=tenant_id,
            pathname=blob.pathname,
            kind=kind.value,
            size=len(content),
        )
        return UploadResponse(
            url=blob.url,
            pathname=blob.pathname,
            size=len(content),
            mime_type=content_type,
        )

    async def delete(self, url: str, tenant_id: str) -> None:
        """Delete one of the tenant's stored files by URL.

        Raises:
            UnauthorizedError: If the URL is not under the tenant's prefix
            UpstreamError: If blob storage fails
        """
        if not is_tenant_url(url, settings.blob_path_prefix, tenant_id):
            logger.warning("upload_delete_rejected", tenant_id=tenant_id, url=url)
            raise UnauthorizedError(
                "File does not belong to this tenant",
                error_code="tenant_mismatch",
            )
        await self.storage.delete(url)
        logger.info("upload_deleted", tenant_id=tenant_id, url=url)


# Type alias for dependency injection
UploadSvc = Annotated[UploadService, Depends(UploadService)]
