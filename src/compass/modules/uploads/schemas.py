"""Pydantic schemas for upload operations."""

from enum import StrEnum

from compass.core.schemas import CamelModel


class MediaKind(StrEnum):
    """Broad class of an uploaded file."""

    IMAGE = "image"
    VIDEO = "video"


class UploadResponse(CamelModel):
    """Stored file details: ``{url, pathname, size, mimeType}``."""

    url: str
    pathname: str
    size: int
    mime_type: str
