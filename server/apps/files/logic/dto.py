"""Data transfer objects passed in and out of the business layer."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, final

from django.core.files.uploadedfile import UploadedFile


@final
@dataclass(frozen=True, slots=True)
class UploadRequest:
    """File upload as submitted by a client.

    ``tags`` is None when the client sent no tags field at all.
    """

    file: UploadedFile | None
    name: str
    tags: list[str] | None = None


@final
@dataclass(frozen=True, slots=True)
class ContentResponse:
    """Raw file content with its MIME type."""

    data: bytes
    content_type: str


@final
@dataclass(frozen=True, slots=True)
class MetaDataResponse:
    """Public metadata of a stored file."""

    name: str
    url: str
    content_type: str
    created_at: datetime
    uploader: str
    tags: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape exposed by the API.

        Returns:
            Dictionary with camelCase keys.
        """
        return {
            'name': self.name,
            'url': self.url,
            'contentType': self.content_type,
            'createdAt': self.created_at.isoformat(),
            'uploader': self.uploader,
            'tags': list(self.tags),
        }
