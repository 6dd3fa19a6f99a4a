"""Builders for stored file records and API responses."""

from collections.abc import Iterable
from typing import Any, final

from django.http import HttpRequest
from django.utils import timezone

from server.apps.files.logic.dto import MetaDataResponse
from server.apps.files.models import StoredFile

# Django's dynamic user model
_User = Any


def create_stored_file(
    name: str,
    path: str,
    content_type: str,
    user: _User,
) -> StoredFile:
    """Create an unsaved stored file stamped with the current UTC time.

    Tags are attached when the record is inserted, since a
    many-to-many relation needs a saved row.

    Args:
        name: Display name chosen by the uploader.
        path: Destination path on disk.
        content_type: MIME type of the upload.
        user: Uploader.

    Returns:
        Unsaved StoredFile instance.
    """
    return StoredFile(
        name=name,
        path=path,
        content_type=content_type,
        created_at=timezone.now(),
        uploader=user,
    )


@final
class ResponseFactory:
    """Maps stored files to public metadata responses.

    File URLs are absolute: ``{scheme}://{host}{path_base}/files/{id}``.
    """

    def __init__(self, scheme: str, host: str, path_base: str = '') -> None:
        """Initialize the factory with the caller's request context.

        Args:
            scheme: URL scheme, e.g. 'https'.
            host: Host with optional port.
            path_base: Prefix the application is mounted under.
        """
        self._base_url = f'{scheme}://{host}{path_base}'

    @classmethod
    def from_request(cls, request: HttpRequest) -> 'ResponseFactory':
        """Build a factory from the current request."""
        return cls(
            scheme=request.scheme or 'http',
            host=request.get_host(),
            path_base=request.META.get('SCRIPT_NAME', ''),
        )

    def create_file_url(self, stored_file: StoredFile) -> str:
        """Public URL of a file's content."""
        return f'{self._base_url}/files/{stored_file.id}'

    def create_metadata_response(
        self,
        stored_file: StoredFile,
    ) -> MetaDataResponse:
        """Create a metadata response from a stored file."""
        return MetaDataResponse(
            name=stored_file.name,
            url=self.create_file_url(stored_file),
            content_type=stored_file.content_type,
            created_at=stored_file.created_at,
            uploader=stored_file.uploader.get_username(),
            tags=stored_file.get_tag_names(),
        )

    def create_metadata_responses(
        self,
        stored_files: Iterable[StoredFile],
    ) -> list[MetaDataResponse]:
        """Create metadata responses, keeping the input order."""
        return [
            self.create_metadata_response(stored_file)
            for stored_file in stored_files
        ]
