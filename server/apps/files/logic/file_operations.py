"""Business logic for file operations.

Upload ordering: tags are resolved and the destination path computed
first, then the file is written to disk, and only after a successful
write is the metadata record inserted. A failed write leaves no record.
A failed insert after a successful write leaves an orphaned file on
disk, which ``find_orphaned_files`` reports.
"""

import logging
from typing import Any, final

from django.http import HttpRequest

from server.apps.files.infrastructure.metadata import detect_mime_type
from server.apps.files.infrastructure.repositories import (
    FileRepository,
    TagRepository,
)
from server.apps.files.infrastructure.storage import (
    StorageService,
    get_storage_service,
)
from server.apps.files.logic.dto import (
    ContentResponse,
    MetaDataResponse,
    UploadRequest,
)
from server.apps.files.logic.factories import (
    ResponseFactory,
    create_stored_file,
)
from server.apps.files.logic.results import FileError, Result
from server.apps.files.logic.tag_operations import TagService
from server.apps.files.models import Tag

# Django's dynamic user model
_User = Any

logger = logging.getLogger(__name__)


@final
class FileService:
    """Coordinates uploads and lookups of stored files.

    Holds no state between calls; build one per request with
    ``get_file_service``.
    """

    def __init__(  # noqa: WPS211
        self,
        storage_service: StorageService,
        tag_service: TagService,
        file_repository: FileRepository,
        response_factory: ResponseFactory,
    ) -> None:
        """Initialize FileService.

        Args:
            storage_service: Disk storage for file content.
            tag_service: Tag resolution.
            file_repository: Data access for stored files.
            response_factory: Builds metadata responses.
        """
        self._storage_service = storage_service
        self._tag_service = tag_service
        self._file_repository = file_repository
        self._response_factory = response_factory

    def add_file(self, upload_request: UploadRequest, user: _User) -> Result[None]:
        """Write an uploaded file to disk and record it in the database.

        Args:
            upload_request: File, display name and optional tag names.
            user: Uploader.

        Returns:
            Success, or failure with NO_FILE_UPLOADED when the file is
            missing or empty, or FILE_STORAGE_ERROR when the disk write
            fails.
        """
        uploaded_file = upload_request.file
        if not self._storage_service.is_valid_file(uploaded_file):
            return Result.failure(FileError.NO_FILE_UPLOADED)

        tags: list[Tag] = []
        if upload_request.tags is not None:
            tags = self._tag_service.get_or_create_tags_by_name(
                upload_request.tags,
            )

        path = self._storage_service.create_file_path(uploaded_file)
        stored_file = create_stored_file(
            name=upload_request.name,
            path=path,
            content_type=(
                uploaded_file.content_type
                or detect_mime_type(uploaded_file.name)
            ),
            user=user,
        )

        try:
            self._storage_service.save_file_to_path(
                uploaded_file,
                stored_file.path,
            )
        except Exception:
            logger.exception(
                'File %s could not be saved at %s',
                uploaded_file.name,
                stored_file.path,
            )
            return Result.failure(FileError.FILE_STORAGE_ERROR)

        logger.info('File %s saved at %s', uploaded_file.name, stored_file.path)
        self._file_repository.add(stored_file, tags)
        return Result.success()

    def get_file_content_by_id(self, file_id: int) -> ContentResponse | None:
        """Fetch the content of a stored file.

        A record whose file is missing on disk is not handled here:
        the read error propagates.

        Returns:
            The content, or None if the id is invalid or unknown.
        """
        if file_id <= 0:
            return None

        stored_file = self._file_repository.get_by_id(file_id)
        if stored_file is None:
            return None

        return ContentResponse(
            data=self._storage_service.read_file_from_path(stored_file.path),
            content_type=stored_file.content_type,
        )

    def get_file_metadata_by_id(self, file_id: int) -> MetaDataResponse | None:
        """Fetch the metadata of a stored file.

        Returns:
            The metadata, or None if the id is invalid or unknown.
        """
        if file_id <= 0:
            return None

        stored_file = self._file_repository.get_by_id(file_id)
        if stored_file is None:
            return None

        return self._response_factory.create_metadata_response(stored_file)

    def get_all_files_by_tag(
        self,
        tag_name: str,
    ) -> Result[list[MetaDataResponse]]:
        """Fetch metadata of all files carrying a tag.

        Returns:
            Failure with INVALID_TAG_NAME for a blank name, or
            TAG_NOT_FOUND for an unknown tag. Success with None content
            when the tag exists but no file carries it, otherwise
            success with the metadata list.
        """
        if not tag_name or tag_name.isspace():
            return Result.failure(FileError.INVALID_TAG_NAME)

        if not self._tag_service.tag_exists_by_name(tag_name):
            return Result.failure(FileError.TAG_NOT_FOUND)

        stored_files = self._file_repository.get_all_by_tag(tag_name)
        if not stored_files:
            return Result.success(None)

        return Result.success(
            self._response_factory.create_metadata_responses(stored_files),
        )

    def get_paginated_files(
        self,
        page: int,
        page_size: int,
    ) -> Result[list[MetaDataResponse]]:
        """Fetch metadata of one page of files, ordered by id.

        Args:
            page: Zero-based page number.
            page_size: Number of files per page.

        Returns:
            Failure with INVALID_PAGE for a negative page or a
            non-positive page size, otherwise success with the page
            (empty past the last page).
        """
        if page < 0 or page_size <= 0:
            return Result.failure(FileError.INVALID_PAGE)

        stored_files = self._file_repository.get_paginated_files(page, page_size)
        return Result.success(
            self._response_factory.create_metadata_responses(stored_files),
        )


def get_file_service(request: HttpRequest) -> FileService:
    """Build a FileService wired for the current request.

    Args:
        request: Current request, used for public file URLs.

    Returns:
        FileService instance.
    """
    return FileService(
        storage_service=get_storage_service(),
        tag_service=TagService(TagRepository()),
        file_repository=FileRepository(),
        response_factory=ResponseFactory.from_request(request),
    )
