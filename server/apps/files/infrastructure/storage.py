"""Local disk storage for uploaded files."""

import logging
import uuid
from pathlib import Path
from typing import Final, final

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.files.uploadedfile import UploadedFile
from django.utils import timezone

from server.apps.files.infrastructure.metadata import get_file_extension

logger = logging.getLogger(__name__)

# Minute precision, e.g. 202401311542
_TIMESTAMP_FORMAT: Final = '%Y%m%d%H%M'


@final
class StorageService:
    """Writes uploaded files to a configured directory.

    Every stored file gets a fresh name built from a UTC timestamp and a
    random UUID, so concurrent uploads never target the same path.
    The original extension is preserved.
    """

    def __init__(self, file_directory: str) -> None:
        """Initialize the storage service.

        Args:
            file_directory: Root directory for stored files.
        """
        self._file_directory = file_directory

    def get_file_directory(self) -> str:
        """Get the directory where files are stored.

        Returns:
            Configured root directory.
        """
        return self._file_directory

    def is_valid_file(self, file: UploadedFile | None) -> bool:
        """Check that a file was uploaded and is not empty.

        Args:
            file: Uploaded file, or None when the request had none.

        Returns:
            True if the file is present and has a non-zero size.
        """
        return file is not None and bool(file.size)

    def create_file_name(self, file: UploadedFile) -> str:
        """Create a unique file name from a timestamp and a random UUID.

        Example: 'photo.JPG' -> '202401311542_<uuid4>.JPG'

        Args:
            file: Uploaded file, used for its extension.

        Returns:
            New file name.
        """
        timestamp = timezone.now().strftime(_TIMESTAMP_FORMAT)
        extension = get_file_extension(file.name)
        return f'{timestamp}_{uuid.uuid4()}{extension}'

    def create_file_path(self, file: UploadedFile) -> str:
        """Create the destination path for a new file.

        Args:
            file: Uploaded file.

        Returns:
            Path inside the configured directory.
        """
        return str(Path(self._file_directory) / self.create_file_name(file))

    def save_file_to_path(self, file: UploadedFile, path: str) -> None:
        """Stream the uploaded file to disk.

        The destination is created, or truncated if it already exists.

        Args:
            file: Uploaded file to write.
            path: Destination path.

        Raises:
            OSError: If the destination cannot be created or written.
        """
        try:
            logger.info('Writing file to disk: %s', path)
            with open(path, 'wb') as destination:
                for chunk in file.chunks():
                    destination.write(chunk)
        except OSError:
            logger.exception('Failed to write file to disk: %s', path)
            raise
        logger.info('Successfully wrote file: %s', path)

    def read_file_from_path(self, path: str) -> bytes:
        """Read a stored file completely.

        Args:
            path: Path of a previously stored file.

        Returns:
            File content.

        Raises:
            OSError: If the file is missing or unreadable.
        """
        return Path(path).read_bytes()


def get_storage_service() -> StorageService:
    """Build a storage service for the configured directory.

    Returns:
        StorageService writing to ``settings.FILE_DIRECTORY``.

    Raises:
        ImproperlyConfigured: If no file directory is configured.
    """
    file_directory = getattr(settings, 'FILE_DIRECTORY', '')
    if not file_directory:
        raise ImproperlyConfigured('FILE_DIRECTORY setting must not be empty')
    return StorageService(str(file_directory))
