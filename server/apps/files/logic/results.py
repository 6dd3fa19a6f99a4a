"""Result values returned by business operations."""

import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, final

_T = TypeVar('_T')


class FileError(enum.StrEnum):
    """Reasons a file operation can fail."""

    NO_FILE_UPLOADED = 'no_file_uploaded'
    INVALID_TAG_NAME = 'invalid_tag_name'
    TAG_NOT_FOUND = 'tag_not_found'
    INVALID_PAGE = 'invalid_page'
    FILE_STORAGE_ERROR = 'file_storage_error'


@final
@dataclass(frozen=True, slots=True)
class Result(Generic[_T]):
    """Outcome of an operation: success with optional content, or failure.

    A successful result may carry ``None`` as content. Combined with
    an optional content type this separates three outcomes: failure,
    success without data, and success with data.
    """

    is_success: bool
    error: FileError | None = None
    content: _T | None = None

    @classmethod
    def success(cls, content: _T | None = None) -> 'Result[_T]':
        """Create a successful result."""
        return cls(is_success=True, content=content)

    @classmethod
    def failure(cls, error: FileError) -> 'Result[_T]':
        """Create a failed result with the given reason."""
        return cls(is_success=False, error=error)
