"""Metadata helpers for uploaded files."""

import mimetypes
from pathlib import Path
from typing import Final

_DEFAULT_MIME_TYPE: Final = 'application/octet-stream'


def detect_mime_type(filename: str | None) -> str:
    """Guess MIME type from the filename extension.

    Used only when the upload does not declare a content type.

    Args:
        filename: Filename with extension, may be missing.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'application/pdf').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    if not filename:
        return _DEFAULT_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return _DEFAULT_MIME_TYPE
    return mime_type


def get_file_extension(filename: str | None) -> str:
    """Get file extension from filename, keeping the leading dot.

    Args:
        filename: Filename (e.g., 'document.pdf'), may be missing.

    Returns:
        Extension with dot and original case (e.g., '.pdf').
        Returns empty string if there is no extension. A dot-file such
        as '.bashrc' is all extension.
    """
    if not filename:
        return ''
    name = Path(filename).name
    if name.startswith('.') and '.' not in name[1:]:
        return name
    return Path(name).suffix
