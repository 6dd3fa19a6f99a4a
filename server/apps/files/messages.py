"""Plain-text messages returned by the files API."""

from typing import Final

# File
FILE_UPLOADED: Final = 'File uploaded'
NO_FILE_UPLOADED: Final = 'No file uploaded'
FILE_NOT_FOUND: Final = 'File not found'
INVALID_PAGE_REQUESTED: Final = 'Invalid page requested'

# Tag
INVALID_TAG_NAME: Final = 'Invalid tag name'
TAG_NOT_FOUND: Final = 'Tag not found'

# User
NOT_LOGGED_IN: Final = 'You are not logged in'

# Misc.
INTERNAL_SERVER_ERROR: Final = 'Internal server error'
UNHANDLED_EXCEPTION: Final = (
    'An unhandled exception occurred while processing the request.'
)
