"""File storage configuration.

Uploaded files are written to a local directory. The directory is
injected into the storage service when it is built, see
``server.apps.files.infrastructure.storage.get_storage_service``.
"""

from typing import Final

from server.settings.components import BASE_DIR, config

FILE_DIRECTORY: Final = config(
    'FILE_DIRECTORY',
    default=str(BASE_DIR.joinpath('media', 'files')),
)
