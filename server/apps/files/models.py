"""Database models for files app."""

from pathlib import Path
from typing import Final, final, override

from django.conf import settings
from django.db import models
from django.utils import timezone

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_PATH_MAX_LENGTH: Final = 1024
_CONTENT_TYPE_MAX_LENGTH: Final = 255
_TAG_NAME_MAX_LENGTH: Final = 100


@final
class StoredFile(models.Model):
    """Uploaded file kept on local disk.

    The display ``name`` is chosen by the uploader and is unrelated to
    the on-disk file name, which is generated at upload time and
    stored in ``path``. Records are created once and never updated.
    """

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        help_text='Display name chosen by the uploader',
    )

    path = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        unique=True,
        editable=False,
        help_text='Location of the file on disk',
    )

    content_type = models.CharField(
        max_length=_CONTENT_TYPE_MAX_LENGTH,
        help_text='MIME type declared by the upload',
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
    )

    uploader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='stored_files',
        db_index=True,
    )

    tags = models.ManyToManyField(
        'Tag',
        related_name='stored_files',
        blank=True,
    )

    class Meta:
        """Model metadata."""

        verbose_name = 'Stored file'  # type: ignore[mutable-override]
        verbose_name_plural = 'Stored files'  # type: ignore[mutable-override]
        ordering = ['id']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.name} ({self.get_filename()})'

    def get_filename(self) -> str:
        """Extract the on-disk file name from path.

        Example: '/srv/files/202401011200_<uuid>.pdf' -> '202401011200_<uuid>.pdf'

        Returns:
            File name without directory.
        """
        return Path(self.path).name

    def get_tag_names(self) -> list[str]:
        """Names of all tags attached to this file."""
        return [tag.name for tag in self.tags.all()]


@final
class Tag(models.Model):
    """Label attachable to any number of stored files.

    Names are unique across all users and compared exactly
    (case-sensitive). Tags are created on first use and never renamed.
    """

    name = models.CharField(
        max_length=_TAG_NAME_MAX_LENGTH,
        unique=True,
    )

    class Meta:
        """Model metadata."""

        verbose_name = 'Tag'  # type: ignore[mutable-override]
        verbose_name_plural = 'Tags'  # type: ignore[mutable-override]
        ordering = ['name']

    @override
    def __str__(self) -> str:
        """String representation."""
        return self.name
