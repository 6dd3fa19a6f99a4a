"""Django admin configuration for files app.

Stored files and tags are never edited or deleted once created, so
both admins are read-only inspection views.
"""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.files.models import StoredFile, Tag


class _ReadOnlyAdmin(admin.ModelAdmin):
    """Admin without add, change or delete permissions."""

    def has_add_permission(self, request: HttpRequest) -> bool:
        return False

    def has_change_permission(
        self,
        request: HttpRequest,
        obj: object | None = None,
    ) -> bool:
        return False

    def has_delete_permission(
        self,
        request: HttpRequest,
        obj: object | None = None,
    ) -> bool:
        return False


@admin.register(StoredFile)
class StoredFileAdmin(_ReadOnlyAdmin):
    """Admin interface for StoredFile model."""

    list_display = [
        'name',
        'filename_display',
        'content_type',
        'uploader',
        'tags_display',
        'created_at',
    ]

    list_filter = [
        'content_type',
        'created_at',
        'uploader',
    ]

    search_fields = [
        'name',
        'path',
        'tags__name',
    ]

    readonly_fields = [
        'name',
        'path',
        'content_type',
        'created_at',
        'uploader',
        'tags',
    ]

    fieldsets = (
        ('File Information', {
            'fields': ('name', 'path', 'content_type'),
        }),
        ('Ownership', {
            'fields': ('uploader', 'created_at'),
        }),
        ('Tags', {
            'fields': ('tags',),
        }),
    )

    def filename_display(self, obj: StoredFile) -> str:
        """Display the on-disk file name.

        Args:
            obj: StoredFile instance.

        Returns:
            File name without directory.
        """
        return obj.get_filename()
    filename_display.short_description = 'File on disk'  # type: ignore[attr-defined]

    def tags_display(self, obj: StoredFile) -> str:
        """Display comma-separated tag names.

        Args:
            obj: StoredFile instance.

        Returns:
            Tag names, or '-' when untagged.
        """
        return ', '.join(obj.get_tag_names()) or '-'
    tags_display.short_description = 'Tags'  # type: ignore[attr-defined]

    def get_queryset(self, request: HttpRequest) -> QuerySet[StoredFile]:
        """Load uploader and tags with the list."""
        queryset = super().get_queryset(request)
        return queryset.select_related('uploader').prefetch_related('tags')


@admin.register(Tag)
class TagAdmin(_ReadOnlyAdmin):
    """Admin interface for Tag model."""

    list_display = ['name', 'file_count']
    search_fields = ['name']

    def file_count(self, obj: Tag) -> int:
        """Display number of files carrying the tag.

        Args:
            obj: Tag instance.

        Returns:
            Number of stored files.
        """
        return obj.stored_files.count()
    file_count.short_description = 'Files'  # type: ignore[attr-defined]
