"""Repositories over the relational store.

Plain data access with no business validation. All ORM queries for
stored files and tags live here.
"""

import logging
from collections.abc import Iterable
from typing import Final, final

from django.db import transaction
from django.db.models import QuerySet

from server.apps.files.models import StoredFile, Tag

logger = logging.getLogger(__name__)

# Largest LIMIT and OFFSET a signed 64-bit column store accepts
_MAX_BIGINT: Final = 2**63 - 1


def _with_relations(queryset: QuerySet[StoredFile]) -> QuerySet[StoredFile]:
    """Load uploader and tags together with the files."""
    return queryset.select_related('uploader').prefetch_related('tags')


@final
class FileRepository:
    """Data access for StoredFile records."""

    def add(
        self,
        stored_file: StoredFile,
        tags: Iterable[Tag] = (),
    ) -> StoredFile:
        """Insert a stored file and attach its tags.

        Commits immediately. Tags must already be saved.

        Args:
            stored_file: Unsaved StoredFile instance.
            tags: Tags to attach.

        Returns:
            The saved instance with its id assigned.
        """
        tags = list(tags)
        with transaction.atomic():
            stored_file.save()
            if tags:
                stored_file.tags.set(tags)
        logger.info(
            'Stored file record created: %s (ID: %d)',
            stored_file.path,
            stored_file.id,
        )
        return stored_file

    def get_by_id(self, file_id: int) -> StoredFile | None:
        """Fetch a stored file with uploader and tags.

        Returns:
            The StoredFile instance or None if not found.
        """
        return _with_relations(StoredFile.objects.filter(id=file_id)).first()

    def get_all_by_tag(self, tag_name: str) -> list[StoredFile]:
        """Fetch all stored files carrying a tag with exactly this name.

        Returns:
            A list of StoredFile instances, empty if none match.
        """
        return list(
            _with_relations(StoredFile.objects.filter(tags__name=tag_name)),
        )

    def get_paginated_files(self, page: int, page_size: int) -> list[StoredFile]:
        """Fetch one page of stored files ordered by id.

        Args:
            page: Zero-based page number.
            page_size: Number of files per page.

        Returns:
            Up to ``page_size`` files, empty past the last page.
        """
        offset = page * page_size
        if offset > _MAX_BIGINT:
            return []
        limit = min(page_size, _MAX_BIGINT)
        queryset = _with_relations(StoredFile.objects.order_by('id'))
        return list(queryset[offset:offset + limit])


@final
class TagRepository:
    """Data access for Tag records."""

    def add_range(self, tags: Iterable[Tag]) -> list[Tag]:
        """Insert several tags in one batch.

        Returns:
            The saved tags.
        """
        return Tag.objects.bulk_create(list(tags))

    def get_tags_by_names(self, tag_names: Iterable[str]) -> list[Tag]:
        """Fetch all tags whose name is in the given names."""
        return list(Tag.objects.filter(name__in=list(tag_names)))

    def tag_exists_by_name(self, tag_name: str) -> bool:
        """Check whether a tag with exactly this name exists."""
        return Tag.objects.filter(name=tag_name).exists()
