"""Business logic for tag operations."""

import logging
from collections.abc import Sequence
from typing import final

from server.apps.files.infrastructure.repositories import TagRepository
from server.apps.files.models import Tag

logger = logging.getLogger(__name__)


@final
class TagService:
    """Resolves tag names to Tag records, creating missing ones."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize TagService.

        Args:
            tag_repository: Data access for tags.
        """
        self._tag_repository = tag_repository

    def get_or_create_tags_by_name(self, tag_names: Sequence[str]) -> list[Tag]:
        """Return tags with the given names, creating the missing ones.

        Repeated names collapse to one tag. New tags are inserted in
        a single batch. Names are matched exactly.

        Args:
            tag_names: Requested tag names, duplicates allowed.

        Returns:
            One Tag per distinct name: existing tags first, then new ones.
        """
        # dict keeps first-seen order
        unique_names = list(dict.fromkeys(tag_names))
        if not unique_names:
            return []

        existing_tags = self._tag_repository.get_tags_by_names(unique_names)
        existing_names = {tag.name for tag in existing_tags}

        new_tags = [
            Tag(name=name)
            for name in unique_names
            if name not in existing_names
        ]
        if not new_tags:
            return existing_tags

        created_tags = self._tag_repository.add_range(new_tags)
        logger.info(
            'Created %d new tags: %s',
            len(created_tags),
            ', '.join(tag.name for tag in created_tags),
        )
        return existing_tags + created_tags

    def tag_exists_by_name(self, tag_name: str) -> bool:
        """Check whether a tag with exactly this name exists."""
        return self._tag_repository.tag_exists_by_name(tag_name)
