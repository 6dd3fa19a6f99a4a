"""Tests for tag operations business logic."""

from unittest import mock

import pytest

from server.apps.files.models import Tag


@pytest.mark.django_db
class TestGetOrCreateTagsByName:
    """Tests for TagService.get_or_create_tags_by_name."""

    def test_creates_missing_tags(self, tag_service):
        """Test all tags are created when none exist."""
        tags = tag_service.get_or_create_tags_by_name(['work', 'home'])

        assert sorted(tag.name for tag in tags) == ['home', 'work']
        assert Tag.objects.count() == 2

    def test_returns_existing_tags(self, tag_service, tag_repository):
        """Test existing tags are reused without any insert."""
        existing = Tag.objects.create(name='work')

        with mock.patch.object(
            tag_repository,
            'add_range',
            wraps=tag_repository.add_range,
        ) as add_range:
            tags = tag_service.get_or_create_tags_by_name(['work'])

        assert tags == [existing]
        add_range.assert_not_called()

    def test_creates_only_missing(self, tag_service, tag_repository):
        """Test only names without a tag are inserted, in one batch."""
        existing = Tag.objects.create(name='work')

        with mock.patch.object(
            tag_repository,
            'add_range',
            wraps=tag_repository.add_range,
        ) as add_range:
            tags = tag_service.get_or_create_tags_by_name(['work', 'home', 'q1'])

        add_range.assert_called_once()
        inserted = add_range.call_args.args[0]
        assert sorted(tag.name for tag in inserted) == ['home', 'q1']
        assert tags[0] == existing
        assert sorted(tag.name for tag in tags) == ['home', 'q1', 'work']

    def test_duplicate_names_collapse(self, tag_service):
        """Test repeated names produce one tag each."""
        tags = tag_service.get_or_create_tags_by_name(
            ['work', 'work', 'home', 'work'],
        )

        assert len(tags) == 2
        assert Tag.objects.count() == 2

    def test_empty_input(self, tag_service, tag_repository):
        """Test empty input returns nothing and touches no store."""
        with mock.patch.object(tag_repository, 'get_tags_by_names') as lookup:
            with mock.patch.object(tag_repository, 'add_range') as add_range:
                tags = tag_service.get_or_create_tags_by_name([])

        assert tags == []
        lookup.assert_not_called()
        add_range.assert_not_called()

    def test_repeated_calls_are_idempotent(self, tag_service):
        """Test calling again with the same names creates no duplicates."""
        first = tag_service.get_or_create_tags_by_name(['work', 'home'])
        second = tag_service.get_or_create_tags_by_name(['home', 'work'])

        assert Tag.objects.count() == 2
        assert {tag.pk for tag in first} == {tag.pk for tag in second}

    def test_names_are_case_sensitive(self, tag_service):
        """Test names differing in case are separate tags."""
        Tag.objects.create(name='work')

        tags = tag_service.get_or_create_tags_by_name(['Work'])

        assert [tag.name for tag in tags] == ['Work']
        assert Tag.objects.count() == 2


@pytest.mark.django_db
def test_tag_exists_by_name(tag_service):
    """Test existence check is delegated to the repository."""
    Tag.objects.create(name='work')

    assert tag_service.tag_exists_by_name('work') is True
    assert tag_service.tag_exists_by_name('home') is False
