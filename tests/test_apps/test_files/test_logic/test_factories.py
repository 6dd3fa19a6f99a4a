"""Tests for stored file and response factories."""

from datetime import timedelta

import pytest
from django.test import RequestFactory
from django.utils import timezone

from server.apps.files.logic.factories import (
    ResponseFactory,
    create_stored_file,
)


@pytest.mark.django_db
def test_create_stored_file(user):
    """Test stored file is built unsaved with the current time."""
    before = timezone.now()

    stored_file = create_stored_file(
        name='Report',
        path='/srv/files/a.pdf',
        content_type='application/pdf',
        user=user,
    )

    assert stored_file.pk is None
    assert stored_file.name == 'Report'
    assert stored_file.path == '/srv/files/a.pdf'
    assert stored_file.content_type == 'application/pdf'
    assert stored_file.uploader == user
    assert before <= stored_file.created_at <= timezone.now()


@pytest.mark.django_db
class TestResponseFactory:
    """Tests for ResponseFactory."""

    def test_create_metadata_response(self, response_factory, make_stored_file):
        """Test all fields are mapped and the URL is absolute."""
        stored_file = make_stored_file(
            'Report',
            tag_names=['work', 'q1'],
            content_type='application/pdf',
        )

        metadata = response_factory.create_metadata_response(stored_file)

        assert metadata.name == 'Report'
        assert metadata.url == f'http://testserver/files/{stored_file.id}'
        assert metadata.content_type == 'application/pdf'
        assert metadata.created_at == stored_file.created_at
        assert metadata.uploader == 'testuser'
        assert sorted(metadata.tags) == ['q1', 'work']

    def test_path_base_in_url(self, make_stored_file):
        """Test the mount prefix is part of the URL."""
        stored_file = make_stored_file('Report')
        factory = ResponseFactory(
            scheme='https',
            host='example.com:8443',
            path_base='/api',
        )

        metadata = factory.create_metadata_response(stored_file)

        assert metadata.url == (
            f'https://example.com:8443/api/files/{stored_file.id}'
        )

    def test_create_metadata_responses_keeps_order(
        self,
        response_factory,
        make_stored_file,
    ):
        """Test element-wise mapping preserves input order."""
        first = make_stored_file('First')
        second = make_stored_file('Second')

        responses = response_factory.create_metadata_responses([second, first])

        assert [item.name for item in responses] == ['Second', 'First']

    def test_from_request(self, make_stored_file):
        """Test scheme, host and script name come from the request."""
        stored_file = make_stored_file('Report')
        request = RequestFactory().get('/files/', SCRIPT_NAME='/hub')

        factory = ResponseFactory.from_request(request)

        assert factory.create_file_url(stored_file) == (
            f'http://testserver/hub/files/{stored_file.id}'
        )

    def test_as_dict(self, response_factory, make_stored_file):
        """Test JSON shape of metadata."""
        stored_file = make_stored_file('Report', tag_names=['work'])

        data = response_factory.create_metadata_response(stored_file).as_dict()

        assert data == {
            'name': 'Report',
            'url': f'http://testserver/files/{stored_file.id}',
            'contentType': 'text/plain',
            'createdAt': stored_file.created_at.isoformat(),
            'uploader': 'testuser',
            'tags': ['work'],
        }
        assert stored_file.created_at.tzinfo is not None
        assert timezone.now() - stored_file.created_at < timedelta(minutes=1)
