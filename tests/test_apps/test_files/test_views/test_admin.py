"""Tests for read-only admin pages."""

from http import HTTPStatus

import pytest


@pytest.mark.django_db
def test_stored_file_changelist(admin_client, make_stored_file):
    """Test stored files are listed with their tags."""
    make_stored_file('Report', tag_names=['work'])

    response = admin_client.get('/admin/files/storedfile/')

    assert response.status_code == HTTPStatus.OK
    assert b'Report' in response.content
    assert b'work' in response.content


@pytest.mark.django_db
def test_tag_changelist(admin_client, make_stored_file):
    """Test tags are listed."""
    make_stored_file('Report', tag_names=['holiday'])

    response = admin_client.get('/admin/files/tag/')

    assert response.status_code == HTTPStatus.OK
    assert b'holiday' in response.content


@pytest.mark.django_db
def test_stored_file_add_forbidden(admin_client):
    """Test records cannot be created from the admin."""
    response = admin_client.get('/admin/files/storedfile/add/')

    assert response.status_code == HTTPStatus.FORBIDDEN


@pytest.mark.django_db
def test_stored_file_delete_forbidden(admin_client, make_stored_file):
    """Test records cannot be deleted from the admin."""
    stored_file = make_stored_file('Report')

    response = admin_client.post(
        f'/admin/files/storedfile/{stored_file.id}/delete/',
        {'post': 'yes'},
    )

    assert response.status_code == HTTPStatus.FORBIDDEN
    assert stored_file.__class__.objects.filter(id=stored_file.id).exists()
