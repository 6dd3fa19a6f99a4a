"""Shared fixtures for files app tests."""

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile

from server.apps.files.infrastructure.repositories import (
    FileRepository,
    TagRepository,
)
from server.apps.files.infrastructure.storage import StorageService
from server.apps.files.logic.factories import ResponseFactory
from server.apps.files.logic.file_operations import FileService
from server.apps.files.logic.tag_operations import TagService
from server.apps.files.models import StoredFile, Tag

User = get_user_model()


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def file_directory(settings, tmp_path):
    """Point FILE_DIRECTORY at a temporary directory.

    Returns:
        Path of the directory.
    """
    directory = tmp_path / 'files'
    directory.mkdir()
    settings.FILE_DIRECTORY = str(directory)
    return directory


@pytest.fixture
def storage_service(file_directory):
    """Storage service writing to the temporary directory.

    Returns:
        StorageService instance.
    """
    return StorageService(str(file_directory))


@pytest.fixture
def file_repository():
    """File repository over the test database."""
    return FileRepository()


@pytest.fixture
def tag_repository():
    """Tag repository over the test database."""
    return TagRepository()


@pytest.fixture
def tag_service(tag_repository):
    """Tag service over the real tag repository."""
    return TagService(tag_repository)


@pytest.fixture
def response_factory():
    """Response factory for http://testserver.

    Returns:
        ResponseFactory instance.
    """
    return ResponseFactory(scheme='http', host='testserver')


@pytest.fixture
def file_service(storage_service, tag_service, file_repository, response_factory):
    """File service wired with real collaborators.

    Returns:
        FileService instance.
    """
    return FileService(
        storage_service=storage_service,
        tag_service=tag_service,
        file_repository=file_repository,
        response_factory=response_factory,
    )


@pytest.fixture
def sample_upload():
    """Sample uploaded file.

    Returns:
        SimpleUploadedFile with test data.
    """
    return SimpleUploadedFile(
        'test.txt',
        b'test file content',
        content_type='text/plain',
    )


@pytest.fixture
def make_stored_file(user, file_directory):
    """Factory creating stored files on disk and in the database.

    Returns:
        Callable taking a display name, content and tag names.
    """
    def factory(
        name='document',
        content=b'stored content',
        tag_names=(),
        content_type='text/plain',
        uploader=None,
    ):
        path = file_directory / f'{name}-{StoredFile.objects.count()}.bin'
        path.write_bytes(content)
        stored_file = StoredFile.objects.create(
            name=name,
            path=str(path),
            content_type=content_type,
            uploader=uploader or user,
        )
        tags = [Tag.objects.get_or_create(name=tag_name)[0] for tag_name in tag_names]
        stored_file.tags.set(tags)
        return stored_file

    return factory
