"""Tests for metadata utilities."""

from server.apps.files.infrastructure.metadata import (
    detect_mime_type,
    get_file_extension,
)


def test_detect_mime_type():
    """Test MIME type detection from filename."""
    assert detect_mime_type('test.pdf') == 'application/pdf'
    assert detect_mime_type('test.txt') == 'text/plain'
    assert detect_mime_type('test.png') == 'image/png'


def test_detect_mime_type_unknown():
    """Test MIME type detection for unknown extension or no name."""
    assert detect_mime_type('test.unknown') == 'application/octet-stream'
    assert detect_mime_type(None) == 'application/octet-stream'


def test_get_file_extension():
    """Test file extension keeps the dot and the original case."""
    assert get_file_extension('test.pdf') == '.pdf'
    assert get_file_extension('test.TXT') == '.TXT'
    assert get_file_extension('test.tar.gz') == '.gz'  # Last extension


def test_get_file_extension_missing():
    """Test empty extension for names without one."""
    assert get_file_extension('README') == ''
    assert get_file_extension('') == ''
    assert get_file_extension(None) == ''


def test_get_file_extension_dot_file():
    """Test a leading-dot name is kept whole as the extension."""
    assert get_file_extension('.bashrc') == '.bashrc'
    assert get_file_extension('home/.profile') == '.profile'
    assert get_file_extension('.config.json') == '.json'
    assert get_file_extension('..') == ''
