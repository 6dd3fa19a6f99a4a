"""HTTP views for the files API.

Views only translate between HTTP and the business layer: they bind
request data, call ``FileService`` and map results to responses.
"""

import functools
import logging
from collections.abc import Callable
from http import HTTPStatus
from typing import Final

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from server.apps.files import messages
from server.apps.files.forms import UploadForm
from server.apps.files.logic.dto import UploadRequest
from server.apps.files.logic.file_operations import get_file_service
from server.apps.files.logic.results import FileError

logger = logging.getLogger(__name__)

_View = Callable[..., HttpResponse]

# Error kinds without an entry map to 500
_ERROR_RESPONSES: Final[dict[FileError, tuple[HTTPStatus, str]]] = {
    FileError.NO_FILE_UPLOADED: (HTTPStatus.BAD_REQUEST, messages.NO_FILE_UPLOADED),
    FileError.INVALID_TAG_NAME: (HTTPStatus.BAD_REQUEST, messages.INVALID_TAG_NAME),
    FileError.TAG_NOT_FOUND: (HTTPStatus.NOT_FOUND, messages.TAG_NOT_FOUND),
    FileError.INVALID_PAGE: (
        HTTPStatus.BAD_REQUEST,
        messages.INVALID_PAGE_REQUESTED,
    ),
}


def _text_response(
    message: str,
    status: HTTPStatus = HTTPStatus.OK,
) -> HttpResponse:
    return HttpResponse(message, status=status, content_type='text/plain')


def _error_response(error: FileError | None) -> HttpResponse:
    """Map a business error to an HTTP response.

    Args:
        error: Error kind from a failed result.

    Returns:
        Plain-text response with the matching status code.
    """
    status, message = _ERROR_RESPONSES.get(
        error,  # type: ignore[arg-type]
        (HTTPStatus.INTERNAL_SERVER_ERROR, messages.INTERNAL_SERVER_ERROR),
    )
    return _text_response(message, status)


def api_login_required(view: _View) -> _View:
    """Reject anonymous requests with 401 instead of a login redirect.

    Args:
        view: View function to protect.

    Returns:
        Wrapped view.
    """
    @functools.wraps(view)
    def wrapper(request: HttpRequest, *args: object, **kwargs: object) -> HttpResponse:
        if not request.user.is_authenticated:
            return _text_response(messages.NOT_LOGGED_IN, HTTPStatus.UNAUTHORIZED)
        return view(request, *args, **kwargs)

    return wrapper


def _query_int(request: HttpRequest, key: str) -> int | None:
    """Read an integer query parameter, defaulting to 0 when missing.

    Returns:
        Parsed value, or None if the value is not an integer.
    """
    try:
        return int(request.GET.get(key, '0'))
    except ValueError:
        return None


@require_POST
@api_login_required
def upload_file(request: HttpRequest) -> HttpResponse:
    """Upload a file with a display name and optional tags."""
    form = UploadForm(request.POST)
    if not form.is_valid():
        return JsonResponse(
            {'errors': form.errors.get_json_data()},
            status=HTTPStatus.BAD_REQUEST,
        )

    uploaded_file = request.FILES.get('file')
    file_name = uploaded_file.name if uploaded_file else None
    username = request.user.get_username()
    logger.info('File %s upload requested by %s', file_name, username)

    upload_request = UploadRequest(
        file=uploaded_file,
        name=form.cleaned_data['name'],
        # No tags field at all is different from an empty one
        tags=request.POST.getlist('tags') if 'tags' in request.POST else None,
    )
    result = get_file_service(request).add_file(upload_request, request.user)

    if not result.is_success:
        logger.warning(
            'File %s upload failed for %s with error %s',
            file_name,
            username,
            result.error,
        )
        return _error_response(result.error)

    logger.info('File %s uploaded successfully by %s', file_name, username)
    return _text_response(messages.FILE_UPLOADED)


@require_GET
@api_login_required
def file_content(request: HttpRequest, file_id: int) -> HttpResponse:
    """Return the raw content of a file."""
    content = get_file_service(request).get_file_content_by_id(file_id)
    if content is None:
        return _text_response(messages.FILE_NOT_FOUND, HTTPStatus.NOT_FOUND)
    return HttpResponse(content.data, content_type=content.content_type)


@require_GET
@api_login_required
def file_metadata(request: HttpRequest, file_id: int) -> HttpResponse:
    """Return the metadata of a file."""
    metadata = get_file_service(request).get_file_metadata_by_id(file_id)
    if metadata is None:
        return _text_response(messages.FILE_NOT_FOUND, HTTPStatus.NOT_FOUND)
    return JsonResponse(metadata.as_dict())


@require_GET
@api_login_required
def files_by_tag(request: HttpRequest, tag_name: str) -> HttpResponse:
    """Return metadata of all files with a tag."""
    result = get_file_service(request).get_all_files_by_tag(tag_name)
    if not result.is_success:
        return _error_response(result.error)

    metadata = result.content or []
    return JsonResponse([item.as_dict() for item in metadata], safe=False)


@require_GET
@api_login_required
def paginated_files(request: HttpRequest) -> HttpResponse:
    """Return metadata of one page of files.

    Query parameters: ``page`` (zero-based) and ``size``.
    """
    page = _query_int(request, 'page')
    size = _query_int(request, 'size')
    if page is None or size is None:
        return _error_response(FileError.INVALID_PAGE)

    result = get_file_service(request).get_paginated_files(page, size)
    if not result.is_success:
        return _error_response(result.error)

    metadata = result.content or []
    return JsonResponse([item.as_dict() for item in metadata], safe=False)
