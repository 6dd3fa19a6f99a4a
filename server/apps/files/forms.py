"""Forms for the files API."""

from typing import Final

from django import forms

_NAME_MAX_LENGTH: Final = 255


class UploadForm(forms.Form):
    """Upload fields validated before reaching business logic.

    The file is not a form field: a missing or empty file is reported
    by the upload operation itself as NO_FILE_UPLOADED.
    """

    name = forms.CharField(max_length=_NAME_MAX_LENGTH)
