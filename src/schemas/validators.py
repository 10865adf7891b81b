"""Reusable field validators for request schemas."""
from pydantic import HttpUrl, TypeAdapter, ValidationError

_http_url = TypeAdapter(HttpUrl)


def normalize_email(value: str) -> str:
    """Lowercase and trim an email so uniqueness is case-insensitive."""
    return value.strip().lower()


def validate_link(value: str) -> str:
    """
    Check that a bookmark link is an absolute http(s) URL.

    Returns the value unchanged; HttpUrl would otherwise append a trailing
    slash to bare domains and the stored link would differ from what was sent.
    """
    value = value.strip()
    try:
        _http_url.validate_python(value)
    except ValidationError:
        raise ValueError("link must be a URL address") from None
    return value
