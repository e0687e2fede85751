# weather_relay/api/forms.py
"""
Strict parsing of URL-encoded form bodies.

Starlette's form parser accepts broken percent-escapes silently. Slash-command
payloads are parsed here instead so that a malformed body is rejected with
MalformedFormError rather than relayed half-decoded.
"""

import re
from typing import Dict, List, Optional
from urllib.parse import unquote_plus

from fastapi import Request

from ..errors import MalformedFormError

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Bodies larger than this are refused outright
MAX_FORM_BYTES = 10 << 20

# "%" not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _parse_query(query: str, form: Dict[str, List[str]]) -> None:
    """Parse "a=1&b=2" into form, appending to existing keys."""
    for pair in query.split("&"):
        if not pair:
            continue
        if ";" in pair:
            raise MalformedFormError(f"Invalid semicolon separator in {pair!r}")
        if _BAD_ESCAPE.search(pair):
            raise MalformedFormError(f"Invalid percent-encoding in {pair!r}")

        key, _, value = pair.partition("=")
        key = unquote_plus(key, errors="replace")
        value = unquote_plus(value, errors="replace")
        form.setdefault(key, []).append(value)


def media_type(content_type: Optional[str]) -> str:
    """
    Strip parameters from a Content-Type header value.

    Raises:
        MalformedFormError: Empty media type, or a parameter without "name="
    """
    if not content_type:
        return "application/octet-stream"

    main, *params = content_type.split(";")
    if not main.strip():
        raise MalformedFormError(f"No media type in {content_type!r}")

    for i, param in enumerate(params):
        # A single trailing ";" is tolerated
        if i == len(params) - 1 and not param.strip():
            continue
        name, sep, _ = param.partition("=")
        if not sep or not name.strip():
            raise MalformedFormError(f"Invalid media parameter in {content_type!r}")

    return main.strip().lower()


def parse_form(
    body: bytes,
    content_type: Optional[str],
    query: str = "",
) -> Dict[str, List[str]]:
    """
    Parse a request's form fields.

    Body fields are read only for URL-encoded requests and come before query
    string fields of the same name.

    Args:
        body: Raw request body
        content_type: Content-Type header, if any
        query: Raw query string

    Returns:
        Field name -> list of values

    Raises:
        MalformedFormError: Body too large, bad percent-encoding, or ";" separators
    """
    form: Dict[str, List[str]] = {}

    if media_type(content_type) == FORM_CONTENT_TYPE:
        if len(body) > MAX_FORM_BYTES:
            raise MalformedFormError("Form body too large")
        _parse_query(body.decode("utf-8", errors="replace"), form)

    _parse_query(query, form)
    return form


def form_value(form: Dict[str, List[str]], key: str) -> str:
    """First value of a field, or "" when absent."""
    values = form.get(key)
    if not values:
        return ""
    return values[0]


async def read_form_body(request: Request, limit: int = MAX_FORM_BYTES) -> bytes:
    """
    Read the request body, giving up as soon as it grows past limit.

    Raises:
        MalformedFormError: More than limit bytes arrived
    """
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise MalformedFormError("Form body too large")
    return bytes(body)


async def read_slash_command_text(request: Request) -> str:
    """FastAPI dependency: the ``text`` field of a slash-command POST."""
    content_type = request.headers.get("content-type")

    body = b""
    if media_type(content_type) == FORM_CONTENT_TYPE:
        body = await read_form_body(request)

    form = parse_form(body, content_type, request.url.query)
    return form_value(form, "text")
