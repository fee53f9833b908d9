"""
Query parameters for WHOOP collection endpoints.

Collections accept start/end time filters, a page size and a cursor
(nextToken) pointing at the next page.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from whoop_sdk.errors import URLError


@dataclass(frozen=True)
class RequestParams:
    """Filters and cursor for a collection request.

    Zero values (None, "", 0) are left out of the query string.
    """
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    next_token: str = ""
    limit: int = 0


def format_rfc3339(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision.

    Naive datetimes are taken to be UTC. UTC renders as 'Z'.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def add_params(path: str, params: Optional[RequestParams] = None) -> str:
    """
    Append the query string for `params` to `path`.

    Keys are emitted in sorted order (end, limit, nextToken, start) so the
    resulting URL is deterministic. `path` is returned unchanged when there
    is nothing to add.

    Raises:
        URLError: if `path` cannot be parsed
    """
    if params is None:
        return path

    try:
        parts = urlsplit(path)
    except ValueError as e:
        raise URLError(f"invalid path {path!r}: {e}") from e

    query = {}
    if params.start:
        query["start"] = format_rfc3339(params.start)
    if params.end:
        query["end"] = format_rfc3339(params.end)
    if params.next_token:
        query["nextToken"] = params.next_token
    if params.limit:
        query["limit"] = str(params.limit)

    if not query:
        return path

    return urlunsplit(parts._replace(query=urlencode(sorted(query.items()))))
