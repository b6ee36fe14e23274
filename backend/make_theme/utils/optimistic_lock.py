from datetime import timezone

from dateutil.parser import parse
from flask import request, abort
from werkzeug.http import http_date

LOCK_HEADER = "If-Unmodified-Since"


def as_utc(ts):
    """
    Naive timestamps (SQLite drops tzinfo) are taken to be UTC.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def last_modified(entity):
    """
    HTTP date for an entity's updated_at, for the Last-Modified header
    clients echo back in If-Unmodified-Since.
    """
    if entity.updated_at is None:
        return None
    return http_date(as_utc(entity.updated_at))


def enforce_optimistic_lock(entity, what="Post meta"):
    """
    Abort with 409 when the entity changed after the client's
    If-Unmodified-Since timestamp. Without the header nothing is checked.

    HTTP dates have whole-second precision, so the stored timestamp is
    truncated before comparing.
    """
    header = request.headers.get(LOCK_HEADER)
    if not header or entity.updated_at is None:
        return

    try:
        client_ts = as_utc(parse(header))
    except (ValueError, OverflowError):
        abort(400, description=f"Invalid {LOCK_HEADER} header")

    server_ts = as_utc(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        abort(409, description=f"Conflict detected. {what} has been modified.")
