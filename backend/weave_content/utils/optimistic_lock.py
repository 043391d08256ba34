from flask import request, abort
from datetime import timezone
from dateutil.parser import parse, ParserError


def as_utc(ts):
    """Naive timestamps read back from SQLite are UTC."""
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)


def _check_version(entity, header):
    try:
        expected = int(header.strip().strip('"'))
    except ValueError:
        abort(400, description="Invalid If-Match header")

    if entity.version != expected:
        abort(409, description=f"Conflict detected. Content is at version {entity.version}.")


def _check_timestamp(entity, header):
    try:
        since = as_utc(parse(header))
    except (ParserError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")

    # HTTP dates carry whole seconds only
    if as_utc(entity.updated_at).replace(microsecond=0) > since:
        abort(409, description="Conflict detected. Content has been modified.")


def enforce_optimistic_lock(entity):
    """
    Opt-in conditional update for content records.

    If-Match carries the record version the editor last saw;
    If-Unmodified-Since carries its updated timestamp. Without either header
    the write is last-write-wins.
    """
    if_match = request.headers.get("If-Match")
    if if_match:
        _check_version(entity, if_match)

    if_unmodified = request.headers.get("If-Unmodified-Since")
    if if_unmodified:
        _check_timestamp(entity, if_unmodified)
