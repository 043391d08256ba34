from enum import Enum
from typing import Any, Dict, Mapping, Optional, Set


class Status(str, Enum):
    UNPUBLISHED = "unpublished"
    DRAFT = "draft"
    PUBLISHED = "published"


class Event(str, Enum):
    LOAD = "load"
    EDIT = "edit"
    SAVE_DRAFT = "save_draft"
    PUBLISH = "publish"
    REVERT = "revert"


class InvalidTransition(ValueError):
    pass


# Explicit allowed status changes on the server
ALLOWED_CONTENT_TRANSITIONS: Dict[Status, Set[Status]] = {
    Status.UNPUBLISHED: {Status.UNPUBLISHED, Status.DRAFT, Status.PUBLISHED},
    Status.DRAFT: {Status.DRAFT, Status.PUBLISHED, Status.UNPUBLISHED},
    Status.PUBLISHED: {Status.PUBLISHED, Status.DRAFT},
}


def derive_status(
    draft_data: Optional[Mapping[str, Any]],
    published_data: Optional[Mapping[str, Any]],
) -> Status:
    """
    Status of a stored section.

    - draft  : there is draft content that differs from what is live
    - published : nothing pending and a published snapshot exists
    - unpublished : nothing has ever been published
    """
    draft = dict(draft_data or {})
    published = dict(published_data or {})

    if draft and draft != published:
        return Status.DRAFT
    return Status.PUBLISHED if published else Status.UNPUBLISHED


def assert_content_transition(*, from_status: str, to_status: str) -> None:
    """
    Guards status changes that a caller asks for explicitly (publish, or a
    status sent to the section upsert). Statuses computed by derive_status
    follow the stored data and are not checked here.
    """
    try:
        current, target = Status(from_status), Status(to_status)
    except ValueError as exc:
        raise InvalidTransition(f"Unknown content status: {exc}") from exc

    if target not in ALLOWED_CONTENT_TRANSITIONS[current]:
        raise InvalidTransition(
            f"Illegal content transition: {from_status} → {to_status}"
        )


def next_status(
    current: Status,
    event: Event,
    *,
    reported: Optional[str] = None,
    has_record: bool = True,
) -> Status:
    """
    Editor-side transition function.

    `reported` is the status returned by the server for events that involve a
    round trip. Editing a field never changes the status locally.
    """
    if event is Event.LOAD:
        return Status(reported) if reported else Status.UNPUBLISHED

    if event is Event.EDIT:
        return current

    if event is Event.SAVE_DRAFT:
        return Status.DRAFT

    if event is Event.PUBLISH:
        return Status(reported) if reported else Status.UNPUBLISHED

    if event is Event.REVERT:
        if not has_record:
            raise InvalidTransition("Nothing to revert")
        return Status(reported) if reported else Status.UNPUBLISHED

    raise InvalidTransition(f"Unknown event: {event}")
