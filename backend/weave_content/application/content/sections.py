# weave_content/application/content/sections.py
"""
Section-keyed use cases.

These address a record by its section name instead of its id and upsert
where the id-based routes would 404.
"""
from copy import deepcopy
from typing import Any, Dict
from weave_content.extensions import db
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.content import (
    assert_section_name,
    assert_content_data,
    assert_content,
)
from weave_content.domain.invariants.exceptions import ContentNotFound
from weave_content.domain.lifecycle.content import (
    Status,
    derive_status,
    assert_content_transition,
)
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_by_section
from .publish_content import _publish


def get_section_state(*, section: str) -> ContentSection | Dict[str, Any]:
    """
    Active record for a section, or an unpublished placeholder.
    The placeholder is not persisted.
    """
    assert_section_name(section)

    content = find_by_section(section)
    if content is not None:
        return content

    return {
        "section": section,
        "draftData": {},
        "publishedData": {},
        "status": Status.UNPUBLISHED.value,
        "version": 1,
        "isActive": True,
        "order": 0,
    }


def upsert_section(
    *,
    section: str,
    actor_id: str | None,
    draft_data: Dict[str, Any] | None = None,
    published_data: Dict[str, Any] | None = None,
    status: str | None = None,
) -> ContentSection:
    """
    Create or update a section record by name.

    An explicit status wins over the derived one, but still has to be a
    legal transition. Without one the status is derived from the data.
    """
    assert_section_name(section)
    assert_content_data(draft_data)
    assert_content_data(published_data, field="publishedData")

    content = find_by_section(section, include_inactive=True)

    with transactional("upsert section"):
        if content is None:
            content = ContentSection()
            content.section = section
            content.draft_data = {}
            content.published_data = {}
            content.status = Status.UNPUBLISHED.value
            content.version = 0
            db.session.add(content)
        else:
            content.restore()

        if draft_data is not None:
            content.draft_data = dict(draft_data)
        if published_data is not None:
            content.published_data = deepcopy(published_data)

        if status:
            assert_content_transition(from_status=content.status, to_status=status)
            content.status = status
        else:
            content.status = derive_status(content.draft_data, content.published_data).value
        content.touch(actor_id)

        db.session.flush()
        assert_content(content)

        log_action(
            action="content.save_draft",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"section": section, "status": content.status},
        )

    return content


def publish_section(*, section: str, actor_id: str | None) -> ContentSection:
    assert_section_name(section)

    content = find_by_section(section)
    if content is None:
        raise ContentNotFound("Content section not found")

    return _publish(content, actor_id=actor_id)


def deactivate_section(*, section: str, actor_id: str | None) -> None:
    """Hide a section from editors without losing its data."""
    assert_section_name(section)

    content = find_by_section(section)
    if content is None:
        return

    with transactional("deactivate section"):
        content.soft_delete()

        log_action(
            action="content.deactivate",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"section": section},
        )
