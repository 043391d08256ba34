from typing import Any, Dict
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.content import assert_content, assert_content_data
from weave_content.domain.lifecycle.content import derive_status
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_content


def save_draft(
    *,
    content_id: str,
    actor_id: str | None,
    draft_data: Dict[str, Any] | None = None,
    order: int | None = None,
    is_active: bool | None = None,
) -> ContentSection:
    """
    Store a new draft for a section.

    Design rules:
    - published_data is never touched here
    - status is re-derived from the stored data
    """
    assert_content_data(draft_data)
    content = find_content(content_id, for_update=True)

    changed_fields: list[str] = []

    with transactional("save draft"):
        if draft_data is not None:
            content.draft_data = dict(draft_data)
            changed_fields.append("draftData")

        if order is not None:
            content.order = order
            changed_fields.append("order")

        if is_active is not None:
            if is_active:
                content.restore()
            else:
                content.soft_delete()
            changed_fields.append("isActive")

        # Derived status always follows the stored data
        content.status = derive_status(content.draft_data, content.published_data).value
        content.touch(actor_id)

        assert_content(content)

        log_action(
            action="content.save_draft",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"fields": changed_fields, "status": content.status},
        )

    return content
