# weave_content/application/content/publish_content.py
from copy import deepcopy
from typing import Any, Dict
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.content import assert_content, assert_content_data
from weave_content.domain.lifecycle.content import Status, assert_content_transition
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_content


def publish_content(
    *,
    content_id: str,
    actor_id: str | None,
    draft_data: Dict[str, Any] | None = None,
) -> ContentSection:
    """
    Promote the draft of a section to the live site.

    Responsibilities:
    - store the latest draft when the editor sends one
    - copy draft_data into published_data
    - lifecycle and invariant enforcement
    - audit logging
    """
    assert_content_data(draft_data)

    # 1️⃣ Fetch with row-level lock
    content = find_content(content_id, for_update=True)
    return _publish(content, actor_id=actor_id, draft_data=draft_data)


def _publish(
    content: ContentSection,
    *,
    actor_id: str | None,
    draft_data: Dict[str, Any] | None = None,
) -> ContentSection:
    with transactional("publish"):
        # 2️⃣ Lifecycle transition enforcement
        assert_content_transition(from_status=content.status, to_status=Status.PUBLISHED.value)

        # 3️⃣ Apply state change
        if draft_data is not None:
            content.draft_data = dict(draft_data)
        content.published_data = deepcopy(content.draft_data or {})
        content.status = Status.PUBLISHED.value
        content.touch(actor_id)

        # 4️⃣ Publish-specific invariants
        assert_content(content, publish=True)

        # 5️⃣ Audit logging
        log_action(
            action="content.publish",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"section": content.section, "version": content.version},
        )

    return content
