# weave_content/application/content/revert_content.py
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.content import assert_content
from weave_content.domain.lifecycle.content import derive_status
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_content


def revert_content(
    *,
    content_id: str,
    actor_id: str | None,
) -> ContentSection:
    """
    Discard the draft of a section.

    published_data is left exactly as it was; the editor falls back to
    showing the published snapshot.
    """
    content = find_content(content_id, for_update=True)

    with transactional("revert"):
        content.draft_data = {}

        # Derived status always follows the stored data
        content.status = derive_status(content.draft_data, content.published_data).value
        content.touch(actor_id)

        assert_content(content)

        log_action(
            action="content.revert",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"section": content.section, "status": content.status},
        )

    return content
