from typing import Any, Dict, Tuple
from weave_content.extensions import db
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.content import (
    assert_section_name,
    assert_content_data,
    assert_content,
)
from weave_content.domain.lifecycle.content import derive_status
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_by_section


def create_content(
    *,
    section: str,
    data: Dict[str, Any] | None,
    actor_id: str | None,
) -> Tuple[ContentSection, bool]:
    """
    Create the record for a section, seeded with draft data.

    Edge cases handled:
    - Unknown section name
    - A record already exists for the section: it is updated in place and
      reactivated, so a section never has two records
    """
    assert_section_name(section)
    assert_content_data(data, field="data")

    draft_data = dict(data or {})
    content = find_by_section(section, include_inactive=True)
    created = content is None

    with transactional("create content"):
        if created:
            content = ContentSection()
            content.section = section
            content.published_data = {}
            content.version = 0
        else:
            content.restore()

        content.draft_data = draft_data
        content.status = derive_status(content.draft_data, content.published_data).value
        content.touch(actor_id)

        db.session.add(content)
        db.session.flush()  # ensures content.id is available

        assert_content(content)

        log_action(
            action="content.create" if created else "content.save_draft",
            entity_type="content",
            entity_id=content.id,
            actor_id=actor_id,
            payload={"section": section, "status": content.status},
        )

    return content, created
