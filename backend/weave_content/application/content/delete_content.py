from weave_content.extensions import db
from weave_content.utils.audit import log_action
from weave_content.utils.transaction import transactional
from .lookup import find_content


def delete_content(
    *,
    content_id: str,
    actor_id: str | None,
) -> None:
    """
    Hard-delete a content record.

    Editors still holding the id get a 404 on their next PATCH and fall back
    to creating a fresh record.
    """
    content = find_content(content_id)
    section = content.section

    with transactional("delete content"):
        db.session.delete(content)

        log_action(
            action="content.delete",
            entity_type="content",
            entity_id=content_id,
            actor_id=actor_id,
            payload={"section": section},
        )
