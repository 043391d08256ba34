import logging
from typing import Any, Dict, Optional
from weave_content.extensions import db
from weave_content.models.audit_log import AuditLog

logger = logging.getLogger(__name__)


def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    actor_id: Optional[str] = None,
    payload: Dict[str, Any] | None = None,
) -> AuditLog:
    """
    Stage an audit entry in the current transaction.
    It is written together with the change it describes, or not at all.
    """
    entry = AuditLog(
        actor_id=actor_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        payload=dict(payload or {}),
    )
    db.session.add(entry)

    logger.debug("audit %s %s/%s by %s", action, entity_type, entity_id, actor_id or "system")
    return entry
