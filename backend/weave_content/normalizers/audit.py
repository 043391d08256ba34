# weave_content/normalizers/audit.py
from typing import Any, Dict

from weave_content.models.audit_log import AuditLog


def normalize_audit_log(log: AuditLog) -> Dict[str, Any]:
    """Audit entry in the same camelCase wire shape as content records."""
    return {
        "id": log.id,
        "action": log.action,
        "actorId": log.actor_id,
        "entityType": log.entity_type,
        "entityId": log.entity_id,
        "section": (log.payload or {}).get("section"),
        "payload": log.payload or {},
        "createdAt": log.created_at.isoformat() if log.created_at else None,
    }
