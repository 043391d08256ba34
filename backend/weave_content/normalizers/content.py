# weave_content/normalizers/content.py
from typing import Any, Dict, Mapping

from weave_content.models.content_section import ContentSection


def _iso(value):
    return value.isoformat() if value else None


def normalize_content(content: ContentSection | Mapping[str, Any]) -> Dict[str, Any]:
    """
    Wire shape of a content section.

    Keys are camelCase and the id is exposed both as `_id` (what the editor
    reads) and `id`. Placeholders that were never persisted pass through as
    plain dicts.
    """
    if isinstance(content, Mapping):
        return dict(content)

    return {
        "_id": content.id,
        "id": content.id,
        "section": content.section,
        "draftData": content.draft_data or {},
        "publishedData": content.published_data or {},
        "status": content.status,
        "version": content.version,
        "order": content.order,
        "isActive": content.is_active,
        "lastEditedBy": content.last_edited_by,
        "lastEditedAt": _iso(content.last_edited_at),
        "createdAt": _iso(content.created_at),
        "updatedAt": _iso(content.updated_at),
    }
