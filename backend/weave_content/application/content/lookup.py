from sqlalchemy import select
from weave_content.extensions import db
from weave_content.models.content_section import ContentSection
from weave_content.domain.invariants.exceptions import ContentNotFound


def find_content(content_id: str, *, for_update: bool = False) -> ContentSection:
    """Fetch a content record by id or raise ContentNotFound."""
    stmt = select(ContentSection).where(ContentSection.id == content_id)
    if for_update:
        stmt = stmt.with_for_update()

    content = db.session.execute(stmt).scalar_one_or_none()
    if content is None:
        raise ContentNotFound()
    return content


def find_by_section(section: str, *, include_inactive: bool = False) -> ContentSection | None:
    query = ContentSection.query.filter_by(section=section)
    if not include_inactive:
        query = query.filter(ContentSection.deleted_at.is_(None))
    return query.first()


def find_by_id_or_section(key: str) -> ContentSection:
    """
    Resolve an active record by its id, falling back to its section name.
    The full-page preview addresses records by section.
    """
    content = db.session.get(ContentSection, key)
    if content is None or content.is_deleted:
        content = find_by_section(key)
    if content is None:
        raise ContentNotFound()
    return content
