from weave_content.extensions import db
from weave_content.domain.lifecycle.content import Status
from .base import BaseModel, utc_now
from .soft_delete_mixin import SoftDeleteMixin


class ContentSection(BaseModel, SoftDeleteMixin):
    __tablename__ = "content_sections"

    # hero, about, why-weave, process, portfolio, team, contact, footer
    section = db.Column(db.String(50), nullable=False, unique=True, index=True)

    # JSON columns are always reassigned, never mutated in place
    draft_data = db.Column(db.JSON, nullable=False, default=dict)
    published_data = db.Column(db.JSON, nullable=False, default=dict)

    status = db.Column(db.String(20), nullable=False, default=Status.UNPUBLISHED.value, index=True)
    version = db.Column(db.Integer, nullable=False, default=1)
    order = db.Column(db.Integer, nullable=False, default=0)

    last_edited_by = db.Column(db.String(36), nullable=True)
    last_edited_at = db.Column(db.DateTime(timezone=True), default=utc_now, index=True)

    @property
    def is_active(self):
        return not self.is_deleted

    def touch(self, actor_id):
        self.last_edited_by = actor_id
        self.last_edited_at = utc_now()
        self.version = (self.version or 0) + 1
