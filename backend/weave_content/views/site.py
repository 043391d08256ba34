# weave_content/views/site.py
from flask import Blueprint, send_from_directory
from weave_content.models.content_section import ContentSection
from weave_content.domain.sections import assert_section_id
from weave_content.application.content.lookup import find_by_section
from weave_content.utils.decorators import roles_required
from weave_content.utils.media import upload_folder
from weave_content import preview

site_bp = Blueprint("site", __name__)


def _active_sections():
    return ContentSection.query.filter(ContentSection.deleted_at.is_(None)).all()


@site_bp.route("/", methods=["GET"])
def home():
    published = {c.section: c.published_data for c in _active_sections()}
    return preview.render_page(published)


@site_bp.route("/preview", methods=["GET"])
@roles_required("admin")
def preview_page():
    drafts = {c.section: c.draft_data or c.published_data for c in _active_sections()}
    return preview.render_page(drafts, preview=True)


@site_bp.route("/preview/<section>", methods=["GET"])
@roles_required("admin")
def preview_section(section):
    content = find_by_section(assert_section_id(section))
    data = (content.draft_data or content.published_data) if content else None
    return preview.render_section(section, data)


@site_bp.route("/uploads/<path:filename>", methods=["GET"])
def uploaded_file(filename):
    return send_from_directory(upload_folder(), filename)
