# weave_content/api/content.py
from flask import request, jsonify, current_app
from weave_content.application.content.create_content import create_content
from weave_content.application.content.save_draft import save_draft
from weave_content.application.content.publish_content import publish_content
from weave_content.application.content.revert_content import revert_content
from weave_content.application.content.delete_content import delete_content
from weave_content.application.content.lookup import find_content, find_by_id_or_section
from weave_content.models.content_section import ContentSection
from weave_content.normalizers.content import normalize_content
from weave_content.utils.decorators import roles_required, current_actor_id
from weave_content.utils.optimistic_lock import enforce_optimistic_lock
from . import api_bp


ALLOWED_ACTIONS = {"publish", "revert"}


@api_bp.route("/content", methods=["GET"])
def list_content():
    section = request.args.get("section")

    query = ContentSection.query.filter(ContentSection.deleted_at.is_(None))
    if section:
        query = query.filter_by(section=section)

    contents = query.order_by(ContentSection.order.asc(), ContentSection.section.asc()).all()
    return jsonify([normalize_content(c) for c in contents])


@api_bp.route("/content/<content_id>", methods=["GET"])
def get_content(content_id):
    return jsonify(normalize_content(find_by_id_or_section(content_id)))


@api_bp.route("/content", methods=["POST"])
@roles_required("admin")
def create_content_route():
    data = request.get_json(silent=True) or {}

    content, created = create_content(
        section=data.get("section"),
        data=data.get("data", data.get("draftData")),
        actor_id=current_actor_id(),
    )

    current_app.logger.info(
        "Content %s for section %s", "created" if created else "updated", content.section
    )
    return jsonify(normalize_content(content)), 201 if created else 200


@api_bp.route("/content/<content_id>", methods=["PATCH"])
@roles_required("admin")
def update_content(content_id):
    content = find_content(content_id)
    enforce_optimistic_lock(content)

    data = request.get_json(silent=True) or {}
    action = data.get("action")
    actor_id = current_actor_id()

    if action is not None and action not in ALLOWED_ACTIONS:
        return jsonify({"error": f"Invalid action: {action}"}), 400

    if action == "publish":
        content = publish_content(
            content_id=content_id,
            actor_id=actor_id,
            draft_data=data.get("draftData"),
        )
    elif action == "revert":
        content = revert_content(content_id=content_id, actor_id=actor_id)
    else:
        # Default: save draft
        order = data.get("order")
        is_active = data.get("isActive")
        content = save_draft(
            content_id=content_id,
            actor_id=actor_id,
            draft_data=data.get("draftData"),
            order=order if isinstance(order, int) and not isinstance(order, bool) else None,
            is_active=is_active if isinstance(is_active, bool) else None,
        )

    current_app.logger.info(
        "Content %s (%s) %s -> %s", content.id, content.section, action or "save_draft", content.status
    )
    return jsonify(normalize_content(content)), 200


@api_bp.route("/content/<content_id>", methods=["DELETE"])
@roles_required("admin")
def delete_content_route(content_id):
    delete_content(content_id=content_id, actor_id=current_actor_id())
    return jsonify({"success": True}), 200
