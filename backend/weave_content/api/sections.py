# weave_content/api/sections.py
from flask import request, jsonify
from weave_content.application.content.sections import (
    get_section_state,
    upsert_section,
    publish_section,
    deactivate_section,
)
from weave_content.normalizers.content import normalize_content
from weave_content.utils.decorators import load_current_user, roles_required, current_actor_id
from . import api_bp


@api_bp.route("/content/sections/<section>", methods=["GET"])
@load_current_user
def get_section(section):
    return jsonify(normalize_content(get_section_state(section=section)))


@api_bp.route("/content/sections/<section>", methods=["PATCH"])
@roles_required("admin")
def update_section(section):
    data = request.get_json(silent=True) or {}

    content = upsert_section(
        section=section,
        actor_id=current_actor_id(),
        draft_data=data.get("draftData") or None,
        published_data=data.get("publishedData") or None,
        status=data.get("status"),
    )
    return jsonify(normalize_content(content)), 200


@api_bp.route("/content/sections/<section>", methods=["DELETE"])
@roles_required("admin")
def delete_section(section):
    deactivate_section(section=section, actor_id=current_actor_id())
    return jsonify({"success": True}), 200


@api_bp.route("/content/sections/<section>/publish", methods=["POST"])
@roles_required("admin")
def publish_section_route(section):
    content = publish_section(section=section, actor_id=current_actor_id())
    return jsonify(normalize_content(content)), 200
