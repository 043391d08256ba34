from flask import request, jsonify
from weave_content.utils.decorators import roles_required
from weave_content.utils.pagination import paginate_cursor
from weave_content.models.audit_log import AuditLog
from weave_content.normalizers.audit import normalize_audit_log
from weave_content.normalizers.pagination import normalize_pagination
from . import api_bp


@api_bp.route("/audit", methods=["GET"])
@roles_required("admin")
def list_audit_logs():
    limit = min(request.args.get("limit", 20, type=int), 100)
    cursor = request.args.get("cursor")

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs, meta = paginate_cursor(query, model=AuditLog, cursor=cursor, limit=limit)

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
