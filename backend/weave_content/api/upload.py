from flask import request, jsonify
from weave_content.utils.decorators import roles_required
from weave_content.utils.media import save_file
from . import api_bp


@api_bp.route("/upload", methods=["POST"])
@roles_required("admin")
def upload_image():
    file = request.files.get("file")
    if file is None:
        return jsonify({"error": "No file provided"}), 400

    try:
        url = save_file(file)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({"url": url}), 201
