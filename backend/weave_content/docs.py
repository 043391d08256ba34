# weave_content/docs.py
"""
OpenAPI document and Swagger UI for the content API.
"""
import os

from flask import Blueprint, current_app, send_from_directory
from flask_swagger_ui import get_swaggerui_blueprint

SWAGGER_URL = "/swagger"
OPENAPI_URL = "/openapi/content.yaml"
OPENAPI_FILE = "content_openapi.yaml"

docs_bp = Blueprint("docs", __name__)


@docs_bp.route(OPENAPI_URL, methods=["GET"])
def openapi_document():
    return send_from_directory(
        os.path.join(current_app.root_path, "api"),
        OPENAPI_FILE,
        mimetype="application/yaml",
    )


def register_api_docs(app):
    app.register_blueprint(docs_bp)

    swagger_ui = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={
            "app_name": "Weave Content API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )
    app.register_blueprint(swagger_ui, url_prefix=SWAGGER_URL)
