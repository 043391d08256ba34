from flask import Flask
from .config import config_by_name
from .extensions import db, migrate, jwt
from .logging_config import setup_logging
from .api import api_bp
from .views.site import site_bp
from .docs import register_api_docs
from .errors import register_error_handlers
from .commands import register_commands


def create_app(config_name: str = "development") -> Flask:
    """
    Build the content service.

    Serves the JSON content API under /api, the rendered marketing site and
    its draft preview at the root, and the API docs under /swagger.
    """
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    setup_logging(app)

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(site_bp)
    register_api_docs(app)

    register_error_handlers(app)
    register_commands(app)

    app.logger.info("Content service started (%s)", config_name)
    return app
