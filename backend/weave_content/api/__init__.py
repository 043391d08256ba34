from flask import Blueprint

# Blueprint for everything under /api
api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import content
from . import sections
from . import upload
from . import audit
