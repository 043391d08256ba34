from flask import jsonify
from werkzeug.exceptions import HTTPException
from weave_content.domain.invariants.exceptions import InvariantViolation, ContentNotFound
from weave_content.domain.lifecycle.content import InvalidTransition
from weave_content.domain.sections import UnknownSection

def _error(name, message, status_code):
    response = jsonify({
        "error": message,
        "type": name,
    })
    response.status_code = status_code
    return response

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    @app.errorhandler(UnknownSection)
    def handle_invariant_violation(error):
        return _error("InvariantViolation", str(error), 400)

    @app.errorhandler(ContentNotFound)
    def handle_not_found(error):
        return _error("ContentNotFound", str(error), 404)

    @app.errorhandler(InvalidTransition)
    def handle_invalid_transition(error):
        return _error("InvalidTransition", str(error), 409)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error(error.name, error.description, error.code)
