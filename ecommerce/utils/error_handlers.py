from flask import jsonify
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException
from ecommerce.extensions import db


def _error(message, status):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(400)
    def bad_request(error):
        return _error("Bad request", 400)

    @app.errorhandler(401)
    def unauthorized(error):
        return _error("Unauthorized", 401)

    @app.errorhandler(403)
    def forbidden(error):
        return _error("Forbidden", 403)

    @app.errorhandler(404)
    def not_found(error):
        return _error("Resource not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _error("Method not allowed", 405)

    @app.errorhandler(413)
    def payload_too_large(error):
        return _error("Payload too large", 413)

    @app.errorhandler(422)
    def unprocessable_entity(error):
        return _error("Unprocessable entity", 422)

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Internal error: {error}")
        return _error("Internal server error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return _error(error.description, error.code)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(error):
        db.session.rollback()
        app.logger.warning(f"Integrity error: {error.orig}")
        return _error("Database integrity error", 409)

    @app.errorhandler(SQLAlchemyError)
    def handle_sqlalchemy_error(error):
        db.session.rollback()
        app.logger.error(f"Database error: {error}")
        return _error("Database error", 500)

    @app.errorhandler(Exception)
    def handle_exception(error):
        app.logger.error(f"Unhandled exception: {error}", exc_info=error)
        return _error("An unexpected error occurred", 500)
