from flask import Flask, jsonify, request
from .extensions import db, migrate, jwt, ma
from .config import Config
from ecommerce.utils.error_handlers import register_error_handlers
from ecommerce.routes import register_blueprints


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)

    # Register JWT error handlers
    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"success": False, "message": "Token has expired, please login again"}), 401

    @jwt.invalid_token_loader
    def invalid_token_callback(error):
        return jsonify({"success": False, "message": "Invalid or expired token"}), 401

    @jwt.unauthorized_loader
    def missing_token_callback(error):
        # A header that is present but lacks the Bearer scheme is malformed
        if request.headers.get("Authorization"):
            return jsonify({"success": False, "message": "Invalid token format"}), 401
        return jsonify({"success": False, "message": "Authentication required"}), 401

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app
