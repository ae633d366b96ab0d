from ecommerce.routes.auth import auth_bp
from ecommerce.routes.category import category_bp
from ecommerce.routes.product import product_bp


def register_blueprints(app):
    """Register all blueprints"""
    app.register_blueprint(auth_bp, url_prefix='/api/v1/auth')
    app.register_blueprint(category_bp, url_prefix='/api/v1/category')
    app.register_blueprint(product_bp, url_prefix='/api/v1/product')
