from flask import Blueprint, request, jsonify, current_app, Response
from werkzeug.exceptions import RequestEntityTooLarge
from flask_jwt_extended import jwt_required
from ecommerce.services.product_service import ProductService
from ecommerce.services.order_service import OrderService
from ecommerce.services.payment_service import PaymentService
from ecommerce.schemas import ProductFormSchema, ProductFilterSchema, PaymentSchema
from ecommerce.exceptions import NotFoundError, GatewayUnavailableError
from ecommerce.utils.decorators import admin_required, login_required
from ecommerce.utils.validators import validate_schema
from ecommerce.utils.helpers import allowed_file

product_bp = Blueprint("product", __name__)


@product_bp.errorhandler(RequestEntityTooLarge)
def photo_too_large(error):
    # The request body cap trips before the photo itself can be read
    return jsonify({"success": False, "message": "Photo should be less than 1mb"}), 400


def _read_photo():
    """Return the uploaded photo as (bytes, content_type), or None"""
    upload = request.files.get("photo")
    if not upload or not upload.filename:
        return None

    if not allowed_file(upload.filename, current_app.config["ALLOWED_PHOTO_EXTENSIONS"]):
        raise ValueError("Photo must be a jpg, png, gif or webp image")

    data = upload.read()
    if len(data) > current_app.config["MAX_PHOTO_SIZE"]:
        raise ValueError("Photo should be less than 1mb")
    return data, upload.mimetype or "application/octet-stream"


# Admin management
@product_bp.route("/create-product", methods=["POST"])
@jwt_required()
@admin_required
@validate_schema(ProductFormSchema, location="form")
def create_product(current_user):
    """Create product from a multipart form"""
    try:
        product = ProductService.create_product(photo=_read_photo(), **request.validated_data)
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return (
        jsonify({
            "success": True,
            "message": "Product Created Successfully",
            "product": product.to_dict(),
        }),
        201,
    )


@product_bp.route("/update-product/<product_id>", methods=["PUT"])
@jwt_required()
@admin_required
@validate_schema(ProductFormSchema, location="form")
def update_product(product_id, current_user):
    """Update product from a multipart form"""
    try:
        product = ProductService.update_product(
            product_id, photo=_read_photo(), **request.validated_data
        )
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return (
        jsonify({
            "success": True,
            "message": "Product Updated Successfully",
            "product": product.to_dict(),
        }),
        201,
    )


@product_bp.route("/delete-product/<product_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_product(product_id, current_user):
    try:
        ProductService.delete_product(product_id)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return jsonify({"success": True, "message": "Product Deleted successfully"}), 200


# Storefront
@product_bp.route("/get-product", methods=["GET"])
def get_products():
    """Latest products, without photo bytes"""
    products = ProductService.get_latest_products(current_app.config["PRODUCT_LIST_LIMIT"])
    return (
        jsonify({
            "success": True,
            "countTotal": len(products),
            "message": "All Products",
            "products": [p.to_dict(include_category=True) for p in products],
        }),
        200,
    )


@product_bp.route("/get-product/<slug>", methods=["GET"])
def get_product(slug):
    try:
        product = ProductService.get_product_by_slug(slug)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return (
        jsonify({
            "success": True,
            "message": "Single Product Fetched",
            "product": product.to_dict(include_category=True),
        }),
        200,
    )


@product_bp.route("/product-photo/<product_id>", methods=["GET"])
def get_product_photo(product_id):
    try:
        product = ProductService.get_product_by_id(product_id)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    if not product.has_photo:
        return jsonify({"success": False, "message": "Photo not found"}), 404

    return Response(product.photo, mimetype=product.photo_content_type)


@product_bp.route("/product-filters", methods=["POST"])
@validate_schema(ProductFilterSchema)
def filter_products():
    data = request.validated_data
    products = ProductService.filter_products(
        category_ids=data["checked"], price_range=data["radio"]
    )
    return jsonify({"success": True, "products": [p.to_dict() for p in products]}), 200


@product_bp.route("/product-count", methods=["GET"])
def count_products():
    return jsonify({"success": True, "total": ProductService.count_products()}), 200


@product_bp.route("/product-list/<int:page>", methods=["GET"])
def list_products(page):
    pagination = ProductService.get_product_page(
        page=max(page, 1), per_page=current_app.config["PRODUCTS_PER_PAGE"]
    )
    return jsonify({"success": True, "products": [p.to_dict() for p in pagination.items]}), 200


@product_bp.route("/search/<keyword>", methods=["GET"])
def search_products(keyword):
    products = ProductService.search_products(keyword)
    return jsonify([p.to_dict() for p in products]), 200


@product_bp.route("/related-product/<product_id>/<category_id>", methods=["GET"])
def related_products(product_id, category_id):
    products = ProductService.get_related_products(product_id, category_id)
    return (
        jsonify({"success": True, "products": [p.to_dict(include_category=True) for p in products]}),
        200,
    )


@product_bp.route("/product-category/<slug>", methods=["GET"])
def products_by_category(slug):
    try:
        category, products = ProductService.get_products_by_category(slug)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return (
        jsonify({
            "success": True,
            "category": category.to_dict(),
            "products": [p.to_dict() for p in products],
        }),
        200,
    )


# Payments
@product_bp.route("/braintree/token", methods=["GET"])
def braintree_token():
    try:
        client_token = PaymentService.generate_client_token()
    except GatewayUnavailableError as e:
        return jsonify({"success": False, "message": str(e)}), 502

    return jsonify({"success": True, "clientToken": client_token}), 200


@product_bp.route("/braintree/payment", methods=["POST"])
@jwt_required()
@login_required
@validate_schema(PaymentSchema)
def braintree_payment(current_user):
    """Charge the cart through Braintree and record the order"""
    data = request.validated_data
    try:
        order = OrderService.checkout(current_user, data["nonce"], data["cart"])
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except GatewayUnavailableError as e:
        return jsonify({"success": False, "message": str(e)}), 502
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 400

    return jsonify({"ok": True, "order": order.to_dict(include_items=True)}), 201
