from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from ecommerce.services.category_service import CategoryService
from ecommerce.schemas import CategorySchema
from ecommerce.exceptions import NotFoundError
from ecommerce.utils.decorators import admin_required
from ecommerce.utils.validators import validate_schema

category_bp = Blueprint("category", __name__)


@category_bp.route("/create-category", methods=["POST"])
@jwt_required()
@admin_required
@validate_schema(CategorySchema, error_status=401)
def create_category(current_user):
    """Create category unless one with the same name exists"""
    name = request.validated_data["name"]

    if CategoryService.find_by_name(name):
        return jsonify({"success": True, "message": "Category Already Exists"}), 200

    category = CategoryService.create_category(name)
    return (
        jsonify({
            "success": True,
            "message": "New category created",
            "category": category.to_dict(),
        }),
        201,
    )


@category_bp.route("/update-category/<category_id>", methods=["PUT"])
@jwt_required()
@admin_required
@validate_schema(CategorySchema)
def update_category(category_id, current_user):
    try:
        category = CategoryService.update_category(category_id, request.validated_data["name"])
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return (
        jsonify({
            "success": True,
            "message": "Category Updated Successfully",
            "category": category.to_dict(),
        }),
        200,
    )


@category_bp.route("/get-category", methods=["GET"])
def get_categories():
    categories = CategoryService.get_all_categories()
    return (
        jsonify({
            "success": True,
            "message": "All Categories List",
            "category": [c.to_dict() for c in categories],
        }),
        200,
    )


@category_bp.route("/single-category/<slug>", methods=["GET"])
def get_category(slug):
    category = CategoryService.get_category_by_slug(slug)
    return (
        jsonify({
            "success": True,
            "message": "Get Single Category Successfully",
            "category": category.to_dict() if category else None,
        }),
        200,
    )


@category_bp.route("/delete-category/<category_id>", methods=["DELETE"])
@jwt_required()
@admin_required
def delete_category(category_id, current_user):
    try:
        CategoryService.delete_category(category_id)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return jsonify({"success": True, "message": "Category Deleted Successfully"}), 200
