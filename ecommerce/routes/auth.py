from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from ecommerce.services.auth_service import AuthService, user_schema, users_schema
from ecommerce.services.order_service import OrderService
from ecommerce.schemas import (
    UserRegisterSchema,
    UserLoginSchema,
    ForgotPasswordSchema,
    ProfileUpdateSchema,
    OrderStatusSchema,
)
from ecommerce.exceptions import NotFoundError, ConflictError
from ecommerce.utils.decorators import login_required, admin_required
from ecommerce.utils.validators import validate_schema, validate_pagination

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
@validate_schema(UserRegisterSchema)
def register():
    """Register new user"""
    try:
        user = AuthService.register_user(**request.validated_data)
    except ConflictError as e:
        return jsonify({"success": False, "message": str(e)}), 200

    return (
        jsonify({
            "success": True,
            "message": "User Registered Successfully",
            "user": user_schema.dump(user),
        }),
        201,
    )


@auth_bp.route("/login", methods=["POST"])
@validate_schema(UserLoginSchema)
def login():
    """User login"""
    try:
        result = AuthService.login_user(**request.validated_data)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404
    except ValueError as e:
        return jsonify({"success": False, "message": str(e)}), 401

    return jsonify({"success": True, "message": "Login successfully", **result}), 200


@auth_bp.route("/forgot-password", methods=["POST"])
@validate_schema(ForgotPasswordSchema)
def forgot_password():
    """Reset password after checking the security answer"""
    try:
        AuthService.reset_password(**request.validated_data)
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return jsonify({"success": True, "message": "Password Reset Successfully"}), 200


@auth_bp.route("/test", methods=["GET"])
@jwt_required()
@admin_required
def test_protected(current_user):
    return jsonify({"success": True, "message": "Protected Routes"}), 200


@auth_bp.route("/user-auth", methods=["GET"])
@jwt_required()
def user_auth():
    return jsonify({"ok": True}), 200


@auth_bp.route("/admin-auth", methods=["GET"])
@jwt_required()
@admin_required
def admin_auth(current_user):
    return jsonify({"ok": True}), 200


@auth_bp.route("/profile", methods=["PUT"])
@jwt_required()
@login_required
@validate_schema(ProfileUpdateSchema)
def update_profile(current_user):
    """Update the signed-in user's profile"""
    user = AuthService.update_profile(current_user, **request.validated_data)
    return (
        jsonify({
            "success": True,
            "message": "Profile Updated Successfully",
            "updatedUser": user_schema.dump(user),
        }),
        200,
    )


@auth_bp.route("/orders", methods=["GET"])
@jwt_required()
@login_required
def get_orders(current_user):
    """Orders placed by the signed-in user"""
    orders = OrderService.get_orders_for_buyer(current_user.id)
    return jsonify([o.to_dict(include_items=True) for o in orders]), 200


@auth_bp.route("/all-orders", methods=["GET"])
@jwt_required()
@admin_required
def get_all_orders(current_user):
    orders = OrderService.get_all_orders()
    return jsonify([o.to_dict(include_items=True) for o in orders]), 200


@auth_bp.route("/order-status/<order_id>", methods=["PUT"])
@jwt_required()
@admin_required
@validate_schema(OrderStatusSchema)
def update_order_status(order_id, current_user):
    try:
        order = OrderService.update_status(order_id, request.validated_data["status"])
    except NotFoundError as e:
        return jsonify({"success": False, "message": str(e)}), 404

    return (
        jsonify({
            "success": True,
            "message": "Order Status Updated",
            "order": order.to_dict(include_items=True),
        }),
        200,
    )


@auth_bp.route("/all-users", methods=["GET"])
@jwt_required()
@admin_required
def get_users(current_user):
    page, per_page = validate_pagination()
    pagination = AuthService.list_users(page=page, per_page=per_page)

    return jsonify({
        "success": True,
        "users": users_schema.dump(pagination.items),
        "total": pagination.total,
        "page": page,
        "pages": pagination.pages,
    }), 200
