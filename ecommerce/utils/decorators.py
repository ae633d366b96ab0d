from functools import wraps
from flask import jsonify
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from ecommerce.exceptions import NotFoundError
from ecommerce.services.auth_service import AuthService
from ecommerce.enums import UserRole
from ecommerce.utils.helpers import is_valid_uuid


def role_required(*roles):
    """Decorator to check if user has required role.

    The user is loaded on every request, so a role change applies to tokens
    that were issued before it. With no roles any signed-in user passes.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            user_id = get_jwt_identity()

            if not is_valid_uuid(user_id):
                return jsonify({'success': False, 'message': 'Invalid user ID format'}), 400

            try:
                user = AuthService.get_user_by_id(user_id)
            except NotFoundError as e:
                return jsonify({'success': False, 'message': str(e)}), 404

            if roles and user.role not in roles:
                return jsonify({
                    'success': False,
                    'message': 'Forbidden: Admin privileges required',
                }), 403

            # Pass user to route handler
            kwargs['current_user'] = user
            return fn(*args, **kwargs)
        return wrapper
    return decorator


login_required = role_required()
admin_required = role_required(UserRole.ADMIN)
