from functools import wraps
from flask import request, jsonify
from marshmallow import ValidationError


def _first_message(messages):
    """Dig the first error string out of marshmallow's nested messages"""
    if isinstance(messages, dict):
        return _first_message(next(iter(messages.values())))
    if isinstance(messages, list):
        return _first_message(messages[0])
    return str(messages)


def validate_schema(schema_class, location="json", error_status=400):
    """Decorator to validate request data against schema"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            schema = schema_class()
            if location == "form":
                payload = request.form.to_dict()
            else:
                payload = request.get_json(silent=True) or {}
            try:
                validated_data = schema.load(payload)
                request.validated_data = validated_data
                return f(*args, **kwargs)
            except ValidationError as err:
                return jsonify({
                    'success': False,
                    'message': _first_message(err.messages),
                    'errors': err.messages,
                }), error_status
        return decorated_function
    return decorator


def validate_pagination():
    """Validate pagination parameters"""
    page = request.args.get('page', 1, type=int)
    per_page = request.args.get('per_page', 20, type=int)

    if page < 1:
        page = 1
    if per_page < 1 or per_page > 100:
        per_page = 20

    return page, per_page
