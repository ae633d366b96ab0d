import random
import string
import uuid
from datetime import datetime
from slugify import slugify as python_slugify


def generate_order_number() -> str:
    """Generate unique order number"""
    timestamp = datetime.now().strftime('%Y%m%d%H%M%S')
    random_str = ''.join(random.choices(string.digits, k=4))
    return f'ORD{timestamp}{random_str}'


def slugify(text: str) -> str:
    """Generate URL-friendly slug"""
    return python_slugify(text)


def unique_slug(model, text: str, exclude_id: str = None) -> str:
    """Slugify text, appending a counter until no other row of model uses it"""
    slug = slugify(text)
    base_slug = slug
    counter = 1
    while True:
        query = model.query.filter_by(slug=slug)
        if exclude_id:
            query = query.filter(model.id != exclude_id)
        if not query.first():
            return slug
        slug = f"{base_slug}-{counter}"
        counter += 1


def is_valid_uuid(value) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def allowed_file(filename: str, allowed_extensions: set) -> bool:
    """Check if file extension is allowed"""
    return '.' in filename and \
           filename.rsplit('.', 1)[1].lower() in allowed_extensions
