import logging
from ecommerce.models.category import Category
from ecommerce.models.product import Product
from ecommerce.extensions import db
from ecommerce.exceptions import NotFoundError
from ecommerce.utils.helpers import unique_slug

logger = logging.getLogger(__name__)


class CategoryService:
    """Category CRUD"""

    @staticmethod
    def find_by_name(name: str):
        return Category.query.filter_by(name=name).first()

    @staticmethod
    def create_category(name: str) -> Category:
        category = Category(name=name, slug=unique_slug(Category, name))
        category.save()
        logger.info(f"Created category {category.slug}")
        return category

    @staticmethod
    def update_category(category_id: str, name: str) -> Category:
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFoundError("Category not found")

        category.update(name=name, slug=unique_slug(Category, name, exclude_id=category.id))
        return category

    @staticmethod
    def get_all_categories():
        return Category.query.order_by(Category.created_at.asc()).all()

    @staticmethod
    def get_category_by_slug(slug: str):
        return Category.query.filter_by(slug=slug).first()

    @staticmethod
    def delete_category(category_id: str):
        category = db.session.get(Category, category_id)
        if not category:
            raise NotFoundError("Category not found")

        # products outlive their category
        Product.query.filter_by(category_id=category.id).update({"category_id": None})
        category.delete()
        logger.info(f"Deleted category {category_id}")
