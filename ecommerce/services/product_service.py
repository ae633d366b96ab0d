import logging
from decimal import Decimal
from sqlalchemy import or_
from ecommerce.models.product import Product
from ecommerce.models.category import Category
from ecommerce.extensions import db
from ecommerce.exceptions import NotFoundError
from ecommerce.utils.helpers import unique_slug

logger = logging.getLogger(__name__)


class ProductService:
    """Product service handling product operations"""

    @staticmethod
    def _resolve_category(category_id: str) -> Category:
        category = db.session.get(Category, category_id)
        if not category:
            raise ValueError("Category not found")
        return category

    @staticmethod
    def create_product(name: str, description: str, price: Decimal, category: str,
                       quantity: int, shipping: bool = False, photo=None) -> Product:
        """Create new product; photo is a (bytes, content_type) pair"""
        ProductService._resolve_category(category)

        product = Product(
            name=name,
            slug=unique_slug(Product, name),
            description=description,
            price=price,
            category_id=category,
            quantity=quantity,
            shipping=shipping,
        )
        if photo:
            product.photo, product.photo_content_type = photo

        product.save()
        logger.info(f"Created product {product.slug}")
        return product

    @staticmethod
    def update_product(product_id: str, photo=None, **kwargs) -> Product:
        """Update product; the stored photo is kept unless a new one is given"""
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found")

        if "category" in kwargs:
            kwargs["category_id"] = ProductService._resolve_category(kwargs.pop("category")).id

        # Update slug if name changed
        if "name" in kwargs and kwargs["name"] != product.name:
            kwargs["slug"] = unique_slug(Product, kwargs["name"], exclude_id=product.id)

        if photo:
            kwargs["photo"], kwargs["photo_content_type"] = photo

        product.update(**kwargs)
        return product

    @staticmethod
    def delete_product(product_id: str):
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found")

        product.delete()
        logger.info(f"Deleted product {product_id}")

    @staticmethod
    def get_product_by_id(product_id: str) -> Product:
        product = db.session.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def get_product_by_slug(slug: str) -> Product:
        product = Product.query.filter_by(slug=slug).first()
        if not product:
            raise NotFoundError("Product not found")
        return product

    @staticmethod
    def get_latest_products(limit: int):
        return Product.query.order_by(Product.created_at.desc()).limit(limit).all()

    @staticmethod
    def count_products() -> int:
        return Product.query.count()

    @staticmethod
    def get_product_page(page: int, per_page: int):
        return Product.query.order_by(Product.created_at.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    @staticmethod
    def filter_products(category_ids=None, price_range=None):
        """Filter by any of the given categories and an inclusive price range"""
        query = Product.query

        if category_ids:
            query = query.filter(Product.category_id.in_(category_ids))

        if price_range:
            low, high = price_range
            query = query.filter(Product.price >= low, Product.price <= high)

        return query.order_by(Product.created_at.desc()).all()

    @staticmethod
    def search_products(keyword: str):
        """Case-insensitive match on name or description"""
        return Product.query.filter(
            or_(
                Product.name.icontains(keyword, autoescape=True),
                Product.description.icontains(keyword, autoescape=True),
            )
        ).all()

    @staticmethod
    def get_related_products(product_id: str, category_id: str, limit: int = 3):
        return (
            Product.query.filter(Product.category_id == category_id, Product.id != product_id)
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_products_by_category(slug: str):
        category = Category.query.filter_by(slug=slug).first()
        if not category:
            raise NotFoundError("Category not found")

        products = category.products.order_by(Product.created_at.desc()).all()
        return category, products
