from .user import User
from .category import Category
from .order import Order, OrderItem
from .product import Product

__all__ = [
    "User",
    "Category",
    "Product",
    "Order",
    "OrderItem",
]
