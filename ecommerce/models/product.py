from ecommerce.models.base import BaseModel
from ecommerce.extensions import db
from sqlalchemy.orm import deferred


class Product(BaseModel):
    __tablename__ = "products"

    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False, index=True)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=False)
    price = db.Column(db.Numeric(12, 2), nullable=False)
    quantity = db.Column(db.Integer, default=0, nullable=False)
    shipping = db.Column(db.Boolean, default=False)
    photo = deferred(db.Column(db.LargeBinary))
    photo_content_type = db.Column(db.String(100))

    # Relationships
    order_items = db.relationship("OrderItem", backref="product")

    def has_stock(self, quantity: int) -> bool:
        return self.quantity >= quantity

    def deduct_stock(self, quantity: int):
        if not self.has_stock(quantity):
            raise ValueError(f"Insufficient stock for product {self.name}")
        self.quantity -= quantity
        return self

    @property
    def has_photo(self) -> bool:
        return self.photo_content_type is not None

    def to_dict(self, include_category=False):
        data = super().to_dict(exclude=("photo",))
        data["price"] = float(self.price)
        data["has_photo"] = self.has_photo
        if include_category:
            data["category"] = self.category.to_dict() if self.category else None
        return data
