from ecommerce.models.base import BaseModel
from ecommerce.extensions import db
from ecommerce.enums import OrderStatus


class Order(BaseModel):
    __tablename__ = "orders"

    order_number = db.Column(db.String(50), unique=True, nullable=False, index=True)
    buyer_id = db.Column(
        db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    total_amount = db.Column(db.Numeric(12, 2), nullable=False)
    payment = db.Column(db.JSON, nullable=False, default=dict)
    status = db.Column(
        db.Enum(
            OrderStatus,
            name="order_statuses",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=OrderStatus.NOT_PROCESSED,
        nullable=False,
    )

    # Relationships
    items = db.relationship(
        "OrderItem", backref="order", lazy="dynamic", cascade="all, delete-orphan"
    )

    def calculate_total(self):
        total = sum(item.price for item in self.items)
        self.total_amount = total
        return total

    def to_dict(self, include_items=False):
        data = super().to_dict()
        data["total_amount"] = float(self.total_amount)
        data["buyer"] = {"id": self.buyer.id, "name": self.buyer.name}
        if include_items:
            data["products"] = [item.to_dict() for item in self.items]
        return data


class OrderItem(BaseModel):
    """One purchased unit; the cart holds one entry per unit"""

    __tablename__ = "order_items"

    order_id = db.Column(
        db.String(36),
        db.ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = db.Column(
        db.String(36),
        db.ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    product_name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(12, 2), nullable=False)

    def to_dict(self):
        data = super().to_dict()
        data["price"] = float(self.price)
        data["name"] = data.pop("product_name")
        return data
