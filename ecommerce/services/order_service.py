import logging
from collections import Counter
from decimal import Decimal
from ecommerce.models.order import Order, OrderItem
from ecommerce.models.product import Product
from ecommerce.extensions import db
from ecommerce.enums import OrderStatus
from ecommerce.exceptions import NotFoundError
from ecommerce.services.payment_service import PaymentService
from ecommerce.utils.helpers import generate_order_number

logger = logging.getLogger(__name__)


class OrderService:
    @staticmethod
    def _load_cart(cart):
        """Map cart entries to products; each entry is one unit"""
        quantities = Counter(item["id"] for item in cart)
        products = Product.query.filter(Product.id.in_(list(quantities))).all()
        products_map = {p.id: p for p in products}

        if len(products_map) != len(quantities):
            raise NotFoundError("One or more products not found")

        for product_id, qty in quantities.items():
            product = products_map[product_id]
            if not product.has_stock(qty):
                raise ValueError(f"Insufficient stock for {product.name}")

        return [products_map[item["id"]] for item in cart], quantities

    @staticmethod
    def checkout(buyer, nonce: str, cart) -> Order:
        """Charge the cart total and record the order.

        Prices come from the database, never from the client cart.
        """
        products, quantities = OrderService._load_cart(cart)
        total_amount = sum((p.price for p in products), Decimal("0"))

        payment = PaymentService.charge(total_amount, nonce)

        try:
            order = Order(
                order_number=generate_order_number(),
                buyer_id=buyer.id,
                total_amount=total_amount,
                payment=payment,
                status=OrderStatus.NOT_PROCESSED,
            )
            db.session.add(order)
            db.session.flush()

            for product in products:
                db.session.add(OrderItem(
                    order_id=order.id,
                    product_id=product.id,
                    product_name=product.name,
                    description=product.description,
                    price=product.price,
                ))
            for product_id, qty in quantities.items():
                next(p for p in products if p.id == product_id).deduct_stock(qty)
            order.calculate_total()

            db.session.commit()
        except Exception:
            db.session.rollback()
            logger.error(
                f"Order not stored after transaction {payment['transaction_id']}, voiding it",
                exc_info=True,
            )
            PaymentService.void(payment["transaction_id"])
            raise

        logger.info(f"Order {order.order_number} placed by {buyer.id}")
        return order

    @staticmethod
    def get_orders_for_buyer(buyer_id: str):
        return (
            Order.query.filter_by(buyer_id=buyer_id)
            .order_by(Order.created_at.desc())
            .all()
        )

    @staticmethod
    def get_all_orders():
        return Order.query.order_by(Order.created_at.desc()).all()

    @staticmethod
    def update_status(order_id: str, status: str) -> Order:
        order = db.session.get(Order, order_id)
        if not order:
            raise NotFoundError("Order not found")

        order.update(status=OrderStatus(status))
        return order
