import pytest
from decimal import Decimal
from ecommerce.extensions import db
from ecommerce.enums import UserRole, OrderStatus
from ecommerce.models.user import User
from ecommerce.models.order import Order, OrderItem


class TestUserModel:
    """Test User model"""

    def test_password_hashing(self, app, customer_user):
        assert customer_user.password_hash != "password123"
        assert customer_user.check_password("password123")
        assert not customer_user.check_password("wrong")

    def test_default_role_is_customer(self, app):
        user = User(name="N", email="n@test.com", phone="1", address="a", answer="b")
        user.set_password("secret1")
        db.session.add(user)
        db.session.commit()

        assert user.role == UserRole.CUSTOMER
        assert not user.is_admin

    def test_admin_flag(self, app, admin_user):
        assert admin_user.role == 1
        assert admin_user.is_admin

    def test_to_dict_hides_secrets(self, app, customer_user):
        data = customer_user.to_dict()

        assert "password_hash" not in data
        assert "answer" not in data
        assert data["email"] == "customer@test.com"

    def test_to_dict_sensitive(self, app, customer_user):
        data = customer_user.to_dict(include_sensitive=True)

        assert "password_hash" in data


class TestProductModel:
    """Test Product model"""

    def test_deduct_stock(self, app, product):
        product.deduct_stock(3)
        db.session.commit()

        assert product.quantity == 7

    def test_deduct_stock_insufficient(self, app, product):
        with pytest.raises(ValueError, match="Insufficient stock"):
            product.deduct_stock(11)

    def test_to_dict(self, app, product):
        data = product.to_dict()

        assert isinstance(data["price"], float)
        assert data["has_photo"] is True
        assert "photo" not in data
        assert "category" not in data

    def test_to_dict_with_category(self, app, product):
        data = product.to_dict(include_category=True)

        assert data["category"]["slug"] == "electronics"


class TestOrderModel:
    """Test Order model"""

    def test_order_defaults_and_total(self, app, customer_user, product, book):
        order = Order(
            order_number="ORD1",
            buyer_id=customer_user.id,
            total_amount=Decimal("0"),
            payment={"success": True},
        )
        db.session.add(order)
        db.session.flush()
        for item in (product, book):
            db.session.add(OrderItem(
                order_id=order.id, product_id=item.id,
                product_name=item.name, price=item.price,
            ))
        db.session.flush()

        assert order.calculate_total() == Decimal("1579.98")
        db.session.commit()

        assert order.status == OrderStatus.NOT_PROCESSED
        data = order.to_dict(include_items=True)
        assert data["status"] == "Not Processed"
        assert data["buyer"]["name"] == "Test Customer"
        assert {p["name"] for p in data["products"]} == {"Laptop", "Textbook"}

    def test_items_survive_product_deletion(self, app, customer_user, product):
        order = Order(
            order_number="ORD2", buyer_id=customer_user.id,
            total_amount=product.price, payment={},
        )
        db.session.add(order)
        db.session.flush()
        db.session.add(OrderItem(
            order_id=order.id, product_id=product.id,
            product_name=product.name, price=product.price,
        ))
        db.session.commit()

        product.delete()

        item = order.items.first()
        assert item.product_id is None
        assert item.product_name == "Laptop"
