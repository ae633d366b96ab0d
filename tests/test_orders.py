import uuid
import pytest
from decimal import Decimal
from unittest.mock import MagicMock, patch
from braintree.exceptions.authentication_error import AuthenticationError
from sqlalchemy.exc import SQLAlchemyError
from ecommerce.extensions import db
from ecommerce.enums import OrderStatus
from ecommerce.models.order import Order
from ecommerce.models.product import Product
from ecommerce.services.payment_service import PaymentService


def sale_result(success=True, message=None, amount="0.00"):
    result = MagicMock()
    result.is_success = success
    result.message = message
    result.transaction.id = "txn123"
    result.transaction.status = "submitted_for_settlement"
    result.transaction.amount = Decimal(amount)
    return result


@pytest.fixture
def gateway():
    """Braintree gateway double"""
    gateway = MagicMock()
    gateway.client_token.generate.return_value = "client-token-abc"
    gateway.transaction.sale.return_value = sale_result(amount="1579.98")
    with patch.object(PaymentService, "get_gateway", return_value=gateway):
        yield gateway


@pytest.fixture
def order(app, customer_user, product):
    order = Order(
        order_number="ORD202301010000001234",
        buyer_id=customer_user.id,
        total_amount=product.price,
        payment={"success": True, "transaction_id": "txn-existing"},
    )
    db.session.add(order)
    db.session.commit()
    return order


class TestBraintreeToken:
    def test_client_token(self, client, gateway):
        response = client.get("/api/v1/product/braintree/token")

        assert response.status_code == 200
        assert response.json["clientToken"] == "client-token-abc"

    def test_gateway_unavailable(self, client, gateway):
        gateway.client_token.generate.side_effect = AuthenticationError()
        response = client.get("/api/v1/product/braintree/token")

        assert response.status_code == 502
        assert response.json["success"] is False


class TestBraintreePayment:
    """Test POST /braintree/payment"""

    def test_payment_creates_order(self, client, customer_user, customer_headers, gateway, product, book):
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "fake-valid-nonce", "cart": [{"id": product.id}, {"id": book.id}]},
        )

        assert response.status_code == 201
        assert response.json["ok"] is True
        assert response.json["order"]["status"] == "Not Processed"
        assert response.json["order"]["total_amount"] == pytest.approx(1579.98)
        assert response.json["order"]["payment"]["transaction_id"] == "txn123"
        assert len(response.json["order"]["products"]) == 2

        gateway.transaction.sale.assert_called_once_with({
            "amount": "1579.98",
            "payment_method_nonce": "fake-valid-nonce",
            "options": {"submit_for_settlement": True},
        })
        assert Order.query.filter_by(buyer_id=customer_user.id).count() == 1

    def test_prices_come_from_database(self, client, customer_headers, gateway, book):
        client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": [{"id": book.id, "price": 0.01}]},
        )

        assert gateway.transaction.sale.call_args[0][0]["amount"] == "79.99"

    def test_payment_deducts_stock(self, client, customer_headers, gateway, book):
        client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": [{"id": book.id}, {"id": book.id}]},
        )

        assert db.session.get(Product, book.id).quantity == 3

    def test_insufficient_stock(self, client, customer_headers, gateway, book):
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": [{"id": book.id}] * 6},
        )

        assert response.status_code == 400
        assert "Insufficient stock" in response.json["message"]
        gateway.transaction.sale.assert_not_called()

    def test_declined_payment(self, client, customer_headers, gateway, product):
        gateway.transaction.sale.return_value = sale_result(
            success=False, message="Do Not Honor"
        )
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "fake-processor-declined-visa-nonce", "cart": [{"id": product.id}]},
        )

        assert response.status_code == 400
        assert response.json["message"] == "Do Not Honor"
        assert Order.query.count() == 0
        assert db.session.get(Product, product.id).quantity == 10

    def test_gateway_unavailable(self, client, customer_headers, gateway, product):
        gateway.transaction.sale.side_effect = AuthenticationError()
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": [{"id": product.id}]},
        )

        assert response.status_code == 502
        assert response.json["message"] == "Payment gateway unavailable"
        assert Order.query.count() == 0

    def test_failed_order_voids_sale(self, client, customer_headers, gateway, product):
        with patch.object(db.session, "commit", side_effect=SQLAlchemyError("DB error")):
            response = client.post(
                "/api/v1/product/braintree/payment",
                headers=customer_headers,
                json={"nonce": "nonce", "cart": [{"id": product.id}]},
            )

        assert response.status_code == 500
        gateway.transaction.void.assert_called_once_with("txn123")
        assert Order.query.count() == 0
        assert db.session.get(Product, product.id).quantity == 10

    def test_unknown_product(self, client, customer_headers, gateway):
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": [{"id": str(uuid.uuid4())}]},
        )

        assert response.status_code == 404

    def test_empty_cart(self, client, customer_headers, gateway):
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"nonce": "nonce", "cart": []},
        )

        assert response.status_code == 400
        assert response.json["message"] == "Cart is empty"

    def test_missing_nonce(self, client, customer_headers, gateway, product):
        response = client.post(
            "/api/v1/product/braintree/payment",
            headers=customer_headers,
            json={"cart": [{"id": product.id}]},
        )

        assert response.status_code == 400

    def test_requires_sign_in(self, client, gateway, product):
        response = client.post(
            "/api/v1/product/braintree/payment",
            json={"nonce": "nonce", "cart": [{"id": product.id}]},
        )

        assert response.status_code == 401


class TestOrders:
    """Test the order listing and status endpoints"""

    def test_buyer_orders(self, client, customer_headers, order):
        response = client.get("/api/v1/auth/orders", headers=customer_headers)

        assert response.status_code == 200
        assert len(response.json) == 1
        assert response.json[0]["buyer"]["name"] == "Test Customer"
        assert response.json[0]["status"] == "Not Processed"

    def test_buyer_sees_only_own_orders(self, client, admin_headers, order):
        response = client.get("/api/v1/auth/orders", headers=admin_headers)

        assert response.json == []

    def test_orders_require_sign_in(self, client):
        response = client.get("/api/v1/auth/orders")

        assert response.status_code == 401

    def test_all_orders_admin(self, client, admin_headers, order):
        response = client.get("/api/v1/auth/all-orders", headers=admin_headers)

        assert response.status_code == 200
        assert [o["id"] for o in response.json] == [order.id]

    def test_all_orders_customer_forbidden(self, client, customer_headers, order):
        response = client.get("/api/v1/auth/all-orders", headers=customer_headers)

        assert response.status_code == 403

    def test_update_status(self, client, admin_headers, order):
        response = client.put(
            f"/api/v1/auth/order-status/{order.id}", headers=admin_headers, json={"status": "Shipped"}
        )

        assert response.status_code == 200
        assert response.json["order"]["status"] == "Shipped"
        assert db.session.get(Order, order.id).status == OrderStatus.SHIPPED

    def test_update_status_invalid(self, client, admin_headers, order):
        response = client.put(
            f"/api/v1/auth/order-status/{order.id}", headers=admin_headers, json={"status": "Lost"}
        )

        assert response.status_code == 400

    def test_update_status_unknown_order(self, client, admin_headers):
        response = client.put(
            f"/api/v1/auth/order-status/{uuid.uuid4()}", headers=admin_headers, json={"status": "Shipped"}
        )

        assert response.status_code == 404
