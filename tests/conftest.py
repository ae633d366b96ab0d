import pytest
from decimal import Decimal
from ecommerce import create_app, db
from ecommerce.config import TestConfig
from ecommerce.enums import UserRole
from ecommerce.models.user import User
from ecommerce.models.product import Product
from ecommerce.models.category import Category

PHOTO_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


@pytest.fixture(scope="function")
def app():
    """Create application for testing"""
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Test client"""
    return app.test_client()


# User fixtures
@pytest.fixture
def customer_user(app):
    """Create a customer user"""
    user = User(
        name="Test Customer",
        email="customer@test.com",
        phone="91234567",
        address="1 Customer Road",
        answer="football",
        role=UserRole.CUSTOMER,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_user(app):
    """Create an admin user"""
    user = User(
        name="Test Admin",
        email="admin@test.com",
        phone="98765432",
        address="2 Admin Avenue",
        answer="tennis",
        role=UserRole.ADMIN,
    )
    user.set_password("password123")
    db.session.add(user)
    db.session.commit()
    return user


# Auth token fixtures
@pytest.fixture
def customer_token(client, customer_user):
    """Get customer authentication token"""
    response = client.post(
        "/api/v1/auth/login", json={"email": "customer@test.com", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["token"]


@pytest.fixture
def admin_token(client, admin_user):
    """Get admin authentication token"""
    response = client.post(
        "/api/v1/auth/login", json={"email": "admin@test.com", "password": "password123"}
    )
    assert response.status_code == 200, f"Login failed: {response.json}"
    return response.json["token"]


@pytest.fixture
def customer_headers(customer_token):
    """Customer authentication headers"""
    return {"Authorization": f"Bearer {customer_token}"}


@pytest.fixture
def admin_headers(admin_token):
    """Admin authentication headers"""
    return {"Authorization": f"Bearer {admin_token}"}


# Data fixtures
@pytest.fixture
def category(app):
    """Create a test category"""
    category = Category(name="Electronics", slug="electronics")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def book_category(app):
    category = Category(name="Book", slug="book")
    db.session.add(category)
    db.session.commit()
    return category


@pytest.fixture
def product(app, category):
    """Create a test product"""
    product = Product(
        category_id=category.id,
        name="Laptop",
        slug="laptop",
        description="A powerful laptop",
        price=Decimal("1499.99"),
        quantity=10,
        shipping=True,
        photo=PHOTO_BYTES,
        photo_content_type="image/jpeg",
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def book(app, book_category):
    product = Product(
        category_id=book_category.id,
        name="Textbook",
        slug="textbook",
        description="A comprehensive textbook",
        price=Decimal("79.99"),
        quantity=5,
        shipping=False,
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def photo_bytes():
    return PHOTO_BYTES
