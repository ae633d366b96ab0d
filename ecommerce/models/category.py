from ecommerce.models.base import BaseModel
from ecommerce.extensions import db


class Category(BaseModel):
    """Category model"""
    __tablename__ = 'categories'

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)

    # Relationships
    products = db.relationship('Product', backref='category', lazy='dynamic')
