from ecommerce.models.base import BaseModel
from ecommerce.extensions import db
from ecommerce.enums import UserRole
from ecommerce.utils.security import hash_password, compare_password


class User(BaseModel):
    __tablename__ = "users"

    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    address = db.Column(db.Text, nullable=False)
    answer = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Integer, default=UserRole.CUSTOMER, nullable=False)

    # Relationships
    orders = db.relationship(
        "Order", backref="buyer", lazy="dynamic", cascade="all, delete-orphan"
    )

    def set_password(self, password: str):
        self.password_hash = hash_password(password)

    def check_password(self, password: str) -> bool:
        return compare_password(password, self.password_hash)

    def has_role(self, role: int) -> bool:
        return self.role == role

    @property
    def is_admin(self) -> bool:
        return self.has_role(UserRole.ADMIN)

    def to_dict(self, include_sensitive=False):
        data = super().to_dict()
        if not include_sensitive:
            data.pop("password_hash", None)
            data.pop("answer", None)
        return data
