from ecommerce.models.user import User
from ecommerce.extensions import db
from ecommerce.exceptions import NotFoundError, ConflictError
from ecommerce.schemas import UserSchema
from flask_jwt_extended import create_access_token

user_schema = UserSchema()
users_schema = UserSchema(many=True)


class AuthService:
    """Registration, login and account maintenance"""

    @staticmethod
    def register_user(name: str, email: str, password: str, phone: str,
                      address: str, answer: str) -> User:
        if User.query.filter_by(email=email).first():
            raise ConflictError("Already Registered. Please login")

        user = User(
            name=name,
            email=email,
            phone=phone,
            address=address,
            answer=answer,
        )
        user.set_password(password)
        return user.save()

    @staticmethod
    def login_user(email: str, password: str) -> dict:
        """Authenticate user and issue an access token"""
        user = User.query.filter_by(email=email).first()
        if not user:
            raise NotFoundError("Email is not registered")

        if not user.check_password(password):
            raise ValueError("Invalid Password")

        token = create_access_token(identity=user.id)
        return {
            "user": user_schema.dump(user),
            "token": token,
        }

    @staticmethod
    def reset_password(email: str, answer: str, new_password: str) -> User:
        user = User.query.filter_by(email=email, answer=answer).first()
        if not user:
            raise NotFoundError("Wrong Email Or Answer")

        user.set_password(new_password)
        db.session.commit()
        return user

    @staticmethod
    def update_profile(user: User, **kwargs) -> User:
        """Update editable profile fields; email stays fixed"""
        if "password" in kwargs:
            user.set_password(kwargs.pop("password"))

        user.update(**{k: v for k, v in kwargs.items() if k in ("name", "phone", "address")})
        return user

    @staticmethod
    def get_user_by_id(user_id: str) -> User:
        user = db.session.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    @staticmethod
    def list_users(page: int = 1, per_page: int = 20):
        return User.query.order_by(User.created_at.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )
