import bcrypt

SALT_ROUNDS = 10


def _normalize_password(password) -> bytes:
    # bool is a subclass of int and must not pass as a number
    if isinstance(password, bool) or not isinstance(password, (str, int, float)):
        raise ValueError("Password must be a string or a number")

    value = str(password)
    if not value:
        raise ValueError("Password must not be empty")
    return value.encode("utf-8")


def hash_password(password) -> str:
    """Hash a password with bcrypt using a fresh salt"""
    return bcrypt.hashpw(
        _normalize_password(password), bcrypt.gensalt(rounds=SALT_ROUNDS)
    ).decode("utf-8")


def compare_password(password, hashed_password: str) -> bool:
    """Check a plain password against a bcrypt hash"""
    return bcrypt.checkpw(
        _normalize_password(password), hashed_password.encode("utf-8")
    )
