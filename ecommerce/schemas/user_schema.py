from ecommerce.extensions import ma


class UserSchema(ma.Schema):
    """Public view of a user sent back to the client"""

    id = ma.Str()
    name = ma.Str()
    email = ma.Email()
    phone = ma.Str()
    address = ma.Str()
    role = ma.Int()
