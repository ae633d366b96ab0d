from .user_schema import UserSchema
from marshmallow import Schema, fields, validate, validates_schema, pre_load, ValidationError, EXCLUDE
from ecommerce.enums import OrderStatus


def _required(label):
    return {"required": f"{label} is Required", "null": f"{label} is Required"}


class RequiredFieldsSchema(Schema):
    """Empty strings count as missing fields"""

    @pre_load
    def drop_empty_strings(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items() if value != ""}


class UserRegisterSchema(RequiredFieldsSchema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages=_required("Name"))
    email = fields.Email(required=True, error_messages=_required("Email"))
    password = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Password"))
    phone = fields.Str(required=True, validate=validate.Length(min=1, max=20), error_messages=_required("Phone"))
    address = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Address"))
    answer = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Answer"))


class UserLoginSchema(RequiredFieldsSchema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Str(required=True, validate=validate.Length(min=1),
                       error_messages={"required": "Invalid email or password",
                                       "null": "Invalid email or password"})
    password = fields.Str(required=True, validate=validate.Length(min=1),
                          error_messages={"required": "Invalid email or password",
                                          "null": "Invalid email or password"})


class ForgotPasswordSchema(RequiredFieldsSchema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Email"))
    answer = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Answer"))
    new_password = fields.Str(required=True, data_key="newPassword", validate=validate.Length(min=1),
                              error_messages=_required("New Password"))


class ProfileUpdateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1, max=255))
    password = fields.Str(validate=validate.Length(
        min=6, error="Password is required and 6 character long"))
    phone = fields.Str(validate=validate.Length(max=20))
    address = fields.Str()


class CategorySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, error="Name is required"),
                      error_messages={"required": "Name is required", "null": "Name is required"})


class ProductFormSchema(RequiredFieldsSchema):
    """Multipart form fields of the product create/update forms"""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages=_required("Name"))
    description = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Description"))
    price = fields.Decimal(required=True, places=2, validate=validate.Range(min=0), error_messages=_required("Price"))
    category = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Category"))
    quantity = fields.Int(required=True, validate=validate.Range(min=0), error_messages=_required("Quantity"))
    shipping = fields.Bool(load_default=False)


class ProductFilterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    checked = fields.List(fields.Str(), load_default=list)
    radio = fields.List(fields.Float(), load_default=list)

    @validates_schema
    def validate_radio(self, data, **kwargs):
        radio = data.get("radio") or []
        if radio and len(radio) != 2:
            raise ValidationError("Price range must have a minimum and a maximum", "radio")


class CartItemSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Str(required=True)


class PaymentSchema(RequiredFieldsSchema):
    class Meta:
        unknown = EXCLUDE

    nonce = fields.Str(required=True, validate=validate.Length(min=1), error_messages=_required("Nonce"))
    cart = fields.List(
        fields.Nested(CartItemSchema), required=True,
        validate=validate.Length(min=1, error="Cart is empty"), error_messages=_required("Cart"),
    )


class OrderStatusSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, validate=validate.OneOf([s.value for s in OrderStatus]),
                        error_messages=_required("Status"))
