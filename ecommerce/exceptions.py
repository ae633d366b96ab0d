class NotFoundError(ValueError):
    """Requested record does not exist"""


class ConflictError(ValueError):
    """Record clashes with an existing one"""


class PaymentError(ValueError):
    """Payment gateway refused or failed the request"""


class GatewayUnavailableError(PaymentError):
    """Payment gateway could not be reached or rejected our credentials"""
