from enum import Enum, IntEnum


class UserRole(IntEnum):
    CUSTOMER = 0
    ADMIN = 1


class OrderStatus(str, Enum):
    NOT_PROCESSED = "Not Processed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
