from enum import Enum

# Phân trang / giới hạn sản phẩm
PRODUCT_LIMIT = 12
PER_PAGE_LIMIT = 6
RELATED_PRODUCT_LIMIT = 3

MAX_PHOTO_SIZE = 1000000  # 1MB
TOKEN_EXPIRES_DAYS = 7

# Giá trị lớn nhất của cột Integer (INT có dấu của MySQL)
MAX_DB_INT = 2147483647

ROLE_USER = 0
ROLE_ADMIN = 1

EMAIL_REGEX = (
    r"^(?!^\.)(?!.*\.@)(?!.*\.{2})[a-zA-Z0-9.]{1,64}"
    r"@(?!@\.)(?!.*\.$)(?!.*\.{2})[a-zA-Z0-9.]{1,64}$"
)
PHONE_REGEX = r"^[689]\d{7}$"
PRICE_REGEX = r"^\d*\.?\d+$"
QUANTITY_REGEX = r"^-?\d+$"


class ORDER_STATUS(Enum):
    not_processed = (0, "Not Processed")
    processing = (1, "Processing")
    shipped = (2, "Shipped")
    delivered = (3, "Delivered")
    cancelled = (4, "Cancelled")

    def __init__(self, order, label):
        self.order = order
        self.label = label

    @classmethod
    def labels(cls):
        return [status.label for status in cls]
