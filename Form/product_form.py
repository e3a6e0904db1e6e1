import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from flask_wtf.file import FileField, FileSize
from wtforms import StringField
from wtforms.validators import AnyOf, DataRequired, Length, Regexp, ValidationError

from Form.forms import ApiForm
from util.constant import MAX_PHOTO_SIZE, PRICE_REGEX, QUANTITY_REGEX
from util.until import parse_id

PRICE_ERROR = "Price must be a positive number when parsed"
QUANTITY_ERROR = "Quantity must be a stringed positive integer"
SHIPPING_ERROR = "Shipping must either take on values 0 or 1"
PHOTO_ERROR = "photo is Required and should be less then 1mb"
UPDATE_PHOTO_ERROR = "Photo should be less then 1mb"


class ProductForm(ApiForm):
    """Body multipart khi admin tạo sản phẩm."""

    error_order = ("photo", "name", "description", "category", "price", "quantity", "shipping")

    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Name is Required"),
            Length(max=100, message="Name of product can only be up to 100 characters long"),
        ],
    )
    description = StringField(
        "Description",
        validators=[
            DataRequired(message="Description is Required"),
            Length(
                max=500,
                message="Description of product can only be up to 500 characters long",
            ),
        ],
    )
    price = StringField("Price", validators=[DataRequired(message="Price is Required")])
    category = StringField(
        "Category",
        validators=[
            DataRequired(message="Category is Required"),
            Regexp(r"^[0-9]+$", message="Category id must be a valid id"),
        ],
    )
    quantity = StringField(
        "Quantity", validators=[DataRequired(message="Quantity is Required")]
    )
    shipping = StringField(
        "Shipping", validators=[AnyOf(["0", "1"], message=SHIPPING_ERROR)]
    )
    photo = FileField(
        "Photo",
        validators=[
            FileSize(
                max_size=MAX_PHOTO_SIZE,
                message=PHOTO_ERROR,
            )
        ],
    )

    def validate_price(self, field):
        if not re.match(PRICE_REGEX, field.data) or float(field.data) <= 0:
            raise ValidationError(PRICE_ERROR)

    def validate_quantity(self, field):
        # Số dương và vừa cột Integer
        if not re.match(QUANTITY_REGEX, field.data) or parse_id(field.data) is None:
            raise ValidationError(QUANTITY_ERROR)


class UpdateProductForm(ProductForm):
    shipping = StringField(
        "Shipping",
        validators=[
            DataRequired(message="Shipping is Required"),
            AnyOf(["0", "1"], message=SHIPPING_ERROR),
        ],
    )
    photo = FileField(
        "Photo",
        validators=[
            FileSize(max_size=MAX_PHOTO_SIZE, message=UPDATE_PHOTO_ERROR)
        ],
    )


CHECKED_ERROR = "'checked' must be an array with valid category ids"
RADIO_ERROR = "'radio' must an empty array or an array with two numbers"


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ProductFilter:
    """Body của product-filters: checked = danh sách id category, radio = [min, max]."""

    category_ids: List[int] = field(default_factory=list)
    price_range: Optional[Tuple[float, float]] = None

    @classmethod
    def parse(cls, payload):
        """Trả về (ProductFilter, None) hoặc (None, thông báo lỗi)."""
        if not isinstance(payload, dict):
            payload = {}
        checked = payload.get("checked")
        radio = payload.get("radio")

        if not isinstance(checked, list):
            return None, CHECKED_ERROR
        category_ids = [parse_id(value) for value in checked]
        if any(cid is None for cid in category_ids):
            return None, CHECKED_ERROR

        if (
            not isinstance(radio, list)
            or len(radio) not in (0, 2)
            or not all(_is_number(num) for num in radio)
        ):
            return None, RADIO_ERROR

        price_range = None
        if radio:
            try:
                price_range = (float(radio[0]), float(radio[1]))
            except OverflowError:
                return None, RADIO_ERROR
        return cls(category_ids=category_ids, price_range=price_range), None
