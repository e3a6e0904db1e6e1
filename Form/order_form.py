from wtforms import StringField
from wtforms.validators import AnyOf
from Form.forms import ApiForm
from util.constant import ORDER_STATUS


class OrderStatusForm(ApiForm):
    status = StringField(
        "Status",
        validators=[
            AnyOf(ORDER_STATUS.labels(), message="Invalid order status is provided")
        ],
    )
