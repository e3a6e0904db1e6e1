from wtforms import StringField
from wtforms.validators import DataRequired, Length
from Form.forms import ApiForm


class CreateCategoryForm(ApiForm):
    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Name is required"),
            Length(
                max=100,
                message="Name of category can only be up to 100 characters long",
            ),
        ],
    )


class UpdateCategoryForm(ApiForm):
    name = StringField(
        "Name",
        validators=[
            DataRequired(message="The category name is required"),
            Length(
                max=100,
                message="The name of the category can only be up to 100 characters long",
            ),
        ],
    )
