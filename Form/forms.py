from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField
from wtforms.validators import DataRequired, Length, Optional, Regexp
from util.constant import EMAIL_REGEX, PHONE_REGEX


def _is_blank(data):
    return data is None or (isinstance(data, str) and not data.strip())


class ApiForm(FlaskForm):
    """
    Form gốc cho body của API (JSON hoặc multipart), không dùng CSRF.
    Lỗi được trả về từng cái một qua first_error().
    """

    # Thứ tự kiểm tra lỗi định dạng, nếu khác thứ tự khai báo field
    error_order = ()

    class Meta:
        csrf = False

    def first_error(self):
        """Thiếu trường bắt buộc báo trước, sau đó mới tới lỗi định dạng."""
        fields = list(self)
        for field in fields:
            if field.errors and field.flags.required and _is_blank(field.data):
                return field.errors[0]
        if self.error_order:
            ordered = [self[name] for name in self.error_order]
            fields = ordered + [f for f in fields if f.name not in self.error_order]
        for field in fields:
            if field.errors:
                return field.errors[0]
        return None


class RegisterForm(ApiForm):
    error_order = ("name", "password", "email", "phone", "address", "answer")

    name = StringField(
        "Name",
        validators=[
            DataRequired(message="Name is Required"),
            Length(max=150, message="The name can only be up to 150 characters long"),
        ],
    )
    email = StringField(
        "Email",
        validators=[
            DataRequired(message="Email is Required"),
            Regexp(EMAIL_REGEX, message="The email is in an invalid format"),
        ],
    )
    password = PasswordField(
        "Password",
        validators=[
            DataRequired(message="Password is Required"),
            Length(
                min=6,
                message="The length of the password should be at least 6 characters long",
            ),
        ],
    )
    phone = StringField(
        "Phone",
        validators=[
            DataRequired(message="Phone no is Required"),
            Regexp(
                PHONE_REGEX,
                message="The phone number must start with 6,8 or 9 and be 8 digits long",
            ),
        ],
    )
    address = StringField(
        "Address",
        validators=[
            DataRequired(message="Address is Required"),
            Length(max=150, message="The address can only be up to 150 characters long"),
        ],
    )
    answer = StringField(
        "Answer",
        validators=[
            DataRequired(message="Answer is Required"),
            Length(max=100, message="The answer can only be up to 100 characters long"),
        ],
    )


LOGIN_ERROR = "Invalid email or password has been entered or email is not registered"


class LoginForm(ApiForm):
    # Mọi lỗi dùng chung một thông báo
    email = StringField("Email", validators=[DataRequired(message=LOGIN_ERROR)])
    password = PasswordField("Password", validators=[DataRequired(message=LOGIN_ERROR)])


class ForgotPasswordForm(ApiForm):
    error_order = ("newPassword", "email", "answer")

    email = StringField(
        "Email",
        validators=[
            DataRequired(message="Email is required"),
            Regexp(EMAIL_REGEX, message="The email is in an invalid format"),
        ],
    )
    answer = StringField(
        "Answer",
        validators=[
            DataRequired(message="An answer is required"),
            Length(max=100, message="The answer can only be up to 100 characters long"),
        ],
    )
    newPassword = PasswordField(
        "New password",
        validators=[
            DataRequired(message="New Password is required"),
            Length(
                min=6,
                message="The length of the new password should be at least 6 characters long",
            ),
        ],
    )


class ProfileForm(ApiForm):
    """Cập nhật từng phần: trường bỏ trống giữ nguyên giá trị cũ. Email không đổi."""

    name = StringField(
        "Name",
        validators=[
            Optional(),
            Length(max=150, message="The name can only be up to 150 characters long"),
        ],
    )
    password = PasswordField(
        "Password",
        validators=[
            Optional(),
            Length(min=6, message="Password must be at least 6 characters long"),
        ],
    )
    phone = StringField(
        "Phone",
        validators=[
            # Chuỗi toàn khoảng trắng vẫn phải qua Regexp
            Optional(strip_whitespace=False),
            Regexp(
                PHONE_REGEX,
                message="The phone number must start with 6,8 or 9 and be 8 digits long",
            ),
        ],
    )
    address = StringField(
        "Address",
        validators=[
            Optional(),
            Length(max=150, message="The address can only be up to 150 characters long"),
        ],
    )
