from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from Form.forms import RegisterForm, LoginForm, ForgotPasswordForm, ProfileForm
from Form.order_form import OrderStatusForm
from service import auth_service, order_service
from util.auth import admin_required
from util.until import request_formdata

auth_bp = Blueprint("auth", __name__, url_prefix="/api/v1/auth")


def _invalid(form, status=400):
    return jsonify({"success": False, "message": form.first_error()}), status


# Đăng ký
@auth_bp.route("/register", methods=["POST"])
def register():
    form = RegisterForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form)
    return auth_service.register_user(form).to_response()


# Đăng nhập
@auth_bp.route("/login", methods=["POST"])
def login():
    form = LoginForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form)
    return auth_service.authenticate(form).to_response()


# Quên mật khẩu: email + câu trả lời bảo mật
@auth_bp.route("/forgot-password", methods=["POST"])
def forgot_password():
    form = ForgotPasswordForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form)
    return auth_service.reset_password(form).to_response()


@auth_bp.route("/test")
@admin_required
def test():
    return "Protected Routes"


# Dùng cho route guard phía frontend
@auth_bp.route("/user-auth")
@login_required
def user_auth():
    return jsonify({"ok": True})


@auth_bp.route("/admin-auth")
@admin_required
def admin_auth():
    return jsonify({"ok": True})


@auth_bp.route("/profile", methods=["PUT"])
@login_required
def update_profile():
    form = ProfileForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form)
    return auth_service.update_profile(
        current_user._get_current_object(), form
    ).to_response()


@auth_bp.route("/users")
@admin_required
def list_users():
    return auth_service.list_users().to_response()


# Đơn hàng của chính user
@auth_bp.route("/orders")
@login_required
def orders():
    return order_service.get_buyer_orders(current_user).to_response()


@auth_bp.route("/all-orders")
@admin_required
def all_orders():
    return order_service.get_all_orders().to_response()


@auth_bp.route("/order-status/<order_id>", methods=["PUT"])
@admin_required
def order_status(order_id):
    form = OrderStatusForm(formdata=request_formdata())
    if not form.validate():
        return _invalid(form)
    return order_service.update_order_status(order_id, form.status.data).to_response()
