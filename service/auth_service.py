# service/auth_service.py
import logging

from database_init import db
from models.user import User
from Form.forms import LOGIN_ERROR
from service.result import ServiceResult, catch_store_errors
from util.auth import create_token
from util.serializer import user_to_dict

logger = logging.getLogger(__name__)


@catch_store_errors("Error in Registration")
def register_user(form):
    email = form.email.data
    if User.query.filter_by(email=email).first():
        return ServiceResult.fail(409, "Already Register please login")

    user = User(
        name=form.name.data,
        email=email,
        phone=form.phone.data,
        address=form.address.data,
        answer=form.answer.data,
    )
    user.set_password(form.password.data)
    db.session.add(user)
    db.session.commit()
    logger.info("Đã đăng ký user mới: %s", email)
    return ServiceResult.ok(201, "User Register Successfully", user=user_to_dict(user))


@catch_store_errors("Error in login")
def authenticate(form):
    """Đăng nhập: sai email hay sai mật khẩu đều trả cùng một lỗi 400."""
    user = User.query.filter_by(email=form.email.data).first()
    if not user or not user.check_password(form.password.data):
        return ServiceResult.fail(400, LOGIN_ERROR)

    return ServiceResult.ok(
        200,
        "login successfully",
        user={
            "_id": user.id,
            "name": user.name,
            "email": user.email,
            "phone": user.phone,
            "address": user.address,
            "role": user.role,
        },
        token=create_token(user),
    )


@catch_store_errors("Something went wrong")
def reset_password(form):
    user = User.query.filter_by(email=form.email.data, answer=form.answer.data).first()
    if not user:
        return ServiceResult.fail(404, "Wrong Email Or Answer")

    user.set_password(form.newPassword.data)
    db.session.commit()
    logger.info("User %s đã đặt lại mật khẩu", user.id)
    return ServiceResult.ok(200, "Password Reset Successfully")


@catch_store_errors("Error While Update profile")
def update_profile(user, form):
    """Trường rỗng giữ nguyên giá trị cũ; mật khẩu rỗng nghĩa là không đổi."""
    user.name = form.name.data or user.name
    user.phone = form.phone.data or user.phone
    user.address = form.address.data or user.address
    if form.password.data:
        user.set_password(form.password.data)
    db.session.commit()
    return ServiceResult.ok(
        200, "Profile Updated Successfully", updatedUser=user_to_dict(user)
    )


@catch_store_errors("Error while getting users")
def list_users():
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return ServiceResult.ok(200, "All Users List", users=[user_to_dict(u) for u in users])
