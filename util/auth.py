import logging
from datetime import datetime, timedelta, timezone
from functools import wraps

import jwt
from flask import current_app, jsonify
from flask_login import LoginManager, current_user, login_required

from database_init import db
from models.user import User
from util.constant import TOKEN_EXPIRES_DAYS

logger = logging.getLogger(__name__)

JWT_ALGO = "HS256"
UNAUTHORIZED_MESSAGE = "Unauthorized Access"

login_manager = LoginManager()


def create_token(user):
    exp = datetime.now(timezone.utc) + timedelta(days=TOKEN_EXPIRES_DAYS)
    payload = {"_id": user.id, "exp": exp}
    return jwt.encode(payload, current_app.config["JWT_SECRET"], algorithm=JWT_ALGO)


def decode_token(token):
    return jwt.decode(token, current_app.config["JWT_SECRET"], algorithms=[JWT_ALGO])


def _token_from_header(header):
    # Chấp nhận cả "Bearer <token>" lẫn token trần như frontend cũ gửi
    if not header:
        return None
    if header.lower().startswith("bearer "):
        return header[7:].strip() or None
    return header.strip() or None


# Lấy user theo token trong header Authorization, mỗi request một lần
@login_manager.request_loader
def load_user_from_request(request):
    token = _token_from_header(request.headers.get("Authorization"))
    if not token:
        return None
    try:
        payload = decode_token(token)
    except jwt.PyJWTError as e:
        logger.info(f"Token không hợp lệ: {e}")
        return None
    user_id = payload.get("_id")
    if not isinstance(user_id, int):
        return None
    return db.session.get(User, user_id)


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({"success": False, "message": UNAUTHORIZED_MESSAGE}), 401


def admin_required(f):
    """Decorator cho route chỉ dành cho admin (role = 1)."""

    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not current_user.is_admin:
            return jsonify({"success": False, "message": UNAUTHORIZED_MESSAGE}), 401
        return f(*args, **kwargs)

    return decorated_function
