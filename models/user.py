from datetime import datetime
from database_init import db
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from util.constant import ROLE_ADMIN, ROLE_USER


class User(UserMixin, db.Model):
    __tablename__ = "user"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(150), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)  # hash, không lưu mật khẩu gốc
    phone = db.Column(db.String(20), nullable=False)
    address = db.Column(db.String(150), nullable=False)
    answer = db.Column(db.String(100), nullable=False)  # câu trả lời bảo mật
    role = db.Column(db.Integer, nullable=False, default=ROLE_USER)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    orders = db.relationship("Order", back_populates="buyer", lazy=True)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def set_password(self, raw_password):
        self.password = generate_password_hash(raw_password)

    def check_password(self, raw_password):
        if not raw_password:
            return False
        return check_password_hash(self.password, raw_password)

    def __repr__(self):
        return f"<User {self.id} - {self.email}>"
