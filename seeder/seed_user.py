# seeder/seed_user.py
import os
from dotenv import load_dotenv

from models.user import User
from database_init import db
from util.constant import ROLE_ADMIN

load_dotenv()


def seed_admin_user(app):
    with app.app_context():
        name = os.getenv("ADMIN_NAME", "Admin")
        email = os.getenv("ADMIN_EMAIL")
        raw_password = os.getenv("ADMIN_PASSWORD")

        if not email or not raw_password:
            print("❌ Thiếu ADMIN_EMAIL hoặc ADMIN_PASSWORD trong .env")
            return

        if not User.query.filter_by(email=email).first():
            user = User(
                name=name,
                email=email,
                phone=os.getenv("ADMIN_PHONE", "91234567"),
                address=os.getenv("ADMIN_ADDRESS", "Admin office"),
                answer=os.getenv("ADMIN_ANSWER", "admin"),
                role=ROLE_ADMIN,
            )
            user.set_password(raw_password)
            db.session.add(user)
            db.session.commit()
            print(f"✅ Đã tạo user admin: {email}")
        else:
            print("⚠️ User admin đã tồn tại, bỏ qua.")
