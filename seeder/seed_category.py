import json
import os
from sqlalchemy import func
from models.category import Category
from database_init import db
from util.until import make_slug


def seed_categories(app):
    """Seed categories từ ./data/category.json, bỏ qua tên đã tồn tại."""
    data_file = os.path.abspath(os.path.join(os.path.dirname(__file__), "data", "category.json"))

    with open(data_file, "r", encoding="utf-8") as f:
        names = json.load(f)

    with app.app_context():
        added_count = 0
        for name in names:
            if not Category.query.filter(func.lower(Category.name) == name.lower()).first():
                db.session.add(Category(name=name, slug=make_slug(name)))
                added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Đã thêm {added_count} category mới.")
        else:
            print("⚠️ Không có category mới để thêm (đã tồn tại hết).")
