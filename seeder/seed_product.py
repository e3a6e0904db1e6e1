import json
from sqlalchemy import func
from models.category import Category
from models.product import Product
from database_init import db
from util.until import make_slug, to_price
import os

def seed_product(app):
    """Seed all products from ./data/product.json into database."""
    data_file = os.path.join(os.path.dirname(__file__), "./data/product.json")
    # Đảm bảo đường dẫn đúng
    data_file = os.path.abspath(data_file)

    # Đọc file product.json
    with open(data_file, "r", encoding="utf-8") as f:
        products = json.load(f)

    with app.app_context():
        added_count = 0
        for prod in products:
            # Kiểm tra nếu sản phẩm đã tồn tại (theo tên, không phân biệt hoa thường)
            if Product.query.filter(func.lower(Product.name) == prod["name"].lower()).first():
                continue
            category = Category.query.filter_by(slug=make_slug(prod["category"])).first()
            if not category:
                print(f"⚠️ Bỏ qua {prod['name']}: không có category {prod['category']}")
                continue
            product = Product(
                name=prod["name"],
                slug=make_slug(prod["name"]),
                description=prod["description"],
                price=to_price(prod["price"]),
                category_id=category.id,
                quantity=prod["quantity"],
                shipping=prod.get("shipping", False),
            )
            db.session.add(product)
            added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Đã thêm {added_count} sản phẩm mới.")
        else:
            print("⚠️ Không có sản phẩm mới để thêm (đã tồn tại hết).")
