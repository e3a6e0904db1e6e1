from datetime import datetime
from database_init import db
from util.constant import MAX_PHOTO_SIZE


class Product(db.Model):
    __tablename__ = "product"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)
    slug = db.Column(db.String(120), nullable=False, unique=True, index=True)
    description = db.Column(db.String(500), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    category_id = db.Column(
        db.Integer, db.ForeignKey("category.id", ondelete="SET NULL"), nullable=True
    )
    quantity = db.Column(db.Integer, nullable=False, default=0)
    shipping = db.Column(db.Boolean, default=False)

    # Ảnh lưu thẳng trong DB (tối đa 1MB)
    photo_data = db.Column(db.LargeBinary(length=MAX_PHOTO_SIZE), nullable=True)
    photo_content_type = db.Column(db.String(100), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category = db.relationship("Category", back_populates="products")
    order_items = db.relationship("OrderItem", back_populates="product", lazy=True)

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"
