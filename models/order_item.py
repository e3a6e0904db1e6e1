from database_init import db


class OrderItem(db.Model):
    __tablename__ = 'order_item'
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('order.id'), nullable=False)
    product_id = db.Column(
        db.Integer, db.ForeignKey('product.id', ondelete="SET NULL"), nullable=True
    )
    # Snapshot lúc thanh toán, giữ lại kể cả khi sản phẩm bị xóa
    name = db.Column(db.String(100), nullable=True)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)

    order = db.relationship("Order", back_populates="order_items")
    product = db.relationship("Product", back_populates="order_items")

    def __repr__(self):
        return f"<OrderItem {self.id} - Order {self.order_id} - Product {self.product_id}>"
