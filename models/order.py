from datetime import datetime
from database_init import db
from util.constant import ORDER_STATUS


class Order(db.Model):
    __tablename__ = "order"
    id = db.Column(db.Integer, primary_key=True)
    buyer_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=False)
    payment = db.Column(db.JSON, nullable=True)  # kết quả giao dịch từ cổng thanh toán
    status = db.Column(
        db.String(30), nullable=False, default=ORDER_STATUS.not_processed.label
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    buyer = db.relationship("User", back_populates="orders")
    order_items = db.relationship(
        "OrderItem", back_populates="order", lazy=True, cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Order {self.id} - User {self.buyer_id}>"
