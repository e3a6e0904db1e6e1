# service/order_service.py
import logging

from sqlalchemy.orm import joinedload, selectinload
from database_init import db
from models.order import Order
from models.order_item import OrderItem
from models.product import Product
from service.result import ServiceResult, catch_store_errors
from util.serializer import order_to_dict
from util.until import parse_id, to_price

logger = logging.getLogger(__name__)


def _orders_query():
    return Order.query.options(
        joinedload(Order.buyer),
        selectinload(Order.order_items).joinedload(OrderItem.product),
    )


@catch_store_errors("Error WHile Geting Orders")
def get_buyer_orders(user):
    orders = _orders_query().filter(Order.buyer_id == user.id).order_by(Order.id).all()
    return ServiceResult.ok(200, orders=[order_to_dict(o) for o in orders])


@catch_store_errors("Error WHile Geting Orders")
def get_all_orders():
    orders = _orders_query().order_by(Order.created_at.desc(), Order.id.desc()).all()
    return ServiceResult.ok(200, orders=[order_to_dict(o) for o in orders])


@catch_store_errors("Error While Updateing Order")
def update_order_status(order_id, status):
    """Trạng thái nào trong enum cũng đổi được sang trạng thái khác, không có ràng buộc."""
    oid = parse_id(order_id)
    order = db.session.get(Order, oid) if oid else None
    if not order:
        return ServiceResult.fail(
            400, "Invalid order id was provided and order cannot be found"
        )
    order.status = status
    db.session.commit()
    logger.info("Order %s -> %s", oid, status)
    return ServiceResult.ok(200, "Order status updated", order=order_to_dict(order))


def cart_total(cart):
    """
    Tổng tiền giỏ hàng = cộng dồn price của từng dòng.
    Lưu ý: không nhân với quantity (giữ nguyên cách tính hiện tại).
    """
    total = to_price(0)
    for line in cart:
        total += to_price(line.get("price", 0))
    return total


def create_order(buyer, cart, payment):
    """Lưu order sau khi cổng thanh toán báo thành công. Dòng không có sản phẩm hợp lệ bị bỏ qua."""
    order = Order(buyer_id=buyer.id, payment=payment)
    db.session.add(order)
    for line in cart:
        pid = parse_id(line.get("_id", line.get("id")))
        product = db.session.get(Product, pid) if pid else None
        if not product:
            logger.warning("Bỏ qua dòng giỏ hàng không hợp lệ: %s", line)
            continue
        quantity = parse_id(line.get("quantity", 1)) or 1
        order.order_items.append(
            OrderItem(
                product_id=product.id,
                name=product.name,
                price=to_price(line.get("price", product.price)),
                quantity=quantity,
            )
        )
    db.session.commit()
    return order
