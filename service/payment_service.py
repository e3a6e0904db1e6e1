# service/payment_service.py
import logging

import braintree
from braintree.exceptions.braintree_error import BraintreeError
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from database_init import db
from service.order_service import cart_total, create_order
from service.result import ServiceResult

logger = logging.getLogger(__name__)


def get_gateway():
    """Tạo BraintreeGateway một lần cho mỗi app, cấu hình lấy từ app.config."""
    gateway = current_app.extensions.get("braintree_gateway")
    if gateway is None:
        environment = (
            braintree.Environment.Production
            if current_app.config.get("BRAINTREE_ENVIRONMENT") == "production"
            else braintree.Environment.Sandbox
        )
        gateway = braintree.BraintreeGateway(
            braintree.Configuration(
                environment=environment,
                merchant_id=current_app.config.get("BRAINTREE_MERCHANT_ID"),
                public_key=current_app.config.get("BRAINTREE_PUBLIC_KEY"),
                private_key=current_app.config.get("BRAINTREE_PRIVATE_KEY"),
            )
        )
        current_app.extensions["braintree_gateway"] = gateway
    return gateway


def generate_client_token():
    try:
        token = get_gateway().client_token.generate()
    except BraintreeError as e:
        logger.error(f"Lỗi khi tạo client token Braintree: {e!r}")
        return ServiceResult.fail(500, "Error while generating payment token")
    return ServiceResult.ok(200, clientToken=token)


def _valid_cart(cart):
    if not isinstance(cart, list) or not cart:
        return False
    for line in cart:
        if not isinstance(line, dict):
            return False
        price = line.get("price")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            return False
    return True


def checkout(buyer, payload):
    """
    Thanh toán giỏ hàng qua Braintree. Thành công thì lưu order,
    thất bại thì trả lỗi của cổng thanh toán, không retry.
    """
    payload = payload if isinstance(payload, dict) else {}
    nonce = payload.get("nonce")
    cart = payload.get("cart")
    if not nonce or not isinstance(nonce, str) or not _valid_cart(cart):
        return ServiceResult.fail(400, "Payment nonce and cart are required")

    total = cart_total(cart)
    try:
        result = get_gateway().transaction.sale(
            {
                "amount": str(total),
                "payment_method_nonce": nonce,
                "options": {"submit_for_settlement": True},
            }
        )
    except BraintreeError as e:
        logger.error(f"Lỗi khi gọi Braintree: {e!r}")
        return ServiceResult.fail(500, "Error while processing payment")

    if not result.is_success:
        logger.warning(f"Thanh toán bị từ chối: {result.message}")
        return ServiceResult.fail(500, result.message)

    transaction = result.transaction
    payment = {
        "success": True,
        "transactionId": transaction.id,
        "status": transaction.status,
        "amount": str(transaction.amount),
    }
    try:
        order = create_order(buyer, cart, payment)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Không lưu được order cho giao dịch %s", transaction.id)
        return ServiceResult.fail(500, "Error while saving order")

    logger.info(f"Order {order.id} đã thanh toán, giao dịch {transaction.id}")
    return ServiceResult.ok(200, ok=True)
