from util.until import format_datetime


def _price(value):
    return float(value) if value is not None else None


def user_to_dict(user):
    """Thông tin public của user (không có password / answer)."""
    return {
        "_id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
        "address": user.address,
        "role": user.role,
        "createdAt": format_datetime(user.created_at),
        "updatedAt": format_datetime(user.updated_at),
    }


def category_to_dict(category):
    if category is None:
        return None
    return {
        "_id": category.id,
        "name": category.name,
        "slug": category.slug,
    }


def product_to_dict(product, with_category=False):
    """Chuyển Product thành dict JSON, không kèm ảnh."""
    data = {
        "_id": product.id,
        "name": product.name,
        "slug": product.slug,
        "description": product.description,
        "price": _price(product.price),
        "category": product.category_id,
        "quantity": product.quantity,
        "shipping": bool(product.shipping),
        "createdAt": format_datetime(product.created_at),
        "updatedAt": format_datetime(product.updated_at),
    }
    if with_category:
        data["category"] = category_to_dict(product.category)
    return data


def order_to_dict(order):
    """Định dạng Order cùng các sản phẩm đã mua; price/quantity là giá trị lúc đặt."""
    products = []
    for item in order.order_items:
        if item.product is not None:
            entry = product_to_dict(item.product)
        else:
            entry = {"_id": item.product_id, "name": item.name}
        entry["price"] = _price(item.price)
        entry["quantity"] = item.quantity
        products.append(entry)
    buyer = order.buyer
    return {
        "_id": order.id,
        "products": products,
        "buyer": {"_id": buyer.id, "name": buyer.name} if buyer else None,
        "payment": order.payment,
        "status": order.status,
        "createdAt": format_datetime(order.created_at),
        "updatedAt": format_datetime(order.updated_at),
    }
