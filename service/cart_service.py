# service/cart_service.py
"""
Giỏ hàng phía client: reducer thuần + store lưu lại state sau mỗi thay đổi.

State là dict slug -> {"quantity": n}. Storage và hàm tra cứu sản phẩm
được truyền vào store, không dùng biến toàn cục.
"""
import json
import os

CART_STORAGE_KEY = "cart"

ADD_TO_CART = "ADD_TO_CART"
REMOVE_FROM_CART = "REMOVE_FROM_CART"
UPDATE_QUANTITY = "UPDATE_QUANTITY"
CLEAR_CART = "CLEAR_CART"


def cart_reducer(state, action):
    """Trả về state mới, không sửa state cũ. Action lạ thì giữ nguyên."""
    action_type = action.get("type")
    payload = action.get("payload") or {}

    if action_type == ADD_TO_CART:
        slug = payload["slug"]
        line = state.get(slug)
        return {**state, slug: {"quantity": line["quantity"] + 1 if line else 1}}

    if action_type == REMOVE_FROM_CART:
        new_state = dict(state)
        new_state.pop(payload["slug"], None)
        return new_state

    if action_type == UPDATE_QUANTITY:
        slug, quantity = payload["slug"], payload["quantity"]
        if quantity <= 0:
            new_state = dict(state)
            new_state.pop(slug, None)
            return new_state
        return {**state, slug: {**state.get(slug, {}), "quantity": quantity}}

    if action_type == CLEAR_CART:
        return {}

    return state


class MemoryStorage:
    """Storage trong bộ nhớ, cùng interface với localStorage."""

    def __init__(self, items=None):
        self.items = dict(items or {})

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value


class JsonFileStorage:
    """Storage lưu xuống một file JSON (key -> chuỗi)."""

    def __init__(self, path):
        self.path = path

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def get_item(self, key):
        return self._read().get(key)

    def set_item(self, key, value):
        items = self._read()
        items[key] = value
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f)


class CartStore:
    """
    Store của giỏ hàng. lookup(slug) trả về dict sản phẩm (có "quantity" là tồn kho)
    hoặc None nếu không tồn tại.
    Các hàm thao tác trả về thông báo cho người dùng.
    """

    def __init__(self, storage, lookup):
        self.storage = storage
        self.lookup = lookup
        raw = storage.get_item(CART_STORAGE_KEY)
        self.state = json.loads(raw) if raw else {}

    def dispatch(self, action):
        self.state = cart_reducer(self.state, action)
        self.storage.set_item(CART_STORAGE_KEY, json.dumps(self.state))
        return self.state

    def add_to_cart(self, slug):
        product = self.lookup(slug)
        if not product:
            return "Item does not exist"
        line = self.state.get(slug)
        if line and line["quantity"] + 1 > product["quantity"]:
            return "Error added to cart: Not enough inventory"
        self.dispatch({"type": ADD_TO_CART, "payload": {"slug": slug}})
        return "Add to Cart Successfully"

    def remove_from_cart(self, slug):
        self.dispatch({"type": REMOVE_FROM_CART, "payload": {"slug": slug}})
        return "Remove from Cart Successfully"

    def update_quantity(self, slug, quantity):
        product = self.lookup(slug)
        if not product:
            return "Item does not exist"
        if slug in self.state and quantity > product["quantity"]:
            return "Error updating quantity: Not enough inventory"
        self.dispatch(
            {"type": UPDATE_QUANTITY, "payload": {"slug": slug, "quantity": quantity}}
        )
        if quantity <= 0:
            return "Remove from Cart Successfully"
        return "Update Cart Quantity Successfully"

    def clear_cart(self):
        self.dispatch({"type": CLEAR_CART})
        return "Cart Cleared Successfully"

    def checkout_items(self):
        """Danh sách dòng giỏ hàng gửi lên /braintree/payment; bỏ qua sản phẩm đã bị xóa."""
        items = []
        for slug, line in self.state.items():
            product = self.lookup(slug)
            if not product:
                continue
            items.append(
                {
                    "_id": product["_id"],
                    "name": product["name"],
                    "slug": slug,
                    "price": product["price"],
                    "quantity": line["quantity"],
                }
            )
        return items
