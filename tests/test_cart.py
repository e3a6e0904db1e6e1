import json

import pytest

from service.cart_service import (
    ADD_TO_CART,
    CART_STORAGE_KEY,
    CLEAR_CART,
    REMOVE_FROM_CART,
    UPDATE_QUANTITY,
    CartStore,
    JsonFileStorage,
    MemoryStorage,
    cart_reducer,
)

CATALOG = {
    "laptop": {"_id": 1, "name": "Laptop", "slug": "laptop", "price": 999.99, "quantity": 2},
    "mouse": {"_id": 2, "name": "Mouse", "slug": "mouse", "price": 19.5, "quantity": 10},
}


@pytest.fixture
def catalog():
    return {slug: dict(product) for slug, product in CATALOG.items()}


@pytest.fixture
def store(catalog):
    return CartStore(MemoryStorage(), catalog.get)


class TestReducer:
    def test_add_new_and_existing(self):
        state = cart_reducer({}, {"type": ADD_TO_CART, "payload": {"slug": "laptop"}})
        state = cart_reducer(state, {"type": ADD_TO_CART, "payload": {"slug": "laptop"}})

        assert state == {"laptop": {"quantity": 2}}

    def test_does_not_mutate_state(self):
        state = {"laptop": {"quantity": 1}}

        cart_reducer(state, {"type": REMOVE_FROM_CART, "payload": {"slug": "laptop"}})

        assert state == {"laptop": {"quantity": 1}}

    def test_update_to_zero_removes_line(self):
        state = {"laptop": {"quantity": 3}, "mouse": {"quantity": 1}}

        state = cart_reducer(
            state, {"type": UPDATE_QUANTITY, "payload": {"slug": "laptop", "quantity": 0}}
        )

        assert state == {"mouse": {"quantity": 1}}

    def test_clear_and_unknown_action(self):
        state = {"laptop": {"quantity": 3}}

        assert cart_reducer(state, {"type": "SOMETHING_ELSE"}) is state
        assert cart_reducer(state, {"type": CLEAR_CART}) == {}


class TestCartStore:
    def test_add(self, store):
        assert store.add_to_cart("mouse") == "Add to Cart Successfully"
        assert store.add_to_cart("mouse") == "Add to Cart Successfully"
        assert store.state == {"mouse": {"quantity": 2}}

    def test_add_unknown_item(self, store):
        assert store.add_to_cart("phone") == "Item does not exist"
        assert store.state == {}

    def test_add_beyond_inventory(self, store):
        store.add_to_cart("laptop")
        store.add_to_cart("laptop")

        assert store.add_to_cart("laptop") == "Error added to cart: Not enough inventory"
        assert store.state["laptop"]["quantity"] == 2

    def test_update_quantity(self, store):
        store.add_to_cart("mouse")

        assert store.update_quantity("mouse", 5) == "Update Cart Quantity Successfully"
        assert store.state["mouse"]["quantity"] == 5

    def test_update_beyond_inventory(self, store):
        store.add_to_cart("laptop")

        assert (
            store.update_quantity("laptop", 3)
            == "Error updating quantity: Not enough inventory"
        )
        assert store.state["laptop"]["quantity"] == 1

    def test_update_to_zero_removes(self, store):
        store.add_to_cart("mouse")

        assert store.update_quantity("mouse", 0) == "Remove from Cart Successfully"
        assert store.state == {}

    def test_remove_and_clear(self, store):
        store.add_to_cart("mouse")
        store.add_to_cart("laptop")

        assert store.remove_from_cart("mouse") == "Remove from Cart Successfully"
        assert list(store.state) == ["laptop"]
        assert store.clear_cart() == "Cart Cleared Successfully"
        assert store.state == {}

    def test_state_is_persisted(self, catalog):
        storage = MemoryStorage()
        CartStore(storage, catalog.get).add_to_cart("mouse")

        assert json.loads(storage.get_item(CART_STORAGE_KEY)) == {"mouse": {"quantity": 1}}
        assert CartStore(storage, catalog.get).state == {"mouse": {"quantity": 1}}

    def test_checkout_items_skips_deleted_products(self, store, catalog):
        store.add_to_cart("laptop")
        store.update_quantity("mouse", 3)
        store.add_to_cart("mouse")
        del catalog["laptop"]

        assert store.checkout_items() == [
            {"_id": 2, "name": "Mouse", "slug": "mouse", "price": 19.5, "quantity": 4}
        ]


def test_json_file_storage(tmp_path, catalog):
    path = tmp_path / "cart.json"

    first = CartStore(JsonFileStorage(str(path)), catalog.get)
    assert first.state == {}
    first.add_to_cart("laptop")

    second = CartStore(JsonFileStorage(str(path)), catalog.get)
    assert second.state == {"laptop": {"quantity": 1}}
    assert json.loads(path.read_text(encoding="utf-8"))[CART_STORAGE_KEY]
