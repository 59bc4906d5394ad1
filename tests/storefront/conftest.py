import json

import pytest
from protean import current_domain

from storefront.legacy import reset_legacy_source


@pytest.fixture(autouse=True)
def _fresh_legacy_source():
    reset_legacy_source()
    yield
    reset_legacy_source()


@pytest.fixture()
def make_product():
    """Create a product through the admin path and return it."""
    from storefront.product.creation import add_product
    from storefront.product.product import Product

    def _make(**overrides):
        fields = {"name": "A2 Gir Cow Ghee", "price": 450.0}
        fields.update(overrides)
        product_id = add_product(**fields)
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def make_order():
    """Place an order for the given legacy product ids and return its order id."""
    from storefront.order.placement import PlaceOrder

    def _make(firstname="Krishna", lastname="Das", legacy_ids=(1,), email="krishna@example.com"):
        customer = {
            "firstname": firstname,
            "lastname": lastname,
            "email": email,
            "phone": "9876543210",
            "address1": "12 Temple Road",
            "city": "Vrindavan",
            "state": "UP",
            "zip_code": "281121",
        }
        items = [
            {"product_legacy_id": legacy_id, "name": f"Product {legacy_id}", "price": 100.0, "quantity": 1}
            for legacy_id in legacy_ids
        ]
        command = PlaceOrder(
            customer=json.dumps(customer),
            items=json.dumps(items),
            total=100.0 * len(items),
        )
        return current_domain.process(command, asynchronous=False)

    return _make
