"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from storefront.product.creation import add_product
from storefront.product.product import Product


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" in the catalogue'), target_fixture="product")
def catalogue_product(name):
    product_id = add_product(name=name, price=450.0)
    return current_domain.repository_for(Product).get(product_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product rating is {rating:d} from {count:d} reviews"))
def product_rating(product, rating, count):
    stored = current_domain.repository_for(Product).get(product.id)
    assert stored.rating == rating
    assert stored.reviews_count == count
