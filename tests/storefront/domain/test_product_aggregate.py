"""Tests for the Product aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields

from storefront.product.events import ProductAdded, ProductDetailsUpdated, ProductRatingRefreshed
from storefront.product.product import Product


def _make_product(**overrides):
    defaults = {"legacy_id": 1, "name": "A2 Gir Cow Ghee", "price": 450.0}
    defaults.update(overrides)
    return Product.add(**defaults)


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        for name in (
            "legacy_id",
            "name",
            "category",
            "images",
            "description",
            "price",
            "original_price",
            "rating",
            "reviews_count",
            "seller_tag",
            "delivery_date",
            "date_added",
        ):
            assert name in fields

    def test_add_minimal(self):
        product = _make_product()
        assert product.legacy_id == 1
        assert product.name == "A2 Gir Cow Ghee"
        assert product.price == 450.0
        assert product.rating == 0
        assert product.reviews_count == 0
        assert product.category == []
        assert product.images == []
        assert product.date_added is not None

    def test_add_full(self):
        product = _make_product(
            category=["ghee", "dairy"],
            images=["/uploads/ghee.jpg"],
            description="Bilona churned ghee",
            original_price=500.0,
            seller_tag="Bestseller",
            delivery_date="Delivery in 3-5 days",
        )
        assert product.category == ["ghee", "dairy"]
        assert product.original_price == 500.0
        assert product.seller_tag == "Bestseller"

    def test_add_raises_product_added(self):
        product = _make_product(legacy_id=7)
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.legacy_id == 7
        assert event.product_id == str(product.id)


class TestProductValidation:
    def test_legacy_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            _make_product(legacy_id=0)

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            _make_product(name=None)

    def test_name_too_short(self):
        with pytest.raises(ValidationError):
            _make_product(name="Gh")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(name="     ")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(price=-1.0)


class TestUpdateDetails:
    def test_changes_given_fields(self):
        product = _make_product()
        product._events.clear()

        product.update_details(name="Desi Cow Ghee", price=399.0)

        assert product.name == "Desi Cow Ghee"
        assert product.price == 399.0
        assert isinstance(product._events[-1], ProductDetailsUpdated)

    def test_none_leaves_field_unchanged(self):
        product = _make_product(description="Original")
        product.update_details(description=None, seller_tag="New")
        assert product.description == "Original"
        assert product.seller_tag == "New"

    def test_rating_is_not_editable(self):
        product = _make_product()
        with pytest.raises(ValidationError) as exc:
            product.update_details(rating=5)
        assert "rating" in exc.value.messages

    def test_legacy_id_is_not_editable(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.update_details(legacy_id=99)
        assert product.legacy_id == 1


class TestRecordRating:
    def test_overwrites_cached_rating(self):
        product = _make_product()
        product._events.clear()

        product.record_rating(4, 3)

        assert product.rating == 4
        assert product.reviews_count == 3
        event = product._events[0]
        assert isinstance(event, ProductRatingRefreshed)
        assert event.rating == 4
        assert event.reviews_count == 3
