"""Application tests for plain comments from the product page."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.review.posting import PostComment


def _post(product_id, **overrides):
    fields = {"product_id": product_id, "username": "Radha", "comment": "Looks lovely"}
    fields.update(overrides)
    return current_domain.process(PostComment(**fields), asynchronous=False)


class TestPostComment:
    def test_persists_unrated_unverified_comment(self, make_product, make_order):
        product = make_product()
        make_order(firstname="Radha", lastname="Rani", legacy_ids=(product.legacy_id,))

        comment_id = _post(product.id)

        comment = current_domain.repository_for(Comment).get(comment_id)
        assert comment.rating is None
        assert comment.verified_purchase is False
        assert str(comment.product_id) == str(product.id)

    def test_leaves_product_rating_alone(self, make_product):
        product = make_product()
        _post(product.id)

        stored = current_domain.repository_for(Product).get(product.id)
        assert stored.rating == 0
        assert stored.reviews_count == 0

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _post("00000000-0000-0000-0000-000000000000")
        assert current_domain.repository_for(Comment).count() == 0

    @pytest.mark.parametrize("overrides", [{"username": ""}, {"comment": ""}])
    def test_username_and_comment_required(self, make_product, overrides):
        product = make_product()
        with pytest.raises(ValidationError):
            _post(product.id, **overrides)
