"""Tests for the Comment aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.review.comment import Comment
from storefront.review.events import CommentPosted


def _post(**overrides):
    defaults = {
        "product_id": "7d6f0c2a-5a57-4c1d-9b8f-0e4c2a1d9f10",
        "username": "Radha",
        "comment": "So pure and aromatic.",
    }
    defaults.update(overrides)
    return Comment.post(**defaults)


class TestCommentPost:
    def test_plain_comment_has_no_rating(self):
        comment = _post()
        assert comment.rating is None
        assert comment.verified_purchase is False
        assert comment.created_at is not None

    def test_rated_comment(self):
        comment = _post(rating=5, verified_purchase=True)
        assert comment.rating == 5
        assert comment.verified_purchase is True

    def test_raises_comment_posted(self):
        comment = _post(rating=4)
        event = comment._events[0]
        assert isinstance(event, CommentPosted)
        assert event.comment_id == str(comment.id)
        assert event.rating == 4
        assert event.verified_purchase is False


class TestCommentValidation:
    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            _post(rating=rating)

    def test_username_required(self):
        with pytest.raises(ValidationError):
            _post(username="")

    def test_comment_required(self):
        with pytest.raises(ValidationError):
            _post(comment="")

    def test_product_required(self):
        with pytest.raises(ValidationError):
            _post(product_id=None)
