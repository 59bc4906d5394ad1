"""Application tests for comment sorting and star filtering."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain

from storefront.review.comment import Comment
from storefront.review.listing import list_comments, parse_star_filter, sort_comments

START = datetime(2024, 3, 1, 9, 0, tzinfo=UTC)


def _comment(product, username, rating, minutes):
    comment = Comment(
        product_id=product.id,
        username=username,
        comment=f"Comment by {username}",
        rating=rating,
        created_at=START + timedelta(minutes=minutes),
    )
    current_domain.repository_for(Comment).add(comment)
    return comment


@pytest.fixture()
def product(make_product):
    product = make_product()
    _comment(product, "first", 3, 0)
    _comment(product, "second", 5, 10)
    _comment(product, "third", None, 20)
    _comment(product, "fourth", 5, 30)
    _comment(product, "fifth", 1, 40)
    return product


def _names(comments):
    return [c.username for c in comments]


class TestParseStarFilter:
    def test_comma_list(self):
        assert parse_star_filter("5,4") == [5, 4]

    def test_out_of_range_and_junk_dropped(self):
        assert parse_star_filter("0,3,7,abc,4.5,2") == [3, 2]

    def test_empty(self):
        assert parse_star_filter(None) == []
        assert parse_star_filter("") == []


class TestListComments:
    def test_default_is_newest_first(self, product):
        assert _names(list_comments(product.id)) == ["fifth", "fourth", "third", "second", "first"]

    def test_oldest_first(self, product):
        assert _names(list_comments(product.id, sort="oldest")) == ["first", "second", "third", "fourth", "fifth"]

    def test_highest_breaks_ties_by_recency(self, product):
        assert _names(list_comments(product.id, sort="highest")) == ["fourth", "second", "first", "fifth", "third"]

    def test_lowest_puts_unrated_first(self, product):
        assert _names(list_comments(product.id, sort="lowest")) == ["third", "fifth", "first", "fourth", "second"]

    def test_unknown_sort_falls_back_to_newest(self, product):
        assert _names(list_comments(product.id, sort="random")) == _names(list_comments(product.id))

    def test_star_filter(self, product):
        assert _names(list_comments(product.id, stars="5")) == ["fourth", "second"]

    def test_star_filter_with_only_invalid_values_keeps_everything(self, product):
        assert len(list_comments(product.id, stars="9")) == 5

    def test_other_products_comments_excluded(self, product, make_product):
        other = make_product(name="Forest Honey")
        _comment(other, "elsewhere", 4, 50)
        assert "elsewhere" not in _names(list_comments(product.id))


class TestSortComments:
    def test_empty(self):
        assert sort_comments([], "highest") == []
