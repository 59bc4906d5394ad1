"""BDD tests for product rating aggregation."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, then, when

from storefront.review.submission import submit_review

scenarios("features/rating_aggregation.feature")


def _review(product, stars):
    return submit_review(
        product_legacy_id=product.legacy_id,
        username="Radha",
        rating=stars,
        comment="Rated in a scenario.",
    )


@when(parsers.cfparse("reviews with ratings {ratings} are submitted"))
def submit_reviews(product, ratings):
    for stars in ratings.split(","):
        _review(product, int(stars))


@when(parsers.cfparse("a review with {stars:d} stars is submitted"))
def submit_one_review(product, stars, error):
    try:
        _review(product, stars)
    except ValidationError as exc:
        error["exc"] = exc


@then("the review is rejected")
def review_rejected(error):
    assert isinstance(error["exc"], ValidationError)
