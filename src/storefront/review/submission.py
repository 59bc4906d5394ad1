"""Review intake for a rated review on a product addressed by its legacy id.

Flow: validate → find product → verify purchase → store comment →
recompute the product's rating → return the comment with the new numbers.

The comment is committed by the command handler before the rating refresh
runs as a separate write. A failure in between leaves the comment stored
and the product's cached numbers stale until the next refresh.
"""

from dataclasses import dataclass

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.purchases import is_verified_purchase
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.review.rating import refresh_product_rating
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Comment")
class SubmitReview:
    product_legacy_id = Integer(required=True)
    username = String(required=True, max_length=100)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text(required=True)


@storefront.command_handler(part_of=Comment)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product = current_domain.repository_for(Product).find_by_legacy_id(command.product_legacy_id)
        if product is None:
            raise ObjectNotFoundError(f"Product with ID {command.product_legacy_id} not found.")

        verified = is_verified_purchase(command.product_legacy_id, command.username)

        review = Comment.post(
            product_id=product.id,
            username=command.username,
            comment=command.comment,
            rating=command.rating,
            verified_purchase=verified,
        )
        current_domain.repository_for(Comment).add(review)

        logger.info(
            "Review saved",
            product=product.name,
            legacy_id=product.legacy_id,
            verified=verified,
        )
        return str(review.id)


@dataclass(frozen=True)
class ReviewReceipt:
    comment: Comment
    new_rating: int
    new_reviews_count: int


def submit_review(product_legacy_id, username, rating, comment) -> ReviewReceipt:
    """Run the full review intake and return the stored comment with the refreshed rating."""
    command = SubmitReview(
        product_legacy_id=product_legacy_id,
        username=username,
        rating=rating,
        comment=comment,
    )
    comment_id = current_domain.process(command, asynchronous=False)

    stored = current_domain.repository_for(Comment).get(comment_id)
    product = current_domain.repository_for(Product).get(stored.product_id)
    summary = refresh_product_rating(product)

    return ReviewReceipt(comment=stored, new_rating=summary.rating, new_reviews_count=summary.count)
