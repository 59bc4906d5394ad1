"""Rating aggregation — recompute a product's cached rating from its comments.

The cached ``rating``/``reviews_count`` on a Product is never incremented in
place. Every refresh rescans the full comment set, so the same function
serves both the write path (after a review is stored) and reconciliation.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RatingSummary:
    rating: int
    count: int


def summarize(ratings: Iterable[int | None]) -> RatingSummary:
    """Mean of the ratings that are set, rounded half-up, and how many there were."""
    rated = [r for r in ratings if r is not None]
    if not rated:
        return RatingSummary(rating=0, count=0)

    mean = Decimal(sum(rated)) / Decimal(len(rated))
    return RatingSummary(
        rating=int(mean.quantize(Decimal(1), rounding=ROUND_HALF_UP)),
        count=len(rated),
    )


def recompute_rating(product_id) -> RatingSummary:
    comments = current_domain.repository_for(Comment).for_product(product_id)
    return summarize(c.rating for c in comments)


def refresh_product_rating(product: Product) -> RatingSummary:
    """Recompute the product's rating and persist it onto the product."""
    summary = recompute_rating(product.id)
    product.record_rating(summary.rating, summary.count)
    current_domain.repository_for(Product).add(product)

    logger.debug(
        "Product rating refreshed",
        product_id=str(product.id),
        rating=summary.rating,
        reviews_count=summary.count,
    )
    return summary


@storefront.command(part_of="Product")
class RecomputeProductRating:
    """Reconcile one product's cached rating with its comments."""

    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class RecomputeProductRatingHandler:
    @handle(RecomputeProductRating)
    def recompute_product_rating(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        summary = refresh_product_rating(product)
        return {"rating": summary.rating, "reviews_count": summary.count}
