"""Comment aggregate — a customer comment, optionally rated, on one product.

Comments posted through the review endpoint carry a 1–5 rating and count
towards the product's cached rating; plain comments from the product page
carry none. ``verified_purchase`` is decided once when the comment is
created and is never re-evaluated.
"""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.review.events import CommentPosted


@storefront.aggregate
class Comment:
    product_id = Identifier(required=True)
    username = String(required=True, max_length=100)
    comment = Text(required=True)
    rating = Integer(min_value=1, max_value=5)
    created_at = DateTime(required=True)
    verified_purchase = Boolean(default=False)

    @classmethod
    def post(cls, product_id, username, comment, rating=None, verified_purchase=False):
        """Post a new comment, stamped with the current time."""
        now = datetime.now(UTC)

        posted = cls(
            product_id=product_id,
            username=username,
            comment=comment,
            rating=rating,
            created_at=now,
            verified_purchase=verified_purchase,
        )

        posted.raise_(
            CommentPosted(
                comment_id=str(posted.id),
                product_id=str(product_id),
                username=username,
                rating=rating,
                verified_purchase=verified_purchase,
                posted_at=now,
            )
        )

        return posted
