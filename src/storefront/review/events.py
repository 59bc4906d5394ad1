"""Domain events for the Comment aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Comment")
class CommentPosted:
    """A customer posted a comment or a rated review on a product."""

    __version__ = 1

    comment_id = Identifier(required=True)
    product_id = Identifier(required=True)
    username = String(required=True, max_length=100)
    rating = Integer()
    verified_purchase = Boolean(default=False)
    posted_at = DateTime(required=True)
