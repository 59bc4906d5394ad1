"""Plain comments from the product detail page.

These carry no rating, so they never move the product's cached rating,
and they are never flagged as verified purchases.
"""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.review.comment import Comment


@storefront.command(part_of="Comment")
class PostComment:
    product_id = Identifier(required=True)
    username = String(required=True, max_length=100)
    comment = Text(required=True)


@storefront.command_handler(part_of=Comment)
class PostCommentHandler:
    @handle(PostComment)
    def post_comment(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        posted = Comment.post(
            product_id=product.id,
            username=command.username,
            comment=command.comment,
        )
        current_domain.repository_for(Comment).add(posted)
        return str(posted.id)
