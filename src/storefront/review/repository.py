"""Repository for the Comment aggregate."""

from storefront.domain import storefront
from storefront.review.comment import Comment
from storefront.utils.query import each


@storefront.repository(part_of=Comment)
class CommentRepository:
    def for_product(self, product_id) -> list[Comment]:
        """Every comment on a product, oldest first (ties in id order so paging stays stable)."""
        return list(each(self._dao.query.filter(product_id=str(product_id)).order_by(["created_at", "id"])))

    def count(self) -> int:
        return self._dao.query.limit(1).all().total

    def remove_for_product(self, product_id) -> int:
        comments = self.for_product(product_id)
        for comment in comments:
            self._dao.delete(comment)
        return len(comments)
