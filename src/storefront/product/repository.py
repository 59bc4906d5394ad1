"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.query import each


@storefront.repository(part_of=Product)
class ProductRepository:
    """Product lookups keyed by the stable legacy id."""

    def find_by_legacy_id(self, legacy_id: int) -> Product | None:
        return self._dao.query.filter(legacy_id=legacy_id).all().first

    def with_lowest_legacy_id(self) -> Product | None:
        return self._dao.query.order_by("legacy_id").limit(1).all().first

    def next_legacy_id(self) -> int:
        """Highest legacy id in the store plus one, or 1 for an empty catalogue."""
        highest = self._dao.query.order_by("-legacy_id").limit(1).all().first
        return highest.legacy_id + 1 if highest else 1

    def count(self) -> int:
        return self._dao.query.limit(1).all().total

    def catalogue(self) -> list[Product]:
        """Every product, in legacy id order."""
        return list(each(self._dao.query.order_by("legacy_id")))
