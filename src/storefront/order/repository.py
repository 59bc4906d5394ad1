"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order, OrderItem
from storefront.utils.query import each


@storefront.repository(part_of=Order)
class OrderRepository:
    def containing_product(self, legacy_id: int) -> list[Order]:
        """Every order with a line item for the product with this legacy id, oldest first."""
        lines = current_domain.repository_for(OrderItem)._dao.query.filter(product_legacy_id=legacy_id)
        order_ids = {line.order_order_id for line in each(lines.order_by("id"))}

        orders = [self.get(order_id) for order_id in order_ids]
        return sorted(orders, key=lambda order: order.date)

    def search(self, term: str | None = None) -> list[Order]:
        """Orders newest first, optionally narrowed by ``Order.matches_search``."""
        orders = list(each(self._dao.query.order_by(["-date", "order_id"])))
        if term:
            orders = [order for order in orders if order.matches_search(term)]
        return orders

    def exists(self, order_id: str) -> bool:
        try:
            self.get(order_id)
        except ObjectNotFoundError:
            return False
        return True
