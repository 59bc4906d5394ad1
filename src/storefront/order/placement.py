"""Order placement — command and handler."""

import json
from datetime import UTC, datetime, timedelta

from protean import handle
from protean.fields import Float, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    customer = Text(required=True)  # JSON: Customer fields
    items = Text(required=True)  # JSON: list of {product_legacy_id, name, price, quantity}
    total = Float(required=True, min_value=0.0)


def order_id_for(moment: datetime) -> str:
    """``ORD-`` followed by the placement time in epoch milliseconds."""
    return f"ORD-{int(moment.timestamp() * 1000)}"


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        repo = current_domain.repository_for(Order)

        placed_at = datetime.now(UTC)
        order_id = order_id_for(placed_at)
        # Two checkouts inside the same millisecond: take the next free one
        while repo.exists(order_id):
            placed_at += timedelta(milliseconds=1)
            order_id = order_id_for(placed_at)

        order = Order.place(
            order_id=order_id,
            placed_at=placed_at,
            customer=json.loads(command.customer),
            items=json.loads(command.items),
            total=command.total,
        )
        repo.add(order)

        logger.info("Order placed", order_id=order_id, items=len(order.items), total=command.total)
        return order_id
