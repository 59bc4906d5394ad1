"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer checked out and an order was recorded."""

    __version__ = 1

    order_id = String(required=True, max_length=40)
    customer_email = String(required=True, max_length=254)
    item_count = Integer(required=True)
    total = Float(required=True)
    placed_at = DateTime(required=True)
