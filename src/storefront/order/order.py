"""Order aggregate — an immutable record of a checkout.

The customer record and the name/price of every line are snapshots taken
at checkout. Later product edits never reach an order, and orders have no
operations after placement.
"""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced

_EMAIL_PATTERN = re.compile(r".+@.+\..+")


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class Customer:
    """The buyer's contact and delivery details as entered at checkout."""

    firstname = String(required=True, max_length=100)
    lastname = String(required=True, max_length=100)
    email = String(required=True, max_length=254)
    phone = String(required=True, max_length=30)
    address1 = String(required=True, max_length=255)
    address2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)

    @invariant.post
    def email_must_look_valid(self):
        if self.email and not _EMAIL_PATTERN.match(self.email.strip()):
            raise ValidationError({"email": ["Please enter a valid email address"]})

    @property
    def full_name(self) -> str:
        return f"{self.firstname or ''} {self.lastname or ''}"

    @property
    def mailing_address(self) -> str:
        street = self.address1
        if self.address2:
            street = f"{street}, {self.address2}"
        return f"{street}, {self.city}, {self.state} {self.zip_code}"


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """One order line, pointing at a product by its legacy id."""

    product_legacy_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    order_id = String(identifier=True, max_length=40)
    date = DateTime(required=True)
    customer = ValueObject(Customer, required=True)
    total = Float(required=True, min_value=0.0)
    items = HasMany(OrderItem)

    @invariant.post
    def must_have_at_least_one_item(self):
        if not self.items:
            raise ValidationError({"items": ["Order must have at least one item."]})

    @classmethod
    def place(cls, order_id, placed_at, customer, items, total):
        """Record a checkout.

        ``customer`` is a mapping of Customer fields; ``items`` is a list of
        mappings with ``product_legacy_id``, ``name``, ``price`` and ``quantity``.
        """
        order = cls(
            order_id=order_id,
            date=placed_at,
            customer=Customer(**customer),
            total=total,
            items=[OrderItem(**item) for item in items],
        )

        order.raise_(
            OrderPlaced(
                order_id=order_id,
                customer_email=order.customer.email,
                item_count=len(order.items),
                total=total,
                placed_at=placed_at,
            )
        )

        return order

    def matches_search(self, term: str) -> bool:
        """Case-insensitive match on order id, customer first/last name, or email."""
        needle = term.lower()
        haystack = (self.order_id, self.customer.firstname, self.customer.lastname, self.customer.email)
        return any(needle in (value or "").lower() for value in haystack)
