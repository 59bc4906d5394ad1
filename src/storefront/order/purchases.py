"""Verified-purchase matching between reviewers and past orders.

A reviewer counts as a verified purchaser of a product when their name,
lower-cased and trimmed, appears inside the full name of the customer on
any order containing that product. The match is a one-directional
containment check so partial names ("Krishna" on an order placed by
"Krishna Das") still qualify.

An empty or whitespace-only reviewer name is contained in every customer
name, so it matches as soon as one order for the product exists. That
permissive outcome is kept as-is.
"""

from collections.abc import Iterable

from protean.utils.globals import current_domain

from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _normalize(name: str | None) -> str:
    return (name or "").lower().strip()


def purchaser_names(product_legacy_id: int) -> list[str]:
    """Normalized customer full names of every order containing the product."""
    orders = current_domain.repository_for(Order).containing_product(product_legacy_id)
    return [_normalize(order.customer.full_name) for order in orders]


def name_matches(reviewer_name: str | None, purchasers: Iterable[str]) -> bool:
    """True when the reviewer name is contained in any purchaser name."""
    reviewer = _normalize(reviewer_name)
    return any(reviewer in purchaser for purchaser in purchasers)


def is_verified_purchase(product_legacy_id: int, reviewer_name: str | None) -> bool:
    purchasers = purchaser_names(product_legacy_id)
    if not purchasers:
        return False

    verified = name_matches(reviewer_name, purchasers)
    logger.debug(
        "Purchase verification",
        product_legacy_id=product_legacy_id,
        candidate_orders=len(purchasers),
        verified=verified,
    )
    return verified
