"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a shopper's journey from product to verified review."""

    product_id: str | None = None
    legacy_id: int | None = None
    firstname: str | None = None
    lastname: str | None = None
    order_id: str | None = None
    review_count: int = 0


@dataclass
class BrowserState:
    """Tracks what a browsing visitor has seen."""

    product_ids: list[str] = field(default_factory=list)
