"""Storefront bounded context — Products, Reviews, and Orders.

Handles the product catalogue, customer reviews with verified-purchase
flagging and cached rating aggregation, order placement, and the one-time
migration of the legacy flat-file catalogue into the store.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_dir="logs", log_file_prefix="storefront")

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
