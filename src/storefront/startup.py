"""Startup phase: everything that must happen before the server takes requests.

``initialize`` loads the legacy catalogue, checks that the store answers,
and runs the migration pipeline. It does not stop the process itself: it
returns a ``StartupOutcome`` and the application lifespan decides what to
do with it.
"""

from dataclasses import dataclass, field
from enum import Enum

from protean.utils.globals import current_domain

from storefront.exceptions import StoreUnavailable
from storefront.legacy import get_legacy_source
from storefront.migration.pipeline import MigrationReport, load_legacy_products, migrate_and_seed
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class StartupDecision(Enum):
    SERVE = "SERVE"
    ABORT = "ABORT"


@dataclass
class StartupOutcome:
    decision: StartupDecision
    report: MigrationReport = field(default_factory=MigrationReport)
    legacy_products: int = 0
    reason: str | None = None


def check_store(domain) -> None:
    """Run a trivial query against every aggregate's store.

    Raises:
        StoreUnavailable: a query failed.
    """
    with domain.domain_context():
        for aggregate in (Product, Comment, Order):
            try:
                current_domain.repository_for(aggregate)._dao.query.limit(1).all()
            except Exception as exc:
                raise StoreUnavailable(f"{aggregate.__name__} store is unreachable: {exc}") from exc


def initialize(domain, source=None, store_check=check_store) -> StartupOutcome:
    source = source or get_legacy_source()
    legacy_products = load_legacy_products(source)

    try:
        store_check(domain)
    except StoreUnavailable as exc:
        logger.critical("Store connection failed, refusing to start", error=str(exc))
        return StartupOutcome(
            decision=StartupDecision.ABORT,
            legacy_products=len(legacy_products),
            reason=str(exc),
        )
    logger.info("Store connection verified")

    with domain.domain_context():
        report = migrate_and_seed(legacy_products)

    return StartupOutcome(
        decision=StartupDecision.SERVE,
        report=report,
        legacy_products=len(legacy_products),
    )
