"""One-time reconciliation of the legacy catalogue into the store.

Runs at startup, before request traffic:

1. Migrate products, only when the store holds fewer products than the
   legacy list. Each legacy record is keyed by its ``id`` (our
   ``legacy_id``): present records are skipped, absent ones are created
   together with their embedded reviews, which go through the same
   purchase matching as live reviews.
2. Seed sample comments, only when there are no comments at all, on the
   product with the lowest legacy id.

Running it again against a fully migrated store changes nothing.
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from dateutil import parser as date_parser
from protean import UnitOfWork
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.exceptions import LegacySourceError
from storefront.order.purchases import name_matches, purchaser_names
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.review.rating import refresh_product_rating
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_COMMENTS = (
    {
        "username": "Radha",
        "rating": 5,
        "comment": "This is the best ghee I have ever tasted! So pure and aromatic.",
    },
    {
        "username": "Krishna",
        "rating": 4,
        "comment": "Excellent quality and fast delivery. Highly recommended.",
    },
)

# Legacy record key -> Product field, copied as-is when present
_PRODUCT_FIELDS = {
    "name": "name",
    "category": "category",
    "images": "images",
    "description": "description",
    "reviewsCount": "reviews_count",
    "sellerTag": "seller_tag",
    "price": "price",
    "originalPrice": "original_price",
    "deliveryDate": "delivery_date",
}


@dataclass
class MigrationReport:
    products_migrated: int = 0
    comments_migrated: int = 0
    comments_seeded: int = 0


def load_legacy_products(source) -> list[dict]:
    """Read the legacy catalogue, treating an unreadable source as empty."""
    try:
        products = source.load_products()
    except LegacySourceError as exc:
        logger.error("Could not read legacy products, skipping migration", error=str(exc))
        return []

    logger.info("Loaded legacy products", count=len(products))
    return products


# "GMT+0530" as written by JavaScript's Date.toString(); dateutil reads a
# sign after GMT as POSIX-style and would flip it
_GMT_OFFSET = re.compile(r"\bGMT(?=[+-]\d)")
_TRAILING_ZONE_NAME = re.compile(r"\s*\([^)]*\)\s*$")


def _parse_timestamp(value) -> datetime | None:
    """Best-effort parse of a legacy date; ``None`` when absent or unreadable."""
    if not value:
        return None
    if isinstance(value, datetime):
        moment = value
    else:
        text = _TRAILING_ZONE_NAME.sub("", _GMT_OFFSET.sub("", str(value)))
        try:
            moment = date_parser.parse(text)
        except (ValueError, OverflowError):
            logger.warning("Unreadable legacy timestamp, using now", value=value)
            return None
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


def _whole_stars(value) -> int | None:
    if value is None:
        return None
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _product_from_legacy(legacy_id: int, record: dict) -> Product:
    fields = {
        target: record[source]
        for source, target in _PRODUCT_FIELDS.items()
        if record.get(source) is not None
    }
    if record.get("rating") is not None:
        fields["rating"] = _whole_stars(record["rating"])

    return Product(
        legacy_id=legacy_id,
        date_added=_parse_timestamp(record.get("dateAdded")) or datetime.now(UTC),
        **fields,
    )


def _comments_from_legacy(product: Product, reviews: list[dict]) -> list[Comment]:
    if not reviews:
        return []

    purchasers = purchaser_names(product.legacy_id)
    now = datetime.now(UTC)
    return [
        Comment(
            product_id=product.id,
            username=review.get("user"),
            comment=review.get("comment"),
            rating=_whole_stars(review.get("rating")),
            created_at=_parse_timestamp(review.get("createdAt")) or now,
            verified_purchase=bool(purchasers) and name_matches(review.get("user"), purchasers),
        )
        for review in reviews
    ]


def migrate_products(legacy_products: list[dict], report: MigrationReport) -> None:
    products = current_domain.repository_for(Product)
    if products.count() >= len(legacy_products):
        return

    logger.info("Starting product migration", legacy_products=len(legacy_products))
    comments = current_domain.repository_for(Comment)

    for record in legacy_products:
        try:
            legacy_id = int(record["id"])
        except (KeyError, TypeError, ValueError):
            logger.error("Skipping legacy product without a usable id", legacy_id=record.get("id"))
            continue

        if products.find_by_legacy_id(legacy_id) is not None:
            continue

        try:
            # A product and its reviews land together or not at all
            with UnitOfWork():
                product = _product_from_legacy(legacy_id, record)
                products.add(product)

                migrated = _comments_from_legacy(product, record.get("reviews") or [])
                for comment in migrated:
                    comments.add(comment)
        except (ValidationError, ValueError, TypeError, ArithmeticError) as exc:
            logger.error("Skipping invalid legacy product", legacy_id=legacy_id, error=str(exc))
            continue

        report.products_migrated += 1
        report.comments_migrated += len(migrated)

    if report.products_migrated:
        logger.info(
            "Migrated legacy products",
            products=report.products_migrated,
            comments=report.comments_migrated,
        )
    else:
        logger.info("All legacy products are already in the store")


def seed_sample_comments(report: MigrationReport) -> None:
    """Give the lowest legacy id product two sample comments when there are none anywhere."""
    comments = current_domain.repository_for(Comment)
    if comments.count() > 0:
        return

    product = current_domain.repository_for(Product).with_lowest_legacy_id()
    if product is None:
        return

    with UnitOfWork():
        for sample in SAMPLE_COMMENTS:
            comments.add(
                Comment(
                    product_id=product.id,
                    created_at=datetime.now(UTC),
                    **sample,
                )
            )
    report.comments_seeded = len(SAMPLE_COMMENTS)

    refresh_product_rating(product)
    logger.info("Seeded sample comments", product=product.name, legacy_id=product.legacy_id)


def migrate_and_seed(legacy_products: list[dict]) -> MigrationReport:
    """Reconcile the legacy catalogue into the store, then seed sample comments.

    Failures are logged and never propagate; whatever was committed before
    the failure stays.
    """
    report = MigrationReport()
    try:
        migrate_products(legacy_products, report)
        seed_sample_comments(report)
    except Exception:
        logger.exception("Error during data migration and seeding")
    return report
