"""Storefront management CLI.

Usage:
    python src/manage.py setup-db           # Create all tables
    python src/manage.py drop-db            # Drop all tables
    python src/manage.py migrate            # Migrate the legacy catalogue and seed comments
    python src/manage.py recompute-ratings  # Rebuild every product's cached rating
"""

import argparse
import sys


def _storefront():
    from storefront.domain import storefront

    print("Initializing storefront domain...")
    storefront.init()
    return storefront


def setup_database():
    from storefront.utils.db import setup_db

    domain = _storefront()
    print("Creating storefront database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from storefront.utils.db import drop_db

    domain = _storefront()
    print("Dropping storefront database schema...")
    drop_db(domain)
    print("Done.")


def migrate(path=None):
    from storefront.legacy.json_adapter import JsonFileSource
    from storefront.startup import StartupDecision, initialize

    domain = _storefront()
    source = JsonFileSource(path) if path else None
    outcome = initialize(domain, source)
    if outcome.decision is StartupDecision.ABORT:
        print(f"Migration aborted: {outcome.reason}")
        sys.exit(1)

    report = outcome.report
    print(f"  legacy products read: {outcome.legacy_products}")
    print(f"  products migrated:    {report.products_migrated}")
    print(f"  comments migrated:    {report.comments_migrated}")
    print(f"  comments seeded:      {report.comments_seeded}")
    print("Done.")


def recompute_ratings():
    from protean.utils.globals import current_domain

    from storefront.product.product import Product
    from storefront.review.rating import refresh_product_rating

    domain = _storefront()
    with domain.domain_context():
        products = current_domain.repository_for(Product).catalogue()
        for product in products:
            summary = refresh_product_rating(product)
            print(f"  {product.legacy_id:>5}  {product.name}: {summary.rating} ({summary.count} ratings)")
    print(f"Recomputed {len(products)} product ratings.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    migrate_parser = subparsers.add_parser("migrate", help="Migrate the legacy catalogue into the store")
    migrate_parser.add_argument(
        "--path",
        help="Legacy products JSON file (default: LEGACY_PRODUCTS_PATH or products.json)",
    )

    subparsers.add_parser("recompute-ratings", help="Recompute every product's cached rating")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "migrate":
        migrate(args.path)
    elif args.command == "recompute-ratings":
        recompute_ratings()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
