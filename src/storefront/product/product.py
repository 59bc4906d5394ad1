"""Product aggregate — a catalogue entry with a stable legacy id and a cached rating.

``legacy_id`` is the small integer the storefront has always used to refer
to a product (cart, order lines, legacy flat file). It is assigned once and
never changes. ``rating`` and ``reviews_count`` are a cached view over the
product's comments and are only written through ``record_rating``.
"""

from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, List, String

from storefront.domain import storefront
from storefront.product.events import ProductAdded, ProductDetailsUpdated, ProductRatingRefreshed

# Catalogue fields an admin edit may change
EDITABLE_FIELDS = (
    "name",
    "category",
    "images",
    "description",
    "price",
    "original_price",
    "seller_tag",
    "delivery_date",
)


@storefront.aggregate
class Product:
    """A product listed in the storefront catalogue."""

    legacy_id = Integer(required=True, unique=True)
    name = String(required=True, min_length=3, max_length=150)
    category = List(content_type=String)
    images = List(content_type=String)
    description = String(max_length=2000)
    price = Float(required=True, min_value=0.0)
    original_price = Float(min_value=0.0)
    rating = Integer(default=0)
    reviews_count = Integer(default=0)
    seller_tag = String(max_length=100)
    delivery_date = String(max_length=100)
    date_added = DateTime()

    @invariant.post
    def legacy_id_must_be_positive(self):
        if self.legacy_id is not None and self.legacy_id < 1:
            raise ValidationError({"legacy_id": ["Legacy id must be a positive integer"]})

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and len(self.name.strip()) < 3:
            raise ValidationError({"name": ["Product name must have at least 3 characters"]})

    @classmethod
    def add(
        cls,
        legacy_id,
        name,
        price,
        category=None,
        images=None,
        description=None,
        original_price=None,
        seller_tag=None,
        delivery_date=None,
    ):
        """Add a new product to the catalogue under an already allocated legacy id."""
        now = datetime.now(UTC)

        product = cls(
            legacy_id=legacy_id,
            name=name,
            price=price,
            category=category or [],
            images=images or [],
            description=description,
            original_price=original_price,
            seller_tag=seller_tag,
            delivery_date=delivery_date,
            rating=0,
            reviews_count=0,
            date_added=now,
        )

        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                legacy_id=legacy_id,
                name=name,
                price=price,
                added_at=now,
            )
        )

        return product

    def update_details(self, **changes):
        """Apply an admin edit. Fields passed as ``None`` are left unchanged.

        ``legacy_id``, ``rating`` and ``reviews_count`` are not editable here.
        """
        protected = sorted(set(changes) - set(EDITABLE_FIELDS))
        if protected:
            raise ValidationError({field: ["Field cannot be edited"] for field in protected})

        with atomic_change(self):
            for field, value in changes.items():
                if value is not None:
                    setattr(self, field, value)

        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                legacy_id=self.legacy_id,
                updated_at=datetime.now(UTC),
            )
        )

    def record_rating(self, rating, reviews_count):
        """Overwrite the cached rating with a freshly recomputed value."""
        with atomic_change(self):
            self.rating = rating
            self.reviews_count = reviews_count

        self.raise_(
            ProductRatingRefreshed(
                product_id=str(self.id),
                rating=rating,
                reviews_count=reviews_count,
                refreshed_at=datetime.now(UTC),
            )
        )
