"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """An admin added a product to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    legacy_id = Integer(required=True)
    name = String(required=True, max_length=150)
    price = Float(required=True)
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id = Identifier(required=True)
    legacy_id = Integer(required=True)
    updated_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductRatingRefreshed:
    """The cached rating and review count were recomputed from the product's comments."""

    __version__ = 1

    product_id = Identifier(required=True)
    rating = Integer(required=True)
    reviews_count = Integer(required=True)
    refreshed_at = DateTime(required=True)
