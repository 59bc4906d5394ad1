"""Legacy source port: where the pre-store product catalogue is read from.

The legacy catalogue is a flat list of product records, each with an
embedded (possibly empty) list of reviews, in the camelCase shape of the
original ``products.json``:

    {"id": 1, "name": "...", "dateAdded": "...", "category": [...],
     "images": [...], "description": "...", "rating": 4, "reviewsCount": 2,
     "sellerTag": "...", "price": 450, "originalPrice": 500,
     "deliveryDate": "...",
     "reviews": [{"user": "...", "rating": 5, "comment": "...", "createdAt": "..."}]}
"""

from abc import ABC, abstractmethod


class LegacySource(ABC):
    """Abstract interface for legacy catalogue adapters."""

    @abstractmethod
    def load_products(self) -> list[dict]:
        """Return every legacy product record.

        Raises:
            LegacySourceError: the source could not be read or is not a list of records.
        """
        ...
