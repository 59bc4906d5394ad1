"""A fixed legacy catalogue held in memory, for development and tests."""

import copy

from storefront.legacy.port import LegacySource


class InMemorySource(LegacySource):
    def __init__(self, products: list[dict] | None = None):
        self.products = list(products or [])

    def load_products(self) -> list[dict]:
        return copy.deepcopy(self.products)
