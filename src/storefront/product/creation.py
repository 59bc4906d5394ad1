"""Product creation — command, handler, and the serialised entry point.

Legacy ids are allocated as "highest existing + 1". Reading the maximum and
inserting the new product must not interleave with another creation, so
callers go through ``add_product``, which holds a process-wide lock for the
whole command (including its commit). Across processes the unique
constraint on ``legacy_id`` rejects a duplicate.
"""

import threading

from protean import handle
from protean.fields import Float, List, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_legacy_id_lock = threading.Lock()


@storefront.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=150)
    price = Float(required=True, min_value=0.0)
    category = List(content_type=String)
    images = List(content_type=String)
    description = String(max_length=2000)
    original_price = Float(min_value=0.0)
    seller_tag = String(max_length=100)
    delivery_date = String(max_length=100)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)
        legacy_id = repo.next_legacy_id()

        product = Product.add(
            legacy_id=legacy_id,
            name=command.name,
            price=command.price,
            category=command.category,
            images=command.images,
            description=command.description,
            original_price=command.original_price,
            seller_tag=command.seller_tag,
            delivery_date=command.delivery_date,
        )
        repo.add(product)

        logger.info("Product added", product_id=str(product.id), legacy_id=legacy_id)
        return str(product.id)


def add_product(**fields) -> str:
    """Create a product under the next legacy id and return its store id."""
    command = AddProduct(**fields)
    with _legacy_id_lock:
        return current_domain.process(command, asynchronous=False)
