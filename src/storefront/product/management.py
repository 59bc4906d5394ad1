"""Admin product edits and deletion."""

from protean import handle
from protean.fields import Float, Identifier, List, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    name = String(max_length=150)
    price = Float(min_value=0.0)
    category = List(content_type=String)
    images = List(content_type=String)
    description = String(max_length=2000)
    original_price = Float(min_value=0.0)
    seller_tag = String(max_length=100)
    delivery_date = String(max_length=100)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ProductManagementHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.update_details(
            name=command.name,
            price=command.price,
            category=command.category or None,
            images=command.images or None,
            description=command.description,
            original_price=command.original_price,
            seller_tag=command.seller_tag,
            delivery_date=command.delivery_date,
        )
        repo.add(product)
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        # Comments go with their product; none may outlive it
        removed = current_domain.repository_for(Comment).remove_for_product(product.id)
        repo._dao.delete(product)

        logger.info(
            "Product deleted",
            product_id=str(product.id),
            legacy_id=product.legacy_id,
            comments_removed=removed,
        )
        return str(product.id)
