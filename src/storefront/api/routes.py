"""FastAPI endpoints for the storefront: catalogue, reviews, comments and checkout."""

import json
import uuid

from fastapi import APIRouter, Depends
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.admin import require_admin
from storefront.api.schemas import (
    CatalogueEntry,
    CommentRequest,
    CommentResponse,
    MessageResponse,
    OrderPlacedResponse,
    OrderRequest,
    ProductPageResponse,
    ProductRequest,
    ProductResponse,
    ProductUpdateRequest,
    ReviewRequest,
    ReviewResponse,
)
from storefront.order.placement import PlaceOrder
from storefront.product.creation import add_product
from storefront.product.management import DeleteProduct, UpdateProduct
from storefront.product.product import Product
from storefront.review.comment import Comment
from storefront.review.listing import list_comments
from storefront.review.posting import PostComment
from storefront.review.submission import submit_review

product_router = APIRouter(prefix="/api/products", tags=["products"])
comment_router = APIRouter(prefix="/api/comments", tags=["comments"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])
page_router = APIRouter(prefix="/product", tags=["product-page"])


def _checked_product_id(product_id: str) -> str:
    try:
        uuid.UUID(product_id)
    except ValueError as exc:
        raise ValidationError({"product_id": ["Invalid product ID format."]}) from exc
    return product_id


# --- Catalogue endpoints ---


@product_router.get("", response_model=list[CatalogueEntry])
async def list_products() -> list[CatalogueEntry]:
    products = current_domain.repository_for(Product).catalogue()
    return [CatalogueEntry.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get(_checked_product_id(product_id))
    return ProductResponse.from_product(product)


@product_router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def create_product(body: ProductRequest) -> ProductResponse:
    product_id = add_product(**body.model_dump())
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(product_id: str, body: ProductUpdateRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=_checked_product_id(product_id),
        name=body.name,
        price=body.price,
        category=body.category,
        images=body.images,
        description=body.description,
        original_price=body.original_price,
        seller_tag=body.seller_tag,
        delivery_date=body.delivery_date,
    )
    current_domain.process(command, asynchronous=False)
    product = current_domain.repository_for(Product).get(product_id)
    return ProductResponse.from_product(product)


@product_router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_product(product_id: str) -> MessageResponse:
    command = DeleteProduct(product_id=_checked_product_id(product_id))
    current_domain.process(command, asynchronous=False)
    return MessageResponse(message="Product deleted successfully.")


@product_router.post("/{legacy_id}/reviews", status_code=201, response_model=ReviewResponse)
async def post_review(legacy_id: int, body: ReviewRequest) -> ReviewResponse:
    receipt = submit_review(
        product_legacy_id=legacy_id,
        username=body.user,
        rating=body.rating,
        comment=body.comment,
    )
    return ReviewResponse(
        new_comment=CommentResponse.from_comment(receipt.comment),
        new_rating=receipt.new_rating,
        new_reviews_count=receipt.new_reviews_count,
    )


# --- Comment endpoints ---


@comment_router.get("/{product_id}", response_model=list[CommentResponse])
async def get_comments(product_id: str, sort: str = "newest", stars: str | None = None) -> list[CommentResponse]:
    comments = list_comments(_checked_product_id(product_id), sort=sort, stars=stars)
    return [CommentResponse.from_comment(comment) for comment in comments]


# --- Checkout ---


@order_router.post("", status_code=201, response_model=OrderPlacedResponse)
async def place_order(body: OrderRequest) -> OrderPlacedResponse:
    if not body.items or not body.total or body.user is None:
        raise ValidationError({"order": ["Invalid order data."]})

    customer = body.user.model_dump(exclude={"zip"})
    customer["zip_code"] = body.user.zip
    items = [
        {
            "product_legacy_id": item.id,
            "name": item.name,
            "price": item.price,
            "quantity": item.quantity,
        }
        for item in body.items
    ]

    command = PlaceOrder(
        customer=json.dumps(customer),
        items=json.dumps(items),
        total=body.total,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderPlacedResponse(message="Order placed successfully!", order_id=order_id)


# --- Product detail page ---


@page_router.get("/{product_id}", response_model=ProductPageResponse)
async def product_page(product_id: str) -> ProductPageResponse:
    product = current_domain.repository_for(Product).get(_checked_product_id(product_id))
    comments = list_comments(product.id)
    return ProductPageResponse(
        product=ProductResponse.from_product(product),
        comments=[CommentResponse.from_comment(comment) for comment in comments],
    )


@page_router.post("/{product_id}/comment", status_code=201, response_model=CommentResponse)
async def post_comment(product_id: str, body: CommentRequest) -> CommentResponse:
    command = PostComment(
        product_id=_checked_product_id(product_id),
        username=body.username,
        comment=body.comment,
    )
    comment_id = current_domain.process(command, asynchronous=False)
    comment = current_domain.repository_for(Comment).get(comment_id)
    return CommentResponse.from_comment(comment)
