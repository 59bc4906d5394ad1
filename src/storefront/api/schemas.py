"""Pydantic request/response schemas for the storefront API.

The storefront's browser code speaks camelCase (``reviewsCount``,
``sellerTag``), so every schema aliases its fields to camelCase and also
accepts the snake_case names.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Product Schemas ---


class ProductRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "A2 Gir Cow Ghee",
                    "price": 450,
                    "originalPrice": 500,
                    "category": ["ghee"],
                    "images": ["/uploads/ghee.jpg"],
                    "description": "Bilona churned ghee from grass-fed Gir cows.",
                    "sellerTag": "Bestseller",
                    "deliveryDate": "Delivery in 3-5 days",
                }
            ]
        },
    )

    name: str = Field(..., max_length=150)
    price: float = Field(..., ge=0)
    category: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    description: str | None = Field(None, max_length=2000)
    original_price: float | None = Field(None, ge=0)
    seller_tag: str | None = Field(None, max_length=100)
    delivery_date: str | None = Field(None, max_length=100)


class ProductUpdateRequest(CamelModel):
    name: str | None = Field(None, max_length=150)
    price: float | None = Field(None, ge=0)
    category: list[str] | None = None
    images: list[str] | None = None
    description: str | None = Field(None, max_length=2000)
    original_price: float | None = Field(None, ge=0)
    seller_tag: str | None = Field(None, max_length=100)
    delivery_date: str | None = Field(None, max_length=100)


class ProductResponse(CamelModel):
    id: str
    legacy_id: int
    name: str
    date_added: datetime | None = None
    category: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    description: str | None = None
    rating: int = 0
    reviews_count: int = 0
    seller_tag: str | None = None
    price: float
    original_price: float | None = None
    delivery_date: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            legacy_id=product.legacy_id,
            name=product.name,
            date_added=product.date_added,
            category=list(product.category or []),
            images=list(product.images or []),
            description=product.description,
            rating=product.rating or 0,
            reviews_count=product.reviews_count or 0,
            seller_tag=product.seller_tag,
            price=product.price,
            original_price=product.original_price,
            delivery_date=product.delivery_date,
        )


class CatalogueEntry(CamelModel):
    """A product as the shop front lists it: ``id`` is the legacy id."""

    id: int
    product_id: str
    name: str
    date_added: datetime | None = None
    category: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    description: str | None = None
    rating: int = 0
    reviews_count: int = 0
    seller_tag: str | None = None
    price: float
    original_price: float | None = None
    delivery_date: str | None = None

    @classmethod
    def from_product(cls, product) -> CatalogueEntry:
        fields = ProductResponse.from_product(product).model_dump(exclude={"id", "legacy_id"})
        return cls(id=product.legacy_id, product_id=str(product.id), **fields)


class MessageResponse(CamelModel):
    message: str


class RatingResponse(CamelModel):
    rating: int
    reviews_count: int


# --- Comment & Review Schemas ---


class CommentResponse(CamelModel):
    id: str
    product_id: str
    username: str
    comment: str
    rating: int | None = None
    created_at: datetime
    verified_purchase: bool = False

    @classmethod
    def from_comment(cls, comment) -> CommentResponse:
        return cls(
            id=str(comment.id),
            product_id=str(comment.product_id),
            username=comment.username,
            comment=comment.comment,
            rating=comment.rating,
            created_at=comment.created_at,
            verified_purchase=bool(comment.verified_purchase),
        )


class ReviewRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"user": "Krishna", "rating": 5, "comment": "Pure and aromatic."}]},
    )

    user: str | None = None
    rating: int | None = None
    comment: str | None = None


class ReviewResponse(CamelModel):
    new_comment: CommentResponse
    new_rating: int
    new_reviews_count: int


class CommentRequest(CamelModel):
    username: str | None = None
    comment: str | None = None


class ProductPageResponse(CamelModel):
    product: ProductResponse
    comments: list[CommentResponse]


# --- Order Schemas ---


class OrderItemRequest(CamelModel):
    id: int
    name: str
    quantity: int
    price: float


class CustomerRequest(CamelModel):
    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    phone: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class OrderRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "items": [{"id": 1, "name": "A2 Gir Cow Ghee", "quantity": 2, "price": 450}],
                    "total": 900,
                    "user": {
                        "firstname": "Krishna",
                        "lastname": "Das",
                        "email": "krishna@example.com",
                        "phone": "9876543210",
                        "address1": "12 Temple Road",
                        "city": "Vrindavan",
                        "state": "UP",
                        "zip": "281121",
                    },
                }
            ]
        },
    )

    items: list[OrderItemRequest] | None = None
    total: float | None = None
    user: CustomerRequest | None = None


class OrderPlacedResponse(CamelModel):
    message: str
    order_id: str


class OrderItemResponse(CamelModel):
    id: int
    name: str
    quantity: int
    price: float


class OrderResponse(CamelModel):
    order_id: str
    date: datetime
    user: CustomerRequest
    total: float
    items: list[OrderItemResponse]

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        customer = order.customer
        return cls(
            order_id=order.order_id,
            date=order.date,
            user=CustomerRequest(
                firstname=customer.firstname,
                lastname=customer.lastname,
                email=customer.email,
                phone=customer.phone,
                address1=customer.address1,
                address2=customer.address2,
                city=customer.city,
                state=customer.state,
                zip=customer.zip_code,
            ),
            total=order.total,
            items=[
                OrderItemResponse(
                    id=item.product_legacy_id,
                    name=item.name,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
        )
