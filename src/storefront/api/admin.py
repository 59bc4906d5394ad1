"""Admin-only endpoints and the shared-secret check that guards them."""

import hmac
import os

from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import PlainTextResponse, Response
from protean.utils.globals import current_domain

from storefront.api.schemas import OrderResponse, RatingResponse
from storefront.order.export import orders_to_csv
from storefront.order.order import Order
from storefront.review.rating import RecomputeProductRating
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def require_admin(
    x_admin_secret: str | None = Header(None),
    secret: str | None = Query(None),
) -> None:
    """Accept the admin secret from the ``X-Admin-Secret`` header or ``?secret=``.

    With no ``ADMIN_SECRET`` configured, every admin request is refused.
    """
    expected = os.environ.get("ADMIN_SECRET")
    provided = x_admin_secret or secret
    if not expected or not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        logger.warning("Rejected admin request")
        raise HTTPException(status_code=401, detail="Unauthorized")


admin_router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@admin_router.get("/orders", response_model=list[OrderResponse])
async def list_orders(search: str | None = None) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).search(search)
    return [OrderResponse.from_order(order) for order in orders]


@admin_router.get("/orders/export")
async def export_orders(search: str | None = None) -> Response:
    orders = current_domain.repository_for(Order).search(search)
    if not orders:
        return PlainTextResponse("No orders to export.", status_code=404)

    return Response(
        content=orders_to_csv(orders),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="orders.csv"'},
    )


@admin_router.post("/products/{product_id}/rating", response_model=RatingResponse)
async def recompute_rating(product_id: str) -> RatingResponse:
    result = current_domain.process(RecomputeProductRating(product_id=product_id), asynchronous=False)
    return RatingResponse(rating=result["rating"], reviews_count=result["reviews_count"])
