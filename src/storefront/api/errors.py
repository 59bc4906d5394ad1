"""Exception-to-response mapping for the storefront API.

Protean's handlers turn ``ValidationError`` into 400 and
``ObjectNotFoundError`` into 404. A store that stops answering mid-request
becomes 503; the request is not retried.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from sqlalchemy.exc import OperationalError

from storefront.exceptions import StoreUnavailable
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store unavailable", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=503, content={"error": "Store unavailable, please try again later."})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(OperationalError, store_unavailable_handler)
