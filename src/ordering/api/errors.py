"""Translate domain errors into HTTP responses.

Every error body has the shape ``{"status": "fail", "message": ...}``, with
field-level details under ``errors`` when the domain provides them.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.integrations.fastapi import register_exception_handlers as register_protean_exception_handlers

from ordering.shared.errors import CheckoutSessionError, CouponInvalidOrExpiredError

logger = structlog.get_logger(__name__)


def _message_of(exc) -> str:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        return "; ".join(str(msg) for msgs in messages.values() for msg in (msgs if isinstance(msgs, list) else [msgs]))
    if messages:
        return str(messages)
    return str(exc)


def _fail(status_code: int, exc, include_errors: bool = False) -> JSONResponse:
    content = {"status": "fail", "message": _message_of(exc)}
    messages = getattr(exc, "messages", None)
    if include_errors and isinstance(messages, dict):
        content["errors"] = messages
    return JSONResponse(status_code=status_code, content=content)


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _fail(404, exc)


async def coupon_handler(request: Request, exc: CouponInvalidOrExpiredError) -> JSONResponse:
    return _fail(400, exc)


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _fail(400, exc, include_errors=True)


async def checkout_session_handler(request: Request, exc: CheckoutSessionError) -> JSONResponse:
    logger.error("Payment gateway refused checkout session", path=request.url.path, reason=str(exc))
    return _fail(502, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to `app`.

    Protean's stock handlers cover the remaining domain exceptions.
    """
    register_protean_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(CouponInvalidOrExpiredError, coupon_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(CheckoutSessionError, checkout_session_handler)
