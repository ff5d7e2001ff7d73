from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.db.init_db import init_db
from app.db.session import create_db_engine, create_session_factory
from app.api.routes_auth import router as auth_router
from app.api.routes_product import router as product_router
from app.api.routes_cart import router as cart_router
from app.api.routes_wishlist import router as wishlist_router
from app.api.routes_order import router as order_router
from app.api.routes_reference import router as reference_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format=settings.LOG_FORMAT or "%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("app")


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    message = first.get("msg", "Invalid value")
    if first.get("type") == "value_error":
        # Raised by our own validators, already worded for the client
        return message.removeprefix("Value error, ")

    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{field}: {message}" if field else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": _validation_message(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": "Internal server error"},
    )


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """
    Build the API. The engine is created when the app starts, schema and seed
    data are applied once before serving, and the engine is disposed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(database_url)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        init_db(engine, app.state.session_factory)
        logger.info("Veggie Shop API ready")
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database engine disposed")

    app = FastAPI(
        title="veggie-shop-api",
        description="Fresh vegetable storefront: catalog, cart, wishlist, checkout and order history",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
    app.include_router(product_router, prefix="/api/products", tags=["Product"])
    app.include_router(cart_router, prefix="/api/cart", tags=["Cart"])
    app.include_router(wishlist_router, prefix="/api/wishlist", tags=["Wishlist"])
    app.include_router(order_router, prefix="/api/orders", tags=["Order"])
    app.include_router(reference_router, prefix="/api", tags=["Reference"])

    # Session cookie documented as the auth scheme
    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="Veggie Shop API",
            version="1.0.0",
            description="Storefront API. Authenticated routes read the session cookie set by login/register.",
            routes=app.routes,
        )
        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "CookieAuth": {
                "type": "apiKey",
                "in": "cookie",
                "name": settings.AUTH_COOKIE_NAME,
            }
        }
        openapi_schema["security"] = [{"CookieAuth": []}]

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi
    return app


app = create_app()
