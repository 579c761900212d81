from typing import Optional
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from contextlib import asynccontextmanager
import uvicorn

from catalog_api.core.config import Settings, settings as default_settings
from catalog_api.core.database import build_engine, build_session_maker, create_db_and_tables, close_db
from catalog_api.core.exceptions import ClientError, StoreError
from catalog_api.core.logging import setup_logging
from catalog_api.middleware.logging_middleware import LoggingMiddleware, StructlogMiddleware
from catalog_api.controllers import product_controller

SERVER_ERROR_MESSAGE = "Something went wrong"

logger = setup_logging(default_settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Application startup", environment=settings.environment)

    engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    try:
        if settings.create_tables:
            await create_db_and_tables(engine)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        await close_db(engine)
        raise

    yield

    logger.info("Application shutdown")
    await close_db(engine)
    logger.info("Database connections closed")


async def client_error_handler(request: Request, exc: ClientError):
    logger.warning(
        "Client error",
        status_code=exc.status_code,
        detail=exc.message,
        path=request.url.path,
        method=request.method
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Request validation failed",
        errors=len(exc.errors()),
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.detail,
            "success": False,
            "status_code": exc.status_code
        }
    )


async def store_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method
    )
    return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="Product Catalog API",
        description="Products, their images and comments, and similar-product links",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.environment == "local" else None,
        redoc_url="/redoc" if settings.environment == "local" else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first and assigns the request id
    app.add_middleware(StructlogMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, store_error_handler)

    app.include_router(product_controller.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "message": "Product Catalog API is running",
            "version": "1.0.0",
            "environment": settings.environment,
            "docs_url": "/docs" if settings.environment == "local" else "Documentation disabled in production"
        }

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "environment": settings.environment,
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "catalog_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.environment == "local",
        log_config=None
    )
