# checkout_api/main.py

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# ---------------------------------------------
# LOAD ENVIRONMENT VARIABLES
# ---------------------------------------------
load_dotenv()

from checkout_api.config import Settings, settings as default_settings, missing_settings
from checkout_api.errors import error_response
from checkout_api.logging_config import get_logger
from checkout_api.middleware import request_id_middleware
from checkout_api.routers import notifications, payments_razorpay
from checkout_api.services.email_service import Mailer
from checkout_api.services.payments import PaymentGateway

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    gateway: Optional[PaymentGateway] = None,
    mailer: Optional[Mailer] = None,
) -> FastAPI:
    """
    Build the API. Collaborators not passed in are created from settings
    the first time a request needs them.
    """
    if settings is None:
        settings = default_settings

    app = FastAPI(
        title="Checkout API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.gateway = gateway
    app.state.mailer = mailer

    # ---------------------------------------------
    # CORS
    # ---------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.middleware("http")(request_id_middleware)

    # ---------------------------------------------
    # ERROR ENVELOPES
    # ---------------------------------------------
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(400, "Invalid request", _describe_validation_error(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("unhandled_error", error=str(exc), exc_info=exc)
        return error_response(500, "Internal server error", str(exc))

    # ---------------------------------------------
    # ROUTERS
    # ---------------------------------------------
    app.include_router(payments_razorpay.router)
    app.include_router(notifications.router)

    @app.get("/")
    def root():
        return {"message": "Checkout API is running"}

    missing = missing_settings(settings)
    if missing:
        logger.warning("settings_missing", missing=missing)

    return app


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Malformed request body"


app = create_app()


def run():
    import uvicorn

    logger.info("server_starting", host=default_settings.HOST, port=default_settings.PORT)
    uvicorn.run(
        "checkout_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()
