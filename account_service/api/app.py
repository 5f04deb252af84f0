from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from starlette.middleware.sessions import SessionMiddleware
from .error import ClientError, ServerError
from account_service.adapter.services.mail_transport import build_mail_transport
from account_service.app.services.reference_data import ReferenceData
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Imported here so building an app does not open the configured database
    from account_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
    from account_service.app.services.reference_data import load_reference_data
    from account_service.depends import AsyncSessionLocal, engine

    config = app.state.config
    if config.CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        app.state.reference_data = await load_reference_data(
            SqlAlchemyUnitOfWork(session), config.DEFAULT_LANGUAGE
        )
    yield
    await engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    app = FastAPI(title="Account Service", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    # Replaced by the code tables once the lifespan has loaded them
    app.state.reference_data = ReferenceData.defaults(ApplicationConfig.DEFAULT_LANGUAGE)
    app.state.mail_transport = build_mail_transport(ApplicationConfig)

    app.add_middleware(
        SessionMiddleware,
        secret_key=ApplicationConfig.SESSION_SECRET,
        session_cookie=ApplicationConfig.SESSION_COOKIE,
        max_age=ApplicationConfig.SESSION_MAX_AGE,
        same_site="lax",
        https_only=ApplicationConfig.SESSION_HTTPS_ONLY,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from account_service.api.routes import auth, health_check, notifications, reference, settings

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(settings.router, prefix=prefix, tags=["Settings"])
    app.include_router(notifications.router, prefix=prefix, tags=["Notifications"])
    app.include_router(reference.router, prefix=prefix, tags=["Reference"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
