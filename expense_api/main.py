from contextlib import asynccontextmanager
from typing import Optional, cast

from dependency_injector import providers
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from expense_api.core.error_handlers import register_error_handlers
from expense_api.core.logger import logger
from expense_api.core.settings import Settings
from expense_api.app_containers import ApplicationContainer
from expense_api.storage.database.db_connector import apply_schema_mode, drop_schema, dispose_engine
from expense_api.v1_0.v1_router import build_v1_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = cast(ApplicationContainer, app.state.container)
    settings: Settings = container.settings()
    engine = container.engine()
    await apply_schema_mode(engine, settings.DB_SCHEMA_MODE)
    logger.info(f"{settings.APP_NAME} starting in {settings.APP_ENV}")
    try:
        yield
    finally:
        logger.info(f"{settings.APP_NAME} shutdown")
        if settings.DB_SCHEMA_MODE == "create-drop":
            await drop_schema(engine)
        await dispose_engine(engine)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    container = ApplicationContainer()
    if settings is not None:
        container.settings.override(providers.Object(settings))
    settings = container.settings()

    api_prefix = settings.API_PREFIX

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        openapi_url=f"{api_prefix}/openapi.json",
        docs_url=f"{api_prefix}/docs",
        redoc_url=f"{api_prefix}/redoc",
        lifespan=lifespan,
    )

    app.state.container = container

    origins = settings.CORS_ORIGINS_LIST
    allow_credentials = True

    if "*" in origins:
        # wildcard + credentials is not legal CORS
        allow_credentials = False

    logger.info("CORS origins=%s allow_credentials=%s", origins, allow_credentials)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    base_router = APIRouter(prefix=api_prefix)
    base_router.include_router(
        build_v1_router(
            container.api_container.category_service(),
            container.api_container.expense_service(),
            container.get_db(),
        )
    )

    @base_router.get("/ready", tags=["health"])
    async def ready():
        return {
            "message": "ready",
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "env": settings.APP_ENV,
            "prefix": api_prefix,
        }

    app.include_router(base_router)

    return app


app = create_app()
