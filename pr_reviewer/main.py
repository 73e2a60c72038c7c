# =============================================================================
# pr_reviewer/main.py
# =============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pr_reviewer.core.config import settings
from pr_reviewer.api.api import api_router
from pr_reviewer.api.errors import register_exception_handlers
from pr_reviewer.db.session import connect_with_retry
from pr_reviewer.db.init_db import init_db
from pr_reviewer.core.logger import get_module_logger

logger = get_module_logger(__name__, "main.log")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Connect to the database (with retries), bootstrap the schema, and keep
    the storage handle on app.state for the process lifetime
    """
    # =============================================================================
    # STARTUP SEQUENCE
    # =============================================================================
    logger.info("Starting PR reviewer service...")

    try:
        database = connect_with_retry(settings)
        init_db(database, reset=settings.RESET_DB_ON_STARTUP)
        app.state.database = database
        logger.info("Database initialized successfully")

        logger.info(f"   Environment: {settings.ENVIRONMENT}")
        logger.info(f"   Project: {settings.PROJECT_NAME} v{settings.VERSION}")
        logger.info(f"   Database: {settings.safe_database_url}")
        logger.info(f"   Reset on startup: {settings.RESET_DB_ON_STARTUP}")
    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise

    yield

    # =============================================================================
    # SHUTDOWN SEQUENCE
    # =============================================================================
    logger.info("Shutting down PR reviewer service...")
    app.state.database.dispose()

def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application with middleware and routes
    """
    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.debug = settings.DEBUG

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Routes live at the root: /team, /users, /pullRequest, /stats
    application.include_router(api_router)

    return application

app = create_application()

@app.get("/health")
def health_check(request: Request):
    """
    Liveness plus a database round trip
    """
    db_healthy = True
    try:
        request.app.state.database.ping()
    except Exception as e:
        logger.error(f"Health check database ping failed: {str(e)}")
        db_healthy = False

    return {
        "status": "healthy" if db_healthy else "degraded",
        "version": settings.VERSION,
        "database": "healthy" if db_healthy else "unhealthy",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
