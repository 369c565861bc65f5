import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legacore.ai import create_ai_client
from legacore.config import settings
from legacore.core.errors import register_exception_handlers
from legacore.core.logging_config import configure_logging
from legacore.database import dispose_engine
from legacore.routes import (
    company_routes,
    user_routes,
    case_routes,
    document_routes,
    project_routes,
    analytics_routes,
    opportunity_routes,
    credit_routes,
    dashboard_routes,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    # Provider check only: raises ValueError on an unknown AI_PROVIDER
    create_ai_client(settings.AI_PROVIDER)
    logger.info(
        "Starting %s %s for company %s", settings.APP_NAME, settings.APP_VERSION, settings.TENANT_SLUG
    )
    yield
    dispose_engine()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if settings.DEBUG else None,  # Disable in production
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": settings.APP_VERSION}


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "tenant": settings.TENANT_SLUG,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled in production",
    }


# Include routers
app.include_router(company_routes.router, prefix="/api/companies", tags=["Companies"])
app.include_router(user_routes.router, prefix="/api/users", tags=["Users"])
app.include_router(case_routes.router, prefix="/api/cases", tags=["Cases"])
app.include_router(document_routes.router, prefix="/api/documents", tags=["Documents"])
app.include_router(project_routes.router, prefix="/api/projects", tags=["Projects"])
app.include_router(analytics_routes.router, prefix="/api/analytics", tags=["Analytics"])
app.include_router(opportunity_routes.router, prefix="/api/opportunities", tags=["Opportunities"])
app.include_router(credit_routes.router, prefix="/api/credits", tags=["Credits"])
app.include_router(dashboard_routes.router, prefix="/api/dashboard", tags=["Dashboard"])
