"""
InternHub - Main Application

FastAPI backend with:
- Students, employers and admins on cookie sessions
- Internship and job listings with filtering
- Applications with an employer-driven status lifecycle
- Course catalog and enrollments
- SQL (SQLAlchemy) or in-memory storage

Run: uvicorn internhub.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from internhub import __version__
from internhub.api.routes import api_router
from internhub.core.auth import CredentialStrategy, PasswordCredentialStrategy
from internhub.core.config import Settings, get_settings
from internhub.core.errors import register_exception_handlers
from internhub.core.logging import configure_logging
from internhub.repositories import Repository, build_repository
from internhub.services.seed_data import seed_demo_data

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[Repository] = None,
    credential_strategy: Optional[CredentialStrategy] = None,
) -> FastAPI:
    """
    Build the application.

    Tests pass their own repository; otherwise one is built from
    STORAGE_BACKEND / DATABASE_URL.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="InternHub",
        description="""
        Marketplace connecting students with internships, jobs and courses.

        ## Features
        - **Authentication**: cookie sessions for students, employers and admins
        - **Profiles**: student skills, experiences and educations; employer company details
        - **Listings**: internships and jobs with search filters
        - **Applications**: apply, withdraw, employer status updates
        - **Courses**: catalog, enrollments and progress tracking
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    app.state.settings = settings
    app.state.repository = repository or build_repository(settings)
    app.state.credential_strategy = credential_strategy or PasswordCredentialStrategy()

    # CORS middleware (allow all for development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        """Create tables and optionally load demo data."""
        repo = app.state.repository
        repo.create_all()
        logger.info("Storage ready (%s backend)", type(repo).__name__)
        if settings.seed_demo_data:
            seed_demo_data(repo)

    @app.get("/", tags=["Health"])
    async def root():
        return {"status": "healthy", "app": "InternHub", "version": __version__}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check."""
        connected = app.state.repository.ping()
        return {
            "status": "healthy" if connected else "degraded",
            "storage": "connected" if connected else "disconnected",
        }

    return app


app = create_app()
