"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internhub.api.routes.auth_routes import router as auth_router
from internhub.api.routes.profile_routes import router as profile_router
from internhub.api.routes.internship_routes import router as internship_router
from internhub.api.routes.job_routes import router as job_router
from internhub.api.routes.employer_routes import router as employer_router
from internhub.api.routes.application_routes import router as application_router
from internhub.api.routes.course_routes import router as course_router
from internhub.api.routes.enrollment_routes import router as enrollment_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(profile_router)
api_router.include_router(internship_router)
api_router.include_router(job_router)
api_router.include_router(employer_router)
api_router.include_router(application_router)
api_router.include_router(course_router)
api_router.include_router(enrollment_router)
