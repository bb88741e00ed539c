"""
Course Routes

GET /courses - Course catalog with filters
GET /courses/{course_id} - Course details
POST /courses - Add a course (admin only)
PUT /courses/{course_id} - Update a course (admin only)
DELETE /courses/{course_id} - Remove a course and its enrollments (admin only)
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from internhub.core.auth import AdminPrincipal, get_current_admin, get_repository
from internhub.core.errors import NotFoundError
from internhub.models import Course, CourseType
from internhub.repositories import Repository
from internhub.schemas.schemas import CourseCreate, CourseUpdate, MessageResponse
from internhub.services.listing_filter import CourseFilters, filter_courses

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=List[Course])
async def list_courses(
    course_type: Optional[CourseType] = Query(None, alias="type"),
    category: Optional[str] = Query(None),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    min_rating: Optional[int] = Query(None, alias="minRating", ge=1, le=5),
    placement_guarantee: Optional[bool] = Query(None, alias="placementGuarantee"),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    repo: Repository = Depends(get_repository),
):
    """maxPrice is compared against the discounted price."""
    filters = CourseFilters(
        course_type=course_type,
        category=category,
        max_price=max_price,
        min_rating=min_rating,
        placement_guarantee=placement_guarantee,
        search_query=search_query,
    )
    return filter_courses(repo.courses.find(), filters)


@router.get("/{course_id}", response_model=Course)
async def get_course(course_id: int, repo: Repository = Depends(get_repository)):
    course = repo.courses.get(course_id)
    if course is None:
        raise NotFoundError("Course not found")
    return course


@router.post("", response_model=Course, status_code=201)
async def create_course(
    data: CourseCreate,
    admin: AdminPrincipal = Depends(get_current_admin),
    repo: Repository = Depends(get_repository),
):
    course = repo.courses.create(data.model_dump())
    logger.info("Admin %s created course %s", admin.user.id, course.id)
    return course


@router.put("/{course_id}", response_model=Course)
async def update_course(
    course_id: int,
    data: CourseUpdate,
    admin: AdminPrincipal = Depends(get_current_admin),
    repo: Repository = Depends(get_repository),
):
    changes = data.changes()
    course = repo.courses.update(course_id, changes) if changes else repo.courses.get(course_id)
    if course is None:
        raise NotFoundError("Course not found")
    return course


@router.delete("/{course_id}", response_model=MessageResponse)
async def delete_course(
    course_id: int,
    admin: AdminPrincipal = Depends(get_current_admin),
    repo: Repository = Depends(get_repository),
):
    if repo.courses.get(course_id) is None:
        raise NotFoundError("Course not found")
    for enrollment in repo.enrollments.find(course_id=course_id):
        repo.enrollments.delete(enrollment.id)
    repo.courses.delete(course_id)
    logger.info("Admin %s deleted course %s", admin.user.id, course_id)
    return MessageResponse(message="Course deleted")
