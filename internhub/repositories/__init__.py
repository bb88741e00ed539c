"""
Repositories - storage behind a single interface.

Usage:
    from internhub.repositories import build_repository
    repo = build_repository(get_settings())
    repo.internships.find(is_remote=True)
"""

from internhub.core.config import Settings
from internhub.repositories.base import Collection, DuplicateRecordError, Repository
from internhub.repositories.memory import MemoryRepository
from internhub.repositories.sql import SqlRepository


def build_repository(settings: Settings) -> Repository:
    """Pick the backend named by STORAGE_BACKEND."""
    if settings.storage_backend == "memory":
        return MemoryRepository()

    from internhub.db.database import build_engine
    return SqlRepository(build_engine(settings.database_url, echo=settings.debug))


__all__ = [
    "Collection",
    "DuplicateRecordError",
    "MemoryRepository",
    "Repository",
    "SqlRepository",
    "build_repository",
]
