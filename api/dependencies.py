"""
API dependencies for dependency injection
"""

from fastapi import Query
from app.config import settings


class Pagination:
    """skip/limit query parameters shared by list endpoints"""

    def __init__(
        self,
        skip: int = Query(0, ge=0, description="Number of records to skip"),
        limit: int = Query(
            settings.default_page_size, ge=1, le=1000, description="Maximum records returned"
        ),
    ):
        self.skip = skip
        self.limit = limit
