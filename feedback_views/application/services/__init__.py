"""Page coordinators."""

from .admin_search_service import AdminSearchService
from .student_home_service import StudentHomeService
from .student_list_service import StudentListService

__all__ = [
    "AdminSearchService",
    "StudentHomeService",
    "StudentListService",
]
