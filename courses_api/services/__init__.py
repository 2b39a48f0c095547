from .course_service import CourseStore
from .review_service import ReviewStore

__all__ = ['CourseStore', 'ReviewStore']
