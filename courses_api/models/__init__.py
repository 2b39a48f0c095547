from .course import Course
from .review import Review

__all__ = ['Course', 'Review']
