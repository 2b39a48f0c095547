"""
Course Store Module
Persists and retrieves Course records
"""
from typing import List, Optional
import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..database import db
from ..models.course import Course
from ..utils.errors import StorageError
from ..utils.logger import custom_logger

logger = logging.getLogger(__name__)


class CourseStore:
    """
    Store class for Course persistence. Holds no state of its own,
    every call goes through the session bound to the current app.
    """
    def __init__(self, database=None):
        self.db = database if database is not None else db

    @custom_logger.log_function_call
    def add(self, course: Course) -> Course:
        """
        Persist a new course and populate its id
        @param course: Course - Unsaved course
        @returns: Course - The same course with id assigned
        @raises: StorageError if the insert fails
        """
        session = self.db.session
        try:
            session.add(course)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Error adding course: {str(e)}")
            raise StorageError('Problem adding course') from e
        return course

    @custom_logger.log_function_call
    def find_by_id(self, course_id: int) -> Optional[Course]:
        """
        Look up a course by id
        @param course_id: int - Course id
        @returns: Course or None when no course has that id
        """
        try:
            return self.db.session.get(Course, course_id)
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error finding course {course_id}: {str(e)}")
            raise StorageError('Problem finding course') from e

    @custom_logger.log_function_call
    def find_all(self) -> List[Course]:
        try:
            return list(self.db.session.scalars(select(Course).order_by(Course.id)))
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error listing courses: {str(e)}")
            raise StorageError('Problem listing courses') from e
