"""
Review Store Module
Persists and retrieves Review records. It does not check that the owning
course exists, handlers do that before calling add.
"""
from typing import List
import logging
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..database import db
from ..models.review import Review
from ..utils.errors import StorageError
from ..utils.logger import custom_logger

logger = logging.getLogger(__name__)


class ReviewStore:
    """
    Store class for Review persistence
    """
    def __init__(self, database=None):
        self.db = database if database is not None else db

    @custom_logger.log_function_call
    def add(self, review: Review) -> Review:
        """
        Persist a new review and populate its id
        @param review: Review - Unsaved review
        @returns: Review - The same review with id assigned
        @raises: StorageError if the insert fails
        """
        session = self.db.session
        try:
            session.add(review)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Error adding review: {str(e)}")
            raise StorageError('Problem adding review') from e
        return review

    @custom_logger.log_function_call
    def find_all(self) -> List[Review]:
        """
        Every stored review, in id order
        @returns: list - Possibly empty list of reviews
        """
        return self._select(select(Review).order_by(Review.id))

    @custom_logger.log_function_call
    def find_by_course_id(self, course_id: int) -> List[Review]:
        """
        Reviews belonging to one course
        @param course_id: int - Owning course id
        @returns: list - Possibly empty, also empty for an unknown course id
        """
        return self._select(
            select(Review).where(Review.course_id == course_id).order_by(Review.id)
        )

    def _select(self, statement) -> List[Review]:
        try:
            return list(self.db.session.scalars(statement))
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error(f"Error fetching reviews: {str(e)}")
            raise StorageError('Problem fetching reviews') from e
