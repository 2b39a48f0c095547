"""
Review Controller Module
Handles review-related HTTP requests. Every course-scoped route looks the
course up first, so a missing course answers 404 instead of an empty list
and no review is ever written for it.
"""
from flask import Blueprint, request, jsonify
import logging

from ..models.review import Review
from ..models.schemas import ReviewCreate, parse_body
from ..services.review_service import ReviewStore
from .course_controller import get_course_or_404

logger = logging.getLogger(__name__)
review_bp = Blueprint('review', __name__)
review_store = ReviewStore()


@review_bp.route('/courses/<id:course_id>/reviews', methods=['POST'])
def create_review(course_id):
    """
    Add a review to an existing course
    @param course_id: int - Owning course id from the path
    @body: {"rating": 5, "comment": "..."}
    @returns: JSON response with the created review, 201, or 404 for an unknown course
    """
    course = get_course_or_404(course_id)

    data = parse_body(ReviewCreate, request.get_json(silent=True))
    review = review_store.add(
        Review(course_id=course.id, rating=data.rating, comment=data.comment)
    )
    logger.info(f"Created review {review.id} for course {course.id}")

    return jsonify(review.to_dict()), 201


@review_bp.route('/courses/<id:course_id>/reviews', methods=['GET'])
def list_course_reviews(course_id):
    """
    List the reviews of one course
    @param course_id: int - Owning course id from the path
    @returns: JSON array, possibly empty, or 404 for an unknown course
    """
    course = get_course_or_404(course_id)
    reviews = review_store.find_by_course_id(course.id)
    return jsonify([review.to_dict() for review in reviews]), 200


@review_bp.route('/reviews', methods=['GET'])
def list_reviews():
    return jsonify([review.to_dict() for review in review_store.find_all()]), 200
