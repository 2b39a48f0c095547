"""
Course Controller Module
Handles course-related HTTP requests and responses
"""
from flask import Blueprint, request, jsonify
import logging

from ..models.course import Course
from ..models.schemas import CourseCreate, parse_body
from ..services.course_service import CourseStore
from ..utils.errors import NotFoundError

logger = logging.getLogger(__name__)
course_bp = Blueprint('course', __name__)
course_store = CourseStore()


def get_course_or_404(course_id: int) -> Course:
    """
    Fetch a course or stop the request with 404
    @param course_id: int - Course id taken from the path
    @returns: Course - The stored course
    @raises: NotFoundError if no course has that id
    """
    course = course_store.find_by_id(course_id)
    if course is None:
        raise NotFoundError(f'Could not find course with id: {course_id}')
    return course


@course_bp.route('/courses', methods=['POST'])
def create_course():
    """
    Create a new course
    @body: {"name": "...", "url": "..."}
    @returns: JSON response with the created course, 201
    """
    data = parse_body(CourseCreate, request.get_json(silent=True))

    course = course_store.add(Course(name=data.name, url=data.url))
    logger.info(f"Created course {course.id}")

    return jsonify(course.to_dict()), 201


@course_bp.route('/courses', methods=['GET'])
def list_courses():
    return jsonify([course.to_dict() for course in course_store.find_all()]), 200


@course_bp.route('/courses/<id:course_id>', methods=['GET'])
def get_course(course_id):
    """
    Fetch a single course
    @param course_id: int - Course id from the path
    @returns: JSON response with the course, or 404
    """
    course = get_course_or_404(course_id)
    return jsonify(course.to_dict()), 200
