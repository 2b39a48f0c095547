import pytest

from courses_api import create_app
from courses_api.database import db
from courses_api.models import Course, Review
from courses_api.services import CourseStore, ReviewStore


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def course_store(app):
    return CourseStore()


@pytest.fixture
def review_store(app):
    return ReviewStore()


@pytest.fixture
def new_course(course_store):
    def _make(name='Test', url='http://what.com'):
        return course_store.add(Course(name=name, url=url))
    return _make


@pytest.fixture
def new_review(review_store):
    def _make(course_id, rating=5, comment='Just test Command'):
        return review_store.add(Review(course_id=course_id, rating=rating, comment=comment))
    return _make
