"""
Review Model Module
Defines the Review data model
"""
from ..database import db

# Range of the Integer column on every supported backend
RATING_MIN = -2**31
RATING_MAX = 2**31 - 1


class Review(db.Model):
    """
    Review Model
    A rating and comment left on a course. The foreign key is declared in the
    schema, but callers must confirm the course exists before adding a review.
    """
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    course_id = db.Column(db.Integer, db.ForeignKey("courses.id"), nullable=False, index=True)
    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=False)

    def __init__(self, course_id, rating, comment):
        self.course_id = course_id
        self.rating = rating
        self.comment = comment

    def to_dict(self):
        return {
            'id': self.id,
            'courseId': self.course_id,
            'rating': self.rating,
            'comment': self.comment
        }

    def __repr__(self):
        return f'<Review {self.id} course={self.course_id} rating={self.rating}>'
