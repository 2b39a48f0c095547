"""
Course Model Module
Defines the Course data model
"""
from ..database import db

NAME_MAX_LENGTH = 255
URL_MAX_LENGTH = 2048


class Course(db.Model):
    """
    Course Model
    A course someone can review; id is assigned by the database on insert
    """
    __tablename__ = "courses"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    url = db.Column(db.String(URL_MAX_LENGTH), nullable=False)

    def __init__(self, name, url):
        self.name = name
        self.url = url

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'url': self.url
        }

    def __repr__(self):
        return f'<Course {self.id} {self.name}>'
