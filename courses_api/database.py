"""
Shared SQLAlchemy handle, bound to an application by create_app
"""
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
