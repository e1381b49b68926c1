"""
Database configuration and models for webtrees
"""

from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()
migrate = Migrate()


def init_db():
    """Create all tables that do not exist yet"""
    db.create_all()


def init_app(app):
    """Initialize database extensions with Flask app"""
    db.init_app(app)
    migrate.init_app(app, db)

    # Import all models so they are registered with SQLAlchemy before create_all()
    from webtrees.database import models  # noqa: F401
