"""
Defines the declarative base shared by every ORM model.

All tables of the projects schema hang off a single metadata registry so the
schema can be created or dropped in one call. Table and column names match the
MySQL schema the application was first deployed against, so the models can be
pointed at an existing ``projects`` database without migration.
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def init_db(connection) -> None:
    """Create every table known to the shared metadata if it does not exist."""
    Base.metadata.create_all(bind=connection)


def drop_db(connection) -> None:
    """Drop every table known to the shared metadata."""
    Base.metadata.drop_all(bind=connection)
