"""SQLAlchemy declarative Base with constraint naming shared with Alembic."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Index/constraint names match those in alembic/versions (e.g. ix_users_username).
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
