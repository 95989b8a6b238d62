"""User persistence: repository interface and its implementations."""

from app.repositories.memory_user_repository import InMemoryUserRepository
from app.repositories.sqlalchemy_user_repository import SqlAlchemyUserRepository
from app.repositories.user_repository import UserRepository

__all__ = ["InMemoryUserRepository", "SqlAlchemyUserRepository", "UserRepository"]
