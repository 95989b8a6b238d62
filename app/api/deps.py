"""FastAPI dependencies wiring services to the request's database session."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.repositories import SqlAlchemyUserRepository, UserRepository
from app.services.tokens import TokenIssuer
from app.services.users import UserService


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> UserService:
    return UserService(repository, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_token_issuer(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenIssuer:
    return TokenIssuer(repository, settings.signing_config())
