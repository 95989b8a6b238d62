"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD
Example:
  python -m app.scripts.create_user admin your-secure-password
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.exceptions import ConflictError, InvalidArgumentError
from app.repositories import SqlAlchemyUserRepository
from app.services.users import UserService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Keystone user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (1-512 chars)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    settings = get_settings()
    db = SessionLocal()
    try:
        service = UserService(SqlAlchemyUserRepository(db), bcrypt_rounds=settings.BCRYPT_ROUNDS)
        try:
            user = service.create_user(args.username, args.password)
        except (InvalidArgumentError, ConflictError) as e:
            print(e.message, file=sys.stderr)
            return 1
        print(f"Created user '{user.username}' with id {user.id}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
