"""Utility script to create the initial administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from healthcare_pro.domain.entities import ROLE_ADMIN, User
from healthcare_pro.infrastructure.database import SessionLocal, initialize_database
from healthcare_pro.infrastructure.repositories import UserRepository
from healthcare_pro.infrastructure.security import get_password_hash


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for administrator creation."""

    parser = argparse.ArgumentParser(
        description="Create an administrator for the HealthCare Pro API.",
    )
    parser.add_argument("--email", default="admin@example.com", help="Administrator email")
    parser.add_argument("--first-name", default="System", help="First name")
    parser.add_argument("--last-name", default="Administrator", help="Last name")
    parser.add_argument(
        "--password",
        default=None,
        help="Password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    password = args.password or getpass("Administrator password: ")
    if not password:
        raise SystemExit("No password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        repository = UserRepository(session)
        email = args.email.strip().lower()
        if repository.get_by_email(email):
            raise SystemExit(f"A user with email {email} already exists.")
        user = repository.create(
            User(
                id=None,
                email=email,
                first_name=args.first_name,
                last_name=args.last_name,
                role=ROLE_ADMIN,
                password=get_password_hash(password),
            )
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the administrator: {exc}") from exc
    else:
        print(
            "Administrator created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.full_name()}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
