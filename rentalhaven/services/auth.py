"""Authentication service: password hashing, registration and login.

No session or token is issued. Successful calls return the configured
placeholder token, which callers must not treat as a credential.
"""

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from rentalhaven.core.config import settings
from rentalhaven.core.exceptions import BadRequest, Conflict, Unauthorized
from rentalhaven.models.user import User
from rentalhaven.repositories.user import UserRepository
from rentalhaven.schemas.user import UserCreate

logger = logging.getLogger(__name__)

# bcrypt only reads this many bytes of a password
MAX_PASSWORD_BYTES = 72


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash.

    A stored value that is not a bcrypt hash never verifies.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_user(db: Session, user_data: UserCreate) -> User:
    """Register a new user with a hashed password."""
    users = UserRepository(db)
    if users.find_by_email(user_data.email):
        raise Conflict("Email already in use")
    if len(user_data.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise BadRequest(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")

    user = User(
        email=user_data.email,
        name=user_data.name,
        password=get_password_hash(user_data.password),
    )
    try:
        user = users.create(user)
    except IntegrityError as exc:
        # Another request inserted the same email after the lookup above
        db.rollback()
        raise Conflict("Email already in use") from exc
    logger.info("Registered user %s", user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user whose stored hash matches the password."""
    user = UserRepository(db).find_by_email(email)
    if not user or not verify_password(password, user.password):
        logger.info("Failed login attempt")
        raise Unauthorized("Invalid credentials")
    return user


def get_current_user(db: Session, email: str) -> User:
    """Look up a user by a client-supplied email.

    This is not verified authentication; anyone who knows an email can call it.
    """
    user = UserRepository(db).find_by_email(email)
    if not user:
        raise Unauthorized("Not authenticated")
    return user


def placeholder_token() -> str:
    """Token returned by register/login in place of a real credential."""
    # TODO: replace with signed, expiring tokens once sessions exist
    return settings.PLACEHOLDER_TOKEN
