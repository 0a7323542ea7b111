"""User store."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rentalhaven.models.user import User


class UserRepository:
    """Persistence operations for users."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user: User) -> User:
        """Persist a new user and return it with its id assigned."""
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def find_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive email match."""
        return self.db.scalars(select(User).where(User.email == email)).first()

    def find_first(self) -> User | None:
        """Return the lowest-id user, if any."""
        return self.db.scalars(select(User).order_by(User.id).limit(1)).first()

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(User)) or 0
