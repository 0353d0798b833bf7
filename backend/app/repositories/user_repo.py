# app/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func

from app.models import User
from app.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def create(self, *, email: str, name: str) -> User:
        # flush only; a duplicate email surfaces as IntegrityError here
        return self.add_and_refresh(User(email=email, name=name))
