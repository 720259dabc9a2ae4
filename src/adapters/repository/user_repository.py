from sqlalchemy.orm import Session
from sqlalchemy import select
from domain.entities.user_entity import User

class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        query = select(User).where(User.email == email)
        return self.db.execute(query).scalars().first()

    def update_user(self, user: User, values: dict) -> User:
        for key, value in values.items():
            setattr(user, key, value)
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
