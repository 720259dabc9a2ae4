# autentication_repository.py
from typing import Optional
from sqlalchemy.orm import Session
from domain.entities.user_entity import User as UserORM, RoleType, PersonType
from domain.entities.user_classes import UserEntity
from application.use_cases.security import hash_password, verify_password, to_entity

class AuthenticationRepository:
    """Data access for users/auth (SQLAlchemy implementation)."""

    def __init__(self, db: Session):
        self.db = db

    # Queries
    def get_user_by_email(self, email: str) -> Optional[UserORM]:
        return self.db.query(UserORM).filter(UserORM.email == email).first()

    def get_user_by_cpf(self, cpf: str) -> Optional[UserORM]:
        return self.db.query(UserORM).filter(UserORM.cpf == cpf).first()

    def get_user_by_cnpj(self, cnpj: str) -> Optional[UserORM]:
        return self.db.query(UserORM).filter(UserORM.cnpj == cnpj).first()

    # Commands
    def create_user(self, *, role: RoleType, person_type: PersonType, email: str, password: str, **fields) -> UserORM:
        user = UserORM(
            role=role,
            person_type=person_type,
            email=email,
            password_hash=hash_password(password),
            **fields,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def verify_credentials(self, *, email: str, password: str) -> Optional[UserEntity]:
        user = self.get_user_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return to_entity(user)
