# security.py
import os
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import HTTPException, status, Depends
from fastapi.security import OAuth2PasswordBearer
from pydantic import ValidationError
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.models.user_models import TokenPayload
from domain.entities.user_entity import User as UserORM, RoleType
from domain.entities.user_classes import UserEntity

pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")

JWT_SECRET = os.environ.get("JWT_SECRET", "change_this_in_prod")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
JWT_LEEWAY_SECONDS = int(os.environ.get("JWT_LEEWAY_SECONDS", "30"))

def hash_password(raw: str) -> str:
    if not isinstance(raw, str):
        raise TypeError("Password must be a string")
    return pwd_context.hash(raw)

def verify_password(raw: str, hashed: str) -> bool:
    if not isinstance(raw, str) or not hashed:
        return False
    return pwd_context.verify(raw, hashed)

def create_access_token(*, user_id: str, role: RoleType, expires_minutes: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": user_id, "role": role.value if hasattr(role, "value") else str(role), "exp": expire}
    return jwt.encode(payload, JWT_SECRET, algorithm=ALGORITHM)

def decode_token(token: str) -> TokenPayload:
    try:
        payload = jwt.decode(
            token,
            JWT_SECRET,
            algorithms=[ALGORITHM],
            options={"verify_exp": True, "leeway": JWT_LEEWAY_SECONDS},
        )
        return TokenPayload(sub=payload.get("sub"), role=payload.get("role"))
    except (JWTError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": "Token invalido ou expirado."},
            headers={"WWW-Authenticate": "Bearer"},
        )

def to_entity(user: UserORM) -> UserEntity:
    return UserEntity(
        id=user.id,
        email=user.email,
        role=user.role,
        person_type=user.person_type,
        name=user.name,
        trade_name=user.trade_name,
        company_name=user.company_name,
    )

def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> UserEntity:
    payload = decode_token(token)
    user: UserORM | None = db.query(UserORM).filter(UserORM.id == payload.sub).first()
    if not user:
        raise HTTPException(status_code=401, detail={"message": "Usuario nao encontrado."})
    return to_entity(user)
