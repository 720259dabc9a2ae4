# autentication_controller.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.models.user_models import RegisterRequest, RegisterResponse, LoginRequest, LoginResponse, UserProfile
from domain.entities.user_classes import UserEntity
from application.use_cases.autentication_use_cases import AuthenticationUseCases, INVALID_CREDENTIALS
from application.use_cases.user_use_cases import UserUseCases
from application.use_cases.security import get_current_user
from application.utils.utils import get_display_name, sanitize_display_name
import logging
from sqlalchemy.exc import IntegrityError, DataError

router = APIRouter(prefix="/api", tags=["auth"])

logger = logging.getLogger(__name__)

def _dup_key_on(err: IntegrityError, needle: str) -> bool:
    """Detecta qual índice único disparou a violação."""
    msg = str(getattr(err, "orig", err))
    return needle in msg

@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    uc = AuthenticationUseCases(db)

    try:
        user = uc.register_user(payload)
        return RegisterResponse(id=user.id, role=user.role.value, person_type=user.person_type.value)

    except HTTPException:
        raise

    except IntegrityError as e:
        # cadastro concorrente passou pela checagem prévia; o índice único decide
        if _dup_key_on(e, "users.email") or _dup_key_on(e, "ix_users_email"):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"field": "email", "message": "Email ja cadastrado."},
            )
        if _dup_key_on(e, "users.cpf") or _dup_key_on(e, "ix_users_cpf"):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"field": "cpf", "message": "CPF ja cadastrado."},
            )
        if _dup_key_on(e, "users.cnpj") or _dup_key_on(e, "ix_users_cnpj"):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"field": "cnpj", "message": "CNPJ ja cadastrado."},
            )

        logger.exception("Integrity error ao registrar usuário")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Violacao de integridade nos dados informados."},
        )

    except DataError:
        # tamanho de campo, tipos fora do range etc.
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"message": "Dados invalidos para um dos campos."})

    except Exception:
        logger.exception("Falha inesperada ao registrar usuário")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail={"message": "Erro ao criar usuario."})

@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    uc = AuthenticationUseCases(db)
    try:
        token, user = uc.login(email=payload.email, password=payload.password)
    except ValueError as e:
        if str(e) == INVALID_CREDENTIALS:
            logger.info("Tentativa de login recusada")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"message": "Email ou senha invalidos."},
            )
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"message": str(e)})

    return LoginResponse(
        id=user.id,
        role=user.role.value,
        person_type=user.person_type.value,
        name=user.name,
        trade_name=user.trade_name,
        company_name=user.company_name,
        email=user.email,
        display_name=sanitize_display_name(get_display_name(user)),
        access_token=token,
        token_type="bearer",
    )

@router.get("/me", response_model=UserProfile)
def me(current: UserEntity = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserUseCases(db).get_profile(current.id)
