import logging
from typing import Tuple
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from domain.entities.user_entity import User, RoleType, PersonType
from domain.entities.user_classes import UserEntity
from domain.models.user_models import RegisterRequest
from adapters.repository.autentication_repository import AuthenticationRepository
from application.use_cases.registration_policy import check_registration, field_errors, INVALID_PAYLOAD_MESSAGE
from application.use_cases.security import create_access_token
from application.utils.validators import only_digits, parse_date

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Credenciais Invalidas"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def conflict(field: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"field": field, "message": message},
    )


def invalid_payload(errors: dict) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": INVALID_PAYLOAD_MESSAGE, "errors": field_errors(errors)},
    )


class AuthenticationUseCases:
    """Application business rules for auth."""

    def __init__(self, db: Session):
        self.repo = AuthenticationRepository(db)

    def register_user(self, payload: RegisterRequest) -> User:
        errors = check_registration(payload)
        if errors:
            raise invalid_payload(errors)

        email = payload.email.strip().lower()
        cpf = only_digits(payload.cpf) or None
        cnpj = only_digits(payload.cnpj) or None

        # ordem da checagem: email, CPF, CNPJ
        if self.repo.get_user_by_email(email):
            raise conflict("email", "Email ja cadastrado.")
        if cpf and self.repo.get_user_by_cpf(cpf):
            raise conflict("cpf", "CPF ja cadastrado.")
        if cnpj and self.repo.get_user_by_cnpj(cnpj):
            raise conflict("cnpj", "CNPJ ja cadastrado.")

        user = self.repo.create_user(
            role=RoleType[payload.role.value],
            person_type=PersonType[payload.person_type.value],
            email=email,
            password=payload.password,
            name=_clean(payload.name),
            birth_date=parse_date(payload.birth_date),
            cpf=cpf,
            rg=_clean(payload.rg),
            cnpj=cnpj,
            company_name=_clean(payload.company_name),
            trade_name=_clean(payload.trade_name),
            contact_name=_clean(payload.contact_name),
            contact_email=_clean(payload.contact_email.lower()) if payload.contact_email else None,
            contact_phone=only_digits(payload.contact_phone) or None,
            contact_cpf=only_digits(payload.contact_cpf) or None,
            contact_rg=_clean(payload.contact_rg),
            contact_birth_date=parse_date(payload.contact_birth_date),
            cnpj_card=payload.cnpj_card or None,
            phone=only_digits(payload.phone),
            services=list(payload.services) if payload.services else None,
        )
        logger.info("Usuario %s cadastrado (%s/%s)", user.id, user.role.value, user.person_type.value)
        return user

    def login(self, *, email: str, password: str) -> Tuple[str, UserEntity]:
        user = self.repo.verify_credentials(email=email.strip().lower(), password=password)
        if not user:
            raise ValueError(INVALID_CREDENTIALS)

        token = create_access_token(user_id=user.id, role=user.role)
        return token, user
