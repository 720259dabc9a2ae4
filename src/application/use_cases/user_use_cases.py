import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from adapters.repository.user_repository import UserRepository
from domain.entities.user_entity import User, PersonType
from domain.models.user_models import UserProfile, UserUpdate
from application.use_cases.autentication_use_cases import conflict, invalid_payload
from application.use_cases.registration_policy import check_update
from application.use_cases.security import hash_password
from application.utils.validators import only_digits, parse_date

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = frozenset({"name", "cpf", "cnpj"})

# campos de texto livre: gravados sem espaços nas pontas quando enviados
TEXT_FIELDS = ("rg", "company_name", "trade_name", "contact_name", "contact_rg")


def to_profile(user: User) -> UserProfile:
    return UserProfile(
        id=user.id,
        role=user.role.value,
        person_type=user.person_type.value,
        name=user.name,
        birth_date=user.birth_date,
        cpf=user.cpf,
        rg=user.rg,
        cnpj=user.cnpj,
        company_name=user.company_name,
        trade_name=user.trade_name,
        contact_name=user.contact_name,
        contact_email=user.contact_email,
        contact_phone=user.contact_phone,
        contact_cpf=user.contact_cpf,
        contact_rg=user.contact_rg,
        contact_birth_date=user.contact_birth_date,
        email=user.email,
        phone=user.phone,
        services=list(user.services or []),
        has_cnpj_card=bool(user.cnpj_card),
    )


class UserUseCases:
    def __init__(self, db: Session):
        self.repo = UserRepository(db)

    def get_user(self, user_id: str) -> User:
        user = self.repo.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail={"message": "Usuario nao encontrado."})
        return user

    def get_profile(self, user_id: str) -> UserProfile:
        return to_profile(self.get_user(user_id))

    def update_profile(self, user_id: str, payload: UserUpdate) -> UserProfile:
        if IMMUTABLE_FIELDS & payload.model_fields_set:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Nome e CPF/CNPJ nao podem ser atualizados."},
            )

        errors = check_update(payload)
        if errors:
            raise invalid_payload(errors)

        user = self.get_user(user_id)

        email = payload.email.strip().lower() if payload.email else None
        if email and email != user.email and self.repo.get_user_by_email(email):
            raise conflict("email", "Email ja cadastrado.")

        if (
            user.person_type == PersonType.cnpj
            and payload.company_name
            and payload.company_name.strip() != (user.company_name or "")
            and not payload.cnpj_card
        ):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"field": "cnpjCard", "message": "Envie o cartao CNPJ para atualizar a razao social."},
            )

        values = {}
        for field in TEXT_FIELDS:
            value = getattr(payload, field)
            if value is not None:
                values[field] = value.strip()
        if payload.birth_date:
            values["birth_date"] = parse_date(payload.birth_date)
        if payload.contact_birth_date:
            values["contact_birth_date"] = parse_date(payload.contact_birth_date)
        if payload.phone:
            values["phone"] = only_digits(payload.phone)
        if payload.contact_phone:
            values["contact_phone"] = only_digits(payload.contact_phone)
        if payload.contact_cpf:
            values["contact_cpf"] = only_digits(payload.contact_cpf)
        if email:
            values["email"] = email
        if payload.contact_email is not None:
            values["contact_email"] = payload.contact_email.strip().lower()
        if payload.services is not None:
            values["services"] = list(payload.services)
        if payload.cnpj_card is not None:
            values["cnpj_card"] = payload.cnpj_card
        if payload.password:
            values["password_hash"] = hash_password(payload.password)

        updated = self.repo.update_user(user, values)
        logger.info("Usuario %s atualizado: %s", user_id, sorted(k for k in values if k != "password_hash"))
        return to_profile(updated)
