import uuid
from datetime import date, datetime
from sqlalchemy import String, Text, Date, JSON, Enum as SAEnum, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum as PyEnum
from infrastructure.database import Base

class RoleType(str, PyEnum):
    client = "CLIENT"
    professional = "PROFESSIONAL"

class PersonType(str, PyEnum):
    cpf = "CPF"
    cnpj = "CNPJ"


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    role: Mapped[RoleType] = mapped_column(
        SAEnum(RoleType, name="roletype", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        index=True, nullable=False,
    )
    person_type: Mapped[PersonType] = mapped_column(
        SAEnum(PersonType, name="persontype", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )

    # Identity: individual (CPF) or company (CNPJ)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    cpf: Mapped[str | None] = mapped_column(String(11), unique=True, index=True, nullable=True)
    rg: Mapped[str | None] = mapped_column(String(50), nullable=True)
    cnpj: Mapped[str | None] = mapped_column(String(14), unique=True, index=True, nullable=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    trade_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Responsible individual of a CNPJ account
    contact_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[str | None] = mapped_column(String(11), nullable=True)
    contact_cpf: Mapped[str | None] = mapped_column(String(11), nullable=True)
    contact_rg: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contact_birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    cnpj_card: Mapped[str | None] = mapped_column(Text, nullable=True)

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(11), nullable=False, default="")
    services: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
