from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """JSON em camelCase, atributos em snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class RegisterRole(str, Enum):
    client = "client"
    professional = "professional"

class RegisterPersonType(str, Enum):
    cpf = "cpf"
    cnpj = "cnpj"

class RegisterRequest(CamelModel):
    role: RegisterRole
    person_type: RegisterPersonType
    name: str | None = None
    birth_date: str | None = None
    cpf: str | None = None
    rg: str | None = None
    phone: str | None = None
    email: EmailStr
    password: str = Field(min_length=8)
    cnpj: str | None = None
    company_name: str | None = None
    trade_name: str | None = None
    contact_name: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    contact_cpf: str | None = None
    contact_rg: str | None = None
    contact_birth_date: str | None = None
    cnpj_card: str | None = None
    services: list[str] | None = None

class RegisterResponse(CamelModel):
    id: str
    role: str
    person_type: str

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)

class LoginResponse(CamelModel):
    id: str
    role: str
    person_type: str
    name: str | None = None
    trade_name: str | None = None
    company_name: str | None = None
    email: EmailStr
    display_name: str
    access_token: str
    token_type: str = "bearer"

class TokenPayload(BaseModel):
    sub: str  # user id
    role: str

class UserUpdate(CamelModel):
    # name/cpf/cnpj são aceitos só para serem recusados: não podem mudar após o cadastro
    name: str | None = None
    cpf: str | None = None
    cnpj: str | None = None

    birth_date: str | None = None
    rg: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=8)
    company_name: str | None = None
    trade_name: str | None = None
    contact_name: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    contact_cpf: str | None = None
    contact_rg: str | None = None
    contact_birth_date: str | None = None
    services: list[str] | None = None
    cnpj_card: str | None = None

class UserProfile(CamelModel):
    id: str
    role: str
    person_type: str
    name: str | None = None
    birth_date: date | None = None
    cpf: str | None = None
    rg: str | None = None
    cnpj: str | None = None
    company_name: str | None = None
    trade_name: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    contact_cpf: str | None = None
    contact_rg: str | None = None
    contact_birth_date: date | None = None
    email: str
    phone: str | None = None
    services: list[str] = []
    has_cnpj_card: bool = False

class ServiceCatalog(BaseModel):
    services: list[str]
