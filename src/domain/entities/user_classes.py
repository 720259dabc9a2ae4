from dataclasses import dataclass
from domain.entities.user_entity import RoleType, PersonType

@dataclass(frozen=True)
class UserEntity:
    id: str
    email: str
    role: RoleType
    person_type: PersonType
    name: str | None
    trade_name: str | None
    company_name: str | None
