# utils.py
from domain.entities.user_entity import PersonType

SERVICE_CATALOG = (
    "Construção Civil",
    "Arquitetura",
    "Marcenaria",
    "Reformas",
    "Paisagismo",
    "Acabamentos",
    "Design de Interiores",
    "Instalações Elétricas",
    "Instalações Hidráulicas",
)

DEFAULT_DISPLAY_NAME = "Usuario"


def _first_token(value: str | None) -> str:
    if not value or not value.strip():
        return ""
    return value.split()[0]


def get_display_name(user, fallback: str = DEFAULT_DISPLAY_NAME) -> str:
    """Nome curto exibido no cabeçalho: nome fantasia/razão social para CNPJ, primeiro nome para CPF."""
    if user is None:
        return fallback

    person_type = getattr(user, "person_type", None)
    if person_type is not None and str(getattr(person_type, "value", person_type)).upper() == PersonType.cnpj.value:
        trade = (getattr(user, "trade_name", None) or "").strip()
        if trade:
            return trade
        company = (getattr(user, "company_name", None) or "").strip()
        if company:
            return company

    return _first_token(getattr(user, "name", None)) or fallback


def sanitize_display_name(value: str | None, fallback: str = DEFAULT_DISPLAY_NAME) -> str:
    # nunca exibir e-mail como nome
    if not value or "@" in value:
        return fallback
    return value.strip() or fallback
