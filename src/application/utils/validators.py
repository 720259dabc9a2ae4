# validators.py
"""Validadores puros de documentos brasileiros, telefone, datas e senha."""
import re
from datetime import date, datetime, timezone

_NON_DIGIT = re.compile(r"\D", re.ASCII)
_REPEATED = re.compile(r"^(\d)\1+$", re.ASCII)
_STRONG_PASSWORD = re.compile(r"^(?=.*[A-Za-z])(?=.*\d).{8,}$", re.ASCII)

CNPJ_WEIGHTS_FIRST = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_SECOND = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def only_digits(value) -> str:
    if value is None:
        return ""
    return _NON_DIGIT.sub("", str(value))


def _cpf_digit(digits: str) -> int:
    # pesos decrescentes terminando em 2: 10..2 para o 1º dígito, 11..2 para o 2º
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    check = 11 - (total % 11)
    return 0 if check >= 10 else check


def is_valid_cpf(value) -> bool:
    cpf = only_digits(value)
    if len(cpf) != 11 or _REPEATED.match(cpf):
        return False

    first = _cpf_digit(cpf[:9])
    if first != int(cpf[9]):
        return False
    return _cpf_digit(cpf[:10]) == int(cpf[10])


def _cnpj_digit(base: str, weights) -> int:
    total = sum(int(d) * w for d, w in zip(base, weights))
    mod = total % 11
    return 0 if mod < 2 else 11 - mod


def is_valid_cnpj(value) -> bool:
    cnpj = only_digits(value)
    if len(cnpj) != 14 or _REPEATED.match(cnpj):
        return False

    base = cnpj[:12]
    first = _cnpj_digit(base, CNPJ_WEIGHTS_FIRST)
    second = _cnpj_digit(base + str(first), CNPJ_WEIGHTS_SECOND)
    return cnpj == f"{base}{first}{second}"


def is_valid_phone(value) -> bool:
    """Fixo (10 dígitos) ou celular (11 dígitos), sempre com DDD."""
    return len(only_digits(value)) in (10, 11)


def _utc_date(moment: datetime) -> date:
    # data/hora com fuso vira data em UTC; sem fuso fica como veio
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def parse_date(value) -> date | None:
    """Aceita data ou data/hora ISO-8601; retorna None se inválida."""
    if isinstance(value, datetime):
        return _utc_date(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return _utc_date(datetime.fromisoformat(raw.replace("Z", "+00:00")))
    except ValueError:
        return None


def is_valid_date(value) -> bool:
    return parse_date(value) is not None


def is_strong_password(value) -> bool:
    if not isinstance(value, str):
        return False
    return _STRONG_PASSWORD.fullmatch(value) is not None
