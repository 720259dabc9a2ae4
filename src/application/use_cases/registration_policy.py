# registration_policy.py
"""
Regras de preenchimento do cadastro, codificadas como tabela.

Cada combinação (papel, tipo de pessoa) aponta para a lista de campos
obrigatórios; cada campo sabe dizer se foi informado e, quando foi, se é válido.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic.alias_generators import to_camel

from application.utils.validators import (
    is_strong_password, is_valid_cnpj, is_valid_cpf, is_valid_date, is_valid_phone,
)

ErrorMap = Dict[str, List[str]]

INVALID_PAYLOAD_MESSAGE = "Dados invalidos."
PASSWORD_MESSAGE = "A senha deve ter letras e numeros."
CLIENT_PERSON_TYPE_MESSAGE = "Cliente deve se cadastrar com CPF."


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())

def _has_value(value: Any) -> bool:
    return bool(value)

def _has_date(value: Any) -> bool:
    return bool(value) and is_valid_date(value)


@dataclass(frozen=True)
class FieldRule:
    attr: str
    missing: str
    present: Callable[[Any], bool] = _has_value
    valid: Optional[Callable[[Any], bool]] = None
    invalid: Optional[str] = None

    @property
    def field(self) -> str:
        return to_camel(self.attr)

    def check(self, value: Any) -> Optional[str]:
        if not self.present(value):
            return self.missing
        if self.valid is not None and not self.valid(value):
            return self.invalid
        return None


INDIVIDUAL_RULES: Tuple[FieldRule, ...] = (
    FieldRule("name", "Informe o nome completo.", present=_has_text),
    FieldRule("birth_date", "Informe uma data valida.", present=_has_date),
    FieldRule("cpf", "Informe o CPF.", valid=is_valid_cpf, invalid="CPF invalido."),
    FieldRule("rg", "Informe o RG.", present=_has_text),
    FieldRule("phone", "Informe o telefone.", valid=is_valid_phone, invalid="Telefone invalido."),
)

COMPANY_RULES: Tuple[FieldRule, ...] = (
    FieldRule("cnpj", "Informe o CNPJ.", valid=is_valid_cnpj, invalid="CNPJ invalido."),
    FieldRule("birth_date", "Informe a data de criacao.", present=_has_date),
    FieldRule("company_name", "Informe a razao social.", present=_has_text),
    FieldRule("trade_name", "Informe o nome fantasia.", present=_has_text),
    FieldRule("cnpj_card", "Envie o cartao CNPJ."),
    FieldRule("contact_name", "Informe o responsavel.", present=_has_text),
    FieldRule("contact_email", "Informe o email do responsavel."),
    FieldRule("contact_phone", "Informe o telefone do responsavel.", valid=is_valid_phone, invalid="Telefone invalido."),
    FieldRule("contact_cpf", "Informe o CPF do responsavel.", valid=is_valid_cpf, invalid="CPF invalido."),
    FieldRule("contact_rg", "Informe o RG do responsavel.", present=_has_text),
    FieldRule("contact_birth_date", "Informe a data de nascimento do responsavel.", present=_has_date),
)

SERVICE_RULES: Tuple[FieldRule, ...] = (
    FieldRule("services", "Selecione ao menos um servico."),
)

# (role, personType) -> campos obrigatórios
REQUIRED_FIELDS: Dict[Tuple[str, str], Tuple[FieldRule, ...]] = {
    ("client", "cpf"): INDIVIDUAL_RULES,
    ("client", "cnpj"): INDIVIDUAL_RULES,
    ("professional", "cpf"): INDIVIDUAL_RULES + SERVICE_RULES,
    ("professional", "cnpj"): COMPANY_RULES + SERVICE_RULES,
}

ALLOWED_PERSON_TYPES: Dict[str, Tuple[str, ...]] = {
    "client": ("cpf",),
    "professional": ("cpf", "cnpj"),
}

# Campos opcionais numa atualização: validados apenas quando enviados
UPDATE_RULES: Tuple[FieldRule, ...] = (
    FieldRule("birth_date", "Informe uma data valida.", valid=is_valid_date, invalid="Informe uma data valida."),
    FieldRule("phone", "Telefone invalido.", valid=is_valid_phone, invalid="Telefone invalido."),
    FieldRule("contact_phone", "Telefone invalido.", valid=is_valid_phone, invalid="Telefone invalido."),
    FieldRule("contact_cpf", "CPF invalido.", valid=is_valid_cpf, invalid="CPF invalido."),
    FieldRule("contact_birth_date", "Data de nascimento invalida.", valid=is_valid_date, invalid="Data de nascimento invalida."),
)


def _value(payload, name: str):
    if isinstance(payload, dict):
        return payload.get(name, payload.get(to_camel(name)))
    return getattr(payload, name, None)

def _enum_value(value) -> str:
    return str(getattr(value, "value", value) or "")

def _add(errors: ErrorMap, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def field_errors(errors: ErrorMap, form_errors: List[str] | None = None) -> dict:
    """Formato lido pelo front: erros do formulário e mapa campo -> mensagens."""
    return {"formErrors": list(form_errors or []), "fieldErrors": errors}


def check_registration(payload) -> ErrorMap:
    """Retorna o mapa campo -> mensagens; vazio quando o cadastro é válido."""
    errors: ErrorMap = {}
    role = _enum_value(_value(payload, "role"))
    person_type = _enum_value(_value(payload, "person_type"))

    if person_type not in ALLOWED_PERSON_TYPES.get(role, ()):
        if role == "client":
            _add(errors, "personType", CLIENT_PERSON_TYPE_MESSAGE)
        else:
            _add(errors, "personType", "Tipo de pessoa invalido.")

    for rule in REQUIRED_FIELDS.get((role, person_type), ()):
        message = rule.check(_value(payload, rule.attr))
        if message:
            _add(errors, rule.field, message)

    if not is_strong_password(_value(payload, "password")):
        _add(errors, "password", PASSWORD_MESSAGE)

    return errors


def check_update(payload) -> ErrorMap:
    errors: ErrorMap = {}
    for rule in UPDATE_RULES:
        value = _value(payload, rule.attr)
        if not value:
            continue
        message = rule.check(value)
        if message:
            _add(errors, rule.field, message)

    password = _value(payload, "password")
    if password and not is_strong_password(password):
        _add(errors, "password", PASSWORD_MESSAGE)

    return errors
