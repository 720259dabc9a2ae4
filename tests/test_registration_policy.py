from __future__ import annotations

from application.use_cases.registration_policy import (
    REQUIRED_FIELDS,
    check_registration,
    check_update,
)
from domain.models.user_models import RegisterRequest, UserUpdate


def _register(**overrides) -> RegisterRequest:
    data = {
        "role": "client",
        "person_type": "cpf",
        "name": "Ana Souza",
        "birth_date": "1990-05-17",
        "cpf": "52998224725",
        "rg": "123456789",
        "phone": "11987654321",
        "email": "ana@exemplo.com.br",
        "password": "senha1234",
    }
    data.update(overrides)
    return RegisterRequest(**data)


def test_complete_client_has_no_errors():
    assert check_registration(_register()) == {}


def test_client_missing_cpf():
    errors = check_registration(_register(cpf=None))
    assert errors == {"cpf": ["Informe o CPF."]}


def test_client_with_bad_checksum_cpf():
    errors = check_registration(_register(cpf="529.982.247-26"))
    assert errors == {"cpf": ["CPF invalido."]}


def test_client_cannot_register_as_cnpj():
    errors = check_registration(_register(person_type="cnpj"))
    assert errors["personType"] == ["Cliente deve se cadastrar com CPF."]


def test_blank_name_and_bad_phone():
    errors = check_registration(_register(name="   ", phone="119876543", birth_date="ontem"))
    assert errors["name"] == ["Informe o nome completo."]
    assert errors["phone"] == ["Telefone invalido."]
    assert errors["birthDate"] == ["Informe uma data valida."]


def test_cpf_professional_must_pick_services():
    errors = check_registration(_register(role="professional", services=[]))
    assert errors == {"services": ["Selecione ao menos um servico."]}
    assert check_registration(_register(role="professional", services=["Reformas"])) == {}


def test_cnpj_professional_missing_card():
    payload = _register(
        role="professional",
        person_type="cnpj",
        name=None,
        cpf=None,
        rg=None,
        phone=None,
        cnpj="11.222.333/0001-81",
        birth_date="2010-03-01",
        company_name="Construtora Horizonte Ltda",
        trade_name="Horizonte",
        contact_name="Carla Mendes",
        contact_email="carla@horizonte.com.br",
        contact_phone="21987654321",
        contact_cpf="52998224725",
        contact_rg="112223334",
        contact_birth_date="1979-11-02",
        services=["Construção Civil"],
    )
    errors = check_registration(payload)
    assert errors == {"cnpjCard": ["Envie o cartao CNPJ."]}


def test_cnpj_professional_empty_reports_every_company_field():
    errors = check_registration(_register(role="professional", person_type="cnpj"))
    expected = {rule.field for rule in REQUIRED_FIELDS[("professional", "cnpj")]}
    # birthDate do cadastro base é válida e serve como data de criação
    assert set(errors) == expected - {"birthDate"}
    assert "cpf" not in errors and "name" not in errors


def test_password_needs_letters_and_digits():
    assert check_registration(_register(password="abcdefgh")) == {"password": ["A senha deve ter letras e numeros."]}
    assert check_registration(_register(password="12345678")) == {"password": ["A senha deve ter letras e numeros."]}
    assert check_registration(_register(password="abcdefg1")) == {}


def test_policy_accepts_plain_dicts():
    errors = check_registration({"role": "client", "personType": "cpf", "password": "abcdefg1"})
    assert set(errors) == {"name", "birthDate", "cpf", "rg", "phone"}


def test_update_only_checks_sent_fields():
    assert check_update(UserUpdate()) == {}
    errors = check_update(UserUpdate(phone="123", contact_cpf="111.111.111-11", password="semnumeros"))
    assert errors == {
        "phone": ["Telefone invalido."],
        "contactCpf": ["CPF invalido."],
        "password": ["A senha deve ter letras e numeros."],
    }
