from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure `src/` is on sys.path so `import application.*` works in tests.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))

# Banco SQLite descartável; precisa estar no ambiente antes de importar infrastructure.database
_DB_DIR = tempfile.mkdtemp(prefix="marketplace-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["AUTO_MIGRATE"] = "0"
os.environ.setdefault("JWT_SECRET", "test-secret")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from infrastructure.database import SessionLocal  # noqa: E402
from infrastructure.migrations import run_migrations  # noqa: E402
from domain.entities.user_entity import User  # noqa: E402
from main import create_app  # noqa: E402

VALID_CPF = "529.982.247-25"
OTHER_CPF = "111.444.777-35"
VALID_CNPJ = "11.222.333/0001-81"


@pytest.fixture(scope="session", autouse=True)
def _schema():
    run_migrations()
    yield


@pytest.fixture(autouse=True)
def _clean_users():
    yield
    with SessionLocal() as db:
        db.execute(delete(User))
        db.commit()


@pytest.fixture()
def client():
    return TestClient(create_app())


@pytest.fixture()
def client_payload():
    return {
        "role": "client",
        "personType": "cpf",
        "name": "Ana Souza",
        "birthDate": "1990-05-17",
        "cpf": VALID_CPF,
        "rg": "12.345.678-9",
        "phone": "(11) 98765-4321",
        "email": "Ana@Exemplo.com.br",
        "password": "senha1234",
    }


@pytest.fixture()
def professional_payload():
    return {
        "role": "professional",
        "personType": "cpf",
        "name": "Bruno Lima",
        "birthDate": "1985-01-30",
        "cpf": OTHER_CPF,
        "rg": "98.765.432-1",
        "phone": "1133334444",
        "email": "bruno@exemplo.com.br",
        "password": "obras2024",
        "services": ["Marcenaria", "Reformas"],
    }


@pytest.fixture()
def company_payload():
    return {
        "role": "professional",
        "personType": "cnpj",
        "cnpj": VALID_CNPJ,
        "birthDate": "2010-03-01",
        "companyName": "Construtora Horizonte Ltda",
        "tradeName": "Horizonte Obras",
        "cnpjCard": "data:application/pdf;base64,JVBERi0xLjQK",
        "contactName": "Carla Mendes",
        "contactEmail": "carla@horizonte.com.br",
        "contactPhone": "21987654321",
        "contactCpf": VALID_CPF,
        "contactRg": "11.222.333-4",
        "contactBirthDate": "1979-11-02",
        "email": "contato@horizonte.com.br",
        "password": "horizonte1",
        "services": ["Construção Civil"],
    }
