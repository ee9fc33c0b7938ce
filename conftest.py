"""
Configuration pytest.

Les tests tournent sur une base SQLite en mémoire (aiosqlite): les
contraintes UNIQUE, les transactions et le rollback s'y comportent comme
sur PostgreSQL pour ce que le service utilise.

Usage:
    pip install -e ".[test]"
    pytest
"""

import os
from collections.abc import AsyncGenerator

import pytest

# Variables d'environnement pour les tests
# Respecte les variables déjà définies (ex: dans la CI)
TEST_ENV = {
    "SQLALCHEMY_DATABASE_URI": os.getenv(
        "SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite:///:memory:"
    ),
    "ENVIRONMENT": os.getenv("ENVIRONMENT", "test"),
    "DEBUG": os.getenv("DEBUG", "false"),
    "OTEL_SERVICE_NAME": os.getenv("OTEL_SERVICE_NAME", "clinic-api-test"),
    # Pas d'attente entre tentatives de lecture pendant les tests
    "STORE_RETRY_ATTEMPTS": os.getenv("STORE_RETRY_ATTEMPTS", "1"),
    "STORE_RETRY_MIN_WAIT": "0",
    "STORE_RETRY_MAX_WAIT": "0",
}

# Appliquer les variables d'environnement de test avant tout import de app.*
for key, value in TEST_ENV.items():
    if key not in os.environ:
        os.environ[key] = value

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.database import Base  # noqa: E402
from app.models import Doctor, Patient, User  # noqa: E402
from app.repositories.entity_store import SqlAlchemyEntityStore  # noqa: E402
from app.services.credential_service import CredentialService  # noqa: E402
from app.services.doctor_service import DoctorService  # noqa: E402
from app.services.patient_service import PatientService  # noqa: E402

# ============================================================================
# Fixtures base de données
# ============================================================================


@pytest.fixture(scope="function")
async def test_engine():
    """
    Crée le moteur SQLAlchemy de test.

    StaticPool: une seule connexion partagée, sinon chaque connexion
    ouvrirait une base en mémoire vide.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Fournit une session de base de données pour chaque test."""
    async with session_maker() as session:
        yield session
        await session.rollback()


# ============================================================================
# Fixtures services
# ============================================================================


@pytest.fixture
def doctor_store(db_session):
    return SqlAlchemyEntityStore(db_session, Doctor)


@pytest.fixture
def patient_store(db_session):
    return SqlAlchemyEntityStore(db_session, Patient)


@pytest.fixture
def doctor_service(doctor_store) -> DoctorService:
    return DoctorService(doctor_store)


@pytest.fixture
def patient_service(patient_store) -> PatientService:
    return PatientService(patient_store)


@pytest.fixture
def credential_service(db_session) -> CredentialService:
    return CredentialService(SqlAlchemyEntityStore(db_session, User))


# ============================================================================
# Données de test
# ============================================================================


@pytest.fixture
def address_payload() -> dict:
    """Adresse complète valide."""
    return {
        "street": "Rua das Flores",
        "number": "100",
        "complement": "Sala 12",
        "neighborhood": "Centro",
        "city": "São Paulo",
        "state": "SP",
        "postal_code": "01310100",
    }


@pytest.fixture
def doctor_payload(address_payload) -> dict:
    """Données d'enregistrement d'un médecin."""
    return {
        "name": "Ana Souza",
        "email": "ana@x.com",
        "phone": "1199999999",
        "registration_number": "12345",
        "specialty": "CARDIOLOGIA",
        "address": address_payload,
    }


@pytest.fixture
def patient_payload(address_payload) -> dict:
    """Données d'enregistrement d'un patient."""
    return {
        "name": "João Lima",
        "email": "joao.lima@clinica.com.br",
        "phone": "1188887777",
        "national_id": "123.456.789-09",
        "address": address_payload,
    }
