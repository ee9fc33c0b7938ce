"""Tests d'intégration du store SQLAlchemy.

Vérifie les contraintes d'unicité, l'atomicité des transactions et la
requête paginée des enregistrements actifs.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from app.core.exceptions import ConflictError, NotFoundError, StoreUnavailableError
from app.models import Address, Doctor, Patient, Specialty
from app.repositories.entity_store import SqlAlchemyEntityStore
from app.schemas.common import PageRequest


def make_address(**overrides) -> Address:
    values = {
        "street": "Rua Augusta",
        "number": "500",
        "neighborhood": "Consolação",
        "city": "São Paulo",
        "state": "SP",
        "postal_code": "01305000",
    }
    values.update(overrides)
    return Address(**values)


def make_doctor(
    crm: str, name: str, specialty: Specialty = Specialty.ORTOPEDIA, is_active: bool = True
) -> Doctor:
    return Doctor(
        registration_number=crm,
        name=name,
        email=f"{crm}@clinica.com.br",
        phone="1130304040",
        specialty=specialty,
        address=make_address(),
        is_active=is_active,
    )


class TestCreateAndRead:
    """Création, lecture par id et écriture."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, doctor_store):
        async with doctor_store.transaction():
            doctor_id = await doctor_store.create(make_doctor("4321", "Paulo Nunes"))

        assert doctor_id > 0
        stored = await doctor_store.get_by_id(doctor_id)
        assert stored.name == "Paulo Nunes"
        assert stored.address == make_address()

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, doctor_store):
        async with doctor_store.transaction():
            first = await doctor_store.create(make_doctor("1111", "A"))
            second = await doctor_store.create(make_doctor("2222", "B"))

        assert first != second

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, patient_store):
        with pytest.raises(NotFoundError) as exc_info:
            await patient_store.get_by_id(77)

        result = exc_info.value.to_dict()
        assert result["resource_type"] == "patient"
        assert result["resource_id"] == "77"

    @pytest.mark.asyncio
    async def test_save_persists_address_replacement(self, doctor_store, session_maker):
        async with doctor_store.transaction():
            doctor_id = await doctor_store.create(make_doctor("5555", "Lucia Prado"))

        async with doctor_store.transaction():
            record = await doctor_store.get_by_id(doctor_id)
            record.address = make_address(city="Campinas", complement="Bloco B")
            await doctor_store.save(record)

        async with session_maker() as other_session:
            reloaded = await SqlAlchemyEntityStore(other_session, Doctor).get_by_id(doctor_id)
            assert reloaded.address.city == "Campinas"
            assert reloaded.address.complement == "Bloco B"


class TestTransactions:
    """Atomicité et traduction des erreurs."""

    @pytest.mark.asyncio
    async def test_duplicate_unique_key_raises_conflict(self, doctor_store):
        async with doctor_store.transaction():
            await doctor_store.create(make_doctor("9999", "Primeiro"))

        with pytest.raises(ConflictError):
            async with doctor_store.transaction():
                await doctor_store.create(make_doctor("9999", "Segundo"))

        records, total = await doctor_store.query_active(PageRequest())
        assert total == 1
        assert records[0].name == "Primeiro"

    @pytest.mark.asyncio
    async def test_inactive_record_still_holds_unique_key(self, patient_store):
        patient = Patient(
            national_id="12345678909",
            name="Inativo",
            email="inativo@clinica.com.br",
            phone="1100000000",
            address=make_address(),
            is_active=False,
        )
        async with patient_store.transaction():
            await patient_store.create(patient)

        with pytest.raises(ConflictError):
            async with patient_store.transaction():
                await patient_store.create(
                    Patient(
                        national_id="12345678909",
                        name="Novo",
                        email="novo@clinica.com.br",
                        phone="1100000001",
                        address=make_address(),
                        is_active=True,
                    )
                )

    @pytest.mark.asyncio
    async def test_exception_inside_transaction_rolls_back(self, doctor_store):
        with pytest.raises(RuntimeError):
            async with doctor_store.transaction():
                await doctor_store.create(make_doctor("3030", "Descartado"))
                raise RuntimeError("abort")

        _, total = await doctor_store.query_active(PageRequest())
        assert total == 0

    @pytest.mark.asyncio
    async def test_store_usable_after_conflict(self, doctor_store):
        async with doctor_store.transaction():
            await doctor_store.create(make_doctor("7070", "Original"))
        with pytest.raises(ConflictError):
            async with doctor_store.transaction():
                await doctor_store.create(make_doctor("7070", "Copia"))

        async with doctor_store.transaction():
            await doctor_store.create(make_doctor("8080", "Depois"))

        _, total = await doctor_store.query_active(PageRequest())
        assert total == 2

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_store_unavailable(self):
        session = MagicMock()
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
        )
        store = SqlAlchemyEntityStore(session, Doctor)

        with pytest.raises(StoreUnavailableError):
            await store.find_one_by("registration_number", "12345")


class TestQueryActive:
    """Requête paginée des enregistrements actifs."""

    @pytest.fixture
    async def doctors(self, doctor_store):
        async with doctor_store.transaction():
            await doctor_store.create(make_doctor("1001", "Marina", Specialty.CARDIOLOGIA))
            await doctor_store.create(make_doctor("1002", "Caio", Specialty.ORTOPEDIA))
            await doctor_store.create(make_doctor("1003", "Beatriz", Specialty.CARDIOLOGIA))
            await doctor_store.create(make_doctor("1004", "Aline", is_active=False))

    @pytest.mark.asyncio
    async def test_only_active_records(self, doctor_store, doctors):
        records, total = await doctor_store.query_active(PageRequest())

        assert total == 3
        assert [record.name for record in records] == ["Beatriz", "Caio", "Marina"]

    @pytest.mark.asyncio
    async def test_descending_sort(self, doctor_store, doctors):
        records, _ = await doctor_store.query_active(
            PageRequest(sort="registration_number", direction="desc")
        )

        assert [record.registration_number for record in records] == ["1003", "1002", "1001"]

    @pytest.mark.asyncio
    async def test_page_slice_and_total(self, doctor_store, doctors):
        records, total = await doctor_store.query_active(PageRequest(page=1, size=2))

        assert total == 3
        assert [record.name for record in records] == ["Marina"]

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, doctor_store, doctors):
        records, total = await doctor_store.query_active(PageRequest(page=5, size=2))

        assert records == []
        assert total == 3

    @pytest.mark.asyncio
    async def test_equality_filters(self, doctor_store, doctors):
        records, total = await doctor_store.query_active(
            PageRequest(), filters={"specialty": Specialty.CARDIOLOGIA}
        )

        assert total == 2
        assert {record.name for record in records} == {"Beatriz", "Marina"}


class TestFindOneBy:
    """Recherche par champ unique."""

    @pytest.mark.asyncio
    async def test_find_existing_and_missing(self, doctor_store):
        async with doctor_store.transaction():
            await doctor_store.create(make_doctor("6060", "Renata"))

        found = await doctor_store.find_one_by("registration_number", "6060")
        missing = await doctor_store.find_one_by("registration_number", "0000")

        assert found.name == "Renata"
        assert missing is None
