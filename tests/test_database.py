"""
Testes do gateway de persistência
=================================
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from src.core import models
from src.core.database import (
    RecordNotFoundError,
    SessionDatabase,
    StoreError,
    UniqueViolationError,
    classify_store_error,
)


class FakePgError(Exception):
    pgcode = "23505"


class FakePsycopg3Error(Exception):
    sqlstate = "23505"


# ═══════════════════════════════════════════════════════════
# CLASSIFICAÇÃO DE ERROS
# ═══════════════════════════════════════════════════════════

class TestClassifyStoreError:

    def test_postgres_sqlstate(self):
        exc = IntegrityError("INSERT INTO customers", {}, FakePgError("violação"))

        assert isinstance(classify_store_error(exc), UniqueViolationError)

    def test_psycopg3_sqlstate(self):
        exc = IntegrityError("INSERT INTO customers", {}, FakePsycopg3Error("violação"))

        assert isinstance(classify_store_error(exc), UniqueViolationError)

    def test_postgres_message_fallback(self):
        exc = Exception('duplicate key value violates unique constraint "idx_customers_cpf"')

        assert isinstance(classify_store_error(exc), UniqueViolationError)

    def test_sqlite_message_fallback(self):
        exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: customers.cpf"))

        assert isinstance(classify_store_error(exc), UniqueViolationError)

    def test_other_integrity_error_is_generic(self):
        exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: customers.name"))

        result = classify_store_error(exc)
        assert isinstance(result, StoreError)
        assert not isinstance(result, UniqueViolationError)

    def test_connection_error_is_generic(self):
        exc = OperationalError("SELECT 1", {}, Exception("connection refused"))

        result = classify_store_error(exc)
        assert type(result) is StoreError
        assert "connection refused" in str(result)

    def test_store_error_passes_through(self):
        original = UniqueViolationError("já classificado")

        assert classify_store_error(original) is original


# ═══════════════════════════════════════════════════════════
# SESSION DATABASE (SQLite)
# ═══════════════════════════════════════════════════════════

class TestSessionDatabase:

    def test_create_populates_generated_fields(self, test_db):
        gateway = SessionDatabase(test_db)
        record = models.Customer(name="John Doe", cpf="12345678901", email="john@email.com")

        gateway.create(record)

        assert record.id is not None and record.id > 0
        assert record.created_at is not None

    def test_create_duplicate_raises_unique_violation(self, test_db):
        gateway = SessionDatabase(test_db)
        gateway.create(models.Customer(name="A", cpf="12345678901", email="a@email.com"))

        with pytest.raises(UniqueViolationError):
            gateway.create(models.Customer(name="B", cpf="12345678901", email="b@email.com"))

    def test_session_usable_after_failed_create(self, test_db):
        gateway = SessionDatabase(test_db)
        gateway.create(models.Customer(name="A", cpf="12345678901", email="a@email.com"))

        with pytest.raises(UniqueViolationError):
            gateway.create(models.Customer(name="B", cpf="12345678901", email="b@email.com"))

        gateway.create(models.Customer(name="C", cpf="10987654321", email="c@email.com"))
        found = gateway.find_first(models.Customer, "cpf", "10987654321")
        assert found.name == "C"

    def test_find_first(self, test_db):
        gateway = SessionDatabase(test_db)
        gateway.create(models.Customer(name="John Doe", cpf="12345678901", email="john@email.com"))

        found = gateway.find_first(models.Customer, "cpf", "12345678901")

        assert found.name == "John Doe"
        assert found.email == "john@email.com"

    def test_find_first_not_found(self, test_db):
        gateway = SessionDatabase(test_db)

        with pytest.raises(RecordNotFoundError):
            gateway.find_first(models.Customer, "cpf", "00000000000")

    def test_find_first_store_failure(self):
        session = MagicMock()
        session.scalars.side_effect = OperationalError("SELECT", {}, Exception("server closed the connection"))
        gateway = SessionDatabase(session)

        with pytest.raises(StoreError):
            gateway.find_first(models.Customer, "cpf", "12345678901")

        session.rollback.assert_called_once()

    def test_create_store_failure_rolls_back(self):
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))
        gateway = SessionDatabase(session)

        with pytest.raises(StoreError):
            gateway.create(models.Customer(name="A", cpf="12345678901", email="a@email.com"))

        session.rollback.assert_called_once()
        session.refresh.assert_not_called()
