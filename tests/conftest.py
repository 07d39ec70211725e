"""Shared pytest fixtures for salonbook tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

from salonbook.config import Settings
from salonbook.database.factories import create_sqlite_database
from salonbook.domain.customer import CustomerService
from salonbook.domain.expense import ExpenseService
from salonbook.domain.record import RecordService
from salonbook.domain.reference_data import ExpenseTypeService, ServiceCatalog, StaffService
from salonbook.domain.reports import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def record_service(temp_db):
    return RecordService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    return ExpenseService(temp_db)


@pytest.fixture
def customer_service(temp_db):
    return CustomerService(temp_db)


@pytest.fixture
def service_catalog(temp_db):
    return ServiceCatalog(temp_db)


@pytest.fixture
def staff_service(temp_db):
    return StaffService(temp_db)


@pytest.fixture
def expense_type_service(temp_db):
    return ExpenseTypeService(temp_db)


@pytest.fixture
def report_service(temp_db):
    return ReportService(temp_db)


@pytest.fixture
def sample_day():
    return date(2024, 1, 15)


@pytest.fixture
def sample_records(record_service, sample_day):
    """Two records on sample_day, one Cash and one Card."""
    return [
        record_service.create_record(
            date=sample_day,
            price=Decimal("100.00"),
            payment_type="Cash",
            customer_name="Alice",
            service="Haircut",
            staff="Barber",
        ),
        record_service.create_record(
            date=sample_day,
            price=Decimal("50.00"),
            payment_type="Card",
            customer_name="Bob",
            service="Beard",
            staff="Apprentice",
        ),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def app_settings():
    return Settings(environment="production")


@pytest.fixture
def api_client(temp_db, app_settings):
    """Create a test client for the API backed by the temporary database."""
    from fastapi.testclient import TestClient

    from salonbook.api.app import create_app

    return TestClient(create_app(db=temp_db, settings=app_settings), raise_server_exceptions=False)
