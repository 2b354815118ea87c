"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

from datetime import date
from decimal import Decimal

import pytest

from gestioncommande.database.db import Database
from gestioncommande.models import Delivery, Invoice
from gestioncommande.repositories import DeliveryRepository, InvoiceRepository
from gestioncommande.utils.config import Settings


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at an in-memory database and a temporary log directory."""
    return Settings(
        TESTING=True,
        ENVIRONMENT="test",
        DEBUG=False,
        LOG_DIR=str(tmp_path / "logs"),
        DATABASE_URL=None,
        DATABASE_URL_DEV=None,
    )


@pytest.fixture
def database(test_settings):
    """Create an open in-memory database for a test."""
    db = Database(settings=test_settings)
    db.open()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def invoice_repository(database) -> InvoiceRepository:
    return InvoiceRepository(database)


@pytest.fixture
def delivery_repository(database) -> DeliveryRepository:
    return DeliveryRepository(database)


@pytest.fixture
def make_invoice():
    """Build unsaved invoices with sensible defaults."""
    def _make(**overrides) -> Invoice:
        data = {
            "number": "FAC-0001",
            "issued_on": date(2024, 3, 1),
            "amount": Decimal("120.50"),
        }
        data.update(overrides)
        return Invoice(**data)
    return _make


@pytest.fixture
def make_delivery():
    """Build unsaved deliveries with sensible defaults."""
    def _make(**overrides) -> Delivery:
        data = {
            "delivered_on": date(2024, 3, 4),
            "address": "12 rue de la Paix, Paris",
            "status": "PENDING",
        }
        data.update(overrides)
        return Delivery(**data)
    return _make
