"""
Repository for Invoice model operations.
"""

from gestioncommande.database.db import Database
from gestioncommande.models.invoice import Invoice
from gestioncommande.repositories.base import BaseRepository


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for the Invoice entity. Uses the generic CRUD operations unchanged."""

    def __init__(self, database: Database):
        super().__init__(database, Invoice)
