"""
Repository for Delivery model operations.
"""

from gestioncommande.database.db import Database
from gestioncommande.models.delivery import Delivery
from gestioncommande.repositories.base import BaseRepository


class DeliveryRepository(BaseRepository[Delivery]):
    """Repository for the Delivery entity. Uses the generic CRUD operations unchanged."""

    def __init__(self, database: Database):
        super().__init__(database, Delivery)
