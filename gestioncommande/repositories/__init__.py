"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from gestioncommande.repositories.base import BaseRepository, Page
from gestioncommande.repositories.invoice import InvoiceRepository
from gestioncommande.repositories.delivery import DeliveryRepository

__all__ = ['BaseRepository', 'Page', 'InvoiceRepository', 'DeliveryRepository']
