"""
This package contains the database models for the application.
"""

from gestioncommande.models.base import Base
from gestioncommande.models.invoice import Invoice
from gestioncommande.models.delivery import Delivery

__all__ = ['Base', 'Invoice', 'Delivery']
