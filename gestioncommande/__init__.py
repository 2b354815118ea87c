"""
Persistence layer for the gestion commande order-management application.
"""

__version__ = "0.1.0"
