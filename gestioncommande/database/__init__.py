"""
Database handle and URL resolution.
"""

from gestioncommande.database.db import Database, get_database_url

__all__ = ['Database', 'get_database_url']
