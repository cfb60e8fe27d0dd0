"""
Application services.

Exports:
  - PersistenceService: Save connection caches to the database and rebuild them
"""

from easyenv.application.services.persistence_service import PersistenceService

__all__ = ["PersistenceService"]
