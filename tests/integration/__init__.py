"""
Tests d'intégration pour clinic-api.

Ces tests exercent le store SQLAlchemy contre une vraie base SQLite en
mémoire (aiosqlite): contraintes UNIQUE, transactions et rollback.

Usage:
    pytest tests/integration
"""
