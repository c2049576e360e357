"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces:
configuration, logging, the SQLAlchemy storage backend and the
in-memory storage backend.
"""
