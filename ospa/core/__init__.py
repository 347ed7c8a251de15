"""
Core Package - OSPA Scorer
ospa/core/__init__.py

Core infrastructure: dependencies (ospa.core.dependencies), exceptions.
"""

from ospa.core.exceptions import (
    EntityNotFoundException,
    IncompleteCandidateException,
    RepositoryException,
    StoreConnectionException,
)

__all__ = [
    "EntityNotFoundException",
    "IncompleteCandidateException",
    "RepositoryException",
    "StoreConnectionException",
]
