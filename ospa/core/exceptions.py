"""
Custom Exceptions - OSPA Scorer
ospa/core/exceptions.py

Exception classes for record store operations and the save boundary.
"""

from typing import List


class RepositoryException(Exception):
    """Base exception for record store operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Entity not found in the record store."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class StoreConnectionException(RepositoryException):
    """Record store unreachable or its contents unreadable."""

    def __init__(self, message: str = "Record store unavailable"):
        self.message = message
        super().__init__(message)


class IncompleteCandidateException(Exception):
    """Candidate is missing basic nominee information required for saving."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = missing_fields
        super().__init__(
            "Please complete the basic nominee information first: "
            + ", ".join(missing_fields)
        )
